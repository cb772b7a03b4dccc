"""Core type definitions for qed-ssg."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Reserved exit codes for failures that never reached a running process.
NOT_FOUND_EXIT_CODE = 127
TIMEOUT_EXIT_CODE = 124
INVALID_INPUT_EXIT_CODE = 64


class ErrorKind(str, Enum):
    """Classification of a failed ExecutionResult."""

    BINARY_NOT_FOUND = "binary_not_found"
    EXECUTION_FAILED = "execution_failed"
    TIMEOUT = "timeout"
    INVALID_INPUT = "invalid_input"


class ConnectionState(str, Enum):
    """Connection state of an adapter."""

    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


@dataclass(frozen=True)
class JsonSchema:
    """JSON Schema representation for tool input schemas.

    Simplified subset of JSON Schema sufficient for tool definitions.
    """

    type: str = "object"
    description: str | None = None
    properties: dict[str, JsonSchema] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    items: JsonSchema | None = None  # For array types
    default: Any = None
    additional_properties: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON Schema dict representation."""
        result: dict[str, Any] = {"type": self.type}

        if self.description:
            result["description"] = self.description

        # Object schemas always carry properties, even when empty
        if self.type == "object":
            result["properties"] = {k: v.to_dict() for k, v in self.properties.items()}

        if self.required:
            result["required"] = list(self.required)

        if self.items:
            result["items"] = self.items.to_dict()

        if self.default is not None:
            result["default"] = self.default

        if self.additional_properties is not True:
            result["additionalProperties"] = self.additional_properties

        return result


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of one external process invocation.

    Failures are values, not exceptions: a missing binary, a non-zero exit,
    a timeout and rejected input all come back as an ExecutionResult with
    ``success`` False and a classifying ``error``.
    """

    success: bool
    stdout: str
    stderr: str
    code: int
    error: ErrorKind | None = None
    duration_ms: float | None = None

    @property
    def is_ok(self) -> bool:
        """True if the process ran and exited zero."""
        return self.success

    @classmethod
    def from_exit(
        cls,
        code: int,
        stdout: str,
        stderr: str,
        duration_ms: float | None = None,
    ) -> ExecutionResult:
        """Build a result from a finished process."""
        success = code == 0
        return cls(
            success=success,
            stdout=stdout,
            stderr=stderr,
            code=code,
            error=None if success else ErrorKind.EXECUTION_FAILED,
            duration_ms=duration_ms,
        )

    @classmethod
    def binary_not_found(cls, binary: str, detail: str | None = None) -> ExecutionResult:
        stderr = f"Command not found: {binary}"
        if detail:
            stderr = f"Failed to start {binary}: {detail}"
        return cls(
            success=False,
            stdout="",
            stderr=stderr,
            code=NOT_FOUND_EXIT_CODE,
            error=ErrorKind.BINARY_NOT_FOUND,
        )

    @classmethod
    def timed_out(
        cls,
        binary: str,
        timeout: float,
        duration_ms: float | None = None,
    ) -> ExecutionResult:
        return cls(
            success=False,
            stdout="",
            stderr=f"Timed out after {timeout:g}s: {binary}",
            code=TIMEOUT_EXIT_CODE,
            error=ErrorKind.TIMEOUT,
            duration_ms=duration_ms,
        )

    @classmethod
    def invalid_input(cls, message: str) -> ExecutionResult:
        return cls(
            success=False,
            stdout="",
            stderr=f"Invalid input: {message}",
            code=INVALID_INPUT_EXIT_CODE,
            error=ErrorKind.INVALID_INPUT,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for transport (MCP responses, JSON output)."""
        return {
            "success": self.success,
            "stdout": self.stdout,
            "stderr": self.stderr,
            "code": self.code,
            "error": self.error.value if self.error else None,
            "duration_ms": self.duration_ms,
        }


@dataclass(frozen=True)
class AdapterStatus:
    """Snapshot of an adapter's connection state and cached tool version.

    Replaced as a whole on every transition so readers never observe a
    state without its matching version.
    """

    state: ConnectionState = ConnectionState.DISCONNECTED
    version: str | None = None

    @property
    def connected(self) -> bool:
        return self.state is ConnectionState.CONNECTED

    def to_dict(self) -> dict[str, Any]:
        return {"state": self.state.value, "connected": self.connected, "version": self.version}
