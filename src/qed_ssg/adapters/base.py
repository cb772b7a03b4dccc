"""Adapter: one external SSG toolchain behind the uniform tool contract.

Every adapter is an instance of the same class, parameterized by an
AdapterSpec (binary name, language tag, operations). The spec is checked
against the adapter contract at construction time:

- name is lowercase, ``[a-z][a-z0-9-]*``
- every tool is named ``<adapter>_<action>``
- at least four tools, including init-, build- and version-class tools

Usage:
    adapter = Adapter(ZOLA)
    if await adapter.connect():
        print(adapter.version)
    result = await adapter.get_tool("zola_build").execute({"path": "./site"})
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from qed_ssg.config import QedConfig
from qed_ssg.errors import AdapterDefinitionError, ToolNotFoundError
from qed_ssg.runner import ProcessRunner
from qed_ssg.tools.builder import ArgumentBuilder, OperationSpec
from qed_ssg.tools.types import Tool
from qed_ssg.types import AdapterStatus, ConnectionState, ExecutionResult

logger = logging.getLogger(__name__)

ADAPTER_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9-]*$")
ACTION_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")
REQUIRED_TOOL_CLASSES = ("init", "build", "version")
MIN_TOOLS = 4


@dataclass(frozen=True)
class AdapterSpec:
    """Static description of one SSG toolchain binding."""

    name: str
    display_name: str
    language: str
    description: str
    binary: str
    operations: tuple[OperationSpec, ...]
    version_args: tuple[str, ...] = ("--version",)
    homepage: str = ""

    def all_operations(self) -> tuple[OperationSpec, ...]:
        """Declared operations, plus a version operation if none is declared."""
        if any(op.action == "version" for op in self.operations):
            return self.operations
        version = OperationSpec(
            action="version",
            description=f"Show the installed {self.display_name} version",
            args=self.version_args,
        )
        return (*self.operations, version)

    def problems(self) -> list[str]:
        """Describe every way this spec breaks the adapter contract."""
        problems = []
        if not ADAPTER_NAME_PATTERN.match(self.name):
            problems.append("name must match [a-z][a-z0-9-]*")
        if not self.binary or self.binary != self.binary.strip():
            problems.append("binary must be a non-empty executable name")
        if not self.language:
            problems.append("language must not be empty")

        operations = self.all_operations()
        actions = [op.action for op in operations]
        for action in actions:
            if not ACTION_PATTERN.match(action):
                problems.append(f"action {action!r} must match [a-z][a-z0-9_]*")
        duplicates = sorted({a for a in actions if actions.count(a) > 1})
        if duplicates:
            problems.append(f"duplicate actions: {', '.join(duplicates)}")

        if len(operations) < MIN_TOOLS:
            problems.append(f"needs at least {MIN_TOOLS} tools, has {len(operations)}")
        for required in REQUIRED_TOOL_CLASSES:
            if not any(required in action for action in actions):
                problems.append(f"missing a '{required}' tool")

        for op in operations:
            problems.extend(op.problems())
        return problems


def _first_line(text: str) -> str | None:
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return None


class Adapter:
    """A named binding exposing one SSG toolchain's operations as tools.

    Connection is advisory. connect() probes the binary and caches its
    version; tools can be executed whether or not the adapter is connected,
    since every tool call is an independent process.
    """

    def __init__(
        self,
        spec: AdapterSpec,
        *,
        config: QedConfig | None = None,
        runner: ProcessRunner | None = None,
    ) -> None:
        problems = spec.problems()
        if problems:
            raise AdapterDefinitionError(spec.name, "; ".join(problems))

        self._spec = spec
        self._runner = runner or ProcessRunner(config)
        self._status = AdapterStatus()
        self._tools = tuple(self._make_tool(op) for op in spec.all_operations())
        self._tool_index = {tool.name: tool for tool in self._tools}

    @property
    def spec(self) -> AdapterSpec:
        return self._spec

    @property
    def name(self) -> str:
        return self._spec.name

    @property
    def display_name(self) -> str:
        return self._spec.display_name

    @property
    def language(self) -> str:
        return self._spec.language

    @property
    def description(self) -> str:
        return self._spec.description

    @property
    def binary(self) -> str:
        return self._spec.binary

    @property
    def tools(self) -> tuple[Tool, ...]:
        return self._tools

    @property
    def tool_names(self) -> list[str]:
        return [tool.name for tool in self._tools]

    @property
    def status(self) -> AdapterStatus:
        return self._status

    @property
    def version(self) -> str | None:
        """Version line cached by the last successful connect()."""
        return self._status.version

    def get_tool(self, name: str) -> Tool:
        """Get a tool by exact name.

        Raises:
            ToolNotFoundError: If this adapter has no such tool.
        """
        try:
            return self._tool_index[name]
        except KeyError:
            raise ToolNotFoundError(name, self.tool_names) from None

    def _make_tool(self, operation: OperationSpec) -> Tool:
        tool_name = f"{self.name}_{operation.action}"
        builder = ArgumentBuilder(tool_name, operation)
        binary = self.binary
        runner = self._runner

        async def handler(args: dict[str, Any]) -> ExecutionResult:
            invocation = builder.build(args)
            if operation.kind == "serve":
                return await runner.start(binary, invocation.args, cwd=invocation.cwd)
            return await runner.run(
                binary,
                invocation.args,
                timeout=runner.config.timeout_for(operation.kind),
                cwd=invocation.cwd,
            )

        return Tool(
            name=tool_name,
            description=operation.description,
            parameters=tuple(p.to_parameter() for p in operation.params),
            handler=handler,
            tags=frozenset({self.name, self.language.lower(), operation.kind}),
        )

    async def connect(self) -> bool:
        """Probe the binary and record whether it is usable.

        Returns:
            True if the version probe exited zero, False otherwise. Never
            raises for a missing binary, a failing probe or a timeout.
        """
        result = await self._runner.run(
            self.binary,
            self._spec.version_args,
            timeout=self._runner.config.probe_timeout,
        )
        if result.success:
            version = _first_line(result.stdout) or _first_line(result.stderr)
            self._status = AdapterStatus(ConnectionState.CONNECTED, version)
            logger.info("Connected to %s (%s)", self.name, version or "unknown version")
            return True

        self._status = AdapterStatus()
        logger.warning(
            "Cannot connect to %s: %s",
            self.name,
            _first_line(result.stderr) or f"exit code {result.code}",
        )
        return False

    async def disconnect(self) -> None:
        """Mark the adapter disconnected. Idempotent."""
        self._status = AdapterStatus()

    def is_connected(self) -> bool:
        return self._status.connected

    async def aclose(self) -> None:
        """Disconnect and stop any preview servers this adapter started."""
        await self.disconnect()
        await self._runner.aclose()

    def to_dict(self) -> dict[str, Any]:
        """Metadata for discovery listings."""
        return {
            "name": self.name,
            "display_name": self.display_name,
            "language": self.language,
            "description": self.description,
            "binary": self.binary,
            "homepage": self._spec.homepage,
            "tools": self.tool_names,
            "connected": self.is_connected(),
            "version": self.version,
        }

    def __repr__(self) -> str:
        return f"Adapter({self.name!r}, language={self.language!r}, tools={len(self._tools)})"
