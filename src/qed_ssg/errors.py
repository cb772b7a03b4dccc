"""Error types for qed-ssg.

All errors inherit from QedSSGError for easy catching at framework level.

Tool execution never raises these across the adapter boundary: process
failures come back as ExecutionResult values. The exceptions here signal
caller mistakes (unknown adapter or tool names) and broken adapter
definitions.
"""

from typing import Any


class QedSSGError(Exception):
    """Base class for all qed-ssg errors."""

    pass


def _available_hint(available: list[str]) -> str:
    if not available:
        return ""
    hint = f". Available: {', '.join(available[:5])}"
    if len(available) > 5:
        hint += f" (and {len(available) - 5} more)"
    return hint


class AdapterNotFoundError(QedSSGError):
    """Raised when an adapter name is not found in the registry."""

    def __init__(self, adapter_name: str, available_adapters: list[str] | None = None) -> None:
        self.adapter_name = adapter_name
        self.available_adapters = available_adapters or []
        super().__init__(
            f"Adapter '{adapter_name}' not found" + _available_hint(self.available_adapters)
        )


class ToolNotFoundError(QedSSGError):
    """Raised when a tool name is not found on an adapter or registry."""

    def __init__(self, tool_name: str, available_tools: list[str] | None = None) -> None:
        self.tool_name = tool_name
        self.available_tools = available_tools or []
        super().__init__(f"Tool '{tool_name}' not found" + _available_hint(self.available_tools))


class DuplicateAdapterError(QedSSGError):
    """Raised when registering an adapter whose name is already taken."""

    def __init__(self, adapter_name: str, reason: str | None = None) -> None:
        self.adapter_name = adapter_name
        self.reason = reason
        message = f"Adapter '{adapter_name}' already registered"
        if reason:
            message = f"Adapter '{adapter_name}' conflicts with the registry: {reason}"
        super().__init__(message)


class AdapterDefinitionError(QedSSGError):
    """Raised when an adapter definition breaks the adapter contract."""

    def __init__(self, adapter_name: str, reason: str) -> None:
        self.adapter_name = adapter_name
        self.reason = reason
        super().__init__(f"Invalid adapter '{adapter_name}': {reason}")


class InvalidInputError(QedSSGError):
    """Raised by input validation; folded into an INVALID_INPUT result by Tool.execute."""

    def __init__(self, tool_name: str, reason: str, tool_args: dict[str, Any] | None = None) -> None:
        self.tool_name = tool_name
        self.reason = reason
        self.tool_args = tool_args or {}  # Named tool_args to avoid collision with Exception.args
        super().__init__(f"{tool_name}: {reason}")


class ConfigurationError(QedSSGError):
    """Error in configuration (invalid values, unreadable config files)."""

    pass
