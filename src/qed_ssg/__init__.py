"""qed-ssg: static site generator toolchains behind one tool contract."""

# Core entry points
from qed_ssg.adapters import CATALOG, Adapter, AdapterSpec
from qed_ssg.config import QedConfig

# All errors (foundational)
from qed_ssg.errors import (
    AdapterDefinitionError,
    AdapterNotFoundError,
    ConfigurationError,
    DuplicateAdapterError,
    InvalidInputError,
    QedSSGError,
    ToolNotFoundError,
)
from qed_ssg.registry import AdapterRegistry
from qed_ssg.runner import ProcessRunner
from qed_ssg.tools import Tool, ToolParameter

# Core types (foundational, used everywhere)
from qed_ssg.types import (
    AdapterStatus,
    ConnectionState,
    ErrorKind,
    ExecutionResult,
    JsonSchema,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Adapter",
    "AdapterSpec",
    "AdapterRegistry",
    "CATALOG",
    "ProcessRunner",
    "QedConfig",
    "Tool",
    "ToolParameter",
    # Types
    "AdapterStatus",
    "ConnectionState",
    "ErrorKind",
    "ExecutionResult",
    "JsonSchema",
    # Errors
    "QedSSGError",
    "AdapterNotFoundError",
    "AdapterDefinitionError",
    "DuplicateAdapterError",
    "InvalidInputError",
    "ToolNotFoundError",
    "ConfigurationError",
]
