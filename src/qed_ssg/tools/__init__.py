"""qed_ssg.tools - Tool descriptors, validation and argument building."""

from qed_ssg.tools.builder import (
    ArgumentBuilder,
    Invocation,
    OperationSpec,
    ParamSpec,
)
from qed_ssg.tools.types import (
    Tool,
    ToolHandler,
    ToolParameter,
)
from qed_ssg.tools.validation import validate_input

__all__ = [
    "Tool",
    "ToolHandler",
    "ToolParameter",
    "ArgumentBuilder",
    "Invocation",
    "OperationSpec",
    "ParamSpec",
    "validate_input",
]
