"""Tool descriptor types."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from qed_ssg.errors import InvalidInputError
from qed_ssg.types import ExecutionResult, JsonSchema

logger = logging.getLogger(__name__)

ToolHandler = Callable[[dict[str, Any]], Awaitable[ExecutionResult]]

# JSON Schema type -> Python type string for signatures
_PYTHON_TYPES = {
    "string": "str",
    "boolean": "bool",
    "integer": "int",
    "number": "float",
    "array": "list[str]",
}

PARAMETER_TYPES = frozenset(_PYTHON_TYPES)


@dataclass(frozen=True)
class ToolParameter:
    """A parameter accepted by a tool.

    Represents one field of a tool's input record.
    """

    name: str
    type: str  # JSON Schema type: "string", "boolean", "integer", "number", "array"
    required: bool = False
    default: Any = None
    description: str = ""

    @property
    def python_type(self) -> str:
        return _PYTHON_TYPES.get(self.type, "str")

    def schema(self) -> JsonSchema:
        return JsonSchema(
            type=self.type,
            description=self.description or None,
            items=JsonSchema(type="string") if self.type == "array" else None,
            default=self.default,
        )

    def signature_fragment(self) -> str:
        """Generate Python signature fragment for this parameter.

        Examples:
            - Required: "path: str"
            - Optional with default: 'port: int = 1111' or 'output: str = "public"'
            - Optional no default: "drafts: bool | None = None"
        """
        if self.required:
            return f"{self.name}: {self.python_type}"

        if self.default is not None:
            if self.type == "string":
                return f'{self.name}: {self.python_type} = "{self.default}"'
            return f"{self.name}: {self.python_type} = {self.default!r}"

        return f"{self.name}: {self.python_type} | None = None"


@dataclass(frozen=True)
class Tool:
    """One invocable operation of an adapter (e.g. "zola_build").

    The handler closes over the adapter's binary and process runner. It is
    only ever called with input that passed validation.
    """

    name: str
    description: str
    parameters: tuple[ToolParameter, ...]
    handler: ToolHandler = field(repr=False, compare=False)
    tags: frozenset[str] = field(default_factory=frozenset)

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON Schema (type "object") describing accepted input fields."""
        return JsonSchema(
            type="object",
            properties={p.name: p.schema() for p in self.parameters},
            required=[p.name for p in self.parameters if p.required],
            additional_properties=False,
        ).to_dict()

    def signature(self) -> str:
        """Generate Python-style signature string.

        Returns signature with required params first, then optional.

        Example: "zola_build(path: str, drafts: bool | None = None)"
        """
        required = [p for p in self.parameters if p.required]
        optional = [p for p in self.parameters if not p.required]
        param_strs = [p.signature_fragment() for p in required + optional]
        return f"{self.name}({', '.join(param_strs)})"

    async def execute(self, input: dict[str, Any] | None = None) -> ExecutionResult:
        """Validate input and run the tool.

        Never raises for bad input or process failures; both come back as a
        failed ExecutionResult.
        """
        from qed_ssg.tools.validation import validate_input

        try:
            args = validate_input(self.name, self.parameters, input if input is not None else {})
            return await self.handler(args)
        except InvalidInputError as e:
            logger.info("Rejected input for %s: %s", self.name, e.reason)
            return ExecutionResult.invalid_input(e.reason)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
            "signature": self.signature(),
        }

    def __repr__(self) -> str:
        """Format as: signature: description"""
        return f"{self.signature()}: {self.description}"
