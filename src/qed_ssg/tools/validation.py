"""Input validation for tool calls.

Runs before any argument vector is built, so rejected input never reaches
the process runner.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from qed_ssg.errors import InvalidInputError
from qed_ssg.tools.types import ToolParameter


def _type_error(param: ToolParameter, value: Any) -> str:
    return f"'{param.name}' must be of type {param.type}, got {type(value).__name__}"


def check_value(tool_name: str, param: ToolParameter, value: Any) -> None:
    """Check one value against its declared type.

    Raises:
        InvalidInputError: If the value has the wrong type or contains NUL.
    """
    kind = param.type
    if kind == "string":
        ok = isinstance(value, str)
    elif kind == "boolean":
        ok = isinstance(value, bool)
    elif kind == "integer":
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif kind == "number":
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    elif kind == "array":
        ok = isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)
    else:
        raise InvalidInputError(tool_name, f"'{param.name}' has unsupported type {kind!r}")

    if not ok:
        raise InvalidInputError(tool_name, _type_error(param, value))

    strings = value if kind == "array" else [value] if kind == "string" else []
    if any("\x00" in s for s in strings):
        raise InvalidInputError(tool_name, f"'{param.name}' contains a NUL byte")


def validate_input(
    tool_name: str,
    parameters: tuple[ToolParameter, ...],
    input: Any,
) -> dict[str, Any]:
    """Validate a tool input record and apply parameter defaults.

    Args:
        tool_name: Tool being called (for error messages).
        parameters: Declared parameters of the tool.
        input: Caller-supplied input record.

    Returns:
        A new dict with validated values plus defaults for omitted fields.
        Optional fields passed as None are treated as omitted.

    Raises:
        InvalidInputError: If input is not a mapping, has unknown fields,
            misses required fields or has values of the wrong type.
    """
    if not isinstance(input, Mapping):
        raise InvalidInputError(tool_name, f"input must be an object, got {type(input).__name__}")

    declared = {p.name: p for p in parameters}
    unknown = sorted(str(k) for k in input if k not in declared)
    if unknown:
        raise InvalidInputError(
            tool_name,
            f"unknown field(s): {', '.join(unknown)}. Accepted: {', '.join(declared) or 'none'}",
            dict(input),
        )

    validated: dict[str, Any] = {}
    for param in parameters:
        value = input.get(param.name)
        if value is None:
            if param.required:
                raise InvalidInputError(
                    tool_name, f"required field '{param.name}' is missing", dict(input)
                )
            if param.default is not None:
                validated[param.name] = param.default
            continue

        check_value(tool_name, param, value)
        validated[param.name] = list(value) if param.type == "array" else value

    return validated
