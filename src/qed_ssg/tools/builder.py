"""Operation specs and argument-vector building.

An operation describes how one tool maps validated input onto the
command line of its adapter's binary:

- fixed leading tokens (the subcommand, e.g. ``["build"]``)
- options, in declaration order
  - boolean: flag included when true, omitted when false
  - array: flag repeated for each element
  - string/integer/number: flag followed by the value, or ``--flag=value``
    when the flag is declared ending in ``=``
- positional arguments last
- at most one parameter whose value becomes the child's working directory

The result is always a list of separate tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from qed_ssg.errors import InvalidInputError
from qed_ssg.tools.types import PARAMETER_TYPES, ToolParameter

OPERATION_KINDS = frozenset({"default", "build", "serve"})


@dataclass(frozen=True)
class ParamSpec:
    """A tool parameter plus how it binds to the command line.

    Exactly one of ``flag``, ``positional`` or ``cwd`` must be set.
    """

    name: str
    type: str = "string"
    description: str = ""
    required: bool = False
    default: Any = None
    flag: str | None = None
    positional: bool = False
    cwd: bool = False

    def binding_count(self) -> int:
        return sum((self.flag is not None, self.positional, self.cwd))

    def to_parameter(self) -> ToolParameter:
        return ToolParameter(
            name=self.name,
            type=self.type,
            required=self.required,
            default=self.default,
            description=self.description,
        )


@dataclass(frozen=True)
class OperationSpec:
    """One operation an adapter exposes as a tool.

    ``kind`` selects the timeout ("build" gets the build timeout) and the
    execution mode ("serve" starts a long-running child and reports its
    start instead of waiting for it to exit).
    """

    action: str
    description: str
    args: tuple[str, ...] = ()
    params: tuple[ParamSpec, ...] = ()
    kind: str = "default"

    def problems(self) -> list[str]:
        """Describe everything wrong with this spec (empty when valid)."""
        problems = []
        if self.kind not in OPERATION_KINDS:
            problems.append(f"operation '{self.action}' has unknown kind {self.kind!r}")

        seen: set[str] = set()
        cwd_params = 0
        for param in self.params:
            where = f"parameter '{param.name}' of '{self.action}'"
            if param.name in seen:
                problems.append(f"{where} is declared twice")
            seen.add(param.name)
            if param.type not in PARAMETER_TYPES:
                problems.append(f"{where} has unknown type {param.type!r}")
            if param.binding_count() != 1:
                problems.append(f"{where} must set exactly one of flag, positional, cwd")
            if param.cwd:
                cwd_params += 1
                if param.type != "string":
                    problems.append(f"{where} binds the working directory and must be a string")
            if param.type == "boolean" and param.flag is None:
                problems.append(f"{where} is boolean and must be bound to a flag")

        if cwd_params > 1:
            problems.append(f"operation '{self.action}' binds more than one working directory")
        return problems


@dataclass(frozen=True)
class Invocation:
    """A fully-built command: argument tokens plus working directory."""

    args: tuple[str, ...]
    cwd: str | None = None


def _token(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


class ArgumentBuilder:
    """Build argument vectors for one operation from validated input."""

    def __init__(self, tool_name: str, operation: OperationSpec) -> None:
        self.tool_name = tool_name
        self.operation = operation

    def _option(self, flag: str, value: Any) -> list[str]:
        if flag.endswith("="):
            return [f"{flag}{_token(value)}"]
        return [flag, _token(value)]

    def build(self, args: dict[str, Any]) -> Invocation:
        """Build the invocation for validated ``args``.

        Raises:
            InvalidInputError: If a positional value starts with "-" and
                could be read as an option by the target binary.
        """
        tokens = list(self.operation.args)
        positionals: list[str] = []
        cwd: str | None = None

        for param in self.operation.params:
            if param.name not in args:
                continue
            value = args[param.name]

            if param.cwd:
                cwd = value
            elif param.positional:
                values = value if param.type == "array" else [value]
                for item in values:
                    item = _token(item)
                    if item.startswith("-"):
                        raise InvalidInputError(
                            self.tool_name,
                            f"'{param.name}' must not start with '-': {item!r}",
                            args,
                        )
                    positionals.append(item)
            elif param.type == "boolean":
                if value:
                    tokens.append(param.flag)
            elif param.type == "array":
                for item in value:
                    tokens.extend(self._option(param.flag, item))
            else:
                tokens.extend(self._option(param.flag, value))

        tokens.extend(positionals)
        return Invocation(args=tuple(tokens), cwd=cwd)
