"""Parse adapter definitions from dicts and YAML files.

Lets deployments add toolchains without code changes:

    # adapters/hugo.yaml
    name: hugo
    display_name: Hugo
    language: Go
    description: Fast static site generator written in Go
    binary: hugo
    version_args: [version]
    operations:
      init:
        description: Create a new site
        args: [new, site]
        params:
          path: {type: string, positional: true, required: true}
      build:
        description: Build the site
        kind: build
        params:
          path: {type: string, cwd: true, required: true}
          output: {type: string, flag: --destination}

Definitions loaded this way go through the same contract checks as the
built-in catalogue when an Adapter is constructed from them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from qed_ssg.adapters.base import AdapterSpec
from qed_ssg.tools.builder import OperationSpec, ParamSpec

_PARAM_KEYS = {"type", "description", "required", "default", "flag", "positional", "cwd"}
_OPERATION_KEYS = {"description", "args", "params", "kind"}


def _tokens(value: Any, where: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, list):
        raise ValueError(f"{where} must be a list of argument tokens")
    return tuple(str(v) for v in value)


def parse_param(name: str, data: dict[str, Any] | None) -> ParamSpec:
    data = data or {}
    unknown = set(data) - _PARAM_KEYS
    if unknown:
        raise ValueError(f"Parameter '{name}' has unknown keys: {', '.join(sorted(unknown))}")
    return ParamSpec(
        name=name,
        type=data.get("type", "string"),
        description=data.get("description", ""),
        required=bool(data.get("required", False)),
        default=data.get("default"),
        flag=data.get("flag"),
        positional=bool(data.get("positional", False)),
        cwd=bool(data.get("cwd", False)),
    )


def parse_operation(action: str, data: dict[str, Any] | None) -> OperationSpec:
    data = data or {}
    unknown = set(data) - _OPERATION_KEYS
    if unknown:
        raise ValueError(f"Operation '{action}' has unknown keys: {', '.join(sorted(unknown))}")
    params = data.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"Operation '{action}' params must be a mapping")
    return OperationSpec(
        action=action,
        description=data.get("description", ""),
        args=_tokens(data.get("args"), f"Operation '{action}' args"),
        params=tuple(parse_param(name, spec) for name, spec in params.items()),
        kind=data.get("kind", "default"),
    )


def parse_adapter_dict(data: dict[str, Any]) -> AdapterSpec:
    """Parse an adapter config dict into an AdapterSpec.

    Args:
        data: Adapter configuration (same format as the YAML files).

    Returns:
        AdapterSpec. Contract checks happen when an Adapter is built from it.

    Raises:
        KeyError: If 'name' or 'binary' is missing.
        ValueError: If the structure is malformed.
    """
    name = data["name"]
    operations = data.get("operations") or {}
    if not isinstance(operations, dict) or not operations:
        raise ValueError(f"Adapter '{name}' has no operations defined")

    version_args = data.get("version_args")
    return AdapterSpec(
        name=name,
        display_name=data.get("display_name", name),
        language=data.get("language", ""),
        description=data.get("description", ""),
        binary=data["binary"],
        operations=tuple(parse_operation(action, spec) for action, spec in operations.items()),
        version_args=(
            _tokens(version_args, f"Adapter '{name}' version_args")
            if version_args is not None
            else ("--version",)
        ),
        homepage=data.get("homepage", ""),
    )


def parse_adapter_yaml(path: Path) -> AdapterSpec:
    """Parse an adapter YAML file into an AdapterSpec."""
    with open(path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping")
    return parse_adapter_dict(data)
