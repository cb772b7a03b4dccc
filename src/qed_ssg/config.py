"""Runtime configuration for adapters and the process runner."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from qed_ssg.errors import ConfigurationError

_TIMEOUT_FIELDS = ("probe_timeout", "build_timeout", "default_timeout", "serve_startup_grace")

# Environment variable -> config field
_ENV_VARS = {
    "QED_SSG_PROBE_TIMEOUT": "probe_timeout",
    "QED_SSG_BUILD_TIMEOUT": "build_timeout",
    "QED_SSG_DEFAULT_TIMEOUT": "default_timeout",
    "QED_SSG_SERVE_GRACE": "serve_startup_grace",
}


@dataclass(frozen=True)
class QedConfig:
    """Configuration shared (read-only) by every adapter.

    Attributes:
        probe_timeout: Limit for the version probe run by connect() (seconds).
        build_timeout: Limit for build-class tools (seconds).
        default_timeout: Limit for every other tool (seconds).
        serve_startup_grace: How long a serve-class tool waits for its child
            to fail fast before reporting it as started (seconds).
        search_path: PATH-style string used to resolve binaries. None means
            the process environment's PATH.
        env: Extra environment variables merged into every child process.
    """

    probe_timeout: float = 30.0
    build_timeout: float = 300.0
    default_timeout: float = 60.0
    serve_startup_grace: float = 3.0
    search_path: str | None = None
    env: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate configuration values."""
        for name in _TIMEOUT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{name} must be a number, got: {value!r}")
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got: {value}")
        if not isinstance(self.env, dict):
            raise ConfigurationError(f"env must be a mapping, got: {type(self.env).__name__}")

    def timeout_for(self, kind: str) -> float:
        """Timeout for an operation kind ("build", "probe" or anything else)."""
        if kind == "build":
            return self.build_timeout
        if kind == "probe":
            return self.probe_timeout
        return self.default_timeout

    @classmethod
    def from_yaml(cls, path: Path | str) -> QedConfig:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> QedConfig:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        values = dict(data)
        if "env" in values:
            env = values["env"] or {}
            if not isinstance(env, dict):
                raise ConfigurationError("env must be a mapping")
            values["env"] = {str(k): str(v) for k, v in env.items()}
        return cls(**values)

    @classmethod
    def from_env(cls, base: QedConfig | None = None) -> QedConfig:
        """Overlay QED_SSG_* environment variables on a base configuration."""
        config = base or cls()
        overrides: dict[str, Any] = {}

        for var, name in _ENV_VARS.items():
            if raw := os.environ.get(var):
                try:
                    overrides[name] = float(raw)
                except ValueError as e:
                    raise ConfigurationError(f"{var} must be a number, got: {raw!r}") from e

        if search_path := os.environ.get("QED_SSG_PATH"):
            overrides["search_path"] = search_path

        return replace(config, **overrides) if overrides else config
