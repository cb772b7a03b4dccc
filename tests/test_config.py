"""Tests for QedConfig."""

from pathlib import Path

import pytest

from qed_ssg import ConfigurationError, QedConfig


class TestDefaults:
    def test_defaults(self) -> None:
        config = QedConfig()
        assert config.probe_timeout == 30.0
        assert config.build_timeout == 300.0
        assert config.default_timeout == 60.0
        assert config.serve_startup_grace == 3.0
        assert config.search_path is None
        assert config.env == {}

    def test_timeout_for(self) -> None:
        config = QedConfig(probe_timeout=1, build_timeout=2, default_timeout=3)
        assert config.timeout_for("probe") == 1
        assert config.timeout_for("build") == 2
        assert config.timeout_for("default") == 3
        assert config.timeout_for("serve") == 3


class TestValidation:
    @pytest.mark.parametrize("value", [0, -1, "10", True])
    def test_rejects_bad_timeout(self, value: object) -> None:
        with pytest.raises(ConfigurationError):
            QedConfig(build_timeout=value)  # type: ignore[arg-type]

    def test_rejects_non_mapping_env(self) -> None:
        with pytest.raises(ConfigurationError):
            QedConfig(env=["A=1"])  # type: ignore[arg-type]


class TestFromYaml:
    def test_loads_values(self, tmp_path: Path) -> None:
        path = tmp_path / "qed.yaml"
        path.write_text(
            """
build_timeout: 600
search_path: /opt/ssg/bin
env:
  ZOLA_ENV: production
  RETRIES: 3
"""
        )
        config = QedConfig.from_yaml(path)
        assert config.build_timeout == 600
        assert config.search_path == "/opt/ssg/bin"
        assert config.env == {"ZOLA_ENV": "production", "RETRIES": "3"}
        assert config.probe_timeout == 30.0

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "qed.yaml"
        path.write_text("")
        assert QedConfig.from_yaml(path) == QedConfig()

    def test_unknown_key(self, tmp_path: Path) -> None:
        path = tmp_path / "qed.yaml"
        path.write_text("build_timeot: 10\n")
        with pytest.raises(ConfigurationError, match="build_timeot"):
            QedConfig.from_yaml(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "qed.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError):
            QedConfig.from_yaml(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            QedConfig.from_yaml(tmp_path / "missing.yaml")


class TestFromEnv:
    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QED_SSG_BUILD_TIMEOUT", "42")
        monkeypatch.setenv("QED_SSG_PATH", "/tmp/bin")
        config = QedConfig.from_env()
        assert config.build_timeout == 42.0
        assert config.search_path == "/tmp/bin"

    def test_layers_on_base(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("QED_SSG_BUILD_TIMEOUT", raising=False)
        monkeypatch.setenv("QED_SSG_PROBE_TIMEOUT", "5")
        config = QedConfig.from_env(QedConfig(build_timeout=10))
        assert config.build_timeout == 10
        assert config.probe_timeout == 5

    def test_bad_number(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QED_SSG_SERVE_GRACE", "soon")
        with pytest.raises(ConfigurationError, match="QED_SSG_SERVE_GRACE"):
            QedConfig.from_env()
