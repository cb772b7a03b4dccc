"""Tests for error types."""

import pytest

from qed_ssg import (
    AdapterDefinitionError,
    AdapterNotFoundError,
    ConfigurationError,
    DuplicateAdapterError,
    InvalidInputError,
    QedSSGError,
    ToolNotFoundError,
)


class TestErrorHierarchy:
    """Test that all errors inherit from QedSSGError."""

    @pytest.mark.parametrize(
        "err",
        [
            AdapterNotFoundError("zola"),
            ToolNotFoundError("zola_deploy"),
            DuplicateAdapterError("zola"),
            AdapterDefinitionError("zola", "bad"),
            InvalidInputError("zola_build", "bad"),
            ConfigurationError("bad"),
        ],
    )
    def test_inherits_base(self, err: Exception) -> None:
        assert isinstance(err, QedSSGError)
        assert isinstance(err, Exception)


class TestToolNotFoundError:
    """Tests for ToolNotFoundError."""

    def test_basic_message(self) -> None:
        err = ToolNotFoundError("zola_deploy")
        assert "zola_deploy" in str(err)
        assert err.tool_name == "zola_deploy"
        assert err.available_tools == []

    def test_with_available_tools(self) -> None:
        err = ToolNotFoundError("zola_deploy", ["zola_init", "zola_build"])
        assert "Available: zola_init, zola_build" in str(err)

    def test_truncates_long_list(self) -> None:
        tools = [f"tool{i}" for i in range(10)]
        msg = str(ToolNotFoundError("unknown", tools))
        assert "tool0" in msg
        assert "tool4" in msg
        assert "tool5" not in msg
        assert "and 5 more" in msg


class TestAdapterNotFoundError:
    def test_attributes(self) -> None:
        err = AdapterNotFoundError("hugo", ["zola", "cobalt"])
        assert err.adapter_name == "hugo"
        assert err.available_adapters == ["zola", "cobalt"]
        assert "Adapter 'hugo' not found" in str(err)


class TestDuplicateAdapterError:
    def test_plain_message(self) -> None:
        assert str(DuplicateAdapterError("zola")) == "Adapter 'zola' already registered"

    def test_with_reason(self) -> None:
        err = DuplicateAdapterError("zola", "tool names already registered: zola_build")
        assert err.reason == "tool names already registered: zola_build"
        assert "zola_build" in str(err)


class TestInvalidInputError:
    def test_attributes(self) -> None:
        err = InvalidInputError("zola_build", "required field 'path' is missing", {"x": 1})
        assert err.tool_name == "zola_build"
        assert err.reason == "required field 'path' is missing"
        assert err.tool_args == {"x": 1}
        assert str(err) == "zola_build: required field 'path' is missing"

    def test_tool_args_default_empty(self) -> None:
        assert InvalidInputError("t", "r").tool_args == {}


class TestAdapterDefinitionError:
    def test_message(self) -> None:
        err = AdapterDefinitionError("Bad", "name must match [a-z][a-z0-9-]*")
        assert err.adapter_name == "Bad"
        assert "Invalid adapter 'Bad'" in str(err)
