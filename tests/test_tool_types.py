"""Tests for Tool and ToolParameter."""

import pytest

from qed_ssg import ErrorKind, ExecutionResult
from qed_ssg.tools import Tool, ToolParameter


class TestToolParameter:
    """Tests for ToolParameter."""

    def test_signature_fragment_required(self) -> None:
        param = ToolParameter(name="path", type="string", required=True)
        assert param.signature_fragment() == "path: str"

    def test_signature_fragment_string_default(self) -> None:
        param = ToolParameter(name="template", type="string", default="basic")
        assert param.signature_fragment() == 'template: str = "basic"'

    def test_signature_fragment_int_default(self) -> None:
        param = ToolParameter(name="port", type="integer", default=1111)
        assert param.signature_fragment() == "port: int = 1111"

    def test_signature_fragment_optional_no_default(self) -> None:
        param = ToolParameter(name="drafts", type="boolean")
        assert param.signature_fragment() == "drafts: bool | None = None"

    def test_array_schema_has_string_items(self) -> None:
        schema = ToolParameter(name="tags", type="array").schema().to_dict()
        assert schema == {"type": "array", "items": {"type": "string"}}


def _build_tool(handler=None) -> Tool:
    async def echo_handler(args: dict) -> ExecutionResult:
        return ExecutionResult.from_exit(0, repr(sorted(args.items())), "")

    return Tool(
        name="zola_build",
        description="Build the site",
        parameters=(
            ToolParameter(name="drafts", type="boolean"),
            ToolParameter(name="path", type="string", required=True),
            ToolParameter(name="port", type="integer", default=1111),
        ),
        handler=handler or echo_handler,
        tags=frozenset({"zola", "rust", "build"}),
    )


class TestTool:
    def test_input_schema(self) -> None:
        schema = _build_tool().input_schema
        assert schema["type"] == "object"
        assert schema["required"] == ["path"]
        assert schema["additionalProperties"] is False
        assert schema["properties"]["port"] == {"type": "integer", "default": 1111}

    def test_signature_required_first(self) -> None:
        assert _build_tool().signature() == (
            "zola_build(path: str, drafts: bool | None = None, port: int = 1111)"
        )

    def test_to_dict(self) -> None:
        data = _build_tool().to_dict()
        assert data["name"] == "zola_build"
        assert data["description"] == "Build the site"
        assert data["inputSchema"]["type"] == "object"
        assert data["signature"].startswith("zola_build(")

    def test_repr(self) -> None:
        assert repr(_build_tool()).endswith(": Build the site")

    @pytest.mark.asyncio
    async def test_execute_applies_defaults(self) -> None:
        result = await _build_tool().execute({"path": "site"})
        assert result.success
        assert result.stdout == "[('path', 'site'), ('port', 1111)]"

    @pytest.mark.asyncio
    async def test_execute_invalid_input_is_result(self) -> None:
        called = False

        async def handler(args: dict) -> ExecutionResult:
            nonlocal called
            called = True
            return ExecutionResult.from_exit(0, "", "")

        result = await _build_tool(handler).execute({})
        assert result.success is False
        assert result.code == 64
        assert result.error is ErrorKind.INVALID_INPUT
        assert "path" in result.stderr
        assert called is False

    @pytest.mark.asyncio
    async def test_execute_none_input(self) -> None:
        result = await _build_tool().execute(None)
        assert result.code == 64

    @pytest.mark.asyncio
    async def test_handler_result_returned_unchanged(self) -> None:
        canned = ExecutionResult.from_exit(7, "o", "e")

        async def handler(args: dict) -> ExecutionResult:
            return canned

        assert await _build_tool(handler).execute({"path": "x"}) is canned
