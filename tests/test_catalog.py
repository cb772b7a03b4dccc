"""Tests for the built-in adapter catalogue."""

from collections import Counter

import pytest

from qed_ssg import CATALOG, Adapter, AdapterSpec
from qed_ssg.adapters import catalog_by_name
from tests.conftest import FakeRunner, requires_binary

ADAPTERS = [Adapter(spec, runner=FakeRunner()) for spec in CATALOG]


class TestCatalogue:
    def test_twenty_eight_adapters(self) -> None:
        assert len(CATALOG) == 28

    def test_unique_names(self) -> None:
        names = [spec.name for spec in CATALOG]
        assert len(set(names)) == len(names)
        assert set(catalog_by_name()) == set(names)

    def test_language_distribution(self) -> None:
        counts = Counter(spec.language for spec in CATALOG)
        assert counts["Rust"] == 3
        assert counts["Haskell"] == 2
        assert counts["Elixir"] == 3
        assert counts["Clojure"] == 3
        assert counts["Julia"] == 3
        assert counts["Scala"] == 2
        assert counts["Racket"] == 2
        others = {lang: n for lang, n in counts.items() if lang not in {
            "Rust", "Haskell", "Elixir", "Clojure", "Julia", "Scala", "Racket"
        }}
        assert len(others) == 10
        assert set(others.values()) == {1}

    def test_unique_tool_names_across_catalogue(self) -> None:
        names = [name for adapter in ADAPTERS for name in adapter.tool_names]
        assert len(set(names)) == len(names)


@pytest.mark.parametrize("spec", CATALOG, ids=lambda s: s.name)
class TestEveryAdapter:
    def test_satisfies_contract(self, spec: AdapterSpec) -> None:
        assert spec.problems() == []

    def test_tools(self, spec: AdapterSpec) -> None:
        adapter = Adapter(spec, runner=FakeRunner())
        assert len(adapter.tools) >= 4
        assert all(name.startswith(f"{spec.name}_") for name in adapter.tool_names)
        for required in ("init", "build", "version"):
            assert any(required in name for name in adapter.tool_names)

    def test_metadata(self, spec: AdapterSpec) -> None:
        assert spec.display_name
        assert spec.description
        assert spec.binary
        assert spec.homepage.startswith("https://")

    def test_schemas_are_objects(self, spec: AdapterSpec) -> None:
        for tool in Adapter(spec, runner=FakeRunner()).tools:
            schema = tool.input_schema
            assert schema["type"] == "object"
            assert schema["additionalProperties"] is False

    @pytest.mark.asyncio
    async def test_build_accepts_batch_input(self, spec: AdapterSpec) -> None:
        runner = FakeRunner()
        tool = Adapter(spec, runner=runner).get_tool(f"{spec.name}_build")
        accepted = {p.name for p in tool.parameters}
        build_input = {k: v for k, v in {"path": "site", "output": "out"}.items() if k in accepted}
        result = await tool.execute(build_input)
        assert result.success
        assert runner.last.binary == spec.binary


class TestZolaScenarios:
    @pytest.mark.asyncio
    async def test_build_invocation(self) -> None:
        runner = FakeRunner()
        adapter = Adapter(catalog_by_name()["zola"], runner=runner)
        await adapter.get_tool("zola_build").execute(
            {"path": "/srv/blog", "output": "/tmp/out", "drafts": True}
        )
        assert runner.last.args == ("build", "--output-dir", "/tmp/out", "--drafts")
        assert runner.last.cwd == "/srv/blog"

    @pytest.mark.asyncio
    async def test_init_rejects_option_injection(self) -> None:
        runner = FakeRunner()
        adapter = Adapter(catalog_by_name()["zola"], runner=runner)
        result = await adapter.get_tool("zola_init").execute({"path": "--help"})
        assert result.code == 64
        assert runner.calls == []

    @pytest.mark.asyncio
    async def test_julia_input_goes_through_args(self) -> None:
        runner = FakeRunner()
        adapter = Adapter(catalog_by_name()["franklin"], runner=runner)
        await adapter.get_tool("franklin_init").execute({"path": 'x"); run(`id`); ("'})
        args = runner.last.args
        assert args[:2] == ("-e", "using Franklin; newsite(ARGS[1]; template=ARGS[2])")
        assert args[2:] == ('x"); run(`id`); ("', "basic")

    @requires_binary("zola")
    @pytest.mark.asyncio
    async def test_version_real(self) -> None:
        result = await Adapter(catalog_by_name()["zola"]).get_tool("zola_version").execute({})
        assert result.success is True
        assert result.stdout.startswith("zola")

    @pytest.mark.asyncio
    async def test_version_well_shaped(self) -> None:
        result = await Adapter(catalog_by_name()["zola"]).get_tool("zola_version").execute({})
        assert isinstance(result.success, bool)
        assert isinstance(result.stdout, str)
        assert isinstance(result.stderr, str)
        assert result.success == (result.code == 0)

    @pytest.mark.asyncio
    async def test_build_nonexistent_path_fails(self) -> None:
        result = await Adapter(catalog_by_name()["zola"]).get_tool("zola_build").execute(
            {"path": "/nonexistent/path/12345"}
        )
        assert result.success is False
