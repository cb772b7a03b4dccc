"""Adapter registry: discovery, dispatch and batch operations."""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

import yaml

from qed_ssg.adapters.base import Adapter, AdapterSpec
from qed_ssg.adapters.catalog import CATALOG
from qed_ssg.adapters.schema import parse_adapter_yaml
from qed_ssg.config import QedConfig
from qed_ssg.errors import (
    AdapterDefinitionError,
    AdapterNotFoundError,
    DuplicateAdapterError,
    ToolNotFoundError,
)
from qed_ssg.tools.types import Tool
from qed_ssg.types import AdapterStatus, ExecutionResult

logger = logging.getLogger(__name__)

# Adapter search scoring
EXACT_NAME_MATCH_SCORE = 100
LANGUAGE_MATCH_SCORE = 75
PARTIAL_NAME_MATCH_SCORE = 50
DESCRIPTION_MATCH_SCORE = 25


def search_score(adapter: Adapter, query: str) -> int:
    """Relevance of ``adapter`` for a case-insensitive ``query``; 0 means no match.

    A query naming an ecosystem ("rust", "haskell") scores every adapter of
    that language above adapters that merely mention it in their description.
    The display name counts as a name, so "mdbook" finds mdBook.
    """
    query_lower = query.strip().lower()
    if not query_lower:
        return 0

    names = {adapter.name.lower(), adapter.display_name.lower()}
    if query_lower in names:
        score = EXACT_NAME_MATCH_SCORE
    elif any(query_lower in name for name in names):
        score = PARTIAL_NAME_MATCH_SCORE
    else:
        score = 0

    if adapter.language.lower() == query_lower:
        score += LANGUAGE_MATCH_SCORE
    if query_lower in adapter.description.lower():
        score += DESCRIPTION_MATCH_SCORE
    return score


class AdapterRegistry:
    """Registry of SSG adapters with flat tool namespace.

    Tool names are globally unique because each is prefixed with its
    adapter's name.

    Usage:
        registry = AdapterRegistry.default()
        await registry.connect_all()

        result = await registry.call_tool("zola_build", {"path": "./site"})
        results = await registry.batch_build(["zola", "cobalt"], "./site", "./out")

        await registry.aclose()
    """

    def __init__(self, config: QedConfig | None = None) -> None:
        self._config = config or QedConfig()
        self._adapters: dict[str, Adapter] = {}
        self._tool_to_adapter: dict[str, Adapter] = {}

    @classmethod
    def default(cls, config: QedConfig | None = None) -> AdapterRegistry:
        """Create a registry holding every adapter of the built-in catalogue."""
        registry = cls(config)
        for spec in CATALOG:
            registry.register_spec(spec)
        return registry

    @classmethod
    def from_dir(cls, path: str | Path, config: QedConfig | None = None) -> AdapterRegistry:
        """Create a registry from a directory of adapter YAML files.

        Example:
            registry = AdapterRegistry.from_dir("./adapters/")
        """
        registry = cls(config)
        registry.load_dir(path)
        return registry

    @property
    def config(self) -> QedConfig:
        return self._config

    def register(self, adapter: Adapter) -> None:
        """Register an adapter and index its tools.

        Raises:
            DuplicateAdapterError: If an adapter with the same name, or a tool
                with the same name, is already registered.
        """
        if adapter.name in self._adapters:
            raise DuplicateAdapterError(adapter.name)
        clashes = [name for name in adapter.tool_names if name in self._tool_to_adapter]
        if clashes:
            raise DuplicateAdapterError(adapter.name, f"tool names already registered: {', '.join(clashes)}")

        self._adapters[adapter.name] = adapter
        for tool in adapter.tools:
            self._tool_to_adapter[tool.name] = adapter
        logger.debug("Registered adapter %s (%d tools)", adapter.name, len(adapter.tools))

    def register_spec(self, spec: AdapterSpec) -> Adapter:
        """Build an adapter from ``spec`` with its own runner and register it."""
        adapter = Adapter(spec, config=self._config)
        self.register(adapter)
        return adapter

    def load_dir(self, path: str | Path) -> int:
        """Register every valid adapter YAML file in ``path``.

        Broken files are logged and skipped.

        Returns:
            Number of adapters registered.
        """
        adapters_path = Path(path)
        if not adapters_path.is_dir():
            logger.warning("Adapters path does not exist: %s", adapters_path)
            return 0

        loaded = 0
        for adapter_file in sorted(adapters_path.glob("*.yaml")):
            try:
                spec = parse_adapter_yaml(adapter_file)
                self.register_spec(spec)
            except (OSError, yaml.YAMLError, KeyError, ValueError) as e:
                logger.warning("Failed to load adapter file %s: %s", adapter_file, e)
                continue
            except (AdapterDefinitionError, DuplicateAdapterError) as e:
                logger.warning("Skipping adapter file %s: %s", adapter_file, e)
                continue
            loaded += 1
        return loaded

    def get(self, name: str) -> Adapter:
        """Get an adapter by name.

        Raises:
            AdapterNotFoundError: If no adapter has that name.
        """
        try:
            return self._adapters[name]
        except KeyError:
            raise AdapterNotFoundError(name, self.names()) from None

    def names(self) -> list[str]:
        return list(self._adapters)

    def __iter__(self) -> Iterator[Adapter]:
        return iter(list(self._adapters.values()))

    def __len__(self) -> int:
        return len(self._adapters)

    def __contains__(self, name: object) -> bool:
        return name in self._adapters

    # -------------------------------------------------------------------------
    # Discovery
    # -------------------------------------------------------------------------

    def list_adapters(self) -> list[dict[str, Any]]:
        """Metadata for every registered adapter, in registration order."""
        return [adapter.to_dict() for adapter in self._adapters.values()]

    def list_tools(self, adapter_name: str | None = None) -> list[Tool]:
        if adapter_name is not None:
            return list(self.get(adapter_name).tools)
        return [tool for adapter in self._adapters.values() for tool in adapter.tools]

    def tool_count(self) -> int:
        return len(self._tool_to_adapter)

    def language_distribution(self) -> dict[str, int]:
        """Number of adapters per implementation language."""
        return dict(Counter(adapter.language for adapter in self._adapters.values()))

    def search(self, query: str, limit: int = 10) -> list[Adapter]:
        """Find adapters by name, language or description, best match first.

        Ties keep registration order.
        """
        scored = [(search_score(adapter, query), adapter) for adapter in self._adapters.values()]
        matches = [(score, adapter) for score, adapter in scored if score > 0]
        matches.sort(key=lambda x: x[0], reverse=True)
        return [adapter for _, adapter in matches[:limit]]

    def find_tool(self, tool_name: str) -> Tool:
        """Get a tool by its full name.

        Raises:
            ToolNotFoundError: If no registered adapter has that tool.
        """
        adapter = self._tool_to_adapter.get(tool_name)
        if adapter is None:
            raise ToolNotFoundError(tool_name, list(self._tool_to_adapter))
        return adapter.get_tool(tool_name)

    async def call_tool(self, tool_name: str, input: dict[str, Any] | None = None) -> ExecutionResult:
        """Execute a tool by its full name.

        Raises:
            ToolNotFoundError: If no registered adapter has that tool.
        """
        return await self.find_tool(tool_name).execute(input)

    # -------------------------------------------------------------------------
    # Connection
    # -------------------------------------------------------------------------

    async def adapter_status(self, name: str, refresh: bool = True) -> AdapterStatus:
        """Current status of one adapter, probing the binary first by default.

        Raises:
            AdapterNotFoundError: If no adapter has that name.
        """
        adapter = self.get(name)
        if refresh:
            await adapter.connect()
        return adapter.status

    async def connect_all(self) -> dict[str, bool]:
        """Probe every adapter concurrently."""
        adapters = list(self._adapters.values())
        results = await asyncio.gather(*(adapter.connect() for adapter in adapters))
        connected = {adapter.name: ok for adapter, ok in zip(adapters, results, strict=True)}
        logger.info(
            "Connected %d of %d adapters",
            sum(connected.values()),
            len(connected),
        )
        return connected

    async def disconnect_all(self) -> None:
        await asyncio.gather(*(adapter.disconnect() for adapter in self._adapters.values()))

    # -------------------------------------------------------------------------
    # Batch operations
    # -------------------------------------------------------------------------

    def _build_input(self, tool: Tool, name: str, source_path: Path, output_path: Path | None) -> dict[str, Any]:
        accepted = {p.name for p in tool.parameters}
        build_input: dict[str, Any] = {}
        if "path" in accepted:
            build_input["path"] = str(source_path)
        if output_path is not None and "output" in accepted:
            build_input["output"] = str(output_path / name)
        return build_input

    async def _build_one(self, name: str, source_path: Path, output_path: Path | None) -> ExecutionResult:
        adapter = self._adapters.get(name)
        if adapter is None:
            return ExecutionResult.invalid_input(f"Unknown adapter: {name}")
        try:
            tool = adapter.get_tool(f"{name}_build")
        except ToolNotFoundError:
            return ExecutionResult.invalid_input(f"Adapter {name} has no build tool")
        return await tool.execute(self._build_input(tool, name, source_path, output_path))

    async def batch_build(
        self,
        names: Iterable[str],
        source_path: str,
        output_path: str | None = None,
    ) -> dict[str, ExecutionResult]:
        """Build one source tree with several adapters concurrently.

        Both paths are made absolute against the current directory first,
        since build tools run with the source tree as their working directory.

        Args:
            names: Adapter names. Unknown names yield an invalid-input result.
            source_path: Site source handed to each build tool's ``path``.
            output_path: When given, each adapter whose build tool accepts an
                output directory writes to ``<output_path>/<name>``.

        Returns:
            Mapping of adapter name to its build result.
        """
        unique = list(dict.fromkeys(names))
        source = Path(source_path).resolve()
        output = Path(output_path).resolve() if output_path is not None else None
        results = await asyncio.gather(*(self._build_one(name, source, output) for name in unique))
        failed = [name for name, result in zip(unique, results, strict=True) if not result.success]
        if failed:
            logger.warning("Batch build failed for: %s", ", ".join(failed))
        return dict(zip(unique, results, strict=True))

    async def aclose(self) -> None:
        """Disconnect all adapters and stop any servers they started."""
        for adapter in reversed(list(self._adapters.values())):
            await adapter.aclose()
