"""MCP server exposing the SSG adapter registry to MCP clients.

Usage:
    # Built-in catalogue
    qed-ssg-mcp

    # Extra adapters from YAML files, custom timeouts
    qed-ssg-mcp --adapters ./adapters --config ./qed-ssg.yaml

    # Probe every toolchain at startup
    qed-ssg-mcp --connect

    # With Claude Code
    claude mcp add qed-ssg -- qed-ssg-mcp

Logs go to stderr; stdout carries the MCP stdio transport.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any

from fastmcp import FastMCP

from qed_ssg.config import QedConfig
from qed_ssg.errors import AdapterNotFoundError, QedSSGError, ToolNotFoundError
from qed_ssg.registry import AdapterRegistry

logger = logging.getLogger(__name__)

mcp = FastMCP("qed-ssg")

# Global registry - set by serve() for the lifetime of the server
_registry: AdapterRegistry | None = None

_NOT_INITIALIZED = {"error": "Registry not initialized"}


@mcp.tool
async def list_adapters() -> list[dict[str, Any]]:
    """List every SSG adapter with its language, tools and connection state."""
    if _registry is None:
        return []
    return _registry.list_adapters()


@mcp.tool
async def adapter_status(name: str, refresh: bool = True) -> dict[str, Any]:
    """Get an adapter's connection state and detected toolchain version.

    Args:
        name: Adapter name (e.g. "zola", "hakyll", "franklin")
        refresh: Probe the binary first (default: true). With false, the
            state cached by the last probe is returned.
    """
    if _registry is None:
        return dict(_NOT_INITIALIZED)
    try:
        status = await _registry.adapter_status(name, refresh=refresh)
    except AdapterNotFoundError as e:
        return {"error": str(e)}
    return {"name": name, **status.to_dict()}


@mcp.tool
async def list_tools(adapter: str | None = None) -> list[dict[str, Any]]:
    """List tools with their input schemas and signatures.

    Args:
        adapter: Only list this adapter's tools (default: all adapters)
    """
    if _registry is None:
        return []
    try:
        tools = _registry.list_tools(adapter)
    except AdapterNotFoundError:
        return []
    return [tool.to_dict() for tool in tools]


@mcp.tool
async def search_adapters(query: str, limit: int = 10) -> list[dict[str, Any]]:
    """Search adapters by name, language or description.

    Example queries: "rust", "haskell", "documentation", "blog"

    Args:
        query: Text to look for
        limit: Maximum number of results to return (default: 10)
    """
    if _registry is None:
        return []
    return [adapter.to_dict() for adapter in _registry.search(query, limit)]


@mcp.tool
async def call_tool(tool_name: str, arguments: dict[str, Any] | None = None) -> dict[str, Any]:
    """Run one adapter tool, e.g. "zola_build" with {"path": "./site"}.

    Use list_tools to see each tool's accepted arguments.

    Args:
        tool_name: Full tool name, "<adapter>_<action>"
        arguments: Tool input record

    Returns the process result: success, stdout, stderr, code, error.
    """
    if _registry is None:
        return dict(_NOT_INITIALIZED)
    try:
        result = await _registry.call_tool(tool_name, arguments or {})
    except ToolNotFoundError as e:
        return {"error": str(e)}
    return result.to_dict()


@mcp.tool
async def batch_build(
    adapters: list[str],
    source_path: str,
    output_path: str | None = None,
) -> dict[str, dict[str, Any]]:
    """Build the same site source with several adapters concurrently.

    Args:
        adapters: Adapter names to build with
        source_path: Site source directory
        output_path: Parent output directory; each adapter writes to
            <output_path>/<adapter> when its build tool accepts one

    Returns a mapping of adapter name to its build result.
    """
    if _registry is None:
        return {}
    results = await _registry.batch_build(adapters, source_path, output_path)
    return {name: result.to_dict() for name, result in results.items()}


async def create_registry(args: argparse.Namespace) -> AdapterRegistry:
    """Create registry based on CLI args."""
    base = QedConfig.from_yaml(args.config) if args.config else None
    config = QedConfig.from_env(base)

    registry = AdapterRegistry.default(config)
    if args.adapters:
        loaded = registry.load_dir(args.adapters)
        logger.info("Loaded %d adapters from %s", loaded, args.adapters)

    if args.connect:
        await registry.connect_all()
    return registry


async def serve(registry: AdapterRegistry) -> None:
    """Serve ``registry`` over stdio until the client disconnects.

    Preview servers started through serve-class tools are stopped on the way out.
    """
    global _registry
    _registry = registry
    try:
        await mcp.run_async()
    finally:
        _registry = None
        await registry.aclose()


async def run_server(args: argparse.Namespace) -> None:
    await serve(await create_registry(args))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="MCP server for static site generator toolchains",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Built-in catalogue
  qed-ssg-mcp

  # Extra adapters and custom timeouts
  qed-ssg-mcp --adapters ./adapters --config ./qed-ssg.yaml

  # Add to Claude Code
  claude mcp add qed-ssg -- qed-ssg-mcp
        """,
    )
    parser.add_argument("--config", help="Path to a YAML config file (timeouts, search_path, env)")
    parser.add_argument("--adapters", help="Directory of extra adapter YAML files")
    parser.add_argument(
        "--connect",
        action="store_true",
        help="Probe every toolchain at startup",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Registry setup and the MCP server (stdio transport by default) share one event loop
    try:
        asyncio.run(run_server(args))
    except QedSSGError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
