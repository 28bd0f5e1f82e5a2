"""MCP server exposing one tool per catalog document."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastmcp import FastMCP

from refdocs.service import RefDocs

logger = logging.getLogger(__name__)


def build_server(refdocs: RefDocs | None = None, name: str | None = None) -> FastMCP:
    """Create a FastMCP server with a `get_<doc>_best_practices` tool per document."""
    refdocs = refdocs or RefDocs()
    mcp = FastMCP(name=name or refdocs.config.get("server_name", "refdocs"))

    for spec in refdocs.catalog.all_specs():
        mcp.tool(name=spec.resolved_tool_name, description=spec.description or None)(
            _document_tool(refdocs, spec.name)
        )
        logger.debug("Registered tool %s for %s", spec.resolved_tool_name, spec.name)

    return mcp


def _document_tool(refdocs: RefDocs, name: str) -> Callable[[], Awaitable[str]]:
    async def get_document() -> str:
        return await refdocs.get_async(name)

    get_document.__name__ = f"get_{name}"
    return get_document


def main() -> None:
    build_server().run()


if __name__ == "__main__":
    main()
