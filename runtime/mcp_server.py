"""UFT MCP server: exposes the UFT tool catalog over stdio transport."""

from __future__ import annotations

import asyncio
import sys
from typing import Any

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from runtime.mcp_helpers import UftComponents, init_components

SERVER_NAME = "uft-mcp-server"
SERVER_VERSION = "1.0.0"

# ── Initialisation ────────────────────────────────────────────────────

_components: UftComponents | None = None

server = Server(SERVER_NAME, version=SERVER_VERSION)


def _get_components() -> UftComponents:
    """Return initialised components, lazily loading on first access."""
    global _components  # noqa: PLW0603
    if _components is None:
        _components = init_components()
    return _components


async def _run_tool(tool_name: str, args: dict[str, Any] | None) -> str:
    """Dispatch a single tool call and return its JSON result string."""
    return await _get_components().dispatcher.invoke(tool_name, args, transport="mcp")


# ── MCP handlers ──────────────────────────────────────────────────────


@server.list_tools()
async def list_tools() -> list[types.Tool]:
    """Advertise the catalog verbatim."""
    return [
        types.Tool(name=d.name, description=d.description, inputSchema=d.input_schema)
        for d in _get_components().dispatcher.list_tools()
    ]


# SDK-side schema validation is off: invalid arguments must reach the
# dispatcher and come back in the uniform error shape.
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
    result = await _run_tool(name, arguments)
    return [types.TextContent(type="text", text=result)]


# ── Entry point ───────────────────────────────────────────────────────


async def serve() -> None:
    """Run the server on stdin/stdout until the client disconnects."""
    _get_components()
    async with stdio_server() as (read_stream, write_stream):
        print("UFT MCP Server running on stdio", file=sys.stderr)
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def run() -> None:
    asyncio.run(serve())


if __name__ == "__main__":
    run()
