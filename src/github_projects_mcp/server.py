"""MCP server wiring for github-projects-mcp.

Provides a server that lists the tool catalog and runs tool calls, always answering
with a single JSON text block and the protocol's isError flag on failure.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

try:
    from mcp.server import Server
    from mcp.types import CallToolResult, TextContent, Tool
except ImportError as exc:  # pragma: no cover
    raise ImportError("MCP library not installed. Install with: pip install mcp") from exc

from . import __version__
from .config import ConfigOptions
from .tools import TOOL_METADATA, ToolResponse, dispatch_tool, initialize_runtime

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)

server = Server("github-projects-mcp", version=__version__)


def build_tools() -> list[Tool]:
    return [
        Tool(name=name, description=meta["description"], inputSchema=meta["inputSchema"])
        for name, meta in TOOL_METADATA.items()
    ]


def to_call_tool_result(response: ToolResponse) -> CallToolResult:
    """Serialize a dispatch response into the MCP call-tool envelope."""
    content = TextContent(type="text", text=json.dumps(response.payload, indent=2, default=str))
    return CallToolResult(content=[content], isError=response.is_error)


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    tools = build_tools()
    logger.info("Listed %s tools", len(tools))
    return tools


# Arguments are validated by dispatch_tool so that failures carry VALIDATION_ERROR details.
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
    """Execute a tool and return an MCP-compliant result."""
    logger.info("Tool called: %s", name)
    response = await dispatch_tool(name, arguments if arguments is not None else {})
    return to_call_tool_result(response)


async def run_server(options: ConfigOptions | None = None) -> None:
    """Run the server over stdio."""
    # Fail fast on invalid/missing host configuration.
    runtime = initialize_runtime(options)
    logger.info("Using GitHub GraphQL endpoint %s", runtime.config.api_url)

    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


async def test_server() -> None:
    """Lightweight self-test: build every tool descriptor and check the catalog size."""
    tools = build_tools()
    if len(tools) != len(TOOL_METADATA):  # pragma: no cover
        raise RuntimeError("Tool catalog could not be built")
    print(f"github-projects-mcp {__version__}: {len(tools)} tools OK", file=sys.stderr)
