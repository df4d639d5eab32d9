#!/usr/bin/env python3
"""
MCP Server Entrypoint (stdio)

Exposes all registered registry tools over the Model Context Protocol.
Tools are automatically discovered via registry.py
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from . import __version__
from .registry import execute_tool, get_all_tools

logger = logging.getLogger(__name__)

server = Server("nip-checker", version=__version__)


@server.list_tools()
async def list_tools() -> List[Tool]:
    """List registry tools with their JSON input schemas."""
    return [
        Tool(
            name=name,
            description=definition.description,
            inputSchema=definition.input_schema()
        )
        for name, definition in get_all_tools().items()
    ]


# Arguments are validated by the tools themselves so callers get their messages
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
    """
    Handle tool calls.
    UnknownToolError propagates; the SDK reports it as an error result.
    """
    result = await execute_tool(name, **(arguments or {}))

    if result["success"]:
        return CallToolResult(
            content=[TextContent(type="text", text=result["result"])]
        )

    return CallToolResult(
        content=[TextContent(type="text", text=result["error"])],
        isError=True
    )


async def main():
    """Run the MCP server."""
    tools = get_all_tools()
    logger.info(f"NIP Checker MCP server starting with {len(tools)} tools")

    async with stdio_server() as (read_stream, write_stream):
        logger.info("NIP Checker MCP server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


if __name__ == "__main__":
    from .config import configure_logging

    configure_logging()
    asyncio.run(main())
