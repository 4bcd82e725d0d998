"""MCP (Model Context Protocol) server for Doc-Links.

This server exposes the link checker to AI agents via the Model Context Protocol.
It uses the standardized mcp library for JSON-RPC 2.0 communication over stdio.
"""

import asyncio
import logging

from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server
from mcp import McpError
from mcp.types import ErrorData, TextContent, Tool

from doclinks import __version__
from doclinks.config import get_settings
from doclinks.mcp.tool_handlers import call_tool_handler
from doclinks.mcp.tool_schemas import get_tool_schemas

logger = logging.getLogger(__name__)

SERVER_NAME = "doc-links"

# Initialize MCP server
app = Server(SERVER_NAME)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List all available MCP tools."""
    return [Tool(**schema) for schema in get_tool_schemas().values()]


@app.call_tool()
async def call_tool(name: str, arguments: dict | None) -> list[TextContent]:
    """Handle tool calls."""
    if arguments is None:
        arguments = {}

    try:
        return await call_tool_handler(name, arguments, get_settings())
    except McpError:
        # Handlers already convert domain exceptions to McpError
        raise
    except Exception as e:
        logger.exception(f"Unexpected error handling tool {name}")
        raise McpError(
            ErrorData(
                code=-32603,  # Internal error
                message=f"Internal error: {str(e)}",
            )
        )


async def main():
    """Main entry point for MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await app.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=SERVER_NAME,
                server_version=__version__,
                capabilities=app.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def run() -> None:
    """Console script entry point."""
    logging.basicConfig(level=get_settings().log_level)
    asyncio.run(main())


if __name__ == "__main__":
    run()
