"""MCP tool handlers for executing tool operations."""

import asyncio
import json
from typing import Any, Awaitable, Callable, Optional

from mcp import McpError
from mcp.types import ErrorData, TextContent

from doclinks.config import Settings, get_settings
from doclinks.exceptions import (
    LinkCheckError,
    NotFoundError,
    ValidationError,
)
from doclinks.mcp.serializers import (
    serialize_file_report,
    serialize_link,
    serialize_run_report,
)
from doclinks.services.link.extraction import extract_links
from doclinks.services.link_service import LinkCheckService


def _require_str(arguments: dict[str, Any], name: str) -> str:
    value = arguments.get(name)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"'{name}' must be a non-empty string", name)
    return value


def _text(result: Any) -> list[TextContent]:
    return [TextContent(type="text", text=json.dumps(result, indent=2))]


async def handle_check_links(arguments: dict[str, Any], settings: Settings) -> list[TextContent]:
    """Handle check_links tool."""
    content_root = arguments.get("content_root")
    if content_root is not None:
        content_root = _require_str(arguments, "content_root")
        settings = settings.model_copy(update={"content_root": content_root})
    service = LinkCheckService(settings=settings)
    run = await asyncio.to_thread(service.check_tree)
    return _text(serialize_run_report(run))


async def handle_check_file(arguments: dict[str, Any], settings: Settings) -> list[TextContent]:
    """Handle check_file tool."""
    path = _require_str(arguments, "path")
    service = LinkCheckService(settings=settings)
    report = await asyncio.to_thread(service.check_file, path)
    return _text(serialize_file_report(report))


async def handle_extract_links(arguments: dict[str, Any], settings: Settings) -> list[TextContent]:
    """Handle extract_links tool."""
    content = arguments.get("content")
    if not isinstance(content, str):
        raise ValidationError("'content' must be a string", "content")
    links = extract_links(content)
    return _text({"links": [serialize_link(link) for link in links], "count": len(links)})


# Tool handler registry
TOOL_HANDLERS: dict[str, Callable[[dict[str, Any], Settings], Awaitable[list[TextContent]]]] = {
    "check_links": handle_check_links,
    "check_file": handle_check_file,
    "extract_links": handle_extract_links,
}


async def call_tool_handler(
    tool_name: str, arguments: dict[str, Any], settings: Optional[Settings] = None
) -> list[TextContent]:
    """
    Call the appropriate tool handler.

    Args:
        tool_name: Name of the tool to call
        arguments: Tool arguments
        settings: Settings to run with; the cached application settings by default

    Returns:
        List of TextContent with tool execution result

    Raises:
        McpError: If tool name is unknown or handler raises an error
    """
    if tool_name not in TOOL_HANDLERS:
        raise McpError(
            ErrorData(
                code=-32601,  # Method not found
                message=f"Unknown tool: {tool_name}",
            )
        )

    handler = TOOL_HANDLERS[tool_name]

    try:
        return await handler(arguments, settings or get_settings())
    except McpError:
        raise
    except ValidationError as e:
        raise McpError(
            ErrorData(
                code=-32602,  # Invalid params
                message=f"Validation error: {str(e)}",
            )
        )
    except NotFoundError as e:
        raise McpError(
            ErrorData(
                code=-32001,  # Custom error: not found
                message=str(e),
            )
        )
    except LinkCheckError as e:
        raise McpError(
            ErrorData(
                code=-32603,  # Internal error
                message=f"Link check error: {str(e)}",
            )
        )
    except Exception as e:
        raise McpError(
            ErrorData(
                code=-32603,  # Internal error
                message=f"Internal error: {str(e)}",
            )
        )
