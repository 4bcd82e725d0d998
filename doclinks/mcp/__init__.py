"""MCP module with tool schemas, handlers, and serializers."""

from doclinks.mcp.tool_handlers import call_tool_handler, TOOL_HANDLERS
from doclinks.mcp.tool_schemas import get_tool_schemas
from doclinks.mcp.serializers import serialize_file_report, serialize_run_report

__all__ = [
    "call_tool_handler",
    "TOOL_HANDLERS",
    "get_tool_schemas",
    "serialize_file_report",
    "serialize_run_report",
]
