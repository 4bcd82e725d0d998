"""MCP tool schema definitions."""

from typing import Any


def get_tool_schemas() -> dict[str, dict[str, Any]]:
    """Get all MCP tool schemas."""
    return {
        "check_links": {
            "name": "check_links",
            "description": (
                "Check every markdown link under a documentation content root. "
                "Internal links are resolved on disk, external links are probed "
                "with a HEAD request, anchors and other targets are skipped"
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "content_root": {
                        "type": "string",
                        "description": "Directory to walk (default: configured content root)",
                    },
                },
            },
        },
        "check_file": {
            "name": "check_file",
            "description": "Check the markdown links of a single document",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "path": {"type": "string", "description": "Document path"},
                },
                "required": ["path"],
            },
        },
        "extract_links": {
            "name": "extract_links",
            "description": "List the inline [text](target) links of markdown text in order",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "content": {"type": "string", "description": "Markdown text"},
                },
                "required": ["content"],
            },
        },
    }
