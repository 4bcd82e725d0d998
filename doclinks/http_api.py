"""HTTP API for Doc-Links: REST link checks and MCP JSON-RPC over SSE."""

import json
import logging
from typing import Any, Dict, Optional

from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import StreamingResponse
from mcp import McpError
from pydantic import BaseModel

from doclinks import __version__
from doclinks.config import get_settings
from doclinks.exceptions import NotFoundError, ValidationError
from doclinks.mcp.serializers import serialize_file_report, serialize_run_report
from doclinks.mcp.tool_handlers import call_tool_handler
from doclinks.mcp.tool_schemas import get_tool_schemas
from doclinks.services.link_service import LinkCheckService

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Doc-Links",
    description="Markdown link validation for documentation content trees",
    version=__version__,
)


class CheckRequest(BaseModel):
    """Body of a content tree check."""

    content_root: Optional[str] = None


class CheckTextRequest(BaseModel):
    """Body of an in-memory document check."""

    content: str
    source: str = "<text>"


async def handle_jsonrpc_request(request: Dict[str, Any]) -> Dict[str, Any]:
    """Handle JSON-RPC 2.0 request."""
    jsonrpc = request.get("jsonrpc", "2.0")
    request_id = request.get("id")
    method = request.get("method")
    params = request.get("params") or {}

    if method == "initialize":
        return {
            "jsonrpc": jsonrpc,
            "id": request_id,
            "result": {
                "protocolVersion": "2024-11-05",
                "capabilities": {},
                "serverInfo": {"name": "doc-links", "version": __version__},
            },
        }
    elif method == "tools/list":
        tools = [
            {
                "name": tool_def["name"],
                "description": tool_def["description"],
                "inputSchema": tool_def["inputSchema"],
            }
            for tool_def in get_tool_schemas().values()
        ]
        return {"jsonrpc": jsonrpc, "id": request_id, "result": {"tools": tools}}
    elif method == "tools/call":
        tool_name = params.get("name")
        arguments = params.get("arguments") or {}

        try:
            result = await call_tool_handler(tool_name, arguments)
        except McpError as e:
            logger.warning(f"Tool {tool_name} failed: {e.error.message}")
            return {
                "jsonrpc": jsonrpc,
                "id": request_id,
                "error": {"code": e.error.code, "message": e.error.message},
            }
        return {
            "jsonrpc": jsonrpc,
            "id": request_id,
            "result": {"content": [{"type": "text", "text": result[0].text}]},
        }
    else:
        return {
            "jsonrpc": jsonrpc,
            "id": request_id,
            "error": {"code": -32601, "message": f"Method not found: {method}"},
        }


@app.post("/mcp/sse")
async def mcp_sse_post(request: dict = Body(...)):
    """Server-Sent Events endpoint for MCP (POST)."""
    result = await handle_jsonrpc_request(request)
    sse_result = f"data: {json.dumps(result)}\n\n"
    return StreamingResponse(content=iter([sse_result]), media_type="text/event-stream")


@app.post("/check")
def check_tree(request: Optional[CheckRequest] = None):
    """Check every document under the content root and return the run report."""
    request = request or CheckRequest()
    settings = get_settings()
    if request.content_root is not None:
        settings = settings.model_copy(update={"content_root": request.content_root})
    service = LinkCheckService(settings=settings)
    try:
        run = service.check_tree()
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return serialize_run_report(run)


@app.post("/check/text")
def check_text(request: CheckTextRequest):
    """Check the links of a markdown document sent in the request body."""
    service = LinkCheckService(settings=get_settings())
    report = service.check_text(request.content, source=request.source)
    return serialize_file_report(report)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "doc-links"}


def run() -> None:
    """Console script entry point."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(app, host=settings.http_host, port=settings.http_port)


if __name__ == "__main__":
    run()
