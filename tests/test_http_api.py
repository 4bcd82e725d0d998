"""Tests for the FastAPI application."""

import json

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration

from doclinks.http_api import app


@pytest.fixture
def client(site, fake_head):
    """Test client over the site checkout with probes patched."""
    return TestClient(app)


def _sse_payload(response):
    assert response.text.startswith("data: ")
    return json.loads(response.text[len("data: "):].strip())


class TestHttpApi:
    """Tests for REST and JSON-RPC endpoints."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "doc-links"}

    def test_check_default_root(self, client, write_doc):
        write_doc("docs/index.md", "[Home](/docs/index.md) [Ext](https://example.com)")
        response = client.post("/check")
        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is True
        assert body["checked_links"] == 2

    def test_check_missing_root(self, client):
        response = client.post("/check", json={"content_root": "absent"})
        assert response.status_code == 404

    def test_check_root_is_file(self, client, write_doc):
        write_doc("README.md", "")
        response = client.post("/check", json={"content_root": "README.md"})
        assert response.status_code == 400

    def test_check_text(self, client):
        response = client.post(
            "/check/text", json={"content": "[Broken](/docs/missing-page.md)", "source": "inline.md"}
        )
        body = response.json()
        assert body["path"] == "inline.md"
        assert body["valid"] is False
        assert body["links"][0]["status"] == "not-found"

    def test_jsonrpc_tools_list(self, client):
        response = client.post("/mcp/sse", json={"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
        payload = _sse_payload(response)
        names = {tool["name"] for tool in payload["result"]["tools"]}
        assert names == {"check_links", "check_file", "extract_links"}

    def test_jsonrpc_tools_call(self, client):
        response = client.post(
            "/mcp/sse",
            json={
                "jsonrpc": "2.0",
                "id": 2,
                "method": "tools/call",
                "params": {"name": "extract_links", "arguments": {"content": "[a](#a)"}},
            },
        )
        payload = _sse_payload(response)
        result = json.loads(payload["result"]["content"][0]["text"])
        assert result["count"] == 1

    def test_jsonrpc_tool_error(self, client):
        response = client.post(
            "/mcp/sse",
            json={
                "jsonrpc": "2.0",
                "id": 3,
                "method": "tools/call",
                "params": {"name": "check_file", "arguments": {}},
            },
        )
        payload = _sse_payload(response)
        assert payload["error"]["code"] == -32602

    def test_jsonrpc_unknown_method(self, client):
        response = client.post("/mcp/sse", json={"jsonrpc": "2.0", "id": 4, "method": "nope"})
        assert _sse_payload(response)["error"]["code"] == -32601
