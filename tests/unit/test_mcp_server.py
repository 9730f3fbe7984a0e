# tests/unit/test_mcp_server.py
"""Unit tests for angular_guidelines/mcp_server.py — protocol handlers, HTTP auth and entry point."""

import sys
import pytest
from unittest.mock import MagicMock, patch

import mcp.types as types
from mcp.shared.exceptions import McpError
from starlette.applications import Starlette
from starlette.responses import PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

import angular_guidelines.mcp_server as mcp_module
from angular_guidelines.content.guidelines import ANGULAR_GUIDELINES


# ---------------------------------------------------------------------------
# Helper factories
# ---------------------------------------------------------------------------

def _call_tool_request(name, arguments=None):
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


def _get_prompt_request(name, arguments=None):
    return types.GetPromptRequest(
        method="prompts/get",
        params=types.GetPromptRequestParams(name=name, arguments=arguments),
    )


@pytest.fixture
def server(dispatcher):
    return mcp_module.create_server(dispatcher)


# ---------------------------------------------------------------------------
# TestRequestHandlers
# ---------------------------------------------------------------------------

class TestRequestHandlers:

    def test_initialization_options(self, server):
        """Server advertises both tools and prompts capabilities."""
        options = server.create_initialization_options()

        assert options.server_name == "angular-guidelines-server"
        assert options.server_version == "1.0.0"
        assert options.capabilities.tools is not None
        assert options.capabilities.prompts is not None

    @pytest.mark.asyncio
    async def test_list_tools(self, server):
        handler = server.request_handlers[types.ListToolsRequest]
        result = await handler(types.ListToolsRequest(method="tools/list"))

        assert isinstance(result.root, types.ListToolsResult)
        assert [t.name for t in result.root.tools] == [
            "get_angular_guidelines",
            "get_code_example",
            "validate_angular_code",
        ]

    @pytest.mark.asyncio
    async def test_call_tool_success(self, server):
        handler = server.request_handlers[types.CallToolRequest]
        result = await handler(_call_tool_request("get_angular_guidelines", {"section": "all"}))

        assert isinstance(result.root, types.CallToolResult)
        assert result.root.isError is False
        assert result.root.content[0].text == ANGULAR_GUIDELINES

    @pytest.mark.asyncio
    async def test_call_tool_without_arguments(self, server):
        """arguments 缺省时按空字典处理"""
        handler = server.request_handlers[types.CallToolRequest]
        result = await handler(_call_tool_request("get_angular_guidelines"))

        assert result.root.isError is False
        assert result.root.content[0].text == ANGULAR_GUIDELINES

    @pytest.mark.asyncio
    async def test_call_unknown_tool_returns_error_result(self, server):
        """Unknown tool never raises past the handler; it is an isError result."""
        handler = server.request_handlers[types.CallToolRequest]
        result = await handler(_call_tool_request("nope", {}))

        assert result.root.isError is True
        assert result.root.content[0].text == "Error: Unknown tool: nope"

    @pytest.mark.asyncio
    async def test_call_tool_bad_enum_value(self, server):
        handler = server.request_handlers[types.CallToolRequest]
        result = await handler(_call_tool_request("get_code_example", {"type": "bogus"}))

        assert result.root.isError is True
        assert result.root.content[0].text == "Error: No example available for type: bogus"

    @pytest.mark.asyncio
    async def test_list_prompts(self, server):
        handler = server.request_handlers[types.ListPromptsRequest]
        result = await handler(types.ListPromptsRequest(method="prompts/list"))

        assert [p.name for p in result.root.prompts] == [
            "angular_code_review",
            "create_angular_component",
        ]

    @pytest.mark.asyncio
    async def test_get_prompt(self, server):
        handler = server.request_handlers[types.GetPromptRequest]
        result = await handler(_get_prompt_request("angular_code_review", {"code": "x = 1"}))

        assert isinstance(result.root, types.GetPromptResult)
        assert result.root.messages[0].role == "user"
        assert "x = 1" in result.root.messages[0].content.text

    @pytest.mark.asyncio
    async def test_get_unknown_prompt_rejects(self, server):
        """Prompt errors are raised as JSON-RPC errors, not wrapped in content."""
        handler = server.request_handlers[types.GetPromptRequest]

        with pytest.raises(McpError) as exc_info:
            await handler(_get_prompt_request("nope", {}))

        assert exc_info.value.error.message == "Unknown prompt: nope"
        assert exc_info.value.error.code == types.INVALID_PARAMS

    @pytest.mark.asyncio
    async def test_get_prompt_missing_argument_rejects(self, server):
        handler = server.request_handlers[types.GetPromptRequest]

        with pytest.raises(McpError) as exc_info:
            await handler(_get_prompt_request("angular_code_review", {}))

        assert exc_info.value.error.message == "Missing required argument: code"


# ---------------------------------------------------------------------------
# TestBearerAuth
# ---------------------------------------------------------------------------

def _ping_app():
    app = Starlette(routes=[Route("/ping", lambda request: PlainTextResponse("pong"))])
    app.add_middleware(mcp_module.BearerAuthMiddleware)
    return app


class TestBearerAuth:

    def test_missing_token_rejected(self):
        with patch("angular_guidelines.mcp_server.settings.MCP_AUTH_TOKEN", "secret"):
            response = TestClient(_ping_app()).get("/ping")

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    def test_wrong_token_rejected(self):
        with patch("angular_guidelines.mcp_server.settings.MCP_AUTH_TOKEN", "secret"):
            response = TestClient(_ping_app()).get("/ping", headers={"Authorization": "Bearer wrong"})

        assert response.status_code == 401

    def test_valid_token_passes(self):
        with patch("angular_guidelines.mcp_server.settings.MCP_AUTH_TOKEN", "secret"):
            response = TestClient(_ping_app()).get("/ping", headers={"Authorization": "Bearer secret"})

        assert response.status_code == 200
        assert response.text == "pong"

    def test_no_token_configured_passes(self):
        with patch("angular_guidelines.mcp_server.settings.MCP_AUTH_TOKEN", None):
            response = TestClient(_ping_app()).get("/ping")

        assert response.status_code == 200

    def test_http_app_rejects_unauthenticated_mcp_request(self, server):
        """With a token configured, /mcp is guarded before reaching the session manager."""
        with patch("angular_guidelines.mcp_server.settings.MCP_AUTH_TOKEN", "secret"):
            app = mcp_module.build_http_app(server)
            response = TestClient(app).post("/mcp/", json={})

        assert response.status_code == 401

    def test_http_app_without_token_has_no_middleware(self, server):
        with patch("angular_guidelines.mcp_server.settings.MCP_AUTH_TOKEN", None):
            app = mcp_module.build_http_app(server)

        assert app.user_middleware == []


# ---------------------------------------------------------------------------
# TestMain
# ---------------------------------------------------------------------------

class TestMain:

    def test_stdio_is_default(self):
        with patch.object(sys, "argv", ["angular-guidelines-mcp"]), \
             patch("angular_guidelines.mcp_server.run_stdio", MagicMock()) as mock_run_stdio, \
             patch("angular_guidelines.mcp_server.asyncio.run") as mock_run:
            mcp_module.main()

        mock_run_stdio.assert_called_once()
        mock_run.assert_called_once_with(mock_run_stdio.return_value)

    def test_stdio_keyboard_interrupt_exits_cleanly(self):
        with patch.object(sys, "argv", ["angular-guidelines-mcp", "--transport", "stdio"]), \
             patch("angular_guidelines.mcp_server.run_stdio", MagicMock()), \
             patch("angular_guidelines.mcp_server.asyncio.run", side_effect=KeyboardInterrupt):
            mcp_module.main()

    def test_http_transport_runs_uvicorn(self):
        argv = ["angular-guidelines-mcp", "--transport", "http", "--host", "0.0.0.0", "--port", "9000"]
        with patch.object(sys, "argv", argv), \
             patch("uvicorn.run") as mock_uvicorn_run:
            mcp_module.main()

        mock_uvicorn_run.assert_called_once()
        _, kwargs = mock_uvicorn_run.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9000
