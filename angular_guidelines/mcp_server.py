"""
Angular Guidelines MCP Server

向 AI 编程工具（Claude Code、Gemini CLI 等）提供 Angular / TypeScript 最佳实践指南、
代码示例和基于规则的代码检查。

使用方式:
  stdio 模式（本地 Claude Code）:
    python -m angular_guidelines.mcp_server --transport stdio

  HTTP 模式（远程 Agent）:
    python -m angular_guidelines.mcp_server --transport http --port 8808

Claude Code 配置示例:
  claude mcp add angular-guidelines -- angular-guidelines-mcp --transport stdio
"""

import asyncio
import contextlib
import logging
import sys
from typing import Optional

# MCP
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp.shared.exceptions import McpError

# Starlette
from starlette.applications import Starlette
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount

# App
from angular_guidelines.config import settings
from angular_guidelines.core.exceptions import GuidelinesError
from angular_guidelines.services.dispatcher import Dispatcher, build_dispatcher

# Logging — 必须使用 stderr，确保 stdio 模式下不污染 stdout
logging.basicConfig(
    stream=sys.stderr,
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Request handlers
# ---------------------------------------------------------------------------

def create_server(dispatcher: Optional[Dispatcher] = None) -> Server:
    """
    创建底层 MCP Server，并把四类请求直接路由到 Dispatcher。

    tools/call 的结果（包括 isError=True 的错误结果）原样返回；
    prompts/get 的错误转换为 JSON-RPC INVALID_PARAMS 错误，由会话拒绝该请求。
    """
    dispatcher = dispatcher or build_dispatcher()
    server = Server(settings.SERVER_NAME, version=settings.SERVER_VERSION)

    async def handle_list_tools(req: types.ListToolsRequest) -> types.ServerResult:
        return types.ServerResult(types.ListToolsResult(tools=dispatcher.list_tools()))

    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        return types.ServerResult(dispatcher.call_tool(req.params.name, req.params.arguments))

    async def handle_list_prompts(req: types.ListPromptsRequest) -> types.ServerResult:
        return types.ServerResult(types.ListPromptsResult(prompts=dispatcher.list_prompts()))

    async def handle_get_prompt(req: types.GetPromptRequest) -> types.ServerResult:
        try:
            result = dispatcher.get_prompt(req.params.name, req.params.arguments)
        except GuidelinesError as e:
            logger.warning(f"[MCP] prompt={req.params.name} 请求被拒绝: {e}")
            raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message=str(e))) from e
        return types.ServerResult(result)

    server.request_handlers[types.ListToolsRequest] = handle_list_tools
    server.request_handlers[types.CallToolRequest] = handle_call_tool
    server.request_handlers[types.ListPromptsRequest] = handle_list_prompts
    server.request_handlers[types.GetPromptRequest] = handle_get_prompt
    return server


# ---------------------------------------------------------------------------
# Transports
# ---------------------------------------------------------------------------

async def run_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Angular Guidelines MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


class BearerAuthMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        if settings.MCP_AUTH_TOKEN:
            auth = request.headers.get("Authorization", "")
            if not auth.startswith("Bearer ") or auth[7:] != settings.MCP_AUTH_TOKEN:
                return JSONResponse({"error": "Unauthorized"}, status_code=401)
        return await call_next(request)


def build_http_app(server: Server) -> Starlette:
    """Streamable HTTP 模式：会话管理器挂载在 /mcp，生命周期随 Starlette 应用"""
    session_manager = StreamableHTTPSessionManager(app=server)

    async def handle_mcp(scope, receive, send) -> None:
        await session_manager.handle_request(scope, receive, send)

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        async with session_manager.run():
            logger.info("[MCP] Streamable HTTP 会话管理器已启动")
            yield
        logger.info("[MCP] Streamable HTTP 会话管理器已关闭")

    starlette_app = Starlette(routes=[Mount("/mcp", app=handle_mcp)], lifespan=lifespan)
    if settings.MCP_AUTH_TOKEN:
        starlette_app.add_middleware(BearerAuthMiddleware)
    return starlette_app


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main() -> None:
    import argparse

    parser = argparse.ArgumentParser(description="Angular Guidelines MCP Server")
    parser.add_argument("--transport", choices=["stdio", "http"], default=settings.MCP_TRANSPORT)
    parser.add_argument("--port", type=int, default=settings.MCP_PORT)
    parser.add_argument("--host", default=settings.MCP_HOST)
    args = parser.parse_args()

    server = create_server()

    if args.transport == "stdio":
        try:
            asyncio.run(run_stdio(server))
        except KeyboardInterrupt:
            logger.info("[MCP] 收到中断信号，服务退出")
    else:
        import uvicorn

        logger.info(f"[MCP] 启动 HTTP 模式，监听 {args.host}:{args.port}")
        uvicorn.run(build_http_app(server), host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
