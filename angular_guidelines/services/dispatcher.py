"""
请求分发器：tools/list、tools/call、prompts/list、prompts/get 的核心实现。

与传输层无关，可以脱离 MCP 会话单独测试。错误约定：
- 工具路径：任何异常都在这里被捕获，转换为 isError=True 的结果，绝不外抛；
- 提示词路径：协议没有 isError 标志，错误直接抛给传输层，由其拒绝请求。
"""
import logging
from typing import Any, List, Mapping, Optional

from mcp.types import (
    CallToolResult,
    GetPromptResult,
    Prompt,
    PromptMessage,
    TextContent,
    Tool,
)

from angular_guidelines.content import ContentStore, default_content_store
from angular_guidelines.core.exceptions import GuidelinesError
from angular_guidelines.services.arguments import check_prompt_arguments, check_tool_arguments
from angular_guidelines.services.prompts import build_prompt_registry
from angular_guidelines.services.registry import PromptRegistry, ToolRegistry
from angular_guidelines.services.tools import build_tool_registry

logger = logging.getLogger(__name__)


def _text_result(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)


def _error_result(message: str) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )


class Dispatcher:
    """组合根持有的唯一分发器；内容仓库和注册表均只读"""

    def __init__(self, content: ContentStore, tools: ToolRegistry, prompts: PromptRegistry):
        self.content = content
        self.tools = tools
        self.prompts = prompts

    def list_tools(self) -> List[Tool]:
        return self.tools.specs()

    def list_prompts(self) -> List[Prompt]:
        return self.prompts.specs()

    def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> CallToolResult:
        arguments = arguments or {}
        try:
            capability = self.tools.resolve(name)
            check_tool_arguments(capability.spec, arguments)
            text = capability.handler(self.content, arguments)
        except GuidelinesError as e:
            logger.warning(f"[Dispatcher] 工具 {name} 调用失败: {e}")
            return _error_result(str(e))
        except Exception as e:
            logger.exception(f"[Dispatcher] 工具 {name} 执行异常: {e}")
            return _error_result(str(e))

        return _text_result(text)

    def get_prompt(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> GetPromptResult:
        """未知提示词或参数错误时抛出 GuidelinesError 子类，不做包装"""
        arguments = arguments or {}
        capability = self.prompts.resolve(name)
        check_prompt_arguments(capability.spec, arguments)
        text = capability.handler(self.content, arguments)
        return GetPromptResult(
            messages=[
                PromptMessage(role="user", content=TextContent(type="text", text=text)),
            ]
        )


def build_dispatcher(content: Optional[ContentStore] = None) -> Dispatcher:
    """组合根：构建内容仓库和两个注册表，启动时调用一次"""
    return Dispatcher(
        content=content or default_content_store(),
        tools=build_tool_registry(),
        prompts=build_prompt_registry(),
    )
