"""
分发前的参数检查：必填参数是否存在、字符串参数是否为 str。

枚举范围不在这里检查，由各处理函数按自身语义决定（回退或报错）。
"""
from typing import Any, Mapping

from mcp.types import Prompt, Tool

from angular_guidelines.core.exceptions import InvalidArgumentError


def check_tool_arguments(tool: Tool, arguments: Mapping[str, Any]) -> None:
    schema = tool.inputSchema or {}
    properties: dict = schema.get("properties", {})

    for name in schema.get("required", []):
        if arguments.get(name) is None:
            raise InvalidArgumentError(f"Missing required argument: {name}")

    for name, prop in properties.items():
        value = arguments.get(name)
        if value is None:
            continue
        if prop.get("type") == "string" and not isinstance(value, str):
            raise InvalidArgumentError(f"Invalid argument '{name}': expected string")


def check_prompt_arguments(prompt: Prompt, arguments: Mapping[str, Any]) -> None:
    for argument in prompt.arguments or []:
        value = arguments.get(argument.name)
        if value is None:
            if argument.required:
                raise InvalidArgumentError(f"Missing required argument: {argument.name}")
            continue
        # 提示词参数在协议中一律是字符串
        if not isinstance(value, str):
            raise InvalidArgumentError(f"Invalid argument '{argument.name}': expected string")
