"""
通用的具名能力注册表：工具和提示词共用同一套 名称 -> (描述, 处理函数) 查找逻辑。

注册只发生在启动阶段；freeze() 之后注册表只读，可被并发请求安全共享。
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Mapping, TypeVar

from mcp.types import Prompt, Tool

from angular_guidelines.content import ContentStore
from angular_guidelines.core.exceptions import (
    GuidelinesError,
    UnknownPromptError,
    UnknownToolError,
)

SpecT = TypeVar("SpecT", Tool, Prompt)
HandlerT = TypeVar("HandlerT")

# 处理函数签名：(内容仓库, 参数) -> 文本
ToolHandler = Callable[[ContentStore, Mapping[str, Any]], str]
PromptHandler = Callable[[ContentStore, Mapping[str, Any]], str]


@dataclass(frozen=True)
class Capability(Generic[SpecT, HandlerT]):
    spec: SpecT
    handler: HandlerT

    @property
    def name(self) -> str:
        return self.spec.name


class CapabilityRegistry(Generic[SpecT, HandlerT]):
    """按注册顺序保存能力；名称在同一注册表内唯一"""

    def __init__(self, kind: str, not_found: Callable[[str], GuidelinesError]):
        self.kind = kind
        self._not_found = not_found
        self._entries: Dict[str, Capability[SpecT, HandlerT]] = {}
        self._frozen = False

    def register(self, spec: SpecT, handler: HandlerT) -> None:
        if self._frozen:
            raise RuntimeError(f"{self.kind} registry is frozen, cannot register {spec.name}")
        if spec.name in self._entries:
            raise ValueError(f"Duplicate {self.kind} name: {spec.name}")
        self._entries[spec.name] = Capability(spec=spec, handler=handler)

    def freeze(self) -> "CapabilityRegistry[SpecT, HandlerT]":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def resolve(self, name: str) -> Capability[SpecT, HandlerT]:
        """按名称查找；未注册时抛出构造时传入的错误类型"""
        capability = self._entries.get(name)
        if capability is None:
            raise self._not_found(name)
        return capability

    def specs(self) -> List[SpecT]:
        # 返回副本，调用方修改不会影响注册表
        return [entry.spec.model_copy(deep=True) for entry in self._entries.values()]

    def names(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


ToolRegistry = CapabilityRegistry[Tool, ToolHandler]
PromptRegistry = CapabilityRegistry[Prompt, PromptHandler]


def new_tool_registry() -> ToolRegistry:
    return CapabilityRegistry("tool", UnknownToolError)


def new_prompt_registry() -> PromptRegistry:
    return CapabilityRegistry("prompt", UnknownPromptError)
