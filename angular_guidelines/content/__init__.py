"""
静态内容仓库：指南全文 + 代码示例目录。

进程启动时构建一次，之后只读；所有请求共享同一个实例。
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from angular_guidelines.content.examples import CODE_EXAMPLES
from angular_guidelines.content.guidelines import ANGULAR_GUIDELINES
from angular_guidelines.core.exceptions import NotFoundError


@dataclass(frozen=True)
class ContentStore:
    """只读内容映射：guidelines 为完整指南文本，examples 为示例类型 -> 代码"""
    guidelines: str
    examples: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def example(self, key: str) -> str:
        """按类型取示例；目录是封闭集合，未知键抛 NotFoundError"""
        try:
            return self.examples[key]
        except KeyError:
            raise NotFoundError(f"No example available for type: {key}") from None


def default_content_store() -> ContentStore:
    return ContentStore(
        guidelines=ANGULAR_GUIDELINES,
        examples=MappingProxyType(dict(CODE_EXAMPLES)),
    )
