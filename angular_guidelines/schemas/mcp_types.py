# angular_guidelines/schemas/mcp_types.py
import enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Severity(str, enum.Enum):
    BLOCKING = "blocking"
    ADVISORY = "advisory"
    SUGGESTION = "suggestion"


# 报告中每个级别的前缀图标
SEVERITY_ICONS = {
    Severity.BLOCKING: "❌",
    Severity.ADVISORY: "⚠️",
    Severity.SUGGESTION: "💡",
}


class RuleFinding(BaseModel):
    """单条规则命中结果，每次校验重新生成，不做缓存"""
    model_config = ConfigDict(frozen=True)

    severity: Severity
    message: str

    def render(self) -> str:
        return f"{SEVERITY_ICONS[self.severity]} {self.message}"


class Section(BaseModel):
    """指南文档的一个章节视图；title 为 None 表示整篇文档"""
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    lines: List[str] = []

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
