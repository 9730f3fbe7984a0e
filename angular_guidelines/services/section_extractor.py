"""
章节提取器：从指南全文中截取某个 `##` 章节。

纯函数，无副作用；同样的输入总是得到同样的输出，结果不缓存。
"""
from typing import Optional

from angular_guidelines.schemas.mcp_types import Section

# section 参数 -> 文档中的标题短语
SECTION_TITLES = {
    "typescript": "TypeScript Best Practices",
    "angular": "Angular Best Practices",
    "components": "Components",
    "state": "State Management",
    "templates": "Templates",
    "services": "Services",
}

# "all" 不在映射中，按整篇返回处理
SECTION_CHOICES = list(SECTION_TITLES) + ["all"]

_HEADING_PREFIX = "## "


def extract_section(document: str, section: Optional[str] = None) -> Section:
    """
    返回 section 对应的章节：从第一个包含标题短语的行开始，
    到下一个不包含该短语的 `## ` 行之前（或文档末尾）结束。

    section 为空、"all"、未知值，或文档中找不到标题短语时，原样返回整篇文档。
    """
    lines = document.split("\n")
    title = SECTION_TITLES.get(section) if section else None
    if title is None:
        return Section(title=None, lines=lines)

    start = _find_first(lines, title)
    if start is None:
        return Section(title=None, lines=lines)

    end = len(lines)
    for index in range(start + 1, len(lines)):
        line = lines[index]
        if line.startswith(_HEADING_PREFIX) and title not in line:
            end = index
            break

    return Section(title=title, lines=lines[start:end])


def _find_first(lines: list[str], phrase: str) -> Optional[int]:
    for index, line in enumerate(lines):
        if phrase in line:
            return index
    return None
