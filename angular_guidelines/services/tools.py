"""
工具定义与处理函数。

列表顺序即 tools/list 的返回顺序：
  get_angular_guidelines -> get_code_example -> validate_angular_code
"""
from typing import Any, List, Mapping

from mcp.types import Tool

from angular_guidelines.content import ContentStore
from angular_guidelines.schemas.mcp_types import RuleFinding
from angular_guidelines.services.code_validator import CODE_CATEGORIES, validate_code
from angular_guidelines.services.registry import ToolRegistry, new_tool_registry
from angular_guidelines.services.section_extractor import SECTION_CHOICES, extract_section

EXAMPLE_CHOICES = ["component", "service", "all"]

GET_ANGULAR_GUIDELINES_TOOL = Tool(
    name="get_angular_guidelines",
    description="Get comprehensive Angular and TypeScript best practices guidelines",
    inputSchema={
        "type": "object",
        "properties": {
            "section": {
                "type": "string",
                "description": "Specific section to focus on (optional)",
                "enum": SECTION_CHOICES,
            },
        },
    },
)

GET_CODE_EXAMPLE_TOOL = Tool(
    name="get_code_example",
    description="Get code examples following Angular best practices",
    inputSchema={
        "type": "object",
        "properties": {
            "type": {
                "type": "string",
                "description": "Type of code example to get",
                "enum": EXAMPLE_CHOICES,
            },
        },
        "required": ["type"],
    },
)

VALIDATE_ANGULAR_CODE_TOOL = Tool(
    name="validate_angular_code",
    description="Validate Angular/TypeScript code against best practices",
    inputSchema={
        "type": "object",
        "properties": {
            "code": {
                "type": "string",
                "description": "The code to validate",
            },
            "type": {
                "type": "string",
                "description": "Type of code (component, service, etc.)",
                "enum": CODE_CATEGORIES,
            },
        },
        "required": ["code"],
    },
)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def get_angular_guidelines(content: ContentStore, arguments: Mapping[str, Any]) -> str:
    return extract_section(content.guidelines, arguments.get("section")).text


def get_code_example(content: ContentStore, arguments: Mapping[str, Any]) -> str:
    example_type = arguments.get("type")

    if example_type == "all":
        return (
            f"# Angular Code Examples\n\n"
            f"## Component Example{content.example('component')}\n\n"
            f"## Service Example{content.example('service')}"
        )

    example = content.example(example_type)
    # 只大写首字母，其余保持原样
    heading = example_type[:1].upper() + example_type[1:]
    return f"# {heading} Example\n{example}"


def validate_angular_code(content: ContentStore, arguments: Mapping[str, Any]) -> str:
    findings = validate_code(arguments.get("code"), arguments.get("type"))
    return format_validation_report(findings, content.guidelines)


def format_validation_report(findings: List[RuleFinding], guidelines: str) -> str:
    """有问题时列出要点，无问题时给出通过提示；两种情况都附上完整指南"""
    if findings:
        issues = "\n".join(f"- {finding.render()}" for finding in findings)
        return (
            f"# Code Validation Results\n\n## Issues Found:\n{issues}"
            f"\n\n## Guidelines:\n{guidelines}"
        )
    return (
        f"# Code Validation Results\n\n✅ Code looks good! No major issues found."
        f"\n\n## Guidelines:\n{guidelines}"
    )


def build_tool_registry() -> ToolRegistry:
    registry = new_tool_registry()
    registry.register(GET_ANGULAR_GUIDELINES_TOOL, get_angular_guidelines)
    registry.register(GET_CODE_EXAMPLE_TOOL, get_code_example)
    registry.register(VALIDATE_ANGULAR_CODE_TOOL, validate_angular_code)
    return registry.freeze()
