"""
提示词模板。每个提示词展开为一条 user 消息，内嵌调用方参数和完整指南。
"""
from typing import Any, Mapping

from mcp.types import Prompt, PromptArgument

from angular_guidelines.content import ContentStore
from angular_guidelines.services.registry import PromptRegistry, new_prompt_registry

DEFAULT_COMPONENT_FEATURES = "Basic component structure"

ANGULAR_CODE_REVIEW_PROMPT = Prompt(
    name="angular_code_review",
    description="Review Angular/TypeScript code for best practices compliance",
    arguments=[
        PromptArgument(name="code", description="The code to review", required=True),
    ],
)

CREATE_ANGULAR_COMPONENT_PROMPT = Prompt(
    name="create_angular_component",
    description="Create a new Angular component following best practices",
    arguments=[
        PromptArgument(
            name="componentName",
            description="Name of the component to create",
            required=True,
        ),
        PromptArgument(
            name="features",
            description="Features the component should have (inputs, outputs, etc.)",
            required=False,
        ),
    ],
)


def angular_code_review(content: ContentStore, arguments: Mapping[str, Any]) -> str:
    return (
        f"Please review this Angular/TypeScript code for best practices compliance:\n\n"
        f"{arguments.get('code')}\n\n"
        f"Check against these guidelines:\n{content.guidelines}\n\n"
        f"Provide specific feedback on what can be improved."
    )


def create_angular_component(content: ContentStore, arguments: Mapping[str, Any]) -> str:
    # 空字符串同样回退到默认描述
    features = arguments.get("features") or DEFAULT_COMPONENT_FEATURES
    return (
        f'Create a new Angular component named "{arguments.get("componentName")}" '
        f"following these best practices:\n{content.guidelines}\n\n"
        f"Features requested: {features}\n\n"
        f"Ensure the component uses modern Angular features like signals, "
        f"standalone components, and proper TypeScript typing."
    )


def build_prompt_registry() -> PromptRegistry:
    registry = new_prompt_registry()
    registry.register(ANGULAR_CODE_REVIEW_PROMPT, angular_code_review)
    registry.register(CREATE_ANGULAR_COMPONENT_PROMPT, create_angular_component)
    return registry.freeze()
