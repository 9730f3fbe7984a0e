import pytest

from angular_guidelines.content import default_content_store
from angular_guidelines.services.dispatcher import build_dispatcher


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def content_store():
    """默认内容仓库（指南全文 + 代码示例）"""
    return default_content_store()


@pytest.fixture
def dispatcher(content_store):
    """基于默认内容构建的分发器，不经过 MCP 传输层"""
    return build_dispatcher(content_store)
