from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # 服务标识（initialize 握手时上报）
    SERVER_NAME: str = "angular-guidelines-server"
    SERVER_VERSION: str = "1.0.0"

    # MCP 传输
    MCP_TRANSPORT: str = "stdio"
    MCP_HOST: str = "127.0.0.1"
    MCP_PORT: int = 8808
    # HTTP 模式下的 Bearer Token，留空则不校验
    MCP_AUTH_TOKEN: Optional[str] = None

    # 应用
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
