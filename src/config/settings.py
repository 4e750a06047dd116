"""应用配置管理模块."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class _BaseAppSettings(BaseSettings):
    """服务端与客户端共用的配置."""

    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class Settings(_BaseAppSettings):
    """翻译服务配置类, OPENAI_API_KEY 缺失时启动失败."""

    openai_api_key: str = Field(...)
    openai_base_url: Optional[str] = Field(default=None)
    openai_model: str = Field(default="gpt-4o-mini")
    request_timeout: int = Field(default=30, ge=1, le=300)
    max_tokens: int = Field(default=1000, ge=10, le=128000)
    allowed_origins: List[str] = Field(default=["*"])
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001, ge=1, le=65535)


class ClientSettings(_BaseAppSettings):
    """交互式翻译客户端配置."""

    # 日志与交互输出共用终端, 默认只输出警告
    log_level: str = Field(default="WARNING")
    translation_service_url: str = Field(default="http://localhost:3001")
    client_timeout: float = Field(default=60.0, gt=0)
    default_source_language: str = Field(default="auto")
    default_target_language: str = Field(default="de")


@lru_cache
def get_settings() -> Settings:
    """获取服务端配置 (首次调用时从环境变量读取)."""
    return Settings()


@lru_cache
def get_client_settings() -> ClientSettings:
    """获取客户端配置."""
    return ClientSettings()
