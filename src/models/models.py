"""API数据模型定义."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class TranslateRequest(BaseModel):
    """翻译请求数据模型.

    字段均为可选, 缺失字段由路由层校验并返回 400, 而不是 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    source: Optional[str] = None
    source_language: Optional[str] = Field(default=None, alias="sourceLanguage")
    target_language: Optional[str] = Field(default=None, alias="targetLanguage")


class TranslateResponse(BaseModel):
    """翻译成功响应."""

    translation: str


class ErrorResponse(BaseModel):
    """错误响应, 只包含面向调用方的通用信息."""

    error: str
