"""会话与翻译记录的数据模型."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel


class ExchangeStatus(str, Enum):
    """翻译记录的生命周期状态."""

    PENDING = "pending"
    COMPLETE = "complete"
    FAILED = "failed"


class TranslationSuccess(BaseModel):
    """翻译客户端返回的成功结果."""

    translated_text: str


class TranslationFailure(BaseModel):
    """翻译客户端返回的失败结果.

    error_kind 仅用于日志诊断, 会话层对所有失败一视同仁.
    """

    error_kind: str
    message: str


TranslationResult = Union[TranslationSuccess, TranslationFailure]


@dataclass
class Exchange:
    """一次用户发起的翻译.

    source_text 与语言对在创建后不再修改, 只有 status、translated_text
    及诊断字段由 SessionEngine 更新.
    """

    id: int
    source_text: str
    source_language: str
    target_language: str
    status: ExchangeStatus = ExchangeStatus.PENDING
    translated_text: Optional[str] = None
    error_message: Optional[str] = None
    attempts: int = 0

    @property
    def is_pending(self) -> bool:
        return self.status is ExchangeStatus.PENDING

    @property
    def is_complete(self) -> bool:
        return self.status is ExchangeStatus.COMPLETE

    @property
    def is_failed(self) -> bool:
        return self.status is ExchangeStatus.FAILED
