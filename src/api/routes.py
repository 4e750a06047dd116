"""Translation Service API 路由."""

from fastapi import APIRouter, Request

from config.logging_config import get_logger
from models.models import TranslateRequest, TranslateResponse
from translator.errors import BadRequest

logger = get_logger(__name__)

# 创建路由实例
router = APIRouter(prefix="/api")


def get_translator(request: Request):
    """从应用状态获取翻译器, 由 create_app 或 lifespan 注入."""
    return request.app.state.translator


@router.post("/chat", response_model=TranslateResponse)
async def translate_chat(payload: TranslateRequest, request: Request):
    """
    翻译一段文本.

    Request Body:
    - source: 待翻译文本
    - sourceLanguage: 源语言代码, 缺省或 "auto" 表示自动检测
    - targetLanguage: 目标语言代码

    Returns:
        {"translation": "..."}; 参数错误返回 400, 上游失败返回 500,
        错误体均为 {"error": "..."}
    """
    if not payload.source or not payload.target_language:
        raise BadRequest()

    translator = get_translator(request)
    translation = await translator.translate_text(
        payload.source, payload.source_language, payload.target_language
    )
    logger.info(
        f"Translated {len(payload.source)} chars "
        f"({payload.source_language or 'auto'} -> {payload.target_language})"
    )
    return TranslateResponse(translation=translation)
