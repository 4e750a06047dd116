"""Translation Service 应用工厂."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import router
from config.logging_config import get_logger
from config.settings import get_settings
from translator.chat_translator import ChatTranslator
from translator.errors import BadRequest, TranslationServiceError, UpstreamError

logger = get_logger(__name__)


def _error_response(error: TranslationServiceError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code, content={"error": error.public_message}
    )


async def translation_error_handler(request: Request, exc: TranslationServiceError):
    """业务错误统一转换为 {"error": ...}."""
    if exc.status_code >= 500:
        logger.error(f"{request.url.path} failed: {type(exc).__name__}")
    return _error_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """请求体无法解析时按 400 处理, 与缺少字段保持一致."""
    logger.info(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return _error_response(BadRequest())


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return _error_response(UpstreamError())


def create_app(translator=None, settings=None) -> FastAPI:
    """
    创建 FastAPI 应用.

    Args:
        translator: 实现 translate_text 的翻译器; 为空时在启动阶段
            根据配置创建 ChatTranslator
        settings: 服务配置, 默认从环境变量读取

    Returns:
        FastAPI 应用实例
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = None
        if getattr(app.state, "translator", None) is None:
            # 缺少 OPENAI_API_KEY 时在这里抛出, 服务无法启动
            owned = ChatTranslator.from_settings(settings or get_settings())
            app.state.translator = owned
            logger.info(f"Translation provider ready: model={owned.model}")
        yield
        if owned is not None:
            await owned.close()
            app.state.translator = None

    app = FastAPI(
        title="Translation Service API",
        description="文本翻译服务API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.translator = translator

    allowed_origins = settings.allowed_origins if settings else ["*"]
    # 添加CORS中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TranslationServiceError, translation_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    # 包含路由
    app.include_router(router)

    @app.get("/")
    async def root():
        """根路径，返回API信息"""
        return {
            "message": "Translation Service API",
            "version": "1.0.0",
            "docs": "/docs",
            "endpoints": {"chat": "/api/chat"},
        }

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app
