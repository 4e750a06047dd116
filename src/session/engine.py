"""会话引擎: 管理翻译记录的提交、回填、编辑和重试."""

import asyncio
import itertools
from typing import Callable, Dict, List, Set, Tuple

from config.logging_config import get_logger
from models.languages import (
    AUTO_DETECT,
    is_valid_source_language,
    is_valid_target_language,
)
from models.session_models import (
    Exchange,
    ExchangeStatus,
    TranslationFailure,
    TranslationResult,
    TranslationSuccess,
)
from session.client import TranslatorClient
from session.errors import InvalidStateError, NotFoundError, ValidationError

logger = get_logger(__name__)

ExchangeListener = Callable[[Exchange], None]


class SessionEngine:
    """单个客户端进程内的翻译会话.

    所有状态修改都在同一个事件循环中进行. 多个翻译可以同时处于
    pending 状态, 结果按 id 回填, 展示顺序始终是提交顺序.
    """

    def __init__(
        self,
        translator: TranslatorClient,
        source_language: str = AUTO_DETECT,
        target_language: str = "de",
    ):
        """
        初始化会话.

        Args:
            translator: 翻译客户端
            source_language: 初始源语言
            target_language: 初始目标语言, 不能是 auto
        """
        self.translator = translator
        self._exchanges: List[Exchange] = []
        self._by_id: Dict[int, Exchange] = {}
        self._ids = itertools.count(1)
        self._tasks: Set[asyncio.Task] = set()
        self._listeners: List[ExchangeListener] = []
        self._closed = False
        self.draft_text = ""
        self.source_language = AUTO_DETECT
        self.target_language = "de"
        self.set_source_language(source_language)
        self.set_target_language(target_language)

    @property
    def exchanges(self) -> Tuple[Exchange, ...]:
        """按提交顺序排列的翻译记录."""
        return tuple(self._exchanges)

    @property
    def pending_count(self) -> int:
        return sum(1 for exchange in self._exchanges if exchange.is_pending)

    @property
    def closed(self) -> bool:
        return self._closed

    def get_exchange(self, exchange_id: int) -> Exchange:
        exchange = self._by_id.get(exchange_id)
        if exchange is None:
            raise NotFoundError(f"No exchange with id {exchange_id}")
        return exchange

    def add_listener(self, listener: ExchangeListener) -> None:
        """注册状态变更回调, 每次记录变化后以该记录调用."""
        self._listeners.append(listener)

    def update_draft(self, text: str) -> None:
        self.draft_text = text

    def set_source_language(self, code: str) -> None:
        if not is_valid_source_language(code):
            raise ValidationError(f"Unsupported source language: {code!r}")
        self.source_language = code

    def set_target_language(self, code: str) -> None:
        if not is_valid_target_language(code):
            raise ValidationError(f"Unsupported target language: {code!r}")
        self.target_language = code

    def submit(self, text: str) -> int:
        """
        提交一段文本进行翻译.

        Args:
            text: 原文, 原样保存

        Returns:
            新翻译记录的 id, 翻译在后台进行

        Raises:
            ValidationError: 文本为空或只有空白
        """
        if not text or not text.strip():
            raise ValidationError("Nothing to translate")
        # 必须在事件循环中调用, 否则不创建记录
        asyncio.get_running_loop()

        exchange = Exchange(
            id=next(self._ids),
            source_text=text,
            source_language=self.source_language,
            target_language=self.target_language,
        )
        self._exchanges.append(exchange)
        self._by_id[exchange.id] = exchange
        self.draft_text = ""
        logger.debug(
            f"Exchange {exchange.id} submitted "
            f"({exchange.source_language} -> {exchange.target_language})"
        )
        self._notify(exchange)
        self._dispatch(exchange)
        return exchange.id

    def on_translation_result(self, exchange_id: int, result: TranslationResult) -> None:
        """
        翻译客户端完成后的回调.

        只处理处于 pending 状态的记录, 其他情况 (未知 id、重复或过期
        回调、会话已关闭) 记录日志后忽略.
        """
        if self._closed:
            logger.info(f"Ignoring result for exchange {exchange_id}: session closed")
            return
        exchange = self._by_id.get(exchange_id)
        if exchange is None or not exchange.is_pending:
            state = exchange.status.value if exchange else "unknown"
            logger.warning(
                f"Ignoring stale translation result for exchange {exchange_id} ({state})"
            )
            return

        if isinstance(result, TranslationSuccess):
            exchange.translated_text = result.translated_text
            exchange.error_message = None
            exchange.status = ExchangeStatus.COMPLETE
        else:
            exchange.translated_text = None
            exchange.error_message = result.message
            exchange.status = ExchangeStatus.FAILED
            logger.info(
                f"Exchange {exchange_id} failed ({result.error_kind}): {result.message}"
            )
        self._notify(exchange)

    def edit_translation(self, exchange_id: int, new_text: str) -> None:
        """
        修改已完成记录的译文, 不触发重新翻译.

        Raises:
            NotFoundError: id 不存在
            InvalidStateError: 记录未完成
        """
        exchange = self.get_exchange(exchange_id)
        if not exchange.is_complete:
            raise InvalidStateError(
                f"Exchange {exchange_id} is {exchange.status.value}, only complete "
                "translations can be edited"
            )
        exchange.translated_text = new_text
        self._notify(exchange)

    def retry(self, exchange_id: int) -> None:
        """
        重新翻译失败的记录, 使用原文和原语言对.

        Raises:
            NotFoundError: id 不存在
            InvalidStateError: 记录不是 failed 状态
        """
        exchange = self.get_exchange(exchange_id)
        if not exchange.is_failed:
            raise InvalidStateError(
                f"Exchange {exchange_id} is {exchange.status.value}, only failed "
                "translations can be retried"
            )
        asyncio.get_running_loop()
        exchange.status = ExchangeStatus.PENDING
        exchange.translated_text = None
        exchange.error_message = None
        self._notify(exchange)
        self._dispatch(exchange)

    async def wait_idle(self) -> None:
        """等待所有进行中的翻译结束."""
        while True:
            running = [task for task in self._tasks if not task.done()]
            if not running:
                return
            await asyncio.gather(*running, return_exceptions=True)

    def close(self) -> None:
        """关闭会话, 之后到达的结果都会被忽略. 不取消进行中的网络请求."""
        self._closed = True

    def _dispatch(self, exchange: Exchange) -> None:
        exchange.attempts += 1
        task = asyncio.get_running_loop().create_task(
            self._translate(
                exchange.id,
                exchange.source_text,
                exchange.source_language,
                exchange.target_language,
            )
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _translate(
        self, exchange_id: int, text: str, source_language: str, target_language: str
    ) -> None:
        try:
            result = await self.translator.translate(
                text, source_language, target_language
            )
        except Exception as e:
            logger.exception(f"Translator raised for exchange {exchange_id}")
            result = TranslationFailure(error_kind="client_error", message=str(e))
        self.on_translation_result(exchange_id, result)

    def _notify(self, exchange: Exchange) -> None:
        for listener in self._listeners:
            try:
                listener(exchange)
            except Exception:
                logger.exception(f"Exchange listener failed for exchange {exchange.id}")
