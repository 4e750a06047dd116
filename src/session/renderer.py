"""会话历史的纯文本渲染."""

from typing import Iterable, List

from models.languages import get_language_label
from models.session_models import Exchange, ExchangeStatus

PENDING_MARKER = "… translating"
FAILED_MARKER = "✗ translation failed, use /retry {id}"


def render_exchange(exchange: Exchange) -> str:
    """渲染单条翻译记录: 原文在上, 译文或状态在下."""
    header = (
        f"[{exchange.id}] {get_language_label(exchange.source_language)}"
        f" -> {get_language_label(exchange.target_language)}"
    )
    if exchange.status is ExchangeStatus.COMPLETE:
        body = exchange.translated_text or ""
    elif exchange.status is ExchangeStatus.FAILED:
        body = FAILED_MARKER.format(id=exchange.id)
    else:
        body = PENDING_MARKER
    return "\n".join([header, _indent(exchange.source_text, "  > "), _indent(body, "    ")])


def render_history(exchanges: Iterable[Exchange]) -> str:
    """按给定顺序 (即提交顺序) 渲染全部记录."""
    blocks: List[str] = [render_exchange(exchange) for exchange in exchanges]
    if not blocks:
        return "No translations yet. Type something to translate."
    return "\n\n".join(blocks)


def _indent(text: str, prefix: str) -> str:
    return "\n".join(prefix + line for line in text.splitlines() or [""])
