"""会话层本地错误.

这些错误表示调用方误用 (空输入、错误的 id 或状态), 不是翻译失败,
翻译失败体现在 Exchange.status 上.
"""


class SessionError(Exception):
    """会话错误基类."""


class ValidationError(SessionError):
    """输入不合法: 空文本或不支持的语言代码."""


class NotFoundError(SessionError):
    """找不到指定 id 的翻译记录."""


class InvalidStateError(SessionError):
    """翻译记录当前状态不允许该操作."""
