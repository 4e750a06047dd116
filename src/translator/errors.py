"""翻译服务错误类型.

每个错误携带 HTTP 状态码和可以返回给调用方的通用信息,
上游的原始错误只记录在服务端日志中.
"""


class TranslationServiceError(Exception):
    """翻译服务错误基类."""

    status_code = 500
    public_message = "An error occurred while processing the translation."

    def __init__(self, message: str = None):
        super().__init__(message or self.public_message)
        if message is not None:
            self.public_message = message


class BadRequest(TranslationServiceError):
    """请求参数不合法, 不重试."""

    status_code = 400
    public_message = "Source text and target language are required."


class UpstreamEmpty(TranslationServiceError):
    """模型没有返回可用的译文."""

    public_message = "Failed to generate translation."


class UpstreamError(TranslationServiceError):
    """调用模型接口失败 (网络、鉴权、限流等)."""

    public_message = "An error occurred while processing the translation."
