"""Translator client used by the session engine."""

from typing import Optional, Protocol

import httpx

from config.logging_config import get_logger
from config.settings import ClientSettings
from models.session_models import (
    TranslationFailure,
    TranslationResult,
    TranslationSuccess,
)

logger = get_logger(__name__)

CHAT_PATH = "/api/chat"


class TranslatorClient(Protocol):
    """Anything the session engine can ask for a translation.

    Implementations report exactly once per call and represent failures
    as TranslationFailure instead of raising.
    """

    async def translate(
        self, text: str, source_language: str, target_language: str
    ) -> TranslationResult: ...


class HttpTranslatorClient:
    """TranslatorClient backed by the translation service's /api/chat."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url, timeout=timeout, transport=transport
        )

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "HttpTranslatorClient":
        return cls(settings.translation_service_url, timeout=settings.client_timeout)

    async def translate(
        self, text: str, source_language: str, target_language: str
    ) -> TranslationResult:
        payload = {
            "source": text,
            "sourceLanguage": source_language,
            "targetLanguage": target_language,
        }
        try:
            response = await self._client.post(CHAT_PATH, json=payload)
        except httpx.HTTPError as e:
            logger.warning(f"Translation request to {self.base_url} failed: {e!r}")
            return TranslationFailure(error_kind="transport", message=str(e))

        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            return TranslationFailure(
                error_kind="invalid_response",
                message=f"Unexpected response body (HTTP {response.status_code})",
            )

        if response.status_code == 200:
            translation = body.get("translation")
            if not isinstance(translation, str):
                return TranslationFailure(
                    error_kind="invalid_response",
                    message="Response is missing the translation field",
                )
            return TranslationSuccess(translated_text=translation)

        message = str(body.get("error") or f"HTTP {response.status_code}")
        if response.status_code == 400:
            kind = "bad_request"
        elif response.status_code >= 500:
            kind = "upstream"
        else:
            kind = "http_error"
        return TranslationFailure(error_kind=kind, message=message)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpTranslatorClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
