"""AsyncOpenAI translation service."""

from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from config.logging_config import get_logger
from config.settings import Settings
from models.languages import AUTO_DETECT, get_language_label
from translator.errors import UpstreamEmpty, UpstreamError

logger = get_logger(__name__)

SYSTEM_PROMPT = (
    "You are a professional translator. Translate accurately and keep the "
    "tone and formatting of the original. Return only the translated text "
    "without explanations."
)


def build_translation_prompt(
    text: str, source_language: Optional[str], target_language: str
) -> str:
    """Build the user message sent to the model."""
    target = get_language_label(target_language)
    if not source_language or source_language == AUTO_DETECT:
        return f"Translate the following text to {target}:\n\n{text}"
    source = get_language_label(source_language)
    return f"Translate the following text from {source} to {target}:\n\n{text}"


class ChatTranslator:
    """AsyncOpenAI-based translation service.

    One request maps to exactly one chat completion call, failures are
    not retried here.
    """

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 30,
        max_tokens: int = 1000,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.client = client or AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
        )
        self.model = model
        self.max_tokens = max_tokens

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChatTranslator":
        return cls(
            model=settings.openai_model,
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            timeout=settings.request_timeout,
            max_tokens=settings.max_tokens,
        )

    async def translate_text(
        self, text: str, source_lang: Optional[str], target_lang: str
    ) -> str:
        """Translate single text string.

        Raises:
            UpstreamError: the provider call failed.
            UpstreamEmpty: the provider answered without usable text.
        """
        prompt = build_translation_prompt(text, source_lang, target_lang)
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=self.max_tokens,
            )
        except OpenAIError as e:
            logger.error(
                f"Translation request failed ({source_lang} -> {target_lang}): {e!r}"
            )
            raise UpstreamError() from e

        translated = None
        if response.choices:
            content = response.choices[0].message.content
            translated = content.strip() if content else None
        if not translated:
            logger.warning(
                f"Model {self.model} returned no text for: {text[:50]}..."
            )
            raise UpstreamEmpty()
        return translated

    async def close(self) -> None:
        await self.client.close()
