"""交互式命令行翻译客户端."""

import asyncio
from typing import Callable, Optional

from config.logging_config import get_logger
from config.settings import ClientSettings, get_client_settings
from models.languages import LANGUAGE_OPTIONS, get_language_label
from models.session_models import Exchange
from session.client import HttpTranslatorClient
from session.engine import SessionEngine
from session.errors import SessionError
from session.renderer import render_exchange, render_history

logger = get_logger(__name__)

HELP_TEXT = """Type text and press Enter to translate it.
End a line with \\ to continue the text on the next line.

Commands:
  /from <code>        set the source language (auto allowed)
  /to <code>          set the target language
  /edit <id> <text>   replace a finished translation
  /retry <id>         translate a failed entry again
  /history            show every translation in order
  /languages          list supported language codes
  /help               show this help
  /quit               exit"""


class QuitConsole(Exception):
    """用户输入 /quit."""


class TranslationConsole:
    """把输入行分派到 SessionEngine, 并输出渲染结果."""

    def __init__(self, engine: SessionEngine, output: Callable[[str], None] = print):
        self.engine = engine
        self.output = output
        engine.add_listener(self._on_exchange_changed)

    def prompt(self) -> str:
        return f"{self.engine.source_language} -> {self.engine.target_language}> "

    def handle_line(self, line: str) -> None:
        """
        处理一行输入.

        Raises:
            QuitConsole: 输入 /quit
        """
        if line.endswith("\\"):
            self.engine.update_draft(self.engine.draft_text + line[:-1] + "\n")
            return

        text = self.engine.draft_text + line
        if not self.engine.draft_text and text.startswith("/"):
            self._handle_command(text)
            return

        try:
            exchange_id = self.engine.submit(text)
        except SessionError as e:
            self.engine.update_draft("")
            self.output(str(e))
            return
        logger.debug(f"Submitted exchange {exchange_id}")

    def _handle_command(self, text: str) -> None:
        name, _, args = text[1:].partition(" ")
        args = args.strip()
        try:
            if name == "quit":
                raise QuitConsole()
            elif name == "help":
                self.output(HELP_TEXT)
            elif name == "history":
                self.output(render_history(self.engine.exchanges))
            elif name == "languages":
                self.output(
                    "\n".join(f"{code:6} {label}" for code, label in LANGUAGE_OPTIONS.items())
                )
            elif name == "from":
                self.engine.set_source_language(args)
                self.output(f"Source language: {get_language_label(args)}")
            elif name == "to":
                self.engine.set_target_language(args)
                self.output(f"Target language: {get_language_label(args)}")
            elif name == "edit":
                raw_id, _, new_text = args.partition(" ")
                exchange_id = self._parse_id(raw_id)
                self.engine.edit_translation(exchange_id, new_text)
            elif name == "retry":
                self.engine.retry(self._parse_id(args))
            else:
                self.output(f"Unknown command /{name}, type /help")
        except SessionError as e:
            self.output(str(e))

    def _parse_id(self, raw: str) -> int:
        try:
            return int(raw)
        except ValueError:
            raise SessionError(f"Invalid exchange id: {raw!r}") from None

    def _on_exchange_changed(self, exchange: Exchange) -> None:
        self.output(render_exchange(exchange))


async def run_console(
    settings: Optional[ClientSettings] = None,
    translator: Optional[HttpTranslatorClient] = None,
) -> None:
    """从标准输入读取文本并翻译, 直到 /quit 或 EOF."""
    settings = settings or get_client_settings()
    translator = translator or HttpTranslatorClient.from_settings(settings)
    engine = SessionEngine(
        translator,
        source_language=settings.default_source_language,
        target_language=settings.default_target_language,
    )
    console = TranslationConsole(engine)
    console.output(HELP_TEXT)
    try:
        while True:
            try:
                line = await asyncio.to_thread(input, console.prompt())
            except EOFError:
                break
            try:
                console.handle_line(line)
            except QuitConsole:
                break
    finally:
        engine.close()
        await translator.aclose()
