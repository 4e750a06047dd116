"""交互式翻译客户端入口."""

import asyncio

from config.logging_config import setup_logging
from config.settings import get_client_settings
from session.console import run_console


if __name__ == "__main__":
    settings = get_client_settings()
    setup_logging(settings.log_level)
    asyncio.run(run_console(settings))
