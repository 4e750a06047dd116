"""Translation Service API 主入口."""

import uvicorn

from api.app import create_app
from config.logging_config import setup_logging
from config.settings import get_settings

# 缺少 OPENAI_API_KEY 时在这里失败, 不会带着无效配置启动
settings = get_settings()
setup_logging(settings.log_level)

# 创建FastAPI应用实例
app = create_app(settings=settings)


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=True)
