import uvicorn

from livechat_ai.core import config

uvicorn.run("livechat_ai.main:app", host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
