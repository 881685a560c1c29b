# livechat_ai/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from livechat_ai.core import config
from livechat_ai.api.routers import chat, connection
from livechat_ai.api.routers.health import router as health_router
from livechat_ai.providers.client import default_timeout

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]

# each endpoint renders a bad body in its own error shape
INVALID_BODY_RENDERERS = {
    chat.CHAT_PATH: chat.invalid_body_response,
    connection.CONNECTION_PATH: connection.invalid_body_response,
}


def _describe(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "Invalid request body: " + "; ".join(parts)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    render = INVALID_BODY_RENDERERS.get(request.url.path)
    if render is None:
        return await request_validation_exception_handler(request, exc)
    logging.getLogger(__name__).warning("rejected body on %s: %s", request.url.path, exc.errors())
    return render(_describe(exc))


def create_app() -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # httpx logs every request URL at INFO and gemini URLs carry the API key
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)

    app = FastAPI(title="LiveChat AI Proxy", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=CORS_ALLOW_HEADERS,
    )

    # CORSMiddleware only answers requests that carry an Origin; the widget
    # expects the headers on every response
    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        response = await call_next(request)
        if "*" in config.CORS_ALLOW_ORIGINS:
            response.headers.setdefault("Access-Control-Allow-Origin", "*")
            response.headers.setdefault("Access-Control-Allow-Headers", ", ".join(CORS_ALLOW_HEADERS))
        return response

    # one timeout for every upstream call; routes read it through Depends(get_http_timeout)
    app.state.http_timeout = default_timeout()

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Routers
    app.include_router(health_router)
    app.include_router(chat.router)
    app.include_router(connection.router)

    return app


app = create_app()
