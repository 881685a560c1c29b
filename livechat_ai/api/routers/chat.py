import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from livechat_ai.api.deps import get_http_timeout
from livechat_ai.core.errors import MissingParameterError, ProxyError
from livechat_ai.schemas.chat import ChatErrorResponse, ChatRequest, ChatResponse
from livechat_ai.services.chat_service import apology_for, respond

router = APIRouter(tags=["chat"])
logger = logging.getLogger(__name__)
CHAT_PATH = "/ai-chat-response"


def chat_error_response(exc: BaseException, conversation_id: Optional[str] = None) -> JSONResponse:
    # visitors never see a bare error: they get an apology and a human takes over
    payload = ChatErrorResponse(
        error=str(exc) or exc.__class__.__name__,
        response=apology_for(exc),
        should_handoff=True,
        conversation_id=conversation_id,
    )
    return JSONResponse(status_code=500, content=payload.model_dump(exclude_none=True))


def invalid_body_response(detail: str) -> JSONResponse:
    return chat_error_response(MissingParameterError(detail))


@router.options(CHAT_PATH)
async def chat_preflight() -> Response:
    return Response(status_code=200)


@router.post(CHAT_PATH, response_model=ChatResponse, responses={500: {"model": ChatErrorResponse}})
async def ai_chat_response(req: ChatRequest, timeout: httpx.Timeout = Depends(get_http_timeout)):
    logger.info(
        "AI chat request: provider=%s model=%s conversation=%s",
        req.provider, req.model, req.conversation_id,
    )
    try:
        return await respond(req, timeout=timeout)
    except ProxyError as e:
        logger.error("AI chat request failed: %s", e)
        return chat_error_response(e, req.conversation_id)
    except Exception as e:
        logger.exception("unexpected error in AI chat response: %s", e)
        return chat_error_response(e, req.conversation_id)
