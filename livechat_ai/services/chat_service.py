import logging
from typing import Optional

import httpx

from livechat_ai.core import config
from livechat_ai.core.errors import (
    MalformedUpstreamResponseError,
    MissingParameterError,
    UnsupportedProviderError,
)
from livechat_ai.providers.base import CompletionParams
from livechat_ai.providers.client import send
from livechat_ai.providers.factory import CHAT_PROVIDERS, get_adapter
from livechat_ai.schemas.chat import ChatRequest, ChatResponse
from livechat_ai.services.handoff import should_handoff
from livechat_ai.services.prompt import build_messages, enhance_system_prompt

logger = logging.getLogger(__name__)


def apology_for(exc: BaseException) -> str:
    """Visitor-facing text that replaces the error in the chat window."""
    if isinstance(exc, MissingParameterError):
        return config.CHAT_APOLOGY_CONFIG
    if isinstance(exc, UnsupportedProviderError):
        return config.CHAT_APOLOGY_PROVIDER
    return config.CHAT_APOLOGY_DEFAULT


async def respond(req: ChatRequest, *, timeout: Optional[httpx.Timeout] = None) -> ChatResponse:
    if not (req.message and req.provider and req.api_key and req.model):
        raise MissingParameterError("Missing required parameters: message, provider, api_key, or model")

    adapter = get_adapter(req.provider, CHAT_PROVIDERS)

    system = enhance_system_prompt(req.system_prompt, req.knowledge_base)
    history = [turn.model_dump() for turn in req.conversation_history]
    params = CompletionParams(
        api_key=req.api_key,
        model=req.model,
        messages=build_messages(system, req.message, history),
        temperature=req.temperature,
        max_tokens=req.max_tokens,
    )

    data = await send(adapter.build_request(params), provider=adapter.name, timeout=timeout)
    try:
        reply = adapter.extract_text(data)
    except MalformedUpstreamResponseError:
        logger.warning("no reply text from %s, using fallback reply", adapter.name)
        reply = config.CHAT_FALLBACK_REPLY

    handoff = should_handoff(req.message, reply)
    if handoff:
        logger.info("handoff requested for conversation %s", req.conversation_id)

    return ChatResponse(
        response=reply,
        should_handoff=handoff,
        provider=req.provider,
        model=req.model,
        conversation_id=req.conversation_id,
    )
