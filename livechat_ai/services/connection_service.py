import logging
from typing import Optional

import httpx

from livechat_ai.core import config
from livechat_ai.core.errors import MalformedUpstreamResponseError, MissingParameterError
from livechat_ai.providers.base import CompletionParams
from livechat_ai.providers.client import send
from livechat_ai.providers.factory import TEST_PROVIDERS, get_adapter
from livechat_ai.schemas.connection import ConnectionTestResponse
from livechat_ai.services.prompt import build_messages

logger = logging.getLogger(__name__)

TEST_SYSTEM_PROMPT = "You are a helpful assistant."
TEST_MESSAGE = "Hello, this is a test message to verify the connection."
TEST_FALLBACK_REPLY = "Test successful"


async def run_connection_test(
    provider: Optional[str],
    api_key: Optional[str],
    model: Optional[str],
    *,
    timeout: Optional[httpx.Timeout] = None,
) -> ConnectionTestResponse:
    """
    Send one fixed probe to the provider with the admin's credentials.

    Raises MissingParameterError / UnsupportedProviderError before any network call,
    UpstreamAPIError when the provider rejects the call.
    A reply without the expected text field still counts as a success.
    """
    if not (provider and api_key and model):
        raise MissingParameterError("Missing required parameters: provider, api_key, and model are required")

    adapter = get_adapter(provider, TEST_PROVIDERS)
    logger.info("testing AI connection: provider=%s model=%s", provider, model)

    params = CompletionParams(
        api_key=api_key,
        model=model,
        messages=build_messages(TEST_SYSTEM_PROMPT, TEST_MESSAGE),
        temperature=config.CONNECTION_TEST_TEMPERATURE,
        max_tokens=config.CONNECTION_TEST_MAX_TOKENS,
    )
    data = await send(adapter.build_request(params), provider=adapter.name, timeout=timeout)
    try:
        reply = adapter.extract_text(data)
    except MalformedUpstreamResponseError:
        reply = TEST_FALLBACK_REPLY

    return ConnectionTestResponse(success=True, response=reply, provider=provider, model=model)

