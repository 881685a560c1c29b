import logging
from typing import Any, Optional

import httpx

from livechat_ai.core import config
from livechat_ai.core.errors import MalformedUpstreamResponseError, ProviderError, UpstreamAPIError
from livechat_ai.providers.base import ProviderRequest

logger = logging.getLogger(__name__)


def default_timeout() -> httpx.Timeout:
    return httpx.Timeout(config.HTTP_TIMEOUT_SECONDS, connect=config.HTTP_CONNECT_TIMEOUT_SECONDS)


async def send(request: ProviderRequest, *, provider: str, timeout: Optional[httpx.Timeout] = None) -> Any:
    """
    POST one provider request and return the decoded JSON body.

    Non-2xx -> UpstreamAPIError(status, body text).
    Transport failure -> ProviderError.
    2xx that is not JSON -> MalformedUpstreamResponseError.
    No retries: one call, one outcome.
    """
    # the URL may hold an API key (gemini): log the provider, never the URL;
    # create_app keeps httpx's own request logger below INFO for the same reason
    logger.info("sending request to %s", provider)
    try:
        async with httpx.AsyncClient(timeout=timeout or default_timeout()) as client:
            r = await client.post(request.url, headers=request.headers, json=request.body)
    except httpx.HTTPError as e:
        raise ProviderError(f"{provider} HTTP error: {e}") from e

    logger.info("%s responded with status %s", provider, r.status_code)
    if not r.is_success:
        logger.error("%s API error %s: %s", provider, r.status_code, r.text[:500])
        raise UpstreamAPIError(r.status_code, r.text)

    try:
        return r.json()
    except ValueError as e:
        raise MalformedUpstreamResponseError(f"Unexpected response type from {provider}.") from e
