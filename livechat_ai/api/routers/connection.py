import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from livechat_ai.api.deps import get_http_timeout
from livechat_ai.core.errors import ProxyError, UpstreamAPIError
from livechat_ai.schemas.connection import ConnectionTestRequest, ConnectionTestResponse
from livechat_ai.services.connection_service import run_connection_test

router = APIRouter(tags=["connection"])
logger = logging.getLogger(__name__)
CONNECTION_PATH = "/test-ai-connection"


def connection_error_response(error: str, *, status_code: int = 400, upstream_status: Optional[int] = None) -> JSONResponse:
    # admins configuring credentials get the raw reason
    payload = ConnectionTestResponse(success=False, error=error, status_code=upstream_status)
    return JSONResponse(status_code=status_code, content=payload.model_dump(exclude_none=True))


def invalid_body_response(detail: str) -> JSONResponse:
    return connection_error_response(detail)


@router.options(CONNECTION_PATH)
async def connection_preflight() -> Response:
    return Response(status_code=200)


@router.post(
    CONNECTION_PATH,
    response_model=ConnectionTestResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ConnectionTestResponse}},
)
async def ai_connection_test(req: ConnectionTestRequest, timeout: httpx.Timeout = Depends(get_http_timeout)):
    try:
        return await run_connection_test(req.provider, req.api_key, req.model, timeout=timeout)
    except UpstreamAPIError as e:
        return connection_error_response(e.detail, upstream_status=e.status_code)
    except ProxyError as e:
        logger.warning("AI connection test rejected: %s", e)
        return connection_error_response(str(e))
    except Exception as e:
        logger.exception("unexpected error testing AI connection: %s", e)
        return connection_error_response(str(e) or "Unknown error occurred", status_code=500)
