import httpx
from fastapi import Request


def get_http_timeout(request: Request) -> httpx.Timeout:
    return request.app.state.http_timeout
