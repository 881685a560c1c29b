# error taxonomy shared by services and routers
# services raise these; routers turn them into the JSON error payloads

import json
from typing import Optional


class ProxyError(Exception):
    pass


class MissingParameterError(ProxyError):
    pass


class ProviderError(ProxyError):
    pass


class UnsupportedProviderError(ProviderError):
    def __init__(self, provider: Optional[str]) -> None:
        self.provider = provider
        super().__init__(f"Unsupported AI provider: {provider}")


class UpstreamAPIError(ProviderError):
    MAX_DETAIL_CHARS = 200

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body or ""
        super().__init__(f"AI API request failed: {status_code}")

    @property
    def detail(self) -> str:
        """
        Best human-readable message from the provider's error body.
        Tries error.message, then a top-level message, then the raw body (truncated).
        """
        fallback = f"API request failed: {self.status_code}"
        try:
            data = json.loads(self.body)
        except ValueError:
            return self.body[: self.MAX_DETAIL_CHARS] if self.body else fallback

        if isinstance(data, dict):
            err = data.get("error")
            if isinstance(err, dict) and isinstance(err.get("message"), str) and err["message"]:
                return err["message"]
            if isinstance(data.get("message"), str) and data["message"]:
                return data["message"]
        return fallback


class MalformedUpstreamResponseError(ProviderError):
    pass
