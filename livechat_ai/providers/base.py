# the provider contract: every upstream LLM API is described by one adapter
# an adapter is two pure functions, request building and reply extraction,
# so endpoint logic never branches on the provider name

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from livechat_ai.core.errors import MalformedUpstreamResponseError

Message = Dict[str, str]


@dataclass(frozen=True)
class CompletionParams:
    api_key: str
    model: str
    messages: List[Message]
    temperature: Optional[float]
    max_tokens: Optional[int]


@dataclass(frozen=True)
class ProviderRequest:
    url: str
    headers: Dict[str, str]
    body: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ProviderAdapter:
    name: str
    build_request: Callable[[CompletionParams], ProviderRequest]
    extract_text: Callable[[Any], str]


def dig(data: Any, *path: Any) -> Any:
    # walk nested dicts/lists; None as soon as a step is missing
    cur = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(cur, list) or len(cur) <= key:
                return None
        elif not isinstance(cur, dict):
            return None
        cur = cur[key] if isinstance(key, int) else cur.get(key)
    return cur


def drop_none(values: Dict[str, Any]) -> Dict[str, Any]:
    # optional sampling settings the caller left out are omitted, not sent as null
    return {k: v for k, v in values.items() if v is not None}


def require_text(value: Any, provider: str) -> str:
    if not isinstance(value, str) or not value:
        raise MalformedUpstreamResponseError(f"No reply text in {provider} response.")
    return value
