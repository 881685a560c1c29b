# DeepSeek and OpenAI share the chat-completions wire format;
# only the endpoint differs

from typing import Any

from livechat_ai.providers.base import CompletionParams, ProviderAdapter, ProviderRequest, dig, drop_none, require_text

DEEPSEEK_URL = "https://api.deepseek.com/chat/completions"
OPENAI_URL = "https://api.openai.com/v1/chat/completions"


def _bearer_request(url: str, params: CompletionParams) -> ProviderRequest:
    headers = {
        "Authorization": f"Bearer {params.api_key}",
        "Content-Type": "application/json",
    }
    body = drop_none({
        "model": params.model,
        "messages": [dict(m) for m in params.messages],
        "temperature": params.temperature,
        "max_tokens": params.max_tokens,
        "stream": False,
    })
    return ProviderRequest(url=url, headers=headers, body=body)


def build_deepseek_request(params: CompletionParams) -> ProviderRequest:
    return _bearer_request(DEEPSEEK_URL, params)


def build_openai_request(params: CompletionParams) -> ProviderRequest:
    return _bearer_request(OPENAI_URL, params)


def extract_choice_text(data: Any) -> str:
    """choices[0].message.content"""
    return require_text(dig(data, "choices", 0, "message", "content"), "chat-completions")


deepseek = ProviderAdapter(name="deepseek", build_request=build_deepseek_request, extract_text=extract_choice_text)
openai = ProviderAdapter(name="openai", build_request=build_openai_request, extract_text=extract_choice_text)
