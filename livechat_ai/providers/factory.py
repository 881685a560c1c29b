from typing import Dict, FrozenSet, Iterable, Optional

from livechat_ai.core.errors import UnsupportedProviderError
from livechat_ai.providers.base import ProviderAdapter
from livechat_ai.providers.gemini import gemini
from livechat_ai.providers.openai_compatible import deepseek, openai

ADAPTERS: Dict[str, ProviderAdapter] = {a.name: a for a in (deepseek, openai, gemini)}

# live chat never shipped gemini; the connection tester does
CHAT_PROVIDERS: FrozenSet[str] = frozenset({"deepseek", "openai"})
TEST_PROVIDERS: FrozenSet[str] = frozenset({"deepseek", "openai", "gemini"})


def get_adapter(provider: Optional[str], supported: Iterable[str] = TEST_PROVIDERS) -> ProviderAdapter:
    if provider not in set(supported) or provider not in ADAPTERS:
        raise UnsupportedProviderError(provider)
    return ADAPTERS[provider]
