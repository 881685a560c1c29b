# Google Gemini generateContent adapter
# the key travels in the query string and the body has no role list,
# so the chat turns are flattened into a single text part

from typing import Any, Iterable, List
from urllib.parse import quote

from livechat_ai.providers.base import CompletionParams, Message, ProviderAdapter, ProviderRequest, dig, drop_none, require_text

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"


def render_transcript(messages: Iterable[Message]) -> str:
    """
    Flatten role/content turns into the text Gemini receives.

    A single user turn is sent verbatim. Otherwise the result is the system
    content, an optional "Previous conversation:" block with one "role: content"
    line per earlier turn, then the final turn and an "assistant:" cue.
    """
    msgs = list(messages)
    system = "\n\n".join(m.get("content") or "" for m in msgs if m.get("role") == "system")
    turns = [m for m in msgs if m.get("role") != "system"]

    if not system and len(turns) == 1 and turns[0].get("role") == "user":
        return turns[0].get("content") or ""
    if not turns:
        return system

    *history, last = turns
    parts: List[str] = [system]
    if history:
        parts.append("\n\nPrevious conversation:\n")
        for turn in history:
            parts.append(f"{turn.get('role')}: {turn.get('content') or ''}\n")
    parts.append(f"\n{last.get('role') or 'user'}: {last.get('content') or ''}\nassistant:")
    return "".join(parts)


def build_gemini_request(params: CompletionParams) -> ProviderRequest:
    url = f"{GEMINI_BASE_URL}/{params.model}:generateContent?key={quote(params.api_key, safe='')}"
    body = {
        "contents": [{"parts": [{"text": render_transcript(params.messages)}]}],
        "generationConfig": drop_none({
            "temperature": params.temperature,
            "maxOutputTokens": params.max_tokens,
        }),
    }
    return ProviderRequest(url=url, headers={"Content-Type": "application/json"}, body=body)


def extract_candidate_text(data: Any) -> str:
    """candidates[0].content.parts[0].text"""
    return require_text(dig(data, "candidates", 0, "content", "parts", 0, "text"), "gemini")


gemini = ProviderAdapter(name="gemini", build_request=build_gemini_request, extract_text=extract_candidate_text)
