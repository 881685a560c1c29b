"""
Decides when a live chat should be escalated to a human agent.

Two independent checks, OR-ed together:
- the visitor's message mentions one of HANDOFF_TRIGGERS
- the AI reply admits it cannot help (AI_UNCERTAINTY_PHRASE)

Both are case-insensitive plain substring checks, so "bukan komplainnya"
still matches "komplain".
"""
from typing import FrozenSet

HANDOFF_TRIGGERS: FrozenSet[str] = frozenset({
    "komplain",
    "refund",
    "pembatalan",
    "masalah teknis",
    "berbicara dengan manusia",
    "customer service",
})
AI_UNCERTAINTY_PHRASE = "tidak bisa membantu"


def message_requests_handoff(message: str) -> bool:
    text = (message or "").lower()
    return any(trigger in text for trigger in HANDOFF_TRIGGERS)


def reply_requests_handoff(reply: str) -> bool:
    return AI_UNCERTAINTY_PHRASE in (reply or "").lower()


def should_handoff(message: str, reply: str) -> bool:
    return message_requests_handoff(message) or reply_requests_handoff(reply)
