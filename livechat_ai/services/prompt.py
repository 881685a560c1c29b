from typing import Dict, Iterable, List

# Context window = system prompt + conversation history + user message

KNOWLEDGE_BASE_INSTRUCTION = (
    "Gunakan informasi dari knowledge base di atas untuk menjawab pertanyaan "
    "dengan lebih akurat dan spesifik."
)


def enhance_system_prompt(system: str, knowledge_base: str = "") -> str:
    if not knowledge_base:
        return system
    return f"{system}\n\nKnowledge Base:\n{knowledge_base}\n\n{KNOWLEDGE_BASE_INSTRUCTION}"


def build_messages(
    system: str,
    user: str,
    history: Iterable[Dict[str, str]] | None = None,
) -> List[Dict[str, str]]:
    # order is the model's context: system first, history oldest->newest, current message last
    messages: List[Dict[str, str]] = [{"role": "system", "content": system}]
    for turn in history or []:
        messages.append({"role": turn["role"], "content": turn["content"]})
    messages.append({"role": "user", "content": user})
    return messages
