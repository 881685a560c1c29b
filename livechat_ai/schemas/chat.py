from pydantic import BaseModel, Field
from typing import List, Literal, Optional

# fields the chat widget may leave out are optional here;
# chat_service decides what is missing so the visitor still gets an apology


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    message: Optional[str] = None
    conversation_id: Optional[str] = None
    provider: Optional[str] = None
    api_key: Optional[str] = None
    model: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    system_prompt: str = ""
    conversation_history: List[ChatMessage] = Field(default_factory=list)
    knowledge_base: str = ""


class ChatResponse(BaseModel):
    response: str
    should_handoff: bool
    provider: str
    model: str
    conversation_id: Optional[str] = None


class ChatErrorResponse(BaseModel):
    error: str
    response: str
    should_handoff: bool = True
    conversation_id: Optional[str] = None
