from fastapi import APIRouter

from livechat_ai.providers.factory import CHAT_PROVIDERS, TEST_PROVIDERS

router = APIRouter(tags=["meta"])

@router.get("/health")
def health() -> dict:
    return {
        "status": "ok",
        "chat_providers": sorted(CHAT_PROVIDERS),
        "test_providers": sorted(TEST_PROVIDERS),
    }
