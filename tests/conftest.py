# tests/conftest.py
import os
import logging
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Ensure test-friendly env (short timeouts, permissive CORS)
os.environ.setdefault("HTTP_TIMEOUT_SECONDS", "5")
os.environ.setdefault("HTTP_CONNECT_TIMEOUT_SECONDS", "2")
os.environ.setdefault("CORS_ALLOW_ORIGINS", "*")

# IMPORTANT: import the app after envs are set
from livechat_ai import main as main_module


@pytest_asyncio.fixture
async def app():
    return main_module.app

@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

@pytest.fixture
def caplog_info(caplog):
    caplog.set_level(logging.INFO)
    return caplog

@pytest.fixture
def openai_reply():
    # chat-completions body with the given assistant text
    def make(text):
        return {"choices": [{"message": {"role": "assistant", "content": text}}]}
    return make
