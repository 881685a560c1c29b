# tests/test_api_connection.py
import json
import pytest
import respx
import httpx

OPENAI_URL = "https://api.openai.com/v1/chat/completions"
GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-flash:generateContent"
TEST_MESSAGE = "Hello, this is a test message to verify the connection."
MISSING = "Missing required parameters: provider, api_key, and model are required"

@pytest.mark.asyncio
@respx.mock
async def test_connection_ok(client, openai_reply):
    route = respx.post(OPENAI_URL).mock(return_value=httpx.Response(200, json=openai_reply("Hi there!")))
    r = await client.post(
        "/test-ai-connection",
        json={"provider": "openai", "api_key": "sk-admin", "model": "gpt-4o-mini", "test_message": "ignored"},
    )
    assert r.status_code == 200
    assert r.json() == {"success": True, "response": "Hi there!", "provider": "openai", "model": "gpt-4o-mini"}
    sent = json.loads(route.calls.last.request.content)
    assert sent["messages"][-1] == {"role": "user", "content": TEST_MESSAGE}
    assert sent["temperature"] == 0.7
    assert sent["max_tokens"] == 50

@pytest.mark.asyncio
@respx.mock
async def test_connection_missing_reply_still_succeeds(client):
    respx.post("https://api.deepseek.com/chat/completions").mock(return_value=httpx.Response(200, json={}))
    r = await client.post("/test-ai-connection", json={"provider": "deepseek", "api_key": "k", "model": "deepseek-chat"})
    assert r.status_code == 200
    assert r.json()["response"] == "Test successful"

@pytest.mark.asyncio
@respx.mock
async def test_connection_gemini(client):
    route = respx.post(url__startswith=GEMINI_URL).mock(
        return_value=httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": "hi"}]}}]})
    )
    r = await client.post("/test-ai-connection", json={"provider": "gemini", "api_key": "g-key", "model": "gemini-1.5-flash"})
    assert r.status_code == 200
    assert r.json()["response"] == "hi"
    sent = route.calls.last.request
    assert sent.url.params["key"] == "g-key"
    assert "authorization" not in sent.headers
    body = json.loads(sent.content)
    assert TEST_MESSAGE in body["contents"][0]["parts"][0]["text"]
    assert body["generationConfig"] == {"temperature": 0.7, "maxOutputTokens": 50}

@pytest.mark.asyncio
@respx.mock
async def test_connection_gemini_empty_candidates(client):
    respx.post(url__startswith=GEMINI_URL).mock(return_value=httpx.Response(200, json={"candidates": []}))
    r = await client.post("/test-ai-connection", json={"provider": "gemini", "api_key": "g-key", "model": "gemini-1.5-flash"})
    assert r.status_code == 200
    assert r.json()["response"] == "Test successful"

@pytest.mark.parametrize(
    "body",
    [
        {"provider": "openai", "api_key": "", "model": "gpt-4o-mini"},
        {"provider": "openai", "model": "gpt-4o-mini"},
        {"provider": "", "api_key": "k", "model": "gpt-4o-mini"},
        {"provider": "openai", "api_key": "k"},
    ],
)
@pytest.mark.asyncio
@respx.mock
async def test_connection_missing_parameters(client, body):
    r = await client.post("/test-ai-connection", json=body)
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": MISSING}
    assert respx.calls.call_count == 0

@pytest.mark.asyncio
@respx.mock
async def test_connection_unsupported_provider(client):
    r = await client.post("/test-ai-connection", json={"provider": "claude", "api_key": "k", "model": "m"})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Unsupported AI provider: claude"}
    assert respx.calls.call_count == 0

@pytest.mark.asyncio
@respx.mock
async def test_connection_upstream_error_message(client):
    # Admin sees the provider's own reason and status.
    respx.post(OPENAI_URL).mock(
        return_value=httpx.Response(401, json={"error": {"message": "Incorrect API key provided"}})
    )
    r = await client.post("/test-ai-connection", json={"provider": "openai", "api_key": "bad", "model": "gpt-4o-mini"})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Incorrect API key provided", "status_code": 401}

@pytest.mark.asyncio
@respx.mock
async def test_connection_network_error(client):
    respx.post(OPENAI_URL).mock(side_effect=httpx.ConnectError("name resolution failed"))
    r = await client.post("/test-ai-connection", json={"provider": "openai", "api_key": "k", "model": "gpt-4o-mini"})
    assert r.status_code == 400
    data = r.json()
    assert data["success"] is False
    assert "name resolution failed" in data["error"]

@pytest.mark.asyncio
async def test_connection_malformed_json_body(client):
    r = await client.post("/test-ai-connection", content=b"[", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    data = r.json()
    assert data["success"] is False
    assert data["error"].startswith("Invalid request body")

@pytest.mark.asyncio
@respx.mock
async def test_connection_gemini_key_never_logged(client, caplog_info):
    # The gemini key rides in the URL; no logger (ours or httpx's) may print it.
    respx.post(url__startswith=GEMINI_URL).mock(
        return_value=httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": "hi"}]}}]})
    )
    r = await client.post(
        "/test-ai-connection",
        json={"provider": "gemini", "api_key": "AIzaSECRETKEY", "model": "gemini-1.5-flash"},
    )
    assert r.status_code == 200
    assert caplog_info.records
    assert all("AIzaSECRETKEY" not in rec.getMessage() for rec in caplog_info.records)
    assert "AIzaSECRETKEY" not in caplog_info.text
