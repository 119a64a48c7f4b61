import asyncio
import json

import httpx
import pytest

from app.services.generation_client import GenerationClient, GenerationClientError
from routing.payloads import EditModelPayload

API_URL = "https://backend.test/generate"

PAYLOAD = EditModelPayload(
    model="fal-ai/nano-banana/edit",
    prompt="soft blush",
    image_url="https://img/x.png",
    strength=0.12,
)


def _client(handler, api_key="secret"):
    return GenerationClient(api_url=API_URL, api_key=api_key, transport=httpx.MockTransport(handler))


def test_dispatch_posts_wire_json_with_bearer_token():
    seen = {}

    def handler(request):
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"result": {"image_url": "https://cdn/out.png"}})

    result = asyncio.run(_client(handler).dispatch(PAYLOAD))

    assert seen["auth"] == "Bearer secret"
    assert seen["body"] == PAYLOAD.to_wire()
    assert result["image_url"] == "https://cdn/out.png"
    assert result["raw_response"] == {"result": {"image_url": "https://cdn/out.png"}}


def test_flat_response_is_accepted():
    def handler(request):
        return httpx.Response(200, json={"image_url": "https://cdn/flat.png"})

    result = asyncio.run(_client(handler, api_key=None).dispatch(PAYLOAD))
    assert result["image_url"] == "https://cdn/flat.png"


def test_error_status_raises():
    def handler(request):
        return httpx.Response(500, json={"error": "boom"})

    with pytest.raises(GenerationClientError):
        asyncio.run(_client(handler).dispatch(PAYLOAD))


def test_non_json_response_raises():
    def handler(request):
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(GenerationClientError):
        asyncio.run(_client(handler).dispatch(PAYLOAD))


def test_transport_failure_raises():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(GenerationClientError):
        asyncio.run(_client(handler).dispatch(PAYLOAD))


def test_missing_url_is_a_configuration_error(monkeypatch):
    monkeypatch.delenv("GENERATION_API_URL", raising=False)
    with pytest.raises(RuntimeError):
        GenerationClient()
