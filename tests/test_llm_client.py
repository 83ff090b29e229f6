"""Tests for the Anthropic Messages client (provider faked with httpx.MockTransport)."""
from __future__ import annotations

import json

import httpx
import pytest

from copywriter.core.config import Settings
from copywriter.services.llm_client import LLMClient, LLMClientError


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        anthropic_api_key="test-key",
        anthropic_base_url="https://llm.test/v1/messages",
        anthropic_model="test-model",
        llm_max_tokens=256,
    )


def _client(settings, handler) -> LLMClient:
    return LLMClient(settings=settings, transport=httpx.MockTransport(handler))


class TestRequest:
    """Outbound request shape."""

    @pytest.mark.asyncio
    async def test_posts_prompt_as_single_user_message(self, settings):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["method"] = request.method
            captured["url"] = str(request.url)
            captured["headers"] = request.headers
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"content": [{"type": "text", "text": "Hi"}]})

        await _client(settings, handler).generate("Write a tagline for Acme Suite.")

        assert captured["method"] == "POST"
        assert captured["url"] == "https://llm.test/v1/messages"
        assert captured["headers"]["x-api-key"] == "test-key"
        assert captured["headers"]["anthropic-version"] == "2023-06-01"
        assert captured["headers"]["content-type"] == "application/json"
        assert captured["body"] == {
            "model": "test-model",
            "max_tokens": 256,
            "messages": [{"role": "user", "content": "Write a tagline for Acme Suite."}],
        }

    @pytest.mark.asyncio
    async def test_returns_first_text_block(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={"content": [{"type": "text", "text": "First"}, {"type": "text", "text": "Second"}]},
            )

        assert await _client(settings, handler).generate("prompt") == "First"

    @pytest.mark.asyncio
    async def test_unconfigured_client_refuses_to_call(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={"content": [{"text": "x"}]})

        client = _client(Settings(_env_file=None, anthropic_api_key=None), handler)

        assert client.is_configured is False
        with pytest.raises(LLMClientError):
            await client.generate("prompt")
        assert calls == []


class TestFailures:
    """Every provider failure surfaces as LLMClientError."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 401, 429, 500, 529])
    async def test_non_success_status(self, settings, status):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, json={"error": {"message": "nope"}})

        with pytest.raises(LLMClientError):
            await _client(settings, handler).generate("prompt")

    @pytest.mark.asyncio
    async def test_transport_error(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(LLMClientError):
            await _client(settings, handler).generate("prompt")

    @pytest.mark.asyncio
    async def test_timeout(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(LLMClientError, match="timed out"):
            await _client(settings, handler).generate("prompt")

    @pytest.mark.asyncio
    async def test_body_is_not_json(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>gateway</html>")

        with pytest.raises(LLMClientError):
            await _client(settings, handler).generate("prompt")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"content": []},
            {"content": [{"type": "tool_use", "id": "x"}]},
            {"content": [{"text": 42}]},
            {"content": [{"text": ""}]},
            ["not", "an", "object"],
        ],
    )
    async def test_malformed_body(self, settings, body):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=body)

        with pytest.raises(LLMClientError):
            await _client(settings, handler).generate("prompt")
