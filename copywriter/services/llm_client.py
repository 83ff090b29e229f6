from __future__ import annotations

import json
import logging
from time import perf_counter
from typing import Any, Dict, Optional

import httpx

from copywriter.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class LLMClientError(RuntimeError):
    """Raised when the LLM provider returns an error."""


class LLMClient:
    """Minimal client for the Anthropic Messages endpoint."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._timeout = httpx.Timeout(self.settings.llm_timeout)
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.settings.anthropic_api_key)

    def _build_request(self, prompt: str) -> tuple[Dict[str, str], Dict[str, Any]]:
        headers = {
            "Content-Type": "application/json",
            "x-api-key": self.settings.anthropic_api_key or "",
            "anthropic-version": self.settings.anthropic_version,
        }
        payload: Dict[str, Any] = {
            "model": self.settings.anthropic_model,
            "max_tokens": self.settings.llm_max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        return headers, payload

    async def generate(self, prompt: str) -> str:
        """
        Send the prompt as a single user message and return the first text block.

        No retries: any failure raises LLMClientError for the caller to handle.
        """
        if not self.is_configured:
            raise LLMClientError("LLM API key is not configured")

        headers, payload = self._build_request(prompt)

        # Log only the model and the start of the prompt
        safe_payload = {
            "model": payload["model"],
            "max_tokens": payload["max_tokens"],
            "user_message": prompt[:80],
        }
        logger.info(
            "[LLM] request: url=%s, payload=%s",
            self.settings.anthropic_base_url,
            json.dumps(safe_payload, ensure_ascii=False),
        )

        start = perf_counter()
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self.settings.anthropic_base_url,
                    headers=headers,
                    json=payload,
                )
        except httpx.TimeoutException as exc:
            raise LLMClientError("LLM request timed out") from exc
        except httpx.HTTPError as exc:
            raise LLMClientError(f"LLM transport error: {exc}") from exc

        duration_ms = (perf_counter() - start) * 1000
        logger.info(
            "[LLM] response: status=%s, duration=%.2f ms, body_snippet=%s",
            response.status_code,
            duration_ms,
            response.text[:200],
        )

        if not response.is_success:
            raise LLMClientError(f"LLM request failed with status {response.status_code}")

        text = self._extract_text(response)
        if not text:
            raise LLMClientError("LLM response did not contain text output")
        return text

    @staticmethod
    def _extract_text(response: httpx.Response) -> Optional[str]:
        """Return content[0].text from a Messages API response."""
        try:
            data = response.json()
        except ValueError as exc:
            raise LLMClientError("Failed to parse LLM JSON response") from exc

        if not isinstance(data, dict):
            return None
        content = data.get("content")
        if isinstance(content, list) and content:
            first = content[0]
            if isinstance(first, dict) and isinstance(first.get("text"), str):
                return first["text"]
        return None


def get_llm_client() -> LLMClient:
    """Create an LLM client bound to the current settings."""
    return LLMClient()
