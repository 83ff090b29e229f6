"""Service for marketing copy generation.

- Builds the prompt for the requested copy type
- Calls the LLM when an API key is configured
- Falls back to canned templates when there is no key or the call fails;
  provider errors never reach the user
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from copywriter.schemas.copy_schemas import CopyRequest, CopyType
from copywriter.services.fallback_copy import generate_fallback_copy
from copywriter.services.llm_client import LLMClientError, get_llm_client
from copywriter.services.prompt_templates import build_copy_prompt, resolve_copy_type

logger = logging.getLogger(__name__)

SOURCE_LLM = "llm"
SOURCE_FALLBACK = "fallback"


@dataclass
class GeneratedCopy:
    """Generated copy and how it was produced."""

    text: str
    copy_type: CopyType  # resolved type, after the unknown-tag default
    llm_used: bool

    @property
    def source(self) -> str:
        return SOURCE_LLM if self.llm_used else SOURCE_FALLBACK


async def generate_copy(prompt: str) -> tuple[str, bool]:
    """
    Generate copy for a prompt, best-effort against the LLM.

    Args:
        prompt: Fully built prompt

    Returns:
        Tuple of (copy_text, llm_used)
        - copy_text: LLM output, or the fallback copy when the key is missing
          or the call fails
        - llm_used: Whether the LLM produced the text
    """
    llm_client = get_llm_client()
    if not llm_client.is_configured:
        logger.info("[COPY_SERVICE] LLM not configured, using fallback")
        return generate_fallback_copy(prompt), False

    try:
        logger.info(f"[COPY_SERVICE] Calling LLM: {llm_client.settings.anthropic_model}")
        copy_text = await llm_client.generate(prompt)
        logger.info(f"[COPY_SERVICE] ✓ LLM generation successful: {len(copy_text)} chars")
        return copy_text, True
    except LLMClientError as e:
        logger.warning(f"[COPY_SERVICE] ⚠ LLM error: {e}, falling back to template")
    except Exception as e:
        logger.error(
            f"[COPY_SERVICE] ✗ Unexpected error during LLM generation: {e}",
            exc_info=True,
        )

    return generate_fallback_copy(prompt), False


async def generate_marketing_copy(request: CopyRequest) -> GeneratedCopy:
    """
    Build the prompt for a form submission and generate the copy.

    Args:
        request: Form submission

    Returns:
        GeneratedCopy with the text, the resolved copy type and the source
    """
    copy_type = resolve_copy_type(request.type)
    logger.info(
        f"[COPY_SERVICE] Input: type={copy_type.value}, product={request.product[:50]!r}, "
        f"tone={request.tone}, additional_info={'yes' if request.additional_info else 'no'}"
    )
    prompt = build_copy_prompt(request)
    copy_text, llm_used = await generate_copy(prompt)
    return GeneratedCopy(text=copy_text, copy_type=copy_type, llm_used=llm_used)
