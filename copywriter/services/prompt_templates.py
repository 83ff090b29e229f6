"""Prompt templates for marketing copy generation.

One template per copy type. Every template shares the same body so the
fallback generator can recover the product name from the "for <name>."
sentence:

    <instruction> <product>. Target audience: ... Tone: ... Key benefits: ...
    [Additional context: ...]

    <closing instruction>
"""
from __future__ import annotations

import logging
from typing import Dict

from copywriter.schemas.copy_schemas import DEFAULT_COPY_TYPE, CopyRequest, CopyType

logger = logging.getLogger(__name__)

_BODY = (
    "Target audience: {target_audience}. Tone: {tone}. "
    "Key benefits: {key_benefits}. {additional}\n\n"
)

PROMPT_TEMPLATES: Dict[CopyType, str] = {
    CopyType.website_headline: (
        "Create a compelling website headline for {product}. " + _BODY
        + "Provide 3 headline options with brief explanations."
    ),
    CopyType.product_description: (
        "Write a professional product description for {product}. " + _BODY
        + "Include features, benefits, and a call to action."
    ),
    CopyType.email_campaign: (
        "Create an email campaign copy for {product}. " + _BODY
        + "Include subject line, opening, body, and call to action."
    ),
    CopyType.social_media_post: (
        "Write a social media post for {product}. " + _BODY
        + "Provide 3 versions optimized for different platforms."
    ),
    CopyType.ad_copy: (
        "Create ad copy for {product}. " + _BODY
        + "Include headline, body text, and call to action. Keep it concise and impactful."
    ),
    CopyType.blog_intro: (
        "Write an engaging blog introduction about {product}. " + _BODY
        + "Hook the reader and establish the value proposition."
    ),
    CopyType.sales_letter: (
        "Create a sales letter for {product}. " + _BODY
        + "Use proven copywriting frameworks like AIDA or PAS."
    ),
    CopyType.tagline: (
        "Create memorable taglines/slogans for {product}. " + _BODY
        + "Provide 5 options that are catchy, memorable, and on-brand."
    ),
}

ADDITIONAL_CONTEXT_PREFIX = "Additional context: "


def resolve_copy_type(value: str) -> CopyType:
    """Return the CopyType for a tag, or the headline type when it is unknown."""
    try:
        return CopyType(value)
    except ValueError:
        logger.info(f"[PROMPT] Unknown copy type {value!r}, using {DEFAULT_COPY_TYPE.value}")
        return DEFAULT_COPY_TYPE


def build_copy_prompt(request: CopyRequest) -> str:
    """
    Build the generation prompt for a request.

    Free-text fields are interpolated as-is, empty strings included. The
    "Additional context" clause only appears when additional_info is
    non-empty.

    Args:
        request: Form submission

    Returns:
        Prompt string for the LLM (and the fallback generator)
    """
    copy_type = resolve_copy_type(request.type)
    additional = (
        f"{ADDITIONAL_CONTEXT_PREFIX}{request.additional_info}"
        if request.additional_info
        else ""
    )
    prompt = PROMPT_TEMPLATES[copy_type].format(
        product=request.product,
        target_audience=request.target_audience,
        tone=request.tone,
        key_benefits=request.key_benefits,
        additional=additional,
    )
    logger.debug(f"[PROMPT] Built {copy_type.value} prompt ({len(prompt)} chars)")
    return prompt
