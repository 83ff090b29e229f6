"""Copy generation request and response schemas.

The JSON surface keeps the camelCase field names the form posts
(targetAudience, keyBenefits, additionalInfo); Python code reads the
snake_case attributes.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CopyType(str, Enum):
    """Copy categories. The first member is the default for unknown tags."""

    website_headline = "website-headline"
    product_description = "product-description"
    email_campaign = "email-campaign"
    social_media_post = "social-media-post"
    ad_copy = "ad-copy"
    blog_intro = "blog-intro"
    sales_letter = "sales-letter"
    tagline = "tagline"


DEFAULT_COPY_TYPE = CopyType.website_headline


class CopyTone(str, Enum):
    """Tones offered by the form. The service interpolates any tone string."""

    professional = "professional"
    casual = "casual"
    friendly = "friendly"
    authoritative = "authoritative"
    playful = "playful"
    urgent = "urgent"
    inspirational = "inspirational"


class CopyRequest(BaseModel):
    """Request schema for copy generation."""

    type: str = Field(..., description="Copy type tag; unknown tags use website-headline")
    product: str = Field(..., description="Product or service name")
    target_audience: str = Field(..., alias="targetAudience", description="Target audience")
    key_benefits: str = Field(..., alias="keyBenefits", description="Key benefits")
    tone: str = Field(..., description="Tone of voice, e.g. professional or playful")
    additional_info: Optional[str] = Field(
        default="", alias="additionalInfo", description="Optional extra context"
    )

    @field_validator(
        "type", "product", "target_audience", "key_benefits", "tone", "additional_info",
        mode="before",
    )
    @classmethod
    def scalar_to_str(cls, value):
        """Accept JSON numbers and booleans and interpolate them as text ("123", "true")."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value

    class Config:
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "type": "tagline",
                "product": "Acme Suite",
                "targetAudience": "SMBs",
                "keyBenefits": "fast, cheap",
                "tone": "playful",
                "additionalInfo": "",
            },
        }


class CopyResponse(BaseModel):
    """Successful generation."""

    # "copy" would shadow BaseModel.copy, so the attribute is aliased
    copy_text: str = Field(..., alias="copy", description="Generated marketing copy")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "copy": "**Option 1:** Acme Suite - Work Smarter, Achieve More\n...",
            },
        }


class ErrorResponse(BaseModel):
    """Generic failure; details are logged, never returned."""

    error: str = Field(..., description="Error message")
