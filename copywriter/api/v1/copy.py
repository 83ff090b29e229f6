"""Copy generation API endpoint.

POST /api/generate
- input: copy type, product, audience, benefits, tone, optional extra context
- output: {"copy": "..."} or, on any failure, 500 {"error": "Failed to generate copy"}
"""
from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from copywriter.core.middleware import COPY_SOURCE_HEADER, COPY_TYPE_HEADER
from copywriter.schemas.copy_schemas import CopyRequest, CopyResponse, ErrorResponse
from copywriter.services.copy_service import generate_marketing_copy

logger = logging.getLogger(__name__)

GENERATE_FAILED_MESSAGE = "Failed to generate copy"

router = APIRouter(prefix="/api", tags=["copy"])


def generation_failed_response() -> JSONResponse:
    """Generic 500 body; details stay in the logs."""
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=GENERATE_FAILED_MESSAGE).model_dump(),
    )


@router.post(
    "/generate",
    response_model=CopyResponse,
    responses={500: {"model": ErrorResponse}},
)
async def generate(request: CopyRequest, response: Response):
    """
    Generate marketing copy for a form submission.

    Request example:
        ```json
        {
            "type": "tagline",
            "product": "Acme Suite",
            "targetAudience": "SMBs",
            "keyBenefits": "fast, cheap",
            "tone": "playful"
        }
        ```
    """
    logger.info("[API] POST /api/generate - Request received")
    start_time = time.time()

    try:
        generated = await generate_marketing_copy(request)
    except Exception as e:
        execution_time = time.time() - start_time
        logger.error(
            f"[API] ✗ Request failed after {execution_time:.3f}s: {e}",
            exc_info=True,
        )
        return generation_failed_response()

    execution_time = time.time() - start_time
    response.headers[COPY_TYPE_HEADER] = generated.copy_type.value
    response.headers[COPY_SOURCE_HEADER] = generated.source
    logger.info(
        f"[API] ✓ Request processed in {execution_time:.3f}s: "
        f"type={generated.copy_type.value}, source={generated.source}, {len(generated.text)} chars"
    )
    return CopyResponse(copy_text=generated.text)
