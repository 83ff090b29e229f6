"""FastAPI application entry point."""
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from copywriter.api.v1 import copy as copy_router
from copywriter.core.config import get_settings
from copywriter.core.logging_config import init_logging
from copywriter.core.middleware import TraceIdMiddleware

init_logging()
logger = logging.getLogger(__name__)

FORM_PAGE = Path(__file__).parent / "static" / "index.html"

settings = get_settings()
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    AI Copywriting Service

    Generates marketing copy (headlines, product descriptions, emails,
    social posts, ad copy, blog intros, sales letters, taglines) with the
    Anthropic Messages API, or with canned templates when no API key is set.

    ## Main API

    - `POST /api/generate` - generate copy for one form submission
    - `GET /` - copy form
    """,
    license_info={
        "name": "MIT",
    },
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(TraceIdMiddleware)

app.include_router(copy_router.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed or incomplete bodies get the generic failure, not the parse error."""
    logger.warning(
        f"[API] ✗ Invalid request body for {request.method} {request.url.path}: {exc.errors()}"
    )
    return copy_router.generation_failed_response()


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": settings.app_version}


@app.get("/", include_in_schema=False)
async def form_page() -> FileResponse:
    """Serve the copy form."""
    return FileResponse(FORM_PAGE, media_type="text/html")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("copywriter.main:app", host="0.0.0.0", port=8000, reload=True)
