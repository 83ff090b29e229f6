"""Trace id propagation and access logging for copy requests.

Access lines for /api/generate also carry the resolved copy type and whether
the LLM or the template fallback produced the text. The route reports both
through response headers, since context variables set inside the endpoint
do not flow back out to this middleware.
"""
from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from copywriter.core.trace_context import bind_trace_id, clear_trace_id

logger = logging.getLogger(__name__)

TRACE_ID_HEADER = "X-Trace-Id"
COPY_TYPE_HEADER = "X-Copy-Type"
COPY_SOURCE_HEADER = "X-Copy-Source"


def _generation_fields(response: Response) -> str:
    copy_type = response.headers.get(COPY_TYPE_HEADER)
    source = response.headers.get(COPY_SOURCE_HEADER)
    if not copy_type and not source:
        return ""
    return f" copy_type={copy_type or '-'} source={source or '-'}"


class TraceIdMiddleware(BaseHTTPMiddleware):
    """Binds X-Trace-Id for the request, echoes it back and writes the access log."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        trace_id = bind_trace_id(request.headers.get(TRACE_ID_HEADER))
        start_time = time.time()
        client_ip = request.client.host if request.client else "unknown"

        try:
            response = await call_next(request)

            latency_ms = int((time.time() - start_time) * 1000)
            response.headers[TRACE_ID_HEADER] = trace_id
            logger.info(
                f"ACCESS {request.method} {request.url.path} status={response.status_code} "
                f"latency_ms={latency_ms} client_ip={client_ip} "
                f"trace_id={trace_id}{_generation_fields(response)}"
            )
            return response

        except Exception as e:
            latency_ms = int((time.time() - start_time) * 1000)
            logger.error(
                f"ACCESS {request.method} {request.url.path} status=500 "
                f"latency_ms={latency_ms} client_ip={client_ip} "
                f"trace_id={trace_id} error={e}",
                exc_info=True,
            )
            raise

        finally:
            clear_trace_id()
