"""Per-request trace id, kept in a contextvar so concurrent requests never mix."""
from __future__ import annotations

import contextvars
import time
import uuid
from typing import Optional

_trace_id_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "trace_id", default=None
)


def get_trace_id() -> Optional[str]:
    """Return the trace id bound to the current context, or None."""
    return _trace_id_var.get()


def bind_trace_id(incoming: Optional[str] = None) -> str:
    """
    Bind a trace id to the current context and return it.

    Args:
        incoming: Trace id sent by the client; a new one is generated when empty

    Returns:
        The bound trace id. Generated ids are 16 hex chars of a uuid4
        followed by the last 6 digits of the unix timestamp.
    """
    trace_id = incoming or f"{uuid.uuid4().hex[:16]}{str(int(time.time()))[-6:]}"
    _trace_id_var.set(trace_id)
    return trace_id


def clear_trace_id() -> None:
    _trace_id_var.set(None)
