"""Tests for trace id context and logging setup."""
from __future__ import annotations

import logging

from starlette.responses import Response

from copywriter.core.logging_config import ErrorOnlyFilter, TraceIdFilter, _dated_namer
from copywriter.core.middleware import (
    COPY_SOURCE_HEADER,
    COPY_TYPE_HEADER,
    _generation_fields,
)
from copywriter.core.trace_context import bind_trace_id, clear_trace_id, get_trace_id


def _record(level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("test", level, __file__, 1, "message", None, None)


class TestTraceContext:
    """contextvar helpers."""

    def test_bind_incoming_and_clear(self):
        assert bind_trace_id("abc") == "abc"
        assert get_trace_id() == "abc"

        clear_trace_id()
        assert get_trace_id() is None

    def test_bind_generates_when_missing(self):
        try:
            first = bind_trace_id()
            second = bind_trace_id("")

            assert first != second
            assert len(first) == 22
            assert get_trace_id() == second
        finally:
            clear_trace_id()


class TestFilters:
    """Log record filters."""

    def test_trace_id_injected(self):
        bind_trace_id("req-1")
        record = _record()
        try:
            assert TraceIdFilter().filter(record) is True
            assert record.trace_id == "req-1"
        finally:
            clear_trace_id()

    def test_trace_id_placeholder_outside_request(self):
        record = _record()
        TraceIdFilter().filter(record)

        assert record.trace_id == "N/A"

    def test_error_only(self):
        assert ErrorOnlyFilter().filter(_record(logging.ERROR)) is True
        assert ErrorOnlyFilter().filter(_record(logging.WARNING)) is False


class TestAccessLogFields:
    """Copy type and source appended to access lines."""

    def test_generation_fields_present(self):
        response = Response(
            headers={COPY_TYPE_HEADER: "tagline", COPY_SOURCE_HEADER: "fallback"}
        )

        assert _generation_fields(response) == " copy_type=tagline source=fallback"

    def test_no_fields_for_other_routes(self):
        assert _generation_fields(Response()) == ""


class TestRotatedFileNames:
    """Rotated log file naming."""

    def test_date_moved_before_extension(self):
        assert _dated_namer("/var/log/app-info.log.2024-12-23") == "/var/log/app-info-2024-12-23.log"

    def test_other_names_unchanged(self):
        assert _dated_namer("/var/log/app-info.log") == "/var/log/app-info.log"
