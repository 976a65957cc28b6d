"""Unit tests for request tracing context."""

from stellar_explain.core.tracing import (
    bind_contextvars_to_logging,
    clear_tracing_context,
    get_request_id,
    get_trace_parent,
    get_tracing_headers,
    set_request_id,
    set_trace_parent,
)


def test_set_request_id_generates_when_missing():
    try:
        generated = set_request_id(None)
        assert generated
        assert get_request_id() == generated
    finally:
        clear_tracing_context()


def test_tracing_headers():
    try:
        set_request_id("req-1")
        set_trace_parent("00-trace-span-01")
        assert get_tracing_headers() == {
            "X-Request-ID": "req-1",
            "traceparent": "00-trace-span-01",
        }
        assert bind_contextvars_to_logging() == {
            "request_id": "req-1",
            "trace_parent": "00-trace-span-01",
        }
    finally:
        clear_tracing_context()


def test_clear_tracing_context():
    set_request_id("req-2")
    set_trace_parent("")
    assert get_trace_parent() is None
    clear_tracing_context()
    assert get_request_id() is None
    assert get_tracing_headers() == {}
