"""Tests for structured logging context."""

from bookstore.logging import (
    RequestContextFilter,
    clear_request_context,
    generate_request_id,
    get_request_id,
    set_request_context,
)


def test_generated_request_ids_are_compact_and_unique():
    ids = {generate_request_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(len(request_id) == 14 for request_id in ids)


def test_request_context_is_added_to_events():
    set_request_context(request_id="req-1", operation="QueryBook")
    try:
        event = RequestContextFilter()(None, "info", {"event": "hello"})
    finally:
        clear_request_context()

    assert event["request_id"] == "req-1"
    assert event["graphql_operation"] == "QueryBook"


def test_clear_request_context():
    set_request_context()
    assert get_request_id() is not None

    clear_request_context()

    assert get_request_id() is None
    assert RequestContextFilter()(None, "info", {"event": "x"}) == {"event": "x"}
