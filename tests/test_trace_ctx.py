from __future__ import annotations

import itertools

import pytest

from quicklog.trace import TraceCtx, trace_ctx


def _counter_ids():
    counter = itertools.count(1)
    return lambda: f"{next(counter):016x}"


def test_empty_trace_id_starts_a_root_span() -> None:
    ctx = trace_ctx("u1", "", "")

    assert ctx.actor_id == "u1"
    assert len(ctx.span_id) == 16
    assert ctx.trace_id == ctx.span_id
    assert ctx.parent_span_id == ""
    assert ctx.is_root


def test_root_span_discards_caller_parent() -> None:
    ctx = trace_ctx("u1", "", "deadbeefdeadbeef")

    assert ctx.parent_span_id == ""
    assert ctx.trace_id == ctx.span_id


def test_existing_trace_is_continued_unchanged() -> None:
    ctx = trace_ctx("u2", "trace-1", "parent-1", id_generator=_counter_ids())

    assert ctx == TraceCtx(
        actor_id="u2",
        trace_id="trace-1",
        parent_span_id="parent-1",
        span_id="0000000000000001",
    )


def test_existing_trace_without_parent_keeps_empty_parent() -> None:
    ctx = trace_ctx("u2", "trace-1")

    assert ctx.trace_id == "trace-1"
    assert ctx.parent_span_id == ""
    assert ctx.span_id != "trace-1"


def test_child_points_at_parent_span() -> None:
    ids = _counter_ids()
    root = trace_ctx("svc:a", id_generator=ids)
    child = root.child(id_generator=ids)

    assert child.trace_id == root.trace_id
    assert child.parent_span_id == root.span_id
    assert child.span_id == "0000000000000002"
    assert child.actor_id == "svc:a"
    assert root.child("svc:b").actor_id == "svc:b"


def test_trace_ctx_is_immutable() -> None:
    ctx = trace_ctx("u1")
    with pytest.raises(AttributeError):
        ctx.trace_id = "other"  # type: ignore[misc]
