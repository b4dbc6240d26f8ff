"""Trace context propagation.

A `TraceCtx` bundles who did something (actor) with where it sits in a trace
(trace id, parent span id, span id). Build one per logical unit of work and
hand it to downstream calls (or back in a response) so they can continue the
same trace.
"""

from __future__ import annotations

from dataclasses import dataclass

from quicklog.ids import IdGenerator, generate_id


@dataclass(frozen=True)
class TraceCtx:
    """Identifiers for one span of a trace.

    Attributes:
        actor_id: Who performed the action, e.g. `user:42`.
        trace_id: Groups every span of one logical request.
        parent_span_id: Span this one descends from; empty for a root span.
        span_id: Unique to this context.
    """

    actor_id: str
    trace_id: str
    parent_span_id: str
    span_id: str

    @property
    def is_root(self) -> bool:
        return not self.parent_span_id

    def child(self, actor_id: str | None = None, *, id_generator: IdGenerator | None = None) -> 'TraceCtx':
        """Continue this trace with a new span whose parent is this span."""
        return trace_ctx(
            self.actor_id if actor_id is None else actor_id,
            self.trace_id,
            self.span_id,
            id_generator=id_generator,
        )


def trace_ctx(
        actor_id: str,
        trace_id: str = '',
        parent_span_id: str = '',
        *,
        id_generator: IdGenerator | None = None,
) -> TraceCtx:
    """Create a context with a freshly generated span id.

    An empty `trace_id` starts a new trace: the new span id doubles as the
    trace id and any `parent_span_id` passed in is dropped.

    Args:
        actor_id: Actor identifier.
        trace_id: Existing trace id to continue, or empty for a new trace.
        parent_span_id: Parent span id within `trace_id`.
        id_generator: Optional generator; defaults to the process-wide one.

    Returns:
        A new immutable TraceCtx.
    """
    span_id = (id_generator or generate_id)()
    if not trace_id:
        trace_id = span_id
        parent_span_id = ''
    return TraceCtx(
        actor_id=actor_id,
        trace_id=trace_id,
        parent_span_id=parent_span_id,
        span_id=span_id,
    )
