"""Wire bodies posted to the collector.

Both models serialize with `model_dump_json()`; the field names match the
collector's JSON keys.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator


class EntryBody(BaseModel):
    """One logged event, sent to `/entries`."""

    project_id: int
    published: datetime
    source: str = ''
    actor: str = ''
    type: str = ''
    object: str = ''
    target: str = ''
    context: dict[str, Any] | None = Field(default=None)
    trace_id: str = ''
    parent_span_id: str = ''
    span_id: str = ''

    @field_validator('context')
    @classmethod
    def check_finite_context(cls, context: dict[str, Any] | None) -> dict[str, Any] | None:
        if context is not None:
            _reject_non_finite(context)
        return context

    @field_serializer('published')
    def serialize_published(self, published: datetime) -> str:
        # Naive timestamps are taken as local time so the offset is always present.
        if published.tzinfo is None:
            published = published.astimezone()
        return published.isoformat()


class TagBody(BaseModel):
    """A single tag for a trace, sent to `/tags`."""

    project_id: int
    trace_id: str
    tag: str


def _reject_non_finite(value: Any) -> None:
    # JSON has no NaN or Infinity; pydantic would otherwise emit null.
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f'unsupported value: {value}')
    if isinstance(value, dict):
        for item in value.values():
            _reject_non_finite(item)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            _reject_non_finite(item)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
