"""Synchronous HTTP client for the quicklog ingestion API.

Two operations:
- `log_entry` posts one event to `/entries`, then attaches any tags.
- `tag_trace` posts one request per tag to `/tags`.

Nothing is retried or buffered. Every failure is raised to the caller as a
`QuicklogError` subclass.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from quicklog.config import QuicklogConfig, build_http_client
from quicklog.errors import ArgumentError, ConfigurationError, SerializationError, TransportError
from quicklog.schemas import EntryBody, TagBody, utc_now
from quicklog.trace import TraceCtx

logger = logging.getLogger(__name__)


class QuicklogClient:
    """Posts entries and tags to a quicklog collector."""

    def __init__(self, config: QuicklogConfig, client: httpx.Client | None = None) -> None:
        """Create a client.

        Args:
            config: Project, credentials and endpoint.
            client: Optional injected httpx client for testing / transport control.
                An injected client is left open by `close()`.
        """
        self._cfg = config
        self._owns_client = client is None
        self._client = client if client is not None else build_http_client()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> 'QuicklogClient':
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def log_entry(
            self,
            published: datetime | None,
            action: str,
            object: str,
            target: str,
            context: dict[str, Any] | None,
            trace: TraceCtx,
            *tags: str,
    ) -> None:
        """Create a quicklog entry, then tag its trace.

        Args:
            published: Event time; `None` means now (UTC).
            action: Type or other identifying event name.
            object: Identifier of the primary thing, often `kind:unique-id`.
            target: Identifier of the secondary thing (sometimes a destination).
            context: Extra information with string keys and JSON serializable values.
            trace: Actor and trace identifiers for this event.
            *tags: e.g. `name:value`, `value`, `name:value:with:colons`, `:value:with:colons`.

        Raises:
            ConfigurationError: project id, api key or api url is unset.
            SerializationError: the entry cannot be encoded as JSON.
            TransportError: the entry or a tag request failed.
            ArgumentError: a tag was empty.
        """
        self._check_config()

        content = _encode(
            EntryBody,
            project_id=self._cfg.project_id,
            published=published if published is not None else utc_now(),
            source=self._cfg.source,
            actor=trace.actor_id,
            type=action,
            object=object,
            target=target,
            context=context,
            trace_id=trace.trace_id,
            parent_span_id=trace.parent_span_id,
            span_id=trace.span_id,
        )
        self._post('/entries', content, trace_id=trace.trace_id)

        self.tag_trace(trace.trace_id, *tags)

    def tag_trace(self, trace_id: str, *tags: str) -> None:
        """Associate tags (`key:value` or bare `value`) with a trace.

        Non-empty tags are sent one request each, in order. Empty tags are
        skipped and reported with an `ArgumentError` once the others were sent.
        """
        if not tags:
            return
        self._check_config()
        if not trace_id:
            raise ArgumentError("'trace_id' must be a non-empty string")

        empty_tag = False
        for tag in tags:
            if not tag:
                empty_tag = True
                continue
            content = _encode(TagBody, project_id=self._cfg.project_id, trace_id=trace_id, tag=tag)
            self._post('/tags', content, trace_id=trace_id)

        if empty_tag:
            raise ArgumentError("'tags' must contain non-empty strings")

    def _check_config(self) -> None:
        missing = self._cfg.missing_field()
        if missing is not None:
            raise ConfigurationError(f'{missing} must be set in quicklog config')

    def _post(self, path: str, content: bytes, *, trace_id: str) -> None:
        url = f'{self._cfg.api_url.rstrip("/")}{path}'
        logger.debug('quicklog POST %s trace_id=%s', path, trace_id)
        try:
            resp = self._client.post(
                url,
                params={'api_key': self._cfg.api_key},
                content=content,
                headers={'Content-Type': 'application/json'},
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            message = f'POST {path} failed with status {status} {exc.response.reason_phrase}'.rstrip()
            body = _response_text(exc.response)
            if body:
                message = f'{message} : BODY = {body}'
            logger.debug('quicklog %s', message)
            raise TransportError(message, status_code=status, body=body or None) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug('quicklog POST %s failed: %r', path, exc)
            raise TransportError(f'POST {path} failed: {exc}') from exc


def _encode(model: type[BaseModel], **fields: Any) -> bytes:
    try:
        return model(**fields).model_dump_json().encode('utf-8')
    except (ValidationError, PydanticSerializationError) as exc:
        raise SerializationError(f'cannot encode {model.__name__}: {exc}') from exc


def _response_text(response: httpx.Response) -> str:
    try:
        response.read()
        return response.text.strip()
    except (httpx.HTTPError, httpx.StreamError):
        return ''
