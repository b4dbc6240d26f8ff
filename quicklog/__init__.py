"""quicklog: event logging and trace tagging client.

Typical use configures one process-wide client at startup:

    >>> import quicklog
    >>> quicklog.configure(project_id=12345, api_key='my-api-key', source='my-program')
    >>> ctx = quicklog.trace_ctx('user:me')
    >>> quicklog.log_entry(None, 'a-type', 'object:1', 'target:2', {'key': 'value'}, ctx, 'name1:value1')

Code that needs several configurations, or test isolation, can build
`QuicklogClient` instances directly instead.

The collector takes the api key as a query parameter, so httpx's own INFO
request log (logger `httpx`) prints it with the URL. Raise that logger to
WARNING where logs leave the process:

    >>> logging.getLogger('httpx').setLevel(logging.WARNING)
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

import httpx

from quicklog.client import QuicklogClient
from quicklog.config import DEFAULT_API_URL, QuicklogConfig, QuicklogSettings, build_http_client
from quicklog.errors import (
    ArgumentError,
    ConfigurationError,
    QuicklogError,
    SerializationError,
    TransportError,
)
from quicklog.ids import IdGenerator, RandomIdGenerator, generate_id
from quicklog.trace import TraceCtx, trace_ctx

logging.getLogger(__name__).addHandler(logging.NullHandler())

_default_client: QuicklogClient | None = None


def configure(
        config: QuicklogConfig | None = None,
        *,
        client: httpx.Client | None = None,
        **fields: Any,
) -> QuicklogClient:
    """Set up the process-wide client used by `log_entry` and `tag_trace`.

    Args:
        config: Full config. When omitted, built from `fields`
            (`project_id`, `api_key`, `source`, `api_url`), or from
            `QUICKLOG_*` environment variables if no fields are given either.
        client: Optional httpx client; defaults to `build_http_client()`.

    Returns:
        The new default client.
    """
    global _default_client

    if config is None:
        config = QuicklogConfig(**fields) if fields else QuicklogConfig.from_env()
    elif fields:
        raise TypeError('pass either a QuicklogConfig or keyword fields, not both')

    previous = _default_client
    _default_client = QuicklogClient(config, client=client)
    if previous is not None:
        previous.close()
    return _default_client


def get_client() -> QuicklogClient:
    if _default_client is None:
        raise ConfigurationError('quicklog.configure() must be called first')
    return _default_client


def log_entry(
        published: datetime | None,
        action: str,
        object: str,
        target: str,
        context: dict[str, Any] | None,
        trace: TraceCtx,
        *tags: str,
) -> None:
    """`QuicklogClient.log_entry` on the configured default client."""
    get_client().log_entry(published, action, object, target, context, trace, *tags)


def tag_trace(trace_id: str, *tags: str) -> None:
    """`QuicklogClient.tag_trace` on the configured default client."""
    get_client().tag_trace(trace_id, *tags)


__all__ = [
    'ArgumentError',
    'ConfigurationError',
    'DEFAULT_API_URL',
    'IdGenerator',
    'QuicklogClient',
    'QuicklogConfig',
    'QuicklogError',
    'QuicklogSettings',
    'RandomIdGenerator',
    'SerializationError',
    'TraceCtx',
    'TransportError',
    'build_http_client',
    'configure',
    'generate_id',
    'get_client',
    'log_entry',
    'tag_trace',
    'trace_ctx',
]
