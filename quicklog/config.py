"""Client configuration.

`QuicklogConfig` is the immutable value handed to `QuicklogClient`.
`QuicklogSettings` reads the same fields from `QUICKLOG_*` environment
variables (or a `.env` file) for apps that configure through the environment.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from pydantic_settings import BaseSettings

DEFAULT_API_URL = 'https://api.quicklog.io'

DEFAULT_TIMEOUT_SECONDS = 3.0
DEFAULT_MAX_IDLE_CONNECTIONS = 5
DEFAULT_IDLE_TIMEOUT_SECONDS = 30.0


class QuicklogSettings(BaseSettings):
    project_id: int = 0
    api_key: str = ''
    source: str = ''
    api_url: str = DEFAULT_API_URL

    class Config:
        env_file = '.env'
        env_prefix = 'QUICKLOG_'
        extra = 'ignore'


@dataclass(frozen=True)
class QuicklogConfig:
    """Configuration for the ingestion client.

    Values are not checked here; the client rejects a zero project id or an
    empty api key / api url when an operation is attempted.
    """

    project_id: int
    api_key: str
    source: str = ''
    api_url: str = DEFAULT_API_URL

    @staticmethod
    def from_env(settings: QuicklogSettings | None = None) -> 'QuicklogConfig':
        settings = settings or QuicklogSettings()
        return QuicklogConfig(
            project_id=settings.project_id,
            api_key=settings.api_key,
            source=settings.source,
            api_url=settings.api_url,
        )

    def missing_field(self) -> str | None:
        """Name of the first required field that is unset, or None."""
        if self.project_id == 0:
            return 'project_id'
        if not self.api_key:
            return 'api_key'
        if not self.api_url:
            return 'api_url'
        return None


def build_http_client() -> httpx.Client:
    """Default transport: short timeout, small keep-alive pool, no compression."""
    return httpx.Client(
        timeout=DEFAULT_TIMEOUT_SECONDS,
        limits=httpx.Limits(
            max_keepalive_connections=DEFAULT_MAX_IDLE_CONNECTIONS,
            keepalive_expiry=DEFAULT_IDLE_TIMEOUT_SECONDS,
        ),
        headers={'Accept-Encoding': 'identity'},
    )
