# ethos/integration/core/config.py
"""
Central configuration for the Ethos integration client.

Environment variables override defaults. The integration root is read at
call time (see :func:`integration_url`) so a process can change
``ETHOS_INTEGRATION_URL`` between calls.
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    ethos_integration_url: str | None = Field(
        default=None,
        description="Ethos Integration root URL, e.g. https://integrate.elluciancloud.com",
    )
    ethos_http_timeout: float = Field(
        default=30.0,
        description="Per-request timeout (seconds) for the default HTTP client",
    )


def integration_url(override: str | None = None) -> str | None:
    """Resolve the integration root: explicit override, else environment."""
    return override or Settings().ethos_integration_url
