from __future__ import annotations

import logging
import sys
from pythonjsonlogger import jsonlogger

from ethos.integration.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None, *, stream=None) -> None:
    """Send JSON log lines to ``stream`` (stdout by default).

    ``level`` falls back to ``Settings().log_level`` (env ``LOG_LEVEL``).
    Existing root handlers are replaced, so calling this twice is harmless.
    """
    if level is None:
        level = Settings().log_level

    root = logging.getLogger()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))
    root.handlers = [handler]


def mask_token(value: str | None, visible: int = 6) -> str:
    """Mask a credential for log output, keeping a short prefix."""
    if not value:
        return "<none>"
    if len(value) <= visible:
        return "*" * len(value)
    return value[:visible] + "..."
