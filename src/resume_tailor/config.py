"""Runtime configuration read from the environment.

Values may also come from a ``.env`` file in the working directory, loaded
via python-dotenv.  Templates are compiled-in and never configured here.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv
from reportlab.lib.pagesizes import A4, LETTER

logger = logging.getLogger(__name__)

__all__ = ["PAGE_SIZES", "Settings", "get_settings"]

PAGE_SIZES: dict[str, tuple[float, float]] = {
    "A4": A4,
    "LETTER": LETTER,
}


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    page_size: tuple[float, float] = A4
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("*",)
    host: str = "0.0.0.0"
    port: int = 8000


def _page_size(value: str | None) -> tuple[float, float]:
    if not value:
        return A4
    size = PAGE_SIZES.get(value.strip().upper())
    if size is None:
        logger.warning("Unknown page size %r, using A4", value)
        return A4
    return size


def _origins(value: str | None) -> tuple[str, ...]:
    if not value:
        return ("*",)
    origins = tuple(o.strip() for o in value.split(",") if o.strip())
    return origins or ("*",)


def _log_level(value: str | None) -> str:
    level = (value or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Unknown log level %r, using INFO", value)
        return "INFO"
    return level


def _port(value: str | None) -> int:
    if not value:
        return 8000
    try:
        return int(value)
    except ValueError:
        logger.warning("Invalid port %r, using 8000", value)
        return 8000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return settings built from the environment (cached after first call)."""
    load_dotenv()
    return Settings(
        page_size=_page_size(os.getenv("RESUME_TAILOR_PAGE_SIZE")),
        log_level=_log_level(os.getenv("RESUME_TAILOR_LOG_LEVEL")),
        cors_origins=_origins(os.getenv("RESUME_TAILOR_CORS_ORIGINS")),
        host=os.getenv("RESUME_TAILOR_HOST") or "0.0.0.0",
        port=_port(os.getenv("RESUME_TAILOR_PORT")),
    )
