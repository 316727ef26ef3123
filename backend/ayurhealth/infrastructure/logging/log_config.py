"""Logging setup for the CMS backend.

Levels come from Settings, one field per category, so a chatty source
(SQL echo, outbound PostgREST calls) can be turned up or down on its own.

Usage:
    from ayurhealth.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once, from the FastAPI lifespan
"""

import logging
import sys

from ayurhealth.config import Settings, get_settings

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"

# Settings field → logger names it controls.
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_store": (
        "ayurhealth.infrastructure.supabase",
        "ayurhealth.infrastructure.database",
    ),
}


def setup_logging(settings: Settings | None = None) -> None:
    """Apply the configured root and per-category levels.

    A stderr handler is attached only when the root logger has none, so
    running under uvicorn keeps uvicorn's handlers.
    """
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)

    levels = {}
    for field_name, logger_names in _CATEGORY_MAP.items():
        levels[field_name] = getattr(settings, field_name, "INFO")
        for name in logger_names:
            logging.getLogger(name).setLevel(_parse_level(levels[field_name]))

    logging.getLogger(__name__).debug(
        "Logging configured — root=%s, %s",
        settings.log_level,
        ", ".join(f"{k.removeprefix('log_level_')}={v}" for k, v in levels.items()),
    )


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    numeric = logging.getLevelName(raw.upper())
    return numeric if isinstance(numeric, int) else logging.INFO
