"""Logging setup for the TMF services.

Every handler on the root logger gets a ``RequestIdFilter`` so each line
names the request it belongs to (``-`` outside a request). Chatty library
loggers are tuned per category from Settings:

    sql      SQLAlchemy engine/pool and the database drivers
    http     httpx / httpcore (outbound webhook traffic)
    uvicorn  server and access logs
    hub      listener registration and event delivery

Call ``setup_logging(settings)`` once, from the application lifespan.
"""

import logging
import sys

from tmf_api.application.request_context import current_request_id
from tmf_api.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(request_id)s] %(message)s"

# Settings field → loggers it controls
_CATEGORY_LOGGERS: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_hub": (
        "tmf_api.application.services.hub_service",
        "tmf_api.infrastructure.webhooks",
    ),
}


class RequestIdFilter(logging.Filter):
    """Stamps ``record.request_id`` with the id of the request being served."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = current_request_id() or "-"
        return True


def _install_handler(root: logging.Logger) -> None:
    # uvicorn normally brings its own handler; scripts and tests may not
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for handler in root.handlers:
        if not any(isinstance(f, RequestIdFilter) for f in handler.filters):
            handler.addFilter(RequestIdFilter())


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    _install_handler(root)

    levels = {}
    for field_name, logger_names in _CATEGORY_LOGGERS.items():
        level_name = getattr(settings, field_name)
        levels[field_name.removeprefix("log_level_")] = level_name
        for name in logger_names:
            logging.getLogger(name).setLevel(_parse_level(level_name))

    logging.getLogger(__name__).debug(
        "Log levels: root=%s %s",
        settings.log_level,
        " ".join(f"{category}={level}" for category, level in levels.items()),
    )


def _parse_level(raw: str) -> int:
    """Level name → logging constant; anything unrecognised means INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO
