"""
Structlog setup shared by the API, the use cases and the LLM clients.

Events are key/value pairs; request and user ids are carried in contextvars so
every line logged while serving a request can be correlated.
"""

from __future__ import annotations

import logging
from typing import Any, MutableMapping, Optional

import structlog

# Model replies and provider errors can be long; cap them in log lines.
MAX_VALUE_LENGTH = 500

_CHATTY_LOGGERS = ("httpx", "httpcore", "urllib3", "google_genai", "openai")


def clip_long_values(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Shorten string values beyond MAX_VALUE_LENGTH, noting the original size."""
    for key, value in event_dict.items():
        if key != "event" and isinstance(value, str) and len(value) > MAX_VALUE_LENGTH:
            event_dict[key] = f"{value[:MAX_VALUE_LENGTH]}... [{len(value)} chars]"
    return event_dict


def setup_logging(
    log_level: Optional[str] = None, log_format: Optional[str] = None
) -> None:
    """Configure structlog and stdlib logging.

    Args:
        log_level: Level name such as "DEBUG". Taken from settings when omitted.
        log_format: "json" or "console". Taken from settings when omitted.
    """
    from edumorph.infra.config.settings import get_settings

    settings = get_settings()
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    as_json = (log_format or settings.log_format).lower() == "json"

    logging.basicConfig(level=level, format="%(message)s")
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            clip_long_values,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True)
            if as_json
            else structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None):
    return structlog.get_logger(name) if name else structlog.get_logger()


def bind_context(**kwargs: Any) -> None:
    """Attach values (request_id, user_id) to every following log line."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
