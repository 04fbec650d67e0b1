"""structlog setup for the proxy.

Every entry carries the service name and, inside a request, the correlation
id. Production output is one JSON object per line; debug output goes
through the console renderer.
"""

import logging
import sys

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from ai_proxy.observability.constants import SERVICE_NAME
from ai_proxy.observability.context import get_correlation_id

# Loggers that log every upstream request at INFO
CHATTY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def add_request_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Stamp the service name and the current correlation id on an entry.

    An id bound explicitly on the logger wins over the ContextVar.
    """
    event_dict["service"] = SERVICE_NAME
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict


def _renderer(log_format: str, development_mode: bool) -> list[Processor]:
    if development_mode or log_format == "console":
        return [structlog.dev.ConsoleRenderer(colors=development_mode)]
    # Arabic replies stay readable in the JSON lines
    return [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(ensure_ascii=False),
    ]


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    development_mode: bool = False,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Root level name; unknown names fall back to INFO.
        log_format: "json" or "console".
        development_mode: Force colored console output.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_request_context,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        *_renderer(log_format, development_mode),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # capture_logs in tests swaps processors, which cached loggers would miss
        cache_logger_on_first_use=False,
    )

    level = logging.getLevelName(log_level.upper())
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level if isinstance(level, int) else logging.INFO,
        force=True,
    )
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, e.g. ``get_logger(__name__)``."""
    return structlog.get_logger(name)
