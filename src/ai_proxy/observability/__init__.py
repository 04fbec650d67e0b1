"""Observability layer for the AI proxy.

This module provides structured logging, request tracing via correlation IDs,
and log sanitization.

Usage:
    from ai_proxy.observability import get_logger

    logger = get_logger(__name__)
    logger.info("conversation.stream.started", url=url)
"""

from ai_proxy.observability.context import (
    correlation_id_var,
    get_correlation_id,
    set_correlation_id,
)
from ai_proxy.observability.logger import configure_logging, get_logger
from ai_proxy.observability.middleware import (
    CorrelationIDMiddleware,
    RequestLoggingMiddleware,
)
from ai_proxy.observability.sanitizer import sanitize, sanitize_headers, truncate_text

__all__ = [
    # Context
    "correlation_id_var",
    "get_correlation_id",
    "set_correlation_id",
    # Logger
    "configure_logging",
    "get_logger",
    # Middleware
    "CorrelationIDMiddleware",
    "RequestLoggingMiddleware",
    # Sanitizer
    "sanitize",
    "sanitize_headers",
    "truncate_text",
]
