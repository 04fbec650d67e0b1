"""Context management for observability.

Provides async-safe context variables for request tracing.
"""

from contextvars import ContextVar

# Context variable for correlation ID - async-safe across concurrent requests
correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Get the correlation ID for the current request, or empty string if not set."""
    return correlation_id_var.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current request context."""
    correlation_id_var.set(correlation_id)
