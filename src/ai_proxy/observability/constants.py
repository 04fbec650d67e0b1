"""Constants for observability layer."""

# HTTP header for correlation ID propagation
CORRELATION_ID_HEADER = "X-Correlation-ID"

# Service identifier for logs
SERVICE_NAME = "ai-proxy"


# Log event names following the pattern: {domain}.{action}.{result}
class LogEvents:
    """Standardized log event names."""

    # Conversation upstream
    CONVERSATION_STREAM_STARTED = "conversation.stream.started"
    CONVERSATION_STREAM_COMPLETED = "conversation.stream.completed"
    CONVERSATION_STREAM_FAILED = "conversation.stream.failed"
    CONVERSATION_UPSTREAM_REJECTED = "conversation.upstream.rejected"

    # Aggregation
    AGGREGATION_COMPLETED = "aggregation.completed"
    AGGREGATION_BUFFER_EXCEEDED = "aggregation.buffer.exceeded"

    # Provider calls (OpenAI, Hugging Face)
    PROVIDER_REQUEST_STARTED = "provider.request.started"
    PROVIDER_REQUEST_COMPLETED = "provider.request.completed"
    PROVIDER_REQUEST_FAILED = "provider.request.failed"

    # Compare fan-out
    COMPARE_STARTED = "compare.started"
    COMPARE_COMPLETED = "compare.completed"

    # Service lifecycle
    SERVICE_STARTED = "service.started"
    SERVICE_STOPPED = "service.stopped"

    # Request lifecycle events
    REQUEST_STARTED = "request.started"
    REQUEST_COMPLETED = "request.completed"
    REQUEST_FAILED = "request.failed"


# Fields that should be redacted in logs
SENSITIVE_FIELDS = frozenset({
    "password",
    "secret",
    "token",
    "access_token",
    "api_key",
    "apikey",
    "bearer",
    "authorization",
    "auth",
    "cookie",
})

# Fields to redact (case-insensitive patterns)
SENSITIVE_FIELD_PATTERNS = frozenset({
    "password",
    "secret",
    "token",
    "key",
    "credential",
    "auth",
})

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key", "x-auth-token"})

# Redaction placeholder
REDACTED_VALUE = "[REDACTED]"
