"""Tests for the observability middleware, log processors and sanitizer."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from structlog.testing import capture_logs

from ai_proxy.observability import (
    CorrelationIDMiddleware,
    RequestLoggingMiddleware,
    correlation_id_var,
    get_correlation_id,
    sanitize,
    sanitize_headers,
    truncate_text,
)
from ai_proxy.observability.constants import CORRELATION_ID_HEADER, REDACTED_VALUE, LogEvents
from ai_proxy.observability.logger import add_request_context


@pytest.fixture
def traced_app() -> FastAPI:
    """Create a minimal app with both observability middlewares."""
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware, log_request_headers=True, log_request_body=True)
    app.add_middleware(CorrelationIDMiddleware)

    @app.get("/echo")
    async def echo() -> dict:
        return {"correlation_id": get_correlation_id()}

    @app.post("/submit")
    async def submit() -> dict:
        return {"ok": True}

    @app.get("/boom")
    async def boom() -> dict:
        raise RuntimeError("exploded")

    @app.get("/health")
    async def health() -> dict:
        return {"status": "healthy"}

    return app


class TestCorrelationIDMiddleware:
    """Tests for correlation ID propagation."""

    def test_generates_id(self, traced_app: FastAPI) -> None:
        response = TestClient(traced_app).get("/echo")
        correlation_id = response.headers[CORRELATION_ID_HEADER]
        assert len(correlation_id) == 36
        assert response.json()["correlation_id"] == correlation_id

    def test_reuses_incoming_id(self, traced_app: FastAPI) -> None:
        response = TestClient(traced_app).get("/echo", headers={CORRELATION_ID_HEADER: "req-1"})
        assert response.headers[CORRELATION_ID_HEADER] == "req-1"
        assert response.json()["correlation_id"] == "req-1"


class TestRequestLoggingMiddleware:
    """Tests for request logging."""

    def test_logs_start_and_completion(self, traced_app: FastAPI) -> None:
        with capture_logs() as logs:
            TestClient(traced_app).get(
                "/echo", headers={"Authorization": "Token secret", "X-Forwarded-For": "1.2.3.4, 5.6.7.8"}
            )

        events = [entry["event"] for entry in logs]
        assert LogEvents.REQUEST_STARTED in events
        assert LogEvents.REQUEST_COMPLETED in events

        started = next(e for e in logs if e["event"] == LogEvents.REQUEST_STARTED)
        assert started["path"] == "/echo"
        assert started["client_ip"] == "1.2.3.4"
        assert started["headers"]["authorization"] == REDACTED_VALUE

        completed = next(e for e in logs if e["event"] == LogEvents.REQUEST_COMPLETED)
        assert completed["status_code"] == 200
        assert "duration_ms" in completed

    def test_body_is_sanitized(self, traced_app: FastAPI) -> None:
        with capture_logs() as logs:
            TestClient(traced_app).post("/submit", json={"message": "hi", "api_key": "sk-1"})

        started = next(e for e in logs if e["event"] == LogEvents.REQUEST_STARTED)
        assert started["body"] == {"message": "hi", "api_key": REDACTED_VALUE}

    def test_excluded_paths_not_logged(self, traced_app: FastAPI) -> None:
        with capture_logs() as logs:
            TestClient(traced_app).get("/health")
        assert not any(e["event"] == LogEvents.REQUEST_STARTED for e in logs)

    def test_unhandled_error_logged(self, traced_app: FastAPI) -> None:
        client = TestClient(traced_app, raise_server_exceptions=False)
        with capture_logs() as logs:
            response = client.get("/boom")

        assert response.status_code == 500
        failed = next(e for e in logs if e["event"] == LogEvents.REQUEST_FAILED)
        assert failed["log_level"] == "error"


class TestRequestContextProcessor:
    """Tests for the processor that stamps service and correlation id."""

    def test_adds_service_and_correlation_id(self) -> None:
        token = correlation_id_var.set("cid-1")
        try:
            event = add_request_context(None, "info", {"event": "x"})
        finally:
            correlation_id_var.reset(token)
        assert event == {"event": "x", "service": "ai-proxy", "correlation_id": "cid-1"}

    def test_bound_id_wins(self) -> None:
        token = correlation_id_var.set("from-context")
        try:
            event = add_request_context(None, "info", {"event": "x", "correlation_id": "bound"})
        finally:
            correlation_id_var.reset(token)
        assert event["correlation_id"] == "bound"

    def test_no_id_outside_request(self) -> None:
        token = correlation_id_var.set("")
        try:
            event = add_request_context(None, "info", {"event": "x"})
        finally:
            correlation_id_var.reset(token)
        assert "correlation_id" not in event


class TestSanitizer:
    """Tests for log sanitization helpers."""

    def test_nested_sensitive_fields(self) -> None:
        data = {"user": {"password": "p", "name": "n"}, "items": [{"access_token": "t"}]}
        assert sanitize(data) == {
            "user": {"password": REDACTED_VALUE, "name": "n"},
            "items": [{"access_token": REDACTED_VALUE}],
        }

    def test_headers(self) -> None:
        headers = sanitize_headers({"Authorization": "Bearer x", "Accept": "text/event-stream"})
        assert headers == {"Authorization": REDACTED_VALUE, "Accept": "text/event-stream"}

    def test_truncate_text(self) -> None:
        assert truncate_text("short") == "short"
        truncated = truncate_text("x" * 600)
        assert truncated.startswith("x" * 500)
        assert "600 total chars" in truncated
