"""Shared fixtures for the AI proxy tests."""

from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from ai_proxy.api.dependencies import get_assistant_service, get_conversation_service
from ai_proxy.core.config import get_settings
from ai_proxy.main import create_app

PROVIDER_ENV_VARS = (
    "OPENAI_API_KEY",
    "AI_PROXY_OPENAI_API_KEY",
    "HUGGINGFACE_API_KEY",
    "AI_PROXY_HUGGINGFACE_API_KEY",
    "AI_PROXY_CONVERSATION_TOKEN",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test without provider keys from the host environment."""
    for name in PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def conversation_service() -> MagicMock:
    """Create a mock ConversationService."""
    service = MagicMock()
    service.ask = AsyncMock()
    return service


@pytest.fixture
def assistant_service() -> MagicMock:
    """Create a mock AssistantService."""
    service = MagicMock()
    for name in (
        "chat",
        "generate_image",
        "summarize",
        "translate",
        "analyze_sentiment",
        "creative",
        "compare",
    ):
        setattr(service, name, AsyncMock())
    return service


@pytest.fixture
def app(conversation_service: MagicMock, assistant_service: MagicMock) -> Iterator[FastAPI]:
    """Create the application with mocked services."""
    application = create_app()
    application.dependency_overrides[get_conversation_service] = lambda: conversation_service
    application.dependency_overrides[get_assistant_service] = lambda: assistant_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Create a test client for the application."""
    with TestClient(app) as test_client:
        yield test_client
