"""Tests for settings loading."""

import pytest

from ai_proxy.core.config import Settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.service_name == "ai-proxy"
    assert settings.conversation_token is None
    assert settings.conversation_id == 0
    assert settings.max_buffer_bytes == 8 * 1024 * 1024
    assert settings.openai_api_key is None


def test_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AI_PROXY_CONVERSATION_TOKEN", "tok")
    monkeypatch.setenv("AI_PROXY_STREAM_TIMEOUT", "30")
    settings = Settings(_env_file=None)
    assert settings.conversation_token == "tok"
    assert settings.stream_timeout == 30.0


@pytest.mark.parametrize("name", ["OPENAI_API_KEY", "AI_PROXY_OPENAI_API_KEY"])
def test_openai_key_aliases(monkeypatch: pytest.MonkeyPatch, name: str) -> None:
    monkeypatch.setenv(name, "sk-test")
    assert Settings(_env_file=None).openai_api_key == "sk-test"
