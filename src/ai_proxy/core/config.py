"""Configuration settings for the AI proxy service."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service identification
    service_name: str = "ai-proxy"
    debug: bool = False

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 8002

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"
    log_request_headers: bool = False
    log_request_body: bool = False

    # Conversation upstream
    conversation_url: str = "https://api.zahanat.ai/conversation/messagesV1/"
    conversation_token: str | None = None
    conversation_origin: str = "https://chat.zahanat.ai"
    conversation_referer: str = "https://chat.zahanat.ai/"
    conversation_user_agent: str = "Mozilla/5.0"
    conversation_user_id: int = 436
    conversation_id: int = 0
    conversation_web_search: bool = True

    # OpenAI
    openai_base_url: str = "https://api.openai.com/v1"
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AI_PROXY_OPENAI_API_KEY", "OPENAI_API_KEY"),
    )

    # Hugging Face inference
    huggingface_base_url: str = "https://api-inference.huggingface.co/models"
    huggingface_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AI_PROXY_HUGGINGFACE_API_KEY", "HUGGINGFACE_API_KEY"),
    )

    # Timeouts (seconds)
    request_timeout: float = 60.0
    stream_timeout: float = 120.0

    # Upstream stream limits
    max_buffer_bytes: int = 8 * 1024 * 1024  # 0 disables the cap

    # Compare fan-out
    max_parallel_requests: int = 4

    # CORS configuration
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_prefix="AI_PROXY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
