"""Main FastAPI application for the AI proxy service."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ai_proxy.api import api_router, health_router
from ai_proxy.core.config import get_settings
from ai_proxy.observability import (
    CorrelationIDMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
    get_logger,
)
from ai_proxy.observability.constants import LogEvents

_settings = get_settings()

configure_logging(
    log_level=_settings.log_level,
    log_format=_settings.log_format if not _settings.debug else "console",
    development_mode=_settings.debug,
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    settings = get_settings()
    logger.info(
        LogEvents.SERVICE_STARTED,
        service_name=settings.service_name,
        conversation_url=settings.conversation_url,
        openai_configured=bool(settings.openai_api_key),
        huggingface_configured=bool(settings.huggingface_api_key),
        debug=settings.debug,
    )

    yield

    logger.info(LogEvents.SERVICE_STOPPED, service_name=settings.service_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="AI Proxy",
        description="""
Forwards user queries to third-party AI providers and returns a uniform JSON envelope.

## Features

- **Conversation**: `/api/chat?q=...` streams the upstream SSE reply and returns it as one message
- **OpenAI**: chat completions, image generation, creative writing, model comparison
- **Hugging Face**: summarization, translation, sentiment analysis (OpenAI fallback without a key)
        """,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Middleware executes in reverse order of addition, so CorrelationID runs first
    app.add_middleware(
        RequestLoggingMiddleware,
        exclude_paths={"/health", "/ready", "/docs", "/openapi.json", "/redoc"},
        log_request_headers=settings.log_request_headers,
        log_request_body=settings.log_request_body,
    )
    app.add_middleware(CorrelationIDMiddleware)

    app.include_router(health_router)  # /health, /ready
    app.include_router(api_router)  # /api/chat, /api/ai/...

    return app


app = create_app()


def run() -> None:
    """Console entry point."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "ai_proxy.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
