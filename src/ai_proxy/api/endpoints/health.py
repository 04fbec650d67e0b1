"""Health check endpoints."""

from fastapi import APIRouter

from ai_proxy.core.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """Basic health check endpoint."""
    return {"status": "healthy", "service": get_settings().service_name}


@router.get("/ready")
async def ready() -> dict:
    """
    Readiness check with the providers that have credentials configured.

    The proxy itself is stateless, so it is always ready; the checks only
    tell operators which provider services will answer.
    """
    settings = get_settings()
    return {
        "status": "ready",
        "checks": {
            "openai": "configured" if settings.openai_api_key else "missing_key",
            "huggingface": "configured" if settings.huggingface_api_key else "openai_fallback",
        },
    }
