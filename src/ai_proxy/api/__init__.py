"""API package - FastAPI routes and dependencies."""

from ai_proxy.api.router import api_router, health_router

__all__ = ["api_router", "health_router"]
