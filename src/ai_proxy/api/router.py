"""API router configuration."""

from fastapi import APIRouter

from ai_proxy.api.endpoints import ai, conversation, health

# Main API router
api_router = APIRouter(prefix="/api")
api_router.include_router(conversation.router)
api_router.include_router(ai.router)

# Health router at root level
health_router = health.router
