"""Services package - business logic for the AI proxy."""

from ai_proxy.services.assistant import AssistantService
from ai_proxy.services.conversation import ConversationService

__all__ = [
    "AssistantService",
    "ConversationService",
]
