"""FastAPI dependencies for the AI proxy API."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ai_proxy.clients import ConversationClient, HuggingFaceClient, OpenAIClient
from ai_proxy.core.config import get_settings
from ai_proxy.schemas.internal import UpstreamProfile
from ai_proxy.services import AssistantService, ConversationService


@lru_cache
def get_upstream_profile() -> UpstreamProfile:
    """Get the immutable conversation upstream profile."""
    settings = get_settings()
    return UpstreamProfile(
        url=settings.conversation_url,
        token=settings.conversation_token,
        origin=settings.conversation_origin,
        referer=settings.conversation_referer,
        user_agent=settings.conversation_user_agent,
        user_id=settings.conversation_user_id,
        conversation_id=settings.conversation_id,
        web_search=settings.conversation_web_search,
    )


@lru_cache
def get_conversation_client() -> ConversationClient:
    """Get the conversation client singleton."""
    settings = get_settings()
    return ConversationClient(
        profile=get_upstream_profile(),
        timeout=settings.stream_timeout,
        max_buffer_bytes=settings.max_buffer_bytes,
    )


@lru_cache
def get_openai_client() -> OpenAIClient:
    """Get the OpenAI client singleton."""
    settings = get_settings()
    return OpenAIClient(
        base_url=settings.openai_base_url,
        api_key=settings.openai_api_key,
        timeout=settings.request_timeout,
    )


@lru_cache
def get_huggingface_client() -> HuggingFaceClient:
    """Get the Hugging Face client singleton."""
    settings = get_settings()
    return HuggingFaceClient(
        base_url=settings.huggingface_base_url,
        api_key=settings.huggingface_api_key,
        timeout=settings.request_timeout,
    )


def get_conversation_service(
    client: Annotated[ConversationClient, Depends(get_conversation_client)],
) -> ConversationService:
    """Get the conversation service."""
    return ConversationService(client)


def get_assistant_service(
    openai_client: Annotated[OpenAIClient, Depends(get_openai_client)],
    huggingface_client: Annotated[HuggingFaceClient, Depends(get_huggingface_client)],
) -> AssistantService:
    """Get the assistant service."""
    return AssistantService(
        openai_client,
        huggingface_client,
        max_parallel_requests=get_settings().max_parallel_requests,
    )
