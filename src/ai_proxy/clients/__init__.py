"""Clients package - HTTP clients for upstream AI providers."""

from ai_proxy.clients.conversation import ConversationClient
from ai_proxy.clients.errors import ProviderClientError, UpstreamHTTPError
from ai_proxy.clients.huggingface import HuggingFaceClient
from ai_proxy.clients.openai import OpenAIClient

__all__ = [
    "ConversationClient",
    "HuggingFaceClient",
    "OpenAIClient",
    "ProviderClientError",
    "UpstreamHTTPError",
]
