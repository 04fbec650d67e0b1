"""Client for the OpenAI chat completions and image generation APIs."""

from typing import Any

from ai_proxy.clients.base import JSONProviderClient
from ai_proxy.clients.errors import ProviderClientError
from ai_proxy.schemas.internal import ChatCompletion
from ai_proxy.schemas.requests import ChatCompletionRequest, ImageGenerationRequest

CHAT_COMPLETIONS_PATH = "/chat/completions"
IMAGE_GENERATIONS_PATH = "/images/generations"


class OpenAIClient(JSONProviderClient):
    """Client for calling OpenAI endpoints."""

    provider_name = "OpenAI"

    async def chat_completion(self, request: ChatCompletionRequest) -> ChatCompletion:
        """
        Send a chat completion request.

        Args:
            request: Model, messages and sampling parameters

        Returns:
            ChatCompletion with the first choice's content and token usage

        Raises:
            ProviderClientError: If the request fails or the answer is malformed
        """
        data = await self._post(CHAT_COMPLETIONS_PATH, request.model_dump())

        try:
            choice = data["choices"][0]
            content = choice["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderClientError(
                "OpenAI returned an unexpected chat completion", details=data
            ) from e

        usage = data.get("usage") or {}
        return ChatCompletion(
            model=data.get("model") or request.model,
            content=content or "",
            finish_reason=choice.get("finish_reason"),
            usage={
                "prompt_tokens": usage.get("prompt_tokens") or 0,
                "completion_tokens": usage.get("completion_tokens") or 0,
                "total_tokens": usage.get("total_tokens") or 0,
            },
        )

    async def generate_images(self, request: ImageGenerationRequest) -> list[dict[str, Any]]:
        """Generate images and return the raw ``data`` entries (url, revised_prompt)."""
        data = await self._post(IMAGE_GENERATIONS_PATH, request.model_dump())

        images = data.get("data") if isinstance(data, dict) else None
        if not isinstance(images, list):
            raise ProviderClientError("OpenAI returned an unexpected image response", details=data)
        return images
