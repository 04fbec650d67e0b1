"""Tests for the OpenAI and Hugging Face clients."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from ai_proxy.clients.errors import ProviderClientError, UpstreamHTTPError
from ai_proxy.clients.huggingface import (
    DEFAULT_TRANSLATION_MODEL,
    SENTIMENT_MODEL,
    SUMMARIZATION_MODEL,
    HuggingFaceClient,
    translation_model,
)
from ai_proxy.clients.openai import OpenAIClient
from ai_proxy.schemas.requests import ChatCompletionRequest, ImageGenerationRequest, Message

OPENAI_URL = "https://openai.test/v1"
HF_URL = "https://hf.test/models"


@pytest.fixture
def openai_client() -> OpenAIClient:
    """Return an OpenAI client with a fake key."""
    return OpenAIClient(base_url=OPENAI_URL, api_key="sk-test")


@pytest.fixture
def hf_client() -> HuggingFaceClient:
    """Return a Hugging Face client with a fake key."""
    return HuggingFaceClient(base_url=HF_URL, api_key="hf-test")


def _chat_request() -> ChatCompletionRequest:
    return ChatCompletionRequest(
        model="gpt-3.5-turbo",
        messages=[Message(role="user", content="Hello")],
    )


class TestOpenAIClient:
    """Tests for OpenAIClient."""

    def test_is_configured(self) -> None:
        assert OpenAIClient(base_url=OPENAI_URL, api_key="k").is_configured
        assert not OpenAIClient(base_url=OPENAI_URL, api_key=None).is_configured

    @pytest.mark.asyncio
    async def test_chat_completion_success(self, openai_client: OpenAIClient) -> None:
        with respx.mock:
            route = respx.post(f"{OPENAI_URL}/chat/completions").mock(
                return_value=httpx.Response(
                    200,
                    json={
                        "model": "gpt-3.5-turbo-0125",
                        "choices": [
                            {"message": {"role": "assistant", "content": "Hi!"}, "finish_reason": "stop"}
                        ],
                        "usage": {"prompt_tokens": 5, "completion_tokens": 2, "total_tokens": 7},
                    },
                )
            )
            completion = await openai_client.chat_completion(_chat_request())

        assert completion.content == "Hi!"
        assert completion.model == "gpt-3.5-turbo-0125"
        assert completion.finish_reason == "stop"
        assert completion.usage == {"prompt_tokens": 5, "completion_tokens": 2, "total_tokens": 7}

        request = route.calls.last.request
        assert request.headers["authorization"] == "Bearer sk-test"
        body = json.loads(request.content)
        assert body["model"] == "gpt-3.5-turbo"
        assert body["messages"] == [{"role": "user", "content": "Hello"}]

    @pytest.mark.asyncio
    async def test_null_usage_counts_become_zero(self, openai_client: OpenAIClient) -> None:
        with respx.mock:
            respx.post(f"{OPENAI_URL}/chat/completions").mock(
                return_value=httpx.Response(
                    200,
                    json={
                        "choices": [{"message": {"content": "Hi!"}, "finish_reason": None}],
                        "usage": {"prompt_tokens": None, "completion_tokens": 2, "total_tokens": None},
                    },
                )
            )
            completion = await openai_client.chat_completion(_chat_request())

        assert completion.usage == {"prompt_tokens": 0, "completion_tokens": 2, "total_tokens": 0}
        assert completion.model == "gpt-3.5-turbo"

    @pytest.mark.asyncio
    async def test_http_error_carries_details(self, openai_client: OpenAIClient) -> None:
        with respx.mock:
            respx.post(f"{OPENAI_URL}/chat/completions").mock(
                return_value=httpx.Response(
                    401, json={"error": {"message": "Incorrect API key provided"}}
                )
            )
            with pytest.raises(UpstreamHTTPError) as exc_info:
                await openai_client.chat_completion(_chat_request())

        assert exc_info.value.status_code == 401
        assert exc_info.value.details == {"error": {"message": "Incorrect API key provided"}}

    @pytest.mark.asyncio
    async def test_malformed_completion(self, openai_client: OpenAIClient) -> None:
        with respx.mock:
            respx.post(f"{OPENAI_URL}/chat/completions").mock(
                return_value=httpx.Response(200, json={"choices": []})
            )
            with pytest.raises(ProviderClientError, match="unexpected"):
                await openai_client.chat_completion(_chat_request())

    @pytest.mark.asyncio
    async def test_timeout(self, openai_client: OpenAIClient) -> None:
        with respx.mock:
            respx.post(f"{OPENAI_URL}/chat/completions").mock(
                side_effect=httpx.ReadTimeout("slow")
            )
            with pytest.raises(ProviderClientError, match="timed out"):
                await openai_client.chat_completion(_chat_request())

    @pytest.mark.asyncio
    async def test_generate_images(self, openai_client: OpenAIClient) -> None:
        with respx.mock:
            respx.post(f"{OPENAI_URL}/images/generations").mock(
                return_value=httpx.Response(
                    200, json={"data": [{"url": "https://img.test/1.png", "revised_prompt": "a cat"}]}
                )
            )
            images = await openai_client.generate_images(ImageGenerationRequest(prompt="cat"))

        assert images == [{"url": "https://img.test/1.png", "revised_prompt": "a cat"}]


class TestHuggingFaceClient:
    """Tests for HuggingFaceClient."""

    def test_translation_model_paths(self) -> None:
        assert translation_model("ar", "en") == DEFAULT_TRANSLATION_MODEL
        assert translation_model("en", "fr") == "Helsinki-NLP/opus-mt-en-fr"

    @pytest.mark.asyncio
    async def test_summarize(self, hf_client: HuggingFaceClient) -> None:
        with respx.mock:
            route = respx.post(f"{HF_URL}/{SUMMARIZATION_MODEL}").mock(
                return_value=httpx.Response(200, json=[{"summary_text": "short"}])
            )
            summary = await hf_client.summarize("a long text")

        assert summary == "short"
        body = json.loads(route.calls.last.request.content)
        assert body == {
            "inputs": "a long text",
            "parameters": {"max_length": 130, "min_length": 30, "do_sample": False},
        }

    @pytest.mark.asyncio
    async def test_translate_omits_parameters(self, hf_client: HuggingFaceClient) -> None:
        with respx.mock:
            route = respx.post(f"{HF_URL}/{DEFAULT_TRANSLATION_MODEL}").mock(
                return_value=httpx.Response(200, json=[{"translation_text": "Hello"}])
            )
            translated = await hf_client.translate("مرحبا", DEFAULT_TRANSLATION_MODEL)

        assert translated == "Hello"
        assert json.loads(route.calls.last.request.content) == {"inputs": "مرحبا"}

    @pytest.mark.asyncio
    async def test_classify_sentiment(self, hf_client: HuggingFaceClient) -> None:
        scores = [{"label": "POSITIVE", "score": 0.99}, {"label": "NEGATIVE", "score": 0.01}]
        with respx.mock:
            respx.post(f"{HF_URL}/{SENTIMENT_MODEL}").mock(
                return_value=httpx.Response(200, json=[scores])
            )
            result = await hf_client.classify_sentiment("great")

        assert result == scores

    @pytest.mark.asyncio
    async def test_missing_field_raises(self, hf_client: HuggingFaceClient) -> None:
        with respx.mock:
            respx.post(f"{HF_URL}/{SUMMARIZATION_MODEL}").mock(
                return_value=httpx.Response(200, json={"error": "Model is loading"})
            )
            with pytest.raises(ProviderClientError, match="summary_text"):
                await hf_client.summarize("text")

    @pytest.mark.asyncio
    async def test_model_loading_503(self, hf_client: HuggingFaceClient) -> None:
        with respx.mock:
            respx.post(f"{HF_URL}/{SENTIMENT_MODEL}").mock(
                return_value=httpx.Response(503, json={"error": "Model is currently loading"})
            )
            with pytest.raises(UpstreamHTTPError) as exc_info:
                await hf_client.classify_sentiment("text")

        assert exc_info.value.status_code == 503
