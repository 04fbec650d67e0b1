"""Assistant service - provider-backed AI operations.

Every operation returns a ServiceResult envelope instead of raising: missing
input and missing credentials yield guidance messages, provider failures
yield an error envelope.

Hugging Face operations fall back to OpenAI prompts when no Hugging Face key
is configured.
"""

import asyncio
import json
import time
from typing import Any

from ai_proxy.clients.errors import ProviderClientError
from ai_proxy.clients.huggingface import (
    SUMMARIZATION_MODEL,
    HuggingFaceClient,
    translation_model,
)
from ai_proxy.clients.openai import OpenAIClient
from ai_proxy.core import messages
from ai_proxy.observability import get_logger
from ai_proxy.observability.constants import LogEvents
from ai_proxy.schemas.requests import ChatCompletionRequest, ImageGenerationRequest, Message
from ai_proxy.schemas.responses import (
    ChatResult,
    ComparisonResult,
    GeneratedImage,
    ImageResult,
    ModelComparison,
    MostDetailed,
    SentimentResult,
    ServiceResult,
    SummaryResult,
    TokenUsage,
    TranslationResult,
)

logger = get_logger(__name__)

DEFAULT_CHAT_MODEL = "gpt-3.5-turbo"
DEFAULT_COMPARE_MODELS = ("gpt-3.5-turbo", "gpt-4")

CREATIVE_INSTRUCTIONS = {
    "story": "اكتب قصة قصيرة",
    "poem": "اكتب قصيدة",
    "article": "اكتب مقالة",
    "dialogue": "اكتب حواراً",
}
CREATIVE_FALLBACK_INSTRUCTION = "اكتب نصاً"

CREATIVE_LENGTHS = {
    "short": "قصير (100-200 كلمة)",
    "medium": "متوسط (200-500 كلمة)",
    "long": "طويل (500-1000 كلمة)",
}
CREATIVE_MAX_TOKENS = {"long": 2000, "medium": 1000}


def _as_float(value: Any) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class AssistantService:
    """Service for OpenAI and Hugging Face backed operations."""

    def __init__(
        self,
        openai_client: OpenAIClient,
        huggingface_client: HuggingFaceClient,
        max_parallel_requests: int = 4,
    ):
        self.openai = openai_client
        self.huggingface = huggingface_client
        self.max_parallel_requests = max(1, max_parallel_requests)

    def _failure(self, service: str, error: ProviderClientError) -> ServiceResult:
        logger.error(
            LogEvents.PROVIDER_REQUEST_FAILED,
            provider_service=service,
            error=str(error),
            status_code=error.status_code,
        )
        return ServiceResult(
            status=False,
            message=messages.service_error(service),
            error=str(error),
            details=error.details,
        )

    async def chat(
        self,
        query: str | None,
        model: str = DEFAULT_CHAT_MODEL,
        temperature: float = 0.7,
        max_tokens: int = 1000,
    ) -> ServiceResult:
        """
        Ask an OpenAI chat model, with the Arabic assistant system prompt.

        Returns:
            ChatResult on success, a failed ServiceResult otherwise
        """
        if not query:
            return ServiceResult(status=False, message=messages.MISSING_CHAT_QUERY)
        if not self.openai.is_configured:
            return ServiceResult(status=False, message=messages.MISSING_OPENAI_KEY)

        request = ChatCompletionRequest(
            model=model,
            messages=[
                Message(role="system", content=messages.ASSISTANT_SYSTEM_PROMPT),
                Message(role="user", content=query),
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        try:
            completion = await self.openai.chat_completion(request)
        except ProviderClientError as e:
            return self._failure("OpenAI", e)

        return ChatResult(
            status=True,
            service="OpenAI ChatGPT",
            model=completion.model,
            response=completion.content,
            usage=TokenUsage(**completion.usage),
            finish_reason=completion.finish_reason,
        )

    async def generate_image(
        self,
        prompt: str | None,
        size: str = "1024x1024",
        quality: str = "standard",
        n: int = 1,
    ) -> ServiceResult:
        """Generate images with DALL-E."""
        if not prompt:
            return ServiceResult(status=False, message=messages.MISSING_IMAGE_PROMPT)
        if not self.openai.is_configured:
            return ServiceResult(status=False, message=messages.MISSING_OPENAI_KEY)

        try:
            images = await self.openai.generate_images(
                ImageGenerationRequest(prompt=prompt, n=n, size=size, quality=quality)
            )
        except ProviderClientError as e:
            return self._failure("DALL-E", e)

        stamp = int(time.time() * 1000)
        return ImageResult(
            status=True,
            service="OpenAI DALL-E",
            images=[
                GeneratedImage(
                    id=f"img_{stamp}_{index}",
                    url=image.get("url"),
                    prompt=prompt,
                    revised_prompt=image.get("revised_prompt") or prompt,
                )
                for index, image in enumerate(images)
            ],
            size=size,
            quality=quality,
        )

    async def summarize(self, text: str | None, use_openai: bool = False) -> ServiceResult:
        """Summarize text with BART, or with an OpenAI prompt."""
        if not text:
            return ServiceResult(status=False, message=messages.MISSING_SUMMARY_TEXT)

        if use_openai or not self.huggingface.is_configured:
            prompt = f"لخص النص التالي باللغة العربية باختصار:\n\n{text}"
            return await self.chat(prompt, model="gpt-3.5-turbo-16k", max_tokens=500)

        try:
            summary = await self.huggingface.summarize(text)
        except ProviderClientError as e:
            return self._failure("Hugging Face", e)

        return SummaryResult(
            status=True,
            service="Hugging Face Summarization",
            original_length=len(text),
            summary=summary,
            model=SUMMARIZATION_MODEL,
        )

    async def translate(
        self,
        text: str | None,
        target: str = "en",
        source: str = "ar",
    ) -> ServiceResult:
        """Translate text between two languages."""
        if not text:
            return ServiceResult(status=False, message=messages.MISSING_TRANSLATION_TEXT)

        if not self.huggingface.is_configured:
            prompt = f"ترجم النص التالي من {source} إلى {target}:\n\n{text}"
            result = await self.chat(prompt, max_tokens=1000)
            if not result.status:
                return result
            return TranslationResult.model_validate(
                {
                    **result.model_dump(),
                    "service": "OpenAI Translation",
                    "original_text": text,
                    "source_language": source,
                    "target_language": target,
                }
            )

        model = translation_model(source, target)
        try:
            translated = await self.huggingface.translate(text, model)
        except ProviderClientError as e:
            return self._failure("Translation Service", e)

        return TranslationResult(
            status=True,
            service="Hugging Face Translation",
            original_text=text,
            translated_text=translated,
            source_language=source,
            target_language=target,
            model=model.split("/")[-1],
        )

    async def analyze_sentiment(self, text: str | None) -> ServiceResult:
        """Classify the sentiment of a text."""
        if not text:
            return ServiceResult(status=False, message=messages.MISSING_SENTIMENT_TEXT)

        if not self.huggingface.is_configured:
            return await self._openai_sentiment(text)

        try:
            scores = await self.huggingface.classify_sentiment(text)
        except ProviderClientError as e:
            return self._failure("Sentiment Analysis", e)

        top = scores[0]
        return SentimentResult(
            status=True,
            service="Hugging Face Sentiment Analysis",
            text=text,
            sentiment="positive" if top["label"] == "POSITIVE" else "negative",
            confidence=_as_float(top["score"]),
            scores=scores,
        )

    async def _openai_sentiment(self, text: str) -> ServiceResult:
        prompt = (
            "حلل المشاعر في النص التالي وحدد إذا كانت إيجابية، سلبية، أو محايدة:"
            f"\n\n{text}\n\n"
            'أجب بنموذج JSON: {"sentiment": "...", "confidence": ..., "explanation": "..."}'
        )
        result = await self.chat(prompt)
        if not isinstance(result, ChatResult):
            return result

        try:
            analysis = json.loads(result.response or "")
        except ValueError:
            analysis = None

        if not isinstance(analysis, dict):
            return SentimentResult(
                status=True,
                service="OpenAI Sentiment Analysis",
                text=text,
                sentiment="unknown",
                analysis=result.response,
            )

        explanation = analysis.get("explanation")
        return SentimentResult(
            status=True,
            service="OpenAI Sentiment Analysis",
            text=text,
            sentiment=str(analysis.get("sentiment") or "unknown"),
            confidence=_as_float(analysis.get("confidence")),
            explanation=explanation if isinstance(explanation, str) else None,
        )

    async def creative(
        self,
        prompt: str | None,
        kind: str = "story",
        length: str = "medium",
        style: str = "formal",
    ) -> ServiceResult:
        """Write a story, poem, article or dialogue about a prompt with GPT-4."""
        if not prompt:
            return ServiceResult(status=False, message=messages.MISSING_CREATIVE_PROMPT)

        instruction = CREATIVE_INSTRUCTIONS.get(kind, CREATIVE_FALLBACK_INSTRUCTION)
        full_prompt = (
            f'{instruction} حول: "{prompt}"\n\n'
            f"النمط: {style}\n"
            f"الطول: {CREATIVE_LENGTHS.get(length, length)}"
        )
        return await self.chat(
            full_prompt,
            model="gpt-4",
            temperature=0.8,
            max_tokens=CREATIVE_MAX_TOKENS.get(length, 500),
        )

    async def compare(
        self,
        query: str | None,
        models: list[str] | None = None,
    ) -> ServiceResult:
        """
        Ask several models the same question concurrently.

        Branches run under a semaphore of ``max_parallel_requests``. A failing
        branch is reported in its comparison entry and never cancels the
        others.
        """
        models = list(models or DEFAULT_COMPARE_MODELS)
        if not query:
            return ServiceResult(status=False, message=messages.MISSING_COMPARE_QUERY)
        if not self.openai.is_configured:
            return ServiceResult(status=False, message=messages.MISSING_OPENAI_KEY)

        semaphore = asyncio.Semaphore(self.max_parallel_requests)
        logger.info(LogEvents.COMPARE_STARTED, models=models)

        async def run_branch(model: str) -> tuple[ServiceResult, int]:
            async with semaphore:
                start_time = time.perf_counter()
                result = await self.chat(query, model=model)
                return result, int((time.perf_counter() - start_time) * 1000)

        outcomes = await asyncio.gather(
            *(run_branch(model) for model in models),
            return_exceptions=True,
        )

        comparisons: list[ModelComparison] = []
        for model, outcome in zip(models, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.error(LogEvents.PROVIDER_REQUEST_FAILED, model=model, error=str(outcome))
                comparisons.append(
                    ModelComparison(model=model, response=str(outcome), status="failed", latency_ms=0)
                )
                continue

            result, latency_ms = outcome
            if isinstance(result, ChatResult) and result.status:
                comparisons.append(
                    ModelComparison(
                        model=model,
                        response=result.response,
                        status="success",
                        tokens=result.usage.total_tokens if result.usage else None,
                        latency_ms=latency_ms,
                    )
                )
            else:
                comparisons.append(
                    ModelComparison(
                        model=model,
                        response=result.message,
                        status="failed",
                        latency_ms=latency_ms,
                    )
                )

        successful = [c for c in comparisons if c.status == "success"]
        fastest = min(successful, key=lambda c: c.latency_ms, default=None)

        most_detailed = MostDetailed()
        for comparison in successful:
            if len(comparison.response or "") > len(most_detailed.response or ""):
                most_detailed = MostDetailed(model=comparison.model, response=comparison.response)

        logger.info(
            LogEvents.COMPARE_COMPLETED,
            models=len(models),
            successful=len(successful),
        )

        return ComparisonResult(
            status=True,
            service="OpenAI Model Comparison",
            query=query,
            comparisons=comparisons,
            fastest_model=fastest.model if fastest else None,
            most_detailed=most_detailed,
        )
