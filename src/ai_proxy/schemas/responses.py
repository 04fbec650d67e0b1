"""Response schemas for the AI proxy API.

Every response carries a boolean ``status``; the HTTP status code of the
reply mirrors it (200 on success, 500 otherwise).
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class ConversationReply(BaseModel):
    """Reply of the conversation endpoint."""

    status: bool = Field(..., description="True when the upstream answered with 200")
    http_status: int | None = Field(default=None, description="Upstream status code")
    response: str = Field(default="", description="Consolidated reply text")
    raw: list[str] = Field(default_factory=list, description="Upstream `data:` lines")
    error: str | None = Field(default=None, description="Failure message")


class TokenUsage(BaseModel):
    """Token usage information from model generation."""

    prompt_tokens: int = Field(default=0, description="Number of tokens in the prompt")
    completion_tokens: int = Field(default=0, description="Number of tokens in the completion")
    total_tokens: int = Field(default=0, description="Total tokens used")


class ServiceResult(BaseModel):
    """Envelope shared by all provider services.

    Failed calls are returned as a bare ServiceResult with ``status=False``.
    """

    status: bool
    service: str | None = None
    message: str | None = None
    error: str | None = None
    details: Any | None = None


class ChatResult(ServiceResult):
    """Result of an OpenAI chat completion."""

    model: str | None = None
    response: str | None = None
    usage: TokenUsage | None = None
    finish_reason: str | None = None


class GeneratedImage(BaseModel):
    """One generated image."""

    id: str
    url: str | None = None
    prompt: str
    revised_prompt: str


class ImageResult(ServiceResult):
    """Result of an image generation request."""

    images: list[GeneratedImage] = Field(default_factory=list)
    size: str | None = None
    quality: str | None = None


class SummaryResult(ChatResult):
    """Result of a Hugging Face summarization."""

    original_length: int | None = None
    summary: str | None = None


class TranslationResult(ChatResult):
    """Result of a translation, from Hugging Face or the OpenAI fallback."""

    original_text: str | None = None
    translated_text: str | None = None
    source_language: str | None = None
    target_language: str | None = None


class SentimentResult(ChatResult):
    """Result of a sentiment analysis."""

    text: str | None = None
    sentiment: str | None = None
    confidence: float | None = None
    explanation: str | None = None
    analysis: str | None = None
    scores: list[dict[str, Any]] | None = None


class ModelComparison(BaseModel):
    """Outcome of one branch of a model comparison."""

    model: str
    response: str | None = None
    status: Literal["success", "failed"]
    tokens: int | None = None
    latency_ms: int


class MostDetailed(BaseModel):
    """The longest successful answer in a comparison."""

    model: str | None = None
    response: str | None = None


class ComparisonResult(ServiceResult):
    """Result of running one query against several models."""

    query: str | None = None
    comparisons: list[ModelComparison] = Field(default_factory=list)
    fastest_model: str | None = None
    most_detailed: MostDetailed | None = None
