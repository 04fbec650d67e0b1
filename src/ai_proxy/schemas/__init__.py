"""Schemas package - request/response models for the AI proxy."""

from ai_proxy.schemas.internal import (
    AggregationResult,
    ChatCompletion,
    ParsedFragment,
    RawEvent,
    RawText,
    StructuredText,
    UpstreamProfile,
)
from ai_proxy.schemas.requests import (
    ChatCompletionRequest,
    ConversationRequest,
    ImageGenerationRequest,
    InferenceRequest,
    Message,
)
from ai_proxy.schemas.responses import (
    ChatResult,
    ComparisonResult,
    ConversationReply,
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

__all__ = [
    # Requests
    "ChatCompletionRequest",
    "ConversationRequest",
    "ImageGenerationRequest",
    "InferenceRequest",
    "Message",
    # Responses
    "ChatResult",
    "ComparisonResult",
    "ConversationReply",
    "GeneratedImage",
    "ImageResult",
    "ModelComparison",
    "MostDetailed",
    "SentimentResult",
    "ServiceResult",
    "SummaryResult",
    "TokenUsage",
    "TranslationResult",
    # Internal
    "AggregationResult",
    "ChatCompletion",
    "ParsedFragment",
    "RawEvent",
    "RawText",
    "StructuredText",
    "UpstreamProfile",
]
