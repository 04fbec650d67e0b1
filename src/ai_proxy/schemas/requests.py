"""Request schemas for upstream provider calls."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class Message(BaseModel):
    """A message in a chat conversation."""

    role: Literal["system", "user", "assistant"]
    content: str


class ConversationRequest(BaseModel):
    """Body posted to the conversation upstream."""

    user_id: int
    sender: Literal["user"] = "user"
    message: str
    new_conversation: bool
    conversation_id: int
    web_search: bool


class ChatCompletionRequest(BaseModel):
    """Request to the OpenAI chat completions interface."""

    model: str
    messages: list[Message] = Field(..., description="List of messages in the conversation")
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_tokens: int = Field(default=1000, ge=1)


class ImageGenerationRequest(BaseModel):
    """Request to the OpenAI image generation interface."""

    prompt: str
    n: int = Field(default=1, ge=1, le=10)
    size: str = "1024x1024"
    quality: str = "standard"


class InferenceRequest(BaseModel):
    """Request to a Hugging Face inference model."""

    inputs: str
    parameters: dict[str, Any] | None = None
