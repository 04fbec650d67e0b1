"""Internal DTOs used within the AI proxy service."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class RawEvent(BaseModel):
    """A single `data:` line taken from an upstream SSE body."""

    model_config = ConfigDict(frozen=True)

    line: str = Field(..., description="The trimmed source line, marker included")
    payload: str = Field(..., description="Text after the `data:` marker, trimmed")


class StructuredText(BaseModel):
    """Fragment decoded from a JSON payload carrying a known text field."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["structured"] = "structured"
    text: str
    source_field: str = Field(..., description="Which JSON field supplied the text")


class RawText(BaseModel):
    """Fragment kept verbatim because the payload had no usable JSON text field."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["raw"] = "raw"
    text: str


ParsedFragment = Annotated[StructuredText | RawText, Field(discriminator="kind")]


class AggregationResult(BaseModel):
    """Consolidated reply reduced from one upstream stream."""

    http_status: int = Field(..., description="Status code of the upstream response")
    succeeded: bool = Field(..., description="True only when the upstream returned 200")
    message: str = Field(..., description="Concatenated reply text, never empty")
    raw_events: list[str] = Field(
        default_factory=list, description="Retained `data:` lines, for diagnostics"
    )


class UpstreamProfile(BaseModel):
    """Immutable request profile for the conversation upstream."""

    model_config = ConfigDict(frozen=True)

    url: str
    token: str | None = None
    origin: str
    referer: str
    user_agent: str
    user_id: int
    conversation_id: int = 0
    web_search: bool = True

    def headers(self) -> dict[str, str]:
        """Headers sent with every conversation request."""
        headers = {
            "Content-Type": "application/json",
            "Origin": self.origin,
            "Referer": self.referer,
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Token {self.token}"
        return headers


class ChatCompletion(BaseModel):
    """Normalized OpenAI chat completion."""

    model: str
    content: str
    finish_reason: str | None = None
    usage: dict[str, int] = Field(default_factory=dict)
