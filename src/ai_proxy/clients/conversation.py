"""Client for the upstream conversation API."""

import json
import time

import httpx

from ai_proxy.observability import get_logger, truncate_text
from ai_proxy.observability.constants import LogEvents
from ai_proxy.schemas.internal import AggregationResult, UpstreamProfile
from ai_proxy.schemas.requests import ConversationRequest
from ai_proxy.streaming.aggregator import (
    TEXT_FIELDS,
    UpstreamStreamError,
    aggregate_stream,
    build_result,
    extract_text,
)

logger = get_logger(__name__)

# A buffered body may also carry the whole answer under "response"
BUFFERED_TEXT_FIELDS = (*TEXT_FIELDS, "response")


class ConversationClient:
    """Client for posting user messages to the conversation upstream."""

    def __init__(
        self,
        profile: UpstreamProfile,
        timeout: float = 120.0,
        max_buffer_bytes: int | None = None,
    ):
        self.profile = profile
        self.timeout = httpx.Timeout(timeout)
        self.max_buffer_bytes = max_buffer_bytes

    def build_request(self, message: str) -> ConversationRequest:
        """Build the upstream request body for a message."""
        return ConversationRequest(
            user_id=self.profile.user_id,
            message=message,
            new_conversation=self.profile.conversation_id == 0,
            conversation_id=self.profile.conversation_id,
            web_search=self.profile.web_search,
        )

    async def stream_message(self, message: str) -> AggregationResult:
        """
        Send a message and aggregate the streamed SSE reply.

        Args:
            message: The user's text

        Returns:
            AggregationResult; a non-200 status resolves with succeeded=False

        Raises:
            UpstreamStreamError: If the connection or the stream fails
        """
        start_time = time.perf_counter()
        body = self.build_request(message).model_dump()
        logger.info(LogEvents.CONVERSATION_STREAM_STARTED, url=self.profile.url)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                async with client.stream(
                    "POST",
                    self.profile.url,
                    json=body,
                    headers={**self.profile.headers(), "Accept": "text/event-stream"},
                ) as response:
                    result = await aggregate_stream(
                        response.aiter_bytes(),
                        response.status_code,
                        max_buffer_bytes=self.max_buffer_bytes,
                    )
            except UpstreamStreamError as e:
                logger.error(LogEvents.CONVERSATION_STREAM_FAILED, error=str(e))
                raise
            except httpx.TransportError as e:
                logger.error(LogEvents.CONVERSATION_STREAM_FAILED, error=str(e))
                raise UpstreamStreamError(f"Conversation upstream unreachable: {e}", cause=e) from e

        self._log_outcome(result, start_time)
        return result

    async def send_message(self, message: str) -> AggregationResult:
        """
        Send a message and read the reply as one buffered body.

        A JSON object body is read through the usual text fields (plus
        ``response``); any other body is aggregated like a stream.

        Raises:
            UpstreamStreamError: If the connection fails
        """
        start_time = time.perf_counter()
        body = self.build_request(message).model_dump()

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(
                    self.profile.url,
                    json=body,
                    headers=self.profile.headers(),
                )
            except httpx.TransportError as e:
                logger.error(LogEvents.CONVERSATION_STREAM_FAILED, error=str(e))
                raise UpstreamStreamError(f"Conversation upstream unreachable: {e}", cause=e) from e

        text = response.text
        result = build_result(text, response.status_code)
        try:
            found = extract_text(json.loads(text), BUFFERED_TEXT_FIELDS)
        except (ValueError, RecursionError):
            found = None
        if found is not None:
            result = AggregationResult(
                http_status=response.status_code,
                succeeded=response.status_code == 200,
                message=found[1],
                raw_events=[],
            )

        self._log_outcome(result, start_time)
        return result

    def _log_outcome(self, result: AggregationResult, start_time: float) -> None:
        latency_ms = int((time.perf_counter() - start_time) * 1000)
        if result.succeeded:
            logger.info(
                LogEvents.CONVERSATION_STREAM_COMPLETED,
                http_status=result.http_status,
                events=len(result.raw_events),
                latency_ms=latency_ms,
            )
        else:
            logger.warning(
                LogEvents.CONVERSATION_UPSTREAM_REJECTED,
                http_status=result.http_status,
                body=truncate_text(result.message),
                latency_ms=latency_ms,
            )
