"""Reduce an upstream server-sent-event body to a single reply.

The conversation upstream streams its answer token by token as lines of the
form ``data: <json-or-text>``. The aggregator buffers the whole body, then
extracts one text fragment per event and joins them without separators.

Usage:
    result = await aggregate_stream(response.aiter_bytes(), response.status_code)
"""

import codecs
import json
from collections.abc import AsyncIterable, Iterable
from typing import Any

import httpx

from ai_proxy.core.messages import NO_RESPONSE_SENTINEL
from ai_proxy.observability import get_logger
from ai_proxy.observability.constants import LogEvents
from ai_proxy.schemas.internal import (
    AggregationResult,
    ParsedFragment,
    RawEvent,
    RawText,
    StructuredText,
)

logger = get_logger(__name__)

DATA_MARKER = "data:"

# First match wins
TEXT_FIELDS: tuple[str, ...] = ("content", "message", "text", "chunk")

# Failures of the byte source that abort aggregation
TRANSPORT_ERRORS: tuple[type[BaseException], ...] = (
    httpx.TransportError,
    httpx.StreamError,
    OSError,
)


class UpstreamStreamError(Exception):
    """The upstream stream failed before it signalled end-of-stream."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


def _scalar_text(value: Any) -> str | None:
    """Render a truthy JSON scalar the way the upstream's JavaScript clients do."""
    if not value or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return "true"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def extract_text(value: Any, fields: Iterable[str] = TEXT_FIELDS) -> tuple[str, str] | None:
    """Return ``(field, text)`` for the first truthy scalar field of a mapping."""
    if not isinstance(value, dict):
        return None
    for field in fields:
        text = _scalar_text(value.get(field))
        if text is not None:
            return field, text
    return None


def parse_events(buffer: str) -> list[RawEvent]:
    """Split a buffered body into `data:` events, in line order."""
    events = []
    for line in buffer.split("\n"):
        stripped = line.strip()
        if not stripped.startswith(DATA_MARKER):
            continue
        events.append(RawEvent(line=stripped, payload=stripped[len(DATA_MARKER) :].strip()))
    return events


def parse_fragment(event: RawEvent) -> ParsedFragment:
    """Decode one event payload; anything unusable is kept verbatim."""
    # RecursionError: nesting deeper than the decoder's recursion limit
    try:
        decoded = json.loads(event.payload)
    except (ValueError, RecursionError):
        return RawText(text=event.payload)

    found = extract_text(decoded)
    if found is None:
        return RawText(text=event.payload)
    field, text = found
    return StructuredText(text=text, source_field=field)


def build_result(buffer: str, http_status: int) -> AggregationResult:
    """Build the final result from a complete buffer.

    Pure function of its inputs: the same buffer and status always give the
    same result.
    """
    events = parse_events(buffer)
    fragments = [parse_fragment(event) for event in events if event.payload]
    message = "".join(fragment.text for fragment in fragments)

    return AggregationResult(
        http_status=http_status,
        succeeded=http_status == 200,
        message=message or buffer.strip() or NO_RESPONSE_SENTINEL,
        raw_events=[event.line for event in events],
    )


class StreamAggregator:
    """Accumulates chunks of one upstream body and produces its result.

    Chunks are appended strictly in arrival order. Bytes are decoded with an
    incremental UTF-8 decoder so characters split across chunks survive.
    """

    def __init__(self, max_buffer_bytes: int | None = None):
        self.max_buffer_bytes = max_buffer_bytes or None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._parts: list[str] = []
        self._received_bytes = 0
        self._finished = False

    @property
    def received_bytes(self) -> int:
        return self._received_bytes

    def feed(self, chunk: bytes | str) -> None:
        """Append one chunk to the buffer.

        Raises:
            UpstreamStreamError: If the buffer cap is exceeded
            RuntimeError: If the aggregator already finished
        """
        if self._finished:
            raise RuntimeError("Cannot feed a finished StreamAggregator")

        raw = chunk.encode("utf-8") if isinstance(chunk, str) else chunk
        self._received_bytes += len(raw)
        if self.max_buffer_bytes is not None and self._received_bytes > self.max_buffer_bytes:
            self._finished = True
            logger.warning(
                LogEvents.AGGREGATION_BUFFER_EXCEEDED,
                received_bytes=self._received_bytes,
                max_buffer_bytes=self.max_buffer_bytes,
            )
            raise UpstreamStreamError(
                f"Upstream stream exceeded {self.max_buffer_bytes} bytes"
            )

        self._parts.append(self._decoder.decode(raw))

    def finish(self, http_status: int) -> AggregationResult:
        """Close the buffer at end-of-stream and build the result."""
        if self._finished:
            raise RuntimeError("StreamAggregator already finished")
        self._finished = True
        self._parts.append(self._decoder.decode(b"", final=True))

        result = build_result("".join(self._parts), http_status)
        logger.debug(
            LogEvents.AGGREGATION_COMPLETED,
            http_status=http_status,
            events=len(result.raw_events),
            received_bytes=self._received_bytes,
        )
        return result


async def aggregate_stream(
    chunks: AsyncIterable[bytes | str],
    http_status: int,
    max_buffer_bytes: int | None = None,
) -> AggregationResult:
    """Consume an async chunk source to end-of-stream and aggregate it.

    Args:
        chunks: Async iterable of body chunks (e.g. ``response.aiter_bytes()``)
        http_status: Status code of the upstream response
        max_buffer_bytes: Optional cap on the buffered body size

    Returns:
        AggregationResult; a non-200 status still resolves, with succeeded=False

    Raises:
        UpstreamStreamError: If the source fails mid-stream. Buffered data is discarded.
    """
    aggregator = StreamAggregator(max_buffer_bytes=max_buffer_bytes)
    try:
        async for chunk in chunks:
            aggregator.feed(chunk)
    except TRANSPORT_ERRORS as e:
        raise UpstreamStreamError(
            f"Upstream stream failed after {aggregator.received_bytes} bytes: {e}",
            cause=e,
        ) from e
    return aggregator.finish(http_status)
