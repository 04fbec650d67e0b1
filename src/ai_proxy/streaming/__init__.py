"""Streaming package - SSE aggregation for upstream replies."""

from ai_proxy.streaming.aggregator import (
    StreamAggregator,
    UpstreamStreamError,
    aggregate_stream,
    build_result,
    extract_text,
    parse_events,
    parse_fragment,
)

__all__ = [
    "StreamAggregator",
    "UpstreamStreamError",
    "aggregate_stream",
    "build_result",
    "extract_text",
    "parse_events",
    "parse_fragment",
]
