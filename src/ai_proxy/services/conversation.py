"""Conversation service - turns upstream replies into the outbound envelope."""

from ai_proxy.clients.conversation import ConversationClient
from ai_proxy.core.messages import STREAM_FAILURE_MESSAGE
from ai_proxy.schemas.internal import AggregationResult
from ai_proxy.schemas.responses import ConversationReply
from ai_proxy.streaming.aggregator import UpstreamStreamError


class ConversationService:
    """Service for the conversation endpoint."""

    def __init__(self, client: ConversationClient):
        self.client = client

    async def ask(self, query: str, stream: bool = True) -> ConversationReply:
        """
        Forward a query upstream and build the reply envelope.

        Stream failures are not raised: they become a failed reply carrying
        the fixed user-facing message.
        """
        try:
            if stream:
                result = await self.client.stream_message(query)
            else:
                result = await self.client.send_message(query)
        except UpstreamStreamError:
            return ConversationReply(status=False, response="", error=STREAM_FAILURE_MESSAGE)

        return self.to_reply(result)

    @staticmethod
    def to_reply(result: AggregationResult) -> ConversationReply:
        """Map an AggregationResult to the outbound envelope."""
        return ConversationReply(
            status=result.succeeded,
            http_status=result.http_status,
            response=result.message,
            raw=result.raw_events,
            error=None if result.succeeded else f"Upstream responded with HTTP {result.http_status}",
        )
