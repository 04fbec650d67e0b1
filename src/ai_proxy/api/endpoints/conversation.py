"""Conversation endpoint - forwards a query to the chat upstream."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ai_proxy.api.dependencies import get_conversation_service
from ai_proxy.core.messages import CONVERSATION_HELP
from ai_proxy.services import ConversationService

router = APIRouter(prefix="/chat", tags=["conversation"])


@router.get("")
async def conversation(
    service: Annotated[ConversationService, Depends(get_conversation_service)],
    q: Annotated[str | None, Query(description="Text to send upstream")] = None,
    query: Annotated[str | None, Query(description="Alias of q")] = None,
    stream: Annotated[bool, Query(description="Consume the upstream reply as SSE")] = True,
) -> JSONResponse:
    """
    Send a query to the conversation upstream and return one consolidated reply.

    Without `q` (or `query`) a static help payload is returned and upstream is
    not called.

    **Response:**
    - `status`: true only when the upstream answered with HTTP 200
    - `http_status`: upstream status code
    - `response`: the reply text
    - `raw`: the upstream `data:` lines
    - `error`: present on failure
    """
    text = (q or query or "").strip()
    if not text:
        return JSONResponse(content=CONVERSATION_HELP)

    reply = await service.ask(text, stream=stream)
    return JSONResponse(
        status_code=200 if reply.status else 500,
        content=reply.model_dump(exclude_none=True),
    )
