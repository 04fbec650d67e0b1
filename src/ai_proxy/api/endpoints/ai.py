"""Provider service endpoints (OpenAI and Hugging Face)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ai_proxy.api.dependencies import get_assistant_service
from ai_proxy.core import messages
from ai_proxy.schemas.responses import ServiceResult
from ai_proxy.services import AssistantService
from ai_proxy.services.assistant import DEFAULT_CHAT_MODEL, DEFAULT_COMPARE_MODELS

router = APIRouter(prefix="/ai", tags=["ai"])

Assistant = Annotated[AssistantService, Depends(get_assistant_service)]
Temperature = Annotated[float, Query(ge=0.0, le=2.0)]
ImageCount = Annotated[int, Query(ge=1, le=10)]


def _respond(result: ServiceResult) -> JSONResponse:
    return JSONResponse(
        status_code=200 if result.status else 500,
        content=result.model_dump(exclude_none=True),
    )


def _split_models(models: str | None) -> list[str]:
    if not models:
        return list(DEFAULT_COMPARE_MODELS)
    return [m.strip() for m in models.split(",") if m.strip()] or list(DEFAULT_COMPARE_MODELS)


@router.get("")
async def dispatch(
    assistant: Assistant,
    service: str | None = None,
    query: str | None = None,
    text: str | None = None,
    model: str = DEFAULT_CHAT_MODEL,
    temperature: Temperature = 0.7,
    max_tokens: Annotated[int, Query(ge=1)] = 1000,
    size: str = "1024x1024",
    quality: str = "standard",
    n: ImageCount = 1,
    target: str = "en",
    source: str = "ar",
    kind: Annotated[str, Query(alias="type")] = "story",
    length: str = "medium",
    style: str = "formal",
    models: str | None = None,
    use_openai: Annotated[bool, Query(alias="useOpenAI")] = False,
) -> JSONResponse:
    """
    Run one provider service selected by `service`.

    Without `service` the list of available services is returned.
    """
    if not service:
        return JSONResponse(content=messages.SERVICES_HELP)

    name = service.lower()
    if name == "chat":
        result = await assistant.chat(
            query, model=model, temperature=temperature, max_tokens=max_tokens
        )
    elif name == "image":
        result = await assistant.generate_image(query, size=size, quality=quality, n=n)
    elif name == "summarize":
        result = await assistant.summarize(query, use_openai=use_openai)
    elif name == "translate":
        result = await assistant.translate(query or text, target=target, source=source)
    elif name == "sentiment":
        result = await assistant.analyze_sentiment(query or text)
    elif name == "creative":
        result = await assistant.creative(query, kind=kind, length=length, style=style)
    elif name == "compare":
        result = await assistant.compare(query, _split_models(models))
    else:
        result = ServiceResult(status=False, message=messages.UNKNOWN_SERVICE)

    return _respond(result)


@router.get("/chat")
async def chat(
    assistant: Assistant,
    query: str | None = None,
    model: str = DEFAULT_CHAT_MODEL,
    temperature: Temperature = 0.7,
) -> JSONResponse:
    """Chat with an OpenAI model."""
    return _respond(await assistant.chat(query, model=model, temperature=temperature))


@router.get("/image")
async def image(
    assistant: Assistant,
    query: str | None = None,
    size: str = "1024x1024",
    n: ImageCount = 1,
) -> JSONResponse:
    """Generate images from a description."""
    return _respond(await assistant.generate_image(query, size=size, n=n))


@router.get("/summarize")
async def summarize(
    assistant: Assistant,
    text: str | None = None,
    use_openai: Annotated[bool, Query(alias="useOpenAI")] = False,
) -> JSONResponse:
    """Summarize a long text."""
    return _respond(await assistant.summarize(text, use_openai=use_openai))


@router.get("/translate")
async def translate(
    assistant: Assistant,
    text: str | None = None,
    target: str = "en",
    source: str = "ar",
) -> JSONResponse:
    """Translate a text between languages."""
    return _respond(await assistant.translate(text, target=target, source=source))


@router.get("/sentiment")
async def sentiment(assistant: Assistant, text: str | None = None) -> JSONResponse:
    """Analyze the sentiment of a text."""
    return _respond(await assistant.analyze_sentiment(text))


@router.get("/creative")
async def creative(
    assistant: Assistant,
    prompt: str | None = None,
    kind: Annotated[str, Query(alias="type")] = "story",
    length: str = "medium",
) -> JSONResponse:
    """Write a story, poem, article or dialogue."""
    return _respond(await assistant.creative(prompt, kind=kind, length=length))


@router.get("/compare")
async def compare(
    assistant: Assistant,
    query: str | None = None,
    models: str | None = None,
) -> JSONResponse:
    """Compare the answers of several models to one question."""
    return _respond(await assistant.compare(query, _split_models(models)))


@router.get("/all-services")
async def all_services() -> dict:
    """Describe every available service."""
    return messages.SERVICES_CATALOG
