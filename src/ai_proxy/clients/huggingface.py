"""Client for Hugging Face hosted inference models."""

from typing import Any

from ai_proxy.clients.base import JSONProviderClient
from ai_proxy.clients.errors import ProviderClientError
from ai_proxy.schemas.requests import InferenceRequest

SUMMARIZATION_MODEL = "facebook/bart-large-cnn"
SENTIMENT_MODEL = "distilbert-base-uncased-finetuned-sst-2-english"
DEFAULT_TRANSLATION_MODEL = "Helsinki-NLP/opus-mt-ar-en"


def translation_model(source: str, target: str) -> str:
    """Model path for a language pair."""
    if source == "ar" and target == "en":
        return DEFAULT_TRANSLATION_MODEL
    return f"Helsinki-NLP/opus-mt-{source}-{target}"


class HuggingFaceClient(JSONProviderClient):
    """Client for the Hugging Face inference API."""

    provider_name = "Hugging Face"

    async def infer(self, model: str, request: InferenceRequest) -> Any:
        """Run a model and return its decoded JSON output."""
        return await self._post(f"/{model}", request.model_dump(exclude_none=True))

    async def summarize(self, text: str) -> str:
        """Summarize text with the BART CNN model."""
        data = await self.infer(
            SUMMARIZATION_MODEL,
            InferenceRequest(
                inputs=text,
                parameters={"max_length": 130, "min_length": 30, "do_sample": False},
            ),
        )
        return self._first_field(data, "summary_text")

    async def translate(self, text: str, model: str) -> str:
        """Translate text with an opus-mt model."""
        data = await self.infer(model, InferenceRequest(inputs=text))
        return self._first_field(data, "translation_text")

    async def classify_sentiment(self, text: str) -> list[dict[str, Any]]:
        """Return the label/score list for the text, best label first."""
        data = await self.infer(SENTIMENT_MODEL, InferenceRequest(inputs=text))
        try:
            scores = data[0]
            if "label" not in scores[0] or "score" not in scores[0]:
                raise KeyError("label")
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderClientError(
                "Hugging Face returned an unexpected sentiment response", details=data
            ) from e
        return scores

    def _first_field(self, data: Any, field: str) -> str:
        try:
            return data[0][field]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderClientError(
                f"Hugging Face response is missing '{field}'", details=data
            ) from e
