# path: ride-tracker-api/ride_api/services/text_generation.py

from __future__ import annotations

from typing import Optional, Protocol

from google import genai
from google.genai import errors as genai_errors


class TextGenerationError(RuntimeError):
    """The remote text service failed (quota, availability, bad response)."""


class TextGenerator(Protocol):
    async def generate(self, model_id: str, prompt: str) -> str: ...


class GeminiTextGenerator:
    def __init__(self, api_key: str, client: Optional[genai.Client] = None):
        if not api_key and client is None:
            raise TextGenerationError("A Gemini API key is required")
        self._client = client or genai.Client(api_key=api_key)

    async def generate(self, model_id: str, prompt: str) -> str:
        try:
            response = await self._client.aio.models.generate_content(model=model_id, contents=prompt)
        except genai_errors.APIError as e:
            raise TextGenerationError(f"{model_id}: {e}") from e
        text = response.text
        if not text or not text.strip():
            raise TextGenerationError(f"{model_id}: empty response")
        return text


class UnavailableTextGenerator:
    """Stand-in used when no API key is configured; every call fails."""

    async def generate(self, model_id: str, prompt: str) -> str:
        raise TextGenerationError("Text generation is not configured")
