import os
import logging
from typing import Any, List, Optional

import httpx
from openai import AsyncOpenAI, APIConnectionError, APIStatusError

from fitplan.utilities.config import (
    AI_PROVIDER,
    GEMINI_API_BASE,
    GEMINI_MODEL,
    HTTP_TIMEOUT_SECONDS,
    OPENAI_MODEL,
)
from fitplan.utilities.errors import (
    ProviderNotConfiguredError,
    UpstreamParseError,
    UpstreamResponseError,
    UpstreamTransportError,
)

logger = logging.getLogger(__name__)


# === Gemini (REST generateContent) ===
def _first_candidate_text(data: Any) -> Optional[str]:
    """Return candidates[0].content.parts[0].text or None if any level is missing."""
    try:
        text = data["candidates"][0]["content"]["parts"][0].get("text")
    except (KeyError, IndexError, TypeError, AttributeError):
        return None
    return text if isinstance(text, str) else None


class GeminiProvider:
    name = "Gemini"

    def __init__(self, api_key: str, model: str = GEMINI_MODEL, base_url: str = GEMINI_API_BASE,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 timeout: float = HTTP_TIMEOUT_SECONDS):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.transport = transport
        self.timeout = timeout

    async def generate(self, prompt: str) -> str:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {"contents": [{"parts": [{"text": prompt}]}]}

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.post(url, params={"key": self.api_key}, json=payload)
        except httpx.RequestError as e:
            logger.error("Gemini API HTTP error: %s", e)
            raise UpstreamTransportError(f"Error calling Gemini API: {e}") from e

        if not response.is_success:
            logger.error("Gemini API error status: %s, response: %s", response.status_code, response.text)
            raise UpstreamResponseError(self.name, response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            logger.error("JSON decode error from successful Gemini response: %s. Body: %s", e, response.text)
            raise UpstreamParseError(f"Failed to parse successful Gemini API response: {e}") from e

        text = _first_candidate_text(data)
        if not text:
            logger.error("Gemini API returned success, but no text was extracted. Body: %s", response.text)
            raise UpstreamParseError(
                "Could not extract AI response text from Gemini. Response might be empty or malformed."
            )
        return text


# === OpenAI (Responses API) ===
class OpenAIProvider:
    name = "OpenAI"

    def __init__(self, api_key: str, model: str = OPENAI_MODEL, client: Optional[AsyncOpenAI] = None):
        self.model = model
        self.client = client or AsyncOpenAI(api_key=api_key, timeout=HTTP_TIMEOUT_SECONDS)

    async def generate(self, prompt: str) -> str:
        try:
            response = await self.client.responses.create(model=self.model, input=prompt)
        except APIConnectionError as e:
            logger.error("OpenAI API connection error: %s", e)
            raise UpstreamTransportError(f"Error calling OpenAI API: {e}") from e
        except APIStatusError as e:
            body = e.response.text if e.response is not None else str(e)
            logger.error("OpenAI API error status: %s, response: %s", e.status_code, body)
            raise UpstreamResponseError(self.name, e.status_code, body) from e

        text = (response.output_text or "").strip()
        if not text:
            logger.warning("OpenAI returned an empty response")
            raise UpstreamParseError("Could not extract AI response text from OpenAI. Response was empty.")
        return text


# === Helper: pick the configured provider ===
def build_ai_provider():
    """Return the provider named by AI_PROVIDER, raising if its key is not set."""
    provider = os.getenv("AI_PROVIDER", AI_PROVIDER).strip().lower()
    if provider == "openai":
        api_key = os.environ.get("OPENAI_API_KEY")
        if not api_key:
            raise ProviderNotConfiguredError("OpenAI API key is not configured on the backend.")
        return OpenAIProvider(api_key)
    if provider == "gemini":
        api_key = os.environ.get("GEMINI_API_KEY")
        if not api_key:
            raise ProviderNotConfiguredError("Gemini API key is not configured on the backend.")
        return GeminiProvider(api_key)
    raise ProviderNotConfiguredError(f"Unknown AI provider '{provider}'.")


def missing_credentials() -> List[str]:
    """Names of provider credentials absent from the environment."""
    provider = os.getenv("AI_PROVIDER", AI_PROVIDER).strip().lower()
    ai_key = "OPENAI_API_KEY" if provider == "openai" else "GEMINI_API_KEY"
    names = [ai_key, "EDAMAM_APP_ID", "EDAMAM_APP_KEY"]
    return [n for n in names if not os.environ.get(n)]
