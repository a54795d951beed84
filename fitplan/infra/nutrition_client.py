"""Edamam nutrition-details client; returns the provider's JSON untouched."""
import os
import logging
from typing import Any, List, Optional

import httpx

from fitplan.utilities.config import EDAMAM_API_BASE, HTTP_TIMEOUT_SECONDS
from fitplan.utilities.errors import (
    ProviderNotConfiguredError,
    UpstreamParseError,
    UpstreamResponseError,
    UpstreamTransportError,
)

logger = logging.getLogger(__name__)


class EdamamClient:
    name = "Edamam"

    def __init__(self, app_id: str, app_key: str, base_url: str = EDAMAM_API_BASE,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 timeout: float = HTTP_TIMEOUT_SECONDS):
        self.app_id = app_id
        self.app_key = app_key
        self.base_url = base_url.rstrip("/")
        self.transport = transport
        self.timeout = timeout

    async def analyze(self, ingredients: List[str]) -> Any:
        url = f"{self.base_url}/nutrition-details"
        params = {"app_id": self.app_id, "app_key": self.app_key}

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.post(url, params=params, json={"ingredients": ingredients})
        except httpx.RequestError as e:
            logger.error("Edamam API HTTP error: %s", e)
            raise UpstreamTransportError(f"Error calling Edamam API: {e}") from e

        if not response.is_success:
            logger.error("Edamam API error status: %s, response: %s", response.status_code, response.text)
            raise UpstreamResponseError(self.name, response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            logger.error("JSON decode error from successful Edamam response: %s", e)
            raise UpstreamParseError(f"Failed to parse successful Edamam API response: {e}") from e


def build_nutrition_client() -> EdamamClient:
    app_id = os.environ.get("EDAMAM_APP_ID")
    app_key = os.environ.get("EDAMAM_APP_KEY")
    if not app_id or not app_key:
        raise ProviderNotConfiguredError("Edamam API keys are not configured on the backend.")
    return EdamamClient(app_id, app_key)
