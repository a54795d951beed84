import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from fitplan.infra import ai_providers
from fitplan.utilities.errors import MissingInputError, ProxyError
from fitplan.utilities.validators import GenerateAiPlanRequest

logger = logging.getLogger(__name__)


def http_error(e: ProxyError) -> HTTPException:
    """Translate a proxy failure into the HTTP answer the client sees."""
    return HTTPException(status_code=e.status_code, detail=e.message)


async def generate_text(prompt: str) -> str:
    """Send ``prompt`` to the configured AI provider and return its text.

    Raises ProxyError subclasses; the provider is resolved per call so a key
    added to the environment is picked up without a restart.
    """
    provider = ai_providers.build_ai_provider()
    logger.info("Generating plan text with %s (%d prompt chars)", provider.name, len(prompt))
    return await provider.generate(prompt)


# === FastAPI Endpoint ===
router = APIRouter(prefix="/api")


@router.post("/generate_ai_plan")
async def generate_ai_plan(request: Optional[GenerateAiPlanRequest] = None):
    try:
        if request is None or not request.prompt or not request.prompt.strip():
            raise MissingInputError("Prompt is required.")
        ai_text = await generate_text(request.prompt)
    except ProxyError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("An unexpected error occurred in generate_ai_plan")
        raise HTTPException(status_code=500, detail=f"An unexpected error occurred: {e}")
    return {"aiResponse": ai_text}
