import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from fitplan.api.api_ai import http_error
from fitplan.infra import nutrition_client
from fitplan.utilities.errors import MissingInputError, ProxyError
from fitplan.utilities.validators import AnalyzeNutritionRequest

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.post("/analyze_nutrition")
async def analyze_nutrition(request: Optional[AnalyzeNutritionRequest] = None):
    """Forward an ingredient list to Edamam and return its raw JSON."""
    try:
        if request is None or not request.ingredients:
            raise MissingInputError("An array of ingredients is required.")
        client = nutrition_client.build_nutrition_client()
        return await client.analyze(request.ingredients)
    except ProxyError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("An unexpected error occurred in analyze_nutrition")
        raise HTTPException(status_code=500, detail=f"An unexpected error occurred: {e}")
