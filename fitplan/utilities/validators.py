"""
Input validation schemas using Pydantic for the proxy and plan endpoints.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Optional

from fitplan.utilities.config import DEFAULT_DAYS_PER_WEEK


class GenerateAiPlanRequest(BaseModel):
    """Body of POST /api/generate_ai_plan. Presence is checked by the route (400)."""
    prompt: Optional[str] = None


class AnalyzeNutritionRequest(BaseModel):
    """Body of POST /api/analyze_nutrition."""
    ingredients: Optional[List[str]] = None

    @field_validator('ingredients')
    @classmethod
    def drop_blank_lines(cls, v):
        """Remove empty ingredient lines."""
        if v is None:
            return v
        return [item.strip() for item in v if item and item.strip()]


class GenerationParams(BaseModel):
    """Parameters a plan was generated with; stored next to the raw text.

    The stored blob uses the camel-case keys of the mobile client
    (``TargetWeight``, ``CurrentWeight``, ``DaysPerWeek``), both spellings load.
    """
    model_config = ConfigDict(populate_by_name=True)

    target_weight: Optional[float] = Field(default=None, gt=0, le=500, alias='TargetWeight')
    current_weight: Optional[float] = Field(default=None, gt=0, le=500, alias='CurrentWeight')
    days_per_week: int = Field(default=DEFAULT_DAYS_PER_WEEK, ge=1, le=14, alias='DaysPerWeek')

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class StorePlanRequest(BaseModel):
    """Body of PUT /api/diet-plan."""
    text: str = Field(..., min_length=1)
    params: GenerationParams = Field(default_factory=GenerationParams)
