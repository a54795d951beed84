import logging

from fastapi import APIRouter, Depends, HTTPException

from fitplan.api.api_ai import generate_text, http_error
from fitplan.domain.DailyPlan import weekly_plan_to_list
from fitplan.infra.Plan_Repository import PlanRepository, StoredPlan
from fitplan.logic.parsing.plan_extractor import extract_plan
from fitplan.logic.prompting.prompt_builder import build_plan_prompt
from fitplan.utilities.constants import STORED_PLAN_LOAD_ERROR
from fitplan.utilities.errors import ProxyError, StoredPlanError
from fitplan.utilities.validators import GenerationParams, StorePlanRequest

router = APIRouter(prefix="/api/diet-plan")
logger = logging.getLogger(__name__)


def get_plan_repository() -> PlanRepository:
    return PlanRepository()


def _plan_view(stored: StoredPlan):
    days = extract_plan(stored.text, stored.days_per_week)
    return {"status": "ok", "days": weekly_plan_to_list(days), "params": stored.params}


def _save(repo: PlanRepository, text: str, params: GenerationParams) -> StoredPlan:
    try:
        return repo.save(text, params.to_dict())
    except OSError as e:
        logger.exception("Failed to store plan")
        raise HTTPException(status_code=500, detail=f"Failed to store plan: {e}")


@router.get("")
def get_diet_plan(repo: PlanRepository = Depends(get_plan_repository)):
    """Parse the stored plan text; "empty" when none was generated yet."""
    try:
        stored = repo.load()
    except StoredPlanError as e:
        logger.error("Failed to load stored diet plan: %s", e)
        raise HTTPException(status_code=500, detail=STORED_PLAN_LOAD_ERROR)
    if stored is None:
        return {"status": "empty", "days": [], "params": None}
    return _plan_view(stored)


@router.put("")
def store_diet_plan(body: StorePlanRequest, repo: PlanRepository = Depends(get_plan_repository)):
    stored = _save(repo, body.text, body.params)
    return _plan_view(stored)


@router.delete("")
def clear_diet_plan(repo: PlanRepository = Depends(get_plan_repository)):
    return {"status": "ok", "cleared": repo.clear()}


@router.post("/generate")
async def generate_diet_plan(params: GenerationParams, repo: PlanRepository = Depends(get_plan_repository)):
    """Ask the AI for a new plan, store the raw answer and return the parsed days."""
    prompt = build_plan_prompt(params)
    try:
        ai_text = await generate_text(prompt)
    except ProxyError as e:
        raise http_error(e)
    stored = _save(repo, ai_text, params)
    return _plan_view(stored)
