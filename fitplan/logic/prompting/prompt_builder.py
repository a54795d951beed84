"""Prompt builder for plan generation.

Provides build_plan_prompt(params): the request sent to the LLM asks for the
same "Day N:" / "Breakfast: Name: description" layout plan_extractor reads.
"""
from fitplan.utilities.constants import PLAN_PROMPT_TEMPLATE
from fitplan.utilities.validators import GenerationParams


def _fmt_weight(value: float) -> str:
    return f"{value:g} kg"


def _goal_sentence(params: GenerationParams) -> str:
    current, target = params.current_weight, params.target_weight
    if current and target:
        if target < current:
            direction = "lose weight"
        elif target > current:
            direction = "gain weight"
        else:
            direction = "maintain weight"
        return (f"The client currently weighs {_fmt_weight(current)} and wants to "
                f"{direction}, reaching {_fmt_weight(target)}.")
    if target:
        return f"The client's target weight is {_fmt_weight(target)}."
    if current:
        return f"The client currently weighs {_fmt_weight(current)}."
    return "The client wants a balanced, healthy plan."


def build_plan_prompt(params: GenerationParams) -> str:
    return PLAN_PROMPT_TEMPLATE.format(
        days=params.days_per_week,
        goal=_goal_sentence(params),
    ).strip()
