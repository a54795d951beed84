"""DailyPlan domain entity: weekday label, the three fixed meals and an ordered snack list."""
from dataclasses import dataclass
from typing import List, Tuple

from fitplan.domain.MealEntry import MealEntry, default_meal
from fitplan.utilities.constants import BREAKFAST, DINNER, LUNCH, WEEKDAYS


def label_for_index(index: int) -> str:
    """Weekday name for the index-th day of a plan, starting on Monday."""
    return WEEKDAYS[index % len(WEEKDAYS)]


@dataclass(frozen=True)
class DailyPlan:
    day_label: str
    breakfast: MealEntry
    lunch: MealEntry
    dinner: MealEntry
    snacks: Tuple[MealEntry, ...] = ()

    def to_dict(self):
        return {
            "day_label": self.day_label,
            "breakfast": self.breakfast.to_dict(),
            "lunch": self.lunch.to_dict(),
            "dinner": self.dinner.to_dict(),
            "snacks": [s.to_dict() for s in self.snacks],
        }


# A weekly plan is the reconciled, fixed-length day sequence handed to callers
WeeklyPlan = List[DailyPlan]


def default_day(index: int) -> DailyPlan:
    return DailyPlan(
        day_label=label_for_index(index),
        breakfast=default_meal(BREAKFAST),
        lunch=default_meal(LUNCH),
        dinner=default_meal(DINNER),
    )


def weekly_plan_to_list(plan: WeeklyPlan) -> list:
    return [day.to_dict() for day in plan]
