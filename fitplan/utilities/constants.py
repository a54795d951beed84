from typing import Final

WEEKDAYS: Final[tuple[str, ...]] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Meal headers in the order they appear inside one day's section
BREAKFAST: Final[str] = "Breakfast"
LUNCH: Final[str] = "Lunch"
DINNER: Final[str] = "Dinner"
SNACKS: Final[str] = "Snacks"
SECTION_LABELS: Final[tuple[str, ...]] = (BREAKFAST, LUNCH, DINNER, SNACKS)

# Headers that end a day's meal content (everything after them is not food)
TRAILING_SECTION_LABELS: Final[tuple[str, ...]] = ("Workout Plan",)

SNACK_NAME: Final[str] = "Snack"
NAME_SEPARATOR: Final[str] = ": "

STORED_PLAN_KEY: Final[str] = "lastGeneratedDietPlan"
STORED_PLAN_LOAD_ERROR: Final[str] = "Failed to load stored plan."

IMAGE_BASE_URL: Final[str] = "https://source.unsplash.com/featured/"

PLAN_PROMPT_TEMPLATE: Final[str] = (
    """
You are a nutrition and fitness coach. Create a {days}-day diet and workout plan.
{goal}
Write exactly {days} sections, one per day, using this format and nothing else:

Day 1:
Breakfast: <meal name>: <short description>
Lunch: <meal name>: <short description>
Dinner: <meal name>: <short description>
Snacks:
- <snack name>: <short description>
- <snack name>: <short description>
Workout Plan:
<workout for the day>

Number the days from 1 to {days}. Keep every meal on a single line.
"""
)
