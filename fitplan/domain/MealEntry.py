"""MealEntry domain entity: one meal or snack of a day (name, description, optional image and macros)."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MealEntry:
    name: str
    description: str
    image_ref: Optional[str] = None
    # Macros are never produced by the text parser; reserved for structured sources
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fats: Optional[float] = None

    def to_dict(self):
        '''Converts the entry to a dictionary for JSON responses.'''
        return {
            "name": self.name,
            "description": self.description,
            "image_ref": self.image_ref,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
        }


def placeholder_description(label: str) -> str:
    return f"No {label.lower()} plan provided."


def default_meal(label: str) -> MealEntry:
    """The one placeholder constructor: label as name, sentinel description, no image."""
    return MealEntry(name=label, description=placeholder_description(label))