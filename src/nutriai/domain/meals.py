"""Domain models for meal logging."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from nutriai.domain.nutrition import FoodItem, NutritionInfo

MealType = Literal["breakfast", "lunch", "dinner", "snack"]

MEAL_TYPES: tuple[str, ...] = ("breakfast", "lunch", "dinner", "snack")


@dataclass(frozen=True)
class MealEntry:
    """One recorded instance of eating a quantity of a food."""

    id: str
    food_item: FoodItem
    quantity: float
    timestamp: datetime
    meal_type: MealType


@dataclass(frozen=True)
class DailyLog:
    """Nutrition and water ledger for one calendar date.

    Build instances through ``aggregation.build_daily_log`` so that
    ``total_nutrition`` always matches ``meals``.
    """

    date: str
    meals: tuple[MealEntry, ...] = ()
    total_nutrition: NutritionInfo = field(
        default_factory=lambda: NutritionInfo(0.0, 0.0, 0.0, 0.0, 0.0)
    )
    water_intake: float = 0.0
