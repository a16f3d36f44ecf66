"""Aggregation of meal entries into nutrition totals."""

from collections.abc import Iterable
from dataclasses import dataclass

from nutriai.domain.meals import DailyLog, MealEntry
from nutriai.domain.nutrition import NutritionInfo
from nutriai.domain.profile import UserGoals

MAX_PERCENT = 100.0


@dataclass(frozen=True)
class DailyProgress:
    """Progress toward each daily goal, clamped to 0-100."""

    calories: float
    protein: float
    carbs: float
    fat: float
    water: float


def empty_nutrition() -> NutritionInfo:
    """Return an all-zero nutrition record."""
    return NutritionInfo(calories=0.0, protein=0.0, carbs=0.0, fat=0.0, fiber=0.0)


def aggregate(entries: Iterable[MealEntry]) -> NutritionInfo:
    """Sum each entry's nutrition scaled by its quantity.

    Missing fiber counts as zero. This is the only place optional nutrient
    fields are resolved to defaults.
    """
    total = empty_nutrition()
    for entry in entries:
        nutrition = entry.food_item.nutrition
        quantity = entry.quantity
        total = NutritionInfo(
            calories=total.calories + nutrition.calories * quantity,
            protein=total.protein + nutrition.protein * quantity,
            carbs=total.carbs + nutrition.carbs * quantity,
            fat=total.fat + nutrition.fat * quantity,
            fiber=(total.fiber or 0.0) + (nutrition.fiber or 0.0) * quantity,
        )
    return total


def build_daily_log(
    date: str, meals: Iterable[MealEntry], water_intake: float = 0.0
) -> DailyLog:
    """Create a daily log whose totals are derived from its meals."""
    resolved = tuple(meals)
    return DailyLog(
        date=date,
        meals=resolved,
        total_nutrition=aggregate(resolved),
        water_intake=water_intake,
    )


def progress_percent(consumed: float, goal: float) -> float:
    """Return consumed/goal as a percentage clamped to 100.

    A non-positive goal yields 0 instead of dividing by zero.
    """
    if goal <= 0:
        return 0.0
    return max(min(consumed / goal * 100, MAX_PERCENT), 0.0)


def daily_progress(log: DailyLog, goals: UserGoals) -> DailyProgress:
    """Return progress percentages of a daily log against the user's goals."""
    totals = log.total_nutrition
    return DailyProgress(
        calories=progress_percent(totals.calories, goals.daily_calories),
        protein=progress_percent(totals.protein, goals.daily_protein),
        carbs=progress_percent(totals.carbs, goals.daily_carbs),
        fat=progress_percent(totals.fat, goals.daily_fat),
        water=progress_percent(log.water_intake, goals.daily_water),
    )
