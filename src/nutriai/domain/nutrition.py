"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionInfo:
    """Quantity of nutrients, per portion or summed."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None


@dataclass(frozen=True)
class FoodItem:
    """Catalog food with nutrition facts for one portion."""

    id: str
    name: str
    portion: str
    nutrition: NutritionInfo
    category: str
    localized_name: str | None = None
