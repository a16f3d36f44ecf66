"""Pydantic models for API request bodies."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Body(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )


class MealRequest(_Body):
    """Request to log a catalog food."""

    food_id: str
    quantity: float | str | None = None
    meal_type: Literal["breakfast", "lunch", "dinner", "snack"] = "lunch"


class WaterRequest(_Body):
    """Request to add water to today's intake."""

    amount_ml: float = Field(default=250, ge=0, allow_inf_nan=False)


class GoalsPayload(_Body):
    """Complete goals object; partial updates replace goals wholesale."""

    daily_calories: float = Field(gt=0)
    daily_protein: float = Field(gt=0)
    daily_carbs: float = Field(gt=0)
    daily_fat: float = Field(gt=0)
    daily_water: float = Field(gt=0)
    weight_goal: float | None = None
    goal_type: Literal["lose", "maintain", "gain"] | None = None


class ProfileUpdateRequest(_Body):
    """Partial profile update."""

    name: str | None = None
    email: str | None = None
    age: int | None = Field(default=None, ge=0)
    weight: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    gender: Literal["male", "female", "other"] | None = None
    activity_level: (
        Literal["sedentary", "light", "moderate", "active", "very_active"] | None
    ) = None
    goals: GoalsPayload | None = None
