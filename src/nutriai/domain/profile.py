"""User profile and goal models."""

from dataclasses import dataclass
from typing import Literal

Gender = Literal["male", "female", "other"]
ActivityLevel = Literal["sedentary", "light", "moderate", "active", "very_active"]
GoalType = Literal["lose", "maintain", "gain"]


@dataclass(frozen=True)
class UserGoals:
    """Daily targets used as progress denominators."""

    daily_calories: float
    daily_protein: float
    daily_carbs: float
    daily_fat: float
    daily_water: float
    weight_goal: float | None = None
    goal_type: GoalType | None = None


@dataclass(frozen=True)
class UserProfile:
    """Represents the app user and their goals."""

    id: str
    name: str
    email: str
    goals: UserGoals
    age: int | None = None
    weight: float | None = None
    height: float | None = None
    gender: Gender | None = None
    activity_level: ActivityLevel | None = None
