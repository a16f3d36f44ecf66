"""JSON codec for the persisted daily logs and profile records."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from nutriai.domain.meals import DailyLog, MealEntry
from nutriai.domain.nutrition import FoodItem, NutritionInfo
from nutriai.domain.profile import UserGoals, UserProfile
from nutriai.services.aggregation import build_daily_log


class _Record(BaseModel):
    """Base for stored records with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NutritionInfoRecord(_Record):
    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    fiber: float | None = Field(default=None, ge=0)


class FoodItemRecord(_Record):
    id: str
    name: str
    localized_name: str | None = None
    portion: str
    nutrition: NutritionInfoRecord
    category: str


class MealEntryRecord(_Record):
    id: str
    food_item: FoodItemRecord
    quantity: float = Field(gt=0)
    timestamp: datetime
    meal_type: Literal["breakfast", "lunch", "dinner", "snack"]


class DailyLogRecord(_Record):
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    meals: list[MealEntryRecord] = Field(default_factory=list)
    total_nutrition: NutritionInfoRecord | None = None
    water_intake: float = Field(default=0.0, ge=0)


class UserGoalsRecord(_Record):
    daily_calories: float = Field(gt=0)
    daily_protein: float = Field(gt=0)
    daily_carbs: float = Field(gt=0)
    daily_fat: float = Field(gt=0)
    daily_water: float = Field(gt=0)
    weight_goal: float | None = None
    goal_type: Literal["lose", "maintain", "gain"] | None = None


class UserProfileRecord(_Record):
    id: str
    name: str
    email: str
    age: int | None = None
    weight: float | None = None
    height: float | None = None
    gender: Literal["male", "female", "other"] | None = None
    activity_level: (
        Literal["sedentary", "light", "moderate", "active", "very_active"] | None
    ) = None
    goals: UserGoalsRecord


_LOGS_ADAPTER = TypeAdapter(list[DailyLogRecord])


def encode_logs(logs: list[DailyLog]) -> str:
    """Serialize daily logs to a JSON array."""
    records = [_log_to_record(log) for log in logs]
    return _LOGS_ADAPTER.dump_json(records, by_alias=True, exclude_none=True).decode()


def decode_logs(raw: str) -> list[DailyLog]:
    """Parse a JSON array of daily logs.

    Stored totals are ignored and re-derived from the meals.
    """
    records = _LOGS_ADAPTER.validate_json(raw)
    return [_log_from_record(record) for record in records]


def encode_profile(profile: UserProfile) -> str:
    """Serialize a user profile to a JSON object."""
    return _profile_to_record(profile).model_dump_json(by_alias=True, exclude_none=True)


def decode_profile(raw: str) -> UserProfile:
    """Parse a JSON user profile."""
    record = UserProfileRecord.model_validate_json(raw)
    return _profile_from_record(record)


def encode_profile_dict(profile: UserProfile) -> dict[str, object]:
    """Return the camelCase mapping for a profile."""
    return _profile_to_record(profile).model_dump(
        mode="json", by_alias=True, exclude_none=True
    )


def encode_log_dict(log: DailyLog) -> dict[str, object]:
    """Return the camelCase mapping for a daily log."""
    return _log_to_record(log).model_dump(mode="json", by_alias=True, exclude_none=True)


def encode_food_dict(food: FoodItem) -> dict[str, object]:
    """Return the camelCase mapping for a catalog food."""
    return _food_to_record(food).model_dump(
        mode="json", by_alias=True, exclude_none=True
    )


def _nutrition_to_record(nutrition: NutritionInfo) -> NutritionInfoRecord:
    return NutritionInfoRecord(
        calories=nutrition.calories,
        protein=nutrition.protein,
        carbs=nutrition.carbs,
        fat=nutrition.fat,
        fiber=nutrition.fiber,
    )


def _nutrition_from_record(record: NutritionInfoRecord) -> NutritionInfo:
    return NutritionInfo(
        calories=record.calories,
        protein=record.protein,
        carbs=record.carbs,
        fat=record.fat,
        fiber=record.fiber,
    )


def _food_to_record(food: FoodItem) -> FoodItemRecord:
    return FoodItemRecord(
        id=food.id,
        name=food.name,
        localized_name=food.localized_name,
        portion=food.portion,
        nutrition=_nutrition_to_record(food.nutrition),
        category=food.category,
    )


def _food_from_record(record: FoodItemRecord) -> FoodItem:
    return FoodItem(
        id=record.id,
        name=record.name,
        localized_name=record.localized_name,
        portion=record.portion,
        nutrition=_nutrition_from_record(record.nutrition),
        category=record.category,
    )


def _log_to_record(log: DailyLog) -> DailyLogRecord:
    return DailyLogRecord(
        date=log.date,
        meals=[
            MealEntryRecord(
                id=meal.id,
                food_item=_food_to_record(meal.food_item),
                quantity=meal.quantity,
                timestamp=meal.timestamp,
                meal_type=meal.meal_type,
            )
            for meal in log.meals
        ],
        total_nutrition=_nutrition_to_record(log.total_nutrition),
        water_intake=log.water_intake,
    )


def _log_from_record(record: DailyLogRecord) -> DailyLog:
    meals = [
        MealEntry(
            id=meal.id,
            food_item=_food_from_record(meal.food_item),
            quantity=meal.quantity,
            timestamp=meal.timestamp,
            meal_type=meal.meal_type,
        )
        for meal in record.meals
    ]
    return build_daily_log(record.date, meals, water_intake=record.water_intake)


def _profile_to_record(profile: UserProfile) -> UserProfileRecord:
    goals = profile.goals
    return UserProfileRecord(
        id=profile.id,
        name=profile.name,
        email=profile.email,
        age=profile.age,
        weight=profile.weight,
        height=profile.height,
        gender=profile.gender,
        activity_level=profile.activity_level,
        goals=UserGoalsRecord(
            daily_calories=goals.daily_calories,
            daily_protein=goals.daily_protein,
            daily_carbs=goals.daily_carbs,
            daily_fat=goals.daily_fat,
            daily_water=goals.daily_water,
            weight_goal=goals.weight_goal,
            goal_type=goals.goal_type,
        ),
    )


def _profile_from_record(record: UserProfileRecord) -> UserProfile:
    goals = record.goals
    return UserProfile(
        id=record.id,
        name=record.name,
        email=record.email,
        age=record.age,
        weight=record.weight,
        height=record.height,
        gender=record.gender,
        activity_level=record.activity_level,
        goals=UserGoals(
            daily_calories=goals.daily_calories,
            daily_protein=goals.daily_protein,
            daily_carbs=goals.daily_carbs,
            daily_fat=goals.daily_fat,
            daily_water=goals.daily_water,
            weight_goal=goals.weight_goal,
            goal_type=goals.goal_type,
        ),
    )
