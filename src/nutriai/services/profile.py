"""Profile and goal store."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace

from nutriai.domain.profile import UserGoals, UserProfile

DEFAULT_GOALS = UserGoals(
    daily_calories=2000,
    daily_protein=150,
    daily_carbs=200,
    daily_fat=65,
    daily_water=2500,
)

DEFAULT_PROFILE = UserProfile(id="1", name="User", email="", goals=DEFAULT_GOALS)

_PROFILE_FIELDS = frozenset(item.name for item in fields(UserProfile))
_GOAL_FIELDS = frozenset(item.name for item in fields(UserGoals))
_REQUIRED_GOALS = (
    "daily_calories",
    "daily_protein",
    "daily_carbs",
    "daily_fat",
    "daily_water",
)


@dataclass
class ProfileStore:
    """Holds the current profile and merges partial updates."""

    profile: UserProfile = field(default_factory=lambda: DEFAULT_PROFILE)

    def update_profile(self, partial: Mapping[str, object]) -> UserProfile:
        """Shallow-merge fields over the current profile.

        A ``goals`` entry replaces the whole goals object.
        """
        unknown = set(partial) - _PROFILE_FIELDS
        if unknown:
            raise ValueError(f"Unknown profile fields: {', '.join(sorted(unknown))}")
        changes = dict(partial)
        if "goals" in changes:
            changes["goals"] = coerce_goals(changes["goals"])
        updated = replace(self.profile, **changes)
        validate_goals(updated.goals)
        self.profile = updated
        return updated

    def replace_profile(self, profile: UserProfile) -> None:
        """Swap in a profile loaded from storage."""
        validate_goals(profile.goals)
        self.profile = profile


def coerce_goals(value: object) -> UserGoals:
    """Return goals from a ``UserGoals`` or a mapping of goal fields."""
    if isinstance(value, UserGoals):
        return value
    if isinstance(value, Mapping):
        unknown = set(value) - _GOAL_FIELDS
        if unknown:
            raise ValueError(f"Unknown goal fields: {', '.join(sorted(unknown))}")
        missing = [name for name in _REQUIRED_GOALS if name not in value]
        if missing:
            raise ValueError(f"Missing goal fields: {', '.join(missing)}")
        return UserGoals(**value)
    raise ValueError("Goals must be a mapping of goal fields")


def validate_goals(goals: UserGoals) -> None:
    """Ensure every daily target is a finite positive number."""
    for name in _REQUIRED_GOALS:
        value = getattr(goals, name)
        if (
            isinstance(value, bool)
            or not isinstance(value, int | float)
            or not math.isfinite(value)
            or value <= 0
        ):
            raise ValueError(f"Goal {name} must be a positive number, got {value!r}")
