"""Tests for the profile store."""

import pytest

from nutriai.domain.profile import UserGoals
from nutriai.services.profile import DEFAULT_PROFILE, ProfileStore


def test_default_profile_uses_seed_goals() -> None:
    store = ProfileStore()

    goals = store.profile.goals
    assert store.profile == DEFAULT_PROFILE
    assert (goals.daily_calories, goals.daily_protein) == (2000, 150)
    assert (goals.daily_carbs, goals.daily_fat, goals.daily_water) == (200, 65, 2500)


def test_update_profile_merges_shallowly() -> None:
    store = ProfileStore()

    updated = store.update_profile({"name": "Ayşe", "age": 31})

    assert updated.name == "Ayşe"
    assert updated.age == 31
    assert updated.email == DEFAULT_PROFILE.email
    assert updated.goals == DEFAULT_PROFILE.goals
    assert store.profile == updated


def test_update_profile_replaces_goals_wholesale() -> None:
    store = ProfileStore()
    store.update_profile(
        {
            "goals": UserGoals(
                daily_calories=1800,
                daily_protein=120,
                daily_carbs=180,
                daily_fat=60,
                daily_water=2000,
                weight_goal=70,
                goal_type="lose",
            )
        }
    )

    updated = store.update_profile(
        {
            "goals": {
                "daily_calories": 2200,
                "daily_protein": 160,
                "daily_carbs": 220,
                "daily_fat": 70,
                "daily_water": 3000,
            }
        }
    )

    assert updated.goals.daily_calories == 2200
    assert updated.goals.weight_goal is None
    assert updated.goals.goal_type is None
    assert updated.name == DEFAULT_PROFILE.name


def test_update_profile_rejects_unknown_fields() -> None:
    store = ProfileStore()

    with pytest.raises(ValueError):
        store.update_profile({"nickname": "x"})


def test_update_profile_rejects_partial_goals() -> None:
    store = ProfileStore()

    with pytest.raises(ValueError):
        store.update_profile({"goals": {"daily_calories": 1500}})
    assert store.profile == DEFAULT_PROFILE


def test_update_profile_rejects_zero_goal() -> None:
    store = ProfileStore()
    goals = {
        "daily_calories": 0,
        "daily_protein": 150,
        "daily_carbs": 200,
        "daily_fat": 65,
        "daily_water": 2500,
    }

    with pytest.raises(ValueError):
        store.update_profile({"goals": goals})
    assert store.profile == DEFAULT_PROFILE
