"""Tests for period statistics."""

from datetime import timedelta

import pytest

from nutriai.services.daily_logs import DailyLogRepository, create_meal_entry
from nutriai.services.stats import StatsService
from tests.conftest import APPLE, FIXED_NOW, FixedClock


def test_get_week_starts_on_monday_and_fills_gaps() -> None:
    clock = FixedClock(FIXED_NOW - timedelta(days=2))
    repository = DailyLogRepository(clock=clock)
    repository.add_meal(create_meal_entry(APPLE, 2, "lunch"))
    repository.add_water(600)
    clock.now = FIXED_NOW
    repository.add_water(900)

    summary = StatsService(repository).get_week()

    assert [log.date for log in summary.daily] == [
        "2026-10-12",
        "2026-10-13",
        "2026-10-14",
    ]
    assert summary.daily[1].water_intake == 0
    assert summary.avg_calories == pytest.approx(190 / 3)
    assert summary.avg_water == pytest.approx(500)


def test_get_recent_ignores_older_logs() -> None:
    clock = FixedClock(FIXED_NOW - timedelta(days=10))
    repository = DailyLogRepository(clock=clock)
    repository.add_water(1000)
    clock.now = FIXED_NOW
    repository.add_water(700)

    summary = StatsService(repository).get_recent(days=2)

    assert len(summary.daily) == 2
    assert summary.daily[-1].date == "2026-10-14"
    assert summary.avg_water == pytest.approx(350)


def test_get_recent_rejects_non_positive_days() -> None:
    with pytest.raises(ValueError):
        StatsService(DailyLogRepository(clock=FixedClock())).get_recent(days=0)
