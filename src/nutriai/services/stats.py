"""Statistics over the daily log collection."""

from dataclasses import dataclass
from datetime import date, timedelta

from nutriai.domain.meals import DailyLog
from nutriai.services.aggregation import build_daily_log
from nutriai.services.daily_logs import DailyLogRepository


@dataclass
class PeriodSummary:
    """Daily logs and averages for a period."""

    daily: list[DailyLog]
    avg_calories: float
    avg_protein: float
    avg_carbs: float
    avg_fat: float
    avg_water: float


@dataclass
class StatsService:
    """Service for computing period summaries from daily logs."""

    repository: DailyLogRepository

    def get_week(self) -> PeriodSummary:
        """Return week-to-date logs and averages, starting on Monday."""
        today = date.fromisoformat(self.repository.today_key())
        start = today - timedelta(days=today.weekday())
        return self._summarize(start, (today - start).days + 1)

    def get_recent(self, days: int = 7) -> PeriodSummary:
        """Return the last ``days`` days including today."""
        if days < 1:
            raise ValueError("days must be at least 1")
        today = date.fromisoformat(self.repository.today_key())
        return self._summarize(today - timedelta(days=days - 1), days)

    def _summarize(self, start: date, days: int) -> PeriodSummary:
        stored = {
            log.date: log
            for log in self.repository.logs_between(start, start + timedelta(days=days))
        }
        daily = []
        for offset in range(days):
            key = (start + timedelta(days=offset)).isoformat()
            daily.append(stored.get(key) or build_daily_log(key, ()))
        return _aggregate_period(daily)


def _aggregate_period(daily: list[DailyLog]) -> PeriodSummary:
    total_days = max(len(daily), 1)
    calories = protein = carbs = fat = water = 0.0
    for log in daily:
        calories += log.total_nutrition.calories
        protein += log.total_nutrition.protein
        carbs += log.total_nutrition.carbs
        fat += log.total_nutrition.fat
        water += log.water_intake
    return PeriodSummary(
        daily=daily,
        avg_calories=calories / total_days,
        avg_protein=protein / total_days,
        avg_carbs=carbs / total_days,
        avg_fat=fat / total_days,
        avg_water=water / total_days,
    )
