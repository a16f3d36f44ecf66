"""Daily log repository and meal entry creation."""

import logging
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import uuid4
from zoneinfo import ZoneInfo

from nutriai.domain.meals import MEAL_TYPES, DailyLog, MealEntry, MealType
from nutriai.domain.nutrition import FoodItem
from nutriai.services.aggregation import build_daily_log

_logger = logging.getLogger(__name__)

DEFAULT_QUANTITY = 1.0


def utc_now() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(tz=UTC)


@dataclass
class DailyLogRepository:
    """In-memory collection of daily logs keyed by ISO date."""

    timezone_name: str = "UTC"
    clock: Callable[[], datetime] = utc_now
    _logs: dict[str, DailyLog] = field(default_factory=dict, init=False, repr=False)

    def today_key(self) -> str:
        """Return today's date key in the configured timezone."""
        return self.clock().astimezone(ZoneInfo(self.timezone_name)).date().isoformat()

    def get(self, date_key: str) -> DailyLog | None:
        """Return the stored log for a date, if present."""
        return self._logs.get(date_key)

    def get_or_create_today(self) -> DailyLog:
        """Return today's log, or a fresh empty one that is not stored yet."""
        today = self.today_key()
        existing = self._logs.get(today)
        if existing is not None:
            return existing
        return build_daily_log(today, ())

    def add_meal(self, meal: MealEntry) -> DailyLog:
        """Append a meal to today's log and recompute its totals."""
        today_log = self.get_or_create_today()
        updated = build_daily_log(
            today_log.date,
            (*today_log.meals, meal),
            water_intake=today_log.water_intake,
        )
        self._logs[updated.date] = updated
        return updated

    def add_water(self, amount_ml: float) -> DailyLog:
        """Add water to today's intake."""
        if not math.isfinite(amount_ml) or amount_ml < 0:
            raise ValueError(f"Water amount must be a non-negative number: {amount_ml}")
        today_log = self.get_or_create_today()
        updated = DailyLog(
            date=today_log.date,
            meals=today_log.meals,
            total_nutrition=today_log.total_nutrition,
            water_intake=today_log.water_intake + amount_ml,
        )
        self._logs[updated.date] = updated
        return updated

    def all_logs(self) -> list[DailyLog]:
        """Return every stored log ordered by date."""
        return [self._logs[key] for key in sorted(self._logs)]

    def logs_between(self, start: date, end: date) -> list[DailyLog]:
        """Return stored logs with start <= date < end, ordered by date."""
        start_key = start.isoformat()
        end_key = end.isoformat()
        return [log for log in self.all_logs() if start_key <= log.date < end_key]

    def replace_all(self, logs: Iterable[DailyLog]) -> None:
        """Replace the whole collection, keeping the last log for each date."""
        replaced: dict[str, DailyLog] = {}
        for log in logs:
            if log.date in replaced:
                _logger.warning("Duplicate daily log for %s; keeping last", log.date)
            replaced[log.date] = log
        self._logs = replaced


def parse_quantity(value: object) -> float:
    """Parse a user-supplied quantity, defaulting to 1 when unusable."""
    if isinstance(value, bool):
        return DEFAULT_QUANTITY
    if isinstance(value, int | float):
        quantity = float(value)
    elif isinstance(value, str):
        try:
            quantity = float(value.strip())
        except ValueError:
            return DEFAULT_QUANTITY
    else:
        return DEFAULT_QUANTITY
    if not math.isfinite(quantity) or quantity <= 0:
        return DEFAULT_QUANTITY
    return quantity


def create_meal_entry(
    food_item: FoodItem,
    quantity: object,
    meal_type: str,
    timestamp: datetime | None = None,
) -> MealEntry:
    """Create a meal entry with a generated id."""
    if meal_type not in MEAL_TYPES:
        raise ValueError(f"Unknown meal type: {meal_type}")
    resolved_type: MealType = meal_type  # type: ignore[assignment]
    return MealEntry(
        id=uuid4().hex,
        food_item=food_item,
        quantity=parse_quantity(quantity),
        timestamp=timestamp or utc_now(),
        meal_type=resolved_type,
    )
