"""Application state for the daily nutrition ledger."""

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from nutriai.domain.meals import DailyLog, MealEntry
from nutriai.domain.profile import UserProfile
from nutriai.services.aggregation import DailyProgress, daily_progress
from nutriai.services.catalog import FoodCatalog
from nutriai.services.daily_logs import DailyLogRepository, create_meal_entry
from nutriai.services.persistence import PersistenceSynchronizer
from nutriai.services.profile import ProfileStore

_logger = logging.getLogger(__name__)


@dataclass
class NutritionState:
    """Owns the in-memory logs and profile for the session.

    Mutations update memory first and queue a background write; reads
    never wait on persistence.
    """

    repository: DailyLogRepository
    profile_store: ProfileStore
    synchronizer: PersistenceSynchronizer
    catalog: FoodCatalog
    _logs_loaded: bool = field(default=False, init=False)
    _profile_loaded: bool = field(default=False, init=False)

    async def initialize(self) -> None:
        """Load logs and profile concurrently, falling back to defaults."""
        await asyncio.gather(self._load_logs(), self._load_profile())
        self.synchronizer.start()

    async def _load_logs(self) -> None:
        logs = await self.synchronizer.load_logs()
        self.repository.replace_all(logs)
        self._logs_loaded = True
        _logger.info("Loaded %s daily logs", len(logs))

    async def _load_profile(self) -> None:
        profile = await self.synchronizer.load_profile()
        self.profile_store.replace_profile(profile)
        self._profile_loaded = True

    @property
    def is_loading(self) -> bool:
        """Return True while either startup load is outstanding."""
        return not (self._logs_loaded and self._profile_loaded)

    @property
    def profile(self) -> UserProfile:
        """Return the current user profile."""
        return self.profile_store.profile

    @property
    def today_log(self) -> DailyLog:
        """Return today's log, empty if nothing was recorded yet."""
        return self.repository.get_or_create_today()

    @property
    def daily_logs(self) -> list[DailyLog]:
        """Return every daily log ordered by date."""
        return self.repository.all_logs()

    @property
    def persistence_degraded(self) -> bool:
        """Return True while a key's latest write has been given up on."""
        return self.synchronizer.degraded

    def add_meal(self, meal: MealEntry) -> DailyLog:
        """Record a meal in today's log."""
        updated = self.repository.add_meal(meal)
        self.synchronizer.save_logs(self.repository.all_logs())
        return updated

    def log_meal(self, food_id: str, quantity: object, meal_type: str) -> DailyLog:
        """Create a meal entry for a catalog food and record it."""
        food = self.catalog.get(food_id)
        meal = create_meal_entry(
            food, quantity, meal_type, timestamp=self.repository.clock()
        )
        return self.add_meal(meal)

    def add_water(self, amount_ml: float) -> DailyLog:
        """Add water to today's intake."""
        updated = self.repository.add_water(amount_ml)
        self.synchronizer.save_logs(self.repository.all_logs())
        return updated

    def update_profile(self, partial: Mapping[str, object]) -> UserProfile:
        """Merge profile fields and persist the result."""
        updated = self.profile_store.update_profile(partial)
        self.synchronizer.save_profile(updated)
        return updated

    def progress(self) -> DailyProgress:
        """Return today's progress against the profile goals."""
        return daily_progress(self.today_log, self.profile.goals)

    async def close(self) -> None:
        """Flush queued writes and stop the background writer."""
        await self.synchronizer.close()
