"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutriai.adapters.openai_vision_client import OpenAIVisionClient
from nutriai.adapters.supabase_kv_store import SupabaseKeyValueStore
from nutriai.config import Settings
from nutriai.services.catalog import FoodCatalog
from nutriai.services.daily_logs import DailyLogRepository
from nutriai.services.identification import FoodIdentificationService
from nutriai.services.persistence import PersistenceSynchronizer
from nutriai.services.profile import ProfileStore
from nutriai.services.state import NutritionState
from nutriai.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    state: NutritionState
    identification_service: FoodIdentificationService
    stats_service: StatsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    store = SupabaseKeyValueStore(supabase_client, table=resolved_settings.store_table)
    synchronizer = PersistenceSynchronizer(
        store=store,
        logs_key=resolved_settings.logs_key,
        profile_key=resolved_settings.profile_key,
        retry_attempts=resolved_settings.persist_retry_attempts,
        retry_delay_seconds=resolved_settings.persist_retry_delay_seconds,
    )
    catalog = FoodCatalog.create()
    repository = DailyLogRepository(timezone_name=resolved_settings.timezone)
    state = NutritionState(
        repository=repository,
        profile_store=ProfileStore(),
        synchronizer=synchronizer,
        catalog=catalog,
    )
    vision_client = OpenAIVisionClient.create(resolved_settings.openai_api_key)
    identification_service = FoodIdentificationService(
        client=vision_client,
        catalog=catalog,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )

    async def close_resources() -> None:
        await state.close()
        await vision_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        state=state,
        identification_service=identification_service,
        stats_service=StatsService(repository),
        close_resources=close_resources,
    )
