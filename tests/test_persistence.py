"""Tests for the persistence synchronizer."""

import asyncio
import json

from nutriai.domain.profile import UserProfile
from nutriai.services.aggregation import build_daily_log
from nutriai.services.persistence import PersistenceSynchronizer
from nutriai.services.profile import DEFAULT_PROFILE
from nutriai.services.serialization import encode_logs, encode_profile
from tests.conftest import FailingKeyValueStore, InMemoryKeyValueStore


def test_load_defaults_when_store_is_empty() -> None:
    synchronizer = PersistenceSynchronizer(store=InMemoryKeyValueStore())

    logs = asyncio.run(synchronizer.load_logs())
    profile = asyncio.run(synchronizer.load_profile())

    assert logs == []
    assert profile == DEFAULT_PROFILE


def test_load_returns_stored_state() -> None:
    log = build_daily_log("2026-10-14", [], water_intake=500)
    profile = UserProfile(
        id="7", name="Ece", email="ece@example.com", goals=DEFAULT_PROFILE.goals
    )
    store = InMemoryKeyValueStore(
        values={
            "daily_logs": encode_logs([log]),
            "user_profile": encode_profile(profile),
        }
    )
    synchronizer = PersistenceSynchronizer(store=store)

    assert asyncio.run(synchronizer.load_logs()) == [log]
    assert asyncio.run(synchronizer.load_profile()) == profile


def test_malformed_payloads_fall_back_to_defaults() -> None:
    store = InMemoryKeyValueStore(
        values={
            "daily_logs": "{not json",
            "user_profile": json.dumps({"id": "1", "goals": {}}),
        }
    )
    synchronizer = PersistenceSynchronizer(store=store)

    assert asyncio.run(synchronizer.load_logs()) == []
    assert asyncio.run(synchronizer.load_profile()) == DEFAULT_PROFILE


def test_read_failure_on_one_key_does_not_block_other() -> None:
    log = build_daily_log("2026-10-14", [], water_intake=250)
    store = FailingKeyValueStore(
        fail_get={"user_profile"}, values={"daily_logs": encode_logs([log])}
    )
    synchronizer = PersistenceSynchronizer(store=store)

    async def load_both():
        return await asyncio.gather(
            synchronizer.load_logs(), synchronizer.load_profile()
        )

    logs, profile = asyncio.run(load_both())

    assert logs == [log]
    assert profile == DEFAULT_PROFILE


def test_writes_run_in_background_keeping_latest_payload() -> None:
    store = InMemoryKeyValueStore()
    synchronizer = PersistenceSynchronizer(store=store)

    async def scenario() -> list[tuple[str, str]]:
        synchronizer.schedule("daily_logs", "[1]")
        synchronizer.schedule("daily_logs", "[2]")
        synchronizer.schedule("user_profile", "{}")
        written_before = list(store.writes)
        await synchronizer.close()
        return written_before

    written_before = asyncio.run(scenario())

    assert written_before == []
    assert store.writes == [("daily_logs", "[2]"), ("user_profile", "{}")]
    assert store.values["daily_logs"] == "[2]"


def test_failed_writes_are_retried_then_counted() -> None:
    store = FailingKeyValueStore()
    synchronizer = PersistenceSynchronizer(
        store=store, retry_attempts=2, retry_delay_seconds=0
    )

    async def scenario() -> None:
        synchronizer.schedule("daily_logs", "[]")
        await synchronizer.close()

    asyncio.run(scenario())

    assert store.set_calls == 3
    assert synchronizer.failed_writes == 1
    assert synchronizer.degraded


def test_writes_queued_without_loop_are_flushed_later() -> None:
    store = InMemoryKeyValueStore()
    synchronizer = PersistenceSynchronizer(store=store)

    synchronizer.save_profile(DEFAULT_PROFILE)
    asyncio.run(synchronizer.close())

    assert store.values["user_profile"] == encode_profile(DEFAULT_PROFILE)


def test_successful_write_clears_degraded_flag() -> None:
    store = FailingKeyValueStore()
    synchronizer = PersistenceSynchronizer(
        store=store, retry_attempts=0, retry_delay_seconds=0
    )

    async def scenario() -> bool:
        synchronizer.schedule("daily_logs", "[1]")
        await synchronizer.flush()
        degraded_after_failure = synchronizer.degraded
        store.fail_set = False
        synchronizer.schedule("daily_logs", "[2]")
        await synchronizer.close()
        return degraded_after_failure

    degraded_after_failure = asyncio.run(scenario())

    assert degraded_after_failure
    assert not synchronizer.degraded
    assert synchronizer.failed_writes == 1
    assert store.values == {"daily_logs": "[2]"}


def test_failure_on_other_key_keeps_degraded_flag() -> None:
    store = FailingKeyValueStore()
    synchronizer = PersistenceSynchronizer(
        store=store, retry_attempts=0, retry_delay_seconds=0
    )

    async def scenario() -> None:
        synchronizer.schedule("user_profile", "{}")
        await synchronizer.flush()
        store.fail_set = False
        synchronizer.schedule("daily_logs", "[]")
        await synchronizer.close()

    asyncio.run(scenario())

    assert synchronizer.degraded
