"""Synchronization between in-memory state and the key-value store."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

from pydantic import ValidationError

from nutriai.domain.meals import DailyLog
from nutriai.domain.profile import UserProfile
from nutriai.services.profile import DEFAULT_PROFILE, validate_goals
from nutriai.services.serialization import (
    decode_logs,
    decode_profile,
    encode_logs,
    encode_profile,
)

_logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Durable blob store with string values."""

    async def get(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    async def set(self, key: str, value: str) -> None:
        """Store a value under a key."""


@dataclass
class PersistenceSynchronizer:
    """Loads state at startup and writes it back in the background."""

    store: KeyValueStore
    logs_key: str = "daily_logs"
    profile_key: str = "user_profile"
    retry_attempts: int = 2
    retry_delay_seconds: float = 0.5
    failed_writes: int = 0
    _queue: asyncio.Queue[str] = field(
        default_factory=asyncio.Queue, init=False, repr=False
    )
    _pending: dict[str, str] = field(default_factory=dict, init=False, repr=False)
    _failed_keys: set[str] = field(default_factory=set, init=False, repr=False)
    _worker: asyncio.Task[None] | None = field(default=None, init=False, repr=False)
    _loop: asyncio.AbstractEventLoop | None = field(
        default=None, init=False, repr=False
    )

    async def load_logs(self) -> list[DailyLog]:
        """Return stored daily logs, or an empty list on absence or failure."""
        try:
            raw = await self.store.get(self.logs_key)
        except Exception:
            _logger.exception("Failed to read %s; starting empty", self.logs_key)
            return []
        if not raw:
            return []
        try:
            return decode_logs(raw)
        except (ValidationError, ValueError) as exc:
            _logger.warning(
                "Malformed %s payload; starting empty: %s", self.logs_key, exc
            )
            return []

    async def load_profile(self) -> UserProfile:
        """Return the stored profile, or the seed profile on absence or failure."""
        try:
            raw = await self.store.get(self.profile_key)
        except Exception:
            _logger.exception("Failed to read %s; using defaults", self.profile_key)
            return DEFAULT_PROFILE
        if not raw:
            return DEFAULT_PROFILE
        try:
            profile = decode_profile(raw)
            validate_goals(profile.goals)
        except (ValidationError, ValueError) as exc:
            _logger.warning(
                "Malformed %s payload; using defaults: %s", self.profile_key, exc
            )
            return DEFAULT_PROFILE
        return profile

    def save_logs(self, logs: list[DailyLog]) -> None:
        """Queue the whole log collection for writing."""
        self.schedule(self.logs_key, encode_logs(logs))

    def save_profile(self, profile: UserProfile) -> None:
        """Queue the profile for writing."""
        self.schedule(self.profile_key, encode_profile(profile))

    def schedule(self, key: str, payload: str) -> None:
        """Enqueue a write without waiting for it.

        Only the newest payload per key is kept while a write for that key
        is still waiting.
        """
        if key not in self._pending:
            self._queue.put_nowait(key)
        self._pending[key] = payload
        self._ensure_worker()

    @property
    def pending(self) -> dict[str, str]:
        """Return the payloads waiting to be written, by key."""
        return dict(self._pending)

    @property
    def degraded(self) -> bool:
        """Return True while the last write of any key has been given up on."""
        return bool(self._failed_keys)

    def start(self) -> None:
        """Start the background writer on the running loop."""
        self._ensure_worker()

    async def flush(self) -> None:
        """Wait until every queued write has been attempted."""
        self._ensure_worker()
        await self._queue.join()

    async def close(self) -> None:
        """Flush pending writes and stop the writer."""
        await self.flush()
        if self._worker is None:
            return
        self._worker.cancel()
        try:
            await self._worker
        except asyncio.CancelledError:
            pass
        self._worker = None

    def _ensure_worker(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        if self._worker is not None and not self._worker.done():
            if self._loop is loop:
                return
            self._worker.cancel()
        if self._loop is not loop:
            # Queues bind to the loop that first waits on them.
            self._queue = _requeue(self._queue)
            self._loop = loop
        self._worker = loop.create_task(self._drain())

    async def _drain(self) -> None:
        while True:
            key = await self._queue.get()
            payload = self._pending.pop(key)
            try:
                await self._write_with_retry(key, payload)
            finally:
                self._queue.task_done()

    async def _write_with_retry(self, key: str, payload: str) -> None:
        attempt = 0
        while True:
            try:
                await self.store.set(key, payload)
            except Exception as exc:
                attempt += 1
                if attempt > self.retry_attempts:
                    self.failed_writes += 1
                    self._failed_keys.add(key)
                    _logger.exception(
                        "Giving up writing %s after %s attempts", key, attempt
                    )
                    return
                _logger.warning(
                    "Write of %s failed (attempt %s/%s): %s",
                    key,
                    attempt,
                    self.retry_attempts + 1,
                    exc,
                )
                await asyncio.sleep(self.retry_delay_seconds * 2 ** (attempt - 1))
            else:
                self._failed_keys.discard(key)
                return


def _requeue(queue: asyncio.Queue[str]) -> asyncio.Queue[str]:
    fresh: asyncio.Queue[str] = asyncio.Queue()
    while not queue.empty():
        fresh.put_nowait(queue.get_nowait())
    return fresh
