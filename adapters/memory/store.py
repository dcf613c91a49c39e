"""
In-memory reading store.

Implements the ``ReadingStore`` protocol for tests, demos and single-process
use. A real deployment would put a database behind the same methods.
"""

import itertools
import threading
from datetime import datetime

import structlog

from bpcore.domain.models import BloodPressureReading

logger = structlog.get_logger(__name__)


class InMemoryReadingStore:
    """Readings keyed by id, each remembering its owning user."""

    def __init__(self) -> None:
        self._readings: dict[int, tuple[str, BloodPressureReading]] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self.logger = logger.bind(component="in_memory_reading_store")

    def add(self, user_id: str, reading: BloodPressureReading) -> BloodPressureReading:
        with self._lock:
            stored = reading.model_copy(update={"id": next(self._ids)})
            self._readings[stored.id] = (user_id, stored)  # type: ignore[index]
        self.logger.debug("reading_stored", reading_id=stored.id)
        return stored

    def _for_user(self, user_id: str) -> list[BloodPressureReading]:
        with self._lock:
            return [r for owner, r in self._readings.values() if owner == user_id]

    def since(self, user_id: str, since: datetime) -> list[BloodPressureReading]:
        readings = [r for r in self._for_user(user_id) if r.recorded_at >= since]
        return sorted(readings, key=lambda r: r.recorded_at)

    def all_desc(self, user_id: str) -> list[BloodPressureReading]:
        return sorted(self._for_user(user_id), key=lambda r: r.recorded_at, reverse=True)

    def owner_of(self, reading_id: int) -> str | None:
        with self._lock:
            entry = self._readings.get(reading_id)
        return entry[0] if entry else None

    def delete(self, reading_id: int) -> None:
        with self._lock:
            self._readings.pop(reading_id, None)
