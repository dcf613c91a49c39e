"""Shared fixtures for reading tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest

from bpcore.domain.models import BloodPressureReading

BASE_TIME = datetime(2026, 3, 1, 8, 0, tzinfo=UTC)

ReadingFactory = Callable[..., BloodPressureReading]


def reading(
    systolic: int, diastolic: int, pulse: int | None = None, hours: int = 0
) -> BloodPressureReading:
    return BloodPressureReading(
        systolic=systolic,
        diastolic=diastolic,
        pulse=pulse,
        recorded_at=BASE_TIME + timedelta(hours=hours),
    )


@pytest.fixture
def make_reading() -> ReadingFactory:
    """Build readings at fixed, increasing timestamps."""
    return reading


@pytest.fixture
def series() -> Callable[[list[int]], list[BloodPressureReading]]:
    """Chronological readings with the given systolic values and a normal diastolic."""

    def _series(systolic_values: list[int]) -> list[BloodPressureReading]:
        return [reading(s, 75, hours=i) for i, s in enumerate(systolic_values)]

    return _series
