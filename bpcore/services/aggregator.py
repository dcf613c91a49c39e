"""Descriptive statistics over a set of readings."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from bpcore.domain.models import BloodPressureReading, ReadingStats


def round_half_up(value: float, places: int = 1) -> float:
    """Round like a clinician would on paper: 120.25 -> 120.3, not banker's rounding."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _mean(values: Sequence[int]) -> float:
    return sum(values) / len(values) if values else 0.0


def aggregate_readings(readings: Sequence[BloodPressureReading]) -> ReadingStats:
    """
    Compute averages and extremes.

    Pulse statistics only consider readings that carry a pulse; when none do,
    every pulse figure is 0.

    Raises:
        ValueError: if ``readings`` is empty.
    """
    if not readings:
        raise ValueError("Cannot aggregate an empty reading set")

    systolic = [r.systolic for r in readings]
    diastolic = [r.diastolic for r in readings]
    pulses = [r.pulse for r in readings if r.pulse is not None]

    mean_systolic = _mean(systolic)
    mean_diastolic = _mean(diastolic)
    mean_pulse = _mean(pulses)

    return ReadingStats(
        avg_systolic=round_half_up(mean_systolic),
        avg_diastolic=round_half_up(mean_diastolic),
        avg_pulse=round_half_up(mean_pulse),
        mean_systolic=mean_systolic,
        mean_diastolic=mean_diastolic,
        mean_pulse=mean_pulse,
        min_systolic=min(systolic),
        max_systolic=max(systolic),
        min_diastolic=min(diastolic),
        max_diastolic=max(diastolic),
        min_pulse=min(pulses, default=0),
        max_pulse=max(pulses, default=0),
    )
