"""Early-versus-late systolic comparison across a chronological window."""

from collections.abc import Sequence

from bpcore.domain.models import BloodPressureReading, Trend

MIN_READINGS_FOR_TREND = 3
TREND_THRESHOLD_MMHG = 5.0


def analyze_trend(readings: Sequence[BloodPressureReading]) -> Trend:
    """
    Compare mean systolic of the second half against the first half.

    ``readings`` must be in ascending ``recorded_at`` order. With an odd count
    the middle reading belongs to the second half.
    """
    if len(readings) < MIN_READINGS_FOR_TREND:
        return Trend.INSUFFICIENT

    half = len(readings) // 2
    first = [r.systolic for r in readings[:half]]
    second = [r.systolic for r in readings[half:]]
    diff = sum(second) / len(second) - sum(first) / len(first)

    if diff > TREND_THRESHOLD_MMHG:
        return Trend.INCREASING
    if diff < -TREND_THRESHOLD_MMHG:
        return Trend.DECREASING
    return Trend.STABLE
