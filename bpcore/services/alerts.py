"""Alert messages for a window of readings."""

from collections.abc import Sequence

from bpcore.domain.models import BloodPressureReading
from bpcore.services.aggregator import round_half_up

HIGH_PULSE_BPM = 100
LOW_PULSE_BPM = 50


def _is_hypertensive(reading: BloodPressureReading) -> bool:
    return reading.systolic >= 140 or reading.diastolic >= 90


def _is_crisis(reading: BloodPressureReading) -> bool:
    return reading.systolic > 180 or reading.diastolic > 120


def _bpm(value: float) -> int:
    return int(round_half_up(value, places=0))


def generate_alerts(readings: Sequence[BloodPressureReading], avg_pulse: float) -> list[str]:
    """
    Build alerts in a fixed order: hypertensive count, crisis count, then at
    most one heart-rate message.
    """
    alerts: list[str] = []

    high_count = sum(1 for r in readings if _is_hypertensive(r))
    if high_count:
        alerts.append(f"{high_count} reading(s) in hypertensive range detected")

    crisis_count = sum(1 for r in readings if _is_crisis(r))
    if crisis_count:
        alerts.append(f"⚠️ {crisis_count} reading(s) in hypertensive crisis range!")

    if avg_pulse > HIGH_PULSE_BPM:
        alerts.append(f"Average heart rate is elevated ({_bpm(avg_pulse)} bpm)")
    elif 0 < avg_pulse < LOW_PULSE_BPM:
        alerts.append(f"Average heart rate is low ({_bpm(avg_pulse)} bpm)")

    return alerts
