"""
Summary of a reading window: statistics, category, suggestion, trend and alerts.

Summaries are recomputed on every call; nothing here holds state.
"""

from collections.abc import Sequence

from bpcore.domain.models import BloodPressureReading, BPCategory, BPSummary, GraphPoint
from bpcore.services.aggregator import aggregate_readings
from bpcore.services.alerts import generate_alerts
from bpcore.services.classifier import classify_blood_pressure
from bpcore.services.result import logger
from bpcore.services.suggestions import suggest_for_category
from bpcore.services.trend import analyze_trend

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
TIME_LABEL_FORMAT = "%b %d, %H:%M"


def build_summary(readings: Sequence[BloodPressureReading], range_label: str) -> BPSummary:
    """
    Summarize ``readings`` (ascending by ``recorded_at``).

    An empty window yields the "No Data" summary rather than an error.
    """
    if not readings:
        return BPSummary(
            range_label=range_label,
            total_readings=0,
            category=BPCategory.NO_DATA,
            suggestion=suggest_for_category(BPCategory.NO_DATA),
            alerts=[],
        )

    stats = aggregate_readings(readings)
    category = classify_blood_pressure(stats.mean_systolic, stats.mean_diastolic)
    summary = BPSummary(
        range_label=range_label,
        total_readings=len(readings),
        category=category,
        suggestion=suggest_for_category(category),
        trend=analyze_trend(readings),
        alerts=generate_alerts(readings, stats.mean_pulse),
        **stats.model_dump(exclude={"mean_systolic", "mean_diastolic", "mean_pulse"}),
    )

    logger.debug(
        "summary_built",
        range_label=range_label,
        total_readings=summary.total_readings,
        category=category.value,
        alert_count=len(summary.alerts),
    )
    return summary


def build_graph_points(readings: Sequence[BloodPressureReading]) -> list[GraphPoint]:
    """Project readings for charting, each tagged with its own category."""
    return [
        GraphPoint(
            timestamp=r.recorded_at.strftime(TIMESTAMP_FORMAT),
            time_label=r.recorded_at.strftime(TIME_LABEL_FORMAT),
            systolic=r.systolic,
            diastolic=r.diastolic,
            pulse=r.pulse or 0,
            category=classify_blood_pressure(r.systolic, r.diastolic),
        )
        for r in readings
    ]
