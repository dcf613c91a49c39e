"""Tests for summary building and chart projection."""

from datetime import UTC, datetime

from bpcore.domain.models import BloodPressureReading, BPCategory, Trend
from bpcore.services.suggestions import (
    FALLBACK_SUGGESTION,
    NO_DATA_SUGGESTION,
    SUGGESTIONS,
    suggest_for_category,
)
from bpcore.services.summary import build_graph_points, build_summary


class TestBuildSummary:
    def test_empty_window(self) -> None:
        summary = build_summary([], "7d")

        assert summary.category == BPCategory.NO_DATA
        assert summary.total_readings == 0
        assert summary.suggestion == NO_DATA_SUGGESTION
        assert summary.trend is None
        assert summary.alerts == []
        assert summary.avg_systolic == 0.0
        assert summary.max_pulse == 0
        assert summary.range_label == "7d"

    def test_range_label_echoed_verbatim(self, make_reading) -> None:
        assert build_summary([make_reading(120, 80)], "  Last Week ").range_label == "  Last Week "

    def test_full_summary(self, make_reading) -> None:
        readings = [
            make_reading(128, 82, pulse=70, hours=0),
            make_reading(134, 86, pulse=74, hours=1),
            make_reading(142, 92, hours=2),
            make_reading(148, 94, pulse=78, hours=3),
        ]

        summary = build_summary(readings, "1w")

        assert summary.total_readings == 4
        assert summary.avg_systolic == 138.0
        assert summary.avg_diastolic == 88.5
        assert summary.avg_pulse == 74.0
        assert (summary.min_systolic, summary.max_systolic) == (128, 148)
        assert (summary.min_pulse, summary.max_pulse) == (70, 78)
        assert summary.category == BPCategory.STAGE_1
        assert summary.suggestion == SUGGESTIONS[BPCategory.STAGE_1]
        # (142 + 148) / 2 - (128 + 134) / 2 = 14
        assert summary.trend == Trend.INCREASING
        assert summary.alerts == ["2 reading(s) in hypertensive range detected"]

    def test_category_comes_from_averages_not_individual_readings(self, make_reading) -> None:
        readings = [make_reading(110, 60), make_reading(135, 78, hours=1)]

        summary = build_summary(readings, "7d")

        assert summary.category == BPCategory.ELEVATED
        assert summary.trend == Trend.INSUFFICIENT

    def test_crisis_summary(self, make_reading) -> None:
        summary = build_summary([make_reading(190, 125, pulse=110)], "1d")

        assert summary.category == BPCategory.CRISIS
        assert summary.suggestion.startswith("URGENT")
        assert summary.alerts == [
            "1 reading(s) in hypertensive range detected",
            "⚠️ 1 reading(s) in hypertensive crisis range!",
            "Average heart rate is elevated (110 bpm)",
        ]

    def test_category_uses_unrounded_means(self, make_reading) -> None:
        readings = [make_reading(130, 75, hours=i) for i in range(19)]
        readings.append(make_reading(129, 75, hours=19))

        summary = build_summary(readings, "1m")

        # Mean 129.95 is reported as 130.0 but is still below the stage 1 threshold
        assert summary.avg_systolic == 130.0
        assert summary.category == BPCategory.ELEVATED

    def test_high_pulse_alert_uses_unrounded_mean(self, make_reading) -> None:
        readings = [make_reading(118, 76, pulse=100, hours=i) for i in range(24)]
        readings.append(make_reading(118, 76, pulse=101, hours=24))

        summary = build_summary(readings, "1m")

        assert summary.avg_pulse == 100.0
        assert summary.alerts == ["Average heart rate is elevated (100 bpm)"]

    def test_low_pulse_alert_uses_unrounded_mean(self, make_reading) -> None:
        readings = [make_reading(118, 76, pulse=50, hours=i) for i in range(24)]
        readings.append(make_reading(118, 76, pulse=49, hours=24))

        summary = build_summary(readings, "1m")

        assert summary.avg_pulse == 50.0
        assert summary.alerts == ["Average heart rate is low (50 bpm)"]


def test_every_category_has_a_suggestion() -> None:
    for category in BPCategory:
        assert suggest_for_category(category)
    assert suggest_for_category(BPCategory.UNKNOWN) == FALLBACK_SUGGESTION


def test_graph_points() -> None:
    readings = [
        BloodPressureReading(
            systolic=118, diastolic=76, recorded_at=datetime(2026, 3, 5, 7, 30, tzinfo=UTC)
        ),
        BloodPressureReading(
            systolic=150,
            diastolic=95,
            pulse=80,
            recorded_at=datetime(2026, 3, 5, 19, 5, tzinfo=UTC),
        ),
    ]

    points = build_graph_points(readings)

    assert [p.timestamp for p in points] == ["2026-03-05 07:30", "2026-03-05 19:05"]
    assert points[0].time_label == "Mar 05, 07:30"
    assert [p.pulse for p in points] == [0, 80]
    assert [p.category for p in points] == [BPCategory.NORMAL, BPCategory.STAGE_2]
