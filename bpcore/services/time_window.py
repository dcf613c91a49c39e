"""
Range labels ("7d", "1m", ...) to lookback start times.

The persistence collaborator owns the query; the mapping lives here so both
sides agree on what a label means.
"""

from datetime import UTC, datetime
from types import MappingProxyType

from dateutil.relativedelta import relativedelta

DEFAULT_WINDOW = relativedelta(weeks=1)

RANGE_WINDOWS: MappingProxyType[str, relativedelta] = MappingProxyType(
    {
        "1d": relativedelta(days=1),
        "3d": relativedelta(days=3),
        "5d": relativedelta(days=5),
        "1w": relativedelta(weeks=1),
        "7d": relativedelta(weeks=1),
        "2w": relativedelta(weeks=2),
        "1m": relativedelta(months=1),
        "3m": relativedelta(months=3),
        "all": relativedelta(years=10),
    }
)


def since_for_range(range_label: str | None, now: datetime | None = None) -> datetime:
    """Start of the lookback window; unknown or missing labels mean one week."""
    now = now or datetime.now(UTC)
    window = RANGE_WINDOWS.get((range_label or "").strip().lower(), DEFAULT_WINDOW)
    return now - window
