"""Physiological plausibility checks for extracted BP numbers."""

from bpcore.domain.errors import MissingValuesError, OutOfRangeError, ReadingParseError
from bpcore.domain.models import (
    DIASTOLIC_MAX,
    DIASTOLIC_MIN,
    SYSTOLIC_MAX,
    SYSTOLIC_MIN,
    ExtractedValues,
)
from bpcore.services.result import Result

MISSING_VALUES_MESSAGE = "Could not find BP values. Try saying: '120 over 80 pulse 72'"


def validate_reading_values(
    systolic: int | None, diastolic: int | None, pulse: int | None = None
) -> Result[ExtractedValues, ReadingParseError]:
    """
    Check that both pressures were found and fall inside plausible bounds.

    Pulse is passed through untouched; there is no range check on it here.
    """
    if systolic is None or diastolic is None:
        return Result.err(MissingValuesError(MISSING_VALUES_MESSAGE))

    if not (SYSTOLIC_MIN <= systolic <= SYSTOLIC_MAX) or not (
        DIASTOLIC_MIN <= diastolic <= DIASTOLIC_MAX
    ):
        return Result.err(
            OutOfRangeError(
                "BP values seem out of range. Please check: "
                f"systolic={systolic}, diastolic={diastolic}"
            )
        )

    return Result.ok(ExtractedValues(systolic=systolic, diastolic=diastolic, pulse=pulse))
