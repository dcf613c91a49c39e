"""
Domain models for blood-pressure readings and their summaries.

These models represent the core business concepts and are framework-agnostic.
They use Pydantic for validation; every model that crosses a component
boundary is frozen so downstream analysis can never mutate its input.
"""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

SYSTOLIC_MIN = 60
SYSTOLIC_MAX = 250
DIASTOLIC_MIN = 40
DIASTOLIC_MAX = 150


class ReadingSource(str, Enum):
    """How a reading entered the system."""

    MANUAL = "manual"
    VOICE = "voice"
    TEXT = "text"


class BPCategory(str, Enum):
    """Clinical buckets derived from a systolic/diastolic pair."""

    NORMAL = "Normal"
    ELEVATED = "Elevated"
    STAGE_1 = "High BP Stage 1"
    STAGE_2 = "High BP Stage 2"
    CRISIS = "Hypertensive Crisis"
    UNKNOWN = "Unknown"
    NO_DATA = "No Data"  # Summary-only, never produced by the classifier


class Trend(str, Enum):
    """Direction of systolic pressure across a reading window."""

    INCREASING = "Increasing"
    DECREASING = "Decreasing"
    STABLE = "Stable"
    INSUFFICIENT = "Insufficient data"

    @property
    def arrow(self) -> str:
        return {"Increasing": "↑", "Decreasing": "↓", "Stable": "→"}.get(self.value, "")


class ParseFailureKind(str, Enum):
    """Why a free-text reading was rejected."""

    EMPTY_INPUT = "empty_input"
    MISSING_VALUES = "missing_values"
    OUT_OF_RANGE = "out_of_range"
    PARSE_ERROR = "parse_error"


class BloodPressureReading(BaseModel):
    """A single validated blood-pressure measurement."""

    model_config = ConfigDict(frozen=True)

    systolic: int = Field(ge=SYSTOLIC_MIN, le=SYSTOLIC_MAX, description="mmHg")
    diastolic: int = Field(ge=DIASTOLIC_MIN, le=DIASTOLIC_MAX, description="mmHg")
    pulse: int | None = Field(default=None, gt=0, description="Beats per minute")
    recorded_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    source: ReadingSource = ReadingSource.MANUAL
    notes: str | None = None
    id: int | None = Field(default=None, description="Assigned by the persistence layer")


class ExtractedValues(BaseModel):
    """Validated numbers pulled out of free text, before a reading is built."""

    model_config = ConfigDict(frozen=True)

    systolic: int
    diastolic: int
    pulse: int | None = None


class ParseOutcome(BaseModel):
    """Result of turning free text into a reading.

    Exactly one of ``reading`` or ``failure`` is populated.
    """

    model_config = ConfigDict(frozen=True)

    raw_text: str
    message: str
    reading: BloodPressureReading | None = None
    failure: ParseFailureKind | None = None

    @model_validator(mode="after")
    def exactly_one_variant(self) -> "ParseOutcome":
        if (self.reading is None) == (self.failure is None):
            raise ValueError("ParseOutcome must carry either a reading or a failure, not both")
        return self

    @property
    def success(self) -> bool:
        return self.reading is not None

    @classmethod
    def succeeded(cls, raw_text: str, reading: BloodPressureReading) -> "ParseOutcome":
        message = f"Successfully parsed: {reading.systolic}/{reading.diastolic}"
        if reading.pulse is not None:
            message += f" pulse {reading.pulse}"
        return cls(raw_text=raw_text, message=message, reading=reading)

    @classmethod
    def failed(cls, raw_text: str, failure: ParseFailureKind, message: str) -> "ParseOutcome":
        return cls(raw_text=raw_text, message=message, failure=failure)


class ReadingStats(BaseModel):
    """Descriptive statistics over a non-empty reading set."""

    model_config = ConfigDict(frozen=True)

    avg_systolic: float
    avg_diastolic: float
    avg_pulse: float
    min_systolic: int
    max_systolic: int
    min_diastolic: int
    max_diastolic: int
    min_pulse: int = 0
    max_pulse: int = 0

    # Unrounded means; thresholds are applied to these, not to the reported averages
    mean_systolic: float
    mean_diastolic: float
    mean_pulse: float = 0.0


class BPSummary(BaseModel):
    """Classification, trend and alerts for a window of readings."""

    model_config = ConfigDict(frozen=True)

    range_label: str
    total_readings: int = Field(ge=0)
    category: BPCategory
    suggestion: str
    trend: Trend | None = None
    alerts: list[str] = Field(default_factory=list)

    # Zero when the window is empty
    avg_systolic: float = 0.0
    avg_diastolic: float = 0.0
    avg_pulse: float = 0.0
    min_systolic: int = 0
    max_systolic: int = 0
    min_diastolic: int = 0
    max_diastolic: int = 0
    min_pulse: int = 0
    max_pulse: int = 0


class GraphPoint(BaseModel):
    """One reading projected for charting."""

    model_config = ConfigDict(frozen=True)

    timestamp: str
    time_label: str
    systolic: int
    diastolic: int
    pulse: int = Field(description="0 when the reading has no pulse")
    category: BPCategory


class ReadingRequest(BaseModel):
    """Manually entered reading as received from the transport layer."""

    systolic: int
    diastolic: int
    pulse: int | None = None
    notes: str | None = None
    recorded_at: str | None = Field(
        default=None, description="Local timestamp formatted YYYY-MM-DDTHH:MM:SS"
    )
    reading_type: str | None = Field(default=None, description="MANUAL, VOICE or TEXT")
