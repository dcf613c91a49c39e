"""
Reading workflows over the persistence collaborator.

The service owns no storage. It wires the parser and summary builder to a
``ReadingStore`` supplied by the caller and identifies users by an opaque id.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol

from bpcore.config import AppConfig, get_config
from bpcore.domain.errors import ReadingParseError
from bpcore.domain.models import (
    BloodPressureReading,
    BPSummary,
    GraphPoint,
    ParseOutcome,
    ReadingRequest,
    ReadingSource,
)
from bpcore.services.parser import ReadingTextParser
from bpcore.services.result import logger
from bpcore.services.summary import build_graph_points, build_summary
from bpcore.services.time_window import since_for_range

RECORDED_AT_FORMAT = "%Y-%m-%dT%H:%M:%S"


class ReadingStore(Protocol):
    """Persistence collaborator for readings."""

    def add(self, user_id: str, reading: BloodPressureReading) -> BloodPressureReading:
        """Persist ``reading`` and return it with its assigned id."""
        ...

    def since(self, user_id: str, since: datetime) -> list[BloodPressureReading]:
        """Readings recorded at or after ``since``, oldest first."""
        ...

    def all_desc(self, user_id: str) -> list[BloodPressureReading]:
        """Every reading for the user, newest first."""
        ...

    def owner_of(self, reading_id: int) -> str | None: ...

    def delete(self, reading_id: int) -> None: ...


class ReadingService:
    """Logs readings and builds summaries for a user."""

    def __init__(
        self,
        store: ReadingStore,
        config: AppConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.store = store
        self.config = config or get_config()
        self.clock = clock or (lambda: datetime.now(UTC))
        self.parser = ReadingTextParser(self.config.parser)
        self.logger = logger.bind(component="reading_service")

    def _recorded_at(self, value: str | None) -> datetime:
        if not value:
            return self.clock()
        try:
            parsed = datetime.strptime(value, RECORDED_AT_FORMAT)
        except ValueError:
            self.logger.warning("recorded_at_unparseable", value=value)
            return self.clock()
        return parsed.replace(tzinfo=UTC)

    def _source(self, value: str | None) -> ReadingSource:
        if value is None:
            return ReadingSource.MANUAL
        try:
            return ReadingSource(value.strip().lower())
        except ValueError:
            return ReadingSource.MANUAL

    def save_reading(self, user_id: str, request: ReadingRequest) -> BloodPressureReading:
        reading = BloodPressureReading(
            systolic=request.systolic,
            diastolic=request.diastolic,
            pulse=request.pulse,
            notes=request.notes,
            recorded_at=self._recorded_at(request.recorded_at),
            source=self._source(request.reading_type),
        )
        saved = self.store.add(user_id, reading)
        self.logger.info("reading_saved", reading_id=saved.id, source=saved.source.value)
        return saved

    def parse_text(self, text: str | None) -> ParseOutcome:
        return self.parser.parse(text, recorded_at=self.clock())

    def save_from_text(self, user_id: str, text: str) -> BloodPressureReading:
        """
        Parse ``text`` and store the result as a voice reading.

        Raises:
            ReadingParseError: if the text does not yield a valid reading.
        """
        outcome = self.parse_text(text)
        if outcome.reading is None:
            raise ReadingParseError(outcome.message)

        request = ReadingRequest(
            systolic=outcome.reading.systolic,
            diastolic=outcome.reading.diastolic,
            pulse=outcome.reading.pulse,
            notes=f"Voice: {text}",
            reading_type=ReadingSource.VOICE.value,
        )
        return self.save_reading(user_id, request)

    def readings_for_range(
        self, user_id: str, range_label: str | None = None
    ) -> list[BloodPressureReading]:
        label = range_label or self.config.summary.default_range
        return self.store.since(user_id, since_for_range(label, now=self.clock()))

    def all_readings(self, user_id: str) -> list[BloodPressureReading]:
        return self.store.all_desc(user_id)

    def summary_for_range(self, user_id: str, range_label: str | None = None) -> BPSummary:
        label = range_label or self.config.summary.default_range
        return build_summary(self.readings_for_range(user_id, label), label)

    def graph_for_range(self, user_id: str, range_label: str | None = None) -> list[GraphPoint]:
        return build_graph_points(self.readings_for_range(user_id, range_label))

    def delete_reading(self, user_id: str, reading_id: int) -> bool:
        """Delete a reading owned by ``user_id``; other users' readings are left alone."""
        if self.store.owner_of(reading_id) != user_id:
            return False
        self.store.delete(reading_id)
        self.logger.info("reading_deleted", reading_id=reading_id)
        return True
