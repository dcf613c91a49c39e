"""
Free text to blood-pressure reading conversion.

Pipeline: normalize number words -> extract systolic/diastolic/pulse -> validate.
Every failure, expected or not, is returned as a failed ``ParseOutcome``; nothing
raised inside the pipeline escapes ``parse``.
"""

from datetime import UTC, datetime

from bpcore.config import ParserConfig, get_config
from bpcore.domain.errors import EmptyInputError
from bpcore.domain.models import (
    BloodPressureReading,
    ParseFailureKind,
    ParseOutcome,
    ReadingSource,
)
from bpcore.services.extractor import extract_diastolic, extract_pulse, extract_systolic
from bpcore.services.normalizer import normalize_number_words
from bpcore.services.result import logger
from bpcore.services.validator import validate_reading_values

EMPTY_INPUT_MESSAGE = "No input provided"


class ReadingTextParser:
    """
    Parses transcribed or typed BP readings.

    Stateless apart from its configuration, so a single instance can be shared
    across concurrent callers.
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or get_config().parser
        self.logger = logger.bind(component="reading_text_parser")

    def parse(
        self,
        raw_text: str | None,
        source: ReadingSource | None = None,
        recorded_at: datetime | None = None,
    ) -> ParseOutcome:
        raw_text = raw_text or ""
        if not raw_text.strip():
            error = EmptyInputError(EMPTY_INPUT_MESSAGE)
            return ParseOutcome.failed(raw_text, error.kind, error.message)

        text = raw_text
        if len(text) > self.config.max_input_chars:
            self.logger.warning(
                "input_truncated",
                length=len(text),
                max_input_chars=self.config.max_input_chars,
            )
            text = text[: self.config.max_input_chars]

        try:
            normalized = normalize_number_words(text)
            result = validate_reading_values(
                extract_systolic(normalized),
                extract_diastolic(normalized),
                extract_pulse(normalized),
            )
            if result.is_err():
                error = result.unwrap_err()
                self.logger.info(
                    "reading_parse_rejected", kind=error.kind.value, length=len(raw_text)
                )
                return ParseOutcome.failed(raw_text, error.kind, error.message)

            values = result.unwrap()
            reading = BloodPressureReading(
                systolic=values.systolic,
                diastolic=values.diastolic,
                pulse=values.pulse,
                recorded_at=recorded_at or datetime.now(UTC),
                source=source or self.config.default_source,
            )
        except Exception as e:
            self.logger.exception("reading_parse_error", error=str(e), length=len(raw_text))
            return ParseOutcome.failed(raw_text, ParseFailureKind.PARSE_ERROR, f"Parse error: {e}")

        self.logger.info(
            "reading_parsed",
            systolic=reading.systolic,
            diastolic=reading.diastolic,
            has_pulse=reading.pulse is not None,
        )
        return ParseOutcome.succeeded(raw_text, reading)


def parse_reading_text(raw_text: str | None, source: ReadingSource | None = None) -> ParseOutcome:
    """Parse ``raw_text`` with the default configuration."""
    return ReadingTextParser().parse(raw_text, source=source)
