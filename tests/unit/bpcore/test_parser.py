"""
Tests for free-text parsing and value validation.

Covers:
- Equivalent phrasings yield the same reading
- Each rejection kind and its message
- Unexpected failures surface as PARSE_ERROR instead of raising
- Input length bound
"""

from __future__ import annotations

import pytest

from bpcore.config import ParserConfig
from bpcore.domain.errors import MissingValuesError, OutOfRangeError
from bpcore.domain.models import ParseFailureKind, ReadingSource
from bpcore.services.parser import ReadingTextParser, parse_reading_text
from bpcore.services.validator import validate_reading_values


class TestValidateReadingValues:
    def test_missing_systolic_or_diastolic(self) -> None:
        for sys, dia in [(None, 80), (120, None), (None, None)]:
            result = validate_reading_values(sys, dia, 72)
            assert result.is_err()
            assert isinstance(result.unwrap_err(), MissingValuesError)
            assert "120 over 80 pulse 72" in result.unwrap_err().message

    @pytest.mark.parametrize("sys,dia", [(59, 80), (251, 80), (120, 39), (120, 151)])
    def test_out_of_range(self, sys: int, dia: int) -> None:
        result = validate_reading_values(sys, dia)
        assert result.is_err()
        error = result.unwrap_err()
        assert isinstance(error, OutOfRangeError)
        assert f"systolic={sys}, diastolic={dia}" in error.message

    @pytest.mark.parametrize("sys,dia", [(60, 40), (250, 150), (120, 80)])
    def test_bounds_are_inclusive(self, sys: int, dia: int) -> None:
        assert validate_reading_values(sys, dia).is_ok()

    def test_pulse_is_not_range_checked(self) -> None:
        values = validate_reading_values(120, 80, 300).unwrap()
        assert values.pulse == 300
        assert validate_reading_values(120, 80).unwrap().pulse is None


class TestReadingTextParser:
    @pytest.mark.parametrize("text", ["120/80", "120 over 80", "120 by 80"])
    def test_equivalent_phrasings(self, text: str) -> None:
        outcome = parse_reading_text(text)

        assert outcome.success
        assert outcome.failure is None
        assert outcome.reading is not None
        assert (outcome.reading.systolic, outcome.reading.diastolic) == (120, 80)
        assert outcome.reading.pulse is None
        assert outcome.message == "Successfully parsed: 120/80"
        assert outcome.raw_text == text

    def test_labeled_sentence_with_pulse(self) -> None:
        outcome = parse_reading_text("my systolic is 145 and diastolic is 95 pulse is 80")

        assert outcome.reading is not None
        assert (outcome.reading.systolic, outcome.reading.diastolic, outcome.reading.pulse) == (
            145,
            95,
            80,
        )
        assert outcome.message == "Successfully parsed: 145/95 pulse 80"

    def test_spoken_numbers(self) -> None:
        outcome = parse_reading_text("One hundred twenty over eighty, pulse seventy two")

        assert outcome.reading is not None
        assert (outcome.reading.systolic, outcome.reading.diastolic, outcome.reading.pulse) == (
            120,
            80,
            72,
        )

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
    def test_empty_input(self, text: str | None) -> None:
        outcome = parse_reading_text(text)

        assert not outcome.success
        assert outcome.reading is None
        assert outcome.failure == ParseFailureKind.EMPTY_INPUT
        assert outcome.message == "No input provided"

    def test_out_of_range(self) -> None:
        outcome = parse_reading_text("120 over 30")

        assert outcome.failure == ParseFailureKind.OUT_OF_RANGE
        assert "systolic=120, diastolic=30" in outcome.message
        assert outcome.raw_text == "120 over 30"

    def test_missing_values(self) -> None:
        outcome = parse_reading_text("I feel great today")

        assert outcome.failure == ParseFailureKind.MISSING_VALUES
        assert "120 over 80 pulse 72" in outcome.message

    def test_unexpected_failure_becomes_parse_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def boom(text: str) -> int:
            raise RuntimeError("boom")

        monkeypatch.setattr("bpcore.services.parser.extract_systolic", boom)

        outcome = parse_reading_text("120/80")

        assert outcome.failure == ParseFailureKind.PARSE_ERROR
        assert outcome.message == "Parse error: boom"

    def test_zero_pulse_cannot_build_a_reading(self) -> None:
        outcome = parse_reading_text("120/80 pulse 00")

        assert outcome.failure == ParseFailureKind.PARSE_ERROR
        assert outcome.message.startswith("Parse error:")

    def test_source_defaults_to_configured_value(self) -> None:
        parser = ReadingTextParser(ParserConfig(default_source=ReadingSource.TEXT))

        assert parser.parse("120/80").reading.source == ReadingSource.TEXT  # type: ignore[union-attr]
        outcome = parser.parse("120/80", source=ReadingSource.VOICE)
        assert outcome.reading.source == ReadingSource.VOICE  # type: ignore[union-attr]

    def test_long_input_is_truncated_before_matching(self) -> None:
        parser = ReadingTextParser(ParserConfig(max_input_chars=20))

        head = parser.parse("120/80 " + "blah " * 200)
        assert head.success
        assert head.raw_text.endswith("blah ")

        tail = parser.parse("blah " * 10 + "120/80")
        assert tail.failure == ParseFailureKind.MISSING_VALUES
