"""Rejection reasons for free-text reading parsing."""

from bpcore.domain.models import ParseFailureKind


class ReadingParseError(Exception):
    """Base rejection carrying the failure kind and a user-facing message."""

    kind: ParseFailureKind = ParseFailureKind.PARSE_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyInputError(ReadingParseError):
    kind = ParseFailureKind.EMPTY_INPUT


class MissingValuesError(ReadingParseError):
    kind = ParseFailureKind.MISSING_VALUES


class OutOfRangeError(ReadingParseError):
    kind = ParseFailureKind.OUT_OF_RANGE
