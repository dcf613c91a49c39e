"""
Ordered regular-expression strategies for pulling BP numbers out of text.

Each field has its own chain of strategies, tried in order; the first strategy
whose pattern matches anywhere in the text wins, and only its leftmost match
is used. Keeping the chains as data makes the ambiguity policy explicit and
lets each strategy be exercised on its own.

Numbers are exactly two or three digits. The lookarounds stop a pattern from
grabbing the tail of a longer digit run ("1200/80" is not "200/80").
"""

import re
from dataclasses import dataclass

_NUM = r"(?<!\d)(\d{2,3})(?!\d)"
_SEPARATOR = r"\s*(?:over|by|/)\s*"

COMBINED_BP = re.compile(_NUM + _SEPARATOR + _NUM, re.IGNORECASE)
LABELED_SYSTOLIC = re.compile(r"systolic\s+(?:is\s+)?" + _NUM, re.IGNORECASE)
LABELED_DIASTOLIC = re.compile(r"diastolic\s+(?:is\s+)?" + _NUM, re.IGNORECASE)
LABELED_PULSE = re.compile(
    r"(?:pulse|heart rate|pulse rate|hr)\s+(?:is\s+)?" + _NUM, re.IGNORECASE
)
TRAILING_PULSE = re.compile(_NUM + _SEPARATOR + _NUM + r"\s+" + _NUM, re.IGNORECASE)


@dataclass(frozen=True)
class ExtractionStrategy:
    """A named pattern and the capture group holding the wanted number."""

    name: str
    pattern: re.Pattern[str]
    group: int = 1

    def apply(self, text: str) -> int | None:
        match = self.pattern.search(text)
        if match is None:
            return None
        return int(match.group(self.group))


SYSTOLIC_STRATEGIES: tuple[ExtractionStrategy, ...] = (
    ExtractionStrategy("combined", COMBINED_BP, group=1),
    ExtractionStrategy("labeled", LABELED_SYSTOLIC),
)

DIASTOLIC_STRATEGIES: tuple[ExtractionStrategy, ...] = (
    ExtractionStrategy("combined", COMBINED_BP, group=2),
    ExtractionStrategy("labeled", LABELED_DIASTOLIC),
)

PULSE_STRATEGIES: tuple[ExtractionStrategy, ...] = (
    ExtractionStrategy("labeled", LABELED_PULSE),
    ExtractionStrategy("trailing", TRAILING_PULSE, group=3),
)


def first_match(text: str, strategies: tuple[ExtractionStrategy, ...]) -> int | None:
    """Run ``strategies`` in order and return the first value found."""
    for strategy in strategies:
        value = strategy.apply(text)
        if value is not None:
            return value
    return None


def extract_systolic(text: str) -> int | None:
    return first_match(text, SYSTOLIC_STRATEGIES)


def extract_diastolic(text: str) -> int | None:
    return first_match(text, DIASTOLIC_STRATEGIES)


def extract_pulse(text: str) -> int | None:
    return first_match(text, PULSE_STRATEGIES)
