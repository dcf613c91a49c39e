"""
Spelled-out number normalization for transcribed speech.

Voice transcripts frequently arrive as "one hundred twenty over eighty"; the
pattern extractor only understands digits, so number words are collapsed into
decimal strings first.

Accumulation is additive, not positional: "one twenty" becomes 21 and
"one hundred twenty" becomes 120. That is the established behavior and is
relied on by stored transcripts, so it is reproduced as-is.
"""

import re
from types import MappingProxyType

HUNDRED = 100

NUMBER_WORDS: MappingProxyType[str, int] = MappingProxyType(
    {
        "zero": 0,
        "one": 1,
        "two": 2,
        "three": 3,
        "four": 4,
        "five": 5,
        "six": 6,
        "seven": 7,
        "eight": 8,
        "nine": 9,
        "ten": 10,
        "eleven": 11,
        "twelve": 12,
        "thirteen": 13,
        "fourteen": 14,
        "fifteen": 15,
        "sixteen": 16,
        "seventeen": 17,
        "eighteen": 18,
        "nineteen": 19,
        "twenty": 20,
        "thirty": 30,
        "forty": 40,
        "fifty": 50,
        "sixty": 60,
        "seventy": 70,
        "eighty": 80,
        "ninety": 90,
        "hundred": HUNDRED,
    }
)

_NON_LETTERS = re.compile(r"[^a-z]")


def normalize_number_words(text: str) -> str:
    """Replace each run of number words in ``text`` with its decimal value.

    The text is lower-cased and trimmed; non-number tokens are kept verbatim
    and tokens are re-joined with single spaces.
    """
    output: list[str] = []
    accumulated = 0
    in_number = False

    for token in text.lower().strip().split():
        value = NUMBER_WORDS.get(_NON_LETTERS.sub("", token))
        if value is None:
            if in_number:
                output.append(str(accumulated))
                accumulated = 0
                in_number = False
            output.append(token)
            continue

        if value == HUNDRED:
            accumulated = HUNDRED if accumulated == 0 else accumulated * HUNDRED
        else:
            accumulated += value
        in_number = True

    if in_number:
        output.append(str(accumulated))

    return " ".join(output).strip()
