"""
Clinical category for a systolic/diastolic pair.

The thresholds overlap, so the rules form an ordered decision list: the first
rule that matches decides. Reordering changes results at the boundaries.
"""

from collections.abc import Callable

from bpcore.domain.models import BPCategory

ClassificationRule = tuple[Callable[[float, float], bool], BPCategory]

CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    (lambda sys, dia: sys > 180 or dia > 120, BPCategory.CRISIS),
    (lambda sys, dia: sys >= 140 or dia >= 90, BPCategory.STAGE_2),
    (lambda sys, dia: sys >= 130 or dia >= 80, BPCategory.STAGE_1),
    (lambda sys, dia: sys >= 120 and dia < 80, BPCategory.ELEVATED),
    (lambda sys, dia: sys < 120 and dia < 80, BPCategory.NORMAL),
)


def classify_blood_pressure(systolic: float, diastolic: float) -> BPCategory:
    for matches, category in CLASSIFICATION_RULES:
        if matches(systolic, diastolic):
            return category
    # Only NaN input gets here
    return BPCategory.UNKNOWN
