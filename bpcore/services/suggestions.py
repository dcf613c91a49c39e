"""Fixed advisory text per category."""

from types import MappingProxyType

from bpcore.domain.models import BPCategory

FALLBACK_SUGGESTION = "Please continue logging readings for better analysis."
NO_DATA_SUGGESTION = "No readings found for this period. Start logging your BP!"

SUGGESTIONS: MappingProxyType[BPCategory, str] = MappingProxyType(
    {
        BPCategory.NORMAL: (
            "Excellent! Your blood pressure is in the optimal range. Keep up your healthy "
            "lifestyle with regular exercise and balanced diet."
        ),
        BPCategory.ELEVATED: (
            "Your BP is slightly elevated. Consider reducing sodium intake, staying hydrated, "
            "and monitoring more frequently. Lifestyle changes can help bring it to normal."
        ),
        BPCategory.STAGE_1: (
            "Your blood pressure is in Stage 1 Hypertension range. It is recommended to consult "
            "your doctor. Consider the DASH diet, regular aerobic exercise, and stress reduction "
            "techniques."
        ),
        BPCategory.STAGE_2: (
            "Your blood pressure is in Stage 2 Hypertension range. Please consult your doctor "
            "promptly. Medication may be required alongside lifestyle modifications."
        ),
        BPCategory.CRISIS: (
            "URGENT: Your blood pressure readings indicate a hypertensive crisis. Seek immediate "
            "medical attention if you experience symptoms like chest pain, shortness of breath, "
            "or severe headache."
        ),
        BPCategory.UNKNOWN: FALLBACK_SUGGESTION,
        BPCategory.NO_DATA: NO_DATA_SUGGESTION,
    }
)


def suggest_for_category(category: BPCategory) -> str:
    return SUGGESTIONS.get(category, FALLBACK_SUGGESTION)
