"""Known wizard setting values and their display labels."""

from __future__ import annotations

RECOMMENDABLE_FIELDS: tuple[str, ...] = ("style", "purpose", "length")

SETTING_LABELS: dict[str, str] = {
    "style": "Style",
    "purpose": "Purpose",
    "length": "Length",
}

SETTING_VALUE_LABELS: dict[str, dict[str, str]] = {
    "style": {
        "direct": "Direct",
        "list_format": "List",
        "story": "Story",
        "story-based": "Story",
        "question_based": "Question",
        "question-based": "Question",
        "how-to": "How-To",
    },
    "purpose": {
        "network_building": "Network Building",
        "direct_communication": "Direct Communication",
        "engagement": "Engagement",
        "personal_sharing": "Personal Sharing",
        "lead_generation": "Lead Generation",
        "brand_awareness": "Brand Awareness",
        "thought_leadership": "Thought Leadership",
    },
    "length": {
        "very_short": "Very Short",
        "short": "Short",
        "medium": "Medium",
        "long": "Long",
    },
}


def is_known_value(field: str, value: str) -> bool:
    return value in SETTING_VALUE_LABELS.get(field, {})
