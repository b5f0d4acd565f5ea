from __future__ import annotations

from typing import Any, Mapping

from data_designer_post_quality.models import GenerationSettings, InputExample
from data_designer_post_quality.options import SETTING_LABELS, SETTING_VALUE_LABELS

_ANNOUNCEMENT_EXAMPLES = [
    InputExample(
        bad="Looking for test users",
        good=(
            "Looking for 5-10 active LinkedIn users who post 2x/week to test StoryScale beta. "
            "Free lifetime access + priority support."
        ),
        explanation="Specific numbers, clear criteria, explicit benefits",
    ),
    InputExample(
        bad="I built an app",
        good=(
            "Built StoryScale - creates LinkedIn content 10x faster with AI. "
            "Seeking testers who struggle with consistent posting."
        ),
        explanation="Product name, value proposition, target audience",
    ),
]

_STORY_EXAMPLES = [
    InputExample(
        bad="I learned something interesting",
        good=(
            "Three months ago, I spent 4 hours writing one LinkedIn post. "
            "Yesterday, I created 5 posts in 30 minutes using StoryScale."
        ),
        explanation="Specific timeframes, concrete details, clear transformation",
    ),
    InputExample(
        bad="Had a good experience with a client",
        good="Client came to me with 40% revenue drop. We rebuilt their workflow. Two months later: 65% revenue increase.",
        explanation="Specific numbers, clear problem-solution-result",
    ),
]

_QUESTION_EXAMPLES = [
    InputExample(
        bad="What do you think?",
        good=(
            "You're building a SaaS product: Do you prioritize features users request "
            "OR features that drive retention? Why?"
        ),
        explanation="Specific context, clear choice, invites reasoning",
    ),
]

_LIST_EXAMPLES = [
    InputExample(
        bad="Here are some tips",
        good=(
            "3 mistakes I made launching my first product: pricing too low, "
            "launching without email list, ignoring user feedback for 3 months."
        ),
        explanation="Specific number, concrete examples, relatable mistakes",
    ),
]

_GENERIC_EXAMPLES = [
    InputExample(
        bad="Share your thoughts on this",
        good=(
            "Spent 6 months testing LinkedIn algorithms. Found that posts with 15+ word comments "
            "get 3x more reach than simple reactions. Try this: Ask specific questions that "
            "require detailed answers."
        ),
        explanation="Specific data, actionable insight, clear recommendation",
    ),
]


def _lookup(settings: GenerationSettings | Mapping[str, Any] | None, key: str) -> str | None:
    if settings is None:
        return None
    value = getattr(settings, key, None) if isinstance(settings, GenerationSettings) else settings.get(key)
    return value if isinstance(value, str) else None


def get_examples_for_settings(settings: GenerationSettings | Mapping[str, Any] | None) -> list[InputExample]:
    """Return weak/strong input pairs that fit the chosen style and purpose."""
    style = _lookup(settings, "style")
    purpose = _lookup(settings, "purpose")
    if purpose == "network_building" or style == "announcement":
        return list(_ANNOUNCEMENT_EXAMPLES)
    if style in ("story", "story-based"):
        return list(_STORY_EXAMPLES)
    if style in ("question_based", "question-based"):
        return list(_QUESTION_EXAMPLES)
    if style == "list_format":
        return list(_LIST_EXAMPLES)
    return list(_GENERIC_EXAMPLES)


def describe_recommendations(recommended: Mapping[str, str] | None) -> list[tuple[str, str]]:
    """Turn a recommended settings patch into ``(field label, value label)`` pairs.

    Values without a display label are passed through unchanged.
    """
    if not recommended:
        return []
    return [
        (SETTING_LABELS.get(key, key), SETTING_VALUE_LABELS.get(key, {}).get(value, value))
        for key, value in recommended.items()
    ]


def apply_recommendations(settings: GenerationSettings, recommended: Mapping[str, str] | None) -> GenerationSettings:
    """Return a copy of ``settings`` with the recommended values applied."""
    if not recommended:
        return settings
    patch = {key: value for key, value in recommended.items() if key in SETTING_LABELS}
    return settings.model_copy(update=patch)
