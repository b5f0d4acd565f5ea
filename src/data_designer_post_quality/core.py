# Input quality analyzer for LinkedIn post drafts.
#
# Runs a fixed table of lexical rules against the user's draft input and returns a
# score (0-100), positive feedback, actionable suggestions, the detected intent and,
# when the text points to different wizard settings, a recommended settings patch.

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import partial, reduce
from typing import Any, Callable, Mapping

from pydantic import BaseModel

from data_designer_post_quality.models import InputAnalysisResult, QualityLabel
from data_designer_post_quality.options import RECOMMENDABLE_FIELDS, is_known_value

logger = logging.getLogger(__name__)

MIN_INPUT_CHARS = 20

# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Hyperparameters:
    """Rule weights, thresholds and label tiers used by the analyzer."""

    base_score: int = 50
    score_min: int = 0
    score_max: int = 100

    numbers_bonus: int = 10
    product_name_bonus: int = 10
    call_to_action_bonus: int = 20
    missing_call_to_action_penalty: int = -10
    value_proposition_bonus: int = 20
    missing_value_proposition_penalty: int = -10
    good_length_bonus: int = 10
    brief_input_penalty: int = -20
    exclamation_penalty: int = -5
    settings_mismatch_penalty: int = -10

    brief_word_count: int = 10
    long_word_count: int = 100
    exclamation_max: int = 2

    label_excellent_min: int = 90
    label_good_min: int = 70
    label_fair_min: int = 50
    label_needs_work_min: int = 30

    cta_purposes: frozenset[str] = field(default_factory=lambda: frozenset({"network_building"}))

    def __post_init__(self) -> None:
        if not 0 <= self.score_min <= self.score_max <= 100:
            raise ValueError(
                f"score range must lie within [0, 100], got [{self.score_min}, {self.score_max}]"
            )


DEFAULT_HYPERPARAMETERS = Hyperparameters()


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _SettingHint:
    preferred: str
    accepted: frozenset[str]


@dataclass(frozen=True)
class _AnalysisContext:
    text: str
    lower: str
    word_count: int
    intent: str
    settings: dict[str, str]
    recommended: dict[str, str]
    hp: Hyperparameters


@dataclass
class _RuleResult:
    score_delta: int = 0
    feedback: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class _AnalysisState:
    score: int
    feedback: tuple[str, ...]
    suggestions: tuple[str, ...]

    def merge(self, result: _RuleResult) -> _AnalysisState:
        return _AnalysisState(
            score=self.score + result.score_delta,
            feedback=self.feedback + tuple(result.feedback),
            suggestions=self.suggestions + tuple(result.suggestions),
        )


_Rule = Callable[[_AnalysisContext], _RuleResult]

# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------

_NUMBER_RE = re.compile(r"\d+")
_SPECIFIC_TERMS_RE = re.compile(
    r"\b(users?|testers?|people|founders?|professionals?|developers?|designers?)\b", re.IGNORECASE
)
_PRODUCT_NAME_RE = re.compile(r"\b[A-Z][a-z]+(?:[A-Z][a-z]+)+\b")
_CTA_RE = re.compile(
    r"(comment|dm|message|reach out|contact|apply|join|interested|let me know|connect)", re.IGNORECASE
)
_VALUE_PROP_RE = re.compile(
    r"(helps?|creates?|enables?|solves?|makes|builds?|improves?|faster|better|easier)", re.IGNORECASE
)

_ANNOUNCEMENT_SEEKING_RE = re.compile(
    r"(looking for|seeking|need|want|search for|recruiting|hiring|accepting)\s+(test\s)?users?|beta\s?testers?"
)
_ANNOUNCEMENT_LAUNCH_RE = re.compile(r"(launch|built|created|released|shipping|announcing|introducing)")
_STORY_MARKER_RE = re.compile(
    r"(months? ago|years? ago|yesterday|last (week|month|year)|\bwhen i\b|i remember|story|journey)"
)
_STORY_ARC_RE = re.compile(
    r"(\bi just\b.{0,80}\bafter\b|here['\u2019]?s what i (learned|learnt)|what i (learned|learnt)"
    r"|\bfailed (attempts?|tries|launch(es)?)\b|\bfor the first time\b)"
)
_HOW_TO_RE = re.compile(r"(how to|steps? to|guide to|tutorial|here['\u2019]?s how|ways? to)")
_QUESTION_OPENER_RE = re.compile(r"^(what|who|where|when|why|how|which|do you|have you|are you|can you)\b")
_LIST_RE = re.compile(r"(\d+\s+(ways?|things?|tips?|reasons?|mistakes?|lessons?))|(\n-|\n\*|\n\d+\.)")
_INSIGHT_RE = re.compile(r"(realized|learned|noticed|observed|discovered|found that|insight|lesson)")

# ---------------------------------------------------------------------------
# Intent profiles
# ---------------------------------------------------------------------------


def _hint(preferred: str, *also: str) -> _SettingHint:
    return _SettingHint(preferred=preferred, accepted=frozenset((preferred, *also)))


_INTENT_PROFILES: dict[str, dict[str, _SettingHint]] = {
    "announcement": {
        "style": _hint("list_format", "direct"),
        "purpose": _hint("network_building", "lead_generation", "brand_awareness"),
        "length": _hint("short", "very_short"),
    },
    "story": {
        "style": _hint("story", "story-based"),
        "length": _hint("short", "medium", "long"),
    },
    "question": {
        "style": _hint("question_based", "question-based"),
    },
    "how-to": {
        "style": _hint("list_format", "how-to"),
    },
    "list": {
        "style": _hint("list_format"),
    },
}

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _word_count(text: str) -> int:
    return len(text.split())


def _settings_view(settings: BaseModel | Mapping[str, Any] | None) -> dict[str, str]:
    if settings is None:
        return {}
    raw = settings.model_dump() if isinstance(settings, BaseModel) else dict(settings)
    view: dict[str, str] = {}
    for key in ("style", "purpose", "tone", "length"):
        value = raw.get(key)
        if isinstance(value, str) and value.strip():
            view[key] = value.strip().lower()
    return view


def detect_intent(text: str) -> str:
    """Classify what the author is trying to do with the post.

    Returns one of ``announcement``, ``story``, ``how-to``, ``question``,
    ``list``, ``insight`` or ``unknown``. The first matching category wins.
    """
    lower = text.lower()
    if _ANNOUNCEMENT_SEEKING_RE.search(lower) or _ANNOUNCEMENT_LAUNCH_RE.search(lower):
        return "announcement"
    if _STORY_MARKER_RE.search(lower) or _STORY_ARC_RE.search(lower):
        return "story"
    if _HOW_TO_RE.search(lower):
        return "how-to"
    stripped = lower.strip()
    if stripped.endswith("?") or _QUESTION_OPENER_RE.match(stripped):
        return "question"
    if _LIST_RE.search(lower):
        return "list"
    if _INSIGHT_RE.search(lower):
        return "insight"
    return "unknown"


def recommend_settings(intent: str, settings: BaseModel | Mapping[str, Any] | None) -> dict[str, str]:
    """Return the style/purpose/length changes the detected intent calls for.

    A field is only recommended when the current value is a recognised option
    that the intent does not accept. Missing or unrecognised values are left
    alone, as are intents without a confident profile.
    """
    profile = _INTENT_PROFILES.get(intent)
    current = _settings_view(settings)
    if not profile or not current:
        return {}
    recommendations: dict[str, str] = {}
    for key in RECOMMENDABLE_FIELDS:
        hint = profile.get(key)
        value = current.get(key)
        if hint is None or value is None or not is_known_value(key, value):
            continue
        if value not in hint.accepted:
            recommendations[key] = hint.preferred
    return recommendations


def _compared_fields(intent: str, settings: dict[str, str]) -> list[str]:
    profile = _INTENT_PROFILES.get(intent, {})
    return [
        key for key in RECOMMENDABLE_FIELDS
        if key in profile and key in settings and is_known_value(key, settings[key])
    ]


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _rule_numbers(ctx: _AnalysisContext) -> _RuleResult:
    if _NUMBER_RE.search(ctx.text):
        return _RuleResult(ctx.hp.numbers_bonus, feedback=["Includes specific numbers"])
    return _RuleResult(
        suggestions=['Add specific numbers (e.g., "5-10 users", "2x per week") to quantify what you need']
    )


def _rule_product_name(ctx: _AnalysisContext) -> _RuleResult:
    if _PRODUCT_NAME_RE.search(ctx.text):
        return _RuleResult(ctx.hp.product_name_bonus, feedback=["Names the product or project explicitly"])
    if ctx.intent == "announcement":
        return _RuleResult(suggestions=["No product or project name detected; name it explicitly for clarity"])
    return _RuleResult()


def _rule_call_to_action(ctx: _AnalysisContext) -> _RuleResult:
    hp = ctx.hp
    if _CTA_RE.search(ctx.lower):
        return _RuleResult(hp.call_to_action_bonus, feedback=["Has a clear call-to-action"])
    if ctx.intent == "announcement" or ctx.settings.get("purpose") in hp.cta_purposes:
        return _RuleResult(
            hp.missing_call_to_action_penalty,
            suggestions=['Missing a clear call-to-action; add how people can engage: "DM me", "Comment below", "Apply here"'],
        )
    return _RuleResult()


def _rule_value_proposition(ctx: _AnalysisContext) -> _RuleResult:
    hp = ctx.hp
    if _VALUE_PROP_RE.search(ctx.lower):
        return _RuleResult(hp.value_proposition_bonus, feedback=["Explains the value or unique details"])
    if ctx.intent == "announcement":
        return _RuleResult(
            hp.missing_value_proposition_penalty,
            suggestions=["No value proposition; say what makes it different and what problem it solves"],
        )
    return _RuleResult()


def _rule_length(ctx: _AnalysisContext) -> _RuleResult:
    hp = ctx.hp
    if ctx.word_count < hp.brief_word_count:
        return _RuleResult(
            hp.brief_input_penalty,
            suggestions=["Input is very brief and may produce generic output; add 1-2 sentences with context or specifics"],
        )
    if ctx.word_count > hp.long_word_count:
        return _RuleResult(suggestions=["Input is quite long; consider being more concise"])
    return _RuleResult(hp.good_length_bonus, feedback=["Good length for a focused post"])


def _rule_exclamations(ctx: _AnalysisContext) -> _RuleResult:
    hp = ctx.hp
    count = ctx.text.count("!")
    if count <= hp.exclamation_max:
        return _RuleResult()
    if ctx.settings.get("tone") == "professional":
        advice = f"{count} exclamation marks read as hype for a professional tone; let the content carry the energy"
    else:
        advice = f"{count} exclamation marks; keep one or two where they matter"
    return _RuleResult(hp.exclamation_penalty, suggestions=[advice])


def _rule_settings_fit(ctx: _AnalysisContext) -> _RuleResult:
    if ctx.recommended:
        return _RuleResult(
            ctx.hp.settings_mismatch_penalty,
            suggestions=["Settings may not match your input type; see the recommended settings"],
        )
    if _compared_fields(ctx.intent, ctx.settings):
        return _RuleResult(feedback=["Settings match your input type"])
    return _RuleResult()


# ---------------------------------------------------------------------------
# Pipeline wiring
# ---------------------------------------------------------------------------


_PIPELINE: list[_Rule] = [
    _rule_numbers,
    _rule_product_name,
    _rule_call_to_action,
    _rule_value_proposition,
    _rule_length,
    _rule_exclamations,
    _rule_settings_fit,
]


def _run_pipeline(context: _AnalysisContext, pipeline: list[_Rule]) -> _AnalysisState:
    initial = _AnalysisState(score=context.hp.base_score, feedback=(), suggestions=())

    def _merge(state: _AnalysisState, rule_fn: Callable[[], _RuleResult]) -> _AnalysisState:
        return state.merge(rule_fn())

    return reduce(_merge, [partial(rule, context) for rule in pipeline], initial)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def should_analyze(text: str) -> bool:
    """True once the input is long enough for the analyzer to say anything useful."""
    return len(text) >= MIN_INPUT_CHARS


def analyze_input(
    text: str,
    settings: BaseModel | Mapping[str, Any] | None = None,
    hyperparameters: Hyperparameters | None = None,
) -> InputAnalysisResult:
    """Score draft input against the chosen generation settings.

    Args:
        text: The user's raw input for the post wizard.
        settings: A :class:`GenerationSettings` or a mapping. Only ``style``,
            ``purpose``, ``tone`` and ``length`` are consulted; missing or
            unrecognised values disable the rules that depend on them.
        hyperparameters: Optional tuning overrides.

    Returns:
        InputAnalysisResult with a score clamped to [0, 100], feedback and
        suggestions in rule order, and ``recommended_settings`` set only when
        the text suggests different style, purpose or length values.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    lower = text.lower()
    intent = detect_intent(text)
    view = _settings_view(settings)
    recommended = recommend_settings(intent, view)

    context = _AnalysisContext(
        text=text, lower=lower, word_count=_word_count(text),
        intent=intent, settings=view, recommended=recommended, hp=hp,
    )
    state = _run_pipeline(context, _PIPELINE)
    score = max(hp.score_min, min(hp.score_max, state.score))
    if recommended:
        logger.debug("intent %s disagrees with settings %s: recommending %s", intent, view, recommended)

    has_numbers = bool(_NUMBER_RE.search(text))
    return InputAnalysisResult(
        score=score,
        feedback=list(state.feedback),
        suggestions=list(state.suggestions),
        recommended_settings=recommended or None,
        detected_intent=intent,
        word_count=context.word_count,
        is_specific=has_numbers or bool(_PRODUCT_NAME_RE.search(text)) or bool(_SPECIFIC_TERMS_RE.search(text)),
        has_numbers=has_numbers,
        has_call_to_action=bool(_CTA_RE.search(lower)),
        has_unique_details=bool(_VALUE_PROP_RE.search(lower)),
    )


def get_quality_label(score: int, hyperparameters: Hyperparameters | None = None) -> QualityLabel:
    """Map a score to one of five tiers. A score on a threshold belongs to the upper tier."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    if score >= hp.label_excellent_min:
        return QualityLabel("Excellent", "green", "\U0001f31f")
    if score >= hp.label_good_min:
        return QualityLabel("Good", "blue", "\u2705")
    if score >= hp.label_fair_min:
        return QualityLabel("Fair", "yellow", "\u26a0\ufe0f")
    if score >= hp.label_needs_work_min:
        return QualityLabel("Needs Work", "orange", "\u26a0\ufe0f")
    return QualityLabel("Poor", "red", "\u274c")
