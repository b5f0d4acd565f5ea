# SPDX-License-Identifier: Apache-2.0
"""Post input quality plugin for NeMo Data Designer.

Scores LinkedIn post inputs against their generation settings with a small
table of lexical rules, and fingerprints generation requests so identical
requests can share one cached generation. No LLM calls, no API dependencies.

Usage::

    from data_designer_post_quality import analyze_input, fingerprint
    from data_designer_post_quality.config import PostQualityColumnConfig

    analyze_input(draft, {"style": "direct", "length": "short"})

    builder.add_column(PostQualityColumnConfig(
        name="input_quality",
        target_columns=["draft_input"],
        settings_column="wizard_settings",
        min_score=50,
    ))
"""

from data_designer_post_quality.core import (
    Hyperparameters,
    analyze_input,
    detect_intent,
    get_quality_label,
    should_analyze,
)
from data_designer_post_quality.fingerprint import canonical_json, fingerprint
from data_designer_post_quality.guidance import (
    apply_recommendations,
    describe_recommendations,
    get_examples_for_settings,
)
from data_designer_post_quality.models import (
    GenerationSettings,
    HashableContent,
    InputAnalysisResult,
    InputExample,
    QualityLabel,
    ReferenceContent,
)

__all__ = [
    "GenerationSettings",
    "HashableContent",
    "Hyperparameters",
    "InputAnalysisResult",
    "InputExample",
    "QualityLabel",
    "ReferenceContent",
    "analyze_input",
    "apply_recommendations",
    "canonical_json",
    "describe_recommendations",
    "detect_intent",
    "fingerprint",
    "get_examples_for_settings",
    "get_quality_label",
    "should_analyze",
]
