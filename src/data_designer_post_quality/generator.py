from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn
from pydantic import ValidationError

from data_designer_post_quality.config import PostQualityColumnConfig
from data_designer_post_quality.core import analyze_input, get_quality_label, should_analyze
from data_designer_post_quality.fingerprint import fingerprint

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def _row_fingerprint(text: str, settings: Mapping[str, Any] | None) -> str | None:
    if not settings:
        return None
    try:
        return fingerprint({"input": text, "settings": settings, "referenceContent": []})
    except ValidationError as exc:
        logger.debug(f"   no fingerprint for incomplete settings: {exc.error_count()} error(s)")
        return None


def score_row(text: str, settings: Mapping[str, Any] | None, config: PostQualityColumnConfig) -> dict:
    """Build the output cell for one row.

    Rows shorter than the analyzer's minimum input length are not scored. Rows
    whose settings are missing or incomplete get ``fingerprint=None``.
    """
    output: dict = {"is_valid": False, "quality_score": None, "quality_label": None}
    if config.include_fingerprint:
        output["fingerprint"] = _row_fingerprint(text, settings)
    if not should_analyze(text):
        return output

    analysis = analyze_input(text, settings)
    output.update(
        {
            "is_valid": analysis.score >= config.min_score,
            "quality_score": analysis.score,
            "quality_label": get_quality_label(analysis.score).label,
            "detected_intent": analysis.detected_intent,
            "word_count": analysis.word_count,
            "recommended_settings": analysis.recommended_settings,
        }
    )
    if config.include_suggestions:
        output["quality_feedback"] = analysis.feedback
        output["quality_suggestions"] = analysis.suggestions
    return output


def score_frame(data: pd.DataFrame, config: PostQualityColumnConfig) -> list[dict]:
    """Score every row of ``data``; settings cells that are not mappings count as no settings."""
    results = []
    for _, row in data[config.required_columns].iterrows():
        text = " ".join(str(row[c]) for c in config.target_columns if row[c] is not None)
        settings = row[config.settings_column] if config.settings_column else None
        results.append(score_row(text, settings if isinstance(settings, Mapping) else None, config))
    return results


class PostQualityColumnGenerator(ColumnGeneratorFullColumn[PostQualityColumnConfig]):
    """Column generator that scores post inputs with the rule-based quality analyzer."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f4dd Scoring column {self.config.name!r} for post input quality")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   settings column: {self.config.settings_column}")
        logger.info(f"   min_score: {self.config.min_score}")

        results = score_frame(data, self.config)

        skipped = sum(1 for r in results if r["quality_score"] is None)
        if skipped:
            logger.info(f"   {skipped} row(s) below the minimum input length were not scored")

        data = data.copy()
        data[self.config.name] = results
        return data
