from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class PostQualityColumnConfig(SingleColumnConfig):
    """Score LinkedIn post inputs for quality against their generation settings.

    Runs the rule-based input analyzer on each row and produces a score (0-100),
    a quality label, feedback, suggestions and any recommended settings changes.

    Attributes:
        target_columns: Columns whose text content will be concatenated and scored.
        settings_column: Optional column holding a generation settings mapping per
            row. Without it rows are scored with no settings.
        min_score: Minimum quality score (0-100) for ``is_valid=True``. Defaults to 50
            (the boundary between "Needs Work" and "Fair").
        include_suggestions: Include feedback and suggestion strings in output.
        include_fingerprint: Include the request fingerprint for rows that carry
            complete settings.
    """

    target_columns: list[str]
    settings_column: str | None = Field(default=None, description="Column with per-row generation settings")
    min_score: int = Field(default=50, ge=0, le=100, description="Minimum quality score for is_valid=True")
    include_suggestions: bool = Field(default=True, description="Include feedback and suggestions in output")
    include_fingerprint: bool = Field(default=False, description="Include the request fingerprint in output")
    column_type: Literal["post-quality"] = "post-quality"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f4dd"

    @property
    def required_columns(self) -> list[str]:
        if self.settings_column:
            return [*self.target_columns, self.settings_column]
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
