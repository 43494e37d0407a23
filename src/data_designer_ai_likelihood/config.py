from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class AILikelihoodColumnConfig(SingleColumnConfig):
    """Score text columns for the likelihood of machine authorship.

    Runs the statistical and phrase-catalogue detectors against each row's text
    and produces a numeric score (0-100) with an explainable per-category
    breakdown.

    Attributes:
        target_columns: Columns whose text content will be concatenated and scored.
        max_score: Highest AI-likelihood score (0-100) for ``is_valid=True``.
        include_patterns: Include the per-category pattern breakdown in output.
        include_factors: Include the raw metric and display factor values in output.
        include_highlights: Include non-overlapping highlight spans in output.
    """

    target_columns: list[str]
    max_score: float = Field(default=50, ge=0, le=100, description="Highest AI-likelihood score for is_valid=True")
    include_patterns: bool = Field(default=True, description="Include per-category pattern breakdown in output")
    include_factors: bool = Field(default=False, description="Include factor values in output")
    include_highlights: bool = Field(default=False, description="Include highlight spans in output")
    column_type: Literal["ai-likelihood"] = "ai-likelihood"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f50e"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
