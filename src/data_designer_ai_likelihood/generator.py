from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_ai_likelihood.config import AILikelihoodColumnConfig
from data_designer_ai_likelihood.core import analyze

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def build_row_output(text: str, config: AILikelihoodColumnConfig) -> dict:
    result = analyze(text)
    payload = result.to_payload()
    output: dict = {
        "is_valid": result.score <= config.max_score,
        "ai_score": payload["score"],
        "word_count": len(text.split()),
    }
    if config.include_patterns:
        output["ai_patterns"] = payload["patterns"]
    if config.include_factors:
        output["ai_factors"] = payload["factors"]
    if config.include_highlights:
        output["ai_highlights"] = payload["highlights"]
    return output


class AILikelihoodColumnGenerator(ColumnGeneratorFullColumn[AILikelihoodColumnConfig]):
    """Column generator that scores text for the likelihood of machine authorship."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f50e Scoring column {self.config.name!r} for AI writing likelihood")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   max_score: {self.config.max_score}")

        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = " ".join(str(v) for v in row.values if v is not None)
            results.append(build_row_output(text, self.config))

        data = data.copy()
        data[self.config.name] = results
        return data
