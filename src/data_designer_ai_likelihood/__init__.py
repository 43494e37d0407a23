# SPDX-License-Identifier: Apache-2.0
"""AI-likelihood plugin for NeMo Data Designer.

Adds an ``ai-likelihood`` column type that estimates how likely each row's
text is to be machine-written. The score (0-100) is built from explainable
statistical signals (type-token ratio, reading grade level, Zipfian word
distribution, sentence length variation, passive voice) and phrase catalogues.
No model calls, no API dependencies.

Usage::

    from data_designer_ai_likelihood import AILikelihoodColumnConfig

    builder.add_column(AILikelihoodColumnConfig(
        name="ai_check",
        target_columns=["article"],
        max_score=50,
    ))
"""

from data_designer_ai_likelihood.config import AILikelihoodColumnConfig
from data_designer_ai_likelihood.core import analyze, analyze_text
from data_designer_ai_likelihood.hyperparameters import Hyperparameters
from data_designer_ai_likelihood.models import DetectionResult, PatternMatch, TextHighlight

__all__ = [
    "AILikelihoodColumnConfig",
    "DetectionResult",
    "Hyperparameters",
    "PatternMatch",
    "TextHighlight",
    "analyze",
    "analyze_text",
]
