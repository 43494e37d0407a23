from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

_CATEGORY_CAPS = {
    "Lexical Diversity": 25.0,
    "Flesch-Kincaid Grade Level": 25.0,
    "Word Frequency Distribution": 25.0,
    "Sentence Length Variation": 25.0,
    "Passive Voice Frequency": 35.0,
    "AI Vocabulary": 40.0,
    "Undue Emphasis": 25.0,
    "Promotional Language": 30.0,
    "Didactic Disclaimers": 25.0,
    "Section Summaries": 25.0,
    "Challenge Patterns": 25.0,
    "Negative Parallelism": 30.0,
    "Rule of Three": 25.0,
    "Transition Word Density": 30.0,
    "Paragraph Coherence": 25.0,
}


@dataclass(frozen=True)
class Hyperparameters:
    """Thresholds, score slopes, and per-category caps used by the detectors and aggregator."""

    ttr_min_words: int = 500
    ttr_low: float = 0.35
    ttr_high: float = 0.65
    ttr_score_max: float = 25.0

    grade_min: float = 0.0
    grade_max: float = 18.0
    grade_threshold: float = 14.0
    grade_score_slope: float = 5.0
    grade_score_max: float = 25.0

    zipf_min_words: int = 5000
    zipf_ignore_stopwords: bool = False
    zipf_chi_weight: float = 0.4
    zipf_chi_cap: float = 2.0
    zipf_uniformity_weight: float = 0.3
    zipf_ratio_weight: float = 0.3
    zipf_ratio_cap: float = 5.0
    zipf_threshold: float = 0.15
    zipf_score_max: float = 25.0
    zipf_uniform_top_ratio: float = 1.5
    zipf_top_words: int = 10

    sentence_min_count: int = 3
    sentence_stddev_threshold: float = 4.0
    sentence_cv_threshold: float = 0.30
    sentence_cv_steps: tuple[tuple[float, float], ...] = ((0.20, 25.0), (0.30, 20.0), (0.35, 15.0))

    passive_threshold: float = 0.15
    passive_score_slope: float = 50.0
    passive_score_max: float = 35.0

    transition_min_sentences: int = 2
    transition_threshold: float = 0.4
    transition_score_slope: float = 100.0
    transition_score_max: float = 30.0

    coherence_min_sentences: int = 3
    coherence_threshold: float = 0.45
    coherence_score_slope: float = 100.0
    coherence_score_max: float = 25.0

    lexical_points_per_match: float = 5.0
    lexical_phrase_score_max: float = 100.0

    category_caps: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType(dict(_CATEGORY_CAPS)), hash=False
    )
    default_category_cap: float = 25.0

    score_min: float = 0.0
    score_max: float = 100.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "category_caps", MappingProxyType(dict(self.category_caps)))

    def cap_for(self, category: str) -> float:
        return self.category_caps.get(category, self.default_category_cap)


DEFAULT_HYPERPARAMETERS = Hyperparameters()
