# Heuristic AI-writing likelihood scorer.
#
# Runs statistical detectors (type-token ratio, reading grade, Zipfian word
# distribution, sentence length variation, passive voice) and a catalogue of
# phrase/pattern detectors over a text, then combines their capped
# contributions into a 0-100 score with a per-category breakdown and a set of
# non-overlapping highlight spans.

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial, reduce
from types import MappingProxyType
from typing import Callable, Sequence

from data_designer_ai_likelihood.detectors import DEFAULT_DETECTORS, STATISTICAL_DETECTORS, Detector
from data_designer_ai_likelihood.factors import display_factors
from data_designer_ai_likelihood.highlights import resolve_highlights
from data_designer_ai_likelihood.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_ai_likelihood.models import DetectionResult, DetectorOutput, PatternMatch, TextHighlight
from data_designer_ai_likelihood.text import lower_words

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Aggregation state
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _Contribution:
    category: str
    contribution: float
    pattern: PatternMatch


@dataclass(frozen=True)
class _AnalysisState:
    contributions: tuple[_Contribution, ...]
    highlights: tuple[TextHighlight, ...]
    factors: dict[str, float]

    @classmethod
    def initial(cls, factors: dict[str, float]) -> _AnalysisState:
        return cls(contributions=(), highlights=(), factors=dict(factors))

    def merge(self, output: DetectorOutput, hp: Hyperparameters) -> _AnalysisState:
        merged_factors = dict(self.factors)
        merged_factors.update(output.factors)
        contributions = self.contributions
        if output.is_signal_present:
            capped = min(output.score, hp.cap_for(output.category))
            pattern = PatternMatch(output.category, output.summary, output.count, capped)
            contributions = contributions + (_Contribution(output.category, capped, pattern),)
        return _AnalysisState(
            contributions=contributions,
            highlights=self.highlights + output.highlights,
            factors=merged_factors,
        )

    @property
    def raw_score(self) -> float:
        return sum(c.contribution for c in self.contributions)


def _zero_factors() -> dict[str, float]:
    factors = display_factors("")
    for detector in STATISTICAL_DETECTORS:
        factors[detector.factor_name] = 0.0
    return factors


def _evaluate(detector: Detector, text: str, hp: Hyperparameters) -> DetectorOutput | None:
    try:
        return detector.evaluate(text, hp)
    except Exception:
        logger.exception(f"Detector {detector.category!r} failed; skipping its contribution")
        return None


def _run_pipeline(text: str, detectors: Sequence[Detector], hp: Hyperparameters) -> _AnalysisState:
    initial = _AnalysisState.initial({**_zero_factors(), **display_factors(text)})

    def _merge(state: _AnalysisState, run: Callable[[], DetectorOutput | None]) -> _AnalysisState:
        output = run()
        if output is None:
            return state
        return state.merge(output, hp)

    return reduce(_merge, [partial(_evaluate, d, text, hp) for d in detectors], initial)


def rescale_factor(final_score: float, raw_score: float) -> float:
    """Ratio that brings category scores in line with the clamped total."""
    if raw_score <= 0:
        return 1.0
    return final_score / raw_score


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze(
    text: str,
    hyperparameters: Hyperparameters | None = None,
    detectors: Sequence[Detector] | None = None,
) -> DetectionResult:
    """Estimate how likely ``text`` is to be machine-written.

    Args:
        text: The prose to analyze.
        hyperparameters: Optional threshold and cap overrides.
        detectors: Optional detector registry; defaults to every statistical
            and lexical detector.

    Returns:
        A ``DetectionResult`` whose score is the sum of per-category capped
        contributions clamped to 100. Category scores in ``patterns`` are
        rescaled so they add up to the clamped score.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    detectors = DEFAULT_DETECTORS if detectors is None else detectors

    if not lower_words(text):
        return DetectionResult.empty(_zero_factors())

    state = _run_pipeline(text, detectors, hp)
    raw = state.raw_score
    score = max(hp.score_min, min(raw, hp.score_max))
    factor = rescale_factor(score, raw)
    logger.debug(f"Raw score {raw:.2f} from {len(state.contributions)} categories, final {score:.2f}")

    return DetectionResult(
        score=score,
        factors=MappingProxyType(state.factors),
        patterns=tuple(c.pattern.with_score(c.contribution * factor) for c in state.contributions),
        highlights=tuple(resolve_highlights(state.highlights, len(text))),
    )


def analyze_text(text: str, hyperparameters: Hyperparameters | None = None) -> dict:
    """Same as :func:`analyze`, returned as a JSON-serializable dict.

    Keys: score, factors, patterns, highlights, word_count.
    """
    payload = analyze(text, hyperparameters).to_payload()
    payload["word_count"] = len(text.split())
    return payload
