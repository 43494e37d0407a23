"""The contract every detector in the registry implements."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Protocol, Sequence, runtime_checkable

from data_designer_ai_likelihood.hyperparameters import Hyperparameters
from data_designer_ai_likelihood.models import DetectorOutput, PatternMatch, TextHighlight


def round_half_up(value: float) -> float:
    """Round to the nearest integer with halves going up (2.5 -> 3, not 2)."""
    return float(math.floor(value + 0.5))


@runtime_checkable
class SignalResult(Protocol):
    """Shape shared by the statistical detector results."""

    score: float
    is_signal_present: bool
    reason: str


@runtime_checkable
class Detector(Protocol):
    """A named scorer the aggregator can iterate uniformly."""

    category: str

    def evaluate(self, text: str, hp: Hyperparameters) -> DetectorOutput: ...


@runtime_checkable
class HighlightingDetector(Detector, Protocol):
    def detect(self, text: str) -> list[PatternMatch]: ...

    def highlight(self, text: str, matches: Sequence[PatternMatch]) -> list[TextHighlight]: ...


@dataclass(frozen=True)
class StatisticalDetector:
    """Adapts a pure ``detect_*`` function to the registry contract.

    ``summarize`` renders the reported phrase for a flagged result;
    ``factor`` extracts the raw metric exposed in the factor breakdown;
    ``highlight`` returns the spans to mark when the result is flagged.
    """

    category: str
    factor_name: str
    detect: Callable[..., SignalResult]
    factor: Callable[[SignalResult], float]
    summarize: Callable[[SignalResult], str]
    count: Callable[[SignalResult], int] = lambda _result: 1
    highlight: Callable[[SignalResult], Sequence[TextHighlight]] = lambda _result: ()

    def evaluate(self, text: str, hp: Hyperparameters) -> DetectorOutput:
        result = self.detect(text, hp)
        factors = {self.factor_name: float(self.factor(result))}
        if not result.is_signal_present:
            return DetectorOutput(self.category, 0.0, 0, result.reason, factors=factors)
        return DetectorOutput(
            category=self.category,
            score=float(result.score),
            count=self.count(result),
            summary=self.summarize(result),
            highlights=tuple(self.highlight(result)),
            factors=factors,
        )
