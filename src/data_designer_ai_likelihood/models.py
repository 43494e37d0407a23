from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def _round(value: float) -> float:
    return round(float(value), 2)


@dataclass(frozen=True)
class PatternMatch:
    category: str
    phrase: str
    count: int
    score: float

    def with_score(self, score: float) -> PatternMatch:
        return PatternMatch(self.category, self.phrase, self.count, score)

    def to_payload(self) -> dict[str, object]:
        return {
            "category": self.category,
            "phrase": self.phrase,
            "count": self.count,
            "score": _round(self.score),
        }


@dataclass(frozen=True)
class TextHighlight:
    """Half-open ``[start, end)`` span into the analyzed text."""

    start: int
    end: int
    category: str
    color: str | None = None

    def overlaps(self, other: TextHighlight) -> bool:
        return self.start < other.end and self.end > other.start

    def is_within(self, length: int) -> bool:
        return 0 <= self.start < self.end <= length

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {"start": self.start, "end": self.end, "category": self.category}
        if self.color is not None:
            payload["color"] = self.color
        return payload


@dataclass(frozen=True)
class DetectorOutput:
    """What one detector contributes to an analysis.

    ``score`` is the uncapped score basis; the aggregator applies the
    category cap. ``summary`` is the phrase reported for the category.
    """

    category: str
    score: float
    count: int
    summary: str
    matches: tuple[PatternMatch, ...] = ()
    highlights: tuple[TextHighlight, ...] = ()
    factors: Mapping[str, float] = field(default_factory=dict)

    @property
    def is_signal_present(self) -> bool:
        return self.score > 0


@dataclass(frozen=True)
class DetectionResult:
    score: float
    factors: Mapping[str, float]
    patterns: tuple[PatternMatch, ...]
    highlights: tuple[TextHighlight, ...]

    @classmethod
    def empty(cls, factors: Mapping[str, float]) -> DetectionResult:
        return cls(score=0.0, factors=MappingProxyType(dict(factors)), patterns=(), highlights=())

    def to_payload(self) -> dict[str, object]:
        return {
            "score": _round(self.score),
            "factors": {k: _round(v) for k, v in self.factors.items()},
            "patterns": [p.to_payload() for p in self.patterns],
            "highlights": [h.to_payload() for h in self.highlights],
        }
