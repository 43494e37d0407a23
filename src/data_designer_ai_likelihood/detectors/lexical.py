"""Phrase and pattern catalogue detectors.

Each detector compiles its patterns once, in the constructor, so a bad entry
fails at import time instead of in the middle of an analysis. ``detect`` and
``highlight`` build fresh match iterators on every call and hold no state
between calls.
"""

from __future__ import annotations

import re
from typing import Sequence

from data_designer_ai_likelihood.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_ai_likelihood.models import DetectorOutput, PatternMatch, TextHighlight


def _phrase_pattern(phrase: str, prefix: bool = False) -> str:
    body = r"\s+".join(re.escape(part) for part in phrase.split())
    return r"\b" + body + ("" if prefix else r"\b")


def _compile(source: str, label: str) -> re.Pattern[str]:
    try:
        pattern = re.compile(source, re.IGNORECASE)
    except re.error as exc:
        raise ValueError(f"Invalid pattern for {label!r}: {exc}") from exc
    if pattern.match(""):
        raise ValueError(f"Pattern for {label!r} matches the empty string")
    return pattern


class PatternDetector:
    """Counts occurrences of named regex shapes and highlights each one.

    Args:
        category: Category name reported in patterns and highlights.
        patterns: Mapping of reported phrase -> regex source.
        color: Optional highlight colour.
        points_per_match: Score added per occurrence of a phrase.
    """

    def __init__(
        self,
        category: str,
        patterns: dict[str, str],
        color: str | None = None,
        points_per_match: float | None = None,
    ) -> None:
        if not patterns:
            raise ValueError(f"{category!r} has no patterns")
        self.category = category
        self.color = color
        self.points_per_match = points_per_match
        self._patterns = {phrase: _compile(source, phrase) for phrase, source in patterns.items()}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.category!r}, {len(self._patterns)} patterns)"

    @property
    def phrases(self) -> tuple[str, ...]:
        return tuple(self._patterns)

    def _points(self, hp: Hyperparameters) -> float:
        return hp.lexical_points_per_match if self.points_per_match is None else self.points_per_match

    def detect(self, text: str, hp: Hyperparameters | None = None) -> list[PatternMatch]:
        hp = hp or DEFAULT_HYPERPARAMETERS
        points = self._points(hp)
        matches = []
        for phrase, pattern in self._patterns.items():
            count = sum(1 for _ in pattern.finditer(text))
            if count:
                score = min(count * points, hp.lexical_phrase_score_max)
                matches.append(PatternMatch(self.category, phrase, count, score))
        return matches

    def highlight(self, text: str, matches: Sequence[PatternMatch]) -> list[TextHighlight]:
        highlights = []
        for match in matches:
            pattern = self._patterns.get(match.phrase)
            if pattern is None:
                continue
            for m in pattern.finditer(text):
                highlights.append(TextHighlight(m.start(), m.end(), self.category, self.color))
        highlights.sort(key=lambda h: h.start)
        return highlights

    def evaluate(self, text: str, hp: Hyperparameters) -> DetectorOutput:
        matches = self.detect(text, hp)
        if not matches:
            return DetectorOutput(self.category, 0.0, 0, "")
        return DetectorOutput(
            category=self.category,
            score=sum(m.score for m in matches),
            count=sum(m.count for m in matches),
            summary=", ".join(f"{m.phrase} ({m.count})" for m in matches),
            matches=tuple(matches),
            highlights=tuple(self.highlight(text, matches)),
        )


class PhraseDetector(PatternDetector):
    """A :class:`PatternDetector` built from a plain phrase list.

    Whitespace inside a phrase matches any whitespace run. Entries in
    ``prefixes`` match at a word start only, so ``"emphasiz"`` catches
    "emphasize" and "emphasizing".
    """

    def __init__(
        self,
        category: str,
        phrases: Sequence[str],
        prefixes: Sequence[str] = (),
        color: str | None = None,
        points_per_match: float | None = None,
    ) -> None:
        patterns = {p: _phrase_pattern(p) for p in phrases}
        patterns.update({p: _phrase_pattern(p, prefix=True) for p in prefixes})
        super().__init__(category, patterns, color=color, points_per_match=points_per_match)


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

AI_VOCABULARY = PhraseDetector(
    "AI Vocabulary",
    phrases=[
        "additionally", "align with", "crucial", "delve", "enduring", "enhance",
        "garner", "highlight", "interplay", "key", "landscape", "pivotal",
        "showcase", "tapestry", "testament", "underscore", "valuable", "vibrant",
        "paramount", "seamless", "robust", "holistic", "synergy", "elucidate",
    ],
    prefixes=["emphasiz", "foster", "intricat", "leverag"],
    color="#fbbf24",
)

UNDUE_EMPHASIS = PhraseDetector(
    "Undue Emphasis",
    phrases=[
        "it is important to note", "it should be noted", "it is worth noting",
        "significantly", "notably", "importantly", "crucially", "undoubtedly",
        "obviously", "clearly",
    ],
    color="#a855f7",
)

PROMOTIONAL_LANGUAGE = PhraseDetector(
    "Promotional Language",
    phrases=[
        "nestled in", "boasts", "stunning beauty", "remarkable", "breathtaking",
        "enchanting", "picturesque", "majestic", "spectacular", "awe-inspiring",
        "captivating", "mesmerizing", "world-class", "rich cultural heritage",
    ],
    color="#f43f5e",
)

DIDACTIC_DISCLAIMERS = PhraseDetector(
    "Didactic Disclaimers",
    phrases=[
        "as mentioned earlier", "as discussed", "as we have seen", "as shown above",
        "it is argued", "it has been argued", "according to experts",
    ],
    color="#6366f1",
)

SECTION_SUMMARIES = PhraseDetector(
    "Section Summaries",
    phrases=[
        "in conclusion", "in summary", "to summarize", "in short", "in essence",
        "to conclude", "overall", "ultimately",
    ],
    color="#ef4444",
)

CHALLENGE_PATTERNS = PhraseDetector(
    "Challenge Patterns",
    phrases=[
        "despite challenges", "despite its challenges", "despite obstacles",
        "despite these difficulties", "in spite of challenges", "overcoming challenges",
        "faces several challenges", "future prospects",
    ],
    color="#14b8a6",
)

NEGATIVE_PARALLELISM = PatternDetector(
    "Negative Parallelism",
    {
        "not only ... but": r"\bnot\s+only\s+[^;.]*?(?:,?\s+but\b|;)",
        "not just ... it's": r"\bnot\s+just\s+[^.]*?\bit\s*(?:is|'s|\u2019s)\b",
        "not ... but rather": r"\bnot\s+\w+[^.;]*?\s+but\s+rather\b",
        "it's not ... it's": r"\bit(?:'s|\u2019s|\s+is)\s+not\s+[^.;]{1,60}[.;,\u2014]\s*it(?:'s|\u2019s|\s+is)\b",
    },
    color="#f97316",
)

_TRIAD_ADJECTIVES = (
    "innovative|strategic|comprehensive|transformative|bold|ambitious|cutting-edge|integrated|"
    "groundbreaking|revolutionary|dynamic|agile|scalable|robust|sophisticated|elegant|efficient|"
    "effective|powerful|remarkable|significant|compelling|impressive|exceptional|advanced|modern|"
    "reliable|meaningful|pivotal|critical|essential|fundamental|vital|crucial|key|important|impactful"
)
_TRIAD_VERBS = (
    "analyze|interpret|synthesize|innovate|implement|develop|create|design|build|enhance|improve|"
    "optimize|achieve|deliver|provide|ensure|establish|demonstrate|explore|examine|assess|evaluate|"
    "investigate|understand|address|solve|resolve|manage|organize|coordinate|facilitate|streamline|"
    "simplify|accelerate|advance|strengthen|integrate|connect|align|evolve|adapt"
)


def _triad(alternatives: str) -> str:
    word = rf"(?:{alternatives})"
    return rf"\b{word}\s*,\s*{word}\s*,?\s+and\s+{word}\b"


RULE_OF_THREE = PatternDetector(
    "Rule of Three",
    {
        "adjective, adjective, and adjective": _triad(_TRIAD_ADJECTIVES),
        "verb, verb, and verb": _triad(_TRIAD_VERBS),
        "verbing, verbing, and verbing": r"\b\w+ing\s*,\s*\w+ing\s*,\s*and\s+\w+ing\b",
    },
    color="#eab308",
)

LEXICAL_DETECTORS: tuple[PatternDetector, ...] = (
    AI_VOCABULARY,
    UNDUE_EMPHASIS,
    PROMOTIONAL_LANGUAGE,
    DIDACTIC_DISCLAIMERS,
    SECTION_SUMMARIES,
    CHALLENGE_PATTERNS,
    NEGATIVE_PARALLELISM,
    RULE_OF_THREE,
)
