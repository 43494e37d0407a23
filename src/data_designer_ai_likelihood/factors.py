"""Coarse 0-100 heuristics shown as factor bars alongside the detector metrics.

These are reported in ``DetectionResult.factors`` for display; they do not
feed the score.
"""

from __future__ import annotations

import math
import re
from collections import Counter

from data_designer_ai_likelihood.text import lower_words

_SEGMENT_SPLIT_RE = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")
_LIST_ITEM_RE = re.compile(r"^[ \t]*(?:[-*\u2022]|\d+[.):])", re.MULTILINE)
_FORMAL_PATTERNS = [
    re.compile(r"\b(?:furthermore|moreover|therefore|however|consequently|thus|hence)\b", re.IGNORECASE),
    re.compile(r"\b(?:it is noteworthy|it is important to note|it should be noted)\b", re.IGNORECASE),
    re.compile(r"\b(?:in conclusion|in summary|to summarize|as mentioned|as previously stated)\b", re.IGNORECASE),
    re.compile(r"\b(?:endeavor|utilize|facilitate|implement|leverage|optimize)\b", re.IGNORECASE),
    re.compile(r"\b(?:on the other hand|in contrast|similarly|likewise)\b", re.IGNORECASE),
]

FACTOR_NAMES = ("repetition", "formal_tone", "sentence_variety", "vocabulary", "structure")


def repetition(text: str) -> float:
    """Penalize words longer than three characters that occur more than three times."""
    tokens = [w for w in text.lower().split() if len(w) > 3]
    if not tokens:
        return 0.0
    excess = sum((count - 3) * 5 for count in Counter(tokens).values() if count > 3)
    return min(100.0, excess / len(tokens) * 100)


def formal_tone(text: str) -> float:
    segments = len(_SEGMENT_SPLIT_RE.split(text))
    hits = sum(len(p.findall(text)) for p in _FORMAL_PATTERNS)
    return min(100.0, hits / max(segments, 1) * 20)


def sentence_variety(text: str) -> float:
    lengths = [len(s.split()) for s in _SEGMENT_SPLIT_RE.split(text) if s.strip()]
    if len(lengths) < 2:
        return 0.0
    mean = sum(lengths) / len(lengths)
    stddev = math.sqrt(sum((n - mean) ** 2 for n in lengths) / len(lengths))
    return max(0.0, 50 - stddev * 5)


def vocabulary(text: str) -> float:
    tokens = text.lower().split()
    if not tokens:
        return 0.0
    ttr = len(set(tokens)) / len(tokens)
    if ttr > 0.6:
        return 20.0
    if ttr > 0.5:
        return 35.0
    if ttr > 0.4:
        return 50.0
    if ttr > 0.3:
        return 70.0
    return 85.0


def structure(text: str) -> float:
    paragraphs = [p for p in _PARAGRAPH_SPLIT_RE.split(text) if p.strip()]
    score = 0.0
    if len(paragraphs) > 3:
        lengths = [len(p) for p in paragraphs]
        mean = sum(lengths) / len(lengths)
        stddev = math.sqrt(sum((n - mean) ** 2 for n in lengths) / len(lengths))
        if stddev < mean * 0.2:
            score += 60
        elif stddev < mean * 0.4:
            score += 30
    if len(_LIST_ITEM_RE.findall(text)) > 5:
        score += 20
    return min(100.0, score)


def display_factors(text: str) -> dict[str, float]:
    if not lower_words(text):
        return {name: 0.0 for name in FACTOR_NAMES}
    return {
        "repetition": repetition(text),
        "formal_tone": formal_tone(text),
        "sentence_variety": sentence_variety(text),
        "vocabulary": vocabulary(text),
        "structure": structure(text),
    }
