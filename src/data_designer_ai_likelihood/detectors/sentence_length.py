"""Sentence length variation: flags prose whose sentences are all about the same length."""

from __future__ import annotations

import math
from dataclasses import dataclass

from data_designer_ai_likelihood.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_ai_likelihood.text import split_sentences


@dataclass(frozen=True)
class SentenceLengthResult:
    sentence_count: int
    sentence_lengths: tuple[int, ...]
    average_length: float
    standard_deviation: float
    coefficient_of_variation: float
    is_signal_present: bool
    reason: str
    score: float


def standard_deviation(values: list[int] | tuple[int, ...]) -> float:
    """Population standard deviation; 0 for fewer than two values."""
    if len(values) <= 1:
        return 0.0
    mean = sum(values) / len(values)
    return math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))


def _step_score(cv: float, hp: Hyperparameters) -> float:
    for bound, points in hp.sentence_cv_steps:
        if cv < bound:
            return points
    return 0.0


def detect_sentence_length_variation(text: str, hp: Hyperparameters | None = None) -> SentenceLengthResult:
    hp = hp or DEFAULT_HYPERPARAMETERS
    if not text.strip():
        return SentenceLengthResult(0, (), 0.0, 0.0, 0.0, False, "Empty text", 0.0)

    sentences = split_sentences(text)
    if len(sentences) < hp.sentence_min_count:
        return SentenceLengthResult(
            len(sentences), (), 0.0, 0.0, 0.0, False,
            f"Insufficient sentences for variation analysis (minimum {hp.sentence_min_count} required)",
            0.0,
        )

    lengths = tuple(s.word_count for s in sentences)
    mean = sum(lengths) / len(lengths)
    stddev = standard_deviation(lengths)
    cv = stddev / mean if mean > 0 else 0.0

    flagged = stddev < hp.sentence_stddev_threshold and cv < hp.sentence_cv_threshold
    summary = f"Average sentence: {mean:.1f} words, standard deviation: {stddev:.2f} (CV: {cv:.3f})."
    if flagged:
        reason = f"Unnaturally consistent sentence structure. {summary}"
    else:
        reason = f"Natural sentence length variation. {summary}"

    return SentenceLengthResult(
        sentence_count=len(sentences),
        sentence_lengths=lengths,
        average_length=mean,
        standard_deviation=stddev,
        coefficient_of_variation=cv,
        is_signal_present=flagged,
        reason=reason,
        score=_step_score(cv, hp) if flagged else 0.0,
    )
