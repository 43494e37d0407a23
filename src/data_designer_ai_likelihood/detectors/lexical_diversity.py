"""Type-token ratio: flags vocabulary that is unnaturally repetitive or unnaturally varied."""

from __future__ import annotations

from dataclasses import dataclass

from data_designer_ai_likelihood.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_ai_likelihood.text import lower_words


@dataclass(frozen=True)
class LexicalDiversityResult:
    type_token_ratio: float
    word_count: int
    unique_word_count: int
    is_signal_present: bool
    reason: str
    score: float
    label: str = ""


def calculate_type_token_ratio(text: str) -> float:
    tokens = lower_words(text)
    if not tokens:
        return 0.0
    return len(set(tokens)) / len(tokens)


def detect_lexical_diversity(text: str, hp: Hyperparameters | None = None) -> LexicalDiversityResult:
    hp = hp or DEFAULT_HYPERPARAMETERS
    tokens = lower_words(text)
    if not tokens:
        reason = "Empty text" if not text.strip() else "No words found"
        return LexicalDiversityResult(0.0, 0, 0, False, reason, 0.0)

    word_count = len(tokens)
    unique_count = len(set(tokens))
    ratio = unique_count / word_count

    if word_count < hp.ttr_min_words:
        return LexicalDiversityResult(
            ratio, word_count, unique_count, False,
            f"Text too short ({word_count} words) for reliable lexical diversity analysis. "
            f"Minimum {hp.ttr_min_words} words recommended.",
            0.0,
        )

    if ratio < hp.ttr_low:
        distance = hp.ttr_low - ratio
        label = "unusually repetitive"
        reason = (
            f"Limited vocabulary diversity (TTR: {ratio:.3f}). Only {unique_count} unique words "
            f"in {word_count} total words reads as unnaturally repetitive."
        )
    elif ratio > hp.ttr_high:
        distance = ratio - hp.ttr_high
        label = "unnaturally diverse"
        reason = (
            f"Unnaturally diverse vocabulary (TTR: {ratio:.3f}). {unique_count} unique words "
            f"in {word_count} total words suggests artificially varied word choice."
        )
    else:
        return LexicalDiversityResult(
            ratio, word_count, unique_count, False,
            f"Natural vocabulary diversity (TTR: {ratio:.3f}).",
            0.0,
        )

    half_width = (hp.ttr_high - hp.ttr_low) / 2
    score = min(hp.ttr_score_max * distance / half_width, hp.ttr_score_max)
    return LexicalDiversityResult(ratio, word_count, unique_count, True, reason, score, label)
