"""Flesch-Kincaid grade level: flags prose pitched well above its content."""

from __future__ import annotations

from dataclasses import dataclass

from data_designer_ai_likelihood.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_ai_likelihood.text import count_terminal_runs, tokenize


@dataclass(frozen=True)
class ReadingGradeResult:
    grade_level: float
    sentence_count: int
    word_count: int
    syllable_count: int
    avg_words_per_sentence: float
    avg_syllables_per_word: float
    is_signal_present: bool
    reason: str
    score: float


def grade_level(word_count: int, sentence_count: int, syllable_count: int) -> float:
    """Unclamped grade: ``0.39 * words/sentences + 11.8 * syllables/words - 15.59``."""
    if word_count == 0 or sentence_count == 0:
        return 0.0
    return 0.39 * (word_count / sentence_count) + 11.8 * (syllable_count / word_count) - 15.59


def detect_reading_grade(text: str, hp: Hyperparameters | None = None) -> ReadingGradeResult:
    hp = hp or DEFAULT_HYPERPARAMETERS
    if not text.strip():
        return ReadingGradeResult(0.0, 0, 0, 0, 0.0, 0.0, False, "Empty text", 0.0)

    sentence_count = count_terminal_runs(text) or 1
    tokens = tokenize(text)
    if not tokens:
        return ReadingGradeResult(0.0, sentence_count, 0, 0, 0.0, 0.0, False, "No words found", 0.0)

    word_count = len(tokens)
    syllable_count = sum(t.syllables for t in tokens)
    grade = max(hp.grade_min, min(grade_level(word_count, sentence_count, syllable_count), hp.grade_max))

    flagged = grade > hp.grade_threshold
    if flagged:
        score = min((grade - hp.grade_threshold) * hp.grade_score_slope, hp.grade_score_max)
        reason = f"Artificially high grade level ({grade:.1f}) suggests overly complex vocabulary and sentence structure."
    else:
        score = 0.0
        reason = f"Grade level ({grade:.1f}) is appropriate for content complexity."

    return ReadingGradeResult(
        grade_level=grade,
        sentence_count=sentence_count,
        word_count=word_count,
        syllable_count=syllable_count,
        avg_words_per_sentence=word_count / sentence_count,
        avg_syllables_per_word=syllable_count / word_count,
        is_signal_present=flagged,
        reason=reason,
        score=score,
    )
