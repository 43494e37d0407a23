"""Paragraph coherence: flags paragraphs whose consecutive sentences share too much vocabulary."""

from __future__ import annotations

from dataclasses import dataclass

from data_designer_ai_likelihood.detectors.base import round_half_up
from data_designer_ai_likelihood.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_ai_likelihood.text import STOPWORDS, Paragraph, Sentence, split_paragraphs


@dataclass(frozen=True)
class ParagraphCoherence:
    start: int
    end: int
    sentence_count: int
    average_similarity: float


@dataclass(frozen=True)
class ParagraphCoherenceResult:
    paragraphs: tuple[ParagraphCoherence, ...]
    flagged: tuple[ParagraphCoherence, ...]
    max_similarity: float
    is_signal_present: bool
    reason: str
    score: float


def key_words(sentence: Sentence) -> set[str]:
    return {t.lower for t in sentence.tokens} - STOPWORDS


def overlap_coefficient(a: set[str], b: set[str]) -> float:
    """``|a & b| / min(|a|, |b|)``; 0 when either side is empty."""
    if not a or not b:
        return 0.0
    return len(a & b) / min(len(a), len(b))


def paragraph_similarity(paragraph: Paragraph) -> ParagraphCoherence:
    sentences = paragraph.sentences
    pairs = [
        overlap_coefficient(key_words(first), key_words(second))
        for first, second in zip(sentences, sentences[1:])
    ]
    average = sum(pairs) / len(pairs) if pairs else 0.0
    return ParagraphCoherence(paragraph.start, paragraph.end, len(sentences), average)


def detect_paragraph_coherence(text: str, hp: Hyperparameters | None = None) -> ParagraphCoherenceResult:
    hp = hp or DEFAULT_HYPERPARAMETERS
    measured = tuple(
        paragraph_similarity(p)
        for p in split_paragraphs(text)
        if len(p.sentences) >= hp.coherence_min_sentences
    )
    if not measured:
        return ParagraphCoherenceResult(
            (), (), 0.0, False,
            f"No paragraph has {hp.coherence_min_sentences} or more sentences",
            0.0,
        )

    max_similarity = max(p.average_similarity for p in measured)
    flagged = tuple(p for p in measured if p.average_similarity > hp.coherence_threshold)
    if not flagged:
        return ParagraphCoherenceResult(
            measured, (), max_similarity, False,
            f"Natural sentence-to-sentence progression (highest overlap {max_similarity * 100:.1f}%).",
            0.0,
        )

    score = round_half_up(
        min((max_similarity - hp.coherence_threshold) * hp.coherence_score_slope, hp.coherence_score_max)
    )
    reason = (
        f"Overly tight coherence in {len(flagged)} paragraph(s) ({max_similarity * 100:.1f}% average "
        f"overlap between consecutive sentences). Sentences progress too predictably."
    )
    return ParagraphCoherenceResult(measured, flagged, max_similarity, True, reason, score)
