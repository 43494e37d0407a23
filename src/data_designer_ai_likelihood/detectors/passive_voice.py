"""Passive voice frequency.

Human prose uses the passive in roughly 5-10% of sentences; model output
leans on it more. A sentence counts as passive when it contains any of the
auxiliary + participle shapes below.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from data_designer_ai_likelihood.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_ai_likelihood.text import split_sentences

_IRREGULAR = r"(?:made|taken|given|known|found|seen|said|thought|understood|done|written|chosen|drawn)"

_PASSIVE_PATTERNS = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"\b(?:is|are|was|were)\s+\w+ed\b",
        r"\b(?:is|are|was|were)\s+being\s+\w+ed\b",
        r"\b(?:has|have|had)\s+been\s+\w+ed\b",
        r"\b(?:will|would|should|could|may|might)\s+be\s+\w+ed\b",
        r"\b(?:will|would|should|could)\s+have\s+been\s+\w+ed\b",
        rf"\b(?:is|are|was|were|be|being|been)\s+{_IRREGULAR}\b",
        rf"\b(?:has|have|had)\s+been\s+{_IRREGULAR}\b",
        rf"\b(?:will|would|should|could|may|might)\s+be\s+{_IRREGULAR}\b",
    )
)


@dataclass(frozen=True)
class PassiveVoiceResult:
    passive_count: int
    total_sentences: int
    frequency: float
    is_signal_present: bool
    reason: str
    score: float


def is_passive(sentence: str) -> bool:
    return any(p.search(sentence) for p in _PASSIVE_PATTERNS)


def detect_passive_voice_frequency(text: str, hp: Hyperparameters | None = None) -> PassiveVoiceResult:
    hp = hp or DEFAULT_HYPERPARAMETERS
    sentences = split_sentences(text)
    if not sentences:
        return PassiveVoiceResult(0, 0, 0.0, False, "No sentences found", 0.0)

    passive_count = sum(1 for s in sentences if is_passive(s.text))
    frequency = passive_count / len(sentences)
    flagged = frequency > hp.passive_threshold

    if flagged:
        score = min((frequency - hp.passive_threshold) * hp.passive_score_slope, hp.passive_score_max)
        reason = (
            f"High passive voice frequency ({frequency * 100:.1f}%) exceeds natural human writing "
            f"(~5-10%), suggesting potential AI composition."
        )
    else:
        score = 0.0
        reason = f"Passive voice frequency ({frequency * 100:.1f}%) is within natural human writing range."

    return PassiveVoiceResult(passive_count, len(sentences), frequency, flagged, reason, score)
