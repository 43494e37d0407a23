"""Transition word density: flags prose where many sentences open with a formal discourse marker.

Only sentence-initial markers count. Conversational openers ("so", "but",
"anyway") are never flagged.
"""

from __future__ import annotations

from dataclasses import dataclass

from data_designer_ai_likelihood.detectors.base import round_half_up
from data_designer_ai_likelihood.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_ai_likelihood.models import TextHighlight
from data_designer_ai_likelihood.text import Sentence, split_sentences

CATEGORY = "Transition Word Density"
COLOR = "#ec4899"

FORMAL_TRANSITIONS = frozenset({
    "furthermore", "moreover", "additionally", "consequently", "therefore", "thus",
    "hence", "accordingly", "in conclusion", "in summary", "to summarize", "to conclude",
    "ultimately", "in essence", "in particular", "specifically", "notably",
    "significantly", "importantly", "interestingly", "remarkably", "certainly",
    "undoubtedly", "inevitably", "obviously", "clearly", "indeed", "in fact",
    "as a matter of fact", "in any case", "in any event", "at any rate", "all in all",
    "on the whole", "in general", "generally speaking", "by and large", "on balance",
    "taking everything into account", "with this in mind", "bearing in mind",
    "given this", "given that", "considering", "given the fact that",
    "as previously mentioned", "as noted", "as discussed", "as mentioned", "as indicated",
    "in light of", "because of this", "on this basis", "for this reason",
    "for these reasons", "as a result", "as a consequence", "in consequence", "as such",
    "for that reason", "owing to this", "due to this", "in that case", "in that event",
    "under these circumstances", "otherwise", "alternatively", "on the other hand",
    "by contrast", "in contrast", "conversely", "instead", "rather", "rather than",
    "however", "nevertheless", "notwithstanding", "despite this", "in spite of this",
    "all the same", "even so", "be that as it may", "that being said",
    "at the same time", "simultaneously", "meanwhile", "likewise", "similarly",
    "in the same way", "in like manner", "just as", "as well", "also", "besides",
    "what is more", "to that end", "above all", "before all else", "first and foremost",
    "fundamentally", "essentially", "at heart", "substantially",
})

_MAX_PHRASE_WORDS = max(len(p.split()) for p in FORMAL_TRANSITIONS)


@dataclass(frozen=True)
class TransitionMatch:
    phrase: str
    start: int
    end: int


@dataclass(frozen=True)
class TransitionWordResult:
    transition_words: tuple[str, ...]
    formal_count: int
    sentence_count: int
    density: float
    matches: tuple[TransitionMatch, ...]
    is_signal_present: bool
    reason: str
    score: float


def leading_transition(sentence: Sentence) -> TransitionMatch | None:
    """The longest formal marker the sentence opens with, if any."""
    tokens = sentence.tokens[:_MAX_PHRASE_WORDS]
    for n in range(len(tokens), 0, -1):
        phrase = " ".join(t.lower for t in tokens[:n])
        if phrase in FORMAL_TRANSITIONS:
            return TransitionMatch(phrase, tokens[0].start, tokens[n - 1].end)
    return None


def detect_transition_word_density(text: str, hp: Hyperparameters | None = None) -> TransitionWordResult:
    hp = hp or DEFAULT_HYPERPARAMETERS
    sentences = split_sentences(text)
    if len(sentences) < hp.transition_min_sentences:
        return TransitionWordResult(
            (), 0, len(sentences), 0.0, (), False,
            f"Insufficient sentences for transition analysis (minimum {hp.transition_min_sentences} required)",
            0.0,
        )

    matches = tuple(m for m in map(leading_transition, sentences) if m is not None)
    density = len(matches) / len(sentences)
    phrases = tuple(sorted({m.phrase for m in matches}))

    if density <= hp.transition_threshold:
        return TransitionWordResult(
            phrases, len(matches), len(sentences), density, matches, False,
            f"Formal transitions open {density * 100:.1f}% of sentences.",
            0.0,
        )

    score = round_half_up(
        min((density - hp.transition_threshold) * hp.transition_score_slope, hp.transition_score_max)
    )
    reason = (
        f"Excessive use of formal discourse markers ({density * 100:.1f}% of sentences). "
        f"Human writers typically open fewer than 20% of sentences with one."
    )
    return TransitionWordResult(phrases, len(matches), len(sentences), density, matches, True, reason, score)


def transition_highlights(result: TransitionWordResult) -> list[TextHighlight]:
    return [TextHighlight(m.start, m.end, CATEGORY, COLOR) for m in result.matches]
