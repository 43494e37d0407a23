from data_designer_ai_likelihood.detectors.base import Detector, HighlightingDetector, SignalResult, StatisticalDetector
from data_designer_ai_likelihood.detectors.lexical import LEXICAL_DETECTORS, PatternDetector, PhraseDetector
from data_designer_ai_likelihood.detectors.lexical_diversity import detect_lexical_diversity
from data_designer_ai_likelihood.detectors.paragraph_coherence import detect_paragraph_coherence
from data_designer_ai_likelihood.detectors.passive_voice import detect_passive_voice_frequency
from data_designer_ai_likelihood.detectors.reading_grade import detect_reading_grade
from data_designer_ai_likelihood.detectors.sentence_length import detect_sentence_length_variation
from data_designer_ai_likelihood.detectors.transition_words import detect_transition_word_density, transition_highlights
from data_designer_ai_likelihood.detectors.word_frequency import detect_word_frequency_distribution

LEXICAL_DIVERSITY = StatisticalDetector(
    category="Lexical Diversity",
    factor_name="type_token_ratio",
    detect=detect_lexical_diversity,
    factor=lambda r: r.type_token_ratio,
    summarize=lambda r: f"Vocabulary diversity (TTR: {r.type_token_ratio:.3f}) - {r.label}",
)

READING_GRADE = StatisticalDetector(
    category="Flesch-Kincaid Grade Level",
    factor_name="grade_level",
    detect=detect_reading_grade,
    factor=lambda r: r.grade_level,
    summarize=lambda r: f"Grade level {r.grade_level:.1f} (college/graduate level)",
)

WORD_FREQUENCY = StatisticalDetector(
    category="Word Frequency Distribution",
    factor_name="zipf_deviation",
    detect=detect_word_frequency_distribution,
    factor=lambda r: r.deviation,
    summarize=lambda r: (
        f"Frequency deviation ({r.deviation:.3f}) - "
        f"'{r.top_words[0].word}' appears {r.top_words[0].frequency} times"
    ),
)

SENTENCE_LENGTH = StatisticalDetector(
    category="Sentence Length Variation",
    factor_name="sentence_length_cv",
    detect=detect_sentence_length_variation,
    factor=lambda r: r.coefficient_of_variation,
    summarize=lambda r: f"CV: {r.coefficient_of_variation:.3f} (std dev: {r.standard_deviation:.2f})",
)

PASSIVE_VOICE = StatisticalDetector(
    category="Passive Voice Frequency",
    factor_name="passive_voice_frequency",
    detect=detect_passive_voice_frequency,
    factor=lambda r: r.frequency,
    summarize=lambda r: (
        f"{r.frequency * 100:.1f}% passive voice ({r.passive_count} of {r.total_sentences} sentences)"
    ),
    count=lambda r: r.passive_count,
)

TRANSITION_WORDS = StatisticalDetector(
    category="Transition Word Density",
    factor_name="transition_word_density",
    detect=detect_transition_word_density,
    factor=lambda r: r.density,
    summarize=lambda r: (
        f"{r.density * 100:.1f}% of sentences open with a formal transition ({', '.join(r.transition_words)})"
    ),
    count=lambda r: r.formal_count,
    highlight=transition_highlights,
)

PARAGRAPH_COHERENCE = StatisticalDetector(
    category="Paragraph Coherence",
    factor_name="paragraph_coherence",
    detect=detect_paragraph_coherence,
    factor=lambda r: r.max_similarity,
    summarize=lambda r: (
        f"{len(r.flagged)} overly coherent paragraph(s) ({r.max_similarity * 100:.1f}% sentence overlap)"
    ),
    count=lambda r: len(r.flagged),
)

STATISTICAL_DETECTORS: tuple[StatisticalDetector, ...] = (
    LEXICAL_DIVERSITY,
    READING_GRADE,
    WORD_FREQUENCY,
    SENTENCE_LENGTH,
    PASSIVE_VOICE,
    TRANSITION_WORDS,
    PARAGRAPH_COHERENCE,
)

DEFAULT_DETECTORS: tuple[Detector, ...] = STATISTICAL_DETECTORS + LEXICAL_DETECTORS

__all__ = [
    "DEFAULT_DETECTORS",
    "Detector",
    "HighlightingDetector",
    "LEXICAL_DETECTORS",
    "PatternDetector",
    "PhraseDetector",
    "STATISTICAL_DETECTORS",
    "SignalResult",
    "StatisticalDetector",
]
