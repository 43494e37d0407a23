import pytest

from data_designer_ai_likelihood.detectors.lexical import (
    AI_VOCABULARY,
    LEXICAL_DETECTORS,
    NEGATIVE_PARALLELISM,
    PROMOTIONAL_LANGUAGE,
    RULE_OF_THREE,
    PatternDetector,
    PhraseDetector,
)
from data_designer_ai_likelihood.hyperparameters import DEFAULT_HYPERPARAMETERS


class TestPhraseDetector:
    def test_counts_phrases(self):
        matches = {m.phrase: m for m in AI_VOCABULARY.detect("We delve into the tapestry. Delve deeper.")}
        assert matches["delve"].count == 2
        assert matches["delve"].score == 10
        assert matches["tapestry"].count == 1
        assert all(m.category == "AI Vocabulary" for m in matches.values())

    def test_prefix_entries(self):
        phrases = {m.phrase for m in AI_VOCABULARY.detect("Emphasizing results while fostering growth.")}
        assert phrases == {"emphasiz", "foster"}

    def test_full_words_need_boundaries(self):
        assert AI_VOCABULARY.detect("The keyboard was unlocked.") == []

    def test_multiword_phrase_spans_whitespace(self):
        detector = PhraseDetector("Test", ["nestled in"])
        assert detector.detect("A cottage nestled\n  in the hills.")[0].count == 1

    def test_case_insensitive(self):
        text = "The breathtaking view was remarkable and majestic."
        assert PROMOTIONAL_LANGUAGE.detect(text.upper()) == PROMOTIONAL_LANGUAGE.detect(text)

    def test_highlights_cover_occurrences(self):
        text = "Delve here, then delve there."
        matches = AI_VOCABULARY.detect(text)
        highlights = AI_VOCABULARY.highlight(text, matches)
        assert [text[h.start:h.end].lower() for h in highlights] == ["delve", "delve"]
        assert highlights[0].start < highlights[1].start
        assert all(h.color == AI_VOCABULARY.color for h in highlights)

    def test_highlight_ignores_unknown_phrases(self):
        other = PROMOTIONAL_LANGUAGE.detect("A majestic peak.")
        assert AI_VOCABULARY.highlight("A majestic peak.", other) == []

    def test_monotonic_in_occurrences(self):
        scores = []
        for n in range(1, 30):
            output = AI_VOCABULARY.evaluate(" ".join(["crucial"] * n), DEFAULT_HYPERPARAMETERS)
            scores.append(output.score)
        assert scores == sorted(scores)

    def test_repeated_calls_are_independent(self):
        text = "A pivotal, pivotal moment."
        assert AI_VOCABULARY.detect(text) == AI_VOCABULARY.detect(text)

    def test_evaluate_without_matches(self):
        output = AI_VOCABULARY.evaluate("Plain words only.", DEFAULT_HYPERPARAMETERS)
        assert output.is_signal_present is False
        assert output.highlights == ()


class TestPatternValidation:
    def test_invalid_regex_rejected_at_construction(self):
        with pytest.raises(ValueError):
            PatternDetector("Bad", {"broken": "("})

    def test_empty_matching_regex_rejected(self):
        with pytest.raises(ValueError):
            PatternDetector("Bad", {"anything": "a*"})

    def test_no_patterns_rejected(self):
        with pytest.raises(ValueError):
            PatternDetector("Bad", {})

    def test_catalogue_categories_are_unique(self):
        categories = [d.category for d in LEXICAL_DETECTORS]
        assert len(categories) == len(set(categories))


class TestShapeDetectors:
    def test_rule_of_three_adjectives(self):
        matches = RULE_OF_THREE.detect("The approach is innovative, scalable, and robust.")
        assert [m.phrase for m in matches] == ["adjective, adjective, and adjective"]

    def test_rule_of_three_gerunds(self):
        matches = RULE_OF_THREE.detect("We spent the week planning, testing, and shipping.")
        assert [m.phrase for m in matches] == ["verbing, verbing, and verbing"]

    def test_negative_parallelism(self):
        matches = NEGATIVE_PARALLELISM.detect("It is not only fast, but also cheap.")
        assert "not only ... but" in {m.phrase for m in matches}

    def test_plain_text_has_no_shapes(self):
        text = "The bridge collapsed at dawn. Two cars stopped short of the edge."
        assert RULE_OF_THREE.detect(text) == []
        assert NEGATIVE_PARALLELISM.detect(text) == []


class TestDetectorContract:
    def test_registry_conforms(self):
        from data_designer_ai_likelihood.detectors import DEFAULT_DETECTORS, Detector, HighlightingDetector

        assert all(isinstance(d, Detector) for d in DEFAULT_DETECTORS)
        assert all(isinstance(d, HighlightingDetector) for d in LEXICAL_DETECTORS)
