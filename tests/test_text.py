from data_designer_ai_likelihood.text import (
    count_syllables,
    count_terminal_runs,
    lower_words,
    split_paragraphs,
    split_sentences,
    tokenize,
)


class TestSyllables:
    def test_vowel_groups(self):
        assert count_syllables("cat") == 1
        assert count_syllables("beautiful") == 3
        assert count_syllables("transformation") == 4

    def test_silent_e(self):
        assert count_syllables("make") == 1
        assert count_syllables("the") == 1

    def test_consonant_le(self):
        assert count_syllables("table") == 2
        assert count_syllables("simple") == 2

    def test_degenerate_words(self):
        assert count_syllables("") == 0
        assert count_syllables("123") == 1

    def test_case_insensitive(self):
        assert count_syllables("TABLE") == count_syllables("table")


class TestTokenize:
    def test_offsets_index_source(self):
        text = "Hello, wide world!"
        tokens = tokenize(text)
        assert [t.text for t in tokens] == ["Hello", "wide", "world"]
        for t in tokens:
            assert text[t.start:t.end] == t.text

    def test_lower_words(self):
        assert lower_words("The THE the") == ["the", "the", "the"]

    def test_punctuation_only(self):
        assert tokenize("... !!! ???") == []

    def test_token_properties(self):
        token = tokenize("Simple TABLE")[1]
        assert token.lower == "table"
        assert token.syllables == 2


class TestSentences:
    def test_terminal_punctuation(self):
        sentences = split_sentences("The cat sat. The dog ran! Why?")
        assert [s.word_count for s in sentences] == [3, 3, 1]

    def test_offsets_index_source(self):
        text = "  First one here.   Second one.\nThird"
        for s in split_sentences(text):
            assert text[s.start:s.end] == s.text
        assert [s.text for s in split_sentences(text)] == ["First one here.", "Second one.", "Third"]

    def test_decimal_point_does_not_split(self):
        sentences = split_sentences("Pi is 3.14 today. Done.")
        assert len(sentences) == 2
        assert sentences[0].word_count == 5

    def test_closing_quote_after_terminator(self):
        sentences = split_sentences('He said "stop." Then he left.')
        assert len(sentences) == 2

    def test_zero_word_sentences_discarded(self):
        assert split_sentences("... !!! ?") == []
        assert split_sentences("") == []

    def test_count_terminal_runs(self):
        assert count_terminal_runs("Wait... what?!") == 2
        assert count_terminal_runs("no terminator") == 0


class TestParagraphs:
    def test_blank_line_boundaries(self):
        text = "First para. Two.\n\nSecond para.\n \nThird."
        paragraphs = split_paragraphs(text)
        assert len(paragraphs) == 3
        assert len(paragraphs[0].sentences) == 2
        assert paragraphs[0].word_count == 3

    def test_offsets_index_source(self):
        text = "Alpha beta.\n\n  Gamma delta. Epsilon."
        for p in split_paragraphs(text):
            assert text[p.start:p.end] == p.text
            for s in p.sentences:
                assert text[s.start:s.end] == s.text

    def test_empty(self):
        assert split_paragraphs("\n\n\n") == []
