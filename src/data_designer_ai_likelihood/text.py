"""Word, sentence, and paragraph segmentation shared by the detectors.

Nothing here is cached: every detector segments the input it is given.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_WORD_RE = re.compile(r"\w+")
_LETTERS_RE = re.compile(r"[^a-z]")
_SENTENCE_END_RE = re.compile(r"[.!?]+[\"'\u201D\u2019)\]]*(?=\s|$)")
_TERMINAL_RUN_RE = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n[ \t]*\n")

_VOWELS = "aeiouy"

STOPWORDS = frozenset({
    "a", "about", "above", "after", "again", "against", "all", "am", "an", "and",
    "any", "are", "as", "at", "be", "because", "been", "before", "being", "below",
    "between", "both", "but", "by", "can", "could", "did", "do", "does", "doing",
    "down", "during", "each", "few", "for", "from", "further", "had", "has", "have",
    "having", "he", "her", "here", "hers", "herself", "him", "himself", "his", "how",
    "i", "if", "in", "into", "is", "it", "its", "itself", "just", "me", "might",
    "more", "most", "my", "myself", "no", "nor", "not", "of", "off", "on", "once",
    "only", "or", "other", "our", "ours", "ourselves", "out", "over", "own", "same",
    "should", "so", "some", "such", "than", "that", "the", "their", "theirs", "them",
    "themselves", "then", "there", "these", "they", "this", "those", "through", "to",
    "too", "under", "until", "up", "very", "was", "we", "were", "what", "when",
    "where", "which", "while", "who", "whom", "why", "will", "with", "would", "you",
    "your", "yours", "yourself", "yourselves",
})


def count_syllables(word: str) -> int:
    """Estimate English syllables by counting vowel groups.

    A trailing silent ``e`` removes one syllable and a trailing ``-le`` after a
    consonant restores it ("table" -> 2). Every non-empty word has at least one.
    """
    if not word:
        return 0
    clean = _LETTERS_RE.sub("", word.lower())
    if not clean:
        return 1

    count = 0
    in_group = False
    for ch in clean:
        if ch in _VOWELS:
            if not in_group:
                count += 1
                in_group = True
        else:
            in_group = False

    if clean.endswith("e"):
        count -= 1
    if clean.endswith("le") and len(clean) > 2 and clean[-3] not in "aeiou":
        count += 1
    return max(1, count)


@dataclass(frozen=True)
class Token:
    text: str
    start: int
    end: int

    @property
    def lower(self) -> str:
        return self.text.lower()

    @property
    def syllables(self) -> int:
        return count_syllables(self.text)


@dataclass(frozen=True)
class Sentence:
    text: str
    start: int
    end: int
    tokens: tuple[Token, ...]

    @property
    def word_count(self) -> int:
        return len(self.tokens)


@dataclass(frozen=True)
class Paragraph:
    text: str
    start: int
    end: int
    sentences: tuple[Sentence, ...]

    @property
    def word_count(self) -> int:
        return sum(s.word_count for s in self.sentences)


def lower_words(text: str) -> list[str]:
    return [w.lower() for w in _WORD_RE.findall(text)]


def tokenize(text: str, offset: int = 0) -> list[Token]:
    return [Token(m.group(0), m.start() + offset, m.end() + offset) for m in _WORD_RE.finditer(text)]


def count_terminal_runs(text: str) -> int:
    """Number of ``.!?`` runs, i.e. the sentence count used by the readability formula."""
    return len(_TERMINAL_RUN_RE.findall(text))


def _make_sentence(text: str, start: int, end: int) -> Sentence | None:
    chunk = text[start:end]
    stripped = chunk.strip()
    if not stripped:
        return None
    lead = len(chunk) - len(chunk.lstrip())
    s_start = start + lead
    s_end = s_start + len(stripped)
    tokens = tokenize(stripped, offset=s_start)
    if not tokens:
        return None
    return Sentence(stripped, s_start, s_end, tuple(tokens))


def split_sentences(text: str, offset: int = 0) -> list[Sentence]:
    """Split on terminal punctuation; zero-word sentences are discarded.

    Offsets on the returned sentences and tokens index into ``text`` shifted
    by ``offset``.
    """
    sentences: list[Sentence] = []
    start = 0
    for m in _SENTENCE_END_RE.finditer(text):
        sentence = _make_sentence(text, start, m.end())
        if sentence is not None:
            sentences.append(sentence)
        start = m.end()
    tail = _make_sentence(text, start, len(text))
    if tail is not None:
        sentences.append(tail)

    if offset:
        return [_shift(s, offset) for s in sentences]
    return sentences


def _shift(sentence: Sentence, offset: int) -> Sentence:
    return Sentence(
        sentence.text,
        sentence.start + offset,
        sentence.end + offset,
        tuple(Token(t.text, t.start + offset, t.end + offset) for t in sentence.tokens),
    )


def split_paragraphs(text: str) -> list[Paragraph]:
    """Blank-line separated paragraphs; paragraphs without words are dropped."""
    paragraphs: list[Paragraph] = []
    start = 0
    bounds = [(m.start(), m.end()) for m in _PARAGRAPH_SPLIT_RE.finditer(text)]
    bounds.append((len(text), len(text)))
    for sep_start, sep_end in bounds:
        chunk = text[start:sep_start]
        stripped = chunk.strip()
        if stripped:
            p_start = start + (len(chunk) - len(chunk.lstrip()))
            sentences = split_sentences(stripped, offset=p_start)
            if sentences:
                paragraphs.append(Paragraph(stripped, p_start, p_start + len(stripped), tuple(sentences)))
        start = sep_end
    return paragraphs
