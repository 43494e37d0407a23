"""Word frequency distribution measured against Zipf's law.

Natural prose is dominated by a few very frequent words with a long tail of
rare ones: the word at rank ``r`` appears roughly ``C / r`` times. Generated
text tends to spread its vocabulary more evenly. Three metrics capture the
departure from that shape and are blended into one deviation in ``[0, 1]``:

* chi-squared distance between the observed rank-frequency list and
  ``C / r``, normalized by the total word count;
* uniformity, the coefficient of variation of the frequency list (low means
  flat, which is suspicious);
* the ratio of the most frequent to the least frequent word.

Short texts do not have enough mass in the tail, so below
``Hyperparameters.zipf_min_words`` the result is marked unreliable and never
signals.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass

from data_designer_ai_likelihood.detectors.base import round_half_up
from data_designer_ai_likelihood.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_ai_likelihood.text import STOPWORDS, lower_words


@dataclass(frozen=True)
class WordCount:
    word: str
    frequency: int
    expected_frequency: float


@dataclass(frozen=True)
class ZipfMetrics:
    chi_squared: float
    uniformity: float
    frequency_ratio: float
    deviation: float


@dataclass(frozen=True)
class WordFrequencyResult:
    deviation: float
    word_count: int
    unique_word_count: int
    top_words: tuple[WordCount, ...]
    metrics: ZipfMetrics | None
    is_reliable: bool
    is_signal_present: bool
    reason: str
    score: float


_ZERO_METRICS = ZipfMetrics(0.0, 0.0, 0.0, 0.0)


def word_frequencies(text: str, ignore_stopwords: bool = False) -> Counter[str]:
    tokens = lower_words(text)
    if ignore_stopwords:
        tokens = [t for t in tokens if t not in STOPWORDS]
    return Counter(tokens)


def harmonic_number(n: int) -> float:
    return math.fsum(1.0 / r for r in range(1, n + 1))


def zipf_constant(total_words: int, distinct_words: int) -> float:
    """Scale ``C`` such that the expected frequencies ``C / r`` sum to the total word count."""
    if distinct_words == 0:
        return 0.0
    return total_words / harmonic_number(distinct_words)


def zipf_metrics(frequencies: list[int], hp: Hyperparameters | None = None) -> ZipfMetrics:
    """Blend the three distribution metrics; ``frequencies`` must be sorted descending."""
    hp = hp or DEFAULT_HYPERPARAMETERS
    if not frequencies:
        return _ZERO_METRICS

    total = sum(frequencies)
    n = len(frequencies)
    c = zipf_constant(total, n)

    chi_squared = 0.0
    for rank, observed in enumerate(frequencies, start=1):
        expected = c / rank
        chi_squared += (observed - expected) ** 2 / expected
    chi_squared /= total

    mean = total / n
    variance = sum((f - mean) ** 2 for f in frequencies) / n
    uniformity = math.sqrt(variance) / mean

    frequency_ratio = frequencies[0] / frequencies[-1]

    deviation = (
        hp.zipf_chi_weight * min(chi_squared, hp.zipf_chi_cap) / hp.zipf_chi_cap
        + hp.zipf_uniformity_weight * max(0.0, 1.0 - uniformity)
        + hp.zipf_ratio_weight * (hp.zipf_ratio_cap - min(frequency_ratio, hp.zipf_ratio_cap)) / hp.zipf_ratio_cap
    )
    return ZipfMetrics(chi_squared, uniformity, frequency_ratio, max(0.0, min(deviation, 1.0)))


def calculate_zipfian_deviation(text: str, ignore_stopwords: bool = False, hp: Hyperparameters | None = None) -> float:
    counts = word_frequencies(text, ignore_stopwords)
    return zipf_metrics(sorted(counts.values(), reverse=True), hp).deviation


def detect_word_frequency_distribution(
    text: str,
    hp: Hyperparameters | None = None,
    ignore_stopwords: bool | None = None,
) -> WordFrequencyResult:
    hp = hp or DEFAULT_HYPERPARAMETERS
    if ignore_stopwords is None:
        ignore_stopwords = hp.zipf_ignore_stopwords

    if not text.strip():
        return WordFrequencyResult(0.0, 0, 0, (), None, False, False, "Empty text", 0.0)

    counts = word_frequencies(text, ignore_stopwords)
    if not counts:
        return WordFrequencyResult(0.0, 0, 0, (), None, False, False, "No valid words found", 0.0)

    ranked = counts.most_common()
    frequencies = [freq for _, freq in ranked]
    total = sum(frequencies)
    c = zipf_constant(total, len(frequencies))
    top_words = tuple(
        WordCount(word, freq, c / rank)
        for rank, (word, freq) in enumerate(ranked[: hp.zipf_top_words], start=1)
    )
    metrics = zipf_metrics(frequencies, hp)
    deviation = metrics.deviation

    if total < hp.zipf_min_words:
        return WordFrequencyResult(
            deviation, total, len(counts), top_words, metrics, False, False,
            f"Text too short ({total} words) for reliable word frequency analysis. "
            f"Minimum {hp.zipf_min_words} words recommended.",
            0.0,
        )

    if deviation <= hp.zipf_threshold:
        return WordFrequencyResult(
            deviation, total, len(counts), top_words, metrics, True, False,
            f"Natural word frequency distribution (deviation: {deviation:.3f}).",
            0.0,
        )

    second = frequencies[1] if len(frequencies) > 1 else frequencies[0]
    top_ratio = frequencies[0] / second
    if top_ratio < hp.zipf_uniform_top_ratio:
        reason = (
            f"Unnaturally uniform word distribution (deviation: {deviation:.3f}). The most common word "
            f"appears only {top_ratio:.1f}x as often as the second; natural text shows at least 2:1."
        )
    else:
        reason = (
            f"Unusual word frequency skew (deviation: {deviation:.3f}). The rank-frequency curve departs "
            f"from the Zipfian shape of human-written text."
        )

    span = 1.0 - hp.zipf_threshold
    score = round_half_up(min((deviation - hp.zipf_threshold) / span * hp.zipf_score_max, hp.zipf_score_max))
    return WordFrequencyResult(deviation, total, len(counts), top_words, metrics, True, True, reason, score)
