from __future__ import annotations

import logging
from typing import Iterable

from data_designer_ai_likelihood.models import TextHighlight

logger = logging.getLogger(__name__)


def resolve_highlights(highlights: Iterable[TextHighlight], text_length: int | None = None) -> list[TextHighlight]:
    """Merge highlight spans into a non-overlapping list ordered by start.

    Spans are sorted by start offset (stable, so ties keep detector order) and
    kept greedily: a span survives only if it does not overlap one already
    kept. Spans outside ``[0, text_length]`` or with ``start >= end`` are dropped.
    """
    candidates = []
    for h in highlights:
        if h.start >= h.end or h.start < 0 or (text_length is not None and h.end > text_length):
            logger.debug(f"Dropping out-of-range highlight {h.start}-{h.end} ({h.category})")
            continue
        candidates.append(h)

    kept: list[TextHighlight] = []
    # Kept spans are disjoint and every candidate starts at or after each of
    # them, so overlap reduces to starting before the furthest kept end.
    kept_end = 0
    for h in sorted(candidates, key=lambda h: h.start):
        if kept and h.start < kept_end:
            continue
        kept.append(h)
        kept_end = max(kept_end, h.end)
    return kept
