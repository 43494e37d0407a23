from data_designer_ai_likelihood.highlights import resolve_highlights
from data_designer_ai_likelihood.models import TextHighlight


def _spans(highlights):
    return [(h.start, h.end) for h in highlights]


class TestResolveHighlights:
    def test_overlaps_removed_earliest_wins(self):
        raw = [TextHighlight(0, 5, "a"), TextHighlight(3, 8, "b"), TextHighlight(8, 10, "c"), TextHighlight(9, 12, "d")]
        assert _spans(resolve_highlights(raw)) == [(0, 5), (8, 10)]

    def test_sorted_by_start(self):
        raw = [TextHighlight(20, 25, "a"), TextHighlight(0, 4, "b"), TextHighlight(10, 12, "c")]
        assert _spans(resolve_highlights(raw)) == [(0, 4), (10, 12), (20, 25)]

    def test_adjacent_spans_kept(self):
        raw = [TextHighlight(0, 5, "a"), TextHighlight(5, 7, "b")]
        assert _spans(resolve_highlights(raw)) == [(0, 5), (5, 7)]

    def test_tie_keeps_first_detected(self):
        raw = [TextHighlight(4, 9, "first"), TextHighlight(4, 6, "second")]
        assert [h.category for h in resolve_highlights(raw)] == ["first"]

    def test_contained_span_rejected(self):
        raw = [TextHighlight(0, 20, "outer"), TextHighlight(5, 10, "inner"), TextHighlight(15, 25, "tail")]
        assert _spans(resolve_highlights(raw)) == [(0, 20)]

    def test_invalid_spans_dropped(self):
        raw = [TextHighlight(5, 5, "empty"), TextHighlight(-1, 2, "negative"), TextHighlight(0, 100, "long"), TextHighlight(2, 4, "ok")]
        assert _spans(resolve_highlights(raw, text_length=10)) == [(2, 4)]

    def test_empty_input(self):
        assert resolve_highlights([]) == []

    def test_result_never_overlaps(self):
        raw = [TextHighlight(s, s + w, "x") for s in range(0, 60, 3) for w in (2, 5, 7)]
        resolved = resolve_highlights(raw)
        for i, a in enumerate(resolved):
            for b in resolved[i + 1:]:
                assert a.end <= b.start or b.end <= a.start
                assert not a.overlaps(b)
