"""Unit tests for axis label placement."""

from __future__ import annotations

import itertools

from textcharts.domain import BLANK, LabelPolicy, LabelRow, LabelSpan, place_labels


class TestLabelSpan:
    """Tests for LabelSpan overlap checks."""

    def test_touching_spans_do_not_overlap(self) -> None:
        """Half-open intervals sharing an edge are disjoint."""
        span = LabelSpan(start=3, end=6, text="abc")
        assert not span.overlaps(6, 9)
        assert not span.overlaps(0, 3)

    def test_contained_and_containing_spans_overlap(self) -> None:
        """Nested intervals overlap either way round."""
        span = LabelSpan(start=3, end=6, text="abc")
        assert span.overlaps(4, 5)
        assert span.overlaps(0, 10)


class TestShiftPolicy:
    """Tests for the shift-on-collision policy."""

    def test_far_apart_labels_are_centered(self) -> None:
        """Labels with room keep their ideal centered start."""
        row = place_labels([(5, "abc"), (30, "xyz")], width=40)

        assert [span.start for span in row.spans] == [4, 29]
        assert row.text()[4:7] == "abc"
        assert row.text()[29:32] == "xyz"

    def test_overlapping_label_starts_one_cell_after_previous_end(self) -> None:
        """The second label is pushed to start at first.end + 1."""
        row = place_labels([(10, "abcd"), (11, "wxyz")], width=40)

        first, second = row.spans
        assert first.start == 8
        assert second.start == first.end + 1
        assert row.text()[8:17] == "abcd" + BLANK + "wxyz"

    def test_dense_labels_never_overlap(self) -> None:
        """Placed spans are pairwise disjoint."""
        row = place_labels([(10, "aaa"), (11, "bbb"), (12, "ccc"), (13, "ddd")], width=100)

        assert [span.start for span in row.spans] == [9, 13, 17, 21]
        for a, b in itertools.combinations(row.spans, 2):
            assert not a.overlaps(b.start, b.end)

    def test_label_is_clamped_to_left_edge(self) -> None:
        """Labels never start left of the axis edge."""
        row = place_labels([(1, "abcd")], width=20, left_edge=3)

        assert row.spans[0].start == 3
        assert row.text()[:7] == BLANK * 3 + "abcd"

    def test_label_is_clamped_to_right_edge(self) -> None:
        """Labels never run past the row end."""
        row = place_labels([(19, "abcd")], width=20)

        assert row.spans[0].start == 16
        assert row.text().endswith("abcd")

    def test_later_labels_never_overwrite_earlier_ones(self) -> None:
        """A clamped label only writes into blank cells."""
        row = place_labels([(5, "abcd"), (8, "wxyz")], width=10)

        assert row.text() == BLANK * 3 + "abcdxyz"

    def test_right_edge_clamp_never_records_overlapping_spans(self) -> None:
        """A label clamped back onto its neighbours is not recorded as placed."""
        centers = [7, 11, 16, 20, 24, 28, 33, 37, 41, 45, 50, 54]
        labels = [(center, f"L{i:02d}x") for i, center in enumerate(centers)]
        row = place_labels(labels, width=55, left_edge=7)

        for a, b in itertools.combinations(row.spans, 2):
            assert not a.overlaps(b.start, b.end)
        assert all(span.end <= 55 for span in row.spans)
        assert [span.text for span in row.spans][-1] == "L09x"
        assert row.text().endswith("L08xL09x")
        assert "L10x" not in row.text()
        assert "L11x" not in row.text()

    def test_clamped_collision_returns_none(self) -> None:
        """The direct API reports an unrecorded label as None."""
        row = LabelRow(width=10)
        assert row.place_shifted(5, "abcd") is not None
        assert row.place_shifted(8, "wxyz") is None
        assert len(row.spans) == 1

    def test_row_has_requested_width(self) -> None:
        """The joined row is exactly ``width`` cells."""
        row = place_labels([(3, "a")], width=12)
        assert len(row.text()) == 12


class TestSkipPolicy:
    """Tests for the skip-on-crowding policy."""

    def test_well_spaced_labels_are_all_placed(self) -> None:
        """Labels two cells clear of their predecessor are drawn."""
        row = place_labels(
            [(10, "abcd"), (16, "efgh")],
            width=30,
            policy=LabelPolicy.SKIP,
            max_length=4,
        )

        assert [span.start for span in row.spans] == [8, 14]
        assert row.text()[8:18] == "abcd" + BLANK * 2 + "efgh"

    def test_crowding_label_is_skipped(self) -> None:
        """A label starting too close to its predecessor is dropped."""
        row = place_labels(
            [(5, "abcd"), (7, "efgh")],
            width=20,
            policy=LabelPolicy.SKIP,
            max_length=4,
        )

        assert len(row.spans) == 1
        assert "e" not in row.text()
        assert row.text()[3:7] == "abcd"

    def test_place_unless_crowded_returns_none_when_skipped(self) -> None:
        """The direct API reports a skipped label as None."""
        row = LabelRow(width=20)
        assert row.place_unless_crowded(5, "ab", None, 2) is not None
        assert row.place_unless_crowded(6, "cd", 5, 2) is None

    def test_default_max_length_is_longest_text(self) -> None:
        """Without max_length the longest label sets the predecessor extent."""
        row = place_labels(
            [(4, "abcdef"), (9, "g")], width=20, policy=LabelPolicy.SKIP
        )

        # previous end = 4 + 3 = 7, "g" starts at 9 which is not > 8
        assert len(row.spans) == 2
