"""Tests for aligning original lines with diff rows."""

import pytest
from fakes import side_by_side_row

from prthreads_core.diff.columns import guess_split_column
from prthreads_core.diff.mapping import anchor_index, build_line_map
from prthreads_core.errors import RenderingError

BEFORE = "the quick br\nsecond\nthird"

DIFF_WITH_INSERT = "\n".join(
    [
        side_by_side_row("the quick br", " ", "the quick br"),
        side_by_side_row("", ">", "inserted"),
        side_by_side_row("second", " ", "second"),
        side_by_side_row("third", "|", "THIRD"),
    ]
)


class TestBuildLineMap:
    def test_no_additions_is_identity(self):
        diff = "\n".join(
            [
                side_by_side_row("the quick br", " ", "the quick br"),
                side_by_side_row("second", " ", "second"),
                side_by_side_row("third", "|", "THIRD"),
            ]
        )
        assert build_line_map(BEFORE, diff) == [0, 1, 2]

    def test_addition_rows_are_skipped(self):
        assert build_line_map(BEFORE, DIFF_WITH_INSERT) == [0, 2, 3]

    def test_consecutive_additions(self):
        diff = "\n".join(
            [
                side_by_side_row("", ">", "new one"),
                side_by_side_row("", ">", "new two"),
                side_by_side_row("the quick br", " ", "the quick br"),
                side_by_side_row("second", " ", "second"),
                side_by_side_row("third", " ", "third"),
                side_by_side_row("", ">", "tail"),
            ]
        )
        assert build_line_map(BEFORE, diff) == [2, 3, 4]

    def test_trailing_newline_on_both_sides(self):
        assert build_line_map("a\nb\n", "a   a\nb   b\n") == [0, 1, 2]

    def test_undetectable_column_treats_every_row_as_left_pane(self):
        # Rows too short to detect a split: even '>' rows consume a line.
        assert build_line_map("a\nb\nc", "> a\n> b\n> c") == [0, 1, 2]

    def test_truncated_diff_raises(self):
        with pytest.raises(RenderingError):
            build_line_map("a\nb\nc", "x | x\ny | y")

    def test_additions_running_off_the_end_raise(self):
        diff = "\n".join(
            [
                side_by_side_row("the quick br", " ", "the quick br"),
                side_by_side_row("", ">", "one"),
                side_by_side_row("", ">", "two"),
            ]
        )
        with pytest.raises(RenderingError):
            build_line_map("the quick br\nsecond", diff)

    def test_mapping_is_increasing_and_in_bounds(self):
        mapping = build_line_map(BEFORE, DIFF_WITH_INSERT)
        rows = DIFF_WITH_INSERT.split("\n")
        assert all(0 <= m < len(rows) for m in mapping)
        assert all(a < b for a, b in zip(mapping, mapping[1:]))
        assert len(mapping) == len(BEFORE.split("\n"))

    def test_custom_column_detector(self):
        calls = []

        def detector(rows):
            calls.append(rows)
            return 0

        assert build_line_map(BEFORE, DIFF_WITH_INSERT, detect_column=detector) == [0, 1, 2]
        assert len(calls) == 1


def _partition(rows, column):
    """Independent reading of a side-by-side rendering: (left, marker, right) per row."""
    parsed = []
    for row in rows:
        marker = row[column] if len(row) > column else " "
        parsed.append((row[: column - 1].rstrip(), marker, row[column + 2 :]))
    return parsed


def test_detected_column_partitions_rows_like_the_mapper():
    rows = DIFF_WITH_INSERT.split("\n")
    column = guess_split_column(rows)
    parsed = _partition(rows, column)

    right_only = {i for i, (_, marker, _) in enumerate(parsed) if marker == ">"}
    mapped = set(build_line_map(BEFORE, DIFF_WITH_INSERT))

    assert right_only == set(range(len(rows))) - mapped
    assert [parsed[m][0] for m in sorted(mapped)] == BEFORE.split("\n")
    assert parsed[1][2] == "inserted"


class TestAnchorIndex:
    MAPPING = [0, 2, 3, 5]

    def test_source_indexing_uses_line_directly(self):
        assert anchor_index(self.MAPPING, 1) == 2
        assert anchor_index(self.MAPPING, 3, "source") == 5

    def test_corrected_indexing_subtracts_one(self):
        assert anchor_index(self.MAPPING, 1, "corrected") == 0
        assert anchor_index(self.MAPPING, 4, "corrected") == 5

    def test_line_past_mapping_raises(self):
        with pytest.raises(RenderingError):
            anchor_index(self.MAPPING, 4, "source")
        with pytest.raises(RenderingError):
            anchor_index(self.MAPPING, 5, "corrected")

    def test_line_zero_corrected_raises(self):
        with pytest.raises(RenderingError):
            anchor_index(self.MAPPING, 0, "corrected")

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            anchor_index(self.MAPPING, 1, "fuzzy")
