"""Tests for the range-addressed distance matrix and the text view."""

from itertools import count, repeat

import numpy as np
import pytest

from string_dist.matrix import (
    DistanceMatrix, MatrixIndexError, MatrixRangeError, init_incrementing_borders,
)
from string_dist.text import TextView, as_view


# ═══════════════════════════════════════════════════════════════════
#  CONSTRUCTION
# ═══════════════════════════════════════════════════════════════════

class TestConstruction:

    @pytest.mark.parametrize("rows,cols,shape", [
        (range(0, 2), range(0, 2), (2, 2)),
        (range(0, 3), range(0, 3), (3, 3)),
        (range(-1, 1), range(-1, 1), (2, 2)),
        (range(-1, 4), range(-1, 6), (5, 7)),
        ((-2, 0), (3, 4), (2, 1)),
        (range(0, 0), range(0, 5), (0, 5)),
    ])
    def test_shape(self, rows, cols, shape):
        d = DistanceMatrix(rows, cols)
        assert d.shape == shape
        assert (d.height, d.width) == shape

    def test_default_value_everywhere(self):
        d = DistanceMatrix(range(-1, 2), range(-1, 2), default=7)
        assert all(d[r, c] == 7 for r in d.row_range for c in d.col_range)

    def test_end_before_start_is_rejected(self):
        with pytest.raises(MatrixRangeError):
            DistanceMatrix(range(3, 1), range(0, 2))
        with pytest.raises(ValueError):
            DistanceMatrix((0, 2), (5, -5))

    def test_step_must_be_one(self):
        with pytest.raises(MatrixRangeError):
            DistanceMatrix(range(0, 10, 2), range(0, 2))

    def test_float_dtype(self):
        d = DistanceMatrix(range(-1, 1), range(-1, 1), default=0.5, dtype=float)
        assert d.dtype == np.float64
        assert d[0, 0] == 0.5


# ═══════════════════════════════════════════════════════════════════
#  ACCESS
# ═══════════════════════════════════════════════════════════════════

class TestAccess:

    def test_negative_coordinates(self):
        d = DistanceMatrix(range(-1, 2), range(-1, 2))
        d[-1, -1] = 5
        d.set(1, 1, 9)
        assert d.get(-1, -1) == 5
        assert d[1, 1] == 9
        assert d.to_array()[0, 0] == 5
        assert d.to_array()[2, 2] == 9

    def test_values_are_python_numbers(self):
        d = DistanceMatrix(range(0, 1), range(0, 1), default=3)
        assert type(d[0, 0]) is int

    def test_zero_based_access(self):
        d = DistanceMatrix(range(-1, 2), range(-1, 2))
        d[-1, 0] = 4
        assert d.at(0, 1) == 4
        d.set_at(2, 2, 8)
        assert d[1, 1] == 8

    @pytest.mark.parametrize("row,col", [(-2, 0), (0, -2), (2, 0), (0, 2), (5, 5)])
    def test_out_of_range_read(self, row, col):
        d = DistanceMatrix(range(-1, 2), range(-1, 2))
        with pytest.raises(MatrixIndexError):
            d[row, col]

    def test_out_of_range_write(self):
        d = DistanceMatrix(range(0, 2), range(0, 2))
        with pytest.raises(IndexError):
            d[-1, 0] = 1

    def test_last(self):
        d = DistanceMatrix(range(-1, 3), range(-1, 4))
        d[2, 3] = 42
        assert d.last() == 42

    def test_last_of_empty_matrix(self):
        with pytest.raises(MatrixIndexError):
            DistanceMatrix(range(0, 0), range(0, 0)).last()


# ═══════════════════════════════════════════════════════════════════
#  FILL
# ═══════════════════════════════════════════════════════════════════

class TestFill:

    def test_fill_top_row(self):
        d = DistanceMatrix(range(0, 2), range(0, 2))
        d.fill(range(0, 1), range(0, 2), repeat(1))
        assert d[0, 0] == 1
        assert d[0, 1] == 1
        assert d[1, 0] == 0
        assert d[1, 1] == 0

    def test_fill_left_col(self):
        d = DistanceMatrix(range(0, 2), range(0, 2))
        d.fill(range(0, 2), range(0, 1), repeat(1))
        assert d[0, 0] == 1
        assert d[1, 0] == 1
        assert d[0, 1] == 0
        assert d[1, 1] == 0

    def test_fill_is_row_major(self):
        d = DistanceMatrix(range(0, 2), range(0, 3))
        d.fill(range(0, 2), range(0, 3), count())
        assert d.to_array().tolist() == [[0, 1, 2], [3, 4, 5]]

    def test_fill_stops_when_source_runs_out(self):
        d = DistanceMatrix(range(0, 2), range(0, 2), default=-1)
        d.fill(range(0, 2), range(0, 2), iter([7, 8, 9]))
        assert d.to_array().tolist() == [[7, 8], [9, -1]]

    def test_fill_constant(self):
        d = DistanceMatrix(range(-1, 3), range(-1, 3))
        d.fill(range(-1, 0), range(-1, 3), 6)
        assert [d[-1, c] for c in range(-1, 3)] == [6, 6, 6, 6]
        assert d[0, 0] == 0

    def test_fill_sub_rectangle(self):
        d = DistanceMatrix(range(-1, 3), range(-1, 3))
        d.fill(range(1, 3), range(0, 2), repeat(2))
        assert d.to_array().sum() == 8
        assert d[1, 0] == d[2, 1] == 2

    def test_fill_outside_ranges(self):
        d = DistanceMatrix(range(0, 2), range(0, 2))
        with pytest.raises(MatrixIndexError):
            d.fill(range(-1, 1), range(0, 2), repeat(0))

    def test_empty_subrange_is_a_noop(self):
        d = DistanceMatrix(range(0, 2), range(0, 2))
        d.fill(range(5, 5), range(0, 2), repeat(3))
        assert d.to_array().sum() == 0

    def test_incrementing_borders(self):
        d = init_incrementing_borders(DistanceMatrix(range(-1, 3), range(-1, 2)))
        assert [d[-1, c] for c in d.col_range] == [0, 1, 2]
        assert [d[r, -1] for r in d.row_range] == [0, 1, 2, 3]
        assert d[0, 0] == 0


# ═══════════════════════════════════════════════════════════════════
#  RENDERING
# ═══════════════════════════════════════════════════════════════════

class TestRender:

    def test_row_to_string(self):
        d = DistanceMatrix(range(0, 1), range(0, 3))
        d.fill(range(0, 1), range(0, 3), count(9))
        assert d.row_to_string(0) == " 9 10 11"

    def test_labels(self):
        d = init_incrementing_borders(DistanceMatrix(range(-1, 2), range(-1, 1)))
        text = d.render({0: "a", 1: "b"}, {0: "z"})
        lines = text.splitlines()
        assert len(lines) == 4
        assert lines[0].strip() == "z"
        assert lines[2].startswith("a")
        assert lines[3].startswith("b")

    def test_str_has_one_line_per_row(self):
        d = DistanceMatrix(range(-1, 4), range(-1, 1))
        assert len(str(d).splitlines()) == 5


# ═══════════════════════════════════════════════════════════════════
#  TEXT VIEW
# ═══════════════════════════════════════════════════════════════════

class TestTextView:

    def test_counts_code_points_not_bytes(self):
        view = TextView("日本語")
        assert len(view) == 3
        assert view.char_count() == 3
        assert view.nth_char(1) == ord("本")

    def test_bytes_are_one_unit_each(self):
        view = TextView("café".encode("utf-8"))
        assert len(view) == 5

    def test_equality_is_by_content(self):
        assert TextView("abc") == TextView("abc")
        assert TextView("abc") != TextView("abd")
        assert hash(TextView("abc")) == hash(TextView("abc"))

    def test_as_view_is_idempotent(self):
        view = TextView("abc")
        assert as_view(view) is view

    def test_slice_returns_the_callers_type(self):
        assert TextView("hello").slice(1, 3) == "el"
        assert TextView(b"hello").slice(1, 3) == b"el"
        assert TextView(c for c in "hello").slice(0, 2) == ("h", "e")

    def test_immutable(self):
        view = TextView("abc")
        with pytest.raises(AttributeError):
            view.codes = ()

    def test_negative_index(self):
        with pytest.raises(IndexError):
            TextView("abc").nth_char(-1)

    @pytest.mark.parametrize("value", [None, 42, 3.5])
    def test_rejects_non_text(self, value):
        with pytest.raises(TypeError):
            TextView(value)
