"""
Dense score matrix addressed by arbitrary integer ranges.

The dynamic-programming recurrences read ``d[i - 1, j]`` when ``i == 0``.
Instead of special-casing the first row and column, the matrix accepts
ranges that start below zero and keeps a fixed offset into a numpy array:

    physical index = logical index - range.start

so logical row -1 is numpy row 0, logical row 0 is numpy row 1, etc.
"""

import operator
from itertools import count

import numpy as np
from loguru import logger


class MatrixRangeError(ValueError):
    """A row or column range cannot describe a matrix axis."""


class MatrixIndexError(IndexError):
    """A coordinate lies outside the ranges the matrix was built with."""


def _to_range(r, axis):
    if isinstance(r, tuple):
        if len(r) != 2:
            raise MatrixRangeError(f"{axis} range must be a (start, end) pair, got {r!r}")
        r = range(operator.index(r[0]), operator.index(r[1]))
    if not isinstance(r, range):
        raise MatrixRangeError(f"{axis} range must be a range or (start, end) pair, got {r!r}")
    if r.step != 1:
        raise MatrixRangeError(f"{axis} range must have step 1, got {r!r}")
    if r.stop < r.start:
        raise MatrixRangeError(f"{axis} range ends before it starts: {r!r}")
    return r


def _is_source(values):
    """True if ``values`` should be consumed one item per cell."""
    if isinstance(values, (str, bytes, bytearray)):
        return False
    return hasattr(values, "__iter__") or hasattr(values, "__next__")


class DistanceMatrix:
    """
    Rectangular table of scores over ``row_range x col_range``.

    :param row_range: range (or (start, end) pair) of logical row indices
    :param col_range: range (or (start, end) pair) of logical column indices
    :param default: initial value of every cell
    :param dtype: numpy element type of the backing array
    """

    def __init__(self, row_range, col_range, default=0, dtype=np.int64):
        self._rows = _to_range(row_range, "row")
        self._cols = _to_range(col_range, "column")
        self._data = np.full((len(self._rows), len(self._cols)), default, dtype=dtype)

    @property
    def row_range(self):
        return self._rows

    @property
    def col_range(self):
        return self._cols

    @property
    def height(self):
        return len(self._rows)

    @property
    def width(self):
        return len(self._cols)

    @property
    def shape(self):
        return self._data.shape

    @property
    def dtype(self):
        return self._data.dtype

    def _offset(self, row, col):
        row = operator.index(row)
        col = operator.index(col)
        if not self._rows.start <= row < self._rows.stop:
            raise MatrixIndexError(f"row {row} outside {self._rows!r}")
        if not self._cols.start <= col < self._cols.stop:
            raise MatrixIndexError(f"column {col} outside {self._cols!r}")
        return row - self._rows.start, col - self._cols.start

    def _check_subrange(self, sub, full, axis):
        sub = _to_range(sub, axis)
        if len(sub) and (sub.start < full.start or sub.stop > full.stop):
            raise MatrixIndexError(f"{axis} subrange {sub!r} outside {full!r}")
        return sub

    def get(self, row, col):
        """Value at logical coordinate ``(row, col)``."""
        return self._data[self._offset(row, col)].item()

    def set(self, row, col, value):
        self._data[self._offset(row, col)] = value

    def __getitem__(self, key):
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key, value):
        row, col = key
        self.set(row, col, value)

    def at(self, row, col):
        """Value at 0-based coordinate ``(row, col)``, ignoring the ranges."""
        return self.get(row + self._rows.start, col + self._cols.start)

    def set_at(self, row, col, value):
        self.set(row + self._rows.start, col + self._cols.start, value)

    def fill(self, rows, cols, values):
        """
        Assign values over ``rows x cols`` in row-major order.

        ``values`` is either a scalar written to every cell, or an iterable
        (``itertools.repeat``, ``itertools.count``, a generator...) that
        supplies one value per cell. Filling stops as soon as the iterable
        is exhausted; the remaining cells keep what they held.
        """
        rows = self._check_subrange(rows, self._rows, "row")
        cols = self._check_subrange(cols, self._cols, "column")
        if not len(rows) or not len(cols):
            return

        if not _is_source(values):
            r0 = rows.start - self._rows.start
            c0 = cols.start - self._cols.start
            self._data[r0:r0 + len(rows), c0:c0 + len(cols)] = values
            return

        source = iter(values)
        for row in rows:
            for col in cols:
                try:
                    value = next(source)
                except StopIteration:
                    return
                self._data[row - self._rows.start, col - self._cols.start] = value

    def last(self):
        """The cell at the largest row and column, i.e. the final score."""
        if not self._data.size:
            raise MatrixIndexError("empty matrix has no last cell")
        return self._data[-1, -1].item()

    def to_array(self):
        """Copy of the backing numpy array (0-based)."""
        return self._data.copy()

    def _cell_width(self, labels=()):
        widths = [len(self._format(v)) for v in self._data.flat]
        widths.extend(len(l) for l in labels)
        return max(widths, default=1)

    def _format(self, value):
        if np.issubdtype(self._data.dtype, np.integer):
            return str(int(value))
        return f"{value:g}"

    def row_to_string(self, row, width=2):
        """One matrix row as fixed-width, space separated scores."""
        row = operator.index(row)
        if not self._rows.start <= row < self._rows.stop:
            raise MatrixIndexError(f"row {row} outside {self._rows!r}")
        values = self._data[row - self._rows.start]
        return " ".join(self._format(v).rjust(width) for v in values)

    def render(self, row_labels=None, col_labels=None):
        """
        Multi-line diagnostic rendering of the matrix.

        :param row_labels: optional mapping of logical row index -> header
        :param col_labels: optional mapping of logical column index -> header
        """
        row_labels = row_labels or {}
        col_labels = col_labels or {}
        width = self._cell_width(list(row_labels.values()) + list(col_labels.values()))
        margin = max((len(l) for l in row_labels.values()), default=0)

        lines = []
        if col_labels:
            header = " ".join(str(col_labels.get(c, "")).rjust(width) for c in self._cols)
            lines.append((" " * (margin + 1) if margin else "") + header)
        for row in self._rows:
            line = self.row_to_string(row, width)
            if margin:
                line = str(row_labels.get(row, "")).rjust(margin) + " " + line
            lines.append(line)
        return "\n".join(lines)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return (f"DistanceMatrix(row_range={self._rows!r}, col_range={self._cols!r}, "
                f"dtype={self._data.dtype})")


def init_incrementing_borders(matrix):
    """
    Set row -1 to 0, 1, 2, ... and column -1 to 0, 1, 2, ...

    This is the DP boundary condition: the distance between a prefix and
    the empty string is the prefix length.
    """
    matrix.fill(range(-1, 0), matrix.col_range, count())
    matrix.fill(matrix.row_range, range(-1, 0), count())
    return matrix


def log_matrix(title, matrix, row_labels=None, col_labels=None):
    """Dump a filled matrix at DEBUG level. Rendering is deferred until a sink wants it."""
    logger.opt(lazy=True).debug(
        "{}:\n{}", lambda: title, lambda: matrix.render(row_labels, col_labels))
