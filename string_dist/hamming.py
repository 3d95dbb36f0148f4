"""Hamming distance."""

import numpy as np

from .text import as_view


def _object_array(items):
    """1-D object array, one cell per item even when the items are tuples."""
    arr = np.empty(len(items), dtype=object)
    for i, item in enumerate(items):
        arr[i] = item
    return arr


def hamming_distance(str1, str2):
    """
    Calculates the Hamming distance supporting full Unicode.

    Counts the positions at which the characters differ. Strings of
    unequal length are compared over the shorter one and every extra
    character of the longer one counts as a difference.
    """
    s1 = as_view(str1)
    s2 = as_view(str2)
    shortest = min(len(s1), len(s2))
    delta = abs(len(s1) - len(s2))
    if not shortest:
        return delta

    a = _object_array(s1.codes[:shortest])
    b = _object_array(s2.codes[:shortest])
    return int(np.count_nonzero(a != b)) + delta
