"""
Unrestricted Damerau-Levenshtein distance (Lowrance-Wagner).

Unlike OSA, a transposition may be followed by further edits of the
characters in between, so the look-back is not limited to the adjacent
cell: for every character we remember the last row where it was seen.
"""

from itertools import count

from .levenshtein import distance_to_simularity
from .matrix import DistanceMatrix, log_matrix
from .text import as_view, label


def damerau_levenshtein_distance(str1, str2):
    """
    Calculates the Damerau-Levenshtein distance supporting full Unicode.

    Insertions, deletions, substitutions and transpositions of two adjacent
    characters, each costing 1, with no restriction on editing a substring
    more than once. The result satisfies the triangle inequality.
    """
    s1 = as_view(str1)
    s2 = as_view(str2)
    if s1 == s2:
        return 0

    len1 = len(s1)
    len2 = len(s2)
    if not len1 or not len2:
        return len1 + len2

    rows = range(-1, len1 + 1)
    cols = range(-1, len2 + 1)
    max_dist = len1 + len2

    # Logical -1 holds the sentinel, logical 0 is the empty-prefix border
    d = DistanceMatrix(rows, cols)
    d.fill(range(-1, 0), cols, max_dist)
    d.fill(rows, range(-1, 0), max_dist)
    d.fill(range(0, rows.stop), range(0, 1), count())
    d.fill(range(0, 1), range(0, cols.stop), count())

    # da: last row index at which each character of s1 was seen
    da = {}

    for i1 in range(len1):
        char_1 = s1[i1]
        db = -1

        for i2 in range(len2):
            char_2 = s2[i2]

            k = da.get(char_2, -1)
            l = db

            cost = 1
            if char_1 == char_2:
                cost = 0
                db = i2

            d[i1 + 1, i2 + 1] = min(
                d[i1, i2] + cost,        # substitute / match
                d[i1, i2 + 1] + 1,       # insert
                d[i1 + 1, i2] + 1,       # delete
                # transpose, paying for everything skipped in between
                d[k, l] + (i1 - k - 1) + 1 + (i2 - l - 1),
            )

        da[char_1] = i1

    log_matrix("Damerau-Levenshtein matrix", d,
               {i + 1: label(c) for i, c in enumerate(s1)},
               {i + 1: label(c) for i, c in enumerate(s2)})
    return d.last()

dam_lev = damerau_levenshtein_distance


def damerau_levenshtein_simularity(str1, str2):
    s1 = as_view(str1)
    s2 = as_view(str2)
    return distance_to_simularity(s1, s2, damerau_levenshtein_distance(s1, s2))

damerau_levenshtein_similarity = damerau_levenshtein_simularity
