"""
Levenshtein and Optimal String Alignment distances.

Both share one fill loop over a matrix with a virtual -1 border row and
column. The loop computes the classic delete/insert/substitute minimum for
each cell and hands it to a scoring hook, which may relax it further
(OSA adds the adjacent transposition) before it is stored.
"""

from collections import namedtuple

from .matrix import DistanceMatrix, init_incrementing_borders, log_matrix
from .text import as_view, label


CellState = namedtuple("CellState", ["matrix", "cost", "score", "i1", "i2", "text1", "text2"])
CellState.__doc__ = """\
What a scoring hook sees for the cell being filled.

matrix: the matrix, filled up to (but excluding) this cell
cost: 0 if text1[i1] == text2[i2] else 1
score: min(delete, insert, substitute) for this cell
"""


def _plain_score(state):
    return state.score


def _osa_score(s):
    if (s.i1 > 0 and s.i2 > 0
            and s.text1[s.i1] == s.text2[s.i2 - 1]
            and s.text1[s.i1 - 1] == s.text2[s.i2]):
        return min(s.score, s.matrix[s.i1 - 2, s.i2 - 2] + s.cost)
    return s.score


def build_levenshtein_matrix(str1, str2, calc_score=_plain_score):
    """
    Fill a Levenshtein matrix over ``[-1, len1) x [-1, len2)``.

    :param calc_score: hook called with a CellState for every interior
                       cell; its return value is stored in the cell
    """
    t1 = as_view(str1)
    t2 = as_view(str2)
    len1 = len(t1)
    len2 = len(t2)

    d = DistanceMatrix(range(-1, len1), range(-1, len2))
    init_incrementing_borders(d)

    for i1 in range(len1):
        char_1 = t1[i1]
        for i2 in range(len2):
            cost = 0 if char_1 == t2[i2] else 1

            score = min(
                d[i1 - 1, i2] + 1,        # delete
                d[i1, i2 - 1] + 1,        # insert
                d[i1 - 1, i2 - 1] + cost  # substitute
            )
            d[i1, i2] = calc_score(CellState(d, cost, score, i1, i2, t1, t2))

    return d


def _labels(view, shift=0):
    return {i + shift: label(c) for i, c in enumerate(view)}


def levenshtein_distance(str1, str2):
    """
    Calculates the Levenshtein distance supporting full Unicode.

    Minimum number of single character insertions, deletions and
    substitutions turning ``str1`` into ``str2``.
    0 <= distance <= max(len(str1), len(str2))
    """
    t1 = as_view(str1)
    t2 = as_view(str2)
    d = build_levenshtein_matrix(t1, t2)
    log_matrix("Levenshtein matrix", d, _labels(t1), _labels(t2))
    return d.last()

lev = levenshtein_distance


def osa_distance(str1, str2):
    """
    Calculates the Optimal String Alignment distance supporting full Unicode.

    Levenshtein plus transposition of two adjacent characters, under the
    condition that no substring is edited more than once. Never larger
    than the Levenshtein distance, but not a metric: the triangle
    inequality may fail.
    """
    t1 = as_view(str1)
    t2 = as_view(str2)
    d = build_levenshtein_matrix(t1, t2, _osa_score)
    log_matrix("OSA matrix", d, _labels(t1), _labels(t2))
    return d.last()

osa = osa_distance


def distance_to_simularity(str1, str2, dist):
    """
    Converts a distance to a similarity in [0, 1] relative to the longer string.
    Two empty strings are identical, similarity 1.0.
    """
    longest = max(len(as_view(str1)), len(as_view(str2)))
    if longest == 0:
        return 1.0
    return 1.0 - dist / longest


def levenshtein_simularity(str1, str2):
    """1 - levenshtein_distance / max(len(str1), len(str2))"""
    t1 = as_view(str1)
    t2 = as_view(str2)
    return distance_to_simularity(t1, t2, levenshtein_distance(t1, t2))

levenshtein_similarity = levenshtein_simularity


def osa_simularity(str1, str2):
    t1 = as_view(str1)
    t2 = as_view(str2)
    return distance_to_simularity(t1, t2, osa_distance(t1, t2))

osa_similarity = osa_simularity
