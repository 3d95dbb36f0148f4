"""
Longest Common Substring.

See https://en.wikipedia.org/wiki/Longest_common_substring_problem
"""

from collections import namedtuple

from .matrix import DistanceMatrix, log_matrix
from .text import as_view, label


SubstringMatch = namedtuple("SubstringMatch", ["text", "index1", "index2"])


def _suffix_matrix(s1, s2):
    """
    d[i1, i2] = length of the longest common suffix of s1[:i1 + 1] and s2[:i2 + 1].
    Also returns the best length and the cells where it is reached.
    """
    d = DistanceMatrix(range(-1, len(s1)), range(-1, len(s2)))
    best = 0
    ends = []

    for i1 in range(len(s1)):
        char_1 = s1[i1]
        for i2 in range(len(s2)):
            if char_1 != s2[i2]:
                continue
            score = d[i1 - 1, i2 - 1] + 1
            d[i1, i2] = score
            if score > best:
                best = score
                ends = [(i1, i2)]
            elif score == best:
                ends.append((i1, i2))

    return d, best, ends


def longest_common_substrings(str1, str2):
    """
    Every common substring of maximal length, as SubstringMatch tuples
    (text, start index in str1, start index in str2) ordered by their
    position in str2. Empty if the strings share no character.
    """
    s1 = as_view(str1)
    s2 = as_view(str2)
    d, best, ends = _suffix_matrix(s1, s2)
    log_matrix("Longest common substring matrix", d,
               {i: label(c) for i, c in enumerate(s1)},
               {i: label(c) for i, c in enumerate(s2)})
    if not best:
        return []

    matches = []
    for i1, i2 in ends:
        start1 = i1 - best + 1
        start2 = i2 - best + 1
        matches.append(SubstringMatch(s1.slice(start1, i1 + 1), start1, start2))
    matches.sort(key=lambda mt: (mt.index2, mt.index1))
    return matches


def longest_common_substring(str1, str2):
    """The first longest common substring, or an empty value of str1's type."""
    s1 = as_view(str1)
    matches = longest_common_substrings(s1, str2)
    if not matches:
        return s1.empty()
    return matches[0].text


def longest_common_substring_length(str1, str2):
    return _suffix_matrix(as_view(str1), as_view(str2))[1]
