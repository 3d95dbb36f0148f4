"""
Jaro and Jaro-Winkler similarity.

See https://en.wikipedia.org/wiki/Jaro%E2%80%93Winkler_distance
"""

from dataclasses import dataclass
from typing import Optional

from .text import TextView, as_view

# The standard value for this constant is 0.1 in Winkler's work
DEFAULT_SCALING_FACTOR = 0.1
# Winkler only boosts pairs that are already similar
BOOST_THRESHOLD = 0.7
MAX_PREFIX = 4


@dataclass(frozen=True)
class JaroOptions:
    """
    Options varying the Jaro / Jaro-Winkler weights.

    :param scaling_factor: prefix weight ``p``; None means 0.1. Values
                           above 0.25 could push the similarity past 1.
    :param case_sensitive: compare characters as-is instead of lowercased
    """
    scaling_factor: Optional[float] = None
    case_sensitive: bool = False

    def __post_init__(self):
        if self.scaling_factor is not None and not 0.0 <= self.scaling_factor <= 1.0 / MAX_PREFIX:
            raise ValueError(f"scaling_factor must lie in [0, 0.25], got {self.scaling_factor}")

    @property
    def prefix_scale(self):
        if self.scaling_factor is None:
            return DEFAULT_SCALING_FACTOR
        return self.scaling_factor


def _normalise(value, options):
    view = as_view(value)
    if options.case_sensitive or not isinstance(view.value, str):
        return view
    return TextView(view.value.lower())


def jaro_simularity(str1, str2, options=None):
    """
    Jaro similarity of two strings, between 0.0 (nothing in common) and 1.0 (identical).

    Comparison is case-insensitive unless ``options.case_sensitive`` is set.
    """
    options = options or JaroOptions()
    s1 = _normalise(str1, options)
    s2 = _normalise(str2, options)
    len1 = len(s1)
    len2 = len(s2)

    if not len1 and not len2:
        return 1.0
    if not len1 or not len2:
        return 0.0
    if s1 == s2:
        return 1.0

    match_dist = max(0, max(len1, len2) // 2 - 1)
    s1_matches = [False] * len1
    s2_matches = [False] * len2
    m = 0

    for i in range(len1):
        low = max(0, i - match_dist)
        high = min(i + match_dist, len2 - 1)
        for j in range(low, high + 1):
            if not s2_matches[j] and s1[i] == s2[j]:
                s1_matches[i] = True
                s2_matches[j] = True
                m += 1
                break

    if not m:
        return 0.0

    # Half the matched characters that appear in a different order
    matched_1 = [c for c, hit in zip(s1, s1_matches) if hit]
    matched_2 = [c for c, hit in zip(s2, s2_matches) if hit]
    transpositions = sum(a != b for a, b in zip(matched_1, matched_2)) / 2

    return (m / len1 + m / len2 + (m - transpositions) / m) / 3

jaro_similarity = jaro_simularity


def jaro_winkler_simularity(str1, str2, options=None):
    """
    Jaro-Winkler similarity, giving more favourable ratings to strings
    that match from the beginning.

    Based on http://commons.apache.org/proper/commons-text (JaroWinklerDistance)
    """
    options = options or JaroOptions()
    s1 = _normalise(str1, options)
    s2 = _normalise(str2, options)
    weight = jaro_simularity(s1, s2, options)
    if weight == 1.0 or weight <= BOOST_THRESHOLD:
        return weight

    prefix = 0
    for a, b in zip(s1.codes[:MAX_PREFIX], s2.codes[:MAX_PREFIX]):
        if a != b:
            break
        prefix += 1

    return weight + prefix * options.prefix_scale * (1.0 - weight)

jaro_winkler_similarity = jaro_winkler_simularity
