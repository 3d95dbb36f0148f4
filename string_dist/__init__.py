"""
string_dist
===========

String distance and similarity metrics, all Unicode aware (characters are
code points, never bytes):

    levenshtein_distance("jones", "johnson")               -> 4
    osa_distance("paul", "pual")                           -> 1
    damerau_levenshtein_distance("Paul Jones", "Jones, Paul") -> 11
    levenshtein_simularity("jones", "johnson")             -> 0.428...
    jaro_winkler_simularity("hello", "hallo")              -> 0.88
    hamming_distance("peter", "pedro")                     -> 3
    longest_common_substring("failuree", "faluiere")       -> 'fa'

The matrix based algorithms log their filled DP matrix at DEBUG level via
loguru. Logging is off by default; turn it on with
``logger.enable("string_dist")``.
"""

from loguru import logger

from string_dist.damerau import (
    dam_lev,
    damerau_levenshtein_distance,
    damerau_levenshtein_similarity,
    damerau_levenshtein_simularity,
)
from string_dist.hamming import hamming_distance
from string_dist.jaro import (
    DEFAULT_SCALING_FACTOR,
    JaroOptions,
    jaro_similarity,
    jaro_simularity,
    jaro_winkler_similarity,
    jaro_winkler_simularity,
)
from string_dist.lcs import (
    SubstringMatch,
    longest_common_substring,
    longest_common_substring_length,
    longest_common_substrings,
)
from string_dist.levenshtein import (
    CellState,
    build_levenshtein_matrix,
    distance_to_simularity,
    lev,
    levenshtein_distance,
    levenshtein_similarity,
    levenshtein_simularity,
    osa,
    osa_distance,
    osa_similarity,
    osa_simularity,
)
from string_dist.matrix import (
    DistanceMatrix,
    MatrixIndexError,
    MatrixRangeError,
    init_incrementing_borders,
)
from string_dist.text import TextView, as_view

logger.disable("string_dist")

__version__ = "0.1.0"
__all__ = [
    "TextView", "as_view",
    "DistanceMatrix", "MatrixIndexError", "MatrixRangeError", "init_incrementing_borders",
    "CellState", "build_levenshtein_matrix",
    "levenshtein_distance", "osa_distance", "damerau_levenshtein_distance",
    "levenshtein_simularity", "osa_simularity", "damerau_levenshtein_simularity",
    "levenshtein_similarity", "osa_similarity", "damerau_levenshtein_similarity",
    "distance_to_simularity", "lev", "osa", "dam_lev",
    "hamming_distance",
    "JaroOptions", "DEFAULT_SCALING_FACTOR",
    "jaro_simularity", "jaro_winkler_simularity", "jaro_similarity", "jaro_winkler_similarity",
    "SubstringMatch", "longest_common_substrings", "longest_common_substring",
    "longest_common_substring_length",
]
