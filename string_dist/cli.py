"""Command line demo: print every metric for two strings."""

import argparse
import sys

from loguru import logger

from .damerau import damerau_levenshtein_distance
from .hamming import hamming_distance
from .jaro import JaroOptions, jaro_simularity, jaro_winkler_simularity
from .lcs import longest_common_substrings
from .levenshtein import levenshtein_distance, levenshtein_simularity, osa_distance


def build_parser():
    parser = argparse.ArgumentParser(
        prog="string-dist",
        description="Compare two strings with classical edit and similarity metrics")
    parser.add_argument("str1", help="first string")
    parser.add_argument("str2", help="second string")
    parser.add_argument("--case-sensitive", action="store_true",
                        help="do not lowercase before the Jaro comparisons")
    parser.add_argument("--scaling-factor", type=float, default=None,
                        help="Jaro-Winkler prefix scale (default 0.1)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log the filled DP matrices to stderr")
    return parser


def compare(str1, str2, options=None):
    """All metrics as (name, value) pairs, in display order."""
    matches = longest_common_substrings(str1, str2)
    return [
        ("Hamming Distance", hamming_distance(str1, str2)),
        ("Levenshtein Distance", levenshtein_distance(str1, str2)),
        ("Levenshtein Simularity", levenshtein_simularity(str1, str2)),
        ("Damerau Levenshtein Distance", damerau_levenshtein_distance(str1, str2)),
        ("OSA Distance", osa_distance(str1, str2)),
        ("Jaro Simularity", jaro_simularity(str1, str2, options)),
        ("Jaro Winkler Simularity", jaro_winkler_simularity(str1, str2, options)),
        ("Longest Common Substring", matches[0].text if matches else ""),
        ("Longest Common Substring Length", len(matches[0].text) if matches else 0),
    ]


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = JaroOptions(scaling_factor=args.scaling_factor,
                              case_sensitive=args.case_sensitive)
    except ValueError as e:
        parser.error(str(e))

    if args.verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("string_dist")

    for name, value in compare(args.str1, args.str2, options):
        if isinstance(value, float):
            value = f"{value:.4f}"
        print(f"{name}: {value}")
    return 0
