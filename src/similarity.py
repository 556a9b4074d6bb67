"""
String similarity primitives for header matching.

Levenshtein edit distance and the normalized similarity ratio used to
compare raw column headers with canonical field variations.
"""

import re

_SEPARATORS = re.compile(r"[\s_\-./]+")


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Calculate Levenshtein distance between two strings.

    Args:
        s1: First string
        s2: Second string

    Returns:
        Edit distance (number of character changes needed)
    """
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = range(len(s2) + 1)
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def similarity(a: str, b: str) -> float:
    """
    Calculate similarity between two strings using Levenshtein distance.

    Both strings are case-folded first; whitespace counts. Two empty strings
    are identical.

    Args:
        a: First string
        b: Second string

    Returns:
        Similarity score (0.0-1.0)
    """
    a = (a or "").casefold()
    b = (b or "").casefold()

    if a == b:
        return 1.0

    max_len = max(len(a), len(b))
    distance = levenshtein_distance(a, b)
    return (max_len - distance) / max_len


def normalize_header(header: str) -> str:
    """
    Normalize a header for comparison.

    Lowercases and collapses underscores, dashes, dots, slashes and
    whitespace runs into single spaces, so "List_Price", "list-price"
    and "List  Price" all compare equal.
    """
    if not header:
        return ""
    return _SEPARATORS.sub(" ", str(header).casefold()).strip()
