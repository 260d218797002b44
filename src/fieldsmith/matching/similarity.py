"""Header text normalization and Jaro-Winkler similarity."""

import re
from typing import Optional

_PUNCTUATION_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")

WINKLER_SCALING = 0.1
WINKLER_PREFIX_CAP = 4


def normalize_text(text: Optional[str]) -> str:
    """Lower-case, drop punctuation and collapse whitespace.

    >>> normalize_text("  Serial  #No. ")
    'serial no'
    """
    if not text:
        return ""
    cleaned = text.lower().strip()
    cleaned = _PUNCTUATION_RE.sub("", cleaned)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def jaro_similarity(s1: str, s2: str) -> float:
    """Plain Jaro similarity of two already-normalized strings."""
    if not s1 and not s2:
        return 1.0
    if not s1 or not s2:
        return 0.0

    match_window = max(0, max(len(s1), len(s2)) // 2 - 1)
    s1_matches = [False] * len(s1)
    s2_matches = [False] * len(s2)

    matches = 0
    for i, char in enumerate(s1):
        start = max(0, i - match_window)
        end = min(i + match_window + 1, len(s2))
        for j in range(start, end):
            if s2_matches[j] or s2[j] != char:
                continue
            s1_matches[i] = s2_matches[j] = True
            matches += 1
            break

    if matches == 0:
        return 0.0

    transpositions = 0
    k = 0
    for i, char in enumerate(s1):
        if not s1_matches[i]:
            continue
        while not s2_matches[k]:
            k += 1
        if char != s2[k]:
            transpositions += 1
        k += 1

    return (
        matches / len(s1)
        + matches / len(s2)
        + (matches - transpositions / 2) / matches
    ) / 3


def jaro_winkler_similarity(s1: str, s2: str) -> float:
    """Jaro similarity boosted by the shared prefix (at most 4 characters)."""
    jaro = jaro_similarity(s1, s2)

    prefix = 0
    for a, b in zip(s1[:WINKLER_PREFIX_CAP], s2[:WINKLER_PREFIX_CAP]):
        if a != b:
            break
        prefix += 1

    return jaro + WINKLER_SCALING * prefix * (1 - jaro)


def calculate_similarity(str1: Optional[str], str2: Optional[str]) -> float:
    """Score two header strings in [0, 1]; 1.0 only for equal normalized text."""
    normalized1 = normalize_text(str1)
    normalized2 = normalize_text(str2)

    if normalized1 == normalized2:
        return 1.0

    return jaro_winkler_similarity(normalized1, normalized2)
