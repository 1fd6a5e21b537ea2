"""Normalized Levenshtein (edit distance) similarity using RapidFuzz."""

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(text1: str, text2: str) -> int:
    """Minimum single-character insertions, deletions and substitutions.

    Every edit costs 1, matching the classic dynamic-programming definition.
    """
    return Levenshtein.distance(text1, text2)


def calculate_levenshtein_similarity(text1: str, text2: str) -> float:
    """Edit-distance similarity normalized by the longer string.

    Comparison is case-insensitive: ``1 - distance / max(len1, len2)``.

    Args:
        text1: First string
        text2: Second string

    Returns:
        Similarity in [0, 1]. Identical strings (including two empty
        strings) return 1.0; an empty string against a non-empty one
        returns 0.0.
    """
    if text1 == text2:
        return 1.0
    if not text1 or not text2:
        return 0.0

    lowered1 = text1.lower()
    lowered2 = text2.lower()
    # Lowercasing can change length (e.g. "İ"), so normalize by the lowered form
    max_length = max(len(lowered1), len(lowered2))
    return 1.0 - levenshtein_distance(lowered1, lowered2) / max_length
