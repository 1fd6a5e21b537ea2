"""Composite text scoring for personal names and venue names.

Blends trigram similarity (tolerant of reordering and typos in longer
strings) with Levenshtein similarity (which anchors short strings where
trigram sets are sparse).
"""

import re

from src.similarity.levenshtein import calculate_levenshtein_similarity
from src.similarity.trigram import calculate_trigram_similarity

TRIGRAM_WEIGHT = 0.6
LEVENSHTEIN_WEIGHT = 0.4

VENUE_STOPWORDS: tuple[str, ...] = (
    "the",
    "a",
    "an",
    "at",
    "in",
    "on",
    "and",
    "or",
    "&",
    "club",
    "venue",
    "hall",
    "center",
    "centre",
    "restaurant",
    "bar",
    "lounge",
)

_STOPWORD_PATTERN = re.compile(
    r"\b(" + "|".join(re.escape(word) for word in VENUE_STOPWORDS) + r")\b",
    re.ASCII,
)
_WHITESPACE = re.compile(r"\s+")


def calculate_name_similarity(name1: str, name2: str) -> float:
    """Weighted blend of trigram and Levenshtein similarity.

    Args:
        name1: First personal name
        name2: Second personal name

    Returns:
        ``0.6 * trigram + 0.4 * levenshtein``, in [0, 1]
    """
    trigram_score = calculate_trigram_similarity(name1, name2)
    levenshtein_score = calculate_levenshtein_similarity(name1, name2)
    return trigram_score * TRIGRAM_WEIGHT + levenshtein_score * LEVENSHTEIN_WEIGHT


def clean_venue_name(venue: str) -> str:
    """Lowercase a venue name and drop generic filler words.

    >>> clean_venue_name("The Grand Ballroom Hall")
    'grand ballroom'
    """
    stripped = _STOPWORD_PATTERN.sub("", venue.lower())
    return _WHITESPACE.sub(" ", stripped).strip()


def calculate_venue_similarity(venue1: str, venue2: str) -> float:
    """Name similarity of venue names after removing filler words.

    Generic words like "Hall" or "The" must not depress the score of
    otherwise identical venues. If both names are made only of filler
    words, the lowercased full names are compared instead.

    Args:
        venue1: First venue name
        venue2: Second venue name

    Returns:
        Similarity in [0, 1]; 0.0 if either name is empty
    """
    if not venue1 or not venue2:
        return 0.0

    cleaned1 = clean_venue_name(venue1)
    cleaned2 = clean_venue_name(venue2)

    if not cleaned1 and not cleaned2:
        cleaned1 = _WHITESPACE.sub(" ", venue1.lower()).strip()
        cleaned2 = _WHITESPACE.sub(" ", venue2.lower()).strip()

    return calculate_name_similarity(cleaned1, cleaned2)
