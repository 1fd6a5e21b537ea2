"""Similarity engine for duplicate detection of event-client records.

This module provides:
- Normalization of emails and phone numbers
- Trigram (Jaccard) and Levenshtein similarity for free text
- Composite name/venue scoring (0.6 trigram + 0.4 Levenshtein)
- Field-type dispatch returning a SimilarityResult
- Per-type thresholds and match reason labels
"""

from src.similarity.composite import (
    calculate_name_similarity,
    calculate_venue_similarity,
)
from src.similarity.decision import get_match_reason_label, meets_threshold
from src.similarity.field_matcher import calculate_similarity
from src.similarity.levenshtein import calculate_levenshtein_similarity
from src.similarity.normalizer import normalize_email, normalize_phone
from src.similarity.schemas import SIMILARITY_THRESHOLDS, FieldType, SimilarityResult
from src.similarity.trigram import calculate_trigram_similarity

__all__ = [
    "SIMILARITY_THRESHOLDS",
    "FieldType",
    "SimilarityResult",
    "calculate_levenshtein_similarity",
    "calculate_name_similarity",
    "calculate_similarity",
    "calculate_trigram_similarity",
    "calculate_venue_similarity",
    "get_match_reason_label",
    "meets_threshold",
    "normalize_email",
    "normalize_phone",
]
