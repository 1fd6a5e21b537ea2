"""Field-type dispatch for pairwise value comparison.

Identifiers (email, phone) either reach the same channel or they don't,
so they are compared exactly after normalization. Free text (personal
names, venue names) gets a fuzzy composite score.
"""

from src.similarity.composite import (
    calculate_name_similarity,
    calculate_venue_similarity,
)
from src.similarity.normalizer import normalize_email, normalize_phone
from src.similarity.schemas import FieldType, SimilarityResult

_NORMALIZERS = {
    FieldType.EMAIL: normalize_email,
    FieldType.PHONE: normalize_phone,
}

_SCORERS = {
    FieldType.NAME: calculate_name_similarity,
    FieldType.VENUE: calculate_venue_similarity,
}


def calculate_similarity(
    value1: str | None,
    value2: str | None,
    field_type: FieldType | str,
) -> SimilarityResult | None:
    """Compare two raw field values according to their field type.

    Args:
        value1: First raw value (may be None or empty)
        value2: Second raw value (may be None or empty)
        field_type: One of email, phone, name, venue

    Returns:
        SimilarityResult, or None if the values can't be compared
        (a value is missing or the field type is unknown). None means
        "no evidence", which is different from a 0.0 score.

    Examples:
        >>> calculate_similarity("Jane@Example.com", "jane@example.com ", "email")
        SimilarityResult(type=<FieldType.EMAIL: 'email'>, score=1.0, is_exact=True)
        >>> calculate_similarity(None, "Jane", "name") is None
        True
    """
    if not value1 or not value2:
        return None

    try:
        field_type = FieldType(field_type)
    except ValueError:
        return None

    if field_type in _NORMALIZERS:
        normalize = _NORMALIZERS[field_type]
        is_exact = normalize(value1) == normalize(value2)
        return SimilarityResult(
            type=field_type,
            score=1.0 if is_exact else 0.0,
            is_exact=is_exact,
        )

    score = _SCORERS[field_type](value1, value2)
    return SimilarityResult(type=field_type, score=score, is_exact=score == 1.0)
