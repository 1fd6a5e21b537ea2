"""Match decision policy and display labels for similarity results."""

from src.similarity.schemas import SIMILARITY_THRESHOLDS, FieldType, SimilarityResult


def meets_threshold(result: SimilarityResult) -> bool:
    """Check whether a result's score reaches its field type's threshold.

    Args:
        result: Similarity result to evaluate

    Returns:
        True if score >= threshold for the result type. Types without a
        threshold never match.
    """
    threshold = SIMILARITY_THRESHOLDS.get(result.type)
    if threshold is None:
        return False
    return result.score >= threshold


def get_match_reason_label(result: SimilarityResult) -> str:
    """Human-readable reason for showing a match in the admin UI.

    Exact matches read "Same email", fuzzy ones "Name similarity 0.82".
    Unknown types fall back to "Match".
    """
    if result.type not in SIMILARITY_THRESHOLDS:
        return "Match"

    field = FieldType(result.type).value
    if result.is_exact:
        return f"Same {field}"
    return f"{field.capitalize()} similarity {result.score:.2f}"
