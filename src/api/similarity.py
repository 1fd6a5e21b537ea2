"""Pairwise similarity API endpoints.

Lets the admin UI score two field values and get the match verdict and
reason label in a single call.
"""

import structlog
from fastapi import APIRouter
from pydantic import BaseModel, Field

from src.similarity import (
    FieldType,
    SimilarityResult,
    calculate_similarity,
    get_match_reason_label,
    meets_threshold,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/similarity", tags=["similarity"])


class CompareRequest(BaseModel):
    """Request to compare two field values."""

    value1: str | None = Field(default=None, description="First raw value")
    value2: str | None = Field(default=None, description="Second raw value")
    type: FieldType = Field(description="Field type: email, phone, name, venue")


class CompareResponse(BaseModel):
    """Comparison outcome for display."""

    result: SimilarityResult | None = Field(
        default=None,
        description="Similarity result, or null if the values can't be compared",
    )
    meets_threshold: bool = Field(
        description="True if the score reaches the field type's threshold"
    )
    label: str | None = Field(
        default=None, description="Match reason label (null if not comparable)"
    )


@router.post("/compare", response_model=CompareResponse)
async def compare_values(request: CompareRequest) -> CompareResponse:
    """Compare two raw values of the same field type.

    Returns result=null when either value is missing so the UI can skip
    the comparison instead of showing a misleading 0% match.

    Args:
        request: Values and field type to compare

    Returns:
        CompareResponse with result, threshold verdict and label
    """
    result = calculate_similarity(request.value1, request.value2, request.type)

    if result is None:
        logger.debug("similarity_not_comparable", type=request.type.value)
        return CompareResponse(result=None, meets_threshold=False, label=None)

    return CompareResponse(
        result=result,
        meets_threshold=meets_threshold(result),
        label=get_match_reason_label(result),
    )
