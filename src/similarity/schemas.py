"""Similarity engine schemas.

Defines the compared field types, the per-comparison result model and the
fixed match thresholds used by the decision policy.
"""

from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


class FieldType(str, Enum):
    """Semantic category of a compared value."""

    EMAIL = "email"
    PHONE = "phone"
    NAME = "name"
    VENUE = "venue"


class SimilarityResult(BaseModel):
    """Outcome of comparing two values of the same field type.

    Email and phone results are binary (score 1.0 or 0.0). Name and venue
    results carry a fuzzy score and are exact only at exactly 1.0.
    """

    model_config = ConfigDict(frozen=True)

    type: FieldType = Field(description="Field type that was compared")
    score: float = Field(ge=0.0, le=1.0, description="Similarity score (0-1)")
    is_exact: bool = Field(description="True if the values are an exact match")


# Minimum score for a result to count as a match
SIMILARITY_THRESHOLDS: MappingProxyType[FieldType, float] = MappingProxyType(
    {
        FieldType.EMAIL: 1.0,  # must be exact
        FieldType.PHONE: 1.0,  # must be exact
        FieldType.NAME: 0.7,
        FieldType.VENUE: 0.65,
    }
)
