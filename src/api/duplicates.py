"""Duplicate check API endpoints."""

import structlog
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from src.duplicates.detector import DuplicateDetector
from src.duplicates.schemas import ClientRecord, DuplicateCheckResult

logger = structlog.get_logger()

router = APIRouter(prefix="/duplicates", tags=["duplicates"])


class DuplicateCheckRequest(BaseModel):
    """Request to check a candidate record against existing records."""

    candidate: ClientRecord = Field(description="Newly submitted record")
    existing: list[ClientRecord] = Field(
        default_factory=list,
        description="Existing records to compare against (pre-filtered)",
    )
    limit: int | None = Field(
        default=None, ge=1, description="Maximum number of duplicates to return"
    )


def get_duplicate_detector(request: Request) -> DuplicateDetector:
    """Dependency to get DuplicateDetector from app state."""
    return request.app.state.duplicate_detector


@router.post("/check", response_model=DuplicateCheckResult)
async def check_duplicates(
    request: DuplicateCheckRequest,
    detector: DuplicateDetector = Depends(get_duplicate_detector),
) -> DuplicateCheckResult:
    """Find potential duplicates of a submitted record.

    Args:
        request: Candidate record and the existing records to scan
        detector: Duplicate detection service

    Returns:
        DuplicateCheckResult with matches sorted best first
    """
    result = detector.find_duplicates(
        request.candidate,
        request.existing,
        limit=request.limit,
    )

    if result.has_duplicates:
        logger.info(
            "potential_duplicates_found",
            candidate_id=request.candidate.record_id,
            count=len(result.potential_duplicates),
        )

    return result
