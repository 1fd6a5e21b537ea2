"""Record-level duplicate detection for event clients.

Compares a newly submitted record (client, event form or contact
submission) field by field against existing records supplied by the
caller. Which records to compare is decided upstream; this service only
scores the pairs it is given.
"""

import structlog

from src.config import settings
from src.duplicates.schemas import (
    ClientRecord,
    DuplicateCheckResult,
    DuplicateMatch,
    FieldMatch,
)
from src.similarity.decision import get_match_reason_label, meets_threshold
from src.similarity.field_matcher import calculate_similarity
from src.similarity.schemas import FieldType, SimilarityResult

logger = structlog.get_logger()

# Order in which matched fields are reported
FIELD_ORDER: tuple[FieldType, ...] = (
    FieldType.EMAIL,
    FieldType.PHONE,
    FieldType.NAME,
    FieldType.VENUE,
)


class DuplicateDetector:
    """Detects potential duplicate client records.

    Email and phone must match exactly after normalization (alternates
    from merged records included); contact and venue names use fuzzy
    scoring with per-type thresholds.
    """

    def __init__(self, limit: int | None = None):
        """Initialize detector.

        Args:
            limit: Maximum number of duplicates returned per check.
                Defaults to settings.duplicate_match_limit.
        """
        self._limit = limit if limit is not None else settings.duplicate_match_limit

    def compare(
        self,
        candidate: ClientRecord,
        existing: ClientRecord,
    ) -> DuplicateMatch | None:
        """Compare two records across every field type.

        For each field the best-scoring pair of values is kept, and only
        if it meets the field's threshold.

        Args:
            candidate: Newly submitted record
            existing: Existing record to compare against

        Returns:
            DuplicateMatch listing the matched fields, or None if no
            field matched (or no field could be compared)
        """
        matches: list[FieldMatch] = []

        for field_type in FIELD_ORDER:
            best = self._best_field_match(candidate, existing, field_type)
            if best is None:
                continue
            value1, value2, result = best
            if not meets_threshold(result):
                continue
            matches.append(
                FieldMatch(
                    field=field_type,
                    value1=value1,
                    value2=value2,
                    score=result.score,
                    is_exact=result.is_exact,
                    reason=get_match_reason_label(result),
                )
            )

        if not matches:
            return None

        return DuplicateMatch(
            record_id=existing.record_id,
            score=max(m.score for m in matches),
            matches=matches,
        )

    def find_duplicates(
        self,
        candidate: ClientRecord,
        existing_records: list[ClientRecord],
        limit: int | None = None,
    ) -> DuplicateCheckResult:
        """Find potential duplicates of a candidate among existing records.

        Args:
            candidate: Newly submitted record
            existing_records: Records to check, already pre-filtered by
                the caller
            limit: Optional override of the detector's result cap

        Returns:
            DuplicateCheckResult with matches sorted by number of matched
            fields, then best score (both descending)
        """
        limit = limit if limit is not None else self._limit

        potential_duplicates = [
            match
            for record in existing_records
            if record.record_id != candidate.record_id
            and (match := self.compare(candidate, record)) is not None
        ]
        potential_duplicates.sort(
            key=lambda m: (len(m.matches), m.score),
            reverse=True,
        )
        potential_duplicates = potential_duplicates[:limit]

        logger.debug(
            "duplicate_scan_complete",
            candidate_id=candidate.record_id,
            compared=len(existing_records),
            matches=len(potential_duplicates),
        )

        return DuplicateCheckResult(
            candidate_id=candidate.record_id,
            potential_duplicates=potential_duplicates,
            has_duplicates=len(potential_duplicates) > 0,
        )

    def _best_field_match(
        self,
        candidate: ClientRecord,
        existing: ClientRecord,
        field_type: FieldType,
    ) -> tuple[str, str, SimilarityResult] | None:
        """Find the highest-scoring pair of values for one field.

        Args:
            candidate: Newly submitted record
            existing: Existing record
            field_type: Field to compare

        Returns:
            Tuple of (candidate_value, existing_value, result), or None if
            either record has no value for the field
        """
        best: tuple[str, str, SimilarityResult] | None = None

        for value1 in candidate.values_for(field_type):
            for value2 in existing.values_for(field_type):
                result = calculate_similarity(value1, value2, field_type)
                if result is None:
                    continue
                if best is None or result.score > best[2].score:
                    best = (value1, value2, result)

        return best
