"""Record-level duplicate detection built on the similarity engine.

This module provides:
- DuplicateDetector: field-by-field comparison of client records
- Schemas for candidate records and duplicate check results
"""

from src.duplicates.detector import DuplicateDetector
from src.duplicates.schemas import (
    ClientRecord,
    DuplicateCheckResult,
    DuplicateMatch,
    FieldMatch,
)

__all__ = [
    "ClientRecord",
    "DuplicateCheckResult",
    "DuplicateDetector",
    "DuplicateMatch",
    "FieldMatch",
]
