"""Duplicate detection schemas.

Defines the candidate record shape compared by the detector and the
results returned to the admin record-management layer.
"""

from pydantic import BaseModel, Field, computed_field

from src.similarity.schemas import FieldType


class ClientRecord(BaseModel):
    """Contact details of an event client, form or contact submission.

    Merged clients keep the emails and phones of the records folded into
    them in the alternate_* lists; those take part in comparisons too.
    """

    record_id: str = Field(description="Identifier of the record")
    name: str | None = Field(
        default=None, description="Organization or venue name"
    )
    contact_name: str | None = Field(
        default=None, description="Name of the point of contact"
    )
    email: str | None = Field(default=None, description="Primary email")
    phone: str | None = Field(default=None, description="Primary phone")
    alternate_emails: list[str] = Field(
        default_factory=list, description="Emails from merged records"
    )
    alternate_phones: list[str] = Field(
        default_factory=list, description="Phones from merged records"
    )

    def values_for(self, field_type: FieldType) -> list[str]:
        """Get all non-empty values of a record for a field type.

        Args:
            field_type: Field to collect values for

        Returns:
            Values in priority order (primary first, then alternates)
        """
        if field_type == FieldType.EMAIL:
            values = [self.email, *self.alternate_emails]
        elif field_type == FieldType.PHONE:
            values = [self.phone, *self.alternate_phones]
        elif field_type == FieldType.NAME:
            values = [self.contact_name]
        else:
            values = [self.name]
        return [v for v in values if v]


class FieldMatch(BaseModel):
    """A single field that matched between two records."""

    field: FieldType = Field(description="Field type that matched")
    value1: str = Field(description="Value from the candidate record")
    value2: str = Field(description="Value from the existing record")
    score: float = Field(ge=0.0, le=1.0, description="Similarity score (0-1)")
    is_exact: bool = Field(description="True if the values are an exact match")
    reason: str = Field(description="Human-readable match reason")


class DuplicateMatch(BaseModel):
    """An existing record that is a potential duplicate of the candidate."""

    record_id: str = Field(description="ID of the matching record")
    score: float = Field(
        ge=0.0, le=1.0, description="Best score among matched fields (0-1)"
    )
    matches: list[FieldMatch] = Field(
        default_factory=list, description="Fields that met their threshold"
    )

    @computed_field
    @property
    def reasons(self) -> list[str]:
        """Match reason labels in field order."""
        return [m.reason for m in self.matches]


class DuplicateCheckResult(BaseModel):
    """Result of checking a candidate record against existing records."""

    candidate_id: str = Field(description="ID of the record being checked")
    potential_duplicates: list[DuplicateMatch] = Field(
        default_factory=list, description="Potential duplicates, best first"
    )
    has_duplicates: bool = Field(
        description="True if any existing record matched"
    )
