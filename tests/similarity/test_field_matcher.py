"""Tests for field-type dispatch."""

import pytest

from src.similarity.field_matcher import calculate_similarity
from src.similarity.schemas import FieldType, SimilarityResult


class TestEmailComparison:
    """Tests for email field comparison."""

    def test_case_and_whitespace_differences_are_exact(self):
        """Normalized emails compare equal."""
        result = calculate_similarity("Jane@Example.com", "jane@example.com ", "email")

        assert result == SimilarityResult(type=FieldType.EMAIL, score=1.0, is_exact=True)

    def test_different_emails_score_0(self):
        """No partial credit for similar emails."""
        result = calculate_similarity("jane@example.com", "jane@example.org", "email")

        assert result is not None
        assert result.score == 0.0
        assert result.is_exact is False


class TestPhoneComparison:
    """Tests for phone field comparison."""

    def test_formatted_and_bare_numbers_match(self):
        """Both normalize to +15551234567."""
        result = calculate_similarity("(555) 123-4567", "5551234567", "phone")

        assert result is not None
        assert result.type == FieldType.PHONE
        assert result.score == 1.0
        assert result.is_exact is True

    def test_with_and_without_country_code_match(self):
        """Leading 1 country code is normalized."""
        result = calculate_similarity("+1 555 123 4567", "555.123.4567", "phone")

        assert result is not None
        assert result.is_exact is True

    def test_different_numbers_score_0(self):
        """Different numbers are not a match."""
        result = calculate_similarity("5551234567", "5551234568", "phone")

        assert result is not None
        assert result.score == 0.0
        assert result.is_exact is False

    def test_short_numbers_compare_unnormalized(self):
        """Unnormalizable numbers only match when raw strings are equal."""
        same = calculate_similarity("123-4567", "123-4567", "phone")
        different_format = calculate_similarity("123-4567", "1234567", "phone")

        assert same is not None and same.is_exact is True
        assert different_format is not None and different_format.is_exact is False


class TestFreeTextComparison:
    """Tests for name and venue field comparison."""

    def test_name_fuzzy_match(self):
        """Names get a fuzzy score and aren't exact below 1.0."""
        result = calculate_similarity("Jane Smith", "Jane Smyth", "name")

        assert result is not None
        assert result.type == FieldType.NAME
        assert result.score == pytest.approx(0.72)
        assert result.is_exact is False

    def test_name_case_difference_is_exact(self):
        """Both algorithms compare lowercased text."""
        result = calculate_similarity("JANE SMITH", "jane smith", "name")

        assert result is not None
        assert result.score == 1.0
        assert result.is_exact is True

    def test_venue_uses_stopword_scoring(self):
        """Venue comparison ignores filler words."""
        result = calculate_similarity(
            "The Grand Ballroom", "Grand Ballroom Hall", FieldType.VENUE
        )

        assert result is not None
        assert result.type == FieldType.VENUE
        assert result.score == 1.0
        assert result.is_exact is True

    def test_filler_only_venue_is_not_a_match(self):
        """Stopword-only venue names don't match a longer real name."""
        result = calculate_similarity("Restaurant", "Restaurants", "venue")

        assert result is not None
        assert result.score == 0.0
        assert result.is_exact is False


class TestNotComparable:
    """Tests for inputs that can't be compared."""

    @pytest.mark.parametrize(
        ("value1", "value2", "field_type"),
        [
            (None, "Jane", "name"),
            ("Jane", None, "name"),
            ("", "jane@example.com", "email"),
            ("5551234567", "", "phone"),
            (None, None, "venue"),
        ],
    )
    def test_missing_value_returns_none(self, value1, value2, field_type):
        """Missing input means 'cannot compare', not a 0.0 score."""
        assert calculate_similarity(value1, value2, field_type) is None

    def test_unknown_field_type_returns_none(self):
        """Unsupported field types can't be compared."""
        assert calculate_similarity("a", "a", "address") is None
