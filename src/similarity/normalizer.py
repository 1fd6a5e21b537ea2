"""Canonicalization of contact identifiers before exact comparison."""

import re

_NON_DIGITS = re.compile(r"[^0-9]")


def normalize_email(email: str) -> str:
    """Lowercase and trim an email address. No syntax validation."""
    return email.lower().strip()


def normalize_phone(phone: str) -> str:
    """Best-effort E.164-style formatting of a phone number.

    Strips every non-digit, then:
    - 10 digits: US number without country code, prefixed with "+1"
    - 11 digits starting with "1": US number with country code, prefixed "+"
    - more than 7 digits: international number, prefixed "+"

    Anything shorter is returned unchanged. There is no country-aware
    parsing, so short national numbers outside the US stay unnormalized.

    Args:
        phone: Raw phone string as entered in a form

    Returns:
        Normalized phone, or the original string if it can't be normalized

    Examples:
        >>> normalize_phone("(555) 123-4567")
        '+15551234567'
        >>> normalize_phone("12-34")
        '12-34'
    """
    digits = _NON_DIGITS.sub("", phone)

    if len(digits) == 10:
        return f"+1{digits}"
    if len(digits) == 11 and digits.startswith("1"):
        return f"+{digits}"
    if len(digits) > 7:
        return f"+{digits}"

    return phone
