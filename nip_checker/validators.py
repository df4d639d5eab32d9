"""
Input validators and normalizers for registry queries.

NIP checksum digits are deliberately not verified: the registry decides
whether a 10-digit number exists.
"""

import re
from datetime import date
from typing import Callable, Optional

from .base import ValidationError

NIP_SEPARATORS = re.compile(r"[- ]")
NIP_PATTERN = re.compile(r"[0-9]{10}")
BANK_ACCOUNT_PATTERN = re.compile(r"[0-9]{26}")
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def normalize_nip(nip: str) -> str:
    """
    Strip hyphens and spaces from a NIP.

    Args:
        nip: NIP in any common format (e.g. "123-456-78-90", "123 456 78 90")

    Returns:
        The NIP with separators removed; not validated
    """
    return NIP_SEPARATORS.sub("", nip)


def validate_nip(nip, tool_name: str = None) -> str:
    """Normalize a NIP and require exactly 10 ASCII digits."""
    normalized = normalize_nip(nip) if isinstance(nip, str) else ""
    if not NIP_PATTERN.fullmatch(normalized):
        raise ValidationError("NIP must be exactly 10 digits", tool_name=tool_name)
    return normalized


def validate_bank_account(bank_account, tool_name: str = None) -> str:
    """Require exactly 26 ASCII digits. No separators are stripped."""
    if not isinstance(bank_account, str) or not BANK_ACCOUNT_PATTERN.fullmatch(bank_account):
        raise ValidationError("Bank account must be exactly 26 digits", tool_name=tool_name)
    return bank_account


def resolve_date(
    value: Optional[str],
    clock: Callable[[], date],
    tool_name: str = None
) -> str:
    """
    Return the query date as YYYY-MM-DD.

    An empty or missing value falls back to clock(). A supplied value only has
    to match the YYYY-MM-DD shape; calendar validity is left to the registry.
    """
    if not value:
        return clock().isoformat()
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        raise ValidationError("Date must be in YYYY-MM-DD format", tool_name=tool_name)
    return value
