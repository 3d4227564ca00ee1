"""Domain normalization helpers for raw ledger values."""

from datetime import date, datetime

from src.domain.constants import NO_PROPERTY, UNKNOWN_ACCOUNT


def normalize_property(value: str | None) -> str:
    """Normalize a class/property label.

    Args:
        value: Raw ``class`` value from the data source.

    Returns:
        str: Trimmed label, or the ``No Property`` sentinel when blank.
    """
    if not value:
        return NO_PROPERTY
    cleaned = value.strip()
    return cleaned if cleaned else NO_PROPERTY


def normalize_account_name(value: str | None) -> str:
    """Normalize an account name.

    Args:
        value: Raw account name.

    Returns:
        str: Trimmed name, or ``Unknown Account`` when blank.
    """
    if not value:
        return UNKNOWN_ACCOUNT
    cleaned = value.strip()
    return cleaned if cleaned else UNKNOWN_ACCOUNT


def parse_entry_date(value) -> date | None:
    """Parse a posting date.

    Accepts ``date``/``datetime`` objects and ISO strings, with or without
    a time part.

    Args:
        value: Raw date value.

    Returns:
        date | None: Parsed date, or None when missing or malformed.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    candidate = value.strip()[:10]
    try:
        return date.fromisoformat(candidate)
    except ValueError:
        return None


__all__ = [
    "normalize_property",
    "normalize_account_name",
    "parse_entry_date",
]
