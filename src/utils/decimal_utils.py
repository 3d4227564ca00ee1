"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def parse_decimal(value) -> Decimal | None:
    """Parse a raw value into a finite Decimal.

    Args:
        value: Raw value (Decimal, int, float, numeric string or None).

    Returns:
        Decimal | None: Parsed value, or None when it is missing, blank,
        boolean or not a finite number.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return None
    try:
        parsed = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return parsed if parsed.is_finite() else None


__all__ = ["parse_decimal"]
