"""Mapping of raw ledger rows into domain entries."""

from collections.abc import Mapping

from src.domain.models.ledger import LedgerEntry
from src.domain.services.normalization import (
    normalize_account_name,
    normalize_property,
    parse_entry_date,
)
from src.utils.decimal_utils import parse_decimal


def ledger_entry_from_row(row: Mapping) -> LedgerEntry:
    """Build a LedgerEntry from a SQL mapping or JSON object.

    Both ``account_detail_type`` and ``detail_type`` column names are
    accepted. Malformed dates and amounts become None instead of raising.

    Args:
        row: Column name to value mapping.

    Returns:
        LedgerEntry: Normalized entry.
    """
    detail_type = row.get("account_detail_type")
    if detail_type is None:
        detail_type = row.get("detail_type")
    entry_id = row.get("id")
    return LedgerEntry(
        date=parse_entry_date(row.get("date")),
        account=normalize_account_name(row.get("account")),
        account_type=(row.get("account_type") or "").strip(),
        account_detail_type=(detail_type or "").strip(),
        property_name=normalize_property(row.get("class")),
        amount=parse_decimal(row.get("amount")),
        debit=parse_decimal(row.get("debit")),
        credit=parse_decimal(row.get("credit")),
        entry_id=str(entry_id) if entry_id is not None else None,
        memo=row.get("memo"),
    )


__all__ = ["ledger_entry_from_row"]
