"""Period-over-period and property-over-property comparisons."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models.ledger import LedgerEntry
from src.domain.models.pnl import VarianceRow
from src.domain.services.classification import classify_account


def compute_variance(
    entries_a: Iterable[LedgerEntry],
    entries_b: Iterable[LedgerEntry],
) -> list[VarianceRow]:
    """Compare per-account totals of two entry sets.

    Only P&L accounts are compared. Amounts are normalized the same way as
    in the period aggregates.

    Args:
        entries_a: Entries of the left side.
        entries_b: Entries of the right side.

    Returns:
        list[VarianceRow]: Rows sorted by absolute variance, largest first.
    """
    totals: dict[str, list[Decimal]] = {}
    for side, entries in enumerate((entries_a, entries_b)):
        for entry in entries:
            category = classify_account(
                entry.account_type,
                entry.account_detail_type,
                entry.account,
            )
            if category is None:
                continue
            pair = totals.setdefault(
                entry.account, [Decimal("0"), Decimal("0")]
            )
            pair[side] += entry.normalized_amount(category)

    rows = [
        VarianceRow(account=account, a=pair[0], b=pair[1])
        for account, pair in totals.items()
    ]
    return sorted(rows, key=lambda row: (-abs(row.variance), row.account))


__all__ = ["compute_variance"]
