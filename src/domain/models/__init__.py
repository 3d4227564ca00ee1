"""Domain models package."""

from .ledger import (
    Breakdown,
    LedgerEntry,
    PLCategory,
    PeriodKind,
    PeriodRange,
)
from .pnl import (
    AccountAggregate,
    AccountGroup,
    EntryValidationReport,
    ExpenseSlice,
    PeriodBucket,
    ProfitAndLossKpis,
    SubAccount,
    TrendPoint,
    VarianceRow,
)

__all__ = [
    "Breakdown",
    "LedgerEntry",
    "PLCategory",
    "PeriodKind",
    "PeriodRange",
    "AccountAggregate",
    "AccountGroup",
    "EntryValidationReport",
    "ExpenseSlice",
    "PeriodBucket",
    "ProfitAndLossKpis",
    "SubAccount",
    "TrendPoint",
    "VarianceRow",
]
