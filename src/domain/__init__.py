"""Domain package for business rules and core models."""

from .constants import ALL_PROPERTIES, NO_PROPERTY, TRAILING_12_LABEL
from .models import (
    AccountAggregate,
    AccountGroup,
    Breakdown,
    LedgerEntry,
    PLCategory,
    PeriodBucket,
    PeriodKind,
    PeriodRange,
    ProfitAndLossKpis,
)
from .services import (
    aggregate_entries,
    build_period_ranges,
    classify_account,
    compute_kpis,
    group_accounts_by_parent,
)

__all__ = [
    "ALL_PROPERTIES",
    "NO_PROPERTY",
    "TRAILING_12_LABEL",
    "AccountAggregate",
    "AccountGroup",
    "Breakdown",
    "LedgerEntry",
    "PLCategory",
    "PeriodBucket",
    "PeriodKind",
    "PeriodRange",
    "ProfitAndLossKpis",
    "aggregate_entries",
    "build_period_ranges",
    "classify_account",
    "compute_kpis",
    "group_accounts_by_parent",
]
