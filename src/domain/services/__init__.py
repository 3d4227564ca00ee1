"""Domain services package."""

from .aggregation import (
    aggregate_entries,
    group_accounts_by_parent,
    merge_accounts,
    merge_buckets,
)
from .classification import classify_account
from .comparison import compute_variance
from .kpis import (
    category_total,
    compute_kpis,
    compute_property_breakdown,
    compute_trend,
    expense_breakdown,
    margin,
)
from .normalization import (
    normalize_account_name,
    normalize_property,
    parse_entry_date,
)
from .periods import (
    build_period_ranges,
    parse_reference_month,
    recent_months,
)
from .validation import validate_entries

__all__ = [
    "aggregate_entries",
    "group_accounts_by_parent",
    "merge_accounts",
    "merge_buckets",
    "classify_account",
    "compute_variance",
    "category_total",
    "compute_kpis",
    "compute_property_breakdown",
    "compute_trend",
    "expense_breakdown",
    "margin",
    "normalize_account_name",
    "normalize_property",
    "parse_entry_date",
    "build_period_ranges",
    "parse_reference_month",
    "recent_months",
    "validate_entries",
]
