"""Domain models for profit-and-loss aggregates."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.models.ledger import LedgerEntry, PLCategory, PeriodRange


@dataclass
class AccountAggregate:
    """Entries of one account within one period.

    ``total`` and ``property_totals`` are derived from the stored entries so
    they always equal the sum of the normalized amounts.
    """

    name: str
    category: PLCategory
    entries: list[LedgerEntry] = field(default_factory=list)
    property_entries: dict[str, list[LedgerEntry]] | None = None
    account_type: str = ""
    account_detail_type: str = ""

    @property
    def total(self) -> Decimal:
        return sum(
            (entry.normalized_amount(self.category) for entry in self.entries),
            start=Decimal("0"),
        )

    @property
    def property_totals(self) -> dict[str, Decimal] | None:
        if self.property_entries is None:
            return None
        return {
            prop: sum(
                (entry.normalized_amount(self.category) for entry in entries),
                start=Decimal("0"),
            )
            for prop, entries in self.property_entries.items()
        }

    def add(self, entry: LedgerEntry, by_property: bool = False) -> None:
        """Append an entry, tracking its property when requested."""
        self.entries.append(entry)
        if by_property:
            self.ensure_property(entry.property_name).append(entry)

    def ensure_property(self, property_name: str) -> list[LedgerEntry]:
        """Return the entry list of a property, creating it if needed."""
        if self.property_entries is None:
            self.property_entries = {}
        return self.property_entries.setdefault(property_name, [])


@dataclass
class PeriodBucket:
    """Account aggregates falling inside one reporting period."""

    period: PeriodRange
    accounts: dict[str, AccountAggregate] = field(default_factory=dict)

    @property
    def label(self) -> str:
        return self.period.label


@dataclass(frozen=True)
class SubAccount:
    """Child row of a parent account group.

    Attributes:
        name: Display name (the part after the colon).
        aggregate: Aggregate of the full account name.
        is_parent_as_child: True when the row is the parent's own postings.
    """

    name: str
    aggregate: AccountAggregate
    is_parent_as_child: bool = False

    @property
    def total(self) -> Decimal:
        return self.aggregate.total


@dataclass(frozen=True)
class AccountGroup:
    """Top-level row after parent/child grouping.

    A standalone account carries its own aggregate and no sub-accounts.
    A parent carries only sub-accounts; its figures are the sums of theirs.
    """

    name: str
    category: PLCategory
    aggregate: AccountAggregate | None = None
    sub_accounts: tuple[SubAccount, ...] = ()

    @property
    def is_parent(self) -> bool:
        return bool(self.sub_accounts)

    @property
    def total(self) -> Decimal:
        if not self.is_parent:
            return self.aggregate.total if self.aggregate else Decimal("0")
        return sum(
            (child.total for child in self.sub_accounts),
            start=Decimal("0"),
        )

    @property
    def entries(self) -> list[LedgerEntry]:
        if not self.is_parent:
            return list(self.aggregate.entries) if self.aggregate else []
        return [
            entry
            for child in self.sub_accounts
            for entry in child.aggregate.entries
        ]

    @property
    def property_totals(self) -> dict[str, Decimal] | None:
        if not self.is_parent:
            return self.aggregate.property_totals if self.aggregate else None
        totals: dict[str, Decimal] | None = None
        for child in self.sub_accounts:
            child_totals = child.aggregate.property_totals
            if child_totals is None:
                continue
            if totals is None:
                totals = {}
            for prop, amount in child_totals.items():
                totals[prop] = totals.get(prop, Decimal("0")) + amount
        return totals


@dataclass(frozen=True)
class ProfitAndLossKpis:
    """Summary financials computed from account aggregates."""

    revenue: Decimal
    cogs: Decimal
    gross_profit: Decimal
    operating_expenses: Decimal
    net_operating_income: Decimal
    other_income: Decimal
    other_expenses: Decimal
    net_income: Decimal
    gross_margin: Decimal
    operating_margin: Decimal
    net_margin: Decimal


@dataclass(frozen=True)
class TrendPoint:
    """Headline figures for one period or property."""

    label: str
    revenue: Decimal
    gross_profit: Decimal
    operating_income: Decimal
    net_income: Decimal


@dataclass(frozen=True)
class ExpenseSlice:
    """Operating expense account share."""

    name: str
    amount: Decimal


@dataclass(frozen=True)
class VarianceRow:
    """Per-account comparison between two entry sets."""

    account: str
    a: Decimal
    b: Decimal

    @property
    def variance(self) -> Decimal:
        return self.a - self.b

    @property
    def variance_pct(self) -> Decimal | None:
        """Return the variance relative to ``|b|``, None when b is zero."""
        if self.b == 0:
            return None
        return self.variance / abs(self.b)


@dataclass(frozen=True)
class EntryValidationReport:
    """Data integrity figures for one fetched batch."""

    source: str
    total_records: int
    null_records: int = 0
    invalid_amounts: int = 0
    missing_dates: int = 0
    duplicate_ids: int = 0
    issues: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.issues


__all__ = [
    "AccountAggregate",
    "PeriodBucket",
    "SubAccount",
    "AccountGroup",
    "ProfitAndLossKpis",
    "TrendPoint",
    "ExpenseSlice",
    "VarianceRow",
    "EntryValidationReport",
]
