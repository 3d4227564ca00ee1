"""Domain models for ledger lines and reporting periods."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from src.domain.constants import NO_PROPERTY


class PLCategory(Enum):
    """Profit-and-loss category of a ledger account."""

    REVENUE = "Revenue"
    COGS = "COGS"
    OPERATING_EXPENSES = "Operating Expenses"
    OTHER_INCOME = "Other Income"
    OTHER_EXPENSES = "Other Expenses"

    @property
    def is_income(self) -> bool:
        """Return True for categories carried on the credit side."""
        return self in (PLCategory.REVENUE, PLCategory.OTHER_INCOME)


class PeriodKind(Enum):
    """Reporting period selected by the user."""

    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    YEARLY = "Yearly"
    TRAILING_12 = "Trailing 12"


class Breakdown(Enum):
    """Whether a period is reported as one bucket or split further."""

    TOTAL = "total"
    DETAILED = "detailed"


@dataclass(frozen=True)
class LedgerEntry:
    """A single ledger line as read from the data source.

    Attributes:
        date: Posting date, None when the source value is missing or invalid.
        account: Account name, possibly ``Parent:Child``.
        account_type: Source account type used for classification.
        account_detail_type: Source detail type used for classification.
        property_name: Class/property tag, ``No Property`` when blank.
        amount: Signed amount, None when the source value is not numeric.
        debit: Optional debit column.
        credit: Optional credit column.
        entry_id: Optional source identifier.
        memo: Optional free-text memo.
    """

    date: date | None
    account: str
    account_type: str = ""
    account_detail_type: str = ""
    property_name: str = NO_PROPERTY
    amount: Decimal | None = None
    debit: Decimal | None = None
    credit: Decimal | None = None
    entry_id: str | None = None
    memo: str | None = None

    @property
    def has_debit_credit(self) -> bool:
        """Return True when separate debit/credit columns are populated."""
        return self.debit is not None or self.credit is not None

    def normalized_amount(self, category: PLCategory) -> Decimal:
        """Return the amount signed by the category's natural balance.

        Lines with debit/credit columns use ``credit - debit`` for income
        categories and ``debit - credit`` for cost categories. Lines with a
        single amount column are already netted by the source and are used
        as stored. Missing values count as zero.

        Args:
            category: Category the line was classified into.

        Returns:
            Decimal: Amount to accumulate into the account total.
        """
        if self.has_debit_credit:
            debit = self.debit or Decimal("0")
            credit = self.credit or Decimal("0")
            if category.is_income:
                return credit - debit
            return debit - credit
        if self.amount is None:
            return Decimal("0")
        return self.amount


@dataclass(frozen=True)
class PeriodRange:
    """Inclusive date range labelled for display."""

    start: date
    end: date
    label: str

    def contains(self, value: date) -> bool:
        """Return True when the date falls inside the range."""
        return self.start <= value <= self.end


__all__ = [
    "PLCategory",
    "PeriodKind",
    "Breakdown",
    "LedgerEntry",
    "PeriodRange",
]
