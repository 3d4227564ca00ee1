"""Classification of ledger accounts into P&L categories."""

from src.domain.constants import (
    BALANCE_SHEET_KEYWORDS,
    COGS_DETAIL_KEYWORDS,
    COGS_NAME_KEYWORDS,
    COGS_TYPES,
    OPERATING_EXPENSE_TYPES,
    OTHER_EXPENSE_DETAIL_KEYWORDS,
    OTHER_EXPENSE_NAME_KEYWORDS,
    OTHER_EXPENSE_TYPES,
    OTHER_INCOME_DETAIL_KEYWORDS,
    OTHER_INCOME_NAME_KEYWORDS,
    OTHER_INCOME_TYPES,
    REVENUE_TYPES,
)
from src.domain.models.ledger import PLCategory


def classify_account(
    account_type: str | None,
    account_detail_type: str | None,
    account_name: str | None,
) -> PLCategory | None:
    """Return the P&L category of an account.

    Balance-sheet types are rejected first. Remaining accounts go through
    ordered rules and the first match wins.

    Args:
        account_type: Source account type.
        account_detail_type: Source detail type.
        account_name: Account name, used for keyword rules.

    Returns:
        PLCategory | None: Category, or None when the account is excluded
        from the P&L.
    """
    type_ = _clean(account_type)
    detail = _clean(account_detail_type)
    name = _clean(account_name)

    if _contains_any(type_, BALANCE_SHEET_KEYWORDS) or _contains_any(
        detail, BALANCE_SHEET_KEYWORDS
    ):
        return None

    if type_ in REVENUE_TYPES:
        return PLCategory.REVENUE
    if (
        type_ in COGS_TYPES
        or _contains_any(detail, COGS_DETAIL_KEYWORDS)
        or _contains_any(name, COGS_NAME_KEYWORDS)
    ):
        return PLCategory.COGS
    if (
        type_ in OTHER_INCOME_TYPES
        or _contains_any(detail, OTHER_INCOME_DETAIL_KEYWORDS)
        or _contains_any(name, OTHER_INCOME_NAME_KEYWORDS)
    ):
        return PLCategory.OTHER_INCOME
    if (
        type_ in OTHER_EXPENSE_TYPES
        or _contains_any(detail, OTHER_EXPENSE_DETAIL_KEYWORDS)
        or _contains_any(name, OTHER_EXPENSE_NAME_KEYWORDS)
    ):
        return PLCategory.OTHER_EXPENSES
    if type_ in OPERATING_EXPENSE_TYPES:
        return PLCategory.OPERATING_EXPENSES

    if "income" in type_ or "revenue" in type_:
        return PLCategory.REVENUE
    if "expense" in type_ or "cost" in type_:
        return PLCategory.OPERATING_EXPENSES
    return None


def _clean(value: str | None) -> str:
    return (value or "").strip().lower()


def _contains_any(value: str, keywords: tuple[str, ...]) -> bool:
    return bool(value) and any(keyword in value for keyword in keywords)


__all__ = ["classify_account"]
