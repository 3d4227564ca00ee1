"""Domain constants for P&L reporting."""

NO_PROPERTY = "No Property"
ALL_PROPERTIES = "All Properties"
UNKNOWN_ACCOUNT = "Unknown Account"
TRAILING_12_LABEL = "Trailing 12 Months"

# Matched as substrings of the account type or detail type.
BALANCE_SHEET_KEYWORDS = (
    "asset",
    "liability",
    "liabilities",
    "equity",
    "retained earnings",
    "capital",
    "receivable",
    "payable",
    "cash",
    "bank",
    "inventory",
    "equipment",
    "property",
    "building",
    "loan",
    "credit card",
    "payroll liability",
)

REVENUE_TYPES = ("income", "revenue", "sales")
OPERATING_EXPENSE_TYPES = ("expense", "expenses")

COGS_TYPES = ("cost of goods sold", "cogs")
COGS_DETAIL_KEYWORDS = ("cost of goods sold", "cogs")
COGS_NAME_KEYWORDS = (
    "cost of sales",
    "cost of goods",
    "direct cost",
    "materials cost",
    "labor cost",
)

OTHER_INCOME_TYPES = ("other income",)
OTHER_INCOME_DETAIL_KEYWORDS = (
    "other income",
    "interest income",
    "dividend income",
    "gain on sale",
)
OTHER_INCOME_NAME_KEYWORDS = (
    "interest income",
    "dividend",
    "gain on",
    "other income",
)

OTHER_EXPENSE_TYPES = ("other expense",)
OTHER_EXPENSE_DETAIL_KEYWORDS = (
    "other expense",
    "interest expense",
    "loss on sale",
    "depreciation",
)
OTHER_EXPENSE_NAME_KEYWORDS = (
    "interest expense",
    "depreciation",
    "amortization",
    "loss on",
    "other expense",
)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


__all__ = [
    "NO_PROPERTY",
    "ALL_PROPERTIES",
    "UNKNOWN_ACCOUNT",
    "TRAILING_12_LABEL",
    "BALANCE_SHEET_KEYWORDS",
    "REVENUE_TYPES",
    "OPERATING_EXPENSE_TYPES",
    "COGS_TYPES",
    "COGS_DETAIL_KEYWORDS",
    "COGS_NAME_KEYWORDS",
    "OTHER_INCOME_TYPES",
    "OTHER_INCOME_DETAIL_KEYWORDS",
    "OTHER_INCOME_NAME_KEYWORDS",
    "OTHER_EXPENSE_TYPES",
    "OTHER_EXPENSE_DETAIL_KEYWORDS",
    "OTHER_EXPENSE_NAME_KEYWORDS",
    "MONTH_NAMES",
]
