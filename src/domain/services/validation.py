"""Domain validation helpers for fetched ledger batches."""

from collections.abc import Sequence
from logging import Logger

from src.domain.models.ledger import LedgerEntry
from src.domain.models.pnl import EntryValidationReport


def validate_entries(
    entries: Sequence[LedgerEntry | None],
    source: str,
    logger: Logger,
    expected_count: int | None = None,
) -> EntryValidationReport:
    """Check a fetched batch for integrity problems.

    Nothing is raised: problems are counted, listed in the report and
    logged as a warning.

    Args:
        entries: Entries as returned by a repository.
        source: Label of the batch, used in messages.
        logger: Logger used for warnings.
        expected_count: Optional number of rows the caller expected.

    Returns:
        EntryValidationReport: Counters and issue messages.
    """
    issues: list[str] = []
    null_records = invalid_amounts = missing_dates = duplicate_ids = 0
    seen_ids: set[str] = set()

    for index, entry in enumerate(entries):
        if entry is None:
            null_records += 1
            issues.append(f"Record {index} is empty")
            continue
        if entry.amount is None and not entry.has_debit_credit:
            invalid_amounts += 1
            issues.append(f"Record {index} has an invalid amount")
        if entry.date is None:
            missing_dates += 1
            issues.append(f"Record {index} has a missing date")
        if entry.entry_id is not None:
            if entry.entry_id in seen_ids:
                duplicate_ids += 1
                issues.append(f"Duplicate id found: {entry.entry_id}")
            else:
                seen_ids.add(entry.entry_id)

    if expected_count is not None and expected_count != len(entries):
        issues.append(f"Expected {expected_count} records, got {len(entries)}")

    report = EntryValidationReport(
        source=source,
        total_records=len(entries),
        null_records=null_records,
        invalid_amounts=invalid_amounts,
        missing_dates=missing_dates,
        duplicate_ids=duplicate_ids,
        issues=tuple(issues),
    )
    if not report.is_valid:
        logger.warning(
            f"Data integrity issues in {source}: {len(issues)} issue(s), "
            f"invalid_amounts={invalid_amounts}, missing_dates={missing_dates}, "
            f"duplicate_ids={duplicate_ids}"
        )
    return report


__all__ = ["validate_entries"]
