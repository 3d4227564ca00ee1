"""Aggregation of ledger entries into period buckets."""

from bisect import bisect_right
from collections.abc import Iterable, Sequence
from datetime import date

from src.domain.models.ledger import LedgerEntry, PLCategory, PeriodRange
from src.domain.models.pnl import (
    AccountAggregate,
    AccountGroup,
    PeriodBucket,
    SubAccount,
)
from src.domain.services.classification import classify_account


def aggregate_entries(
    entries: Iterable[LedgerEntry],
    ranges: Sequence[PeriodRange],
    group_by_property: bool = False,
) -> list[PeriodBucket]:
    """Group entries into per-period, per-account aggregates.

    Entries without a date, outside every range, or classified out of the
    P&L are dropped. The first entry of an account fixes its category and
    source types.

    Args:
        entries: Ledger lines to aggregate.
        ranges: Non-overlapping inclusive ranges.
        group_by_property: Track entries per property label as well.

    Returns:
        list[PeriodBucket]: One bucket per range, ordered by start date.
    """
    ordered = sorted(ranges, key=lambda period: period.start)
    buckets = [PeriodBucket(period=period) for period in ordered]
    starts = [period.start for period in ordered]
    properties_seen: list[set[str]] = [set() for _ in ordered]

    for entry in entries:
        if entry.date is None:
            continue
        index = _find_range(starts, ordered, entry.date)
        if index is None:
            continue
        category = classify_account(
            entry.account_type,
            entry.account_detail_type,
            entry.account,
        )
        if category is None:
            continue
        accounts = buckets[index].accounts
        aggregate = accounts.get(entry.account)
        if aggregate is None:
            aggregate = AccountAggregate(
                name=entry.account,
                category=category,
                property_entries={} if group_by_property else None,
                account_type=entry.account_type,
                account_detail_type=entry.account_detail_type,
            )
            accounts[entry.account] = aggregate
        aggregate.add(entry, by_property=group_by_property)
        if group_by_property:
            properties_seen[index].add(entry.property_name)

    if group_by_property:
        for bucket, seen in zip(buckets, properties_seen):
            _fill_properties(bucket.accounts.values(), sorted(seen))
    return buckets


def merge_buckets(
    buckets: Sequence[PeriodBucket],
    label: str,
) -> PeriodBucket:
    """Collapse several buckets into one spanning all of them.

    Args:
        buckets: Buckets in chronological order.
        label: Label of the merged bucket.

    Returns:
        PeriodBucket: Bucket whose range runs from the first start to the
        last end, holding the merged accounts.

    Raises:
        ValueError: If no bucket is given.
    """
    if not buckets:
        raise ValueError("Cannot merge an empty list of buckets.")
    period = PeriodRange(
        start=min(bucket.period.start for bucket in buckets),
        end=max(bucket.period.end for bucket in buckets),
        label=label,
    )
    accounts = {account.name: account for account in merge_accounts(buckets)}
    return PeriodBucket(period=period, accounts=accounts)


def merge_accounts(buckets: Sequence[PeriodBucket]) -> list[AccountAggregate]:
    """Roll each account up across all buckets.

    Args:
        buckets: Buckets in chronological order.

    Returns:
        list[AccountAggregate]: New aggregates in first-seen order, with
        entries concatenated in period order.
    """
    merged: dict[str, AccountAggregate] = {}
    properties: set[str] = set()
    for bucket in buckets:
        for account in bucket.accounts.values():
            target = merged.get(account.name)
            if target is None:
                target = AccountAggregate(
                    name=account.name,
                    category=account.category,
                    account_type=account.account_type,
                    account_detail_type=account.account_detail_type,
                )
                merged[account.name] = target
            target.entries.extend(account.entries)
            if account.property_entries is not None:
                for prop, prop_entries in account.property_entries.items():
                    target.ensure_property(prop).extend(prop_entries)
                    properties.add(prop)
    if properties:
        _fill_properties(merged.values(), sorted(properties))
    return list(merged.values())


def group_accounts_by_parent(
    accounts: Iterable[AccountAggregate],
) -> list[AccountGroup]:
    """Fold ``Parent:Child`` accounts under synthesized parents.

    A colon-free account whose name matches a derived parent becomes a
    parent-as-child row of that parent. Groups are sorted by name ignoring
    case; children are sorted with the parent-as-child row first, then by
    name.

    Args:
        accounts: Aggregates of a single view.

    Returns:
        list[AccountGroup]: Standalone accounts and parent groups.
    """
    accounts = list(accounts)
    parent_names = {
        _split_account_name(account.name)[0]
        for account in accounts
        if ":" in account.name
    }

    children: dict[str, list[SubAccount]] = {}
    categories: dict[str, PLCategory] = {}
    standalone: list[AccountGroup] = []
    for account in accounts:
        if ":" in account.name:
            parent, child = _split_account_name(account.name)
            children.setdefault(parent, []).append(
                SubAccount(name=child, aggregate=account)
            )
            categories.setdefault(parent, account.category)
        elif account.name in parent_names:
            children.setdefault(account.name, []).append(
                SubAccount(
                    name=account.name,
                    aggregate=account,
                    is_parent_as_child=True,
                )
            )
            categories.setdefault(account.name, account.category)
        else:
            standalone.append(
                AccountGroup(
                    name=account.name,
                    category=account.category,
                    aggregate=account,
                )
            )

    parents = [
        AccountGroup(
            name=parent,
            category=categories[parent],
            sub_accounts=tuple(
                sorted(
                    subs,
                    key=lambda sub: (
                        not sub.is_parent_as_child,
                        sub.name.casefold(),
                    ),
                )
            ),
        )
        for parent, subs in children.items()
    ]
    return sorted(
        [*standalone, *parents],
        key=lambda group: group.name.casefold(),
    )


def _find_range(
    starts: list[date],
    ranges: list[PeriodRange],
    value: date,
) -> int | None:
    index = bisect_right(starts, value) - 1
    if index < 0 or not ranges[index].contains(value):
        return None
    return index


def _fill_properties(
    accounts: Iterable[AccountAggregate],
    properties: list[str],
) -> None:
    for account in accounts:
        for prop in properties:
            account.ensure_property(prop)


def _split_account_name(name: str) -> tuple[str, str]:
    parent, _, child = name.partition(":")
    return parent.strip(), child.strip()


__all__ = [
    "aggregate_entries",
    "merge_buckets",
    "merge_accounts",
    "group_accounts_by_parent",
]
