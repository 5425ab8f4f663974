"""Grouping primitives used by the analytics engine.

Every grouping is a single pass that accumulates a running count and sum
per key. Keys are kept in a plain dict, which preserves insertion order,
so iterating the result yields groups in first-seen order.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from pos_insights.records import SalesRecord

K = TypeVar("K", bound=Hashable)

# (upper bound inclusive, label); counts above the last bound fall in OPEN_BUCKET
FREQUENCY_BUCKETS: tuple[tuple[int, str], ...] = (
    (1, "1 order"),
    (3, "2-3 orders"),
    (5, "4-5 orders"),
)
OPEN_BUCKET = "6+ orders"


@dataclass
class GroupTotals:
    """Running totals for one grouping key."""

    count: int = 0
    revenue: float = 0.0

    def add(self, amount: float) -> None:
        self.count += 1
        self.revenue += amount

    @property
    def average(self) -> float:
        return self.revenue / self.count


def group_records(
    records: Iterable[SalesRecord],
    key: Callable[[SalesRecord], K],
) -> dict[K, GroupTotals]:
    """Accumulate count and revenue per key in first-seen order.

    Args:
        records: Records to group.
        key: Function extracting the grouping key from a record.

    Returns:
        Insertion-ordered mapping of key to its totals.

    Examples:
        >>> totals = group_records(records, key=lambda r: r.product_name)
        >>> [(name, t.count) for name, t in totals.items()]
        [('Latte', 2), ('Espresso', 1)]
    """
    groups: dict[K, GroupTotals] = {}
    for record in records:
        group_key = key(record)
        if group_key not in groups:
            groups[group_key] = GroupTotals()
        groups[group_key].add(record.amount)
    return groups


def frequency_bucket(order_count: int) -> str:
    """Map a customer's total order count to its bucket label.

    Examples:
        >>> frequency_bucket(1)
        '1 order'
        >>> frequency_bucket(3)
        '2-3 orders'
        >>> frequency_bucket(6)
        '6+ orders'
    """
    if order_count < 1:
        raise ValueError(f"order_count must be positive, got {order_count}")
    for upper, label in FREQUENCY_BUCKETS:
        if order_count <= upper:
            return label
    return OPEN_BUCKET


def count_by_customer(records: Iterable[SalesRecord]) -> dict[str, int]:
    """Count orders per customer id, in first-seen order of the customer."""
    counts: dict[str, int] = {}
    for record in records:
        counts[record.customer_id] = counts.get(record.customer_id, 0) + 1
    return counts


def bucket_customers(customer_counts: dict[str, int]) -> dict[str, int]:
    """Count customers per frequency bucket.

    Buckets appear in the order they are first reached while walking the
    customers in first-seen order. Buckets nobody falls into are omitted.
    """
    buckets: dict[str, int] = {}
    for order_count in customer_counts.values():
        label = frequency_bucket(order_count)
        buckets[label] = buckets.get(label, 0) + 1
    return buckets


def hour_range(hours: Sequence[int], dense: bool) -> list[int]:
    """Hours to emit for the hourly view, ascending.

    Sparse mode keeps only hours that were seen; dense mode covers the
    whole day.
    """
    if dense:
        return list(range(24))
    return sorted(hours)
