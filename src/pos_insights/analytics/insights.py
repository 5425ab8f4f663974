"""Single-value "best of" facts derived from an AnalyticsResult.

Each lookup is a linear scan that keeps the first strict maximum, so ties
resolve to the element that appears first in the view's order: input
order for products, ascending hour for the hourly series.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from pos_insights.analytics.types import AnalyticsResult, HourlyAggregate, ProductAggregate
from pos_insights.exceptions import AnalyticsError

T = TypeVar("T")


@dataclass(frozen=True)
class Insights:
    """Headline facts for a human-readable summary.

    Attributes:
        top_product: Product with the highest total revenue.
        peak_hour: Hour with the most orders.
        orders_per_customer: total_orders / unique_customer_count.
        average_order_value: Copied from the result for convenience.
    """

    top_product: ProductAggregate
    peak_hour: HourlyAggregate
    orders_per_customer: float
    average_order_value: float


def first_max(items: Sequence[T], key: Callable[[T], float]) -> T:
    """Return the first item with the maximum key.

    Raises:
        AnalyticsError: If ``items`` is empty.
    """
    if not items:
        raise AnalyticsError("Cannot pick a maximum from an empty view")
    best = items[0]
    for item in items[1:]:
        if key(item) > key(best):
            best = item
    return best


def top_product(result: AnalyticsResult) -> ProductAggregate:
    return first_max(result.products, key=lambda p: p.total_revenue)


def peak_hour(result: AnalyticsResult) -> HourlyAggregate:
    return first_max(result.hourly, key=lambda h: h.order_count)


def orders_per_customer(result: AnalyticsResult) -> float:
    """Average number of orders per distinct customer.

    Raises:
        AnalyticsError: If the result has no customers.
    """
    if result.unique_customer_count == 0:
        raise AnalyticsError("orders_per_customer is undefined without customers")
    return result.total_orders / result.unique_customer_count


def extract_insights(result: AnalyticsResult) -> Insights:
    return Insights(
        top_product=top_product(result),
        peak_hour=peak_hour(result),
        orders_per_customer=orders_per_customer(result),
        average_order_value=result.average_order_value,
    )
