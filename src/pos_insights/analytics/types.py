"""Aggregate view types produced by the analytics engine.

All types are frozen dataclasses and sequences are stored as tuples, so
an AnalyticsResult cannot be modified once it has been built.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductAggregate:
    """Per-product rollup.

    Attributes:
        name: Product label.
        order_count: Number of records sold under this label.
        total_revenue: Sum of amounts for this label.
        average_price: total_revenue / order_count, rounded for display.
    """

    name: str
    order_count: int
    total_revenue: float
    average_price: float


@dataclass(frozen=True)
class HourlyAggregate:
    """Orders and revenue for one wall-clock hour (0-23)."""

    hour: int
    order_count: int
    total_revenue: float

    @property
    def label(self) -> str:
        return f"{self.hour}:00"


@dataclass(frozen=True)
class PaymentAggregate:
    """Per-payment-method rollup.

    Attributes:
        method: Payment method label.
        order_count: Number of records paid with this method.
        total_revenue: Sum of amounts paid with this method.
        share_percent: 100 * order_count / total_orders as a display
            string with fixed decimals, e.g. "66.7".
    """

    method: str
    order_count: int
    total_revenue: float
    share_percent: str


@dataclass(frozen=True)
class FrequencyBucket:
    """Number of distinct customers whose order count falls in a range."""

    label: str
    customer_count: int


@dataclass(frozen=True)
class PriceVolumePoint:
    product_name: str
    average_price: float
    order_count: int


@dataclass(frozen=True)
class AnalyticsResult:
    """Composite output of one engine run.

    Attributes:
        total_revenue: Sum of all amounts.
        total_orders: Number of records analyzed.
        average_order_value: total_revenue / total_orders.
        unique_customer_count: Number of distinct customer ids.
        products: Product rollups in first-seen order.
        hourly: Hour rollups in ascending hour order.
        payments: Payment method rollups in first-seen order.
        frequency: Customer frequency buckets in first-seen order.
        price_volume: One point per product, same order as products.
    """

    total_revenue: float
    total_orders: int
    average_order_value: float
    unique_customer_count: int
    products: tuple[ProductAggregate, ...]
    hourly: tuple[HourlyAggregate, ...]
    payments: tuple[PaymentAggregate, ...]
    frequency: tuple[FrequencyBucket, ...]
    price_volume: tuple[PriceVolumePoint, ...]
