"""Public API for the sales analytics engine.

This module turns an in-memory sequence of validated SalesRecord values
into an AnalyticsResult without reading or writing any files.

The function:
- does NOT read or write any files,
- does NOT mutate its input,
- MAY log progress via the logging module.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence

from pos_insights.analytics.aggregate import (
    GroupTotals,
    bucket_customers,
    count_by_customer,
    group_records,
    hour_range,
)
from pos_insights.analytics.types import (
    AnalyticsResult,
    FrequencyBucket,
    HourlyAggregate,
    PaymentAggregate,
    PriceVolumePoint,
    ProductAggregate,
)
from pos_insights.config import AnalyticsConfig
from pos_insights.exceptions import EmptyInputError, InvalidRecordError
from pos_insights.records import SalesRecord

logger = logging.getLogger(__name__)


def validate_records(records: Sequence[SalesRecord]) -> None:
    """Check the ingestion contract on every record.

    Raises:
        InvalidRecordError: On the first record with a non-positive or
            non-finite amount, an empty product name or an empty customer id.
    """
    for index, record in enumerate(records):
        if not math.isfinite(record.amount) or record.amount <= 0:
            raise InvalidRecordError(index, f"amount must be positive, got {record.amount!r}")
        if not record.product_name:
            raise InvalidRecordError(index, "product_name is empty")
        if not record.customer_id:
            raise InvalidRecordError(index, "customer_id is empty")


def run_analytics(
    records: Iterable[SalesRecord],
    config: AnalyticsConfig | None = None,
) -> AnalyticsResult:
    """Compute every aggregate view over a collection of sales records.

    Product and payment groupings are emitted in first-seen order of their
    key; the hourly grouping is emitted in ascending hour order. Rounding
    and percentage formatting happen once, after accumulation.

    Args:
        records: Validated sales records. Order only affects the order of
            the product, payment and frequency views.
        config: Optional AnalyticsConfig. Defaults to AnalyticsConfig().

    Returns:
        AnalyticsResult with all views populated.

    Raises:
        EmptyInputError: If ``records`` is empty.
        InvalidRecordError: If validation is enabled and a record breaks
            the input contract.

    Examples:
        >>> result = run_analytics(records)
        >>> result.total_orders
        3
        >>> [p.name for p in result.products]
        ['Latte', 'Espresso']
    """
    config = config or AnalyticsConfig()
    records = list(records)

    if not records:
        raise EmptyInputError("Cannot run analytics on an empty record collection")

    if config.validate_records:
        validate_records(records)

    total_orders = len(records)
    overall = GroupTotals()
    for record in records:
        overall.add(record.amount)
    total_revenue = overall.revenue
    logger.info("Running analytics on %d records", total_orders)

    product_totals = group_records(records, key=lambda r: r.product_name)
    hourly_totals = group_records(records, key=lambda r: r.hour)
    payment_totals = group_records(records, key=lambda r: r.payment_method)
    customer_counts = count_by_customer(records)

    logger.debug(
        "Grouped into %d products, %d hours, %d payment methods, %d customers",
        len(product_totals),
        len(hourly_totals),
        len(payment_totals),
        len(customer_counts),
    )

    products = tuple(
        ProductAggregate(
            name=name,
            order_count=totals.count,
            total_revenue=totals.revenue,
            average_price=round(totals.average, config.price_decimals),
        )
        for name, totals in product_totals.items()
    )

    hourly = []
    for hour in hour_range(list(hourly_totals), dense=config.dense_hours):
        totals = hourly_totals.get(hour)
        hourly.append(
            HourlyAggregate(
                hour=hour,
                order_count=totals.count if totals else 0,
                total_revenue=totals.revenue if totals else 0.0,
            )
        )

    payments = tuple(
        PaymentAggregate(
            method=method,
            order_count=totals.count,
            total_revenue=totals.revenue,
            share_percent=f"{100 * totals.count / total_orders:.{config.share_decimals}f}",
        )
        for method, totals in payment_totals.items()
    )

    frequency = tuple(
        FrequencyBucket(label=label, customer_count=count)
        for label, count in bucket_customers(customer_counts).items()
    )

    price_volume = tuple(
        PriceVolumePoint(
            product_name=product.name,
            average_price=product.average_price,
            order_count=product.order_count,
        )
        for product in products
    )

    result = AnalyticsResult(
        total_revenue=total_revenue,
        total_orders=total_orders,
        average_order_value=total_revenue / total_orders,
        unique_customer_count=len(customer_counts),
        products=products,
        hourly=tuple(hourly),
        payments=payments,
        frequency=frequency,
        price_volume=price_volume,
    )

    logger.info(
        "Analytics complete: revenue=%.2f orders=%d customers=%d",
        result.total_revenue,
        result.total_orders,
        result.unique_customer_count,
    )
    return result
