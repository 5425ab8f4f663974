"""Shared fixtures for POS Insights tests."""

from datetime import datetime

import pytest

from pos_insights.records import SalesRecord


def make_record(
    product: str,
    amount: float,
    method: str = "card",
    customer: str = "c1",
    hour: int = 10,
    day: int = 1,
) -> SalesRecord:
    """Build a SalesRecord with a timestamp at the given hour."""
    timestamp = datetime(2024, 3, day, hour, 15, 0)
    return SalesRecord(
        date=timestamp.date().isoformat(),
        timestamp=timestamp,
        payment_method=method,
        customer_id=customer,
        amount=amount,
        product_name=product,
    )


@pytest.fixture
def scenario_a_records() -> list[SalesRecord]:
    """Three sales over two products, two payment methods and two customers."""
    return [
        make_record("Latte", 3.00, method="cash", customer="c1", hour=8),
        make_record("Latte", 3.00, method="card", customer="c2", hour=8),
        make_record("Espresso", 2.00, method="cash", customer="c1", hour=9),
    ]


@pytest.fixture
def mixed_records() -> list[SalesRecord]:
    """A larger, skewed day of sales used for conservation checks."""
    return [
        make_record("Americano", 28.9, method="card", customer="ANON-0001", hour=10),
        make_record("Hot Chocolate", 38.7, method="card", customer="ANON-0002", hour=12),
        make_record("Americano", 28.9, method="cash", customer="anonymous", hour=7),
        make_record("Cappuccino", 38.7, method="card", customer="ANON-0001", hour=13),
        make_record("Latte", 38.7, method="card", customer="ANON-0003", hour=15),
        make_record("Americano", 33.8, method="card", customer="ANON-0001", hour=18),
        make_record("Cortado", 24.0, method="cash", customer="anonymous", hour=19),
        make_record("Latte", 38.7, method="card", customer="ANON-0001", hour=19),
        make_record("Espresso", 24.0, method="cash", customer="anonymous", hour=10),
        make_record("Latte", 33.8, method="card", customer="ANON-0001", hour=22),
        make_record("Cocoa", 33.8, method="card", customer="ANON-0001", hour=22),
        make_record("Latte", 38.7, method="card", customer="ANON-0003", hour=8),
    ]
