"""Input record type consumed by the analytics engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import pandas as pd


@dataclass(frozen=True)
class SalesRecord:
    """One point-of-sale transaction.

    Attributes:
        date: Calendar date string, opaque to the engine.
        timestamp: Full date-time of the sale.
        payment_method: Payment category label, e.g. "cash" or "card".
        customer_id: Payment instrument identifier used as a customer proxy.
            Compared as an exact, case-sensitive string.
        amount: Sale amount in currency units (expected > 0).
        product_name: Label of the item sold.
    """

    date: str
    timestamp: datetime
    payment_method: str
    customer_id: str
    amount: float
    product_name: str

    @property
    def hour(self) -> int:
        """Wall-clock hour (0-23) of the timestamp."""
        return self.timestamp.hour

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> SalesRecord:
        """Build a record from a row keyed by the export's column names.

        Expects ``datetime``, ``cash_type``, ``card``, ``money`` and
        ``coffee_name``; ``date`` defaults to the timestamp's date.

        Examples:
            >>> rec = SalesRecord.from_mapping({
            ...     "datetime": "2024-03-01 08:15:00", "cash_type": "card",
            ...     "card": "ANON-1", "money": 38.7, "coffee_name": "Latte",
            ... })
            >>> rec.hour
            8
        """
        timestamp = pd.Timestamp(row["datetime"]).to_pydatetime()
        return cls(
            date=str(row.get("date") or timestamp.date().isoformat()),
            timestamp=timestamp,
            payment_method=str(row["cash_type"]),
            customer_id=str(row["card"]),
            amount=float(row["money"]),
            product_name=str(row["coffee_name"]),
        )
