"""Load sales records from POS CSV exports.

This module is the ingestion collaborator of the analytics engine: it
reads a delimited export, coerces each row into a SalesRecord and drops
rows that cannot satisfy the engine's input contract.

Expected columns (matched after snake_case normalization of headers):
    - datetime: sale timestamp (required)
    - cash_type: payment method (required)
    - money: sale amount (required)
    - coffee_name: product label (required)
    - date: calendar date (optional, derived from datetime when missing)
    - card: payment card identifier used as customer id (optional)
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pandas as pd

from pos_insights.exceptions import DataQualityError
from pos_insights.ingest.cleaning import strip_invisibles, to_float, to_snake, to_timestamp
from pos_insights.records import SalesRecord

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["datetime", "cash_type", "money", "coffee_name"]
OPTIONAL_COLUMNS = ["date", "card"]

DEFAULT_ANONYMOUS_CUSTOMER = "anonymous"


@dataclass
class LoadReport:
    """Row counts for one load.

    Attributes:
        rows_read: Rows present in the source.
        rows_kept: Rows converted into records.
        rows_dropped: Rows rejected.
        drop_reasons: Count of rejected rows per reason.
    """

    rows_read: int = 0
    rows_kept: int = 0
    rows_dropped: int = 0
    drop_reasons: Counter = field(default_factory=Counter)

    def drop(self, reason: str) -> None:
        self.rows_dropped += 1
        self.drop_reasons[reason] += 1


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and pd.isna(value):
        return True
    return str(value) == ""


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Rename columns to snake_case and check the required ones exist.

    Raises:
        DataQualityError: If required columns are missing.
    """
    df = df.rename(columns={col: to_snake(str(col)) for col in df.columns})
    missing_cols = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing_cols:
        raise DataQualityError(
            f"Missing required columns in sales data: {missing_cols}. "
            f"Required: {REQUIRED_COLUMNS}"
        )
    return df


def records_from_frame(
    df: pd.DataFrame,
    anonymous_customer: str = DEFAULT_ANONYMOUS_CUSTOMER,
) -> tuple[list[SalesRecord], LoadReport]:
    """Convert a raw sales DataFrame into SalesRecord values.

    Rows are dropped when the amount is missing, unparseable or not
    positive, when the product label is empty, or when the timestamp
    cannot be parsed. Rows without a card identifier are attributed to
    ``anonymous_customer``. Customer ids are otherwise kept verbatim.

    Args:
        df: Raw sales data, one row per sale.
        anonymous_customer: Customer id used for rows without a card.

    Returns:
        Tuple of (records in source order, LoadReport).

    Raises:
        DataQualityError: If required columns are missing.
    """
    df = normalize_columns(df)
    report = LoadReport(rows_read=len(df))
    records: list[SalesRecord] = []

    for row in df.to_dict(orient="records"):
        amount = to_float(row["money"])
        if amount is None or amount <= 0:
            report.drop("amount")
            continue

        product_name = strip_invisibles(row["coffee_name"])
        if not product_name:
            report.drop("product_name")
            continue

        timestamp = to_timestamp(row["datetime"])
        if pd.isna(timestamp):
            report.drop("timestamp")
            continue

        card = row.get("card")
        raw_date = row.get("date")
        records.append(
            SalesRecord(
                date=timestamp.date().isoformat() if _is_blank(raw_date) else str(raw_date),
                timestamp=timestamp.to_pydatetime(),
                payment_method=strip_invisibles(row["cash_type"]) or "",
                customer_id=anonymous_customer if _is_blank(card) else str(card),
                amount=amount,
                product_name=product_name,
            )
        )

    report.rows_kept = len(records)
    if report.rows_dropped:
        logger.warning(
            "Dropped %d of %d rows: %s",
            report.rows_dropped,
            report.rows_read,
            dict(report.drop_reasons),
        )
    logger.info("Loaded %d sales records", report.rows_kept)
    return records, report


def load_records(
    path: str | Path,
    anonymous_customer: str = DEFAULT_ANONYMOUS_CUSTOMER,
    sep: str = ",",
    encoding: str = "utf-8",
) -> tuple[list[SalesRecord], LoadReport]:
    """Read a sales CSV export into SalesRecord values.

    All columns are read as strings so that amount and timestamp parsing
    is done by the cleaning helpers rather than pandas type inference.

    Args:
        path: CSV file to read.
        anonymous_customer: Customer id used for rows without a card.
        sep: Field delimiter.
        encoding: Text encoding of the file, e.g. "latin-1" for legacy exports.

    Returns:
        Tuple of (records in file order, LoadReport).

    Raises:
        DataQualityError: If the file cannot be read or decoded, or lacks
            required columns.
    """
    path = Path(path)
    logger.info("Reading sales data from %s", path)
    try:
        df = pd.read_csv(
            path,
            sep=sep,
            encoding=encoding,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except (
        OSError,
        UnicodeDecodeError,
        LookupError,
        pd.errors.ParserError,
        pd.errors.EmptyDataError,
    ) as e:
        raise DataQualityError(f"Could not read sales data from {path}: {e}") from e
    return records_from_frame(df, anonymous_customer=anonymous_customer)
