"""Shared utilities for cleaning POS sales exports.

This module provides helpers for normalizing headers and text, parsing
amounts and parsing timestamps from loosely formatted CSV exports.

Examples:
    >>> from pos_insights.ingest.cleaning import to_float, to_snake
    >>> to_float("1,234.56")
    1234.56
    >>> to_snake("Coffee Name")
    'coffee_name'
"""

from __future__ import annotations

import math
import re
import unicodedata
from typing import Any, Optional

import numpy as np
import pandas as pd

# Unicode characters that should be stripped from text
NBSP = "\u00a0"  # Non-breaking space
NNBSP = "\u202f"  # Narrow non-breaking space
ZW = "".join(chr(c) for c in (0x200B, 0x200C, 0x200D, 0xFEFF))  # Zero-width characters

# Strip currency symbols while preserving number separators
_CURRENCY_RE = re.compile(r"[^\d,.\-\(\)\s]")


def strip_invisibles(x: Any) -> Optional[str]:
    """Remove invisible and problematic whitespace characters from text.

    Strips carriage returns, tabs, non-breaking and zero-width characters
    and collapses runs of whitespace.

    Args:
        x: Value to clean (string, number, or None).

    Returns:
        Cleaned string or None if input is None/NaN.

    Examples:
        >>> strip_invisibles("  Hello\u00a0World  ")
        'Hello World'
        >>> strip_invisibles(None)
        None
    """
    if x is None or (isinstance(x, float) and pd.isna(x)):
        return None
    s = str(x)
    s = s.replace("\r", "").replace("\t", " ").replace(NBSP, " ").replace(NNBSP, " ")
    s = re.sub(r"[%s]" % re.escape(ZW), "", s)  # zero-width
    s = re.sub(r"\s+", " ", s).strip()
    return s


def to_float(x: Any) -> Optional[float]:
    """Parse an amount in US or EU notation.

    Handles '1,234.56', '1.234,56', '(1,234.56)' for negatives and
    leading currency symbols such as '$ 38.70'.

    Args:
        x: Value to parse (string, number, or None).

    Returns:
        Parsed float value or None if parsing fails.

    Examples:
        >>> to_float("1.234,56")
        1234.56
        >>> to_float("(12.50)")
        -12.5
        >>> to_float("n/a")
        None
    """
    if x is None or (isinstance(x, float) and (math.isnan(x) or math.isinf(x))):
        return None
    if isinstance(x, (int, float, np.integer, np.floating)) and not isinstance(x, bool):
        value = float(x)
        return value if math.isfinite(value) else None
    s = str(x).strip()
    if not s:
        return None

    neg = False
    if s.startswith("(") and s.endswith(")"):
        neg, s = True, s[1:-1].strip()

    s = _CURRENCY_RE.sub("", s)
    s = re.sub(r"\s+", "", s)
    if not s:
        return None

    def _finalize(num_str: str) -> Optional[float]:
        try:
            v = float(num_str)
        except ValueError:
            return None
        return -v if neg else v

    # 1.234,56 (EU)
    if re.fullmatch(r"\d{1,3}(?:\.\d{3})+,\d{1,2}", s):
        return _finalize(s.replace(".", "").replace(",", "."))

    # 1,234.56 (US)
    if re.fullmatch(r"\d{1,3}(?:,\d{3})+(?:\.\d{1,2})?", s):
        return _finalize(s.replace(",", ""))

    if "," in s and "." not in s:
        # comma is the decimal separator
        return _finalize(s.replace(",", "."))

    return _finalize(s)


def to_timestamp(val: Any) -> pd.Timestamp:
    """Parse a sale timestamp.

    Tries ISO date-times first, then month-first and day-first slash
    layouts, then pandas auto-detection. Ambiguous slash dates such as
    "03/01/2024" are read month-first.

    Args:
        val: Value to parse (string, Timestamp, datetime64, or None).

    Returns:
        Parsed Timestamp or pd.NaT if parsing fails.

    Examples:
        >>> to_timestamp("2024-03-01 10:15:50.520")
        Timestamp('2024-03-01 10:15:50.520000')
        >>> to_timestamp("garbage")
        NaT
    """
    if val is None or (isinstance(val, float) and pd.isna(val)):
        return pd.NaT
    if isinstance(val, (pd.Timestamp, np.datetime64)):
        return pd.to_datetime(val, errors="coerce")
    s = strip_invisibles(val)
    if not s:
        return pd.NaT
    for fmt in ("ISO8601", "%m/%d/%Y %H:%M", "%d/%m/%Y %H:%M", "%d-%m-%Y %H:%M"):
        try:
            return pd.to_datetime(s, format=fmt, errors="raise")
        except (ValueError, TypeError):
            pass
    return pd.to_datetime(s, errors="coerce")


def remove_accents(s: str) -> str:
    """Remove accents and diacritics from a string.

    Examples:
        >>> remove_accents("Café")
        'Cafe'
    """
    return "".join(c for c in unicodedata.normalize("NFD", s) if unicodedata.category(c) != "Mn")


def to_snake(s: str) -> str:
    """Convert a column header to snake_case.

    Examples:
        >>> to_snake("Coffee Name")
        'coffee_name'
        >>> to_snake(" Cash-Type ")
        'cash_type'
    """
    s0 = strip_invisibles(s) or ""
    s1 = remove_accents(s0).lower()
    s1 = re.sub(r"[^\w\s]", " ", s1)
    s1 = re.sub(r"\s+", "_", s1).strip("_")
    return s1
