"""Domain-specific exceptions for POS Insights.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from PosInsightsError for easy catching.
"""

from __future__ import annotations


class PosInsightsError(Exception):
    """Base exception for all POS Insights errors.

    Users can catch this exception to handle any error raised by the
    package, from ingestion through analytics.
    """

    pass


class ConfigError(PosInsightsError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - Invalid configuration values are provided
    - Environment variables cannot be parsed
    """

    pass


class DataQualityError(PosInsightsError):
    """Raised when input data cannot be turned into sales records.

    This exception is raised when:
    - Required columns are missing from the input file
    - The input file cannot be read
    """

    pass


class AnalyticsError(PosInsightsError):
    """Base class for failures of the aggregation engine."""

    pass


class EmptyInputError(AnalyticsError):
    """Raised when the engine is asked to analyze zero records.

    Analysis is only meaningful on non-empty data, so the engine refuses
    to build degenerate zero/NaN aggregates. Callers should either supply
    records or skip the analysis view entirely.
    """

    pass


class InvalidRecordError(AnalyticsError):
    """Raised when a record breaks the input contract.

    Attributes:
        index: Position of the offending record in the input sequence.
        reason: Short description of the violated precondition.
    """

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid record at position {index}: {reason}")
