"""Configuration for the POS Insights analytics engine.

A single, simple configuration class controls the few presentation
policies the engine exposes. Defaults reproduce the dashboard behavior:
sparse hourly series, prices rounded to cents, shares to one decimal.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from pos_insights.exceptions import ConfigError

HOURLY_POLICIES = ("sparse", "dense")

ENV_PREFIX = "POS_INSIGHTS_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class AnalyticsConfig:
    """Policies applied when materializing an AnalyticsResult.

    Attributes:
        hourly_policy: "sparse" emits only hours with at least one order;
            "dense" emits all 24 hours, filling empty ones with zeros.
        price_decimals: Decimal places for ProductAggregate.average_price.
        share_decimals: Decimal places for PaymentAggregate.share_percent.
        validate_records: Raise InvalidRecordError on contract violations
            instead of trusting the ingestion layer blindly.
    """

    hourly_policy: str = "sparse"
    price_decimals: int = 2
    share_decimals: int = 1
    validate_records: bool = True

    def __post_init__(self) -> None:
        if self.hourly_policy not in HOURLY_POLICIES:
            raise ConfigError(
                f"Invalid hourly_policy '{self.hourly_policy}'. "
                f"Must be one of {HOURLY_POLICIES}."
            )
        if self.price_decimals < 0 or self.share_decimals < 0:
            raise ConfigError("Decimal places must be non-negative.")

    @property
    def dense_hours(self) -> bool:
        return self.hourly_policy == "dense"

    @classmethod
    def from_env(cls) -> AnalyticsConfig:
        """Create AnalyticsConfig from POS_INSIGHTS_* environment variables.

        Unset variables fall back to the dataclass defaults.

        Returns:
            AnalyticsConfig instance.

        Raises:
            ConfigError: If a variable is set to an unparseable value.

        Examples:
            >>> os.environ["POS_INSIGHTS_HOURLY_POLICY"] = "dense"
            >>> AnalyticsConfig.from_env().hourly_policy
            'dense'
        """
        defaults = cls()
        return cls(
            hourly_policy=os.environ.get(
                f"{ENV_PREFIX}HOURLY_POLICY", defaults.hourly_policy
            ).strip().lower(),
            price_decimals=_env_int("PRICE_DECIMALS", defaults.price_decimals),
            share_decimals=_env_int("SHARE_DECIMALS", defaults.share_decimals),
            validate_records=_env_bool("VALIDATE_RECORDS", defaults.validate_records),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got '{raw}'") from e


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{ENV_PREFIX}{name} must be a boolean flag, got '{raw}'")
