"""Data shapes for the exchange rate table."""

from .rates import DateRates, RateTable, RawRateTable, RATE_TABLE_ADAPTER  # re-export

__all__ = [
    "DateRates",
    "RateTable",
    "RawRateTable",
    "RATE_TABLE_ADAPTER",
]
