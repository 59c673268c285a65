from __future__ import annotations

"""Rate store: the in-memory exchange rate table.

The table is loaded once from a JSON document shaped like
``{"<date>": {"<CURRENCY>": <number>, ...}, ...}`` and frozen. Nothing writes
to it afterwards, so concurrent readers need no locking.
"""
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Optional, Union

from pydantic import ValidationError

from fxlookup.core.errors import CurrencyNotFoundError, DateNotFoundError, LoadError
from fxlookup.models.rates import DateRates, RateTable, RATE_TABLE_ADAPTER

logger = logging.getLogger("fxlookup.rate_store")


def freeze(raw: dict) -> RateTable:
    return MappingProxyType(
        {date: MappingProxyType(dict(rates)) for date, rates in raw.items()}
    )


def load(source: Union[str, Path]) -> RateTable:
    """Read and validate the rate table at ``source``.

    Raises LoadError when the file cannot be read, is not JSON, or is not a
    mapping of strings to mappings of strings to numbers.
    """
    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(path, str(e)) from e
    try:
        data = json.loads(text)
    except ValueError as e:
        raise LoadError(path, f"invalid JSON: {e}") from e
    try:
        raw = RATE_TABLE_ADAPTER.validate_python(data, strict=True)
    except ValidationError as e:
        raise LoadError(path, f"unexpected structure: {e.error_count()} error(s)") from e
    table = freeze(raw)
    logger.info("loaded exchange rates for %d dates from %s", len(table), path)
    return table


def get(table: RateTable, date: str, currency: Optional[str] = None) -> DateRates:
    rates = table.get(date)
    if rates is None:
        raise DateNotFoundError(date)
    if currency is None:
        return rates
    currency = currency.upper()
    if currency not in rates:
        raise CurrencyNotFoundError(currency)
    return {currency: rates[currency]}
