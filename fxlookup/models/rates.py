from __future__ import annotations

from typing import Dict, Mapping

from pydantic import StrictFloat, TypeAdapter

# date -> currency code -> rate. Date keys are opaque; whatever the source uses.
DateRates = Mapping[str, float]
RateTable = Mapping[str, DateRates]

# Strict mode: "1.5" or true are rejected as rates, ints are widened to float.
RawRateTable = Dict[str, Dict[str, StrictFloat]]

RATE_TABLE_ADAPTER: TypeAdapter[RawRateTable] = TypeAdapter(RawRateTable)
