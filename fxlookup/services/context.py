from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from fxlookup.models.rates import RateTable
from fxlookup.services import rate_store
from fxlookup.services.rate_limiter import TokenBucket


@dataclass(frozen=True)
class ServiceContext:
    """Everything a request needs: the frozen table and the shared limiter."""

    table: RateTable
    limiter: TokenBucket = field(default_factory=TokenBucket)

    @classmethod
    def from_source(cls, source: Union[str, Path]) -> "ServiceContext":
        return cls(table=rate_store.load(source))
