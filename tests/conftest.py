"""Shared fixtures: a small rate table, a controllable clock and a test client."""
import json

import pytest
from fastapi.testclient import TestClient

from fxlookup.core.config import Settings
from fxlookup.main import create_app
from fxlookup.services.context import ServiceContext
from fxlookup.services.rate_limiter import TokenBucket
from fxlookup.services.rate_store import freeze

SAMPLE = {
    "2024-01-01": {"USD": 1.0, "EUR": 0.92},
    "2024-01-02": {"USD": 1.0, "EUR": 0.91, "GBP": 0.79},
}


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings(tmp_path):
    return Settings(_env_file=None, rates_file=tmp_path / "exchange_rates.json")


@pytest.fixture
def rates_file(tmp_path):
    path = tmp_path / "exchange_rates.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")
    return path


def make_client(settings, table=None, limiter=None) -> TestClient:
    ctx = ServiceContext(
        table=freeze(table if table is not None else SAMPLE),
        limiter=limiter or TokenBucket(burst=1000),
    )
    return TestClient(create_app(settings, context=ctx))


@pytest.fixture
def client(settings):
    return make_client(settings)
