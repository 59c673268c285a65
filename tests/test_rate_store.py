"""
Rate Store Tests - loading and looking up the exchange rate table.
"""
import json

import pytest

from fxlookup.core.errors import CurrencyNotFoundError, DateNotFoundError, LoadError
from fxlookup.services import rate_store

from conftest import SAMPLE


def write(tmp_path, content: str):
    path = tmp_path / "rates.json"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoad:
    def test_load_valid_file(self, rates_file):
        table = rate_store.load(rates_file)
        assert set(table) == {"2024-01-01", "2024-01-02"}
        assert dict(table["2024-01-01"]) == {"USD": 1.0, "EUR": 0.92}

    def test_load_accepts_str_path(self, rates_file):
        assert "2024-01-01" in rate_store.load(str(rates_file))

    def test_integers_become_floats(self, tmp_path):
        table = rate_store.load(write(tmp_path, '{"d": {"USD": 1}}'))
        rate = table["d"]["USD"]
        assert rate == 1.0
        assert isinstance(rate, float)

    def test_empty_table_is_valid(self, tmp_path):
        assert len(rate_store.load(write(tmp_path, "{}"))) == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError) as exc:
            rate_store.load(tmp_path / "nope.json")
        assert isinstance(exc.value.__cause__, OSError)

    def test_directory_is_unreadable(self, tmp_path):
        with pytest.raises(LoadError):
            rate_store.load(tmp_path)

    def test_invalid_json(self, tmp_path):
        with pytest.raises(LoadError, match="invalid JSON"):
            rate_store.load(write(tmp_path, "{not json"))

    @pytest.mark.parametrize(
        "payload",
        [
            [],
            {"d": [1.0]},
            {"d": 1.0},
            {"d": {"USD": "1.0"}},
            {"d": {"USD": True}},
            {"d": {"USD": None}},
            {"d": {"USD": {"x": 1}}},
        ],
    )
    def test_wrong_shape(self, tmp_path, payload):
        with pytest.raises(LoadError, match="unexpected structure"):
            rate_store.load(write(tmp_path, json.dumps(payload)))

    def test_table_is_read_only(self, rates_file):
        table = rate_store.load(rates_file)
        with pytest.raises(TypeError):
            table["2099-01-01"] = {}  # type: ignore[index]
        with pytest.raises(TypeError):
            table["2024-01-01"]["USD"] = 2.0  # type: ignore[index]

    def test_keys_kept_as_written(self, tmp_path):
        table = rate_store.load(write(tmp_path, '{"d": {"usd": 1.0, "EUR": 0.9}}'))
        assert list(table["d"]) == ["usd", "EUR"]


class TestGet:
    @pytest.fixture
    def table(self):
        return rate_store.freeze(SAMPLE)

    def test_full_date(self, table):
        assert dict(rate_store.get(table, "2024-01-01")) == {"USD": 1.0, "EUR": 0.92}

    def test_single_currency(self, table):
        assert rate_store.get(table, "2024-01-02", "GBP") == {"GBP": 0.79}

    @pytest.mark.parametrize("code", ["eur", "Eur", "EUR"])
    def test_currency_case_insensitive(self, table, code):
        assert rate_store.get(table, "2024-01-01", code) == {"EUR": 0.92}

    def test_unknown_date(self, table):
        with pytest.raises(DateNotFoundError) as exc:
            rate_store.get(table, "2099-01-01", "USD")
        assert exc.value.date == "2099-01-01"

    def test_unknown_currency(self, table):
        with pytest.raises(CurrencyNotFoundError) as exc:
            rate_store.get(table, "2024-01-01", "jpy")
        assert exc.value.currency == "JPY"
