"""Smoke script for the lookup endpoint and the request limiter.

Sequence:
 1. Build the app against the bundled exchange_rates.json.
 2. Fetch a full date, a single currency (lower-case) and a missing currency.
 3. Fire requests until the limiter answers 429.
 4. Sleep past one refill interval and show admission resuming.

NOTE: This is a lightweight diagnostic and not a formal test.
"""

from pprint import pprint
from time import sleep

from fastapi.testclient import TestClient

from fxlookup.core.config import get_settings
from fxlookup.main import create_app


def run():
    settings = get_settings()
    client = TestClient(create_app(settings))
    date = next(iter(client.app.state.context.table))
    out = {}

    out["full_date"] = client.get(f"/{date}").json()
    out["single_eur"] = client.get(f"/{date}/eur").json()
    missing = client.get(f"/{date}/XXX")
    out["missing_currency"] = (missing.status_code, missing.text)

    # Three requests spent above; drain the rest of the burst
    codes = [client.get(f"/{date}").status_code for _ in range(10)]
    out["burst_codes"] = codes

    sleep(1.1)
    out["after_refill"] = client.get(f"/{date}").status_code

    pprint(out)


if __name__ == "__main__":
    run()
