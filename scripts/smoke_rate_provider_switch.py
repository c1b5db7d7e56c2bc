import json

from fastapi.testclient import TestClient

from nomadflow.core.config import Settings
from nomadflow.main import create_app

"""Smoke script for the rate provider switch.

Plans the same runway under the 'static' provider and the 'external-http'
provider, showing either a live rate or a graceful fallback (source tag) for
the HTTP case. Needs network access for the live half.
"""

PLAN = {"country_id": "vn", "from_currency": "USD", "savings": 12_000}


def run():
    output = {}
    for kind in ("static", "external-http"):
        app = create_app(settings_override=Settings(exchange_rate_provider=kind))
        client = TestClient(app)
        output[kind] = {
            "rate": client.get("/rates/vn", params={"from_currency": "USD"}).json(),
            "plan": client.post("/runway/plan", json=PLAN).json(),
        }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    run()
