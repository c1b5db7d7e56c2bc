"""Pytest configuration and fixtures."""
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from nomadflow.core.config import Settings
from nomadflow.main import create_app
from nomadflow.models.country import CountryProfile
from nomadflow.routers.deps import get_rate_source
from nomadflow.services.rates.base import LiveRateSource, LookupOutcome
from nomadflow.services.rates.providers import ExternalHTTPRateSource

RATE_URL = "https://rates.test/latest"


class RecordingSource(LiveRateSource):
    """Live source double returning a fixed outcome and counting calls."""

    def __init__(self, outcome: LookupOutcome):
        self.outcome = outcome
        self.calls = []

    async def fetch_rate(self, from_currency, to_currency):
        self.calls.append((from_currency, to_currency))
        return self.outcome


class RaisingSource(LiveRateSource):
    def __init__(self, exc: Exception):
        self.exc = exc

    async def fetch_rate(self, from_currency, to_currency):
        raise self.exc


@pytest.fixture
def vn_profile():
    return CountryProfile(
        id="vn",
        name="Vietnam",
        local_currency="VND",
        lifestyles={"budget": 15_000_000, "standard": 25_000_000, "highlife": 45_000_000},
        presets={"hanoi": 22_000_000},
        fallback_rates={"USD": 24_000, "EUR": 26_000},
    )


@pytest.fixture
def http_source():
    """Build an ExternalHTTPRateSource backed by an httpx.MockTransport handler."""

    def _make(handler):
        return ExternalHTTPRateSource(
            RATE_URL, timeout=1.0, transport=httpx.MockTransport(handler)
        )

    return _make


def json_response(payload, status_code=200):
    return httpx.Response(status_code, content=json.dumps(payload).encode())


@pytest.fixture
def static_settings():
    return Settings(exchange_rate_provider="static")


@pytest.fixture
def client(static_settings):
    app = create_app(settings_override=static_settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def live_client(static_settings):
    """Client whose live source always answers 1 USD = 25,000 local units."""
    app = create_app(settings_override=static_settings)
    source = RecordingSource(LookupOutcome.success(25_000.0))
    app.dependency_overrides[get_rate_source] = lambda: source
    with TestClient(app) as c:
        c.source = source
        yield c
