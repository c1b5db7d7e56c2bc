from __future__ import annotations

"""Concrete live rate sources and factory.

'external-http' queries an exchangerate.host style endpoint
(``?base=USD&symbols=VND`` -> ``{"rates": {"VND": 24500.0}}``).
'static' never touches the network; every lookup fails so the resolver uses
the country's fallback table.
"""
import logging
from typing import Any, Callable, Dict, Optional

import httpx

from nomadflow.core.config import Settings, get_settings
from nomadflow.services.money import as_finite
from .base import LiveRateSource, LookupOutcome

logger = logging.getLogger("nomadflow.rates")


class StaticRateSource(LiveRateSource):
    async def fetch_rate(self, from_currency: str, to_currency: str) -> LookupOutcome:  # type: ignore[override]
        return LookupOutcome.failure("live lookup disabled")


def extract_rate(payload: Any, to_currency: str) -> LookupOutcome:
    """Pull a finite positive rate for ``to_currency`` out of a decoded response."""
    if not isinstance(payload, dict):
        return LookupOutcome.failure("response is not a JSON object")
    rates = payload.get("rates")
    if not isinstance(rates, dict):
        return LookupOutcome.failure("response has no 'rates' object")
    value = rates.get(to_currency)
    if value is None:
        return LookupOutcome.failure(f"no rate for {to_currency}")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return LookupOutcome.failure(f"non-numeric rate for {to_currency}")
    # as_finite also rejects ints too large for a float
    number = as_finite(value)
    if number is None or number <= 0:
        return LookupOutcome.failure(f"rate for {to_currency} is not a positive number")
    return LookupOutcome.success(number)


class ExternalHTTPRateSource(LiveRateSource):
    """Single-shot HTTP lookup; no retries and no caching.

    ``transport`` lets tests plug in ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    async def fetch_rate(self, from_currency: str, to_currency: str) -> LookupOutcome:  # type: ignore[override]
        params = {"base": from_currency, "symbols": to_currency}
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(self._base_url, params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            outcome = LookupOutcome.failure(f"HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            outcome = LookupOutcome.failure(f"transport error: {e.__class__.__name__}")
        except ValueError:  # JSON decode
            outcome = LookupOutcome.failure("malformed JSON response")
        else:
            outcome = extract_rate(payload, to_currency)
        logger.debug(
            "live rate %s->%s: %s",
            from_currency,
            to_currency,
            outcome.rate if outcome.ok else outcome.reason,
        )
        return outcome


_SOURCE_REGISTRY: Dict[str, Callable[[Settings], LiveRateSource]] = {
    "static": lambda settings: StaticRateSource(),
    "external-http": lambda settings: ExternalHTTPRateSource(
        str(settings.exchange_api_base_url), timeout=settings.http_timeout_seconds
    ),
}


def make_rate_source(kind: str, settings: Optional[Settings] = None) -> LiveRateSource:
    factory = _SOURCE_REGISTRY.get(kind)
    if not factory:
        raise ValueError(f"Unknown rate provider kind '{kind}'")
    return factory(settings or get_settings())

