from __future__ import annotations

"""Exchange rate resolution: override -> live -> fallback table.

Resolution order:
    1. A finite override > 0 is returned as-is; no lookup happens.
    2. The live source (default: the configured exchange_rate_provider) is
       asked once (no retries, no cache).
    3. Any failure uses the country's fallback table: the requested currency,
       else the USD entry. Load-time validation guarantees USD exists.

Only an empty source currency is reported to the caller; network trouble
never is.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from nomadflow.core.config import get_settings
from nomadflow.core.errors import ConfigurationError, InvalidRequestError
from nomadflow.models.constants import FALLBACK_ANCHOR_CURRENCY
from nomadflow.models.country import CountryProfile
from nomadflow.services.money import as_finite
from .base import LiveRateSource, LookupOutcome, RateLookupError
from .providers import make_rate_source

logger = logging.getLogger("nomadflow.rates")


@dataclass(frozen=True)
class ResolvedRate:
    rate: float
    source: str  # "override" | "live" | "fallback"

    def as_dict(self) -> Dict[str, Any]:
        return {"rate": self.rate, "source": self.source}


def positive_rate(value: Any) -> Optional[float]:
    rate = as_finite(value)
    if rate is None or rate <= 0:
        return None
    return rate


def fallback_rate(profile: CountryProfile, from_currency: str) -> float:
    currency = from_currency.upper()
    if currency == profile.local_currency:
        return 1.0
    rate = profile.fallback_rates.get(currency)
    if rate is None:
        rate = profile.fallback_rates.get(FALLBACK_ANCHOR_CURRENCY)
    if rate is None:
        # Unreachable for profiles loaded through load_country_profiles
        raise ConfigurationError(
            f"country '{profile.id}' has no fallback for {currency} or {FALLBACK_ANCHOR_CURRENCY}"
        )
    return rate


async def _lookup(source: LiveRateSource, from_currency: str, to_currency: str) -> LookupOutcome:
    try:
        return await source.fetch_rate(from_currency, to_currency)
    except (RateLookupError, asyncio.TimeoutError) as e:
        return LookupOutcome.failure(f"{e.__class__.__name__}: {e}")


async def resolve_rate(
    from_currency: str,
    profile: CountryProfile,
    override_rate: Optional[float] = None,
    source: Optional[LiveRateSource] = None,
) -> ResolvedRate:
    if not from_currency or not from_currency.strip():
        raise InvalidRequestError("from_currency must be a non-empty currency code")
    currency = from_currency.strip().upper()

    override = positive_rate(override_rate)
    if override is not None:
        return ResolvedRate(rate=override, source="override")

    if source is None:
        settings = get_settings()
        source = make_rate_source(settings.exchange_rate_provider, settings)
    outcome = await _lookup(source, currency, profile.local_currency)
    live = positive_rate(outcome.rate) if outcome.ok else None
    if live is not None:
        return ResolvedRate(rate=live, source="live")

    rate = fallback_rate(profile, currency)
    logger.warning(
        "live rate unavailable, using fallback",
        extra={
            "fields": {
                "from_currency": currency,
                "to_currency": profile.local_currency,
                "reason": outcome.reason or "invalid live rate",
                "fallback_rate": rate,
            }
        },
    )
    return ResolvedRate(rate=rate, source="fallback")
