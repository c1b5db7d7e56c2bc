"""Runway planning helpers for the presentation layer.

Glue between a user's explicit selection (country, lifestyle tier or regional
preset) and the pure core: resolves the rate, converts savings into local
currency, picks the monthly cost and computes longevity plus a safety score.
Stays framework-agnostic so both API routes and any future UI can reuse it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from nomadflow.models.budget import ConversionRequest, ConversionResult, LongevityResult
from nomadflow.models.constants import (
    CAUTION_PCT,
    DEFAULT_LIFESTYLE,
    SAFE_RUNWAY_MONTHS,
)
from nomadflow.models.country import CountryProfile
from nomadflow.services.budget_engine import (
    calculate_longevity,
    convert,
    lifestyle_amount,
    regional_preset_amount,
)
from nomadflow.services.countries import get_country
from nomadflow.services.rates.base import LiveRateSource
from nomadflow.services.rates.resolver import resolve_rate


@dataclass(frozen=True)
class SessionSelection:
    """What the user currently has selected; passed explicitly into each call."""

    country_id: str
    lifestyle: str = DEFAULT_LIFESTYLE
    preset: Optional[str] = None


@dataclass(frozen=True)
class SafetyScore:
    percent: float
    band: str  # "safe" | "caution" | "danger"


@dataclass(frozen=True)
class RunwayPlan:
    country_id: str
    local_currency: str
    conversion: ConversionResult
    monthly_local: int
    monthly_basis: str  # "explicit" | "preset" | "lifestyle"
    longevity: LongevityResult
    safety: SafetyScore

    def as_dict(self) -> Dict[str, Any]:
        return {
            "country_id": self.country_id,
            "local_currency": self.local_currency,
            "conversion": self.conversion.as_dict(),
            "monthly_local": self.monthly_local,
            "monthly_basis": self.monthly_basis,
            "longevity": self.longevity.as_dict(),
            "safety": {"percent": self.safety.percent, "band": self.safety.band},
        }


def safety_score(months: int) -> SafetyScore:
    percent = min(max(months, 0) / SAFE_RUNWAY_MONTHS, 1.0) * 100
    percent = round(percent, 2)
    if percent >= 100:
        band = "safe"
    elif percent >= CAUTION_PCT:
        band = "caution"
    else:
        band = "danger"
    return SafetyScore(percent=percent, band=band)


def resolve_monthly(
    profile: CountryProfile,
    selection: SessionSelection,
    monthly_override: Optional[float] = None,
) -> Tuple[int, str]:
    """Pick the monthly cost: explicit figure, then preset, then lifestyle tier."""
    if monthly_override is not None:
        return convert(monthly_override, 1), "explicit"
    if selection.preset:
        amount = regional_preset_amount(profile, selection.preset)
        if amount is not None:
            return amount, "preset"
    return lifestyle_amount(profile, selection.lifestyle), "lifestyle"


async def convert_request(
    request: ConversionRequest, source: Optional[LiveRateSource] = None
) -> ConversionResult:
    profile = get_country(request.country_id)
    resolved = await resolve_rate(
        request.from_currency, profile, request.override_rate, source=source
    )
    return ConversionResult(
        amount_local=convert(request.amount, resolved.rate),
        rate=resolved.rate,
        source=resolved.source,
    )


async def plan_runway(
    selection: SessionSelection,
    savings: float,
    from_currency: str,
    *,
    override_rate: Optional[float] = None,
    monthly_override: Optional[float] = None,
    source: Optional[LiveRateSource] = None,
) -> RunwayPlan:
    profile = get_country(selection.country_id)
    conversion = await convert_request(
        ConversionRequest(
            from_currency=from_currency,
            country_id=profile.id,
            amount=savings,
            override_rate=override_rate,
        ),
        source=source,
    )
    monthly, basis = resolve_monthly(profile, selection, monthly_override)
    longevity = calculate_longevity(conversion.amount_local, monthly)
    return RunwayPlan(
        country_id=profile.id,
        local_currency=profile.local_currency,
        conversion=conversion,
        monthly_local=monthly,
        monthly_basis=basis,
        longevity=longevity,
        safety=safety_score(longevity.months),
    )
