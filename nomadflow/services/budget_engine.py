"""Pure budget arithmetic: conversion, lifestyle lookup and runway longevity.

Every function here is side-effect free and never raises on bad numbers;
invalid input degrades to ``0`` or to the ``LongevityResult.invalid`` sentinel.
Callers are expected to have parsed user text already (see ``services.parsing``).

Longevity notes:
    - months = floor(budget / monthly), years = floor(months / 12)
    - remainder = round(budget - months * monthly), half away from zero
    - days_approx uses a flat 30-day month for the daily burn. This is a
      deliberate approximation and is not calendar aware.
    - Negative budgets are accepted: floor division yields a negative month
      count ("already out of money") rather than an error.
"""

from __future__ import annotations
import math
from typing import Optional

from nomadflow.models.budget import LongevityResult
from nomadflow.models.constants import (
    DAYS_PER_MONTH,
    DEFAULT_LIFESTYLE,
    MIN_DAILY_BURN,
    MONTHS_PER_YEAR,
)
from nomadflow.models.country import CountryProfile
from nomadflow.services.money import as_finite, round_half_up


def convert(amount: float, rate: float) -> int:
    n = as_finite(amount)
    r = as_finite(rate)
    if n is None or r is None:
        return 0
    product = n * r
    if not math.isfinite(product):
        return 0
    return round_half_up(product)


def lifestyle_amount(profile: CountryProfile, tier: str) -> int:
    """Monthly local cost for ``tier``, falling back to the standard tier, then 0."""
    value = profile.lifestyles.get(tier)
    if value is None:
        value = profile.lifestyles.get(DEFAULT_LIFESTYLE)
    number = as_finite(value)
    if number is None:
        return 0
    return round_half_up(number)


def regional_preset_amount(profile: CountryProfile, preset: str) -> Optional[int]:
    number = as_finite(profile.presets.get(preset))
    if number is None:
        return None
    return round_half_up(number)


def _days_for_remainder(remainder: int, monthly: float) -> int:
    daily = monthly / DAYS_PER_MONTH
    if daily < MIN_DAILY_BURN:
        return max(math.floor(remainder / MIN_DAILY_BURN), 0)
    # remainder / (monthly / 30) rearranged to keep whole-number inputs exact
    return max(math.floor(remainder * DAYS_PER_MONTH / monthly), 0)


def calculate_longevity(budget_local: float, monthly_local: float) -> LongevityResult:
    budget = as_finite(budget_local)
    monthly = as_finite(monthly_local)
    if budget is None or monthly is None or monthly <= 0:
        return LongevityResult.invalid(
            remainder=round_half_up(budget) if budget is not None else 0
        )

    months_float = budget // monthly
    if not math.isfinite(months_float):
        return LongevityResult.invalid(remainder=round_half_up(budget))
    months = int(months_float)
    years = months // MONTHS_PER_YEAR
    remainder = round_half_up(budget - months * monthly)
    return LongevityResult(
        months=months,
        years=years,
        remainder=remainder,
        days_approx=_days_for_remainder(remainder, monthly),
    )
