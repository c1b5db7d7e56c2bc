import math

import pytest

from nomadflow.models.country import CountryProfile
from nomadflow.services.budget_engine import (
    calculate_longevity,
    convert,
    lifestyle_amount,
    regional_preset_amount,
)


# --- convert -------------------------------------------------------------


def test_convert_basic():
    assert convert(1000, 24500) == 24_500_000


@pytest.mark.parametrize(
    "amount, rate",
    [
        (float("nan"), 24500),
        (1000, float("nan")),
        (float("inf"), 24500),
        (1000, float("-inf")),
        (None, 24500),
        ("1000", 24500),
        (True, 24500),
    ],
)
def test_convert_invalid_inputs_return_zero(amount, rate):
    assert convert(amount, rate) == 0


def test_convert_overflowing_product_returns_zero():
    assert convert(1e200, 1e200) == 0


def test_convert_very_large_product_is_exact_integer():
    assert convert(1e15, 1e15) == int(1e30)


def test_convert_rounds_half_away_from_zero():
    assert convert(2.5, 1) == 3
    assert convert(-2.5, 1) == -3
    assert convert(0.5, 3) == 2
    assert convert(1.4, 1) == 1


@pytest.mark.parametrize("k", [1, 2, 3, 7, 10])
def test_convert_is_linear_in_amount(k):
    amount, rate = 1234.56, 24_321.7
    assert abs(convert(k * amount, rate) - k * convert(amount, rate)) <= k


# --- lifestyle_amount ----------------------------------------------------


def test_lifestyle_amount_known_tier(vn_profile):
    assert lifestyle_amount(vn_profile, "highlife") == 45_000_000


def test_lifestyle_amount_unknown_tier_falls_back_to_standard(vn_profile):
    assert lifestyle_amount(vn_profile, "luxury-yacht") == 25_000_000


def test_lifestyle_amount_without_standard_is_zero():
    profile = CountryProfile(
        id="xx",
        name="Nowhere",
        local_currency="XXX",
        lifestyles={"budget": 100},
        fallback_rates={"USD": 1},
    )
    assert lifestyle_amount(profile, "highlife") == 0
    assert lifestyle_amount(profile, "budget") == 100


def test_regional_preset_amount(vn_profile):
    assert regional_preset_amount(vn_profile, "hanoi") == 22_000_000
    assert regional_preset_amount(vn_profile, "atlantis") is None


# --- calculate_longevity -------------------------------------------------


def test_longevity_exact_year():
    r = calculate_longevity(300_000_000, 25_000_000)
    assert (r.months, r.years, r.remainder, r.days_approx) == (12, 1, 0, 0)
    assert r.valid


def test_longevity_with_remainder_days():
    r = calculate_longevity(310_000_000, 25_000_000)
    assert (r.months, r.years, r.remainder, r.days_approx) == (12, 1, 10_000_000, 12)


def test_longevity_zero_budget():
    r = calculate_longevity(0, 25_000_000)
    assert (r.months, r.years, r.remainder, r.days_approx) == (0, 0, 0, 0)
    assert r.valid


@pytest.mark.parametrize("budget", [0, 100, 300_000_000, -5])
def test_longevity_zero_monthly_is_sentinel(budget):
    r = calculate_longevity(budget, 0)
    assert (r.months, r.years, r.days_approx) == (0, 0, 0)
    assert r.remainder == budget
    assert not r.valid


@pytest.mark.parametrize(
    "budget, monthly, remainder",
    [
        (1000, -10, 1000),
        (float("nan"), 100, 0),
        (float("inf"), 100, 0),
        (1000, float("nan"), 1000),
        (1000, float("inf"), 1000),
        (None, 100, 0),
    ],
)
def test_longevity_invalid_inputs_are_sentinel(budget, monthly, remainder):
    r = calculate_longevity(budget, monthly)
    assert (r.months, r.years, r.days_approx) == (0, 0, 0)
    assert r.remainder == remainder
    assert not r.valid


def test_longevity_huge_ratio_stays_finite():
    r = calculate_longevity(1e308, 1e-300)
    assert not r.valid
    assert r.months == 0


def test_longevity_negative_budget_uses_floor():
    r = calculate_longevity(-10, 25)
    assert r.months == -1
    assert r.years == -1
    assert r.remainder == 15
    assert r.days_approx == 18


def test_longevity_tiny_monthly_guards_daily_burn():
    r = calculate_longevity(1, 1e-12)
    assert r.valid
    assert r.days_approx >= 0
    assert math.isfinite(r.days_approx)


@pytest.mark.parametrize(
    "budget, monthly",
    [
        (1, 1),
        (999, 1000),
        (123_456_789, 25_000_000),
        (310_000_000.4, 25_000_000),
        (5_000.75, 333.33),
        (47, 12),
    ],
)
def test_longevity_properties(budget, monthly):
    r = calculate_longevity(budget, monthly)
    assert abs(r.months * monthly + r.remainder - budget) <= 1
    assert -1 <= r.remainder < monthly + 1
    assert r.years == r.months // 12
    assert r.days_approx >= 0
    assert abs(r.days_approx - r.remainder / (monthly / 30)) <= 1
