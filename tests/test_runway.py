import pytest

from conftest import RecordingSource
from nomadflow.core.errors import UnknownCountryError
from nomadflow.models.budget import ConversionRequest
from nomadflow.services.rates.base import LookupOutcome
from nomadflow.services.runway import (
    SessionSelection,
    convert_request,
    plan_runway,
    resolve_monthly,
    safety_score,
)


@pytest.mark.parametrize(
    "months, percent, band",
    [
        (0, 0.0, "danger"),
        (-3, 0.0, "danger"),
        (2, 33.33, "danger"),
        (3, 50.0, "caution"),
        (6, 100.0, "safe"),
        (40, 100.0, "safe"),
    ],
)
def test_safety_score(months, percent, band):
    score = safety_score(months)
    assert score.percent == percent
    assert score.band == band


def test_resolve_monthly_order(vn_profile):
    sel = SessionSelection(country_id="vn", lifestyle="budget", preset="hanoi")
    assert resolve_monthly(vn_profile, sel, 30_000_000) == (30_000_000, "explicit")
    assert resolve_monthly(vn_profile, sel) == (22_000_000, "preset")
    unknown_preset = SessionSelection(country_id="vn", lifestyle="budget", preset="atlantis")
    assert resolve_monthly(vn_profile, unknown_preset) == (15_000_000, "lifestyle")
    unknown_tier = SessionSelection(country_id="vn", lifestyle="monk")
    assert resolve_monthly(vn_profile, unknown_tier) == (25_000_000, "lifestyle")


@pytest.mark.asyncio
async def test_convert_request_with_override():
    result = await convert_request(
        ConversionRequest(from_currency="USD", country_id="vn", amount=1000, override_rate=24_500)
    )
    assert result.as_dict() == {"amount_local": 24_500_000, "rate": 24_500, "source": "override"}


@pytest.mark.asyncio
async def test_convert_request_unknown_country():
    with pytest.raises(UnknownCountryError):
        await convert_request(ConversionRequest(from_currency="USD", country_id="zz", amount=1))


@pytest.mark.asyncio
async def test_plan_runway_live_rate():
    source = RecordingSource(LookupOutcome.success(25_000.0))
    plan = await plan_runway(
        SessionSelection(country_id="vn"), 12_000, "USD", source=source
    )
    assert plan.conversion.amount_local == 300_000_000
    assert plan.conversion.source == "live"
    assert plan.monthly_local == 25_000_000
    assert plan.monthly_basis == "lifestyle"
    assert (plan.longevity.months, plan.longevity.years) == (12, 1)
    assert plan.safety.band == "safe"
    assert source.calls == [("USD", "VND")]


@pytest.mark.asyncio
async def test_plan_runway_fallback_and_preset():
    plan = await plan_runway(
        SessionSelection(country_id="vn", preset="da-nang"),
        1000,
        "EUR",
        source=RecordingSource(LookupOutcome.failure("down")),
    )
    assert plan.conversion.rate == 26_000
    assert plan.conversion.source == "fallback"
    assert plan.monthly_local == 18_000_000
    assert plan.longevity.months == 1
    assert plan.longevity.remainder == 8_000_000
    assert plan.longevity.days_approx == 13
    assert plan.safety.band == "danger"


@pytest.mark.asyncio
async def test_plan_runway_zero_monthly_is_invalid():
    plan = await plan_runway(
        SessionSelection(country_id="th"), 500, "USD", override_rate=36, monthly_override=0
    )
    assert plan.conversion.amount_local == 18_000
    assert not plan.longevity.valid
    assert plan.longevity.remainder == 18_000
    assert plan.as_dict()["safety"] == {"percent": 0.0, "band": "danger"}
