from __future__ import annotations

from typing import Optional, Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from nomadflow.core.errors import UnparseableAmountError
from nomadflow.models.budget import ConversionRequest
from nomadflow.models.constants import DEFAULT_LIFESTYLE
from nomadflow.services.budget_engine import calculate_longevity
from nomadflow.services.parsing import parse_amount
from nomadflow.services.rates.base import LiveRateSource
from nomadflow.routers.deps import get_rate_source
from nomadflow.services.runway import (
    SessionSelection,
    convert_request,
    plan_runway,
    safety_score,
)

"""Runway router: conversion, longevity and full plan endpoints.

Amounts may arrive as JSON numbers or as user-typed text ("25.000.000 VND");
they are parsed once here and the services only ever see floats.
"""

router = APIRouter(prefix="/runway", tags=["runway"])

RawAmount = Union[float, str]


def _require_amount(field: str, raw: RawAmount) -> float:
    value = parse_amount(raw)
    if value is None:
        raise UnparseableAmountError(field, raw)
    return value


def _optional_amount(field: str, raw: Optional[RawAmount]) -> Optional[float]:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    return _require_amount(field, raw)


class ConvertPayload(BaseModel):
    country_id: str = Field(..., description="Destination country id (e.g. vn)")
    from_currency: str = Field("USD", min_length=1, description="Source currency code")
    amount: RawAmount = Field(..., description="Amount in from_currency")
    override_rate: Optional[RawAmount] = Field(
        None, description="Local units per 1 from_currency; used when > 0"
    )


class LongevityPayload(BaseModel):
    budget_local: RawAmount
    monthly_local: RawAmount


class PlanPayload(BaseModel):
    country_id: str
    from_currency: str = Field("USD", min_length=1)
    savings: RawAmount = Field(..., description="Savings in from_currency")
    lifestyle: str = DEFAULT_LIFESTYLE
    preset: Optional[str] = Field(None, description="Regional preset; wins over lifestyle")
    monthly_local: Optional[RawAmount] = Field(
        None, description="Explicit monthly cost; wins over preset and lifestyle"
    )
    override_rate: Optional[RawAmount] = None


@router.post("/convert", summary="Convert an amount into the destination currency")
async def convert_amount(
    payload: ConvertPayload,
    source: LiveRateSource = Depends(get_rate_source),
):
    request = ConversionRequest(
        from_currency=payload.from_currency,
        country_id=payload.country_id,
        amount=_require_amount("amount", payload.amount),
        override_rate=_optional_amount("override_rate", payload.override_rate),
    )
    result = await convert_request(request, source=source)
    return result.as_dict()


@router.post("/longevity", summary="Months a local budget lasts at a monthly cost")
async def longevity(payload: LongevityPayload):
    result = calculate_longevity(
        _require_amount("budget_local", payload.budget_local),
        _require_amount("monthly_local", payload.monthly_local),
    )
    score = safety_score(result.months)
    return {
        **result.as_dict(),
        "safety": {"percent": score.percent, "band": score.band},
    }


@router.post("/plan", summary="Convert savings and compute runway for a selection")
async def plan(
    payload: PlanPayload,
    source: LiveRateSource = Depends(get_rate_source),
):
    selection = SessionSelection(
        country_id=payload.country_id,
        lifestyle=payload.lifestyle,
        preset=payload.preset,
    )
    result = await plan_runway(
        selection,
        _require_amount("savings", payload.savings),
        payload.from_currency,
        override_rate=_optional_amount("override_rate", payload.override_rate),
        monthly_override=_optional_amount("monthly_local", payload.monthly_local),
        source=source,
    )
    return result.as_dict()
