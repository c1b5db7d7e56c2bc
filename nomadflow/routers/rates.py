from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from nomadflow.services.countries import get_country
from nomadflow.services.rates.base import LiveRateSource
from nomadflow.routers.deps import get_rate_source
from nomadflow.services.rates.resolver import resolve_rate

"""Rates router exposing the resolved rate for a destination.

    - GET /rates/{country_id}?from_currency=USD[&override_rate=24500]

The response carries the `source` tag (override / live / fallback) so clients
can disclose when a static snapshot rate was used.
"""

router = APIRouter(prefix="/rates", tags=["rates"])


@router.get("/{country_id}", summary="Resolve local units per 1 unit of from_currency")
async def get_rate(
    country_id: str,
    from_currency: str = Query("USD", description="Source currency code"),
    override_rate: Optional[float] = Query(
        None, description="Caller supplied rate; ignored unless finite and > 0"
    ),
    source: LiveRateSource = Depends(get_rate_source),
):
    profile = get_country(country_id)
    resolved = await resolve_rate(from_currency, profile, override_rate, source=source)
    return {
        "country_id": profile.id,
        "from_currency": from_currency.strip().upper(),
        "to_currency": profile.local_currency,
        **resolved.as_dict(),
    }
