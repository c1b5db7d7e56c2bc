from typing import Any, Dict, List

from fastapi import APIRouter

from nomadflow.services.countries import get_country, get_country_profiles

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("", summary="List destination countries")
async def list_countries() -> List[Dict[str, Any]]:
    return [p.summary() for p in get_country_profiles().values()]


@router.get("/{country_id}", summary="Lifestyle tiers, presets and fallback currencies")
async def country_detail(country_id: str) -> Dict[str, Any]:
    return get_country(country_id).summary()
