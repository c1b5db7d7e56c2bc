from fastapi import APIRouter, Depends

from nomadflow.core.config import Settings
from nomadflow.routers.deps import get_app_settings
from nomadflow.services.countries import get_country_profiles

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness probe")
async def health(settings: Settings = Depends(get_app_settings)):
    return {
        "status": "ok",
        "version": settings.version,
        "rate_provider": settings.exchange_rate_provider,
        "countries": len(get_country_profiles()),
    }
