from fastapi import Request

from nomadflow.core.config import Settings, get_settings
from nomadflow.services.rates.base import LiveRateSource
from nomadflow.services.rates.providers import make_rate_source


def get_app_settings(request: Request) -> Settings:
    # create_app stores the (possibly test-injected) settings on app.state
    return getattr(request.app.state, "settings", None) or get_settings()


def get_rate_source(request: Request) -> LiveRateSource:
    settings = get_app_settings(request)
    return make_rate_source(settings.exchange_rate_provider, settings)
