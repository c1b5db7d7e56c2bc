import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core import errors
from .core.config import Settings, get_settings
from .core.logging import init_logging, request_context_middleware
from .routers import countries, health, rates, runway
from .services.countries import get_country_profiles


def create_app(settings_override: Settings | None = None) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment (e.g., static rate provider). Falls back to cached
    get_settings().
    """
    settings = settings_override or get_settings()
    settings.init_post_load()
    # Initialize logging early
    init_logging(debug=settings.debug)

    # Validate country reference data up front; a broken table is fatal
    try:
        get_country_profiles()
    except errors.ConfigurationError:
        logging.getLogger("nomadflow").exception("invalid country configuration")
        raise

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version
    )
    app.state.settings = settings

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(errors.UnknownCountryError, errors.unknown_country_handler)
    app.add_exception_handler(
        errors.UnparseableAmountError, errors.unparseable_amount_handler
    )
    app.add_exception_handler(errors.InvalidRequestError, errors.invalid_request_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(countries.router)
    app.include_router(rates.router)
    app.include_router(runway.router)

    @app.get("/")
    async def root():
        return {"message": "NomadFlow Runway Calculator API", "version": settings.version}

    return app


app = create_app()
