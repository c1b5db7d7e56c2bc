import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("nomadflow.errors")


class ConfigurationError(Exception):
    """Static reference data is unusable (raised at load time, never mid-calculation)."""


class InvalidRequestError(ValueError):
    """Caller violated a core contract (e.g. empty source currency)."""


class UnknownCountryError(LookupError):
    def __init__(self, country_id: str):
        super().__init__(f"unknown country '{country_id}'")
        self.country_id = country_id


class UnparseableAmountError(ValueError):
    def __init__(self, field: str, raw: object):
        super().__init__(f"could not parse {field}={raw!r} as a number")
        self.field = field
        self.raw = raw


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "not_found",
                "detail": f"No route for {request.method} {request.url.path}",
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "http_error", "detail": exc.detail},
    )


def unknown_country_handler(request: Request, exc: UnknownCountryError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "unknown_country", "detail": str(exc)},
    )


def unparseable_amount_handler(request: Request, exc: UnparseableAmountError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "unparseable_amount",
            "detail": {"field": exc.field, "value": str(exc.raw)},
        },
    )


def invalid_request_handler(request: Request, exc: InvalidRequestError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "invalid_request", "detail": str(exc)},
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )
