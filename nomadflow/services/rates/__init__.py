"""Exchange rate resolution (override, live lookup, per-country fallback)."""

from .base import LiveRateSource, LookupOutcome, RateLookupError
from .providers import ExternalHTTPRateSource, StaticRateSource, make_rate_source
from .resolver import ResolvedRate, fallback_rate, resolve_rate

__all__ = [
    "LiveRateSource",
    "LookupOutcome",
    "RateLookupError",
    "ExternalHTTPRateSource",
    "StaticRateSource",
    "make_rate_source",
    "ResolvedRate",
    "fallback_rate",
    "resolve_rate",
]
