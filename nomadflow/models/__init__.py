"""Domain models for the NomadFlow runway calculator."""

from .constants import (
    DEFAULT_LIFESTYLE,
)  # re-export
from .country import CountryProfile
from .budget import ConversionRequest, ConversionResult, LongevityResult

__all__ = [
    "DEFAULT_LIFESTYLE",
    "CountryProfile",
    "ConversionRequest",
    "ConversionResult",
    "LongevityResult",
]
