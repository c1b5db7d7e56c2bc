from __future__ import annotations
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _upper_keys(v: Dict[str, float]) -> Dict[str, float]:
    return {k.upper(): val for k, val in v.items()}


class CountryProfile(BaseModel):
    """Static reference data for one destination.

    All money amounts are monthly figures in ``local_currency``; fallback rates are
    local units per 1 unit of the foreign currency keyed by its code.
    Load-time rules (USD fallback, standard tier) are enforced by
    ``services.countries.load_country_profiles`` rather than here, so partially
    configured profiles can still be built and degrade gracefully.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    local_currency: str = Field(..., min_length=3, max_length=3)
    lifestyles: Dict[str, float] = Field(default_factory=dict)
    presets: Dict[str, float] = Field(default_factory=dict)
    fallback_rates: Dict[str, float] = Field(default_factory=dict)

    @field_validator("local_currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.upper()

    @field_validator("fallback_rates")
    @classmethod
    def upper_rate_codes(cls, v: Dict[str, float]) -> Dict[str, float]:
        return _upper_keys(v)

    def summary(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "local_currency": self.local_currency,
            "lifestyles": dict(self.lifestyles),
            "presets": dict(self.presets),
            "fallback_currencies": sorted(self.fallback_rates),
        }
