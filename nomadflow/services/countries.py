"""Country profile loading & validation.

Profiles are validated once, when the table is first loaded (app startup), so a
missing USD fallback or missing standard tier surfaces as a ConfigurationError
instead of a silent 0 mid-calculation.
"""

from __future__ import annotations
import logging
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from nomadflow.core.errors import ConfigurationError, UnknownCountryError
from nomadflow.data.countries import COUNTRIES
from nomadflow.models.constants import DEFAULT_LIFESTYLE, FALLBACK_ANCHOR_CURRENCY
from nomadflow.models.country import CountryProfile
from nomadflow.services.money import as_finite

logger = logging.getLogger("nomadflow.countries")


def _positive_amount_problems(label: str, values: Mapping[str, Any]) -> List[str]:
    problems = []
    for key, value in values.items():
        number = as_finite(value)
        if number is None or number <= 0:
            problems.append(f"{label} '{key}' must be a positive finite number")
    return problems


def profile_problems(profile: CountryProfile) -> List[str]:
    """Return human readable configuration problems for ``profile`` (empty if ok)."""
    problems: List[str] = []
    if not profile.local_currency.isalpha():
        problems.append("local_currency must be a 3-letter code")
    if FALLBACK_ANCHOR_CURRENCY not in profile.fallback_rates:
        problems.append(f"missing {FALLBACK_ANCHOR_CURRENCY} fallback rate")
    if DEFAULT_LIFESTYLE not in profile.lifestyles:
        problems.append(f"missing '{DEFAULT_LIFESTYLE}' lifestyle tier")
    problems += _positive_amount_problems("lifestyle", profile.lifestyles)
    problems += _positive_amount_problems("preset", profile.presets)
    problems += _positive_amount_problems("fallback rate", profile.fallback_rates)
    return problems


def load_country_profiles(
    raw: Optional[Iterable[Mapping[str, Any]]] = None,
) -> Dict[str, CountryProfile]:
    entries = COUNTRIES if raw is None else raw
    profiles: Dict[str, CountryProfile] = {}
    for entry in entries:
        try:
            profile = CountryProfile(**entry)
        except ValidationError as e:
            raise ConfigurationError(
                f"invalid country profile {entry.get('id')!r}: {e}"
            ) from e
        problems = profile_problems(profile)
        if problems:
            raise ConfigurationError(
                f"country profile '{profile.id}': " + "; ".join(problems)
            )
        if profile.id in profiles:
            raise ConfigurationError(f"duplicate country profile id '{profile.id}'")
        profiles[profile.id] = profile
    logger.debug("loaded %d country profiles", len(profiles))
    return profiles


@lru_cache
def get_country_profiles() -> Dict[str, CountryProfile]:
    return load_country_profiles()


def get_country(country_id: str) -> CountryProfile:
    profile = get_country_profiles().get(country_id.lower())
    if profile is None:
        raise UnknownCountryError(country_id)
    return profile
