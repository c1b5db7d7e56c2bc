"""Built-in destination reference data.

Monthly costs are in each country's local currency. Fallback rates are snapshot
figures (local units per 1 unit of the foreign currency) used whenever a live
lookup is unavailable; refresh them by hand when they drift.
"""

from typing import Any, Dict, List

COUNTRIES: List[Dict[str, Any]] = [
    {
        "id": "vn",
        "name": "Vietnam",
        "local_currency": "VND",
        "lifestyles": {
            "budget": 15_000_000,
            "standard": 25_000_000,
            "highlife": 45_000_000,
        },
        "presets": {
            "hanoi": 22_000_000,
            "ho-chi-minh-city": 27_000_000,
            "da-nang": 18_000_000,
            "hoi-an": 16_000_000,
        },
        "fallback_rates": {
            "USD": 24_000,
            "EUR": 26_000,
            "GBP": 30_000,
            "AUD": 16_000,
            "CAD": 17_000,
        },
    },
    {
        "id": "th",
        "name": "Thailand",
        "local_currency": "THB",
        "lifestyles": {
            "budget": 25_000,
            "standard": 45_000,
            "highlife": 90_000,
        },
        "presets": {
            "bangkok": 55_000,
            "chiang-mai": 35_000,
            "phuket": 60_000,
        },
        "fallback_rates": {
            "USD": 36.0,
            "EUR": 39.0,
            "GBP": 45.5,
            "AUD": 23.5,
            "CAD": 26.5,
        },
    },
    {
        "id": "id",
        "name": "Indonesia",
        "local_currency": "IDR",
        "lifestyles": {
            "budget": 9_000_000,
            "standard": 16_000_000,
            "highlife": 32_000_000,
        },
        "presets": {
            "canggu": 20_000_000,
            "ubud": 14_000_000,
            "jakarta": 18_000_000,
        },
        "fallback_rates": {
            "USD": 15_700,
            "EUR": 17_000,
            "GBP": 19_800,
            "AUD": 10_300,
            "CAD": 11_500,
        },
    },
]
