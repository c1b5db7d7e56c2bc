"""Domain constants for runway calculations.

MVP keeps these lightweight; could evolve to Enum classes if needed.
"""

DEFAULT_LIFESTYLE = "standard"

# Currency every country profile must carry a fallback rate for
FALLBACK_ANCHOR_CURRENCY = "USD"

# Daily burn uses a flat 30-day month regardless of calendar month length.
DAYS_PER_MONTH = 30
# Floor for the daily burn divisor; only guards the days estimate.
MIN_DAILY_BURN = 1e-9

MONTHS_PER_YEAR = 12

# Runway safety bar: this many months of runway counts as fully safe.
SAFE_RUNWAY_MONTHS = 6
CAUTION_PCT = 50

