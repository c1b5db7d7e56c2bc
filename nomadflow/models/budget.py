from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ConversionRequest:
    from_currency: str
    country_id: str
    amount: float
    override_rate: Optional[float] = None


@dataclass(frozen=True)
class ConversionResult:
    amount_local: int
    rate: float
    source: str

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LongevityResult:
    """How long a local-currency budget lasts at a monthly burn.

    ``valid`` is False only for the sentinel returned on non-finite input or a
    non-positive monthly cost; all counts are then zero.
    """

    months: int
    years: int
    remainder: int
    days_approx: int
    valid: bool = True

    @classmethod
    def invalid(cls, remainder: int = 0) -> "LongevityResult":
        return cls(months=0, years=0, remainder=remainder, days_approx=0, valid=False)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
