from __future__ import annotations

"""Live rate source abstraction.

A source answers "1 unit of from_currency equals how many units of
to_currency" and reports failure as a value (LookupOutcome) instead of raising,
so the resolver's fallback is an explicit branch.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class RateLookupError(Exception):
    """Raised by sources that cannot express a failure as a LookupOutcome."""


@dataclass(frozen=True)
class LookupOutcome:
    rate: Optional[float] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.rate is not None

    @classmethod
    def success(cls, rate: float) -> "LookupOutcome":
        return cls(rate=rate)

    @classmethod
    def failure(cls, reason: str) -> "LookupOutcome":
        return cls(reason=reason)


class LiveRateSource(ABC):
    @abstractmethod
    async def fetch_rate(self, from_currency: str, to_currency: str) -> LookupOutcome:
        """Return to_currency per 1 unit of from_currency, or a failure outcome."""
        raise NotImplementedError
