from __future__ import annotations
from dataclasses import dataclass

# Historical constants, kept as-is. KM_TO_MILES and MILES_TO_KM are not exact inverses.
KM_TO_MILES = 0.62137119
MILES_TO_KM = 1.609
PER_MILE_TO_PER_KM = 0.62137119223733


@dataclass(frozen=True)
class Distance:
    value: float
    unit: str          # "k" | "m"

    @property
    def km(self) -> float:
        if self.unit == "m":
            return self.value * MILES_TO_KM
        return self.value

    @property
    def miles(self) -> float:
        if self.unit == "m":
            return self.value
        return self.value * KM_TO_MILES


@dataclass(frozen=True)
class Duration:
    minutes: float
    raw: str           # token as typed, echoed back in the summary line


@dataclass(frozen=True)
class Pace:
    minutes_per_km: float

    @classmethod
    def per_mile(cls, minutes_per_mile: float) -> Pace:
        return cls(minutes_per_mile * PER_MILE_TO_PER_KM)
