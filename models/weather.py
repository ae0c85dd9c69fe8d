"""Weather, context and baby profile inputs for the clothing rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ContextMode(str, Enum):
    """Situation the baby is dressed for."""

    STROLLER = "stroller"
    CARRIER = "carrier"
    INDOOR = "indoor"
    SLEEPING = "sleeping"
    CAR_SEAT = "carSeat"

    @property
    def is_outdoor(self) -> bool:
        return self in OUTDOOR_MODES

    @property
    def accepts_manual_temperature(self) -> bool:
        return self in (ContextMode.INDOOR, ContextMode.SLEEPING)


OUTDOOR_MODES = frozenset({ContextMode.STROLLER, ContextMode.CARRIER, ContextMode.CAR_SEAT})

CONTEXT_DESCRIPTIONS = {
    ContextMode.STROLLER: "Kinderwagen",
    ContextMode.CARRIER: "Babytrage",
    ContextMode.INDOOR: "Drinnen",
    ContextMode.SLEEPING: "Schlafenszeit",
    ContextMode.CAR_SEAT: "Auto",
}


class TemperatureBand(str, Enum):
    """Six ordered temperature categories, coldest first in ``rank``."""

    HOT = "hot"
    WARM = "warm"
    MILD = "mild"
    COOL = "cool"
    FRESH = "fresh"
    COLD = "cold"

    @property
    def rank(self) -> int:
        """Position in the cold -> hot order (cold is 0, hot is 5)."""

        return _BAND_ORDER.index(self)

    @property
    def label(self) -> str:
        return BAND_LABELS[self]


_BAND_ORDER = (
    TemperatureBand.COLD,
    TemperatureBand.FRESH,
    TemperatureBand.COOL,
    TemperatureBand.MILD,
    TemperatureBand.WARM,
    TemperatureBand.HOT,
)

BAND_LABELS = {
    TemperatureBand.HOT: "heiß",
    TemperatureBand.WARM: "warm",
    TemperatureBand.MILD: "mild",
    TemperatureBand.COOL: "kühl",
    TemperatureBand.FRESH: "frisch",
    TemperatureBand.COLD: "kalt",
}

CHILLY_BANDS = frozenset({TemperatureBand.COOL, TemperatureBand.FRESH, TemperatureBand.COLD})
WINTRY_BANDS = frozenset({TemperatureBand.FRESH, TemperatureBand.COLD})


@dataclass(frozen=True)
class WeatherReading:
    """One weather observation; temperatures in °C, wind in km/h."""

    temperature: float
    humidity: float = 50.0
    wind_speed: float = 0.0
    feels_like: Optional[float] = None
    description: str = ""
    icon: str = ""


@dataclass(frozen=True)
class BabyProfile:
    """Age and weight percentile; callers sanitize the ranges."""

    age_months: float
    weight_percentile: float


__all__ = [
    "BAND_LABELS",
    "BabyProfile",
    "CHILLY_BANDS",
    "CONTEXT_DESCRIPTIONS",
    "ContextMode",
    "OUTDOOR_MODES",
    "TemperatureBand",
    "WINTRY_BANDS",
    "WeatherReading",
]
