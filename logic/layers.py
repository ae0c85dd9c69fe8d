"""Exclusive layer selection (base, bottom, mid, outer) with swap alternatives."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

from logic.temperature import ResolvedTemperature
from models.catalogue import (
    DUENNER_PULLOVER,
    FLEECEJACKE,
    HOSE,
    JACKE,
    KURZARMBODY,
    LANGARMBODY,
    OVERALL,
    PULLOVER,
    REGENJACKE,
    SHORTS,
    SOFTSHELLANZUG,
    STRUMPFHOSE,
    TRAGEJACKE,
)
from models.recommendation import Alternatives, LayerSlots
from models.weather import CHILLY_BANDS, WINTRY_BANDS, ContextMode, TemperatureBand, WeatherReading

logger = logging.getLogger(__name__)

BOTTOM_PRIORITY = (SHORTS, STRUMPFHOSE, HOSE)
MID_PRIORITY = (FLEECEJACKE, PULLOVER, DUENNER_PULLOVER)
OUTER_PRIORITY = (OVERALL, TRAGEJACKE, SOFTSHELLANZUG, REGENJACKE, JACKE)
CARRIER_OUTER_PRIORITY = (TRAGEJACKE, JACKE, OVERALL)

RAIN_KEYWORDS = ("regen", "rain", "drizzle")
SNOW_KEYWORDS = ("schnee", "snow")
STRONG_WIND_KMH = 20.0
SHORTS_MIN_WARM_TEMP = 25.0
SLEEP_SHORT_SLEEVE_TEMP = 20.0


@dataclass(frozen=True)
class WeatherFlags:
    requires_rain_protection: bool
    indicates_snow: bool
    indicates_wind: bool


@dataclass(frozen=True)
class LayerSelection:
    """Chosen garment per slot plus the candidate lists behind the choice."""

    slots: LayerSlots
    alternatives: Alternatives
    candidates: Dict[str, Tuple[str, ...]]


def _mentions(text: str, keywords: Iterable[str]) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def derive_weather_flags(reading: WeatherReading) -> WeatherFlags:
    """Read rain, snow and wind hints from the description, icon and wind speed."""

    description = reading.description or ""
    icon = reading.icon or ""
    return WeatherFlags(
        requires_rain_protection=_mentions(description, RAIN_KEYWORDS) or _mentions(icon, RAIN_KEYWORDS),
        indicates_snow=_mentions(description, SNOW_KEYWORDS) or _mentions(icon, SNOW_KEYWORDS),
        indicates_wind=_mentions(description, ("wind",)) or reading.wind_speed >= STRONG_WIND_KMH,
    )


def _dedupe(names: Iterable[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(names))


def select_exclusive(
    candidates: Sequence[str], override_index: Optional[int], priority_order: Sequence[str]
) -> Optional[str]:
    """Resolve a candidate list to at most one garment.

    An in-range ``override_index`` wins. Otherwise the first name of
    ``priority_order`` that is a candidate is picked, then the first candidate.
    Empty candidate lists resolve to ``None``.
    """

    if override_index is not None and 0 <= override_index < len(candidates):
        return candidates[override_index]
    for name in priority_order:
        if name in candidates:
            return name
    return candidates[0] if candidates else None


def select_base(resolved: ResolvedTemperature, mode: ContextMode) -> str:
    if mode is ContextMode.SLEEPING:
        return KURZARMBODY if resolved.layering_reference_temp >= SLEEP_SHORT_SLEEVE_TEMP else LANGARMBODY
    if resolved.layering_band in (TemperatureBand.HOT, TemperatureBand.WARM):
        return KURZARMBODY
    return LANGARMBODY


def bottom_candidates(resolved: ResolvedTemperature) -> Tuple[str, ...]:
    band = resolved.layering_band
    if band is TemperatureBand.HOT or (
        band is TemperatureBand.WARM and resolved.layering_reference_temp >= SHORTS_MIN_WARM_TEMP
    ):
        return (SHORTS,)
    tights = (STRUMPFHOSE,) if band in WINTRY_BANDS else ()
    return tights + (HOSE,)


def mid_candidates(band: TemperatureBand, flags: WeatherFlags) -> Tuple[str, ...]:
    names = []
    if band is TemperatureBand.COOL:
        names.append(DUENNER_PULLOVER)
    elif band is TemperatureBand.FRESH:
        names.append(PULLOVER)
    elif band is TemperatureBand.COLD:
        names.extend([PULLOVER, FLEECEJACKE])
    if flags.indicates_wind and band in WINTRY_BANDS:
        names.append(FLEECEJACKE)
    return _dedupe(names)


def outer_candidates(band: TemperatureBand, mode: ContextMode, flags: WeatherFlags) -> Tuple[str, ...]:
    names = []
    if mode is ContextMode.CARRIER:
        if band in WINTRY_BANDS:
            names.extend([JACKE, TRAGEJACKE])
        if band is TemperatureBand.COLD:
            names.append(OVERALL)
        return _dedupe(names)

    if band is TemperatureBand.FRESH:
        names.append(JACKE)
    elif band is TemperatureBand.COLD and mode is not ContextMode.CAR_SEAT:
        names.append(OVERALL)

    if (flags.requires_rain_protection or flags.indicates_snow) and band is not TemperatureBand.HOT:
        names.append(REGENJACKE)

    if flags.indicates_wind and band in CHILLY_BANDS:
        names.append(SOFTSHELLANZUG)
    elif band is TemperatureBand.FRESH and mode is ContextMode.STROLLER:
        names.append(SOFTSHELLANZUG)
    return _dedupe(names)


def select_layers(
    resolved: ResolvedTemperature,
    mode: ContextMode,
    flags: WeatherFlags,
    indices: Mapping[str, int] | None = None,
) -> LayerSelection:
    """Pick one garment per slot, honouring the caller's alternative indices."""

    indices = indices or {}
    band = resolved.layering_band
    outer_priority = CARRIER_OUTER_PRIORITY if mode is ContextMode.CARRIER else OUTER_PRIORITY

    candidates = {
        "bottom": bottom_candidates(resolved),
        "mid": mid_candidates(band, flags),
        "outer": outer_candidates(band, mode, flags),
    }
    priorities = {"bottom": BOTTOM_PRIORITY, "mid": MID_PRIORITY, "outer": outer_priority}
    chosen = {
        slot: select_exclusive(names, indices.get(slot), priorities[slot]) for slot, names in candidates.items()
    }

    alternatives: Alternatives = {slot: names for slot, names in candidates.items() if len(names) > 1}
    if mode is ContextMode.CARRIER and band is TemperatureBand.COLD:
        # both bottoms are worn together in the carrier, nothing to swap
        alternatives.pop("bottom", None)

    slots = LayerSlots(base=select_base(resolved, mode), **chosen)
    logger.debug("Selected layers %s from candidates %s", slots, candidates)
    return LayerSelection(slots=slots, alternatives=alternatives, candidates=candidates)


__all__ = [
    "BOTTOM_PRIORITY",
    "CARRIER_OUTER_PRIORITY",
    "LayerSelection",
    "MID_PRIORITY",
    "OUTER_PRIORITY",
    "WeatherFlags",
    "bottom_candidates",
    "derive_weather_flags",
    "mid_candidates",
    "outer_candidates",
    "select_base",
    "select_exclusive",
    "select_layers",
]
