"""Non-exclusive accessory rules."""

from __future__ import annotations

from typing import Tuple

from models.catalogue import (
    FUESSLINGE,
    HALSTUCH,
    HANDSCHUHE,
    KINDERWAGEN_DECKE,
    MUETZE,
    SCHAL,
    SCHUHE,
    SOCKEN,
    SONNENHUT,
)
from models.weather import CHILLY_BANDS, WINTRY_BANDS, BabyProfile, ContextMode, TemperatureBand

SUNNY_BANDS = frozenset({TemperatureBand.HOT, TemperatureBand.WARM, TemperatureBand.MILD})
WALKING_AGE_MONTHS = 9


def select_accessories(band: TemperatureBand, mode: ContextMode, profile: BabyProfile) -> Tuple[str, ...]:
    """Return accessories for the layering band in rule order, without duplicates.

    The rules are evaluated in a fixed order and that order is the display
    order; a rule that fires twice for the same item keeps its first position.
    """

    outdoor = mode.is_outdoor
    carrier = mode is ContextMode.CARRIER
    chilly = band in CHILLY_BANDS
    wintry = band in WINTRY_BANDS
    cold = band is TemperatureBand.COLD

    picked = []
    if mode is not ContextMode.SLEEPING or wintry:
        picked.append(SOCKEN)
    if band in SUNNY_BANDS and outdoor:
        picked.append(SONNENHUT)
    if carrier and chilly:
        picked.append(HALSTUCH)
    if band in (TemperatureBand.COOL, TemperatureBand.FRESH) and outdoor and not carrier:
        picked.append(HALSTUCH)
    if cold and outdoor and not carrier:
        picked.append(SCHAL)
    if wintry and outdoor:
        picked.append(MUETZE)
    if cold and outdoor:
        picked.append(HANDSCHUHE)
    if profile.age_months >= WALKING_AGE_MONTHS and chilly and outdoor:
        picked.append(SCHUHE)
    if carrier and profile.age_months < WALKING_AGE_MONTHS and chilly:
        picked.append(FUESSLINGE)
    if (mode is ContextMode.STROLLER or (mode is ContextMode.CAR_SEAT and wintry)) and chilly:
        picked.append(KINDERWAGEN_DECKE)
    return tuple(dict.fromkeys(picked))


__all__ = ["select_accessories", "SUNNY_BANDS", "WALKING_AGE_MONTHS"]
