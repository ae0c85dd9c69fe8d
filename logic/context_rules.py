"""Mode specific safety overrides applied after layer and accessory selection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Tuple

from models.catalogue import HANDSCHUHE, JACKE, KINDERWAGEN_DECKE, OVERALL, SCHAL, SOFTSHELLANZUG
from models.recommendation import LayerSlots
from models.weather import CHILLY_BANDS, ContextMode, TemperatureBand

logger = logging.getLogger(__name__)

CARRIER_WARNING = "In der Trage wird es wärmer - bei Bedarf eine Schicht weniger wählen."
CAR_SEAT_WARNING = (
    "Im Autositz nur dünne Jacken tragen und warme Schichten erst nach dem Anschnallen ergänzen."
)
CAR_SEAT_BULKY_OUTER = frozenset({OVERALL, SOFTSHELLANZUG})
CAR_SEAT_BANNED_ACCESSORIES = frozenset({HANDSCHUHE, SCHAL})


@dataclass(frozen=True)
class ContextAdjustment:
    slots: LayerSlots
    accessories: Tuple[str, ...]
    warnings: Tuple[str, ...]


def apply_context_rules(
    slots: LayerSlots, accessories: Tuple[str, ...], mode: ContextMode, band: TemperatureBand
) -> ContextAdjustment:
    """Return adjusted copies of the slots and accessories plus any warnings.

    Carriers get a reminder that the parent's body heat counts as a layer. In
    the car seat thick suits are replaced by a thin jacket, and in chilly
    weather gloves and scarves give way to a blanket added after buckling in.
    """

    warnings = []
    if mode is ContextMode.CARRIER and band is not TemperatureBand.HOT:
        warnings.append(CARRIER_WARNING)

    if mode is ContextMode.CAR_SEAT:
        outer = slots.outer
        if outer in CAR_SEAT_BULKY_OUTER:
            logger.info("Dropping %s for the car seat", outer)
            outer = None
        if outer is None and band is not TemperatureBand.HOT:
            outer = JACKE
        slots = replace(slots, outer=outer)

        if band in CHILLY_BANDS:
            warnings.append(CAR_SEAT_WARNING)
            kept = [item for item in accessories if item not in CAR_SEAT_BANNED_ACCESSORIES]
            if KINDERWAGEN_DECKE not in kept:
                kept.append(KINDERWAGEN_DECKE)
            accessories = tuple(kept)

    return ContextAdjustment(slots=slots, accessories=accessories, warnings=tuple(dict.fromkeys(warnings)))


__all__ = [
    "CARRIER_WARNING",
    "CAR_SEAT_WARNING",
    "ContextAdjustment",
    "apply_context_rules",
]
