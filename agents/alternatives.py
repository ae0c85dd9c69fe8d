"""Caller-side state for cycling layer alternatives between recomputes."""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from agents.clothing_advisor import ClothingAdvisor
from babyweather_app.logging_config import correlation_context, get_logger, log_event
from models.recommendation import SWAPPABLE_SLOTS, Alternatives, Recommendation
from models.weather import BabyProfile, ContextMode, WeatherReading

LOGGER = get_logger(__name__)


def _check_slot(slot: str) -> None:
    if slot not in SWAPPABLE_SLOTS:
        raise ValueError(f"unknown layer slot {slot!r}; expected one of {SWAPPABLE_SLOTS}")


def next_alternative_index(
    alternatives: Alternatives,
    slot: str,
    indices: Mapping[str, int],
    current: Optional[str] = None,
) -> Dict[str, int]:
    """Return a new index map with ``slot`` advanced by one, wrapping around.

    Slots with fewer than two alternatives are left alone. When the slot has no
    stored index yet, counting starts at the garment currently shown
    (``current``) if it is one of the alternatives, otherwise at index 0.
    """

    _check_slot(slot)
    names = alternatives.get(slot) or ()
    if len(names) <= 1:
        return dict(indices)

    position = indices.get(slot)
    if position is None:
        position = names.index(current) if current in names else 0
    updated = dict(indices)
    updated[slot] = (position + 1) % len(names)
    return updated


def slot_for_item(alternatives: Alternatives, name: str) -> Optional[str]:
    """Which swappable slot offers ``name`` as an alternative, if any."""

    for slot in SWAPPABLE_SLOTS:
        if name in (alternatives.get(slot) or ()):
            return slot
    return None


def next_alternative_name(
    alternatives: Alternatives, slot: str, indices: Mapping[str, int], current: Optional[str] = None
) -> Optional[str]:
    """Garment that a swap on ``slot`` would show next, or ``None`` if it cannot swap."""

    names = alternatives.get(slot) or ()
    if len(names) <= 1:
        return None
    return names[next_alternative_index(alternatives, slot, indices, current)[slot]]


class RecommendationSession:
    """Holds what the weather screen owns between recomputes.

    Every setter recomputes synchronously. Changing the weather reading or the
    context mode clears the alternative indices, since the candidate lists may
    be different afterwards.
    """

    def __init__(
        self,
        advisor: ClothingAdvisor,
        mode: ContextMode | str | None = None,
        profile: BabyProfile | None = None,
    ) -> None:
        self.advisor = advisor
        self.mode = ContextMode(mode or advisor.config.default_mode)
        self.profile = profile or advisor.default_profile()
        self.weather: WeatherReading | None = None
        self.manual_temperature: float | None = None
        self.indices: Dict[str, int] = {}
        self.recommendation: Recommendation | None = None

    def _recompute(self) -> Optional[Recommendation]:
        if self.weather is None:
            return None
        self.recommendation = self.advisor.recommend(
            self.weather,
            self.mode,
            self.profile,
            manual_temperature=self.manual_temperature,
            alternative_indices=self.indices,
        )
        return self.recommendation

    def set_weather(self, reading: WeatherReading) -> Optional[Recommendation]:
        self.weather = reading
        self.indices = {}
        return self._recompute()

    def set_mode(self, mode: ContextMode | str) -> Optional[Recommendation]:
        self.mode = ContextMode(mode)
        self.indices = {}
        return self._recompute()

    def set_manual_temperature(self, value: float | None) -> Optional[Recommendation]:
        self.manual_temperature = value
        return self._recompute()

    def set_profile(self, profile: BabyProfile) -> Optional[Recommendation]:
        self.profile = profile
        return self._recompute()

    def swap(self, slot: str) -> Recommendation:
        """Show the next alternative for ``slot``; other slots keep their choice."""

        _check_slot(slot)
        if self.recommendation is None:
            raise RuntimeError("set a weather reading before swapping alternatives")

        alternatives = self.recommendation.alternatives
        names = alternatives.get(slot) or ()
        if len(names) <= 1:
            return self.recommendation

        chosen = self.recommendation.selected_slots or self.recommendation.slots
        current = getattr(chosen, slot)
        self.indices = next_alternative_index(alternatives, slot, self.indices, current)
        with correlation_context():
            log_event(
                LOGGER,
                logging.INFO,
                "alternative_swapped",
                slot=slot,
                index=self.indices[slot],
                options=len(names),
            )
            self._recompute()
        return self.recommendation


__all__ = [
    "RecommendationSession",
    "next_alternative_index",
    "next_alternative_name",
    "slot_for_item",
]
