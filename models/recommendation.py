"""Result types produced by the clothing rule pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from models.catalogue import ClothingCatalogEntry
from models.weather import ContextMode, TemperatureBand

SWAPPABLE_SLOTS = ("bottom", "mid", "outer")

Alternatives = Dict[str, Tuple[str, ...]]


@dataclass(frozen=True)
class LayerSlots:
    """Exclusive body layers; each slot holds at most one garment name."""

    base: Optional[str] = None
    bottom: Optional[str] = None
    mid: Optional[str] = None
    outer: Optional[str] = None


@dataclass(frozen=True)
class MetaCard:
    title: str
    content: str
    icon: str


@dataclass(frozen=True)
class HeroSummary:
    title: str
    subtitle: str


@dataclass(frozen=True)
class Recommendation:
    """Everything the weather screen renders for one recompute."""

    mode: ContextMode
    items: Tuple[str, ...]
    entries: Tuple[ClothingCatalogEntry, ...]
    slots: LayerSlots
    accessories: Tuple[str, ...]
    alternatives: Alternatives
    meta_cards: Tuple[MetaCard, ...]
    warnings: Tuple[str, ...]
    adjusted_temperature: float
    band: TemperatureBand
    layering_band: TemperatureBand
    layering_reference_temp: float
    hero: HeroSummary
    # layer choice before the car seat overrides; swaps count from here
    selected_slots: Optional[LayerSlots] = None
    debug_summary: Dict[str, object] = field(default_factory=dict, compare=False)

    def to_dict(self) -> Dict[str, object]:
        """Plain payload for UI layers and logs."""

        return {
            "mode": self.mode.value,
            "items": list(self.items),
            "entries": [
                {
                    "id": entry.entry_id,
                    "name": entry.name,
                    "image": entry.image,
                    "category": entry.category,
                    "recommended": entry.recommended,
                }
                for entry in self.entries
            ],
            "alternatives": {slot: list(names) for slot, names in self.alternatives.items()},
            "meta_cards": [
                {"title": card.title, "content": card.content, "icon": card.icon} for card in self.meta_cards
            ],
            "adjusted_temperature": self.adjusted_temperature,
            "band": self.band.value,
            "layering_band": self.layering_band.value,
            "layering_reference_temp": self.layering_reference_temp,
            "hero": {"title": self.hero.title, "subtitle": self.hero.subtitle},
        }
