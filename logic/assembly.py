"""Final outfit list, catalogue resolution, tip cards and hero summary."""

from __future__ import annotations

import logging
import math
import random
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from logic.temperature import ResolvedTemperature
from models import catalogue
from models.catalogue import (
    HOSE,
    SCHLAFANZUG,
    SCHLAFSACK_05_TOG,
    SCHLAFSACK_10_TOG,
    SCHLAFSACK_25_TOG,
    SOCKEN,
    STRUMPFHOSE,
    WINDEL,
    ClothingCatalogEntry,
)
from models.recommendation import HeroSummary, LayerSlots, MetaCard
from models.weather import CHILLY_BANDS, ContextMode, TemperatureBand

logger = logging.getLogger(__name__)

MAX_META_CARDS = 3
PYJAMA_BELOW_TEMP = 24.0

# (lower bound inclusive, sleep sack), warmest first; anything colder gets 2.5 TOG
SLEEP_SACK_TIERS = (
    (24.0, SCHLAFSACK_05_TOG),
    (20.0, SCHLAFSACK_10_TOG),
)

WEATHER_TIPS: Dict[TemperatureBand, Tuple[str, ...]] = {
    TemperatureBand.HOT: (
        "Schatten, Wasser, Sonnenhut – so bleibt es entspannt.",
        "Leichte Stoffe lassen die Haut atmen.",
        "Kurze Check-ins: Nacken warm? Dann passt alles.",
        "In der Mittagssonne lieber eine Pause drinnen machen.",
        "Luftig im Kinderwagen hilft gegen Hitzestau.",
    ),
    TemperatureBand.WARM: (
        "Eine leichte Schicht dabei haben – falls Wind aufzieht.",
        "Sonnenschutz lohnt sich auch bei milder Sonne.",
        "Im Kinderwagen hilft eine dünne Decke gegen Zugluft.",
    ),
    TemperatureBand.MILD: (
        "Schichten sind praktisch, wenn das Wetter kippt.",
        "Eine dünne Mütze kann bei Wind helfen.",
        "Kurz lüften, dann wieder kuschelig machen.",
    ),
    TemperatureBand.COOL: (
        "Kalte Hände sind ok – der Nacken zählt mehr.",
        "Für längere Ausflüge Wechselkleidung einpacken.",
        "Im Kinderwagen schützt ein Fußsack vor Kälte.",
    ),
    TemperatureBand.FRESH: (
        "Windschutz oder Softshell hilft gegen Zugluft.",
        "Ein Halstuch schützt empfindliche Haut.",
        "Regenverdeck griffbereit, falls es umschlägt.",
    ),
    TemperatureBand.COLD: (
        "Mehrere dünne Schichten wärmen oft besser.",
        "Trocken bleibt warm – nasse Kleidung zügig wechseln.",
        "Windschutz am Kinderwagen macht viel aus.",
        "Ein kleines Wechselset beruhigt unterwegs.",
    ),
}

TIP_TITLE = "Tipp für heute"
TIP_ICON = "lightbulb.fill"
WARNING_TITLE = "Gut zu wissen"
WARNING_ICON = "exclamationmark.triangle.fill"
EXTREME_CARDS = {
    TemperatureBand.HOT: MetaCard(
        title="Hitze-Hinweis",
        content="Schatten, trinken, Sonnenhut – kurze Nacken-Checks reichen.",
        icon="sun.max.fill",
    ),
    TemperatureBand.COLD: MetaCard(
        title="Kälte-Hinweis",
        content="Fühlt sich der Nacken warm an? Dann ist alles gut.",
        icon="snowflake",
    ),
}

_OUTDOOR_SUBTITLES = {
    TemperatureBand.HOT: "Kurzarm & luftig",
    TemperatureBand.WARM: "Kurzarm + leichte Schicht",
    TemperatureBand.MILD: "Langarm + leichte Schicht",
    TemperatureBand.COOL: "Langarm + Schichten",
    TemperatureBand.FRESH: "Langarm + warme Schichten",
    TemperatureBand.COLD: "Warm einpacken + Schichten",
}
_INDOOR_SUBTITLES = {
    TemperatureBand.HOT: "Luftig & leicht",
    TemperatureBand.WARM: "Leicht & bequem",
    TemperatureBand.MILD: "Langarm + leichte Schicht",
    TemperatureBand.COOL: "Langarm + Schichten",
    TemperatureBand.FRESH: "Langarm + warme Schichten",
    TemperatureBand.COLD: "Warm & kuschelig",
}
_SLEEPING_SUBTITLES = {
    TemperatureBand.HOT: "Leichter Schlafsack reicht",
    TemperatureBand.WARM: "Leichter Schlafsack + Body",
    TemperatureBand.MILD: "Schlafsack + Langarm",
    TemperatureBand.COOL: "Schlafsack + warme Schichten",
    TemperatureBand.FRESH: "Wärmerer Schlafsack + Schichten",
    TemperatureBand.COLD: "Wärmerer Schlafsack + extra Schichten",
}


def sleep_sack_for(reference_temp: float) -> str:
    for lower_bound, sleep_sack in SLEEP_SACK_TIERS:
        if reference_temp >= lower_bound:
            return sleep_sack
    return SCHLAFSACK_25_TOG


def _append_unique(items: List[str], names: Iterable[Optional[str]]) -> None:
    for name in names:
        if name and name not in items:
            items.append(name)


def assemble_items(
    mode: ContextMode,
    resolved: ResolvedTemperature,
    slots: LayerSlots,
    accessories: Sequence[str],
) -> Tuple[str, ...]:
    """Build the ordered, duplicate-free outfit for the given mode."""

    band = resolved.layering_band
    socks = [SOCKEN] if SOCKEN in accessories else []
    items: List[str] = []

    if mode is ContextMode.SLEEPING:
        reference_temp = resolved.layering_reference_temp
        pyjama = SCHLAFANZUG if reference_temp < PYJAMA_BELOW_TEMP else None
        _append_unique(items, [WINDEL, slots.base, pyjama, sleep_sack_for(reference_temp)])
        _append_unique(items, socks)
    elif mode is ContextMode.INDOOR:
        mid = slots.mid if band in CHILLY_BANDS else None
        _append_unique(items, [WINDEL, slots.base, slots.bottom, mid])
        _append_unique(items, socks)
    else:
        _append_unique(items, [WINDEL, slots.base, slots.bottom])
        if mode is ContextMode.CARRIER and band is TemperatureBand.COLD:
            _append_unique(items, [STRUMPFHOSE, HOSE])
        _append_unique(items, [slots.mid, slots.outer])
        _append_unique(items, accessories)
    return tuple(items)


def resolve_catalogue_entries(names: Iterable[str]) -> Tuple[ClothingCatalogEntry, ...]:
    """Look each name up in the catalogue; unknown names are skipped."""

    entries = []
    for name in names:
        entry = catalogue.lookup(name)
        if entry is None:
            logger.debug("No catalogue entry for %s", name)
            continue
        entries.append(entry.as_recommended())
    return tuple(entries)


def build_meta_cards(
    band: TemperatureBand, warnings: Sequence[str], rng: random.Random
) -> Tuple[MetaCard, ...]:
    """Tip of the day for the outdoor band, the first warning and an extreme-weather note."""

    cards: List[MetaCard] = []
    tips = WEATHER_TIPS.get(band, ())
    if tips:
        cards.append(MetaCard(title=TIP_TITLE, content=rng.choice(tips), icon=TIP_ICON))
    if warnings:
        cards.append(MetaCard(title=WARNING_TITLE, content=warnings[0], icon=WARNING_ICON))
    extreme = EXTREME_CARDS.get(band)
    if extreme is not None:
        cards.append(extreme)
    return tuple(cards[:MAX_META_CARDS])


def build_hero_summary(
    resolved: ResolvedTemperature,
    mode: ContextMode,
    raw_temperature: float,
    manual_temperature: Optional[float] = None,
) -> HeroSummary:
    shown = manual_temperature if resolved.manual_override and manual_temperature is not None else raw_temperature
    title = f"Heute {resolved.band.label} ({math.floor(shown + 0.5)}°C)"
    if mode is ContextMode.SLEEPING:
        subtitles = _SLEEPING_SUBTITLES
    elif mode is ContextMode.INDOOR:
        subtitles = _INDOOR_SUBTITLES
    else:
        subtitles = _OUTDOOR_SUBTITLES
    return HeroSummary(title=title, subtitle=subtitles[resolved.layering_band])


__all__ = [
    "EXTREME_CARDS",
    "MAX_META_CARDS",
    "WEATHER_TIPS",
    "assemble_items",
    "build_hero_summary",
    "build_meta_cards",
    "resolve_catalogue_entries",
    "sleep_sack_for",
]
