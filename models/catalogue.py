"""Static clothing catalogue and canonical garment names.

The rule engine only ever emits the canonical names below. Turning a name
into something renderable (image key, category) is a table lookup against
:data:`CLOTHING_CATALOGUE`; names that are not catalogued are skipped by the
caller rather than treated as errors.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from models.weather import ContextMode

WINDEL = "Windel"
KURZARMBODY = "Kurzarmbody"
LANGARMBODY = "Langarmbody"
HOSE = "Hose"
SHORTS = "Shorts"
STRUMPFHOSE = "Strumpfhose"
DUENNER_PULLOVER = "Dünner Pullover"
PULLOVER = "Pullover"
FLEECEJACKE = "Fleecejacke"
JACKE = "Jacke"
OVERALL = "Overall"
TRAGEJACKE = "Tragejacke/-cover"
SOFTSHELLANZUG = "Softshellanzug"
REGENJACKE = "Regenjacke"
MUETZE = "Mütze"
SOCKEN = "Socken"
HANDSCHUHE = "Handschuhe"
SONNENHUT = "Sonnenhut"
HALSTUCH = "Halstuch"
SCHAL = "Schal"
SCHUHE = "Schuhe"
KINDERWAGEN_DECKE = "Kinderwagen-Decke"
FUESSLINGE = "Füßlinge"
SCHLAFSACK_05_TOG = "Schlafsack 0.5 TOG"
SCHLAFSACK_10_TOG = "Schlafsack 1.0 TOG"
SCHLAFSACK_25_TOG = "Schlafsack 2.5 TOG"
SCHLAFANZUG = "Schlafanzug"


@dataclass(frozen=True)
class ClothingCatalogEntry:
    """Catalogue metadata for one garment.

    ``temp_min``/``temp_max`` are display hints only; selection never reads them.
    """

    entry_id: str
    name: str
    image: Optional[str]
    category: str
    temp_min: float
    temp_max: float
    recommended: bool = False

    def as_recommended(self) -> "ClothingCatalogEntry":
        return replace(self, recommended=True)


def _entry(entry_id: str, name: str, image: Optional[str], category: str, temp_min: float, temp_max: float) -> ClothingCatalogEntry:
    return ClothingCatalogEntry(entry_id, name, image, category, temp_min, temp_max)


CLOTHING_CATALOGUE: Tuple[ClothingCatalogEntry, ...] = (
    _entry("1", WINDEL, "Windel.png", "underwear", -20, 40),
    _entry("2", KURZARMBODY, "Kurzarmbody.png", "underwear", 20, 40),
    _entry("3", LANGARMBODY, "Langarmbody.png", "underwear", -20, 25),
    _entry("4", HOSE, "Hose.png", "bottom", -20, 25),
    _entry("5", SHORTS, "Shorts.png", "bottom", 25, 40),
    _entry("16", STRUMPFHOSE, "Strumpfhose.png", "bottom", -15, 18),
    _entry("6", DUENNER_PULLOVER, "DuennerPulli.png", "mid", 11, 20),
    _entry("7", PULLOVER, "Pullover.png", "mid", -20, 15),
    _entry("17", FLEECEJACKE, "Fleecejacke.png", "mid", -10, 12),
    _entry("8", JACKE, "Jacke.png", "outer", -20, 10),
    _entry("9", OVERALL, "Overall.png", "outer", -20, 5),
    _entry("26", TRAGEJACKE, "Tragejacke.jpg", "outer", -20, 15),
    _entry("18", SOFTSHELLANZUG, "Softshellanzug.png", "outer", 5, 15),
    _entry("19", REGENJACKE, "Regenjacke.png", "outer", 5, 20),
    _entry("10", MUETZE, "Muetze.png", "accessory", -20, 15),
    _entry("11", SOCKEN, "Socken.png", "accessory", -20, 20),
    _entry("12", HANDSCHUHE, "Handschuhe.png", "accessory", -20, 10),
    _entry("20", SONNENHUT, None, "accessory", 20, 40),
    _entry("21", HALSTUCH, "Halstuch.png", "accessory", 8, 20),
    _entry("22", SCHAL, "Schal.png", "accessory", -20, 10),
    _entry("23", SCHUHE, None, "accessory", -10, 20),
    _entry("24", KINDERWAGEN_DECKE, "Kinderwagendecke.png", "accessory", -20, 15),
    _entry("27", FUESSLINGE, "Fuesslinge.png", "accessory", -20, 15),
    _entry("13", SCHLAFSACK_05_TOG, "Schlafsack.png", "sleep", 24, 27),
    _entry("14", SCHLAFSACK_10_TOG, "Schlafsack.png", "sleep", 20, 24),
    _entry("15", SCHLAFSACK_25_TOG, "Schlafsack.png", "sleep", 16, 20),
    _entry("25", SCHLAFANZUG, "Schlafanzug.png", "sleep", 18, 24),
)

_BY_NAME: Dict[str, ClothingCatalogEntry] = {entry.name: entry for entry in CLOTHING_CATALOGUE}

_CARRIER_DISPLAY_NAMES = {
    STRUMPFHOSE: "Leggings",
    MUETZE: "Wintermütze",
}


def lookup(name: str) -> Optional[ClothingCatalogEntry]:
    """Exact, case-sensitive lookup of a garment by canonical name."""

    return _BY_NAME.get(name)


def display_name(name: str, mode: ContextMode) -> str:
    """Label shown to the parent; carriers use leggings and winter hats."""

    if mode is ContextMode.CARRIER:
        return _CARRIER_DISPLAY_NAMES.get(name, name)
    return name


__all__ = [
    "CLOTHING_CATALOGUE",
    "ClothingCatalogEntry",
    "display_name",
    "lookup",
]
