"""Model package exports."""

from models.catalogue import CLOTHING_CATALOGUE, ClothingCatalogEntry
from models.recommendation import HeroSummary, LayerSlots, MetaCard, Recommendation
from models.weather import BabyProfile, ContextMode, TemperatureBand, WeatherReading

__all__ = [
    "BabyProfile",
    "CLOTHING_CATALOGUE",
    "ClothingCatalogEntry",
    "ContextMode",
    "HeroSummary",
    "LayerSlots",
    "MetaCard",
    "Recommendation",
    "TemperatureBand",
    "WeatherReading",
]
