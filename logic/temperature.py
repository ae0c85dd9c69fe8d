"""Effective temperature and band classification for dressing decisions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from models.weather import BabyProfile, ContextMode, TemperatureBand, WeatherReading

CONTEXT_MODIFIERS = {
    ContextMode.STROLLER: 0.0,
    ContextMode.CARRIER: 3.0,
    ContextMode.INDOOR: 5.0,
    ContextMode.SLEEPING: 2.0,
    ContextMode.CAR_SEAT: 0.0,
}

# (lower bound inclusive, band), warmest first
BAND_THRESHOLDS = (
    (28.0, TemperatureBand.HOT),
    (24.0, TemperatureBand.WARM),
    (21.0, TemperatureBand.MILD),
    (16.0, TemperatureBand.COOL),
    (11.0, TemperatureBand.FRESH),
)

HEAT_INDEX_THRESHOLD = 27.0
WIND_CHILL_THRESHOLD = 10.0
WIND_CHILL_MIN_SPEED = 5.0
SLEEP_COMFORT_MIN = 16.0
SLEEP_COMFORT_MAX = 26.0


@dataclass(frozen=True)
class ResolvedTemperature:
    """Temperatures and bands that drive the clothing rules.

    ``band`` describes the outside conditions (tips, hero title). Layer and
    accessory rules read ``layering_band``/``layering_reference_temp``, which
    only differ from the outdoor values while sleeping.
    """

    adjusted_temperature: float
    band: TemperatureBand
    layering_band: TemperatureBand
    layering_reference_temp: float
    baseline: float
    context_modifier: float
    age_modifier: float
    weight_modifier: float
    manual_override: bool


def classify_band(temperature: float) -> TemperatureBand:
    """Map a temperature in °C to its band."""

    for lower_bound, band in BAND_THRESHOLDS:
        if temperature >= lower_bound:
            return band
    return TemperatureBand.COLD


def _baseline(reading: WeatherReading, manual_temperature: Optional[float]) -> float:
    if manual_temperature is not None:
        return manual_temperature
    if reading.feels_like is not None:
        return reading.feels_like
    temperature = reading.temperature
    if temperature > HEAT_INDEX_THRESHOLD:
        return temperature + 0.05 * reading.humidity
    if temperature < WIND_CHILL_THRESHOLD and reading.wind_speed > WIND_CHILL_MIN_SPEED:
        return temperature - 0.1 * reading.wind_speed
    return temperature


def age_modifier(age_months: float) -> float:
    if age_months < 3:
        return -2.0
    if age_months < 6:
        return -1.0
    return 0.0


def weight_modifier(weight_percentile: float) -> float:
    return -0.5 if weight_percentile < 25 else 0.0


def resolve_temperature(
    reading: WeatherReading,
    mode: ContextMode,
    profile: BabyProfile,
    manual_temperature: Optional[float] = None,
) -> ResolvedTemperature:
    """Combine weather, context and the baby's profile into dressing temperatures.

    A manual felt temperature only counts in indoor and sleeping mode. When it
    counts it replaces the weather baseline and switches off the context, age
    and weight modifiers, because the parent already measured what the baby
    feels.
    """

    manual = manual_temperature if mode.accepts_manual_temperature else None
    manual_override = manual is not None

    baseline = _baseline(reading, manual)
    context_mod = 0.0 if manual_override else CONTEXT_MODIFIERS[mode]
    age_mod = 0.0 if manual_override else age_modifier(profile.age_months)
    weight_mod = 0.0 if manual_override else weight_modifier(profile.weight_percentile)
    personal = age_mod + weight_mod

    adjusted = baseline + context_mod + personal
    band = classify_band(adjusted)

    layering_band = band
    reference_temp = adjusted
    if mode is ContextMode.SLEEPING:
        indoor_reference = manual if manual_override else baseline
        indoor_offset = 0.0 if manual_override else CONTEXT_MODIFIERS[ContextMode.INDOOR]
        reference_temp = min(
            max(indoor_reference + indoor_offset + personal, SLEEP_COMFORT_MIN),
            SLEEP_COMFORT_MAX,
        )
        layering_band = classify_band(reference_temp)

    return ResolvedTemperature(
        adjusted_temperature=adjusted,
        band=band,
        layering_band=layering_band,
        layering_reference_temp=reference_temp,
        baseline=baseline,
        context_modifier=context_mod,
        age_modifier=age_mod,
        weight_modifier=weight_mod,
        manual_override=manual_override,
    )


__all__ = [
    "BAND_THRESHOLDS",
    "CONTEXT_MODIFIERS",
    "ResolvedTemperature",
    "age_modifier",
    "classify_band",
    "resolve_temperature",
    "weight_modifier",
]
