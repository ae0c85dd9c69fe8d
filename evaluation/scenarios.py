"""Evaluation scenarios covering weather, context modes and baby profiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from models.weather import BabyProfile, ContextMode, WeatherReading


@dataclass
class EvaluationScenario:
    name: str
    description: str
    weather: WeatherReading
    mode: ContextMode
    profile: BabyProfile
    expectations: Dict[str, object]
    manual_temperature: Optional[float] = None
    alternative_indices: Dict[str, int] = field(default_factory=dict)


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="windy_rain_stroller",
        description="Cold, windy rain on a stroller walk with a four month old.",
        weather=WeatherReading(temperature=5, humidity=60, wind_speed=25, description="Regen"),
        mode=ContextMode.STROLLER,
        profile=BabyProfile(age_months=4, weight_percentile=50),
        expectations={
            "band": "cold",
            "outer": "Overall",
            "outer_candidates_include": ["Overall", "Regenjacke", "Softshellanzug"],
            "items_include": ["Mütze", "Handschuhe", "Schal", "Kinderwagen-Decke", "Socken"],
        },
    ),
    EvaluationScenario(
        name="indoor_manual_felt_temperature",
        description="Parent measured 14 °C in a chilly living room for a ten month old.",
        weather=WeatherReading(temperature=2, humidity=70, wind_speed=10, description="bedeckt"),
        mode=ContextMode.INDOOR,
        profile=BabyProfile(age_months=10, weight_percentile=60),
        manual_temperature=14,
        expectations={
            "band": "fresh",
            "items_include": ["Langarmbody", "Strumpfhose", "Pullover"],
            "alternatives": {"bottom": ["Strumpfhose", "Hose"]},
        },
    ),
    EvaluationScenario(
        name="car_seat_cold",
        description="Cold morning drive; bulky suits and gloves stay off in the seat.",
        weather=WeatherReading(temperature=3, humidity=80, wind_speed=4, description="klar"),
        mode=ContextMode.CAR_SEAT,
        profile=BabyProfile(age_months=7, weight_percentile=40),
        expectations={
            "band": "cold",
            "outer": "Jacke",
            "items_include": ["Kinderwagen-Decke"],
            "items_exclude": ["Handschuhe", "Schal", "Overall", "Softshellanzug"],
        },
    ),
    EvaluationScenario(
        name="summer_carrier",
        description="Hot afternoon in the carrier.",
        weather=WeatherReading(temperature=30, feels_like=31, humidity=40, wind_speed=5, description="sonnig"),
        mode=ContextMode.CARRIER,
        profile=BabyProfile(age_months=8, weight_percentile=55),
        expectations={
            "band": "hot",
            "items_include": ["Kurzarmbody", "Shorts", "Sonnenhut"],
            "items_exclude": ["Halstuch"],
        },
    ),
    EvaluationScenario(
        name="warm_nursery_sleep",
        description="Nap in a warm nursery measured at 25 °C.",
        weather=WeatherReading(temperature=12, humidity=50, wind_speed=0, description="klar"),
        mode=ContextMode.SLEEPING,
        profile=BabyProfile(age_months=5, weight_percentile=50),
        manual_temperature=25,
        expectations={
            "items_include": ["Schlafsack 0.5 TOG", "Kurzarmbody"],
            "items_exclude": ["Schlafanzug"],
        },
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
