"""End-to-end behaviour of the clothing advisor."""

import logging
import random

import pytest

from agents.clothing_advisor import ClothingAdvisor
from babyweather_app.config import AdvisorConfig
from logic.assembly import EXTREME_CARDS, WEATHER_TIPS
from models.weather import CHILLY_BANDS, BabyProfile, ContextMode, TemperatureBand, WeatherReading


@pytest.fixture()
def advisor() -> ClothingAdvisor:
    return ClothingAdvisor(AdvisorConfig(tip_seed=7))


def test_windy_rain_stroller_walk(advisor: ClothingAdvisor) -> None:
    reading = WeatherReading(temperature=5, humidity=60, wind_speed=25, description="Regen")
    result = advisor.recommend(reading, ContextMode.STROLLER, BabyProfile(age_months=4, weight_percentile=50))

    assert result.adjusted_temperature == pytest.approx(1.5)
    assert result.band is TemperatureBand.COLD
    assert set(result.debug_summary["candidates"]["outer"]) >= {"Overall", "Regenjacke", "Softshellanzug"}
    assert result.slots.outer == "Overall"
    assert {"Mütze", "Handschuhe", "Schal", "Kinderwagen-Decke", "Socken"} <= set(result.items)
    assert result.items[0] == "Windel"


def test_indoor_manual_temperature(advisor: ClothingAdvisor) -> None:
    reading = WeatherReading(temperature=-3, wind_speed=12)
    result = advisor.recommend(
        reading, "indoor", BabyProfile(age_months=10, weight_percentile=60), manual_temperature=14
    )

    assert result.adjusted_temperature == 14
    assert result.band is TemperatureBand.FRESH
    assert result.slots.base == "Langarmbody"
    assert result.alternatives == {"bottom": ("Strumpfhose", "Hose")}
    assert result.items == ("Windel", "Langarmbody", "Strumpfhose", "Pullover", "Socken")
    assert result.hero.title == "Heute frisch (14°C)"


def test_sleeping_uses_nursery_band_for_layers(advisor: ClothingAdvisor) -> None:
    result = advisor.recommend(WeatherReading(temperature=-5), ContextMode.SLEEPING)

    assert result.band is TemperatureBand.COLD
    assert result.layering_band is TemperatureBand.COOL
    assert result.items == ("Windel", "Langarmbody", "Schlafanzug", "Schlafsack 2.5 TOG")
    assert result.meta_cards[0].content in WEATHER_TIPS[TemperatureBand.COLD]
    assert result.meta_cards[-1] == EXTREME_CARDS[TemperatureBand.COLD]
    assert result.hero.title == "Heute kalt (-5°C)"
    assert result.hero.subtitle == "Schlafsack + warme Schichten"


@pytest.mark.parametrize("temperature", [-12, -2, 4, 9, 12, 15, 18, 21, 26, 31])
@pytest.mark.parametrize("wind, description", [(0, "klar"), (30, "Schneeregen")])
def test_car_seat_never_keeps_gloves_or_scarf(
    advisor: ClothingAdvisor, temperature: float, wind: float, description: str
) -> None:
    reading = WeatherReading(temperature=temperature, wind_speed=wind, description=description)
    result = advisor.recommend(reading, ContextMode.CAR_SEAT, BabyProfile(age_months=2, weight_percentile=10))

    assert result.slots.outer not in {"Overall", "Softshellanzug"}
    if result.layering_band in CHILLY_BANDS:
        assert "Handschuhe" not in result.items
        assert "Schal" not in result.items
        assert "Kinderwagen-Decke" in result.items
        assert result.warnings


def test_carrier_warning_becomes_meta_card(advisor: ClothingAdvisor) -> None:
    result = advisor.recommend(WeatherReading(temperature=8), ContextMode.CARRIER)
    assert len(result.warnings) == 1
    assert result.meta_cards[1].content == result.warnings[0]
    assert len(result.meta_cards) <= 3


def test_identical_inputs_give_identical_output() -> None:
    reading = WeatherReading(temperature=31, humidity=40, description="sonnig")
    first = ClothingAdvisor(AdvisorConfig(tip_seed=3)).recommend(reading, ContextMode.STROLLER)
    second = ClothingAdvisor(AdvisorConfig(tip_seed=3)).recommend(reading, ContextMode.STROLLER)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_injected_random_source_picks_the_tip() -> None:
    reading = WeatherReading(temperature=22)
    advisor = ClothingAdvisor(rng_factory=lambda: random.Random(11))
    expected = random.Random(11).choice(WEATHER_TIPS[TemperatureBand.MILD])
    assert advisor.recommend(reading, ContextMode.STROLLER).meta_cards[0].content == expected


@pytest.mark.parametrize("mode", list(ContextMode))
@pytest.mark.parametrize("temperature", [-8, 6, 14, 19, 23, 27, 33])
def test_items_unique_and_catalogued(advisor: ClothingAdvisor, mode: ContextMode, temperature: float) -> None:
    result = advisor.recommend(WeatherReading(temperature=temperature, wind_speed=22, description="rain"), mode)

    assert len(result.items) == len(set(result.items))
    assert [entry.name for entry in result.entries] == list(result.items)
    assert all(entry.recommended for entry in result.entries)
    for names in result.alternatives.values():
        assert len(names) >= 2


def test_mode_strings_are_converted(advisor: ClothingAdvisor) -> None:
    result = advisor.recommend(WeatherReading(temperature=10), "carSeat")
    assert result.mode is ContextMode.CAR_SEAT
    with pytest.raises(ValueError):
        advisor.recommend(WeatherReading(temperature=10), "bicycle")


def test_default_profile_from_config() -> None:
    advisor = ClothingAdvisor(AdvisorConfig(default_age_months=2, default_weight_percentile=20))
    result = advisor.recommend(WeatherReading(temperature=20), ContextMode.STROLLER)
    assert result.debug_summary["classification_rationale"]["age_modifier"] == -2
    assert result.adjusted_temperature == pytest.approx(17.5)


def test_recommendation_event_logged(advisor: ClothingAdvisor, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)
    advisor.recommend(WeatherReading(temperature=12), ContextMode.STROLLER)

    events = [record for record in caplog.records if getattr(record, "event", None) == "recommendation_computed"]
    assert len(events) == 1
    assert events[0].band == "fresh"
    assert events[0].mode == "stroller"
    assert events[0].context == "Kinderwagen"
    assert events[0].correlation_id


@pytest.mark.parametrize(
    "mode, description",
    [(ContextMode.CAR_SEAT, "Auto"), (ContextMode.INDOOR, "Drinnen"), (ContextMode.STROLLER, "Kinderwagen")],
)
def test_debug_summary_names_the_context(advisor: ClothingAdvisor, mode: ContextMode, description: str) -> None:
    result = advisor.recommend(WeatherReading(temperature=10), mode)
    assert result.debug_summary["input_assumptions"]["context"] == description


def test_recommend_payload_ok(advisor: ClothingAdvisor) -> None:
    response = advisor.recommend_payload(
        {"temperature": 13, "feelsLike": None, "windSpeed": 4, "description": "bewölkt"},
        {"mode": "stroller", "profile": {"age_months": 6, "weight_percentile": 50}, "alternative_indices": {"bottom": 1}},
    )
    assert response["status"] == "ok"
    assert response["recommendation"]["band"] == "fresh"
    assert "Hose" in response["recommendation"]["items"]
    assert "Strumpfhose" not in response["recommendation"]["items"]


@pytest.mark.parametrize(
    "weather, request_payload, message",
    [
        ({"humidity": 50}, {"profile": {"age_months": 6, "weight_percentile": 50}}, "Invalid weather payload"),
        ({"temperature": 10}, {"profile": {"age_months": -1, "weight_percentile": 50}}, "Invalid recommendation request"),
        ({"temperature": 10}, {"profile": {"age_months": 3, "weight_percentile": 120}}, "Invalid recommendation request"),
        (
            {"temperature": 10},
            {"profile": {"age_months": 3, "weight_percentile": 50}, "alternative_indices": {"base": 0}},
            "Invalid recommendation request",
        ),
    ],
)
def test_recommend_payload_needs_review(
    advisor: ClothingAdvisor, weather: dict, request_payload: dict, message: str
) -> None:
    response = advisor.recommend_payload(weather, request_payload)
    assert response["status"] == "needs_review"
    assert response["message"] == message
    assert response["details"]
