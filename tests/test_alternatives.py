"""Cycling exposed alternatives between recomputes."""

import logging

import pytest

from agents.alternatives import (
    RecommendationSession,
    next_alternative_index,
    next_alternative_name,
    slot_for_item,
)
from agents.clothing_advisor import ClothingAdvisor
from babyweather_app.config import AdvisorConfig
from babyweather_app.logging_config import CORRELATION_ID
from models.weather import ContextMode, WeatherReading

FRESH_DAY = WeatherReading(temperature=13, humidity=55, wind_speed=8, description="bewölkt")
WINDY_RAIN = WeatherReading(temperature=5, humidity=60, wind_speed=25, description="Regen")


@pytest.fixture()
def session() -> RecommendationSession:
    return RecommendationSession(ClothingAdvisor(AdvisorConfig(tip_seed=1)), mode=ContextMode.STROLLER)


def test_shorts_and_trousers_wrap_around() -> None:
    alternatives = {"bottom": ("Shorts", "Hose")}
    indices = next_alternative_index(alternatives, "bottom", {}, current="Shorts")
    assert alternatives["bottom"][indices["bottom"]] == "Hose"
    indices = next_alternative_index(alternatives, "bottom", indices)
    assert alternatives["bottom"][indices["bottom"]] == "Shorts"


def test_index_without_current_starts_at_zero() -> None:
    assert next_alternative_index({"mid": ("Pullover", "Fleecejacke")}, "mid", {}) == {"mid": 1}


def test_other_slots_keep_their_index() -> None:
    alternatives = {"bottom": ("Strumpfhose", "Hose"), "outer": ("Jacke", "Softshellanzug")}
    updated = next_alternative_index(alternatives, "bottom", {"outer": 0})
    assert updated == {"outer": 0, "bottom": 1}


def test_single_candidate_slot_is_untouched() -> None:
    indices = {"bottom": 1}
    assert next_alternative_index({"mid": ("Pullover",)}, "mid", indices) == indices
    assert next_alternative_index({}, "outer", indices) == indices


def test_unknown_slot_is_rejected() -> None:
    with pytest.raises(ValueError):
        next_alternative_index({}, "base", {})


def test_swap_cycles_and_returns_to_start(session: RecommendationSession) -> None:
    first = session.set_weather(FRESH_DAY)
    assert first.alternatives["bottom"] == ("Strumpfhose", "Hose")
    assert first.slots.bottom == "Strumpfhose"

    swapped = session.swap("bottom")
    assert swapped.slots.bottom == "Hose"
    assert swapped.slots.outer == first.slots.outer

    back = session.swap("bottom")
    assert back.slots.bottom == "Strumpfhose"


@pytest.mark.parametrize("slot", ["mid", "outer"])
def test_n_swaps_restore_the_selection(session: RecommendationSession, slot: str) -> None:
    original = session.set_weather(WINDY_RAIN)
    names = original.alternatives[slot]
    assert len(names) >= 2

    seen = []
    for _ in names:
        seen.append(getattr(session.swap(slot).slots, slot))

    assert seen[-1] == getattr(original.slots, slot)
    assert sorted(seen) == sorted(names)


def test_swap_without_alternatives_is_noop(session: RecommendationSession) -> None:
    recommendation = session.set_weather(FRESH_DAY)
    assert "mid" not in recommendation.alternatives
    assert session.swap("mid") is recommendation
    assert session.indices == {}


def test_weather_and_mode_changes_reset_indices(session: RecommendationSession) -> None:
    session.set_weather(FRESH_DAY)
    session.swap("bottom")
    assert session.indices == {"bottom": 1}

    session.set_weather(WINDY_RAIN)
    assert session.indices == {}

    session.swap("outer")
    session.set_mode(ContextMode.CARRIER)
    assert session.indices == {}


def test_manual_temperature_keeps_indices(session: RecommendationSession) -> None:
    session.set_weather(FRESH_DAY)
    session.swap("bottom")
    session.set_manual_temperature(20)
    assert session.indices == {"bottom": 1}


def test_swap_before_weather_fails(session: RecommendationSession) -> None:
    with pytest.raises(RuntimeError):
        session.swap("bottom")


def test_swap_unknown_slot_fails(session: RecommendationSession) -> None:
    session.set_weather(FRESH_DAY)
    with pytest.raises(ValueError):
        session.swap("shoes")


def test_slot_lookup_and_preview() -> None:
    alternatives = {"bottom": ("Strumpfhose", "Hose"), "outer": ("Jacke", "Softshellanzug")}
    assert slot_for_item(alternatives, "Hose") == "bottom"
    assert slot_for_item(alternatives, "Softshellanzug") == "outer"
    assert slot_for_item(alternatives, "Mütze") is None

    assert next_alternative_name(alternatives, "outer", {}, current="Softshellanzug") == "Jacke"
    assert next_alternative_name(alternatives, "mid", {}) is None


def test_car_seat_swap_counts_from_the_selected_outer() -> None:
    session = RecommendationSession(ClothingAdvisor(AdvisorConfig(tip_seed=1)), mode=ContextMode.CAR_SEAT)
    first = session.set_weather(WeatherReading(temperature=3, wind_speed=25, description="Regen"))
    assert first.alternatives["outer"] == ("Regenjacke", "Softshellanzug")
    assert first.selected_slots.outer == "Softshellanzug"
    assert first.slots.outer == "Jacke"

    swapped = session.swap("outer")
    assert session.indices == {"outer": 0}
    assert swapped.slots.outer == "Regenjacke"


def test_swap_leaves_no_correlation_id_behind(
    session: RecommendationSession, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO)
    token = CORRELATION_ID.set(None)
    try:
        session.set_weather(FRESH_DAY)
        session.swap("bottom")
        assert CORRELATION_ID.get() is None
    finally:
        CORRELATION_ID.reset(token)

    events = [getattr(record, "event", None) for record in caplog.records]
    swap_at = events.index("alternative_swapped")
    recompute_at = events.index("recommendation_computed", swap_at)
    swap_id = caplog.records[swap_at].correlation_id
    assert swap_id
    assert caplog.records[recompute_at].correlation_id == swap_id
