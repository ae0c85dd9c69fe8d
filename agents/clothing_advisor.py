"""Clothing advisor that turns a weather reading into a baby outfit."""

from __future__ import annotations

import logging
import random
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import ValidationError

from babyweather_app.config import AdvisorConfig
from babyweather_app.logging_config import get_logger, log_event, operation_context
from logic.accessories import select_accessories
from logic.assembly import (
    assemble_items,
    build_hero_summary,
    build_meta_cards,
    resolve_catalogue_entries,
)
from logic.context_rules import apply_context_rules
from logic.layers import derive_weather_flags, select_layers
from logic.temperature import BAND_THRESHOLDS, CONTEXT_MODIFIERS, resolve_temperature
from logic.validation import RecommendationRequest, validation_failure
from models.recommendation import Recommendation
from models.weather import CONTEXT_DESCRIPTIONS, BabyProfile, ContextMode, WeatherReading
from tools.observability import instrument_stage
from tools.weather_payload import WeatherPayloadError, parse_weather_payload


LOGGER = get_logger(__name__)

RandomFactory = Callable[[], random.Random]

_resolve = instrument_stage("resolve_temperature")(resolve_temperature)
_select_layers = instrument_stage("select_layers")(select_layers)
_select_accessories = instrument_stage("select_accessories")(select_accessories)
_apply_context_rules = instrument_stage("apply_context_rules")(apply_context_rules)
_assemble_items = instrument_stage("assemble_items")(assemble_items)


class ClothingAdvisor:
    """Runs the clothing rules for one weather reading at a time.

    The advisor keeps no state between calls. Alternative indices are passed
    in by the caller on every call and the only randomness, the tip of the
    day, comes from ``rng_factory``; with a fixed ``tip_seed`` in the config
    identical inputs give identical recommendations.
    """

    def __init__(self, config: AdvisorConfig | None = None, rng_factory: RandomFactory | None = None) -> None:
        self.config = config or AdvisorConfig()
        self._rng_factory = rng_factory or (lambda: random.Random(self.config.tip_seed))

    def default_profile(self) -> BabyProfile:
        return BabyProfile(
            age_months=self.config.default_age_months,
            weight_percentile=self.config.default_weight_percentile,
        )

    def recommend(
        self,
        reading: WeatherReading,
        mode: ContextMode | str,
        profile: BabyProfile | None = None,
        manual_temperature: Optional[float] = None,
        alternative_indices: Mapping[str, int] | None = None,
        rng: random.Random | None = None,
    ) -> Recommendation:
        """Compute the outfit, swap alternatives and tip cards for one recompute."""

        mode = ContextMode(mode)
        profile = profile or self.default_profile()
        indices = dict(alternative_indices or {})

        with operation_context("agent:clothing_advisor.recommend") as correlation_id:
            resolved = _resolve(reading, mode, profile, manual_temperature)
            flags = derive_weather_flags(reading)
            layers = _select_layers(resolved, mode, flags, indices)
            accessories = _select_accessories(resolved.layering_band, mode, profile)
            adjusted = _apply_context_rules(layers.slots, accessories, mode, resolved.layering_band)
            items = _assemble_items(mode, resolved, adjusted.slots, adjusted.accessories)
            meta_cards = build_meta_cards(resolved.band, adjusted.warnings, rng or self._rng_factory())
            hero = build_hero_summary(resolved, mode, reading.temperature, manual_temperature)

            debug_summary = {
                "input_assumptions": {
                    "context": CONTEXT_DESCRIPTIONS[mode],
                    "temperature": reading.temperature,
                    "feels_like": reading.feels_like,
                    "humidity": reading.humidity,
                    "wind_speed": reading.wind_speed,
                    "manual_temperature": manual_temperature if resolved.manual_override else None,
                },
                "thresholds": {
                    "temperature_bands_c": {band.value: f">={bound:g}" for bound, band in BAND_THRESHOLDS},
                    "context_modifiers": {key.value: value for key, value in CONTEXT_MODIFIERS.items()},
                },
                "classification_rationale": {
                    "baseline": resolved.baseline,
                    "context_modifier": resolved.context_modifier,
                    "age_modifier": resolved.age_modifier,
                    "weight_modifier": resolved.weight_modifier,
                    "band": resolved.band.value,
                    "layering_band": resolved.layering_band.value,
                },
                "weather_flags": {
                    "rain": flags.requires_rain_protection,
                    "snow": flags.indicates_snow,
                    "wind": flags.indicates_wind,
                },
                "candidates": {slot: list(names) for slot, names in layers.candidates.items()},
                "alternative_indices": indices,
            }

            recommendation = Recommendation(
                mode=mode,
                items=items,
                entries=resolve_catalogue_entries(items),
                slots=adjusted.slots,
                accessories=adjusted.accessories,
                alternatives=layers.alternatives,
                meta_cards=meta_cards,
                warnings=adjusted.warnings,
                adjusted_temperature=resolved.adjusted_temperature,
                band=resolved.band,
                layering_band=resolved.layering_band,
                layering_reference_temp=resolved.layering_reference_temp,
                hero=hero,
                selected_slots=layers.slots,
                debug_summary=debug_summary,
            )

            log_event(
                LOGGER,
                level=logging.INFO,
                event="recommendation_computed",
                agent="clothing_advisor",
                correlation_id=correlation_id,
                mode=mode.value,
                context=CONTEXT_DESCRIPTIONS[mode],
                adjusted_temperature=round(resolved.adjusted_temperature, 2),
                band=resolved.band.value,
                layering_band=resolved.layering_band.value,
                item_count=len(items),
                alternatives=sorted(layers.alternatives),
            )
            return recommendation

    def recommend_payload(self, weather: Mapping[str, Any], request: Mapping[str, Any]) -> Dict[str, Any]:
        """Validate raw caller dictionaries, then run :meth:`recommend`.

        Returns ``{"status": "ok", "recommendation": {...}}`` or, when either
        payload fails validation, a ``needs_review`` payload listing the errors.
        """

        try:
            reading = parse_weather_payload(weather)
        except WeatherPayloadError as exc:
            log_event(
                LOGGER,
                level=logging.WARNING,
                event="weather_payload_invalid",
                agent="clothing_advisor",
                details=str(exc.validation_error),
            )
            return validation_failure("Invalid weather payload", exc.validation_error)

        try:
            parsed = RecommendationRequest.model_validate(dict(request))
        except ValidationError as exc:
            log_event(
                LOGGER,
                level=logging.WARNING,
                event="recommendation_request_invalid",
                agent="clothing_advisor",
                details=str(exc),
            )
            return validation_failure("Invalid recommendation request", exc)

        recommendation = self.recommend(
            reading,
            parsed.mode,
            parsed.profile.to_profile(),
            manual_temperature=parsed.manual_temperature,
            alternative_indices=parsed.alternative_indices,
        )
        return {"status": "ok", "recommendation": recommendation.to_dict()}


__all__ = ["ClothingAdvisor"]
