"""Parse weather client payloads into :class:`WeatherReading` instances."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from models.weather import WeatherReading

LOGGER = logging.getLogger(__name__)

DEFAULT_HUMIDITY = 50.0
DEFAULT_WIND_SPEED = 0.0


class WeatherPayloadError(ValueError):
    """Raised when a weather payload cannot be turned into a reading."""

    def __init__(self, message: str, validation_error: ValidationError) -> None:
        super().__init__(message)
        self.validation_error = validation_error

    def errors(self) -> list:
        return self.validation_error.errors()


class _WeatherPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    temperature: float
    feels_like: Optional[float] = Field(default=None, validation_alias=AliasChoices("feelsLike", "feels_like"))
    humidity: Optional[float] = None
    wind_speed: Optional[float] = Field(default=None, validation_alias=AliasChoices("windSpeed", "wind_speed"))
    description: Optional[str] = ""
    icon: Optional[str] = ""

    @field_validator("description", "icon", mode="before")
    @classmethod
    def _blank_if_missing(cls, value: Any) -> str:
        return "" if value is None else str(value)


def parse_weather_payload(payload: Mapping[str, Any]) -> WeatherReading:
    """Validate a loosely typed weather dict and apply the documented defaults.

    Missing humidity counts as 50 %, missing wind speed as 0 km/h and a missing
    ``feelsLike`` stays ``None`` so the resolver can approximate it.
    """

    try:
        parsed = _WeatherPayload.model_validate(dict(payload))
    except ValidationError as exc:
        LOGGER.warning("Weather payload schema validation failed", extra={"error_count": exc.error_count()})
        raise WeatherPayloadError("invalid weather payload", exc) from exc

    return WeatherReading(
        temperature=parsed.temperature,
        feels_like=parsed.feels_like,
        humidity=DEFAULT_HUMIDITY if parsed.humidity is None else parsed.humidity,
        wind_speed=DEFAULT_WIND_SPEED if parsed.wind_speed is None else parsed.wind_speed,
        description=parsed.description or "",
        icon=parsed.icon or "",
    )


__all__ = ["WeatherPayloadError", "parse_weather_payload", "DEFAULT_HUMIDITY", "DEFAULT_WIND_SPEED"]
