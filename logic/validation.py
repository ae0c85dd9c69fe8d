"""Pydantic schemas for sanitizing recommendation requests before they reach the rules."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from models.recommendation import SWAPPABLE_SLOTS
from models.weather import BabyProfile, ContextMode


class BabyProfileInput(BaseModel):
    """Input contract for the baby's profile."""

    age_months: float = Field(ge=0)
    weight_percentile: float = Field(ge=0, le=100)

    def to_profile(self) -> BabyProfile:
        return BabyProfile(age_months=self.age_months, weight_percentile=self.weight_percentile)


class RecommendationRequest(BaseModel):
    """Everything a caller supplies for one recompute, weather aside."""

    mode: ContextMode = ContextMode.STROLLER
    manual_temperature: Optional[float] = Field(default=None, ge=-30, le=45)
    profile: BabyProfileInput
    alternative_indices: Dict[str, int] = Field(default_factory=dict)

    @field_validator("alternative_indices")
    @classmethod
    def _validate_indices(cls, indices: Dict[str, int]) -> Dict[str, int]:
        for slot, index in indices.items():
            if slot not in SWAPPABLE_SLOTS:
                raise ValueError(f"unknown layer slot {slot!r}")
            if index < 0:
                raise ValueError(f"index for {slot} cannot be negative")
        return indices


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "BabyProfileInput",
    "RecommendationRequest",
    "ValidationResult",
    "validation_failure",
]
