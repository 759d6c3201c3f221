"""Configuration settings for the compatibility engine."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CompatibilityConfig(BaseSettings):
    """Compatibility scoring configuration settings.

    All settings have sensible defaults and can be overridden via
    environment variables with `COMPATIBILITY_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="COMPATIBILITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Factor weights (must sum to 1.0). Only factors with data on both
    # sides contribute, and the result is divided by the weights applied.
    weight_iq: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.25,
        description="Weight for IQ proximity",
    )
    weight_eq: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.25,
        description="Weight for EQ proximity",
    )
    weight_type: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.30,
        description="Weight for personality type affinity",
    )
    weight_intent: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.20,
        description="Weight for intent alignment",
    )

    # Proximity: max(0, 100 - diff / divisor)
    proximity_divisor: Annotated[float, Field(gt=0.0)] = Field(
        default=2.0,
        description="Score points lost per point of IQ/EQ difference is 1/divisor",
    )

    # Type affinity
    affinity_mode: Literal["matrix", "binary"] = Field(
        default="matrix",
        description="'matrix' uses the tuned pair table, 'binary' same/different",
    )
    unknown_type_affinity: Annotated[int, Field(ge=0, le=100)] = Field(
        default=60,
        description="Affinity for type pairs missing from the matrix",
    )
    same_type_affinity: Annotated[int, Field(ge=0, le=100)] = Field(
        default=90,
        description="Binary mode affinity for identical types",
    )
    different_type_affinity: Annotated[int, Field(ge=0, le=100)] = Field(
        default=70,
        description="Binary mode affinity for differing types",
    )

    # Intent
    intent_match_score: Annotated[int, Field(ge=0, le=100)] = Field(
        default=100,
        description="Factor score when both intents are the same",
    )
    intent_mismatch_score: Annotated[int, Field(ge=0, le=100)] = Field(
        default=30,
        description="Factor score when intents differ",
    )

    # Output bounds
    min_score: Annotated[int, Field(ge=0, le=100)] = Field(
        default=10,
        description="Lowest percentage ever shown",
    )
    max_score: Annotated[int, Field(ge=0, le=100)] = Field(
        default=99,
        description="Highest percentage ever shown",
    )
    default_score: Annotated[int, Field(ge=0, le=100)] = Field(
        default=50,
        description="Percentage shown when no factor has data on both sides",
    )

    @model_validator(mode="after")
    def validate_weights_sum_to_one(self) -> CompatibilityConfig:
        """Ensure factor weights sum to 1.0 (within tolerance)."""
        weight_sum = (
            self.weight_iq + self.weight_eq + self.weight_type + self.weight_intent
        )
        if abs(weight_sum - 1.0) > 1e-6:
            raise ValueError(
                "Compatibility weights must sum to 1.0. "
                f"Got {weight_sum:.6f} "
                f"(iq={self.weight_iq}, eq={self.weight_eq}, "
                f"type={self.weight_type}, intent={self.weight_intent})."
            )
        return self

    @model_validator(mode="after")
    def validate_score_bounds(self) -> CompatibilityConfig:
        """Ensure the output clamp is a non-empty range."""
        if self.min_score > self.max_score:
            raise ValueError(
                f"min_score ({self.min_score}) must not exceed "
                f"max_score ({self.max_score})."
            )
        return self


_compatibility_config: CompatibilityConfig | None = None


def get_compatibility_config() -> CompatibilityConfig:
    """Get the compatibility configuration singleton."""
    global _compatibility_config
    if _compatibility_config is None:
        _compatibility_config = CompatibilityConfig()
    return _compatibility_config


def reset_compatibility_config() -> None:
    """Reset the compatibility configuration singleton (useful for testing)."""
    global _compatibility_config
    _compatibility_config = None
