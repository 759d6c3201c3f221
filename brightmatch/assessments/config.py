"""Configuration settings for the assessment scorers."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AssessmentConfig(BaseSettings):
    """Assessment configuration settings.

    Overridable via environment variables with the `ASSESSMENT_` prefix or a
    .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ASSESSMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    type_tie_break: Literal["first", "second"] = Field(
        default="first",
        description=(
            "Letter chosen when a dichotomy tally is tied: 'first' picks "
            "E/S/T/J, 'second' picks I/N/F/P"
        ),
    )

    catalog_dir: Path = Field(
        default=Path("catalogs"),
        description="Directory searched for custom catalogs given by bare name",
    )


_assessment_config: AssessmentConfig | None = None


def get_assessment_config() -> AssessmentConfig:
    """Get the assessment configuration singleton."""
    global _assessment_config
    if _assessment_config is None:
        _assessment_config = AssessmentConfig()
    return _assessment_config


def reset_assessment_config() -> None:
    """Reset the assessment configuration singleton (useful for testing)."""
    global _assessment_config
    _assessment_config = None
