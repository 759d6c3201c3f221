"""Data models for compatibility scoring and ranking."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from brightmatch.assessments.personality import normalize_type_code


class Intent(str, Enum):
    """What a user is on the app for."""

    DATING = "dating"
    FRIENDSHIP = "friendship"

    @classmethod
    def parse(cls, value: Intent | str | None) -> Intent | None:
        """Turn an external string into an Intent.

        Blank values mean "not chosen yet" and map to None; anything outside
        the closed set is rejected.
        """
        if value is None or isinstance(value, Intent):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Intent must be a string (got {type(value).__name__})")
        normalized = value.strip().lower()
        if not normalized:
            return None
        for intent in cls:
            if intent.value == normalized:
                return intent
        raise ValueError(
            f"Invalid intent: {value!r}. Must be one of "
            f"{', '.join(i.value for i in cls)}"
        )


class ScoreFields(BaseModel):
    """The slice of a user profile the compatibility engine reads.

    A score of 0 means the test has not been taken.
    """

    model_config = ConfigDict(extra="ignore")

    iq_score: int = Field(default=0, ge=0, description="Calibrated IQ (0 = not taken)")
    eq_score: int = Field(default=0, ge=0, description="Calibrated EQ (0 = not taken)")
    mbti_type: str | None = Field(default=None, description="Four-letter type code")
    intent: Intent | None = Field(default=None, description="Dating or friendship")

    @field_validator("iq_score", "eq_score", mode="before")
    @classmethod
    def coerce_missing_score(cls, v: object) -> object:
        return 0 if v is None else v

    @field_validator("mbti_type", mode="before")
    @classmethod
    def validate_mbti_type(cls, v: object) -> str | None:
        if v is None:
            return None
        if not isinstance(v, str):
            raise ValueError("mbti_type must be a string")
        if not v.strip():
            return None
        return normalize_type_code(v)

    @field_validator("intent", mode="before")
    @classmethod
    def validate_intent(cls, v: object) -> Intent | None:
        return Intent.parse(v)  # type: ignore[arg-type]

    @property
    def has_iq(self) -> bool:
        return self.iq_score > 0

    @property
    def has_eq(self) -> bool:
        return self.eq_score > 0

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> ScoreFields:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class RankedProfile(ScoreFields):
    """Score fields plus the identity needed to show a leaderboard row."""

    user_id: str = Field(..., description="User identifier")
    name: str | None = Field(default=None, description="Display name")
    city: str | None = Field(default=None, description="City, for local boards")
    profile_completed: bool = Field(
        default=False, description="Whether onboarding is finished"
    )

    @field_validator("user_id", mode="before")
    @classmethod
    def coerce_user_id(cls, v: object) -> object:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


@dataclass(frozen=True)
class FactorScore:
    """One applied compatibility factor."""

    name: str
    score: float
    weight: float

    @property
    def weighted(self) -> float:
        return self.score * self.weight


@dataclass
class CompatibilityBreakdown:
    """How a compatibility percentage was assembled."""

    score: int
    factors: list[FactorScore] = field(default_factory=list)
    raw_score: float | None = None

    def __post_init__(self) -> None:
        if not (0 <= self.score <= 100):
            raise ValueError(f"score must be between 0 and 100 (got {self.score})")

    @property
    def weight_applied(self) -> float:
        return sum(f.weight for f in self.factors)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "score": self.score,
            "raw_score": self.raw_score,
            "weight_applied": self.weight_applied,
            "factors": [
                {"name": f.name, "score": f.score, "weight": f.weight}
                for f in self.factors
            ],
        }
