"""Data models for the assessment scorers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

AnswerSequence = Sequence[int]


class Dichotomy(str, Enum):
    """One of the four personality axes a type question is tagged with."""

    EI = "EI"
    SN = "SN"
    TF = "TF"
    JP = "JP"

    @property
    def first(self) -> str:
        """Letter credited for option 0 (E, S, T or J)."""
        return self.value[0]

    @property
    def second(self) -> str:
        """Letter credited for any other option (I, N, F or P)."""
        return self.value[1]


class TestKind(str, Enum):
    """Which calibrated test a score belongs to."""

    __test__ = False

    IQ = "iq"
    EQ = "eq"

    @classmethod
    def parse(cls, value: TestKind | str) -> TestKind:
        """Coerce 'iq'/'eq' (any case) into a TestKind."""
        if isinstance(value, TestKind):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for kind in cls:
                if kind.value == normalized:
                    return kind
        raise ValueError(f"Unknown test kind: {value!r}. Must be 'iq' or 'eq'")


class Question(BaseModel):
    """A single catalog question.

    IQ questions carry ``correct_answer_index``; personality questions carry
    ``dimension``; EQ questions carry neither and are scored by option index.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Question identifier")
    text: str = Field(..., description="Prompt shown to the user")
    options: tuple[str, ...] = Field(
        ..., min_length=2, description="Ordered option texts"
    )
    dimension: Dichotomy | None = Field(
        default=None, description="Dichotomy tag for personality questions"
    )
    correct_answer_index: int | None = Field(
        default=None, description="Index of the correct option for IQ questions"
    )

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> object:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("dimension", mode="before")
    @classmethod
    def normalize_dimension(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @model_validator(mode="after")
    def validate_correct_answer(self) -> Question:
        """Ensure the correct answer points at an existing option."""
        index = self.correct_answer_index
        if index is not None and not (0 <= index < len(self.options)):
            raise ValueError(
                f"correct_answer_index {index} is out of range for "
                f"{len(self.options)} options (question {self.id})"
            )
        return self

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict) -> Question:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


@dataclass(frozen=True)
class TestResult:
    """Calibrated score with its display-only percentile and band label.

    Only ``score`` is persisted on a profile; the rest is rebuilt for display.
    """

    __test__ = False

    score: int
    percentile: int
    description: str

    def __post_init__(self) -> None:
        if self.score < 0:
            raise ValueError(f"score must be non-negative (got {self.score})")
        if not (0 <= self.percentile <= 100):
            raise ValueError(
                f"percentile must be between 0 and 100 (got {self.percentile})"
            )

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class TypeProfile:
    """Display copy for one of the sixteen personality codes."""

    code: str
    archetype: str
    summary: str
    description: str

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)
