"""Four-letter personality type classification."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal, cast

from brightmatch.assessments.config import get_assessment_config
from brightmatch.assessments.models import (
    AnswerSequence,
    Dichotomy,
    Question,
    TypeProfile,
)
from brightmatch.assessments.validation import InvalidAnswersError, ensure_valid_answers
from brightmatch.utils.logging import get_logger

logger = get_logger("assessments.personality")

# Axis order of the emitted code.
DICHOTOMY_ORDER: tuple[Dichotomy, ...] = (
    Dichotomy.EI,
    Dichotomy.SN,
    Dichotomy.TF,
    Dichotomy.JP,
)

TYPE_PROFILES: dict[str, TypeProfile] = {
    profile.code: profile
    for profile in (
        TypeProfile(
            "INTJ",
            "The Architect",
            "Strategic, independent, and highly competent.",
            "You have a natural ability to see the big picture and create "
            "long-term plans.",
        ),
        TypeProfile(
            "INTP",
            "The Thinker",
            "Innovative, independent, and strategic.",
            "You love exploring theoretical concepts and understanding how "
            "things work.",
        ),
        TypeProfile(
            "ENTJ",
            "The Commander",
            "Bold, imaginative, and strong-willed leaders.",
            "You naturally take charge and inspire others to achieve ambitious "
            "goals.",
        ),
        TypeProfile(
            "ENTP",
            "The Debater",
            "Smart, curious, and able to debate any topic.",
            "You thrive on intellectual challenges and generating new ideas.",
        ),
        TypeProfile(
            "INFJ",
            "The Advocate",
            "Creative, insightful, and principled.",
            "You have a strong sense of purpose and care deeply about making a "
            "positive impact.",
        ),
        TypeProfile(
            "INFP",
            "The Mediator",
            "Poetic, kind, and altruistic.",
            "You are guided by your values and have a deep desire to help others "
            "and make the world better.",
        ),
        TypeProfile(
            "ENFJ",
            "The Protagonist",
            "Charismatic, inspiring, and natural leaders.",
            "You have an exceptional ability to motivate and guide others.",
        ),
        TypeProfile(
            "ENFP",
            "The Campaigner",
            "Enthusiastic, creative, and sociable.",
            "You see life as full of possibilities and inspire others with your "
            "optimism.",
        ),
        TypeProfile(
            "ISTJ",
            "The Logistician",
            "Practical, fact-minded, and reliable.",
            "You value tradition, loyalty, and hard work, and you always follow "
            "through.",
        ),
        TypeProfile(
            "ISFJ",
            "The Protector",
            "Warm-hearted, conscientious, and cooperative.",
            "You are dedicated to helping others and creating harmony.",
        ),
        TypeProfile(
            "ESTJ",
            "The Executive",
            "Organized, practical, and decisive.",
            "You are excellent at managing people and projects to achieve "
            "concrete results.",
        ),
        TypeProfile(
            "ESFJ",
            "The Consul",
            "Caring, social, and popular.",
            "You are highly attuned to others' needs and work hard to maintain "
            "harmony.",
        ),
        TypeProfile(
            "ISTP",
            "The Virtuoso",
            "Bold, practical, and experimental.",
            "You are a master of tools and techniques, always ready to explore "
            "and build.",
        ),
        TypeProfile(
            "ISFP",
            "The Adventurer",
            "Charming, sensitive, and artistic.",
            "You live in the moment and are always ready to explore new "
            "possibilities.",
        ),
        TypeProfile(
            "ESTP",
            "The Entrepreneur",
            "Smart, energetic, and perceptive.",
            "You are excellent at reading situations and adapting quickly to new "
            "challenges.",
        ),
        TypeProfile(
            "ESFP",
            "The Entertainer",
            "Spontaneous, enthusiastic, and playful.",
            "You love being around people and bringing joy to others.",
        ),
    )
}

VALID_TYPE_CODES: frozenset[str] = frozenset(TYPE_PROFILES)


def is_valid_type_code(code: str | None) -> bool:
    """Return True for one of the sixteen four-letter codes (exact case)."""
    return code in VALID_TYPE_CODES


def normalize_type_code(code: str) -> str:
    """Strip and upper-case a code, rejecting anything outside the sixteen."""
    normalized = code.strip().upper()
    if normalized not in VALID_TYPE_CODES:
        raise ValueError(f"Unknown personality type: {code!r}")
    return normalized


def describe_type(code: str) -> TypeProfile:
    """Return the archetype and description for a personality code."""
    return TYPE_PROFILES[code.strip().upper()]


def tally_dichotomies(
    answers: AnswerSequence, questions: Sequence[Question]
) -> dict[str, int]:
    """Count the letters credited by each answer.

    Option 0 credits the first letter of the question's dichotomy; any other
    option credits the second.

    Raises:
        InvalidAnswersError: If the answers do not fit the catalog, or a
            question carries no dimension.
    """
    ensure_valid_answers(answers, questions)

    untagged = [q.id for q in questions if q.dimension is None]
    if untagged:
        raise InvalidAnswersError(
            [f"Question {qid} has no personality dimension" for qid in untagged]
        )

    tallies = {letter: 0 for axis in DICHOTOMY_ORDER for letter in axis.value}
    for answer, question in zip(answers, questions):
        axis = cast(Dichotomy, question.dimension)
        letter = axis.first if answer == 0 else axis.second
        tallies[letter] += 1
    return tallies


def classify_type(
    answers: AnswerSequence,
    questions: Sequence[Question],
    *,
    tie_break: Literal["first", "second"] | None = None,
) -> str:
    """Classify a complete questionnaire into a four-letter code.

    Each axis takes its higher-tallied letter, in E/I, S/N, T/F, J/P order.
    A tied axis resolves by ``tie_break`` (defaults to the configured rule,
    which picks the first letter of the pair).
    """
    rule = tie_break or get_assessment_config().type_tie_break
    tallies = tally_dichotomies(answers, questions)

    letters: list[str] = []
    for axis in DICHOTOMY_ORDER:
        first_count = tallies[axis.first]
        second_count = tallies[axis.second]
        if first_count > second_count:
            letters.append(axis.first)
        elif second_count > first_count:
            letters.append(axis.second)
        else:
            letters.append(axis.first if rule == "first" else axis.second)

    code = "".join(letters)
    logger.debug(f"Personality tallies {tallies} -> {code}")
    return code
