"""Static scoring curves and score bands for the IQ and EQ tests.

Every table is ordered from the highest threshold down; lookups take the
first row whose threshold the value reaches.
"""

from __future__ import annotations

from typing import NamedTuple


class CurveSegment(NamedTuple):
    """One linear piece: ``base + (ratio - start) * slope`` for ratio >= start."""

    start: float
    base: float
    slope: float


class Band(NamedTuple):
    threshold: float
    percentile: int
    description: str
    interpretation: str


class ScoreRange(NamedTuple):
    minimum: int
    maximum: int


_FLOOR = float("-inf")

# Correct-answer ratio -> IQ, continuous at every breakpoint.
IQ_CURVE: tuple[CurveSegment, ...] = (
    CurveSegment(0.9, 150.0, 100.0),  # 150-160
    CurveSegment(0.8, 140.0, 100.0),  # 140-150
    CurveSegment(0.6, 120.0, 100.0),  # 120-140
    CurveSegment(0.4, 100.0, 100.0),  # 100-120
    CurveSegment(0.2, 85.0, 75.0),  # 85-100
    CurveSegment(0.0, 70.0, 75.0),  # 70-85
)

# Weighted-answer ratio -> EQ. Most people land between 40 and 80.
EQ_CURVE: tuple[CurveSegment, ...] = (
    CurveSegment(0.9, 85.0, 150.0),  # 85-100
    CurveSegment(0.8, 75.0, 100.0),  # 75-85
    CurveSegment(0.6, 60.0, 75.0),  # 60-75
    CurveSegment(0.4, 45.0, 75.0),  # 45-60
    CurveSegment(0.2, 30.0, 75.0),  # 30-45
    CurveSegment(0.0, 15.0, 75.0),  # 15-30
)

IQ_RANGE = ScoreRange(70, 160)
EQ_RANGE = ScoreRange(15, 100)

# Points per EQ option are its index, so the best option of a
# four-option scenario is worth 3.
EQ_MAX_POINTS_PER_QUESTION = 3

IQ_BANDS: tuple[Band, ...] = (
    Band(
        145,
        99,
        "Exceptionally gifted",
        "Your IQ score indicates exceptional cognitive abilities. You excel at "
        "complex problem-solving and abstract reasoning.",
    ),
    Band(
        130,
        95,
        "Highly gifted",
        "Your IQ score shows highly gifted intellectual abilities. You have "
        "strong analytical and reasoning skills.",
    ),
    Band(
        115,
        84,
        "Above average",
        "Your IQ score is above average, indicating good problem-solving and "
        "analytical abilities.",
    ),
    Band(
        100,
        50,
        "Average",
        "Your IQ score is in the average range, showing solid cognitive "
        "abilities.",
    ),
    Band(
        85,
        16,
        "Below average",
        "Your IQ score is below average. Consider focusing on developing "
        "analytical and reasoning skills.",
    ),
    Band(
        _FLOOR,
        5,
        "Significantly below average",
        "Your IQ score suggests you may benefit from additional cognitive "
        "training and practice.",
    ),
)

EQ_BANDS: tuple[Band, ...] = (
    Band(
        90,
        95,
        "Exceptionally high emotional intelligence",
        "Your EQ score indicates exceptional emotional intelligence. You excel "
        "at understanding and managing emotions.",
    ),
    Band(
        80,
        84,
        "High emotional intelligence",
        "Your EQ score shows high emotional intelligence. You're skilled at "
        "reading emotions and social situations.",
    ),
    Band(
        70,
        68,
        "Above average emotional intelligence",
        "Your EQ score is above average, indicating good emotional awareness "
        "and social skills.",
    ),
    Band(
        60,
        50,
        "Average emotional intelligence",
        "Your EQ score is in the average range, showing solid emotional "
        "understanding.",
    ),
    Band(
        50,
        32,
        "Below average emotional intelligence",
        "Your EQ score is below average. Consider working on emotional "
        "awareness and empathy.",
    ),
    Band(
        40,
        16,
        "Low emotional intelligence",
        "Your EQ score suggests room for improvement in emotional intelligence "
        "and social skills.",
    ),
    Band(
        _FLOOR,
        5,
        "Very low emotional intelligence",
        "Your EQ score indicates significant opportunity to develop emotional "
        "intelligence and interpersonal skills.",
    ),
)


def segment_for(ratio: float, curve: tuple[CurveSegment, ...]) -> CurveSegment:
    """Return the curve segment a ratio falls into."""
    for segment in curve:
        if ratio >= segment.start:
            return segment
    return curve[-1]


def band_for(score: float, bands: tuple[Band, ...]) -> Band:
    """Return the band a calibrated score falls into."""
    for band in bands:
        if score >= band.threshold:
            return band
    return bands[-1]
