"""BrightMatch scoring and compatibility engine."""

from brightmatch.assessments import (
    classify_type,
    interpret_score,
    score_eq,
    score_iq,
    validate_answers,
)
from brightmatch.matching import compatibility

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "classify_type",
    "compatibility",
    "interpret_score",
    "score_eq",
    "score_iq",
    "validate_answers",
]
