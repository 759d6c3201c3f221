"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def _reset_singletons(monkeypatch):
    """Give every test fresh config singletons and an untouched logger."""
    from brightmatch.assessments.config import reset_assessment_config
    from brightmatch.config.settings import reset_settings
    from brightmatch.matching.config import reset_compatibility_config
    from brightmatch.utils.logging import reset_logging

    for var in (
        "LOG_LEVEL",
        "LEADERBOARD_LIMIT",
        "ASSESSMENT_TYPE_TIE_BREAK",
        "ASSESSMENT_CATALOG_DIR",
    ):
        monkeypatch.delenv(var, raising=False)

    reset_assessment_config()
    reset_compatibility_config()
    reset_settings()
    reset_logging()
    yield
    reset_assessment_config()
    reset_compatibility_config()
    reset_settings()
    reset_logging()


@pytest.fixture
def iq_correct_answers() -> list[int]:
    """Correct option index for every built-in IQ question."""
    from brightmatch.assessments.catalog import IQ_QUESTIONS

    return [q.correct_answer_index for q in IQ_QUESTIONS]


@pytest.fixture
def iq_wrong_answers() -> list[int]:
    """An incorrect option index for every built-in IQ question."""
    from brightmatch.assessments.catalog import IQ_QUESTIONS

    return [1 if q.correct_answer_index == 0 else 0 for q in IQ_QUESTIONS]


@pytest.fixture
def make_iq_catalog():
    """Build a synthetic IQ catalog whose correct answer is always option 0."""
    from brightmatch.assessments.models import Question

    def _make(size: int) -> list[Question]:
        return [
            Question(
                id=str(i),
                text=f"Question {i}",
                options=["right", "wrong"],
                correct_answer_index=0,
            )
            for i in range(size)
        ]

    return _make


@pytest.fixture
def make_eq_catalog():
    """Build a synthetic four-option EQ catalog."""
    from brightmatch.assessments.models import Question

    def _make(size: int) -> list[Question]:
        return [
            Question(id=str(i), text=f"Scenario {i}", options=["a", "b", "c", "d"])
            for i in range(size)
        ]

    return _make
