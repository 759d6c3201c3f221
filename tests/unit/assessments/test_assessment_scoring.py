"""Tests for the IQ and EQ scorers."""

import pytest


def _eq_answers(total: int, size: int = 10) -> list[int]:
    """Answers worth ``total`` points: as many 3s as fit, then zeros."""
    full, rest = divmod(total, 3)
    answers = [3] * full + ([rest] if rest else [])
    return answers + [0] * (size - len(answers))


class TestRoundHalfUp:
    """Test round_half_up."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(92.5, 93), (2.5, 3), (0.5, 1), (84.25, 84), (84.75, 85), (100.0, 100)],
    )
    def test_halves_round_up(self, value, expected):
        """Halves should always round towards +infinity."""
        from brightmatch.assessments.scoring import round_half_up

        assert round_half_up(value) == expected


class TestScoreIq:
    """Test score_iq against the built-in catalog."""

    def test_all_correct_scores_160(self, iq_correct_answers):
        """A perfect submission reaches the top of the range."""
        from brightmatch.assessments.catalog import IQ_QUESTIONS
        from brightmatch.assessments.scoring import score_iq

        result = score_iq(iq_correct_answers, IQ_QUESTIONS)

        assert result.score == 160
        assert result.percentile == 99
        assert result.description == "Exceptionally gifted"

    def test_nothing_correct_floors_at_70(self, iq_wrong_answers):
        """No correct answers should still produce the minimum score."""
        from brightmatch.assessments.catalog import IQ_QUESTIONS
        from brightmatch.assessments.scoring import score_iq

        result = score_iq(iq_wrong_answers, IQ_QUESTIONS)

        assert result.score == 70
        assert result.percentile == 5
        assert result.description == "Significantly below average"

    @pytest.mark.parametrize(
        ("correct", "score", "percentile", "description"),
        [
            (2, 85, 16, "Below average"),
            (4, 100, 50, "Average"),
            (6, 120, 84, "Above average"),
            (8, 140, 95, "Highly gifted"),
            (9, 150, 99, "Exceptionally gifted"),
        ],
    )
    def test_breakpoint_scores(
        self, iq_correct_answers, iq_wrong_answers, correct, score, percentile, description
    ):
        """Each curve breakpoint should map to its documented score."""
        from brightmatch.assessments.catalog import IQ_QUESTIONS
        from brightmatch.assessments.scoring import score_iq

        answers = iq_correct_answers[:correct] + iq_wrong_answers[correct:]
        result = score_iq(answers, IQ_QUESTIONS)

        assert result.score == score
        assert result.percentile == percentile
        assert result.description == description

    def test_score_is_monotonic_in_correct_answers(self, make_iq_catalog):
        """More correct answers never lowers the score."""
        from brightmatch.assessments.scoring import score_iq

        questions = make_iq_catalog(100)
        scores = [
            score_iq([0] * k + [1] * (100 - k), questions).score for k in range(101)
        ]

        assert scores == sorted(scores)
        assert scores[0] == 70
        assert scores[-1] == 160
        assert all(70 <= s <= 160 for s in scores)

    def test_wrong_answers_carry_no_penalty(self, make_iq_catalog):
        """Only the count of correct answers matters, not their position."""
        from brightmatch.assessments.scoring import score_iq

        questions = make_iq_catalog(10)
        front = score_iq([0, 0, 0, 1, 1, 1, 1, 1, 1, 1], questions)
        back = score_iq([1, 1, 1, 1, 1, 1, 1, 0, 0, 0], questions)

        assert front == back

    def test_invalid_answers_raise(self):
        """Malformed submissions are rejected before scoring."""
        from brightmatch.assessments.catalog import IQ_QUESTIONS
        from brightmatch.assessments.scoring import score_iq
        from brightmatch.assessments.validation import InvalidAnswersError

        with pytest.raises(InvalidAnswersError):
            score_iq([0, 0], IQ_QUESTIONS)

    def test_catalog_without_correct_answers_raises(self):
        """An EQ catalog carries no answer key and cannot be scored as IQ."""
        from brightmatch.assessments.catalog import EQ_QUESTIONS
        from brightmatch.assessments.scoring import score_iq
        from brightmatch.assessments.validation import InvalidAnswersError

        with pytest.raises(InvalidAnswersError, match="has no correct answer") as exc_info:
            score_iq([0] * len(EQ_QUESTIONS), EQ_QUESTIONS)

        assert len(exc_info.value.errors) == len(EQ_QUESTIONS)
        assert "Question 1 has no correct answer" in exc_info.value.errors

    def test_empty_catalog_raises(self):
        """An empty catalog would divide by zero and is rejected."""
        from brightmatch.assessments.scoring import score_iq
        from brightmatch.assessments.validation import InvalidAnswersError

        with pytest.raises(InvalidAnswersError):
            score_iq([], [])


class TestScoreEq:
    """Test score_eq against the built-in catalog."""

    @pytest.mark.parametrize(
        ("points", "score", "percentile", "description"),
        [
            (0, 15, 5, "Very low emotional intelligence"),
            (6, 30, 5, "Very low emotional intelligence"),
            (12, 45, 16, "Low emotional intelligence"),
            (18, 60, 50, "Average emotional intelligence"),
            (24, 75, 68, "Above average emotional intelligence"),
            (27, 85, 84, "High emotional intelligence"),
            (30, 100, 95, "Exceptionally high emotional intelligence"),
        ],
    )
    def test_breakpoint_scores(self, points, score, percentile, description):
        """Each curve breakpoint should map to its documented score."""
        from brightmatch.assessments.catalog import EQ_QUESTIONS
        from brightmatch.assessments.scoring import score_eq

        result = score_eq(_eq_answers(points), EQ_QUESTIONS)

        assert result.score == score
        assert result.percentile == percentile
        assert result.description == description

    def test_only_the_point_total_matters(self):
        """Permuting answers keeps the same score."""
        from brightmatch.assessments.catalog import EQ_QUESTIONS
        from brightmatch.assessments.scoring import score_eq

        first = score_eq([3, 3, 3, 3, 3, 3, 0, 0, 0, 0], EQ_QUESTIONS)
        second = score_eq([2, 2, 2, 2, 2, 2, 2, 2, 2, 0], EQ_QUESTIONS)

        assert first.score == second.score == 60

    def test_score_is_monotonic_in_points(self, make_eq_catalog):
        """A higher point total never lowers the score."""
        from brightmatch.assessments.scoring import score_eq

        questions = make_eq_catalog(10)
        scores = [score_eq(_eq_answers(p), questions).score for p in range(31)]

        assert scores == sorted(scores)
        assert all(15 <= s <= 100 for s in scores)

    def test_out_of_range_option_raises(self):
        """Option index 4 does not exist on a four-option scenario."""
        from brightmatch.assessments.catalog import EQ_QUESTIONS
        from brightmatch.assessments.scoring import score_eq
        from brightmatch.assessments.validation import InvalidAnswersError

        with pytest.raises(InvalidAnswersError):
            score_eq([4] + [0] * 9, EQ_QUESTIONS)


class TestMapRatio:
    """Test the piecewise-linear curves."""

    @pytest.mark.parametrize("curve_name", ["IQ_CURVE", "EQ_CURVE"])
    def test_curves_are_continuous_at_breakpoints(self, curve_name):
        """Approaching a breakpoint from below lands on the segment base."""
        from brightmatch.assessments import bands
        from brightmatch.assessments.scoring import map_ratio

        curve = getattr(bands, curve_name)
        for segment in curve[:-1]:
            below = map_ratio(segment.start - 1e-9, curve)
            assert below == pytest.approx(segment.base, abs=1e-6)

    def test_segment_interpolation(self):
        """Values inside a segment interpolate linearly."""
        from brightmatch.assessments.bands import EQ_CURVE, IQ_CURVE
        from brightmatch.assessments.scoring import map_ratio

        assert map_ratio(0.25, IQ_CURVE) == pytest.approx(88.75)
        assert map_ratio(0.95, EQ_CURVE) == pytest.approx(92.5)


class TestBandLookups:
    """Test percentile_for, describe_score, interpret_score and friends."""

    @pytest.mark.parametrize(
        ("score", "percentile"),
        [(160, 99), (145, 99), (144, 95), (130, 95), (115, 84), (100, 50), (85, 16), (84, 5), (70, 5)],
    )
    def test_iq_percentiles(self, score, percentile):
        """IQ percentiles follow the band thresholds."""
        from brightmatch.assessments.scoring import percentile_for

        assert percentile_for(score, "iq") == percentile

    @pytest.mark.parametrize(
        ("score", "percentile"),
        [(100, 95), (90, 95), (80, 84), (70, 68), (60, 50), (50, 32), (40, 16), (39, 5), (15, 5)],
    )
    def test_eq_percentiles(self, score, percentile):
        """EQ percentiles follow the band thresholds."""
        from brightmatch.assessments.scoring import percentile_for

        assert percentile_for(score, "eq") == percentile

    def test_describe_score_accepts_kind_enum_and_string(self):
        """Kinds may be given as TestKind or any-case strings."""
        from brightmatch.assessments.models import TestKind
        from brightmatch.assessments.scoring import describe_score

        assert describe_score(130, TestKind.IQ) == "Highly gifted"
        assert describe_score(130, "IQ") == "Highly gifted"
        assert describe_score(50, "eq") == "Below average emotional intelligence"

    def test_interpret_score_returns_paragraph(self):
        """Interpretation text is the long-form copy for the band."""
        from brightmatch.assessments.scoring import interpret_score

        text = interpret_score(120, "iq")

        assert text.startswith("Your IQ score is above average")

    def test_unknown_kind_raises(self):
        """Only iq and eq are scored kinds."""
        from brightmatch.assessments.scoring import percentile_for

        with pytest.raises(ValueError, match="Unknown test kind"):
            percentile_for(100, "type")

    def test_score_range(self):
        """Each kind has a closed score range."""
        from brightmatch.assessments.scoring import score_range

        assert score_range("iq") == (70, 160)
        assert score_range("eq") == (15, 100)

    def test_result_for_score_rebuilds_display_fields(self):
        """A persisted score can be expanded back into a full result."""
        from brightmatch.assessments.scoring import result_for_score

        result = result_for_score(75, "eq")

        assert result.to_dict() == {
            "score": 75,
            "percentile": 68,
            "description": "Above average emotional intelligence",
        }
