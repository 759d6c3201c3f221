"""Tests for compatibility configuration."""

import pytest


class TestCompatibilityConfig:
    """Test CompatibilityConfig."""

    def test_defaults(self):
        """Defaults match the production weights and clamps."""
        from brightmatch.matching.config import CompatibilityConfig

        config = CompatibilityConfig(_env_file=None)

        assert config.weight_iq == 0.25
        assert config.weight_eq == 0.25
        assert config.weight_type == 0.30
        assert config.weight_intent == 0.20
        assert config.proximity_divisor == 2.0
        assert config.affinity_mode == "matrix"
        assert config.unknown_type_affinity == 60
        assert config.intent_match_score == 100
        assert config.intent_mismatch_score == 30
        assert config.min_score == 10
        assert config.max_score == 99
        assert config.default_score == 50

    def test_env_overrides(self, monkeypatch):
        """COMPATIBILITY_* variables override defaults."""
        from brightmatch.matching.config import CompatibilityConfig

        monkeypatch.setenv("COMPATIBILITY_WEIGHT_IQ", "0.4")
        monkeypatch.setenv("COMPATIBILITY_WEIGHT_EQ", "0.1")
        monkeypatch.setenv("COMPATIBILITY_DEFAULT_SCORE", "55")

        config = CompatibilityConfig(_env_file=None)

        assert config.weight_iq == 0.4
        assert config.weight_eq == 0.1
        assert config.default_score == 55

    def test_weights_must_sum_to_one(self):
        """Weights that do not sum to 1.0 are rejected."""
        from pydantic import ValidationError

        from brightmatch.matching.config import CompatibilityConfig

        with pytest.raises(ValidationError, match="must sum to 1.0"):
            CompatibilityConfig(_env_file=None, weight_iq=0.5)

    def test_min_must_not_exceed_max(self):
        """The output clamp must be a valid range."""
        from pydantic import ValidationError

        from brightmatch.matching.config import CompatibilityConfig

        with pytest.raises(ValidationError, match="must not exceed"):
            CompatibilityConfig(_env_file=None, min_score=90, max_score=80)

    def test_unknown_affinity_mode_rejected(self):
        """Only matrix and binary modes exist."""
        from pydantic import ValidationError

        from brightmatch.matching.config import CompatibilityConfig

        with pytest.raises(ValidationError):
            CompatibilityConfig(_env_file=None, affinity_mode="fuzzy")

    def test_divisor_must_be_positive(self):
        """A zero divisor would divide by zero."""
        from pydantic import ValidationError

        from brightmatch.matching.config import CompatibilityConfig

        with pytest.raises(ValidationError):
            CompatibilityConfig(_env_file=None, proximity_divisor=0)

    def test_singleton(self):
        """get_compatibility_config caches until reset."""
        from brightmatch.matching.config import (
            get_compatibility_config,
            reset_compatibility_config,
        )

        first = get_compatibility_config()
        assert get_compatibility_config() is first

        reset_compatibility_config()
        assert get_compatibility_config() is not first
