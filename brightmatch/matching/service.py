"""Compatibility scoring service implementation."""

from __future__ import annotations

from collections.abc import Mapping

from brightmatch.assessments.scoring import round_half_up
from brightmatch.matching.affinity import binary_type_affinity, type_affinity
from brightmatch.matching.config import CompatibilityConfig, get_compatibility_config
from brightmatch.matching.models import CompatibilityBreakdown, FactorScore, ScoreFields
from brightmatch.utils.logging import get_logger

logger = get_logger("matching.service")

ProfileLike = ScoreFields | Mapping


class CompatibilityService:
    """Service for computing the compatibility percentage of two profiles."""

    def __init__(self, config: CompatibilityConfig | None = None) -> None:
        self.config = config or get_compatibility_config()

    def _coerce(self, profile: ProfileLike) -> ScoreFields:
        if isinstance(profile, ScoreFields):
            return profile
        return ScoreFields.model_validate(dict(profile))

    def proximity(self, value_a: int, value_b: int) -> float:
        """Closeness of two calibrated scores on a 0..100 scale."""
        return max(0.0, 100 - abs(value_a - value_b) / self.config.proximity_divisor)

    def type_affinity(self, type_a: str, type_b: str) -> int:
        """Affinity of two type codes under the configured mode."""
        if self.config.affinity_mode == "binary":
            return binary_type_affinity(
                type_a,
                type_b,
                same=self.config.same_type_affinity,
                different=self.config.different_type_affinity,
            )
        return type_affinity(
            type_a, type_b, default=self.config.unknown_type_affinity
        )

    def intent_alignment(self, a: ScoreFields, b: ScoreFields) -> int:
        if a.intent == b.intent:
            return self.config.intent_match_score
        return self.config.intent_mismatch_score

    def factors(self, a: ScoreFields, b: ScoreFields) -> list[FactorScore]:
        """Factors with data on both sides, in IQ, EQ, type, intent order."""
        applied: list[FactorScore] = []

        if a.has_iq and b.has_iq:
            applied.append(
                FactorScore(
                    "iq",
                    self.proximity(a.iq_score, b.iq_score),
                    self.config.weight_iq,
                )
            )

        if a.has_eq and b.has_eq:
            applied.append(
                FactorScore(
                    "eq",
                    self.proximity(a.eq_score, b.eq_score),
                    self.config.weight_eq,
                )
            )

        if a.mbti_type and b.mbti_type:
            applied.append(
                FactorScore(
                    "type",
                    float(self.type_affinity(a.mbti_type, b.mbti_type)),
                    self.config.weight_type,
                )
            )

        if a.intent is not None and b.intent is not None:
            applied.append(
                FactorScore(
                    "intent",
                    float(self.intent_alignment(a, b)),
                    self.config.weight_intent,
                )
            )

        return applied

    def breakdown(self, a: ProfileLike, b: ProfileLike) -> CompatibilityBreakdown:
        """Compute the percentage together with the factors behind it."""
        first = self._coerce(a)
        second = self._coerce(b)
        applied = self.factors(first, second)

        weight_sum = sum(f.weight for f in applied)
        if not applied or weight_sum <= 0:
            logger.debug("No shared compatibility data; using default score")
            return CompatibilityBreakdown(
                score=self.config.default_score, factors=applied
            )

        raw = sum(f.weighted for f in applied) / weight_sum
        score = max(
            self.config.min_score, min(self.config.max_score, round_half_up(raw))
        )
        logger.debug(
            f"Compatibility {score}% from "
            + ", ".join(f"{f.name}={f.score:.1f}x{f.weight:.2f}" for f in applied)
        )
        return CompatibilityBreakdown(score=score, factors=applied, raw_score=raw)

    def compatibility(self, a: ProfileLike, b: ProfileLike) -> int:
        """Compatibility percentage of two profiles, clamped to the shown range."""
        return self.breakdown(a, b).score

    def format_breakdown(self, result: CompatibilityBreakdown) -> str:
        """Format a breakdown for CLI output."""
        lines: list[str] = [f"Compatibility: {result.score}%"]
        if not result.factors:
            lines.append("No shared data; showing the default score")
            return "\n".join(lines)

        for factor in result.factors:
            lines.append(
                f"  {factor.name:<7} score={factor.score:6.2f} weight={factor.weight:.2f}"
            )
        lines.append(f"  weight applied={result.weight_applied:.2f}")
        if result.raw_score is not None:
            lines.append(f"  unclamped={result.raw_score:.2f}")
        return "\n".join(lines)


def compatibility(a: ProfileLike, b: ProfileLike) -> int:
    """Compatibility percentage in [10, 99] using the configured weights."""
    return CompatibilityService().compatibility(a, b)
