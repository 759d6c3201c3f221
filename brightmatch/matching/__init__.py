"""Compatibility scoring and leaderboard ranking.

Public API:
    - compatibility: Percentage in [10, 99] for two profiles
    - CompatibilityService: Scoring service with per-factor breakdown
    - ScoreFields / RankedProfile / Intent: Profile models
    - rank_profiles: Leaderboard ordering
    - ProfileService: Load profiles from YAML/JSON
    - CompatibilityConfig: Configuration settings
"""

from brightmatch.matching.affinity import (
    TYPE_COMPATIBILITY,
    binary_type_affinity,
    type_affinity,
)
from brightmatch.matching.config import (
    CompatibilityConfig,
    get_compatibility_config,
    reset_compatibility_config,
)
from brightmatch.matching.leaderboard import LeaderboardEntry, rank_profiles
from brightmatch.matching.models import (
    CompatibilityBreakdown,
    FactorScore,
    Intent,
    RankedProfile,
    ScoreFields,
)
from brightmatch.matching.profile import ProfileService
from brightmatch.matching.service import CompatibilityService, compatibility

__all__ = [
    "CompatibilityBreakdown",
    "CompatibilityConfig",
    "CompatibilityService",
    "FactorScore",
    "Intent",
    "LeaderboardEntry",
    "ProfileService",
    "RankedProfile",
    "ScoreFields",
    "TYPE_COMPATIBILITY",
    "binary_type_affinity",
    "compatibility",
    "get_compatibility_config",
    "rank_profiles",
    "reset_compatibility_config",
    "type_affinity",
]
