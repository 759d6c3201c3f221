"""Score leaderboard ranking."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from brightmatch.assessments.models import TestKind
from brightmatch.matching.models import RankedProfile


@dataclass(frozen=True)
class LeaderboardEntry:
    """A ranked leaderboard row."""

    rank: int
    profile: RankedProfile
    total_score: int

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "rank": self.rank,
            "total_score": self.total_score,
            "profile": self.profile.to_dict(),
        }


def _sort_key(kind: TestKind | None):
    if kind is TestKind.IQ:
        return lambda p: p.iq_score
    if kind is TestKind.EQ:
        return lambda p: p.eq_score
    return lambda p: p.iq_score + p.eq_score


def rank_profiles(
    profiles: Iterable[RankedProfile],
    kind: TestKind | str | None = None,
    *,
    city: str | None = None,
    limit: int | None = None,
) -> list[LeaderboardEntry]:
    """Rank completed profiles by IQ, EQ, or their sum when no kind is given.

    Only profiles that finished onboarding and took both tests are eligible.
    Equal scores keep their input order.
    """
    parsed_kind = TestKind.parse(kind) if kind is not None else None
    city_filter = city.strip().lower() if city and city.strip() else None

    eligible = [
        p
        for p in profiles
        if p.profile_completed
        and p.has_iq
        and p.has_eq
        and (city_filter is None or (p.city or "").strip().lower() == city_filter)
    ]
    eligible.sort(key=_sort_key(parsed_kind), reverse=True)

    if limit is not None:
        eligible = eligible[: max(0, limit)]

    return [
        LeaderboardEntry(rank=i, profile=p, total_score=p.iq_score + p.eq_score)
        for i, p in enumerate(eligible, start=1)
    ]
