"""Personality type pair affinity tables."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# Tuned pair scores. Each row lists only its best partners; a pair is
# looked up in both directions before falling back to the default.
TYPE_COMPATIBILITY: Mapping[str, Mapping[str, int]] = MappingProxyType(
    {
        row: MappingProxyType(partners)
        for row, partners in {
            "INTJ": {"ENFP": 95, "ENTP": 90, "INFJ": 85, "INFP": 80, "ENTJ": 75, "INTP": 70},
            "INTP": {"ENFJ": 95, "ENTJ": 90, "INFJ": 85, "ENFP": 80, "INTJ": 75, "ENTP": 70},
            "ENTJ": {"INFP": 95, "INTP": 90, "ENFP": 85, "INTJ": 80, "ENFJ": 75, "ENTP": 70},
            "ENTP": {"INFJ": 95, "INTJ": 90, "ENFJ": 85, "ISFJ": 80, "INTP": 75, "ENFP": 70},
            "INFJ": {"ENTP": 95, "ENFP": 90, "INTJ": 85, "INTP": 80, "ENFJ": 75, "INFP": 70},
            "INFP": {"ENTJ": 95, "ENFJ": 90, "INTJ": 85, "ENTP": 80, "INFJ": 75, "ISFJ": 70},
            "ENFJ": {"INTP": 95, "INFP": 90, "ENTP": 85, "INTJ": 80, "INFJ": 75, "ENFP": 70},
            "ENFP": {"INTJ": 95, "INFJ": 90, "ENTJ": 85, "INTP": 80, "ENFJ": 75, "ENTP": 70},
            "ISTJ": {"ESFP": 85, "ESTP": 80, "ISFP": 75, "ENFP": 70, "ESTJ": 65, "ISFJ": 60},
            "ISFJ": {"ESTP": 85, "ESFP": 80, "ENTP": 75, "ENFP": 70, "INFP": 65, "ISTJ": 60},
            "ESTJ": {"ISFP": 85, "ISTP": 80, "INFP": 75, "ENFP": 70, "ISTJ": 65, "ESFJ": 60},
            "ESFJ": {"ISTP": 85, "ISFP": 80, "INFP": 75, "INTP": 70, "ISFJ": 65, "ESTJ": 60},
            "ISTP": {"ESFJ": 85, "ESTJ": 80, "ENFJ": 75, "ESFP": 70, "ISFP": 65, "ESTP": 60},
            "ISFP": {"ESTJ": 85, "ESFJ": 80, "ENFJ": 75, "ENTJ": 70, "ISTP": 65, "ESFP": 60},
            "ESTP": {"ISFJ": 85, "ISTJ": 80, "INFJ": 75, "ISFP": 70, "ESFP": 65, "ISTP": 60},
            "ESFP": {"ISTJ": 85, "ISFJ": 80, "INTJ": 75, "ISTP": 70, "ESTP": 65, "ISFP": 60},
        }.items()
    }
)

DEFAULT_TYPE_AFFINITY = 60


def type_affinity(
    type_a: str,
    type_b: str,
    *,
    default: int = DEFAULT_TYPE_AFFINITY,
    table: Mapping[str, Mapping[str, int]] = TYPE_COMPATIBILITY,
) -> int:
    """Affinity of two type codes, checking both directions of the table."""
    forward = table.get(type_a, {}).get(type_b)
    if forward is not None:
        return forward
    backward = table.get(type_b, {}).get(type_a)
    if backward is not None:
        return backward
    return default


def binary_type_affinity(
    type_a: str, type_b: str, *, same: int = 90, different: int = 70
) -> int:
    """Coarse affinity: one value for identical types, another otherwise."""
    return same if type_a == type_b else different
