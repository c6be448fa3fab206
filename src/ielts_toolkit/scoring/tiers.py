"""Map a score percentage to its display tier."""

from __future__ import annotations

from typing import Optional

from ielts_toolkit.core.models.results import PerformanceTier

from .config import DEFAULT_CONFIG, ScoringConfig


def performance_tier(score: int, config: Optional[ScoringConfig] = None) -> PerformanceTier:
    """
    Tier for a percentage. Lower bounds are inclusive and checked highest
    first, so brackets never overlap.

    Example:
        >>> performance_tier(90)
        <PerformanceTier.EXPERT: 'Expert'>
        >>> performance_tier(69)
        <PerformanceTier.INTERMEDIATE: 'Intermediate'>
    """
    config = config or DEFAULT_CONFIG
    if score >= config.expert_threshold:
        return PerformanceTier.EXPERT
    if score >= config.advanced_threshold:
        return PerformanceTier.ADVANCED
    if score >= config.intermediate_threshold:
        return PerformanceTier.INTERMEDIATE
    return PerformanceTier.BEGINNER
