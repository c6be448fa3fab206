"""
Module: scoring.config

Purpose:
    Configuration dataclass for the scoring pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - ScoringConfig: Tier thresholds, part titles and worker count

Dependencies:
    - dataclasses (std)

Used By:
    - scoring.statistics: Statistics builder
    - scoring.tiers: Performance tier mapping
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringConfig:
    """
    Configuration for building attempt statistics (immutable).

    Attributes:
        expert_threshold: Lowest percentage in the EXPERT tier
        advanced_threshold: Lowest percentage in the ADVANCED tier
        intermediate_threshold: Lowest percentage in the INTERMEDIATE tier
        part_title_template: Title for each part, formatted with ``number``
            (1-based in section order)
        max_workers: Threads used to aggregate groups; 1 runs inline

    Invariants:
        - 0 <= intermediate < advanced < expert <= 100
        - part_title_template contains "{number}"
        - max_workers >= 1

    Example:
        >>> config = ScoringConfig(max_workers=4)
        >>> config.part_title(2)
        'Part 2'
    """

    # Tier boundaries, inclusive lower bounds
    expert_threshold: int = 90
    advanced_threshold: int = 70
    intermediate_threshold: int = 40

    part_title_template: str = "Part {number}"

    # Group aggregation is pure, so threads need no locking
    max_workers: int = 1

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not (
            0 <= self.intermediate_threshold
            < self.advanced_threshold
            < self.expert_threshold
            <= 100
        ):
            raise ValueError(
                "tier thresholds must satisfy 0 <= intermediate < advanced < expert <= 100: "
                f"{self.intermediate_threshold}, {self.advanced_threshold}, {self.expert_threshold}"
            )
        if "{number}" not in self.part_title_template:
            raise ValueError(
                f"part_title_template must contain '{{number}}': {self.part_title_template!r}"
            )
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1: {self.max_workers}")

    def part_title(self, number: int) -> str:
        """Title for the part at 1-based position ``number``."""
        return self.part_title_template.format(number=number)


DEFAULT_CONFIG = ScoringConfig()
