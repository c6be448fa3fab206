"""
Unit Tests for ScoringConfig
"""

import pytest

from ielts_toolkit.scoring import DEFAULT_CONFIG, ScoringConfig


class TestScoringConfig:
    """Tests for ScoringConfig validation."""

    def test_defaults_when_created_then_documented_values(self):
        assert DEFAULT_CONFIG.expert_threshold == 90
        assert DEFAULT_CONFIG.advanced_threshold == 70
        assert DEFAULT_CONFIG.intermediate_threshold == 40
        assert DEFAULT_CONFIG.max_workers == 1
        assert DEFAULT_CONFIG.part_title(3) == "Part 3"

    @pytest.mark.parametrize("kwargs", [
        {"expert_threshold": 70},
        {"advanced_threshold": 95},
        {"intermediate_threshold": -1},
        {"expert_threshold": 101},
    ])
    def test_create_when_thresholds_out_of_order_then_raises(self, kwargs):
        with pytest.raises(ValueError, match="tier thresholds"):
            ScoringConfig(**kwargs)

    def test_create_when_template_lacks_number_then_raises(self):
        with pytest.raises(ValueError, match="part_title_template"):
            ScoringConfig(part_title_template="Passage")

    def test_create_when_zero_workers_then_raises(self):
        with pytest.raises(ValueError, match="max_workers"):
            ScoringConfig(max_workers=0)

    def test_config_when_frozen_then_cannot_change(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.max_workers = 8
