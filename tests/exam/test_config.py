"""
Unit Tests for ExamConfig
"""

import pytest

from exam_system.exam.config import ExamConfig


class TestExamConfig:
    """Tests for ExamConfig validation."""

    def test_init_when_defaults_then_thirty_minutes(self):
        config = ExamConfig()
        assert config.time_in_minutes == 30
        assert config.answer_prompt == "Your Answer: "

    @pytest.mark.parametrize("minutes", [0, -5])
    def test_init_when_non_positive_time_then_raises_error(self, minutes):
        with pytest.raises(ValueError, match="must be positive"):
            ExamConfig(time_in_minutes=minutes)

    def test_init_when_frozen_then_immutable(self):
        config = ExamConfig()
        with pytest.raises(AttributeError):
            config.time_in_minutes = 10  # type: ignore
