"""
Unit Tests for Answer Model
"""

import pytest

from exam_system.core.models.answer import Answer


class TestAnswer:
    """Tests for splitting console lines into answer tokens."""

    def test_from_line_when_single_value_then_one_token(self):
        assert Answer.from_line("true").tokens == ("true",)

    def test_from_line_when_commas_then_splits_without_trimming(self):
        assert Answer.from_line("C#, Python").tokens == ("C#", " Python")

    def test_from_line_when_empty_then_single_empty_token(self):
        """An empty line is one empty token, not zero tokens."""
        answer = Answer.from_line("")
        assert answer.tokens == ("",)
        assert len(answer) == 1

    def test_from_line_when_trailing_comma_then_keeps_empty_token(self):
        assert Answer.from_line("C#,").tokens == ("C#", "")

    def test_empty_when_called_then_no_tokens(self):
        assert len(Answer.empty()) == 0

    def test_init_when_list_given_then_stored_as_tuple(self):
        answer = Answer(["a", "b"])  # type: ignore
        assert answer.tokens == ("a", "b")
        assert list(answer) == ["a", "b"]
        assert answer[1] == "b"

    def test_init_when_frozen_then_immutable(self):
        answer = Answer.from_line("a")
        with pytest.raises(AttributeError):
            answer.tokens = ()  # type: ignore
