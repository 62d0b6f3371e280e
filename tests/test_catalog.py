"""
Unit Tests for the Default Question Catalog
"""

from exam_system import catalog
from exam_system.core.models import (
    ChooseAllQuestion,
    ChooseOneQuestion,
    Subject,
    TrueFalseQuestion,
)


class TestCatalog:
    """Tests for the built-in subject and questions."""

    def test_build_subject_when_called_then_computer_science(self):
        assert catalog.build_subject() == Subject("Computer Science", "CS101")

    def test_build_questions_when_called_then_three_variants_in_order(self):
        questions = catalog.build_questions()
        assert [type(q) for q in questions] == [TrueFalseQuestion, ChooseOneQuestion, ChooseAllQuestion]
        assert [q.header for q in questions] == ["Q1", "Q2", "Q3"]

    def test_build_questions_when_called_then_marks_total_twenty(self):
        assert [q.marks for q in catalog.build_questions()] == [5, 5, 10]

    def test_build_questions_when_called_twice_then_new_sequence(self):
        first = catalog.build_questions()
        second = catalog.build_questions()
        assert first == second
        assert first is not second
        assert first[0] is not second[0]

    def test_build_questions_when_built_then_matches_fixture(self, questions):
        assert catalog.build_questions() == questions
