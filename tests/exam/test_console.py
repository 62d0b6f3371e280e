"""
Unit Tests for StdConsole
"""

import io

import pytest

from exam_system.exam.console import StdConsole


class TestStdConsole:
    """Tests for the stream-backed console."""

    def test_write_line_when_called_then_appends_newline(self):
        out = io.StringIO()
        StdConsole(stdin=io.StringIO(), stdout=out).write_line("Q1 - 5 Marks")
        assert out.getvalue() == "Q1 - 5 Marks\n"

    def test_write_line_when_no_text_then_blank_line(self):
        out = io.StringIO()
        StdConsole(stdin=io.StringIO(), stdout=out).write_line()
        assert out.getvalue() == "\n"

    def test_prompt_when_line_available_then_returns_without_newline(self):
        out = io.StringIO()
        console = StdConsole(stdin=io.StringIO("C#,Python\r\n"), stdout=out)

        assert console.prompt("Your Answer: ") == "C#,Python"
        assert out.getvalue() == "Your Answer: "

    def test_prompt_when_blank_line_then_returns_empty_string(self):
        console = StdConsole(stdin=io.StringIO("\n"), stdout=io.StringIO())
        assert console.prompt("") == ""

    def test_prompt_when_end_of_input_then_raises_eof(self):
        console = StdConsole(stdin=io.StringIO(""), stdout=io.StringIO())
        with pytest.raises(EOFError):
            console.prompt("Your Answer: ")
