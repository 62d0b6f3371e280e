"""
Line based console I/O used by exams and the entry point.
"""
from __future__ import annotations

import sys
from typing import Optional, Protocol, TextIO


class Console(Protocol):
    """The two primitives an exam needs: write a line, prompt for a line."""

    def write_line(self, text: str = "") -> None: ...

    def prompt(self, text: str) -> str: ...


class StdConsole:
    """
    Console backed by text streams (stdin/stdout by default).

    Reaching end of input raises EOFError; callers do not handle it.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def write_line(self, text: str = "") -> None:
        self._stdout.write(f"{text}\n")

    def prompt(self, text: str) -> str:
        self._stdout.write(text)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")
