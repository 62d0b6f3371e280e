"""
Console entry point for the Examination System.

Builds the default subject and questions, asks which kind of exam to sit,
runs it and waits for a final key press before exiting.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

from exam_system import catalog
from exam_system.exam import Console, Exam, ExamConfig, StdConsole, create_exam

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.WARNING) -> None:
    """Send log records to stderr so they never mix with exam output."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _make_completion_banner(console: Console):
    def on_exam_finished(exam: Exam) -> None:
        console.write_line()
        console.write_line("--- Exam Completed Successfully! ---")
    return on_exam_finished


def main(console: Optional[Console] = None, config: Optional[ExamConfig] = None) -> int:
    """
    Run one exam on the console.

    Args:
        console: Console to use (stdin/stdout if None)
        config: Exam settings (defaults if None)

    Returns:
        Process exit code (always 0)
    """
    console = console or StdConsole()
    subject = catalog.build_subject()
    questions = catalog.build_questions()

    console.write_line("Choose Exam Type:")
    console.write_line("1. Practice Exam")
    console.write_line("2. Final Exam")
    choice = console.prompt("")

    exam = create_exam(choice, questions, subject, config)
    logger.info("Selected %s (choice %r)", type(exam).__name__, choice)
    exam.completed.subscribe(_make_completion_banner(console))

    console.write_line()
    console.write_line(f"--- {subject.name} Exam ---")
    console.write_line()
    exam.run(console)

    console.write_line()
    console.write_line("Press any key to exit...")
    console.prompt("")
    return 0


def run() -> None:
    """Console script hook."""
    configure_logging()
    raise SystemExit(main())


if __name__ == "__main__":
    run()
