"""Text rendering for the console game.

Everything here writes to a stream and holds no game state.  The layout of
each block (numbered menus, ``"<expr> ="`` questions, the three-line result
and the history report) is what players see on stdout.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from .operations import MathOperation
from .results import Result, summarize


def format_result(result: Result) -> str:
    return (
        f"{result.question} = {result.answer}: {result.evaluation}.\n"
        f"{result.correct_answer} is the correct answer.\n"
        f"The time you took to answer: {result.time_s}s"
    )


class GameUI:
    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out if out is not None else sys.stdout

    def list_options(self, message: str, names: Sequence[str]) -> None:
        lines = [message]
        lines.extend(f"{i}) {name}" for i, name in enumerate(names, start=1))
        self._write_lines(lines)

    def prompt(self, message: str) -> None:
        self._write_lines([message])

    def show_math_operation(self, question: MathOperation | None) -> None:
        if question is None:
            self._write_lines(["Error: question is null"])
            return
        self._write_lines([f"{question} ="])

    def show_result(self, result: Result) -> None:
        self._write_lines([format_result(result)])

    def show_record(self, record: Sequence[Result]) -> None:
        summary = summarize(list(record))
        lines = ["Questions/Results Record:"]
        lines.extend(format_result(r) for r in record)
        lines.extend(
            [
                "",
                f"Correct answers: {summary.correct}",
                f"Wrong answers: {summary.wrong}",
                "",
            ]
        )
        self._write_lines(lines)

    def _write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._out.write(line + "\n")
        self._out.flush()
