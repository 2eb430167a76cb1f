from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .operations import MathOperation

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Result:
    """Outcome of one answered question."""

    question: MathOperation
    answer: int
    evaluation: bool
    time_ms: int

    @property
    def correct_answer(self) -> int:
        return self.question.result()

    @property
    def time_s(self) -> int:
        return self.time_ms // 1000


@dataclass(frozen=True, slots=True)
class RecordSummary:
    correct: int
    wrong: int

    @property
    def total(self) -> int:
        return self.correct + self.wrong


def evaluate_answer(question: MathOperation, answer: int, time_ms: int) -> Result:
    """Score ``answer`` against ``question`` and wrap it as a Result."""

    return Result(
        question=question,
        answer=int(answer),
        evaluation=question.evaluate(answer),
        time_ms=max(0, int(time_ms)),
    )


@dataclass(slots=True)
class Player:
    """Session-scoped history of answered questions, oldest first.

    The history only grows; nothing is deduplicated or evicted.
    """

    record: list[Result] = field(default_factory=list)

    def record_result(self, result: Result) -> None:
        self.record.append(result)
        log.debug(
            "recorded result #%d: %s = %d (%s)",
            len(self.record),
            result.question,
            result.answer,
            "correct" if result.evaluation else "wrong",
        )

    def summarize(self) -> RecordSummary:
        return summarize(self.record)


def summarize(record: list[Result]) -> RecordSummary:
    correct = sum(1 for r in record if r.evaluation)
    return RecordSummary(correct=correct, wrong=len(record) - correct)
