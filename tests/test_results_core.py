from __future__ import annotations

from simple_math_game.operations import MathOperation, OperationKind, divide_from
from simple_math_game.results import Player, RecordSummary, Result, evaluate_answer


def test_evaluate_answer_builds_result() -> None:
    q = MathOperation(OperationKind.MULTIPLICATION, 6, 7)

    right = evaluate_answer(q, 42, 2500)
    wrong = evaluate_answer(q, 41, 999)

    assert right == Result(question=q, answer=42, evaluation=True, time_ms=2500)
    assert right.correct_answer == 42
    assert right.time_s == 2
    assert wrong.evaluation is False
    assert wrong.time_s == 0


def test_negative_elapsed_time_is_clamped() -> None:
    q = MathOperation(OperationKind.ADDITION, 1, 1)
    assert evaluate_answer(q, 2, -10).time_ms == 0


def test_record_keeps_insertion_order_and_counts() -> None:
    player = Player()
    questions = [MathOperation(OperationKind.ADDITION, i, i) for i in range(1, 11)]
    results = [evaluate_answer(q, q.result() if i % 3 else 0, 100 * i) for i, q in enumerate(questions)]

    for r in results:
        player.record_result(r)

    assert player.record == results
    summary = player.summarize()
    assert summary.total == len(results)
    assert summary.correct == sum(1 for r in results if r.evaluation)
    assert summary.wrong == sum(1 for r in results if not r.evaluation)


def test_duplicate_results_are_kept() -> None:
    player = Player()
    r = evaluate_answer(divide_from(4, 2), 2, 10)
    player.record_result(r)
    player.record_result(r)
    assert len(player.record) == 2
    assert player.summarize() == RecordSummary(correct=2, wrong=0)


def test_empty_history_summary() -> None:
    summary = Player().summarize()
    assert (summary.correct, summary.wrong, summary.total) == (0, 0, 0)
