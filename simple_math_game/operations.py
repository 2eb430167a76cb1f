"""Question model for the quiz.

A question is a :class:`MathOperation`: an :class:`OperationKind` tag plus two
operands.  The arithmetic and the display symbol for each kind live in a
single capability table rather than in subclasses, so adding a kind means
adding one table row.

Operands are drawn from an injected :class:`~.randomizer.RandomSource` so a
seeded or scripted source gives a reproducible question stream.

Division never uses the general operand range.  It picks a divisor and a
quotient in ``[1, 10]`` and multiplies them, so every division question has an
exact integer answer.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .randomizer import RandomSource

log = logging.getLogger(__name__)

DEFAULT_RANGE_FROM = 1
DEFAULT_RANGE_TO = 101  # exclusive

DIVISOR_RANGE = (1, 11)
QUOTIENT_RANGE = (1, 11)


class OperationKind(str, Enum):
    ADDITION = "addition"
    SUBTRACTION = "subtraction"
    MULTIPLICATION = "multiplication"
    DIVISION = "division"


@dataclass(frozen=True, slots=True)
class _Capability:
    symbol: str
    compute: Callable[[int, int], int]


_CAPABILITIES: dict[OperationKind, _Capability] = {
    OperationKind.ADDITION: _Capability("+", operator.add),
    OperationKind.SUBTRACTION: _Capability("-", operator.sub),
    OperationKind.MULTIPLICATION: _Capability("x", operator.mul),
    OperationKind.DIVISION: _Capability("/", operator.floordiv),
}


class OperationType(int, Enum):
    """Main menu selector.  ``RANDOM`` re-dispatches to a concrete kind."""

    RANDOM = 1
    ADDITION = 2
    SUBTRACTION = 3
    MULTIPLICATION = 4
    DIVISION = 5

    @property
    def label(self) -> str:
        return self.name.title()

    @property
    def kind(self) -> OperationKind | None:
        if self is OperationType.RANDOM:
            return None
        return OperationKind[self.name]


CONCRETE_KINDS: tuple[OperationKind, ...] = tuple(OperationKind)


@dataclass(frozen=True, slots=True)
class MathOperation:
    """A single question: two operands and the operation joining them.

    Attributes:
        kind: Which arithmetic operation this question asks for.
        n1: Left operand.
        n2: Right operand.
        range_from: Inclusive lower bound the operands were drawn from.
        range_to: Exclusive upper bound the operands were drawn from.
    """

    kind: OperationKind
    n1: int
    n2: int
    range_from: int = DEFAULT_RANGE_FROM
    range_to: int = DEFAULT_RANGE_TO

    def __post_init__(self) -> None:
        if self.kind is OperationKind.DIVISION and self.n2 == 0:
            raise ValueError("division question needs a nonzero divisor")

    @property
    def symbol(self) -> str:
        return _CAPABILITIES[self.kind].symbol

    def result(self) -> int:
        """Return the correct answer."""
        return _CAPABILITIES[self.kind].compute(self.n1, self.n2)

    def evaluate(self, answer: int) -> bool:
        """True iff ``answer`` equals :meth:`result`."""
        return self.result() == answer

    def __str__(self) -> str:
        return f"{self.n1} {self.symbol} {self.n2}"


def generate_operation(
    kind: OperationKind,
    rng: RandomSource,
    *,
    range_from: int = DEFAULT_RANGE_FROM,
    range_to: int = DEFAULT_RANGE_TO,
) -> MathOperation:
    """Draw a new question of ``kind`` with operands in ``[range_from, range_to)``.

    Division ignores the range and uses its own divisor and quotient ranges.
    """

    if range_from >= range_to:
        raise ValueError("range_from must be less than range_to")

    if kind is OperationKind.DIVISION:
        n1, n2 = _division_operands(rng)
    else:
        n1 = rng.next_int(range_from, range_to)
        n2 = rng.next_int(range_from, range_to)

    op = MathOperation(kind, n1, n2, range_from, range_to)
    log.debug("generated %s question: %s", kind.value, op)
    return op


def _division_operands(rng: RandomSource) -> tuple[int, int]:
    n1, n2 = 0, 0
    # Divisor times quotient always divides exactly, so this runs once.
    while n2 == 0 or n1 % n2 != 0:
        n2 = rng.next_int(*DIVISOR_RANGE)
        quotient = rng.next_int(*QUOTIENT_RANGE)
        n1 = n2 * quotient
        log.debug("drew division operands: %d / %d", n1, n2)
    return n1, n2


def divide_from(divisor: int, quotient: int) -> MathOperation:
    """Build the division question whose answer is ``quotient``."""

    if divisor == 0:
        raise ValueError("divisor must be nonzero")
    return MathOperation(OperationKind.DIVISION, divisor * quotient, divisor)


def make_operation(
    selection: OperationType,
    rng: RandomSource,
    *,
    range_from: int = DEFAULT_RANGE_FROM,
    range_to: int = DEFAULT_RANGE_TO,
) -> MathOperation:
    """Build the question for a main menu selection.

    ``RANDOM`` picks one of the four concrete kinds with equal probability and
    dispatches to it.
    """

    selection = OperationType(selection)
    if selection is OperationType.RANDOM:
        kind = rng.choice(CONCRETE_KINDS)
        log.debug("random selection resolved to %s", kind.value)
        return make_operation(
            OperationType[kind.name], rng, range_from=range_from, range_to=range_to
        )

    kind = selection.kind
    assert kind is not None
    return generate_operation(kind, rng, range_from=range_from, range_to=range_to)
