"""Interactive game loop.

The loop is a small state machine::

    MAIN_MENU -> AWAITING_ANSWER -> MAIN_MENU
    MAIN_MENU -> SUB_MENU -> MAIN_MENU | FINISHED

Input, output, time and randomness are all injected, so a scripted stdin, a
fake clock and a seeded :class:`~.randomizer.Randomizer` replay a session
exactly.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TextIO

from .clock import Clock, RealClock, elapsed_ms
from .config import GameConfig
from .game_ui import GameUI
from .operations import MathOperation, OperationType, make_operation
from .player_input import PlayerInput
from .randomizer import RandomSource, Randomizer
from .results import Player, Result, evaluate_answer

log = logging.getLogger(__name__)

ADDITIONAL_OPTIONS = ("History", "Quit")


class Phase(str, Enum):
    MAIN_MENU = "main_menu"
    SUB_MENU = "sub_menu"
    AWAITING_ANSWER = "awaiting_answer"
    FINISHED = "finished"


class SimpleMathGame:
    def __init__(
        self,
        *,
        rng: RandomSource | None = None,
        clock: Clock | None = None,
        player_input: PlayerInput | None = None,
        ui: GameUI | None = None,
        config: GameConfig | None = None,
    ) -> None:
        self._config = config if config is not None else GameConfig()
        self._rng: RandomSource = rng if rng is not None else Randomizer(self._config.seed)
        self._clock: Clock = clock if clock is not None else RealClock()
        self._input = player_input if player_input is not None else PlayerInput()
        self._ui = ui if ui is not None else GameUI()

        self.operations: tuple[str, ...] = tuple(t.label for t in OperationType)
        self.current_player = Player()

        self._phase = Phase.MAIN_MENU
        self._question: MathOperation | None = None

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def current_question(self) -> MathOperation | None:
        return self._question

    def run(self, *, max_rounds: int | None = None) -> int:
        """Play until the player quits or input ends.

        ``max_rounds`` caps the number of main menu visits, for headless runs.
        """

        log.info("session started")
        rounds = 0
        try:
            while self._phase is not Phase.FINISHED:
                if self._phase is Phase.MAIN_MENU:
                    if max_rounds is not None and rounds >= max_rounds:
                        break
                    rounds += 1
                self.step()
        except EOFError:
            log.info("input closed; ending session")
            self._phase = Phase.FINISHED
        log.info(
            "session ended after %d answered question(s)", len(self.current_player.record)
        )
        return 0

    def step(self) -> None:
        """Advance the state machine by one blocking read."""

        if self._phase is Phase.MAIN_MENU:
            self._main_menu()
        elif self._phase is Phase.SUB_MENU:
            self._additional_options()
        elif self._phase is Phase.AWAITING_ANSWER:
            self._answer_question()

    def select_option(self, choice: int) -> MathOperation | None:
        """Handle a main menu choice; 0 opens the additional options."""

        if choice == 0:
            self._phase = Phase.SUB_MENU
            return None
        question = self.question_maker(OperationType(choice))
        self._question = question
        self._phase = Phase.AWAITING_ANSWER
        return question

    def question_maker(self, choice: OperationType) -> MathOperation:
        return make_operation(
            choice,
            self._rng,
            range_from=self._config.range_from,
            range_to=self._config.range_to,
        )

    def give_result(self, question: MathOperation, answer: int, time_ms: int) -> Result:
        result = evaluate_answer(question, answer, time_ms)
        self._ui.show_result(result)
        self.current_player.record_result(result)
        return result

    def _main_menu(self) -> None:
        self._ui.list_options("Choose option number:", self.operations)
        self._ui.prompt("(Enter 0 for additional options)")
        choice = self._input.read_int(0, len(self.operations))
        self.select_option(choice)

    def _additional_options(self) -> None:
        self._ui.list_options("options", ADDITIONAL_OPTIONS)
        choice = self._input.read_int(len(ADDITIONAL_OPTIONS))
        option = ADDITIONAL_OPTIONS[choice - 1]
        if option == "History":
            self._ui.show_record(self.current_player.record)
            self._phase = Phase.MAIN_MENU
        else:
            self._phase = Phase.FINISHED

    def _answer_question(self) -> None:
        question = self._question
        self._ui.prompt("what's the answer?")
        self._ui.show_math_operation(question)
        if question is None:
            self._phase = Phase.MAIN_MENU
            return

        started = self._clock.now()
        answer = self._input.read_int()
        stopped = self._clock.now()

        self.give_result(question, answer, elapsed_ms(started, stopped))
        self._question = None
        self._phase = Phase.MAIN_MENU


def build_game(
    config: GameConfig,
    *,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
    clock: Clock | None = None,
) -> SimpleMathGame:
    """Wire a game whose prompts, menus and error messages share one output stream."""

    return SimpleMathGame(
        rng=Randomizer(config.seed),
        clock=clock,
        player_input=PlayerInput(stdin=stdin, out=out),
        ui=GameUI(out),
        config=config,
    )
