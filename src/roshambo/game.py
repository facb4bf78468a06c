from typing import Dict, Optional

from loguru import logger

from roshambo.ai_policy import AIPolicy, RoundState, StateFrequencyPolicy
from roshambo.config import GameConfig
from roshambo.game_logic import Outcome, resolve
from roshambo.input_sources import (
    EXIT,
    PRINT,
    ConstantInput,
    InputSource,
    RandomHandInput,
    RoundRobinInput,
    StdinInput,
)


class InvalidHandInput(Exception):
    """The player typed something that is neither a hand nor a command."""


def parse_player_input(text: str, cfg: GameConfig) -> str:
    """
    Normalise raw player input to a hand name, ``exit`` or ``print``.
    """
    choice = (text or "").strip().lower()
    if choice in (EXIT, PRINT) or choice in cfg.beaten_by:
        return choice
    raise InvalidHandInput(text)


class Game:
    """Plays single rounds and keeps the running score."""

    def __init__(self, cfg: GameConfig, policy: Optional[AIPolicy] = None):
        self.cfg = cfg
        self.policy = policy or StateFrequencyPolicy(cfg)
        self.score: Dict[Outcome, int] = {o: 0 for o in Outcome}

    @property
    def rounds(self) -> int:
        return sum(self.score.values())

    def prompt(self) -> str:
        hands = ", ".join(h.capitalize() for h in self.cfg.hands)
        return f"Choose {hands}, or Exit: "

    def throw(self, source: InputSource) -> bool:
        """
        Play one round against ``source``. Returns False once the player exits.
        """
        # The computer commits before the player answers.
        computer = self.policy.choice()
        print(self.prompt())
        raw = source.next_input()

        try:
            player = parse_player_input(raw, self.cfg)
        except InvalidHandInput:
            logger.warning(f"Invalid input: {raw!r}")
            print("Please choose a valid option.")
            return True

        if player == EXIT:
            return False
        if player == PRINT:
            self.print_diagnostics()
            return True

        outcome = resolve(player, computer, self.cfg.beaten_by)
        self.score[outcome] += 1
        self.policy.update(RoundState(player, outcome), player)
        logger.info(f"Round {self.rounds}: player={player} computer={computer} result={outcome.value}")

        print(f"You chose: {player.capitalize()}, Computer chose: {computer.capitalize()}.")
        print(getattr(self.cfg.messages, outcome.value))
        print("Current score:")
        print(self.score_line())
        return True

    def score_line(self) -> str:
        return (
            f"Player: {self.score[Outcome.PLAYER]}, "
            f"Computer: {self.score[Outcome.COMPUTER]}, "
            f"Draws: {self.score[Outcome.DRAW]}"
        )

    def print_diagnostics(self):
        iter_table = getattr(self.policy, "iter_table", None)
        if iter_table is None:
            print("This opponent keeps no history.")
            return
        for state, row in iter_table():
            print(f"{state} => {row}")


class GameSession:
    """The three ways a game can be driven from the command line."""

    def __init__(self, cfg: GameConfig, game: Optional[Game] = None):
        self.cfg = cfg
        self.game = game or Game(cfg)

    def player_game(self, source: Optional[InputSource] = None):
        source = source or StdinInput()
        while self.game.throw(source):
            pass

    def random_game(self, times_to_play: int):
        source = RandomHandInput(self.cfg.hands)
        for _ in range(times_to_play):
            self.game.throw(source)
        self.game.throw(ConstantInput(PRINT))

    def ordered_game(self, times_to_play: int):
        # Inclusive range: times_to_play + 1 rounds.
        source = RoundRobinInput(self.cfg.hands)
        for _ in range(times_to_play + 1):
            self.game.throw(source)
        self.game.throw(ConstantInput(PRINT))
