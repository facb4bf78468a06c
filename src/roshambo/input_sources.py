from typing import Callable, Optional, Sequence

from roshambo.sampler import WeightedRandom

EXIT = "exit"
PRINT = "print"


class InputSource:
    """Where the player's answer for a round comes from."""

    def next_input(self) -> str:
        raise NotImplementedError


class StdinInput(InputSource):
    """Blocks on stdin. End of input is treated as ``exit``."""

    def __init__(self, read_line: Optional[Callable[[], str]] = None):
        self.read_line = read_line or input

    def next_input(self) -> str:
        try:
            return self.read_line()
        except EOFError:
            return EXIT


class RandomHandInput(InputSource):
    def __init__(self, hands: Sequence[str], sampler: Optional[WeightedRandom] = None):
        self.hands = tuple(hands)
        self.sampler = sampler or WeightedRandom()

    def next_input(self) -> str:
        return self.sampler.unweighted_choice(self.hands)


class RoundRobinInput(InputSource):
    """Cycles through the hands in order, starting with the first."""

    def __init__(self, hands: Sequence[str]):
        self.hands = tuple(hands)
        self.index = 0

    def next_input(self) -> str:
        hand = self.hands[self.index % len(self.hands)]
        self.index += 1
        return hand


class ConstantInput(InputSource):
    def __init__(self, text: str):
        self.text = text

    def next_input(self) -> str:
        return self.text
