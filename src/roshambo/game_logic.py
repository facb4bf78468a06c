from enum import Enum
from typing import Mapping, Sequence


class Outcome(str, Enum):
    PLAYER = "player"
    COMPUTER = "computer"
    DRAW = "draw"


def resolve(player: str, computer: str, beaten_by: Mapping[str, Sequence[str]]) -> Outcome:
    """
    Return the winner of a round. Pairs the relation does not cover count as a draw.
    """
    if player in beaten_by.get(computer, ()):
        return Outcome.PLAYER
    if computer in beaten_by.get(player, ()):
        return Outcome.COMPUTER
    return Outcome.DRAW
