from typing import Dict, Iterator, NamedTuple, Optional, Tuple

from loguru import logger

from roshambo.config import GameConfig
from roshambo.game_logic import Outcome
from roshambo.sampler import WeightedRandom


class RoundState(NamedTuple):
    """What the player threw last round and how that round ended."""
    hand: Optional[str]
    outcome: Optional[Outcome]

    def __str__(self):
        if self.hand is None:
            return "start"
        return f"{self.hand}/{self.outcome.value}"


# Before the first round there is nothing to condition on.
START = RoundState(None, None)


class AIPolicy:
    def choice(self) -> str:
        raise NotImplementedError

    def update(self, new_state: RoundState, player_hand: str):
        # optional; used by adaptive policies
        pass


class StateFrequencyPolicy(AIPolicy):
    """
    Counts what the player throws in each round state, predicts their next throw
    from those counts and plays something that beats it.

    table[state][hand] = times the player threw ``hand`` while ``state`` was current
    """

    def __init__(self, cfg: GameConfig, sampler: Optional[WeightedRandom] = None):
        self.cfg = cfg
        self.sampler = sampler or WeightedRandom(cfg.seed)
        self.table: Dict[RoundState, Dict[str, int]] = {}
        self.state = START

    def update(self, new_state: RoundState, player_hand: str):
        # The hand just played answers the state that was current before it.
        if self.state != START:
            row = self.table.get(self.state)
            if row is None:
                row = self.table[self.state] = {hand: 0 for hand in self.cfg.hands}
            row[player_hand] += 1
            logger.debug(f"{self.state} -> {player_hand} ({row[player_hand]})")
        self.state = new_state

    def choice(self) -> str:
        row = self.table.get(self.state)
        if self.state == START or row is None:
            return self.sampler.unweighted_choice(self.cfg.hands)
        predicted = self.sampler.weighted_choice(row)
        return self.sampler.unweighted_choice(self.cfg.beaten_by[predicted])

    def iter_table(self) -> Iterator[Tuple[RoundState, Dict[str, int]]]:
        for state, row in self.table.items():
            yield state, dict(row)
