import random
from typing import Mapping, Optional, Sequence, TypeVar

T = TypeVar("T")


class EmptyDomainError(Exception):
    """Raised when asked to pick from nothing."""


class WeightedRandom:
    """Random picks over plain sequences or {item: weight} mappings."""

    def __init__(self, seed: Optional[int] = None):
        self.rand = random.Random(seed)

    def weighted_choice(self, weights: Mapping[T, float]) -> T:
        """
        Pick a key with probability proportional to its weight.

        Weights need not sum to one. Items are walked in mapping order, so when
        every weight is zero the last item is returned.
        """
        if not weights:
            raise EmptyDomainError("cannot sample from an empty weight table")
        if any(w < 0 for w in weights.values()):
            raise ValueError("weights must be non-negative")

        target = self.rand.random() * float(sum(weights.values()))
        item = None
        for item, weight in weights.items():
            if target < weight:
                return item
            target -= weight
        return item

    def unweighted_choice(self, items: Sequence[T]) -> T:
        if not items:
            raise EmptyDomainError("cannot sample from an empty sequence")
        return self.rand.choice(items)
