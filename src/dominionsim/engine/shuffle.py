# src/dominionsim/engine/shuffle.py
from __future__ import annotations
from typing import List, MutableSequence, Sequence, TypeVar

from dominionsim.engine.rng import RandomSource

X = TypeVar("X")


def shuffle_in_place(items: MutableSequence[X], rng: RandomSource) -> MutableSequence[X]:
    """Fisher-Yates, walking down from the last index."""
    for i in range(len(items) - 1, 0, -1):
        j = int(rng() * (i + 1))
        items[i], items[j] = items[j], items[i]
    return items


def shuffled(deck: Sequence[X], rng: RandomSource) -> List[X]:
    """Shuffle a private copy; ``deck`` itself is left alone."""
    pile = list(deck)
    shuffle_in_place(pile, rng)
    return pile
