# src/dominionsim/model/card.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple


class CardType(str, Enum):
    TREASURE = "treasure"
    ACTION = "action"
    VICTORY = "victory"
    CURSE = "curse"


@dataclass(frozen=True)
class Card:
    id: str
    name: str
    types: FrozenSet[CardType] = frozenset()

    # Action effects (applied when played in the action phase)
    draw: int = 0
    actions: int = 0
    buys: int = 0
    coins: int = 0

    # Treasure / scoring
    value: int = 0   # base coin value when played as a treasure
    vp: int = 0

    # One-shot bonus armed for the first treasure of a kind, e.g. ("silver", 1)
    first_play_bonus: Optional[Tuple[str, int]] = None

    @property
    def is_action(self) -> bool:
        return CardType.ACTION in self.types

    @property
    def is_treasure(self) -> bool:
        return CardType.TREASURE in self.types

    @property
    def is_merchant_bonus(self) -> bool:
        """True for Merchant-like cards: +1 coin on the first Silver played this turn."""
        return self.first_play_bonus is not None and self.first_play_bonus[0] == "silver"

    def __str__(self) -> str:
        return self.name
