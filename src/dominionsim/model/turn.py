# src/dominionsim/model/turn.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from dominionsim.model.card import Card
from dominionsim.utils.logging import EventLog


class EndReason(str, Enum):
    """Why the action phase stopped. Exactly one per trial."""
    WHOLE_DECK_DRAWN = "whole deck drawn"
    NO_ACTIONS = "no actions remaining"
    NO_ACTION_CARDS = "no action cards in hand"

    def __str__(self) -> str:
        return self.value


@dataclass
class TurnState:
    draw_pile: List[Card]

    # Zones
    hand: List[Card] = field(default_factory=list)
    in_play: List[Card] = field(default_factory=list)

    # Counters
    actions: int = 1
    buys: int = 1
    coins: int = 0
    merchant_triggers: int = 0
    cards_drawn: int = 0       # beyond the starting hand
    deck_exhausted: bool = False

    # treasure id -> bonus coins for the first treasure of that kind played
    pending_bonuses: Dict[str, int] = field(default_factory=dict)

    log: Optional[EventLog] = None

    def emit(self, rec: Dict[str, Any]) -> None:
        if self.log is not None:
            self.log.emit(rec)

    def draw_one(self) -> Optional[Card]:
        """Take the top card of the pile; an empty pile marks the deck exhausted."""
        if not self.draw_pile:
            self.deck_exhausted = True
            return None
        c = self.draw_pile.pop()
        self.hand.append(c)
        return c


@dataclass(frozen=True)
class TurnOutcome:
    cards_drawn: int
    coins: int
    buys: int
    end_reason: EndReason
    deck_exhausted: bool

    def as_row(self) -> Dict[str, Any]:
        return {
            "cards_drawn": self.cards_drawn,
            "coins": self.coins,
            "buys": self.buys,
            "end_reason": self.end_reason.value,
            "deck_exhausted": self.deck_exhausted,
        }
