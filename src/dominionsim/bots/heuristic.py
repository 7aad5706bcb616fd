# src/dominionsim/bots/heuristic.py
from __future__ import annotations
from functools import cmp_to_key
from typing import Iterable, Optional

from dominionsim.model.card import Card


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_priority(a: Card, b: Card) -> int:
    """
    Negative when ``a`` should be played before ``b``.

    Engines before payload: more +actions, then more draw, more +buys,
    more +coins, Merchant-like cards, and finally the larger id.
    """
    for attr in ("actions", "draw", "buys", "coins"):
        d = _cmp(getattr(b, attr), getattr(a, attr))
        if d:
            return d
    d = _cmp(b.is_merchant_bonus, a.is_merchant_bonus)
    if d:
        return d
    # no real criteria left; fixed tiebreak on id, descending
    return _cmp(b.id, a.id)


priority_key = cmp_to_key(compare_priority)


def choose_action(hand: Iterable[Card]) -> Optional[Card]:
    """Best action card in hand, or None if there is none."""
    actions = [c for c in hand if c.is_action]
    if not actions:
        return None
    return min(actions, key=priority_key)
