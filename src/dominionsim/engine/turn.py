# src/dominionsim/engine/turn.py
from __future__ import annotations
from typing import Optional, Sequence

from dominionsim.bots.heuristic import choose_action
from dominionsim.engine.rng import RandomSource
from dominionsim.engine.shuffle import shuffled
from dominionsim.model.card import Card
from dominionsim.model.turn import EndReason, TurnOutcome, TurnState
from dominionsim.utils.logging import EventLog

HAND_SIZE = 5


# ---------------- Draw helpers ----------------
def draw(s: TurnState, n: int) -> int:
    """Draw up to n cards; stops at the first failed draw. Returns cards drawn."""
    got = 0
    for _ in range(n):
        if s.draw_one() is None:
            break
        got += 1
    return got


# ---------------- Phases ----------------
def play_action(s: TurnState, card: Card) -> None:
    s.hand.remove(card)
    s.in_play.append(card)
    s.actions -= 1

    drawn = draw(s, card.draw)
    s.cards_drawn += drawn
    s.actions += card.actions
    s.buys += card.buys
    s.coins += card.coins

    if card.first_play_bonus is not None:
        kind, amount = card.first_play_bonus
        s.pending_bonuses[kind] = s.pending_bonuses.get(kind, 0) + amount
        if card.is_merchant_bonus:
            s.merchant_triggers += 1

    s.emit({"a": "play", "cid": card.id, "drew": drawn,
            "actions": s.actions, "buys": s.buys, "coins": s.coins})


def action_phase(s: TurnState) -> None:
    while s.actions > 0:
        nxt = choose_action(s.hand)
        if nxt is None:
            break
        play_action(s, nxt)


def end_reason(s: TurnState) -> EndReason:
    if not s.draw_pile:
        return EndReason.WHOLE_DECK_DRAWN
    if s.actions == 0:
        return EndReason.NO_ACTIONS
    # unreachable from action_phase (it only stops with actions left when no action is in hand)
    if any(c.is_action and c.draw > 0 for c in s.hand):
        return EndReason.NO_ACTIONS
    return EndReason.NO_ACTION_CARDS


def treasure_phase(s: TurnState) -> int:
    """
    Play every treasure in hand. Kinds with an armed bonus go first and the
    first copy of each such kind takes the whole bonus; everything else pays
    its plain value.
    """
    treasures = [c for c in s.hand if c.is_treasure]
    treasures.sort(key=lambda c: c.id not in s.pending_bonuses)

    total = 0
    for t in treasures:
        bonus = s.pending_bonuses.pop(t.id, 0)
        total += t.value + bonus
        s.emit({"a": "treasure", "cid": t.id, "coins": t.value, "bonus": bonus})
    s.coins += total
    return total


# ---------------- One turn ----------------
def simulate_turn(
    deck: Sequence[Card],
    rng: RandomSource,
    hand_size: int = HAND_SIZE,
    log: Optional[EventLog] = None,
) -> TurnOutcome:
    s = TurnState(draw_pile=shuffled(deck, rng), log=log)
    draw(s, hand_size)
    s.emit({"a": "turn_start", "hand": [c.id for c in s.hand], "pile": len(s.draw_pile)})

    action_phase(s)
    reason = end_reason(s)
    treasure_phase(s)

    out = TurnOutcome(
        cards_drawn=s.cards_drawn,
        coins=s.coins,
        buys=s.buys,
        end_reason=reason,
        deck_exhausted=s.deck_exhausted,
    )
    s.emit({"a": "turn_end", **out.as_row(),
            "played": [c.id for c in s.in_play], "merchant_triggers": s.merchant_triggers})
    return out
