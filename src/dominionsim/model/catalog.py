# src/dominionsim/model/catalog.py
from __future__ import annotations
from typing import Dict, Optional, Tuple

from dominionsim.model.card import Card, CardType

T = CardType


def _card(id: str, name: str, *types: CardType, **attrs) -> Card:
    return Card(id=id, name=name, types=frozenset(types), **attrs)


# ---------------- Card table ----------------
CARDS: Dict[str, Card] = {c.id: c for c in (
    _card("curse", "Curse", T.CURSE, vp=-1),
    _card("estate", "Estate", T.VICTORY, vp=1),
    _card("duchy", "Duchy", T.VICTORY, vp=3),
    _card("province", "Province", T.VICTORY, vp=6),
    _card("copper", "Copper", T.TREASURE, value=1),
    _card("silver", "Silver", T.TREASURE, value=2),
    _card("gold", "Gold", T.TREASURE, value=3),

    _card("village", "Village", T.ACTION, draw=1, actions=2),
    _card("smithy", "Smithy", T.ACTION, draw=3, actions=0),
    _card("lab", "Laboratory", T.ACTION, draw=2, actions=1),
    _card("festival", "Festival", T.ACTION, draw=0, actions=2, buys=1, coins=2),
    _card("merchant", "Merchant", T.ACTION, draw=1, actions=1, first_play_bonus=("silver", 1)),
    _card("market", "Market", T.ACTION, draw=1, actions=1, buys=1, coins=1),
    _card("council_room", "Council Room", T.ACTION, draw=4, actions=0, buys=1),
    _card("peddler", "Peddler", T.ACTION, draw=1, actions=1, coins=1),
    _card("moat", "Moat", T.ACTION, draw=2, actions=0),
)}

# Short names and multi-word spellings accepted by resolve()
ALIASES: Dict[str, str] = {
    "e": "estate",
    "d": "duchy",
    "p": "province",
    "c": "copper",
    "s": "silver",
    "g": "gold",
    "council room": "council_room",
    "councilroom": "council_room",
}

# Display order for deck lists and quantity tables
SUPPORTED_ORDER: Tuple[str, ...] = (
    "estate", "duchy", "province",
    "copper", "silver", "gold",
    "festival", "village", "moat", "smithy", "council_room",
    "lab", "merchant", "peddler", "market",
)

_BY_NAME: Dict[str, str] = {c.name.lower(): cid for cid, c in CARDS.items()}


def resolve(name: str) -> Optional[Card]:
    """
    Look a card up by id, alias or display name (case-insensitive).
    Returns None when nothing matches.
    """
    key = str(name).strip().lower()
    key = ALIASES.get(key, key)
    if key in CARDS:
        return CARDS[key]
    cid = _BY_NAME.get(key)
    return CARDS[cid] if cid else None


def get(card_id: str) -> Card:
    return CARDS[card_id]
