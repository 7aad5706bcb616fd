# src/dominionsim/io/deck_list.py
from __future__ import annotations
import re
from typing import Dict, Iterable, List, Tuple

from dominionsim.model.card import Card
from dominionsim.model.catalog import CARDS, SUPPORTED_ORDER, resolve

_ENTRY_RE = re.compile(r"^(\d+)\s+(.+)$")


def parse_deck_list(text: str) -> Tuple[List[Card], List[str]]:
    """
    Parse "7 copper, 3 estate, 3 lab" into a card list.
    Bad entries are reported in the error list and skipped; they never raise.
    """
    if not text or not text.strip():
        return [], ["Deck list is empty"]

    errors: List[str] = []
    counts: Dict[str, int] = {}
    for raw in text.split(","):
        s = raw.strip()
        if not s:
            continue
        m = _ENTRY_RE.match(s)
        if not m:
            errors.append(f'Could not parse: "{s}"')
            continue
        n = int(m.group(1))
        name = m.group(2).strip()
        card = resolve(name)
        if card is None:
            errors.append(f'Unknown card: "{name}"')
            continue
        counts[card.id] = counts.get(card.id, 0) + n

    cards = [CARDS[cid] for cid, n in counts.items() for _ in range(n)]
    return cards, errors


def count_cards(cards: Iterable[Card]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for c in cards:
        counts[c.id] = counts.get(c.id, 0) + 1
    return counts


def format_deck_list(counts: Dict[str, int]) -> str:
    return ", ".join(f"{counts[cid]} {cid}" for cid in SUPPORTED_ORDER if counts.get(cid, 0) > 0)
