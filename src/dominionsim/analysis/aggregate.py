# src/dominionsim/analysis/aggregate.py
"""Reduce a batch of turn outcomes into histograms, reason counts and averages."""
from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from dominionsim.model.turn import EndReason, TurnOutcome

METRICS = ("cards_drawn", "coins", "buys")


@dataclass(frozen=True)
class Bucket:
    value: int
    count: int
    pct_exact: float      # = value
    pct_at_least: float   # >= value
    pct_at_most: float    # <= value


@dataclass(frozen=True)
class Histogram:
    buckets: Tuple[Bucket, ...] = ()
    total: int = 0

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def counts(self) -> Dict[int, int]:
        return {b.value: b.count for b in self.buckets}


@dataclass(frozen=True)
class Summary:
    trials: int
    deck_size: int
    avg_cards_drawn: float = 0.0
    avg_coins: float = 0.0
    avg_buys: float = 0.0
    deck_exhausted_pct: float = 0.0


@dataclass(frozen=True)
class AggregateStats:
    summary: Summary
    histograms: Dict[str, Histogram] = field(default_factory=dict)
    end_reasons: List[Tuple[EndReason, int]] = field(default_factory=list)


def histogram(values: Iterable[int]) -> Histogram:
    counts = Counter(values)
    total = sum(counts.values())
    if not total:
        return Histogram()

    buckets = []
    below = 0  # trials strictly smaller than the current bucket
    for v in sorted(counts):
        c = counts[v]
        buckets.append(Bucket(
            value=v,
            count=c,
            pct_exact=c / total * 100,
            pct_at_least=100 - below / total * 100,
            pct_at_most=(below + c) / total * 100,
        ))
        below += c
    return Histogram(buckets=tuple(buckets), total=total)


def end_reason_counts(outcomes: Iterable[TurnOutcome]) -> List[Tuple[EndReason, int]]:
    # Counter keeps first-seen order and sorted() is stable
    counts = Counter(o.end_reason for o in outcomes)
    return sorted(counts.items(), key=lambda kv: -kv[1])


def _mean(outcomes: Sequence[TurnOutcome], f: Callable[[TurnOutcome], float]) -> float:
    return sum(f(o) for o in outcomes) / len(outcomes) if outcomes else 0.0


def summarize(outcomes: Sequence[TurnOutcome], deck_size: int) -> Summary:
    return Summary(
        trials=len(outcomes),
        deck_size=deck_size,
        avg_cards_drawn=_mean(outcomes, lambda o: o.cards_drawn),
        avg_coins=_mean(outcomes, lambda o: o.coins),
        avg_buys=_mean(outcomes, lambda o: o.buys),
        deck_exhausted_pct=_mean(outcomes, lambda o: 100.0 if o.deck_exhausted else 0.0),
    )


def aggregate(outcomes: Sequence[TurnOutcome], deck_size: int) -> AggregateStats:
    return AggregateStats(
        summary=summarize(outcomes, deck_size),
        histograms={m: histogram(getattr(o, m) for o in outcomes) for m in METRICS},
        end_reasons=end_reason_counts(outcomes),
    )
