# src/dominionsim/engine/loop.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from dominionsim.analysis.aggregate import AggregateStats, aggregate
from dominionsim.engine.rng import RandomSource, make_random_source
from dominionsim.engine.turn import HAND_SIZE, simulate_turn
from dominionsim.model.card import Card
from dominionsim.model.turn import TurnOutcome
from dominionsim.utils.logging import EventLog


class InvalidArgument(ValueError):
    pass


def _check_trials(trials) -> int:
    if isinstance(trials, bool) or not isinstance(trials, int):
        raise InvalidArgument(f"trial count must be an int, got {trials!r}")
    if trials < 0:
        raise InvalidArgument(f"trial count must be >= 0, got {trials}")
    return trials


def run(
    deck: Sequence[Card],
    trials: int,
    rng: RandomSource,
    hand_size: int = HAND_SIZE,
) -> List[TurnOutcome]:
    """
    Simulate ``trials`` independent turns of the same deck, reshuffling a fresh
    copy each time. All trials share one random stream, in order.
    """
    _check_trials(trials)
    deck = tuple(deck)
    return [simulate_turn(deck, rng, hand_size) for _ in range(trials)]


def iter_chunks(
    deck: Sequence[Card],
    trials: int,
    rng: RandomSource,
    chunk_size: int,
    hand_size: int = HAND_SIZE,
) -> Iterator[List[TurnOutcome]]:
    """Same stream as run(), handed out ``chunk_size`` outcomes at a time."""
    _check_trials(trials)
    if chunk_size <= 0:
        raise InvalidArgument(f"chunk size must be > 0, got {chunk_size}")
    deck = tuple(deck)
    done = 0
    while done < trials:
        n = min(chunk_size, trials - done)
        yield [simulate_turn(deck, rng, hand_size) for _ in range(n)]
        done += n


@dataclass
class BatchResult:
    outcomes: List[TurnOutcome]
    stats: AggregateStats


def run_many(cfg, deck: Sequence[Card], log: Optional[EventLog] = None) -> BatchResult:
    trials = _check_trials(cfg.trials)
    rng = make_random_source(cfg.seed)
    log = log if log is not None else EventLog()

    log.emit({"a": "batch_start", "seed": cfg.seed, "trials": trials, "deck_size": len(deck)})

    # progress is reported on chunk boundaries; make chunks line up with it
    chunk = cfg.chunk_size
    if cfg.progress_every > 0:
        chunk = min(chunk, cfg.progress_every)

    outs: List[TurnOutcome] = []
    reported = 0
    for part in iter_chunks(deck, trials, rng, chunk, cfg.hand_size):
        outs.extend(part)
        if cfg.progress_every > 0 and len(outs) - reported >= cfg.progress_every:
            reported = len(outs)
            print(f"[progress] finished {len(outs)}/{trials} trials")

    stats = aggregate(outs, len(deck))
    log.emit({"a": "batch_end", "trials": len(outs),
              "end_reasons": {r.value: n for r, n in stats.end_reasons}})
    return BatchResult(outcomes=outs, stats=stats)
