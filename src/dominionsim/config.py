from dataclasses import dataclass
from typing import Optional
import argparse
import math

MAX_TRIALS = 10_000_000
DEFAULT_DECK = "7 copper, 3 estate, 3 lab, 1 village, 2 smithy"


@dataclass
class Config:
    seed: Optional[str] = None   # None/"" = unseeded
    trials: int = 10_000
    deck: str = DEFAULT_DECK
    hand_size: int = 5

    # Batch driving
    chunk_size: int = 100_000
    progress_every: int = 0      # 0 = quiet

    # Output
    summaries_dir: str = "summaries"
    write_csv: bool = False
    as_json: bool = False


def clamp_trials(n: int) -> int:
    """Keep a requested trial count inside [1, MAX_TRIALS]."""
    return min(MAX_TRIALS, max(1, int(n)))


def _trial_count(s: str) -> int:
    # accepts "10000", "1e6", "3e5"
    try:
        v = float(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {s!r}")
    if not math.isfinite(v):
        raise argparse.ArgumentTypeError(f"trial count must be finite, got {s!r}")
    if v < 0:
        raise argparse.ArgumentTypeError(f"trial count must be >= 0, got {s!r}")
    return int(round(v))


def build_config_from_cli(argv=None):
    ap = argparse.ArgumentParser(description="Single-turn Dominion deck statistics")
    ap.add_argument("--deck", default=DEFAULT_DECK, help='e.g. "7 copper, 3 estate, 2 smithy"')
    ap.add_argument("--trials", type=_trial_count, default=10_000)
    ap.add_argument("--seed", default=None, help="string seed; omit for a random run")
    ap.add_argument("--hand_size", type=int, default=5)
    ap.add_argument("--chunk_size", type=int, default=100_000)
    ap.add_argument("--progress_every", type=int, default=0)
    ap.add_argument("--summaries_dir", default="summaries")
    ap.add_argument("--csv", action="store_true", help="write summary CSVs to --summaries_dir")
    ap.add_argument("--json", action="store_true", help="print results as JSON")

    args = ap.parse_args(argv)
    if args.hand_size < 0:
        ap.error("--hand_size must be >= 0")
    if args.chunk_size <= 0:
        ap.error("--chunk_size must be > 0")
    if args.progress_every < 0:
        ap.error("--progress_every must be >= 0")

    cfg = Config(
        seed=args.seed or None,
        trials=clamp_trials(args.trials),
        deck=args.deck,
        hand_size=args.hand_size,
        chunk_size=args.chunk_size,
        progress_every=args.progress_every,
        summaries_dir=args.summaries_dir,
        write_csv=args.csv,
        as_json=args.json,
    )
    return cfg, args
