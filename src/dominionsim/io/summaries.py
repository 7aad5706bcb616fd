# src/dominionsim/io/summaries.py
from __future__ import annotations
import os
import re
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from dominionsim.analysis.aggregate import METRICS, AggregateStats, Histogram, Summary
from dominionsim.model.turn import EndReason, TurnOutcome

HIST_COLS = ["value", "count", "pct_exact", "pct_at_least", "pct_at_most"]
REASON_COLS = ["end_reason", "count", "pct"]
SUMMARY_COLS = ["trials", "deck_size", "avg_cards_drawn", "avg_coins", "avg_buys", "deck_exhausted_pct"]
OUTCOME_COLS = ["cards_drawn", "coins", "buys", "end_reason", "deck_exhausted"]

NO_DATA = "(no data)"


# ---------------- DataFrames ----------------
def histogram_frame(hist: Histogram) -> pd.DataFrame:
    if hist.is_empty:
        return pd.DataFrame(columns=HIST_COLS)
    return pd.DataFrame([
        {"value": b.value, "count": b.count, "pct_exact": b.pct_exact,
         "pct_at_least": b.pct_at_least, "pct_at_most": b.pct_at_most}
        for b in hist.buckets
    ], columns=HIST_COLS)


def reasons_frame(reasons: Sequence[Tuple[EndReason, int]], total: int) -> pd.DataFrame:
    if not reasons or not total:
        return pd.DataFrame(columns=REASON_COLS)
    return pd.DataFrame([
        {"end_reason": r.value, "count": n, "pct": n / total * 100}
        for r, n in reasons
    ], columns=REASON_COLS)


def summary_frame(summary: Summary) -> pd.DataFrame:
    return pd.DataFrame([{k: getattr(summary, k) for k in SUMMARY_COLS}], columns=SUMMARY_COLS)


def outcomes_frame(outcomes: Sequence[TurnOutcome]) -> pd.DataFrame:
    return pd.DataFrame([o.as_row() for o in outcomes], columns=OUTCOME_COLS)


# ---------------- Text tables ----------------
def format_histogram(hist: Histogram) -> str:
    if hist.is_empty:
        return NO_DATA
    lines = ["val |   =n    |  >=n    |  <=n"]
    for b in hist.buckets:
        lines.append(
            f"{b.value:>3} | {b.pct_exact:>6.1f}% | {b.pct_at_least:>6.1f}% | {b.pct_at_most:>6.1f}%"
        )
    return "\n".join(lines)


def format_end_reasons(reasons: Sequence[Tuple[EndReason, int]], total: int) -> str:
    if not reasons or not total:
        return NO_DATA
    width = max(len(r.value) for r, _ in reasons)
    return "\n".join(
        f"{r.value:<{width}} | {n:>6} ({n / total * 100:>5.1f}%)" for r, n in reasons
    )


def format_summary(s: Summary, hand_size: int = 5) -> str:
    return "\n".join([
        f"Deck size: {s.deck_size}",
        f"Avg cards drawn: {hand_size} + {s.avg_cards_drawn:.2f} = {hand_size + s.avg_cards_drawn:.2f}",
        f"Avg coins: {s.avg_coins:.2f}",
        f"Avg buys: {s.avg_buys:.2f}",
        f"Deck hit empty while drawing: {s.deck_exhausted_pct:.1f}%",
    ])


def format_report(stats: AggregateStats, hand_size: int = 5) -> str:
    total = stats.summary.trials
    parts = []
    for m in METRICS:
        parts.append(f"== {m.replace('_', ' ')} ==")
        parts.append(format_histogram(stats.histograms[m]))
        parts.append("")
    parts += ["== end reasons ==", format_end_reasons(stats.end_reasons, total), ""]
    parts += ["== summary ==", format_summary(stats.summary, hand_size)]
    return "\n".join(parts)


# ---------------- CSV ----------------
def seed_tag(seed: Optional[str]) -> str:
    if not seed:
        return "random"
    return re.sub(r"[^A-Za-z0-9-]+", "-", seed).strip("-") or "seed"


def write_summaries(cfg, stats: AggregateStats) -> List[str]:
    os.makedirs(cfg.summaries_dir, exist_ok=True)
    tag = f"{seed_tag(cfg.seed)}_{stats.summary.trials}trials"

    frames = {m: histogram_frame(stats.histograms[m]) for m in METRICS}
    frames["reasons"] = reasons_frame(stats.end_reasons, stats.summary.trials)
    frames["overview"] = summary_frame(stats.summary)

    paths = []
    for table, df in frames.items():
        path = os.path.join(cfg.summaries_dir, f"summary_{table}_{tag}.csv")
        df.to_csv(path, index=False)
        paths.append(path)
    return paths
