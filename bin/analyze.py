#!/usr/bin/env python3
import argparse, os, sys, glob, re
import pandas as pd

RUN_RE = re.compile(
    r"summary_(?P<table>cards_drawn|coins|buys|reasons|overview)_(?P<seed>[A-Za-z0-9-]+)_(?P<trials>\d+)trials\.csv$"
)
TABLES = ("overview", "cards_drawn", "coins", "buys", "reasons")
TITLES = {
    "overview": "Summary",
    "cards_drawn": "Cards drawn (beyond the starting hand)",
    "coins": "Coins",
    "buys": "Buys",
    "reasons": "Why the action phase ended",
}


def df_to_md(df: pd.DataFrame) -> str:
    return df.to_markdown(index=False, floatfmt=".1f")


def find_runs(summaries_dir: str) -> dict:
    """(seed, trials) -> {table: path}, keeping only complete runs."""
    index = {}
    for p in glob.glob(os.path.join(summaries_dir, "summary_*_*trials.csv")):
        m = RUN_RE.search(os.path.basename(p))
        if not m:
            continue
        k = (m.group("seed"), int(m.group("trials")))
        index.setdefault(k, {})[m.group("table")] = p
    return {k: v for k, v in index.items() if all(t in v for t in TABLES)}


def pick_run(runs: dict, seed: str | None, trials: int | None):
    cands = [(k, v) for k, v in runs.items()
             if (seed is None or k[0] == seed) and (trials is None or k[1] == trials)]
    if not cands:
        return None, None
    # newest by mtime of the overview file
    cands.sort(key=lambda kv: os.path.getmtime(kv[1]["overview"]))
    return cands[-1]


def read_table(path: str) -> pd.DataFrame:
    try:
        return pd.read_csv(path)
    except pd.errors.EmptyDataError:
        return pd.DataFrame()


def build_report(key, files) -> str:
    seed, trials = key
    report = ["# Single-turn deck simulation report", ""]
    report.append(f"**Trials:** {trials} | **Seed:** {seed}")
    report.append("")
    for t in TABLES:
        df = read_table(files[t])
        report.append(f"## {TITLES[t]} ({os.path.basename(files[t])})\n")
        report.append(df_to_md(df) if len(df) else "_(no data)_")
        report.append("")
    return "\n".join(report)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--summaries_dir", default="summaries")
    ap.add_argument("--out", default="summaries/analysis_report.md")
    ap.add_argument("--seed", default=None, help="seed tag as it appears in the file names")
    ap.add_argument("--trials", type=int, default=None)
    args = ap.parse_args()

    runs = find_runs(args.summaries_dir)
    key, files = pick_run(runs, args.seed, args.trials)
    if key is None:
        print("[analyze] No matching summary CSVs found.")
        sys.exit(1)

    print("[analyze] Using:")
    for t in TABLES:
        print(f"  {t:<11}: {files[t]}")

    out_path = args.out
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(build_report(key, files))
    print(f"[analyze] Wrote {out_path}")


if __name__ == "__main__":
    main()
