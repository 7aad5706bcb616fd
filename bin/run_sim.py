#!/usr/bin/env python3
from dominionsim.config import build_config_from_cli
from dominionsim.engine.loop import run_many
from dominionsim.io.deck_list import parse_deck_list
from dominionsim.io.summaries import format_report, write_summaries
import dataclasses
import json
import sys


def main(argv=None) -> int:
    cfg, args = build_config_from_cli(argv)

    cards, errors = parse_deck_list(cfg.deck)
    if errors:
        print("Deck errors:", file=sys.stderr)
        for e in errors:
            print(f"  {e}", file=sys.stderr)
        return 2

    print(f"[run] {cfg.trials:,} trials, deck of {len(cards)}, seed={cfg.seed or '-'}", file=sys.stderr)
    res = run_many(cfg, cards)

    if cfg.write_csv:
        paths = write_summaries(cfg, res.stats)
        print(f"[summaries] wrote {', '.join(paths)}", file=sys.stderr)

    if cfg.as_json:
        st = res.stats
        out = {
            "summary": dataclasses.asdict(st.summary),
            "histograms": {m: {str(k): v for k, v in h.counts().items()} for m, h in st.histograms.items()},
            "end_reasons": {r.value: n for r, n in st.end_reasons},
        }
        print(json.dumps(out, indent=2))
    else:
        print(format_report(res.stats, cfg.hand_size))
    return 0


if __name__ == "__main__":
    sys.exit(main())
