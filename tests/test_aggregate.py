import pytest

from dominionsim.analysis.aggregate import (
    METRICS, aggregate, end_reason_counts, histogram, summarize,
)
from dominionsim.engine.loop import run
from dominionsim.engine.rng import make_random_source
from dominionsim.model.catalog import CARDS
from dominionsim.model.turn import EndReason, TurnOutcome


def _out(cards_drawn=0, coins=0, buys=1, reason=EndReason.NO_ACTION_CARDS, exhausted=False):
    return TurnOutcome(cards_drawn, coins, buys, reason, exhausted)


def test_histogram_buckets():
    h = histogram([4, 1, 2, 1])
    assert [b.value for b in h.buckets] == [1, 2, 4]
    assert [b.count for b in h.buckets] == [2, 1, 1]
    assert [b.pct_exact for b in h.buckets] == pytest.approx([50, 25, 25])
    assert [b.pct_at_least for b in h.buckets] == pytest.approx([100, 50, 25])
    assert [b.pct_at_most for b in h.buckets] == pytest.approx([50, 75, 100])
    assert h.total == 4
    assert h.counts() == {1: 2, 2: 1, 4: 1}


def test_empty_histogram_is_no_data():
    h = histogram([])
    assert h.is_empty
    assert h.buckets == ()
    assert h.total == 0


def test_end_reasons_by_count_then_first_seen():
    outs = [
        _out(reason=EndReason.NO_ACTIONS),
        _out(reason=EndReason.WHOLE_DECK_DRAWN),
        _out(reason=EndReason.WHOLE_DECK_DRAWN),
        _out(reason=EndReason.NO_ACTIONS),
        _out(reason=EndReason.NO_ACTION_CARDS),
    ]
    assert end_reason_counts(outs) == [
        (EndReason.NO_ACTIONS, 2),
        (EndReason.WHOLE_DECK_DRAWN, 2),
        (EndReason.NO_ACTION_CARDS, 1),
    ]
    assert end_reason_counts([]) == []


def test_summary_means():
    outs = [_out(2, 5, 1, exhausted=True), _out(0, 3, 2), _out(1, 4, 1), _out(1, 8, 2)]
    s = summarize(outs, deck_size=12)
    assert s.trials == 4
    assert s.deck_size == 12
    assert s.avg_cards_drawn == pytest.approx(1.0)
    assert s.avg_coins == pytest.approx(5.0)
    assert s.avg_buys == pytest.approx(1.5)
    assert s.deck_exhausted_pct == pytest.approx(25.0)


def test_zero_trials_gives_zeros_and_no_data():
    stats = aggregate([], deck_size=10)
    s = stats.summary
    assert (s.trials, s.avg_cards_drawn, s.avg_coins, s.avg_buys, s.deck_exhausted_pct) == (0, 0, 0, 0, 0)
    assert set(stats.histograms) == set(METRICS)
    assert all(h.is_empty for h in stats.histograms.values())
    assert stats.end_reasons == []


def test_histograms_over_a_real_batch():
    deck = [CARDS["copper"]] * 7 + [CARDS["estate"]] * 3 + [CARDS["lab"]] * 3 + [CARDS["smithy"]] * 2
    outs = run(deck, 2000, make_random_source("hist"))
    stats = aggregate(outs, len(deck))
    for m in METRICS:
        h = stats.histograms[m]
        assert sum(b.count for b in h.buckets) == 2000
        assert sum(b.pct_exact for b in h.buckets) == pytest.approx(100)
        assert h.buckets[0].pct_at_least == pytest.approx(100)
        assert h.buckets[-1].pct_at_most == pytest.approx(100)
        for b in h.buckets:
            # >= v and <= v overlap exactly on the = v bucket
            assert b.pct_at_least + b.pct_at_most - b.pct_exact == pytest.approx(100)
    assert sum(n for _, n in stats.end_reasons) == 2000


def test_statistics_ignore_outcome_order():
    deck = [CARDS["copper"]] * 6 + [CARDS["village"]] * 2 + [CARDS["smithy"]] * 2
    outs = run(deck, 300, make_random_source("order"))
    a = aggregate(outs, len(deck))
    b = aggregate(list(reversed(outs)), len(deck))
    assert a.histograms == b.histograms
    assert a.summary.avg_coins == pytest.approx(b.summary.avg_coins)
    assert a.summary.avg_cards_drawn == pytest.approx(b.summary.avg_cards_drawn)
    assert dict(a.end_reasons) == dict(b.end_reasons)
