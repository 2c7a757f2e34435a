from datetime import datetime

import pytest

from tradejournal.backend import performance
from tradejournal.backend.models import Direction, Outcome, Trade, Withdrawal


def make_trade(pnl, symbol="EURUSD", close_date=None, idx=0):
    return Trade(
        id=f"t{idx}",
        account_id="acc",
        open_date=datetime(2026, 3, 1, 9, 0),
        instrument_symbol=symbol,
        direction=Direction.BUY,
        entry_price=1.1,
        lot_size=1,
        outcome=Outcome.MANUAL_WIN if pnl > 0 else Outcome.MANUAL_LOSS,
        pnl_usd=pnl,
        close_date=close_date,
    )


def test_two_trade_summary():
    summary = performance.aggregate([make_trade(100), make_trade(-40)], [], 1000)
    assert summary.total_trades == 2
    assert summary.wins == 1
    assert summary.losses == 1
    assert summary.net_pnl == pytest.approx(60)
    assert summary.win_rate == 50
    assert summary.profit_factor == pytest.approx(2.5)
    assert summary.current_balance == pytest.approx(1060)
    assert summary.growth_pct == pytest.approx(6.0)


def test_empty_journal():
    summary = performance.aggregate([], [], 5000)
    assert summary.total_trades == 0
    assert summary.win_rate == 0
    assert summary.profit_factor == 0
    assert summary.best_instrument == "N/A"
    assert summary.current_balance == 5000
    assert [(p.label, p.balance) for p in summary.equity_curve] == [("Start", 5000)]


def test_profit_factor_without_losses_is_max():
    summary = performance.aggregate([make_trade(10), make_trade(20)], [], 1000)
    assert summary.profit_factor == float("inf")
    assert performance.format_profit_factor(summary.profit_factor) == "MAX"
    assert performance.format_profit_factor(2.5) == "2.50"


def test_breakeven_trades_count_as_losses():
    summary = performance.aggregate([make_trade(0.0), make_trade(50)], [], 1000)
    assert summary.wins == 1
    assert summary.losses == 1


def test_best_instrument_sums_per_symbol_and_keeps_first_on_tie():
    trades = [
        make_trade(50, "EURUSD"),
        make_trade(80, "US30"),
        make_trade(30, "EURUSD"),
        make_trade(-10, "XAUUSD"),
    ]
    assert performance.compute_best_instrument(trades) == "EURUSD"


def test_all_losing_symbols_still_pick_the_smallest_loss():
    trades = [make_trade(-50, "EURUSD"), make_trade(-5, "US30")]
    assert performance.compute_best_instrument(trades) == "US30"


def test_withdrawals_reported_but_not_subtracted():
    withdrawals = [Withdrawal("w1", "acc", 150.0), Withdrawal("w2", "acc", 50.0)]
    summary = performance.aggregate([make_trade(100)], withdrawals, 1000)
    assert summary.total_withdrawals == 200
    assert summary.current_balance == 1100


def test_zero_starting_balance_has_no_growth():
    summary = performance.aggregate([make_trade(100)], [], 0)
    assert summary.growth_pct == 0


def test_equity_curve_accumulates_in_insertion_order():
    trades = [
        make_trade(100, close_date=datetime(2026, 3, 2, 11, 0)),
        make_trade(-40),
    ]
    curve = performance.compute_equity_curve(trades, 1000)
    assert [(p.label, p.balance) for p in curve] == [
        ("Start", 1000),
        ("Mar 2", 1100),
        ("Trade 2", 1060),
    ]


def test_equity_curve_frame_and_drawdown():
    curve = performance.compute_equity_curve([make_trade(100), make_trade(-220)], 1000)
    df = performance.equity_curve_frame(curve)
    assert list(df.columns) == ["step", "label", "balance"]
    assert list(df["step"]) == [0, 1, 2]
    drawdown = performance.compute_drawdown(df)
    assert drawdown["drawdown"].iloc[-1] == pytest.approx(-20.0)


def test_drawdown_from_zero_start_is_flat():
    drawdown = performance.compute_drawdown(performance.equity_curve_frame(performance.compute_equity_curve([], 0)))
    assert list(drawdown["drawdown"]) == [0.0]


def test_drawdown_ignores_steps_before_curve_turns_positive():
    curve = performance.compute_equity_curve([make_trade(-50), make_trade(150), make_trade(-50)], 0)
    drawdown = performance.compute_drawdown(performance.equity_curve_frame(curve))
    assert not drawdown["drawdown"].isna().any()
    assert list(drawdown["drawdown"])[:3] == [0.0, 0.0, 0.0]
    assert drawdown["drawdown"].iloc[-1] == pytest.approx(-50.0)


def test_daily_pnl_groups_closed_trades_by_day():
    trades = [
        make_trade(100, close_date=datetime(2026, 3, 5, 6, 30)),
        make_trade(-30, close_date=datetime(2026, 3, 5, 16, 10)),
        make_trade(20, close_date=datetime(2026, 3, 2, 11, 0)),
        make_trade(0.0),
    ]
    daily = performance.daily_pnl(trades)
    assert [str(d) for d in daily["date"]] == ["2026-03-02", "2026-03-05"]
    assert list(daily["pnl"]) == [20, 70]
    assert list(daily["trades"]) == [1, 2]


def test_daily_pnl_empty():
    assert performance.daily_pnl([]).empty
