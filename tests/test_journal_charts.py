from datetime import datetime

from tradejournal.backend.models import Direction, Outcome, Trade
from tradejournal.backend.performance import compute_equity_curve, daily_pnl, equity_curve_frame
from tradejournal.frontend import charts


def closed_trade(pnl, day):
    return Trade(
        id=f"t{day}", account_id="acc", open_date=datetime(2026, 3, day, 8, 0),
        instrument_symbol="US30", direction=Direction.BUY, entry_price=39000,
        lot_size=1, outcome=Outcome.MANUAL_WIN if pnl > 0 else Outcome.MANUAL_LOSS,
        pnl_usd=pnl, close_date=datetime(2026, 3, day, 15, 0),
    )


def test_equity_figure_labels_each_point():
    trades = [closed_trade(100, 2), closed_trade(-50, 3)]
    fig = charts.build_equity_figure(equity_curve_frame(compute_equity_curve(trades, 1000)), "$")
    assert list(fig.data[0].y) == [1000, 1100, 1050]
    assert list(fig.layout.xaxis.ticktext) == ["Start", "Mar 2", "Mar 3"]


def test_daily_figure_colors_by_sign():
    fig = charts.build_daily_pnl_figure(daily_pnl([closed_trade(100, 2), closed_trade(-50, 3)]))
    colors = list(fig.data[0].marker.color)
    assert colors[0] != colors[1]
