"""
Performance statistics for the Trade Journal
Folds a trade list, withdrawals and a starting balance into summary figures
and an equity curve. Everything here is recomputed from scratch on each call.
"""

from typing import Dict, Iterable, List, Sequence

import pandas as pd

from .models import EquityPoint, PerformanceSummary, Trade, Withdrawal

START_LABEL = "Start"
NO_INSTRUMENT = "N/A"
MAX_PROFIT_FACTOR_LABEL = "MAX"


def _equity_label(trade: Trade, index: int) -> str:
    if trade.close_date:
        return f"{trade.close_date:%b} {trade.close_date.day}"
    return f"Trade {index + 1}"


def compute_equity_curve(trades: Sequence[Trade], starting_balance: float) -> List[EquityPoint]:
    points = [EquityPoint(START_LABEL, starting_balance)]
    running = starting_balance
    for idx, trade in enumerate(trades):
        running += trade.pnl_usd
        points.append(EquityPoint(_equity_label(trade, idx), running))
    return points


def compute_profit_factor(gross_profit: float, gross_loss: float) -> float:
    if gross_loss > 0:
        return gross_profit / gross_loss
    return float("inf") if gross_profit > 0 else 0.0


def compute_best_instrument(trades: Iterable[Trade]) -> str:
    per_symbol: Dict[str, float] = {}
    for trade in trades:
        per_symbol[trade.instrument_symbol] = per_symbol.get(trade.instrument_symbol, 0.0) + trade.pnl_usd
    best = NO_INSTRUMENT
    best_pnl = float("-inf")
    # Strict comparison keeps the first symbol on ties.
    for symbol, pnl in per_symbol.items():
        if pnl > best_pnl:
            best, best_pnl = symbol, pnl
    return best


def aggregate(trades: Sequence[Trade], withdrawals: Sequence[Withdrawal], starting_balance: float) -> PerformanceSummary:
    total = len(trades)
    pnls = [t.pnl_usd for t in trades]
    wins = sum(1 for pnl in pnls if pnl > 0)
    gross_profit = sum(pnl for pnl in pnls if pnl > 0)
    gross_loss = abs(sum(pnl for pnl in pnls if pnl < 0))
    net_pnl = gross_profit - gross_loss

    # Withdrawals are reported on their own and not taken off the current balance.
    current_balance = starting_balance + net_pnl
    growth_pct = net_pnl / starting_balance * 100 if starting_balance > 0 else 0.0

    return PerformanceSummary(
        total_trades=total,
        wins=wins,
        losses=total - wins,
        win_rate=wins / total * 100 if total else 0.0,
        gross_profit=gross_profit,
        gross_loss=gross_loss,
        net_pnl=net_pnl,
        profit_factor=compute_profit_factor(gross_profit, gross_loss),
        best_instrument=compute_best_instrument(trades),
        total_withdrawals=sum(w.amount_usd for w in withdrawals),
        starting_balance=starting_balance,
        current_balance=current_balance,
        growth_pct=growth_pct,
        equity_curve=compute_equity_curve(trades, starting_balance),
    )


def format_profit_factor(profit_factor: float) -> str:
    if profit_factor == float("inf"):
        return MAX_PROFIT_FACTOR_LABEL
    return f"{profit_factor:.2f}"


def equity_curve_frame(points: Sequence[EquityPoint]) -> pd.DataFrame:
    if not points:
        return pd.DataFrame(columns=["step", "label", "balance"])
    df = pd.DataFrame([{"label": p.label, "balance": p.balance} for p in points])
    df.insert(0, "step", range(len(df)))
    return df


def daily_pnl(trades: Iterable[Trade]) -> pd.DataFrame:
    """Summed PnL per close date; open trades and trades without a close date are left out."""
    rows = [
        {"date": t.close_date.date(), "pnl": t.pnl_usd}
        for t in trades
        if t.close_date is not None
    ]
    if not rows:
        return pd.DataFrame(columns=["date", "pnl", "trades"])
    df = pd.DataFrame(rows)
    daily = df.groupby("date").agg(pnl=("pnl", "sum"), trades=("pnl", "size")).reset_index()
    return daily.sort_values("date").reset_index(drop=True)


def compute_drawdown(curve_df: pd.DataFrame) -> pd.DataFrame:
    if curve_df.empty:
        return pd.DataFrame()
    df = curve_df.copy()
    df["peak"] = df["balance"].cummax()
    # No drawdown is defined until the curve has been above zero.
    positive = df["peak"] > 0
    df["drawdown"] = 0.0
    df.loc[positive, "drawdown"] = (df.loc[positive, "balance"] - df.loc[positive, "peak"]) / df.loc[positive, "peak"] * 100
    return df[["step", "label", "balance", "peak", "drawdown"]]
