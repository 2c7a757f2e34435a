"""
UI Components for the Trade Journal
Contains reusable Streamlit components and layout elements.
"""

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import pandas as pd
import streamlit as st

from .. import config
from ..backend.currency import convert_for_display, format_amount
from ..backend.models import Account, PerformanceSummary, RiskMode, SizingResult, Trade
from ..backend.performance import format_profit_factor

COLORS = config.COLORS
REFRESH_RATES_LABEL = "Refresh Rates"


def get_global_styles() -> str:
    return f"""
    <style>
    @import url('https://fonts.googleapis.com/css2?family=Space+Grotesk:wght@400;600&display=swap');
    html, body, [class*="css"] {{ font-family: 'Space Grotesk', sans-serif; }}
    .metrics-bar {{ display:flex;justify-content:space-between;gap:12px;margin-bottom:20px; }}
    .metrics-card {{ background:{COLORS['surface']};border:1px solid #ddd;border-radius:4px;padding:10px 15px;flex:1; }}
    .metrics-label {{ color:{COLORS['text_secondary']};font-size:0.85rem; }}
    .metrics-value {{ font-size:1.1rem;font-weight:600; }}
    </style>
    """


def _metric_card(label: str, value: str, color: str) -> str:
    return (
        f'<div class="metrics-card"><div class="metrics-label">{label}</div>'
        f'<div class="metrics-value" style="color:{color};">{value}</div></div>'
    )


def _signed_color(value: float) -> str:
    return COLORS["positive"] if value >= 0 else COLORS["negative"]


def build_performance_bar_html(summary: PerformanceSummary, currency: str, rates: Mapping[str, float]) -> str:
    def money(value: float) -> str:
        return format_amount(convert_for_display(value, currency, rates), currency)

    growth = f"{'+' if summary.growth_pct > 0 else ''}{summary.growth_pct:.2f}%"
    cards = [
        _metric_card("Starting", money(summary.starting_balance), COLORS["text"]),
        _metric_card("Current", money(summary.current_balance), COLORS["text"]),
        _metric_card("Growth", growth, _signed_color(summary.growth_pct)),
        _metric_card("Net PnL", money(summary.net_pnl), _signed_color(summary.net_pnl)),
        _metric_card("Win Rate", f"{summary.win_rate:.1f}%", COLORS["text"]),
        _metric_card("Profit Factor", format_profit_factor(summary.profit_factor), COLORS["text"]),
        _metric_card("Top Pair", summary.best_instrument, COLORS["positive"]),
        _metric_card("Withdrawn", money(summary.total_withdrawals), COLORS["warning"]),
    ]
    return f'<div class="metrics-bar">{"".join(cards)}</div>'


def build_sizing_result_html(result: Optional[SizingResult], currency: str) -> str:
    if result is None:
        return '<div class="metrics-card"><div class="metrics-label">Awaiting Details</div><div class="metrics-value">--</div></div>'
    cards = [
        _metric_card("Recommended Lots", f"{result.lot_size:.2f}", COLORS["text"]),
        _metric_card("Risk", format_amount(result.risk_amount, currency), COLORS["negative"]),
    ]
    if result.projected_gain is not None:
        cards.append(_metric_card("Gain", "+" + format_amount(result.projected_gain, currency), COLORS["positive"]))
    if result.risk_reward_ratio is not None:
        cards.append(_metric_card("R:R", f"1 : {result.risk_reward_ratio:.2f}", COLORS["text"]))
    return f'<div class="metrics-bar">{"".join(cards)}</div>'


def render_global_styles() -> None:
    st.markdown(get_global_styles(), unsafe_allow_html=True)


def render_performance_bar(summary: PerformanceSummary, currency: str, rates: Mapping[str, float]) -> None:
    st.markdown(build_performance_bar_html(summary, currency, rates), unsafe_allow_html=True)


def render_sizing_result(result: Optional[SizingResult], currency: str) -> None:
    st.markdown(build_sizing_result_html(result, currency), unsafe_allow_html=True)


def render_trades_dataframe(trades: Sequence[Trade], currency: str, rates: Mapping[str, float]) -> pd.DataFrame:
    rows = []
    for t in trades:
        rows.append({
            "Opened": t.open_date.strftime("%Y-%m-%d") if t.open_date else "",
            "Closed": t.close_date.strftime("%Y-%m-%d") if t.close_date else "-",
            "Strategy": t.strategy,
            "Pair": t.instrument_symbol,
            "Type": t.direction.value,
            "Lot": t.lot_size,
            "Entry": t.entry_price,
            "Exit": t.exit_price if t.exit_price is not None else "-",
            "Outcome": t.outcome.label,
            "PnL": round(convert_for_display(t.pnl_usd, currency, rates), 2),
        })
    return pd.DataFrame(rows)


def render_account_selector(accounts: List[Account], current_id: Optional[str]) -> Optional[Account]:
    if not accounts:
        return None
    ids = [a.id for a in accounts]
    default_index = ids.index(current_id) if current_id in ids else 0
    labels = {a.id: f"{a.name} ({a.type.value})" for a in accounts}
    selected = st.selectbox("Account", ids, index=default_index, format_func=labels.get)
    return accounts[ids.index(selected)]


def render_currency_selector(rates: Mapping[str, float], current: str) -> str:
    options = [code for code in config.CURRENCIES if code == config.BASE_CURRENCY or code in rates]
    default_index = options.index(current) if current in options else 0
    return st.selectbox("Display Currency", options, index=default_index)


def render_calculator_inputs(catalog, default_balance: float) -> Dict:
    asset_class = st.radio("Asset Class", catalog.asset_classes, format_func=lambda c: c.value, horizontal=True)
    symbol = st.selectbox("Instrument", catalog.symbols_for(asset_class))
    col_balance, col_risk, col_mode = st.columns([2, 1, 1])
    with col_balance:
        balance = st.number_input("Balance", min_value=0.0, value=float(default_balance), step=100.0)
    with col_mode:
        risk_mode = st.radio("Mode", [RiskMode.PERCENT, RiskMode.ABSOLUTE], format_func=lambda m: "%" if m is RiskMode.PERCENT else "Amount")
    with col_risk:
        risk_value = st.number_input("Risk", min_value=0.0, value=config.DEFAULT_RISK_PERCENT, step=0.25)
    col_entry, col_sl, col_tp = st.columns(3)
    with col_entry:
        entry = st.text_input("Entry", placeholder="0.00")
    with col_sl:
        stop_loss = st.text_input("Stop Loss", placeholder="0.00")
    with col_tp:
        take_profit = st.text_input("TP (Opt)", placeholder="Optional")
    return {
        "balance": balance,
        "risk_mode": risk_mode,
        "risk_value": risk_value,
        "symbol": symbol,
        "entry": entry,
        "stop_loss": stop_loss,
        "take_profit": take_profit,
    }


def render_settings_panel() -> Tuple[bool, bool]:
    with st.expander("Settings", expanded=False):
        offline = st.checkbox("Offline rates", value=config.RATES_OFFLINE)
        refresh_rates = st.button(REFRESH_RATES_LABEL, use_container_width=True)
    return offline, refresh_rates
