"""
Table rendering functions for the Trade Journal
Handles DataFrame display and formatting.
"""

from typing import List, Mapping, Sequence

import pandas as pd
import streamlit as st

from ..backend.currency import convert_for_display
from ..backend.models import Withdrawal


def render_trades_table(trades_df: pd.DataFrame) -> None:
    if trades_df.empty:
        st.info("No Trades Logged")
        return
    st.dataframe(trades_df, use_container_width=True, height=300)


def build_withdrawals_frame(withdrawals: Sequence[Withdrawal], currency: str, rates: Mapping[str, float]) -> pd.DataFrame:
    rows = [{
        "Date": w.date.strftime("%Y-%m-%d") if w.date else "",
        "Amount": round(convert_for_display(w.amount_usd, currency, rates), 2),
        "Note": w.note,
    } for w in withdrawals]
    return pd.DataFrame(rows)


def render_withdrawals_table(withdrawals: Sequence[Withdrawal], currency: str, rates: Mapping[str, float]) -> None:
    if not withdrawals:
        st.info("No withdrawals recorded")
        return
    st.dataframe(build_withdrawals_frame(withdrawals, currency, rates), use_container_width=True)


def render_rules_table(rules: List[str]) -> None:
    if not rules:
        return
    st.dataframe(pd.DataFrame({"Rule": rules}), use_container_width=True, hide_index=True)


def render_daily_pnl_table(daily_df: pd.DataFrame) -> None:
    if daily_df.empty:
        st.info("No closed trades yet.")
        return
    st.dataframe(daily_df, use_container_width=True, hide_index=True)
