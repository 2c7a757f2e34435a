"""
Chart rendering functions for the Trade Journal
Handles Plotly chart creation and rendering.
"""

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from .. import config

CHART_HEIGHTS = config.CHART_HEIGHTS
COLORS = config.COLORS


def build_equity_figure(curve_df: pd.DataFrame, currency_symbol: str = "$") -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=curve_df["step"],
        y=curve_df["balance"],
        mode="lines+markers",
        name="Balance",
        text=curve_df["label"],
        hovertemplate="%{text}<br>" + currency_symbol + "%{y:,.2f}<extra></extra>",
        line=dict(color=COLORS["info"], width=2),
        marker=dict(size=6, color=COLORS["info"]),
    ))
    fig.update_layout(
        height=CHART_HEIGHTS.get("equity", 350),
        margin=dict(l=10, r=10, t=10, b=10),
        showlegend=False,
        plot_bgcolor=COLORS["surface"],
    )
    fig.update_xaxes(
        tickmode="array",
        tickvals=list(curve_df["step"]),
        ticktext=list(curve_df["label"]),
    )
    balances = curve_df["balance"].astype(float)
    pad = max((balances.max() - balances.min()) * 0.05, 1.0)
    fig.update_yaxes(
        title_text=f"Balance ({currency_symbol})",
        tickformat=",.2f",
        range=[balances.min() - pad, balances.max() + pad],
    )
    return fig


def build_daily_pnl_figure(daily_df: pd.DataFrame) -> go.Figure:
    bar_colors = [COLORS["positive"] if pnl >= 0 else COLORS["negative"] for pnl in daily_df["pnl"]]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=pd.to_datetime(daily_df["date"]),
        y=daily_df["pnl"],
        marker_color=bar_colors,
        name="Daily PnL",
    ))
    fig.update_layout(
        height=CHART_HEIGHTS.get("daily", 260),
        margin=dict(l=10, r=10, t=10, b=10),
        showlegend=False,
        xaxis=dict(type="date"),
        plot_bgcolor=COLORS["surface"],
    )
    fig.update_yaxes(title_text="PnL", zeroline=True, zerolinecolor="#444")
    return fig


def render_equity_chart(curve_df: pd.DataFrame, currency_symbol: str = "$") -> None:
    if curve_df is None or curve_df.empty:
        st.info("Waiting for equity data...")
        return
    st.plotly_chart(build_equity_figure(curve_df, currency_symbol), use_container_width=True, key="equity_curve")


def render_daily_pnl_chart(daily_df: pd.DataFrame) -> None:
    if daily_df is None or daily_df.empty:
        st.info("No closed trades yet.")
        return
    st.plotly_chart(build_daily_pnl_figure(daily_df), use_container_width=True, key="daily_pnl")
