"""
Main Streamlit application for the Trade Journal
"""

import logging
import os
import sys

import streamlit as st

try:
    from . import config
    from .backend.currency import convert_for_display, currency_symbol, from_base, to_base
    from .backend.data_loader import load_journal
    from .backend.instruments import DEFAULT_CATALOG
    from .backend.performance import aggregate, compute_drawdown, daily_pnl, equity_curve_frame
    from .backend.rates import fetch_exchange_rates
    from .backend.sizing import size_position
    from .frontend.components import (
        render_account_selector,
        render_calculator_inputs,
        render_currency_selector,
        render_global_styles,
        render_performance_bar,
        render_settings_panel,
        render_sizing_result,
        render_trades_dataframe,
    )
    from .frontend.charts import render_daily_pnl_chart, render_equity_chart
    from .frontend.tables import (
        render_daily_pnl_table,
        render_rules_table,
        render_trades_table,
        render_withdrawals_table,
    )
except ImportError:
    sys.path.append(os.path.dirname(os.path.dirname(__file__)))
    from tradejournal import config
    from tradejournal.backend.currency import convert_for_display, currency_symbol, from_base, to_base
    from tradejournal.backend.data_loader import load_journal
    from tradejournal.backend.instruments import DEFAULT_CATALOG
    from tradejournal.backend.performance import aggregate, compute_drawdown, daily_pnl, equity_curve_frame
    from tradejournal.backend.rates import fetch_exchange_rates
    from tradejournal.backend.sizing import size_position
    from tradejournal.frontend.components import (
        render_account_selector,
        render_calculator_inputs,
        render_currency_selector,
        render_global_styles,
        render_performance_bar,
        render_settings_panel,
        render_sizing_result,
        render_trades_dataframe,
    )
    from tradejournal.frontend.charts import render_daily_pnl_chart, render_equity_chart
    from tradejournal.frontend.tables import (
        render_daily_pnl_table,
        render_rules_table,
        render_trades_table,
        render_withdrawals_table,
    )

logger = logging.getLogger(__name__)


@st.cache_data(ttl=3600)
def _cached_rates(offline: bool):
    return fetch_exchange_rates(offline=offline)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    st.set_page_config(**config.PAGE_CONFIG)
    render_global_styles()

    col_head1, col_head2 = st.columns([6, 1])
    with col_head2:
        offline, refresh_rates = render_settings_panel()
        if refresh_rates:
            st.cache_data.clear()
            st.rerun()

    snapshot = _cached_rates(offline)
    rates = snapshot.rates
    journal = load_journal(config.JOURNAL_FILE, DEFAULT_CATALOG)

    with col_head1:
        account = render_account_selector(journal.accounts, st.session_state.get("account_id"))
        currency = render_currency_selector(rates, config.DISPLAY_CURRENCY)
        st.caption(f"Rates: {snapshot.source} ({snapshot.fetched_date.isoformat()})")

    if account is None:
        st.error(f"No accounts found in {config.JOURNAL_FILE}")
        return
    st.session_state["account_id"] = account.id
    symbol = currency_symbol(currency)

    trades = journal.trades_for(account.id)
    withdrawals = journal.withdrawals_for(account.id)
    logger.info("Loaded %d trades and %d withdrawals for %s", len(trades), len(withdrawals), account.id)
    summary = aggregate(trades, withdrawals, account.starting_balance_usd)

    tabs = st.tabs(["Performance", "Calculator", "Journal"])

    with tabs[0]:
        render_performance_bar(summary, currency, rates)
        curve_df = equity_curve_frame(summary.equity_curve)
        curve_df["balance"] = [convert_for_display(v, currency, rates) for v in curve_df["balance"]]
        st.markdown("##### Equity Curve")
        render_equity_chart(curve_df, symbol)
        drawdown_df = compute_drawdown(curve_df)
        if not drawdown_df.empty:
            st.caption(f"Max drawdown: {drawdown_df['drawdown'].min():.2f}%")
        st.markdown("##### Daily PnL")
        daily_df = daily_pnl(trades)
        render_daily_pnl_chart(daily_df)
        with st.expander("Daily breakdown", expanded=False):
            render_daily_pnl_table(daily_df)
        if account.rules:
            st.markdown("##### Account Rules")
            render_rules_table(account.rules)

    with tabs[1]:
        # The calculator works in the display currency; the balance is stored in USD.
        inputs = render_calculator_inputs(DEFAULT_CATALOG, from_base(account.balance_usd, currency, rates))
        result = size_position(catalog=DEFAULT_CATALOG, **inputs)
        render_sizing_result(result, currency)
        if result is not None and currency != config.BASE_CURRENCY:
            st.caption(f"Risk in USD: ${to_base(result.risk_amount, currency, rates):,.2f}")

    with tabs[2]:
        render_trades_table(render_trades_dataframe(trades, currency, rates))
        st.markdown("##### Withdrawals")
        render_withdrawals_table(withdrawals, currency, rates)


if __name__ == "__main__":
    main()
