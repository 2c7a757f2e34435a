"""
Outcome classification and PnL for the Trade Journal
Both are computed once, when a trade is recorded, and stored with it.
"""

from datetime import datetime
from typing import Any, Mapping, Optional

from .. import config
from .currency import BASE_CURRENCY, to_base
from .instruments import DEFAULT_CATALOG, Instrument, InstrumentCatalog, is_jpy_quoted, lookup
from .models import Direction, Outcome, Trade, TradePricing
from .parsing import parse_datetime, parse_direction, parse_number, parse_price, round_money


def classify_outcome(
    direction: Direction,
    entry: float,
    exit_price: Optional[float],
    stop_loss: Optional[float] = None,
    take_profit: Optional[float] = None,
    tolerance: float = config.BREAKEVEN_TOLERANCE,
) -> Outcome:
    if exit_price is None:
        return Outcome.OPEN

    # Stop and target levels are checked before the breakeven band.
    if direction is Direction.BUY:
        if stop_loss is not None and exit_price <= stop_loss:
            return Outcome.HIT_SL
        if take_profit is not None and exit_price >= take_profit:
            return Outcome.HIT_TP
        if abs(exit_price - entry) < entry * tolerance:
            return Outcome.BREAKEVEN
        return Outcome.MANUAL_WIN if exit_price > entry else Outcome.MANUAL_LOSS

    if stop_loss is not None and exit_price >= stop_loss:
        return Outcome.HIT_SL
    if take_profit is not None and exit_price <= take_profit:
        return Outcome.HIT_TP
    if abs(exit_price - entry) < entry * tolerance:
        return Outcome.BREAKEVEN
    return Outcome.MANUAL_WIN if exit_price < entry else Outcome.MANUAL_LOSS


def compute_pnl(instrument: Instrument, direction: Direction, entry: float, exit_price: Optional[float], lot_size: float) -> float:
    if exit_price is None:
        return 0.0
    diff = exit_price - entry if direction is Direction.BUY else entry - exit_price
    if is_jpy_quoted(instrument):
        pnl = diff * config.JPY_PIP_FACTOR * config.JPY_PIP_VALUE * lot_size
    else:
        pnl = diff * lot_size * instrument.contract_size
    return round_money(pnl)


def classify_and_price(
    symbol: str,
    direction: Any,
    entry: Any,
    lot_size: Any,
    exit_price: Any = None,
    stop_loss: Any = None,
    take_profit: Any = None,
    catalog: InstrumentCatalog = DEFAULT_CATALOG,
) -> TradePricing:
    """Derive the outcome label and PnL of a trade.

    Raises ValueError when the entry price or direction is missing; absent
    stop, target or exit are valid and simply skip their checks.
    """
    entry = parse_price(entry)
    if entry is None:
        raise ValueError("entry price is required to price a trade")
    side = parse_direction(direction)
    if side is None:
        raise ValueError(f"unknown trade direction: {direction!r}")

    exit_price = parse_price(exit_price)
    outcome = classify_outcome(side, entry, exit_price, parse_price(stop_loss), parse_price(take_profit))
    pnl = compute_pnl(lookup(symbol, catalog), side, entry, exit_price, parse_number(lot_size) or 0.0)
    return TradePricing(outcome=outcome, pnl_usd=pnl)


def record_trade(
    trade_id: str,
    account_id: str,
    symbol: str,
    direction: Any,
    entry: Any,
    lot_size: Any,
    exit_price: Any = None,
    stop_loss: Any = None,
    take_profit: Any = None,
    open_date: Any = None,
    opened_now: bool = True,
    close_date: Any = None,
    strategy: str = config.DEFAULT_STRATEGY,
    currency: str = BASE_CURRENCY,
    rates: Optional[Mapping[str, float]] = None,
    catalog: InstrumentCatalog = DEFAULT_CATALOG,
) -> Trade:
    """Build the immutable journal record for a new trade.

    A PnL worked out in a non-USD ``currency`` is converted to USD with
    ``rates`` before it is stored. A missing ``open_date`` is filled with the
    current time only when ``opened_now`` is set, i.e. for a freshly entered trade.
    """
    pricing = classify_and_price(symbol, direction, entry, lot_size, exit_price, stop_loss, take_profit, catalog)
    pnl_usd = pricing.pnl_usd
    if rates and currency != BASE_CURRENCY:
        pnl_usd = round_money(to_base(pnl_usd, currency, rates))

    return Trade(
        id=str(trade_id),
        account_id=str(account_id),
        open_date=parse_datetime(open_date) or (datetime.now() if opened_now else None),
        close_date=parse_datetime(close_date),
        instrument_symbol=(symbol or "").strip().upper(),
        direction=parse_direction(direction),
        entry_price=parse_price(entry),
        lot_size=parse_number(lot_size) or 0.0,
        outcome=pricing.outcome,
        pnl_usd=pnl_usd,
        stop_loss=parse_price(stop_loss),
        take_profit=parse_price(take_profit),
        exit_price=parse_price(exit_price),
        strategy=strategy or config.DEFAULT_STRATEGY,
    )
