"""
Position sizing for the Trade Journal
Turns a balance, a risk budget and trade levels into a recommended lot size.
The balance may be in any currency; results come back in that same currency.
"""

from typing import Any, Optional

from .. import config
from .instruments import DEFAULT_CATALOG, InstrumentCatalog, is_jpy_quoted, lookup
from .models import Direction, RiskMode, SizingResult
from .parsing import parse_number, parse_price, parse_risk_mode, round_money


def risk_amount(balance: float, risk_mode: RiskMode, risk_value: float) -> float:
    if risk_mode is RiskMode.PERCENT:
        return balance * (risk_value / 100)
    return risk_value


def size_position(
    balance: Any,
    risk_mode: Any,
    risk_value: Any,
    symbol: str,
    entry: Any,
    stop_loss: Any,
    take_profit: Any = None,
    direction: Optional[Direction] = None,
    catalog: InstrumentCatalog = DEFAULT_CATALOG,
) -> Optional[SizingResult]:
    """Recommend a lot size, or return None when the inputs are incomplete.

    ``direction`` is accepted so callers can pass a full trade ticket, but it
    does not affect the size: risk depends only on the distance to the stop.
    """
    balance = parse_number(balance)
    entry = parse_price(entry)
    stop_loss = parse_price(stop_loss)
    take_profit = parse_price(take_profit)
    if not balance or entry is None or stop_loss is None:
        return None

    distance = abs(entry - stop_loss)
    if distance == 0:
        return None

    risk = risk_amount(balance, parse_risk_mode(risk_mode), parse_number(risk_value) or 0.0)
    instrument = lookup(symbol, catalog)
    if is_jpy_quoted(instrument):
        lot = risk / (distance * config.JPY_PIP_FACTOR * config.JPY_PIP_VALUE)
    else:
        lot = risk / (distance * instrument.contract_size)

    rr = None
    gain = None
    if take_profit is not None:
        reward_ratio = abs(take_profit - entry) / distance
        rr = round_money(reward_ratio)
        gain = round_money(risk * reward_ratio)

    return SizingResult(
        lot_size=round_money(lot),
        risk_amount=round_money(risk),
        risk_reward_ratio=rr,
        projected_gain=gain,
    )
