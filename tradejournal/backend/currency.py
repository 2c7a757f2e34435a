"""
Currency conversion for the Trade Journal
Every stored amount is USD; these helpers move amounts to and from the display currency.
Rates are quoted as ``amount_in_target = amount_in_usd * rate``.
"""

import logging
from typing import Any, Mapping

from .. import config
from .parsing import parse_number

logger = logging.getLogger(__name__)

BASE_CURRENCY = config.BASE_CURRENCY


def _rate_for(currency: str, rates: Mapping[str, float]):
    rate = parse_number((rates or {}).get(currency))
    if not rate:
        logger.warning("No rate found for %s, leaving amount unconverted", currency)
        return None
    return rate


def to_base(amount: Any, from_currency: str, rates: Mapping[str, float]) -> float:
    """Convert ``amount`` in ``from_currency`` to USD."""
    value = parse_number(amount)
    if not value:
        return 0
    if from_currency == BASE_CURRENCY:
        return value
    rate = _rate_for(from_currency, rates)
    if rate is None:
        return value
    return value / rate


def from_base(amount_usd: Any, to_currency: str, rates: Mapping[str, float]) -> float:
    """Convert a USD amount to ``to_currency``."""
    value = parse_number(amount_usd)
    if not value:
        return 0
    if to_currency == BASE_CURRENCY:
        return value
    rate = _rate_for(to_currency, rates)
    if rate is None:
        return value
    return value * rate


def convert_for_display(value: Any, currency: str, rates: Mapping[str, float]) -> float:
    return from_base(value, currency, rates)


def convert_for_storage(value: Any, currency: str, rates: Mapping[str, float]) -> float:
    return to_base(value, currency, rates)


def display_decimals(currency: str) -> int:
    return 0 if currency in config.ZERO_DECIMAL_CURRENCIES else 2


def currency_symbol(currency: str) -> str:
    return config.CURRENCIES.get(currency, {}).get("symbol", f"{currency} ")


def format_amount(amount: Any, currency: str = BASE_CURRENCY, symbol: str = None) -> str:
    if symbol is None:
        symbol = currency_symbol(currency)
    value = parse_number(amount) or 0.0
    decimals = display_decimals(currency)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.{decimals}f}"
