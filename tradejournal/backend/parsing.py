"""
Input parsing for the Trade Journal
Raw form and JSON values are converted to typed values here, once.
"""

import math
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

from .models import Direction, Outcome, RiskMode

_CENT = Decimal("0.01")


def parse_number(value: Any) -> Optional[float]:
    """Return ``value`` as a finite float, or None when it is blank or malformed."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_price(value: Any) -> Optional[float]:
    """Prices of zero are treated as not entered."""
    number = parse_number(value)
    if not number:
        return None
    return number


def parse_direction(value: Any) -> Optional[Direction]:
    if isinstance(value, Direction):
        return value
    text = str(value or "").strip().upper()
    if text in ("BUY", "LONG"):
        return Direction.BUY
    if text in ("SELL", "SHORT"):
        return Direction.SELL
    return None


def parse_risk_mode(value: Any) -> RiskMode:
    if isinstance(value, RiskMode):
        return value
    text = str(value or "").strip().lower()
    if text in ("absolute", "usd", "amount", "cash"):
        return RiskMode.ABSOLUTE
    return RiskMode.PERCENT


def parse_outcome(value: Any) -> Optional[Outcome]:
    if isinstance(value, Outcome):
        return value
    text = str(value or "").strip().upper().replace(" ", "_")
    try:
        return Outcome(text)
    except ValueError:
        return None


def parse_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if not value:
        return None
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def round_money(value: float) -> float:
    """Round to 2 decimals, half-up on the exact binary value of ``value``."""
    return float(Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP))
