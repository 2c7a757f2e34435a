"""
Data loading functions for the Trade Journal
Reads a journal document (accounts, trades, withdrawals) into typed records.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from .. import config
from .instruments import DEFAULT_CATALOG, InstrumentCatalog
from .models import Account, AccountType, Journal, Trade, Withdrawal
from .parsing import (
    parse_datetime,
    parse_direction,
    parse_number,
    parse_outcome,
    parse_price,
    round_money,
)
from .pricing import record_trade

logger = logging.getLogger(__name__)

EXAMPLE_DATA_DIR = config.EXAMPLE_DATA_DIR
JOURNAL_FILE = config.JOURNAL_FILE


def load_json(path: Path) -> Optional[Dict]:
    if not path.exists():
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read %s: %s", path, exc)
        return None


def load_example_json(name: str):
    return load_json(EXAMPLE_DATA_DIR / name)


def parse_account_type(value) -> AccountType:
    text = str(value or "").replace(" ", "").lower()
    for account_type in AccountType:
        if account_type.value.lower() == text:
            return account_type
    return AccountType.PERSONAL


def parse_account(raw: Dict) -> Optional[Account]:
    balance = parse_number(raw.get("balance"))
    if raw.get("id") is None or balance is None:
        logger.warning("Skipping account record without id or balance: %r", raw.get("id"))
        return None
    account_type = parse_account_type(raw.get("type"))
    rules = [str(r) for r in raw.get("rules") or []] if account_type is AccountType.PROP_FIRM else []
    return Account(
        id=str(raw["id"]),
        name=str(raw.get("name") or raw["id"]),
        type=account_type,
        balance_usd=balance,
        currency=str(raw.get("currency") or config.BASE_CURRENCY),
        rules=rules,
        created_at=parse_datetime(raw.get("createdAt")),
        initial_balance_usd=parse_number(raw.get("initialBalance")),
    )


def parse_trade(raw: Dict, catalog: InstrumentCatalog = DEFAULT_CATALOG) -> Optional[Trade]:
    """Stored trades keep the outcome and PnL they were recorded with.

    Records without them (hand-written or imported) are priced on load.
    """
    symbol = raw.get("pair") or raw.get("symbol")
    direction = parse_direction(raw.get("type") or raw.get("direction"))
    entry = parse_price(raw.get("entry"))
    if not symbol or direction is None or entry is None:
        logger.warning("Skipping trade record %r: missing pair, direction or entry", raw.get("id"))
        return None

    trade = record_trade(
        trade_id=raw.get("id", ""),
        account_id=raw.get("accountId", ""),
        symbol=symbol,
        direction=direction,
        entry=entry,
        lot_size=raw.get("lot"),
        exit_price=raw.get("exit"),
        stop_loss=raw.get("sl"),
        take_profit=raw.get("tp"),
        open_date=raw.get("openDate"),
        opened_now=False,
        close_date=raw.get("closeDate"),
        strategy=raw.get("strategy") or config.DEFAULT_STRATEGY,
        catalog=catalog,
    )

    stored_outcome = parse_outcome(raw.get("outcome"))
    stored_pnl = parse_number(raw.get("pnl"))
    if stored_outcome is None or stored_pnl is None:
        return trade
    return Trade(
        id=trade.id,
        account_id=trade.account_id,
        open_date=trade.open_date,
        close_date=trade.close_date,
        instrument_symbol=trade.instrument_symbol,
        direction=trade.direction,
        entry_price=trade.entry_price,
        stop_loss=trade.stop_loss,
        take_profit=trade.take_profit,
        lot_size=trade.lot_size,
        exit_price=trade.exit_price,
        outcome=stored_outcome,
        pnl_usd=round_money(stored_pnl),
        strategy=trade.strategy,
    )


def parse_withdrawal(raw: Dict) -> Optional[Withdrawal]:
    amount = parse_number(raw.get("amount"))
    if amount is None:
        logger.warning("Skipping withdrawal record %r: missing amount", raw.get("id"))
        return None
    return Withdrawal(
        id=str(raw.get("id", "")),
        account_id=str(raw.get("accountId", "")),
        amount_usd=amount,
        date=parse_datetime(raw.get("date")),
        note=str(raw.get("note") or ""),
    )


def _parse_all(records, parser) -> List:
    if not isinstance(records, list):
        return []
    parsed = []
    for raw in records:
        if not isinstance(raw, dict):
            continue
        item = parser(raw)
        if item is not None:
            parsed.append(item)
    return parsed


def parse_journal(data: Dict, catalog: InstrumentCatalog = DEFAULT_CATALOG) -> Journal:
    if not isinstance(data, dict):
        return Journal()
    return Journal(
        accounts=_parse_all(data.get("accounts"), parse_account),
        trades=_parse_all(data.get("trades"), lambda raw: parse_trade(raw, catalog)),
        withdrawals=_parse_all(data.get("withdrawals"), parse_withdrawal),
    )


def load_journal(path: Optional[Path] = None, catalog: InstrumentCatalog = DEFAULT_CATALOG) -> Journal:
    path = Path(path) if path is not None else JOURNAL_FILE
    data = load_json(path)
    if data is None:
        logger.info("No journal found at %s", path)
        return Journal()
    return parse_journal(data, catalog)


def load_example_journal() -> Journal:
    return parse_journal(load_example_json("journal.json") or {})
