"""
Data models for the Trade Journal
Typed records for instruments, accounts, trades and the values derived from them.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class AssetClass(str, Enum):
    INDICES = "Indices"
    METALS = "Metals"
    CRYPTO = "Crypto"
    FOREX = "Forex"
    SYNTHETIC = "Synthetic"


class AccountType(str, Enum):
    PERSONAL = "Personal"
    PROP_FIRM = "PropFirm"
    SYNTHETIC = "Synthetic"


class Direction(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class RiskMode(str, Enum):
    PERCENT = "percent"
    ABSOLUTE = "absolute"


class Outcome(str, Enum):
    OPEN = "OPEN"
    HIT_SL = "HIT_SL"
    HIT_TP = "HIT_TP"
    BREAKEVEN = "BREAKEVEN"
    MANUAL_WIN = "MANUAL_WIN"
    MANUAL_LOSS = "MANUAL_LOSS"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.OPEN


@dataclass(frozen=True)
class Found(Generic[T]):
    """Lookup result for a key present in the table."""

    value: T

    @property
    def resolved(self) -> bool:
        return True


@dataclass(frozen=True)
class Default(Generic[T]):
    """Lookup result for a missing key; ``value`` is the fallback."""

    value: T

    @property
    def resolved(self) -> bool:
        return False


@dataclass(frozen=True)
class Instrument:
    symbol: str
    asset_class: Optional[AssetClass]
    contract_size: float


@dataclass
class Account:
    id: str
    name: str
    type: AccountType
    balance_usd: float
    currency: str = "USD"
    rules: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    initial_balance_usd: Optional[float] = None

    @property
    def starting_balance_usd(self) -> float:
        if self.initial_balance_usd:
            return self.initial_balance_usd
        return self.balance_usd


@dataclass(frozen=True)
class Trade:
    """A journal entry. Outcome and PnL are derived once, when the trade is recorded."""

    id: str
    account_id: str
    open_date: Optional[datetime]
    instrument_symbol: str
    direction: Direction
    entry_price: float
    lot_size: float
    outcome: Outcome
    pnl_usd: float
    close_date: Optional[datetime] = None
    stop_loss: Optional[float] = None
    take_profit: Optional[float] = None
    exit_price: Optional[float] = None
    strategy: str = "Standard"

    @property
    def is_open(self) -> bool:
        return self.outcome is Outcome.OPEN


@dataclass(frozen=True)
class Withdrawal:
    id: str
    account_id: str
    amount_usd: float
    date: Optional[datetime] = None
    note: str = ""


@dataclass(frozen=True)
class ExchangeRateSnapshot:
    rates: Dict[str, float]
    fetched_date: date
    base_currency: str = "USD"
    source: str = "api"


@dataclass(frozen=True)
class SizingResult:
    lot_size: float
    risk_amount: float
    risk_reward_ratio: Optional[float] = None
    projected_gain: Optional[float] = None


@dataclass(frozen=True)
class TradePricing:
    outcome: Outcome
    pnl_usd: float


@dataclass(frozen=True)
class EquityPoint:
    label: str
    balance: float


@dataclass
class PerformanceSummary:
    total_trades: int
    wins: int
    losses: int
    win_rate: float
    gross_profit: float
    gross_loss: float
    net_pnl: float
    profit_factor: float
    best_instrument: str
    total_withdrawals: float
    starting_balance: float
    current_balance: float
    growth_pct: float
    equity_curve: List[EquityPoint] = field(default_factory=list)


@dataclass
class Journal:
    accounts: List[Account] = field(default_factory=list)
    trades: List[Trade] = field(default_factory=list)
    withdrawals: List[Withdrawal] = field(default_factory=list)

    def account(self, account_id: str) -> Optional[Account]:
        for account in self.accounts:
            if account.id == account_id:
                return account
        return None

    def trades_for(self, account_id: str) -> List[Trade]:
        return [t for t in self.trades if t.account_id == account_id]

    def withdrawals_for(self, account_id: str) -> List[Withdrawal]:
        return [w for w in self.withdrawals if w.account_id == account_id]
