import pytest

from tradejournal.backend.models import Direction, RiskMode
from tradejournal.backend.sizing import risk_amount, size_position


def test_percent_risk_on_forex_pair():
    result = size_position(10000, RiskMode.PERCENT, 1, "EURUSD", "1.1000", "1.0950")
    assert result.risk_amount == 100.00
    assert result.lot_size == 0.2
    assert result.risk_reward_ratio is None
    assert result.projected_gain is None


def test_sub_lot_result_rounds_on_exact_binary_value():
    # 110 - 109.8 is slightly above 0.2 in floating point, so the lot is just under 0.005.
    result = size_position(10000, "percent", 1, "EURUSD", 110, 109.8)
    assert result.risk_amount == 100.00
    assert result.lot_size == 0.0


def test_exact_half_cent_rounds_up():
    result = size_position(10000, RiskMode.ABSOLUTE, 250, "EURUSD", 2.0, 1.5)
    assert result.risk_amount == 250.00
    assert result.lot_size == 0.01


def test_take_profit_adds_reward_ratio_and_gain():
    result = size_position(10000, RiskMode.PERCENT, 2, "US30", 39000, 38900, 39250, direction=Direction.BUY)
    assert result.risk_amount == 200.00
    assert result.lot_size == 2.0
    assert result.risk_reward_ratio == 2.5
    assert result.projected_gain == 500.00


def test_jpy_pair_uses_pip_value_approximation():
    result = size_position(10000, RiskMode.ABSOLUTE, 340, "USDJPY", 151.0, 150.5)
    assert result.lot_size == pytest.approx(1.0)


def test_gold_uses_metal_contract():
    result = size_position(5000, RiskMode.ABSOLUTE, 100, "XAUUSD", 2350, 2340)
    assert result.lot_size == 0.1


def test_unknown_symbol_sizes_with_contract_one():
    result = size_position(1000, RiskMode.ABSOLUTE, 50, "MYSTERY", 10, 9)
    assert result.lot_size == 50.0


def test_direction_does_not_change_size():
    buy = size_position(10000, RiskMode.PERCENT, 1, "GBPUSD", 1.27, 1.265, direction=Direction.BUY)
    sell = size_position(10000, RiskMode.PERCENT, 1, "GBPUSD", 1.27, 1.265, direction=Direction.SELL)
    assert buy == sell


@pytest.mark.parametrize(
    "entry, stop",
    [("", "1.09"), ("1.10", ""), (None, None), ("1.10", "1.10"), ("abc", "1.09")],
)
def test_incomplete_levels_withhold_result(entry, stop):
    assert size_position(10000, RiskMode.PERCENT, 1, "EURUSD", entry, stop) is None


def test_missing_balance_withholds_result():
    assert size_position("", RiskMode.PERCENT, 1, "EURUSD", 1.1, 1.09) is None


def test_risk_amount_modes():
    assert risk_amount(20000, RiskMode.PERCENT, 0.5) == 100
    assert risk_amount(20000, RiskMode.ABSOLUTE, 75) == 75


def test_sizing_is_repeatable():
    args = (25000, RiskMode.PERCENT, 1.5, "GBPJPY", 190.40, 189.90, 191.40)
    assert size_position(*args) == size_position(*args)
