from tradejournal.backend import instruments
from tradejournal.backend.models import AssetClass, Default, Found


def test_forex_pair_resolves_from_class_table():
    result = instruments.resolve_instrument("EURUSD")
    assert isinstance(result, Found)
    assert result.resolved
    assert result.value.asset_class is AssetClass.FOREX
    assert result.value.contract_size == 100000


def test_gold_uses_override_contract():
    result = instruments.resolve_instrument("XAUUSD")
    assert result.value.contract_size == 100
    assert result.value.asset_class is AssetClass.METALS


def test_silver_override_beats_metals_table():
    assert instruments.lookup("XAGUSD").contract_size == 5000


def test_xau_override_applies_to_symbols_outside_the_tables():
    result = instruments.resolve_instrument("XAUEUR")
    assert result.resolved
    assert result.value.contract_size == 100


def test_xau_override_beats_a_class_table_entry():
    catalog = instruments.build_catalog({"forex": {"pairs": ["XAUJPY"], "contract": 100000}})
    instrument = instruments.lookup("XAUJPY", catalog)
    assert instrument.contract_size == 100
    assert instrument.asset_class is AssetClass.FOREX


def test_unknown_symbol_defaults_to_contract_one():
    result = instruments.resolve_instrument("FOOBAR")
    assert isinstance(result, Default)
    assert not result.resolved
    assert result.value.contract_size == 1
    assert result.value.asset_class is None


def test_symbol_is_normalised():
    assert instruments.lookup(" us30 ").symbol == "US30"


def test_jpy_quoted_only_for_forex():
    assert instruments.is_jpy_quoted(instruments.lookup("USDJPY"))
    assert not instruments.is_jpy_quoted(instruments.lookup("JPN225"))
    assert not instruments.is_jpy_quoted(instruments.lookup("EURUSD"))


def test_injected_catalog_replaces_defaults():
    catalog = instruments.build_catalog({"synthetic": {"pairs": ["VOL75"], "contract": 1}})
    assert catalog.asset_classes == [AssetClass.SYNTHETIC]
    assert catalog.symbols_for(AssetClass.SYNTHETIC) == ["VOL75"]
    assert instruments.resolve_instrument("EURUSD", catalog).resolved is False
