"""
Instrument catalog for the Trade Journal
Resolves a traded symbol to its asset class and contract size.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .. import config
from .models import AssetClass, Default, Found, Instrument

logger = logging.getLogger(__name__)

ASSET_CLASS_KEYS = {
    "indices": AssetClass.INDICES,
    "metals": AssetClass.METALS,
    "crypto": AssetClass.CRYPTO,
    "forex": AssetClass.FOREX,
    "synthetic": AssetClass.SYNTHETIC,
}

InstrumentLookup = Union[Found[Instrument], Default[Instrument]]


@dataclass(frozen=True)
class InstrumentCatalog:
    """Immutable symbol table, built once and passed to the engine."""

    classes: Tuple[Tuple[AssetClass, Tuple[str, ...], float], ...]
    overrides: Tuple[Tuple[str, float], ...] = config.METAL_CONTRACT_OVERRIDES
    default_contract_size: float = config.DEFAULT_CONTRACT_SIZE

    def asset_class_of(self, symbol: str) -> Optional[AssetClass]:
        for asset_class, pairs, _ in self.classes:
            if symbol in pairs:
                return asset_class
        return None

    def symbols_for(self, asset_class: AssetClass) -> List[str]:
        for cls, pairs, _ in self.classes:
            if cls is asset_class:
                return list(pairs)
        return []

    @property
    def asset_classes(self) -> List[AssetClass]:
        return [cls for cls, _, _ in self.classes]


def build_catalog(assets: Optional[Dict] = None, overrides: Iterable[Tuple[str, float]] = config.METAL_CONTRACT_OVERRIDES) -> InstrumentCatalog:
    assets = config.ASSETS if assets is None else assets
    classes = []
    for key, entry in assets.items():
        asset_class = ASSET_CLASS_KEYS.get(key.lower())
        if asset_class is None:
            logger.warning("Unknown asset class %r in instrument table, skipping", key)
            continue
        classes.append((asset_class, tuple(entry.get("pairs", [])), float(entry.get("contract", config.DEFAULT_CONTRACT_SIZE))))
    return InstrumentCatalog(classes=tuple(classes), overrides=tuple(overrides))


DEFAULT_CATALOG = build_catalog()


def resolve_instrument(symbol: str, catalog: InstrumentCatalog = DEFAULT_CATALOG) -> InstrumentLookup:
    symbol = (symbol or "").strip().upper()
    asset_class = catalog.asset_class_of(symbol)

    # Metal tickers win over the class tables.
    for marker, contract_size in catalog.overrides:
        if marker in symbol:
            return Found(Instrument(symbol, asset_class or AssetClass.METALS, float(contract_size)))

    for cls, pairs, contract_size in catalog.classes:
        if symbol in pairs:
            return Found(Instrument(symbol, cls, contract_size))

    logger.debug("No instrument entry for %r, using contract size %s", symbol, catalog.default_contract_size)
    return Default(Instrument(symbol, None, float(catalog.default_contract_size)))


def lookup(symbol: str, catalog: InstrumentCatalog = DEFAULT_CATALOG) -> Instrument:
    return resolve_instrument(symbol, catalog).value


def is_jpy_quoted(instrument: Instrument) -> bool:
    return instrument.asset_class is AssetClass.FOREX and config.JPY_MARKER in instrument.symbol
