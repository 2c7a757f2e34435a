"""
Configuration constants for the Trade Journal
"""

import os
from pathlib import Path

BASE_PATH = Path(__file__).parent.parent
EXAMPLE_DATA_DIR = Path(__file__).parent / "example_data"
CACHE_PATH = Path(os.getenv("JOURNAL_CACHE_DIR", str(Path.home() / ".cache" / "tradejournal")))
RATES_CACHE_FILE = "exchange_rates.json"
JOURNAL_FILE = Path(os.getenv("JOURNAL_FILE", str(EXAMPLE_DATA_DIR / "journal.json")))

ASSETS = {
    "indices": {
        "label": "Indices",
        "pairs": ["GER40", "JPN225", "NAS100", "SPX500", "UK100", "US30"],
        "contract": 1,
    },
    "metals": {
        "label": "Metals",
        "pairs": ["XAGUSD", "XAUUSD"],
        "contract": 100,
    },
    "crypto": {
        "label": "Crypto",
        "pairs": ["BTCUSD", "DOGEUSD", "ETHUSD", "LTCUSD", "SOLUSD", "XRPUSD"],
        "contract": 1,
    },
    "forex": {
        "label": "Forex",
        "pairs": [
            "AUDCAD", "AUDCHF", "AUDJPY", "AUDNZD", "AUDUSD", "CADCHF", "CADJPY",
            "CHFJPY", "EURAUD", "EURCAD", "EURCHF", "EURGBP", "EURJPY", "EURNZD",
            "EURUSD", "GBPAUD", "GBPCAD", "GBPCHF", "GBPJPY", "GBPNZD", "GBPUSD",
            "NZDCAD", "NZDCHF", "NZDJPY", "NZDUSD", "USDCAD", "USDCHF", "USDJPY",
            "USDMXN", "USDZAR",
        ],
        "contract": 100000,
    },
}

# Checked in order, before the class tables.
METAL_CONTRACT_OVERRIDES = (
    ("XAU", 100),
    ("XAG", 5000),
)
DEFAULT_CONTRACT_SIZE = 1

JPY_MARKER = "JPY"
JPY_PIP_FACTOR = 100
JPY_PIP_VALUE = 6.8

BREAKEVEN_TOLERANCE = 0.0002

BASE_CURRENCY = "USD"
CURRENCIES = {
    "USD": {"symbol": "$", "label": "USD"},
    "GBP": {"symbol": "£", "label": "GBP"},
    "NGN": {"symbol": "₦", "label": "NGN"},
}
ZERO_DECIMAL_CURRENCIES = ("NGN",)
DISPLAY_CURRENCY = os.getenv("JOURNAL_DISPLAY_CURRENCY", BASE_CURRENCY)

EXCHANGE_RATE_API = {
    "endpoint": "https://api.exchangerate-api.com/v4/latest/",
    "timeout": 8,
}
RATES_OFFLINE = os.getenv("JOURNAL_RATES_OFFLINE", "0") == "1"
FALLBACK_RATES = {
    "USD": 1,
    "NGN": 1650,
    "GBP": 0.79,
}

DEFAULT_BALANCE = 100000
DEFAULT_RISK_PERCENT = 1.0
DEFAULT_STRATEGY = "Standard"

PAGE_CONFIG = {
    "page_title": "Trade Journal",
    "page_icon": None,
    "layout": "wide",
    "initial_sidebar_state": "collapsed",
}

CHART_HEIGHTS = {
    "equity": 350,
    "daily": 260,
}

COLORS = {
    "positive": "#1f7a6d",
    "negative": "#b42318",
    "neutral": "#9a9a9a",
    "warning": "#b45309",
    "info": "#2563eb",
    "background": "#f7f7f5",
    "surface": "#ffffff",
    "text": "#1a1a1a",
    "text_secondary": "#6b6b6b",
}
