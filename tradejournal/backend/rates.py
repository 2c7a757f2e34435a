"""
Exchange rate snapshot for the Trade Journal
Fetches USD-based rates at most once per calendar day and caches them to disk.
On failure the last cached rates are used, then hardcoded fallbacks.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Dict, Optional

import requests

from .. import config
from .models import ExchangeRateSnapshot

logger = logging.getLogger(__name__)

BASE_CURRENCY = config.BASE_CURRENCY


def default_cache_path() -> Path:
    return config.CACHE_PATH / config.RATES_CACHE_FILE


def load_cached_rates(cache_path: Path) -> Optional[Dict]:
    if not cache_path.exists():
        return None
    try:
        data = json.loads(cache_path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable rate cache %s: %s", cache_path, exc)
        return None
    if not isinstance(data, dict) or not isinstance(data.get("rates"), dict):
        return None
    return data


def save_cached_rates(cache_path: Path, rates: Dict[str, float], fetched_date: date) -> None:
    payload = {"date": fetched_date.isoformat(), "base": BASE_CURRENCY, "rates": rates}
    try:
        cache_path.parent.mkdir(parents=True, exist_ok=True)
        cache_path.write_text(json.dumps(payload))
    except OSError as exc:
        logger.warning("Could not write rate cache %s: %s", cache_path, exc)


def request_rates(session=None, endpoint: str = None, timeout: float = None) -> Dict[str, float]:
    session = session or requests
    endpoint = endpoint or config.EXCHANGE_RATE_API["endpoint"]
    timeout = timeout or config.EXCHANGE_RATE_API["timeout"]
    r = session.get(f"{endpoint}{BASE_CURRENCY}", timeout=timeout)
    r.raise_for_status()
    data = r.json()
    rates = data.get("rates") if isinstance(data, dict) else None
    if not isinstance(rates, dict) or not rates:
        raise ValueError("Invalid API response format")
    return rates


def _snapshot(cached: Dict, source: str) -> ExchangeRateSnapshot:
    try:
        fetched = date.fromisoformat(cached.get("date", ""))
    except ValueError:
        fetched = date.min
    return ExchangeRateSnapshot(rates=dict(cached["rates"]), fetched_date=fetched, source=source)


def fetch_exchange_rates(
    cache_path: Optional[Path] = None,
    today: Optional[date] = None,
    session=None,
    offline: bool = None,
) -> ExchangeRateSnapshot:
    cache_path = cache_path or default_cache_path()
    today = today or date.today()
    offline = config.RATES_OFFLINE if offline is None else offline

    cached = load_cached_rates(cache_path)
    if cached and cached.get("date") == today.isoformat():
        logger.info("Using cached exchange rates for %s", today)
        return _snapshot(cached, "cache")

    if not offline:
        logger.info("Fetching fresh exchange rates for %s", today)
        try:
            rates = request_rates(session)
        except (requests.RequestException, ValueError) as exc:
            logger.error("Error fetching exchange rates: %s", exc)
        else:
            save_cached_rates(cache_path, rates, today)
            return ExchangeRateSnapshot(rates=rates, fetched_date=today, source="api")

    if cached:
        logger.warning("Using cached exchange rates from %s", cached.get("date"))
        return _snapshot(cached, "stale")

    logger.error("No cached rates available, using fallback")
    return ExchangeRateSnapshot(rates=dict(config.FALLBACK_RATES), fetched_date=today, source="fallback")
