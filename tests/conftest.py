"""Pytest configuration and fixtures for withdrawal fee estimator tests."""

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from withdrawal_fees.core import config as settings_module
from withdrawal_fees.core.models import TokenConfig, TokenPrice


@pytest.fixture
def btc_config() -> TokenConfig:
    """Bitcoin withdrawal config."""
    return TokenConfig(name="Bitcoin", symbol="BTC", withdrawal_fee=0.0005)


@pytest.fixture
def btc_price() -> TokenPrice:
    """Bitcoin price quote."""
    return TokenPrice(symbol="BTC", price_inr=5_000_000, price_usd=60_000)


@pytest.fixture
def sample_configs() -> dict[str, TokenConfig]:
    """Configs for three tokens with different INR fees."""
    return {
        "BTC": TokenConfig(name="Bitcoin", symbol="BTC", withdrawal_fee=0.0005),
        "ETH": TokenConfig(name="Ethereum", symbol="ETH", withdrawal_fee=0.005),
        "USDT": TokenConfig(name="Tether", symbol="USDT", withdrawal_fee=1.0),
    }


@pytest.fixture
def sample_prices() -> list[TokenPrice]:
    """Prices matching sample_configs."""
    return [
        TokenPrice(symbol="BTC", price_inr=5_000_000, price_usd=60_000),   # fee ₹2500
        TokenPrice(symbol="ETH", price_inr=250_000, price_usd=3_000),      # fee ₹1250
        TokenPrice(symbol="USDT", price_inr=83.5, price_usd=1.0),          # fee ₹83.50
    ]


@pytest.fixture
def raw_configs() -> dict[str, dict[str, Any]]:
    """Config records as they arrive from a feed (camelCase keys)."""
    return {
        "BTC": {"name": "Bitcoin", "symbol": "BTC", "withdrawalFee": 0.0005},
        "ETH": {"name": "Ethereum", "symbol": "ETH", "withdrawalFee": 0.005},
    }


@pytest.fixture
def raw_prices() -> list[dict[str, Any]]:
    """Price records as they arrive from a feed (camelCase keys)."""
    return [
        {"symbol": "BTC", "priceINR": 5000000, "priceUSD": 60000},
        {"symbol": "ETH", "priceINR": 250000, "priceUSD": 3000},
    ]


@pytest.fixture
def configs_file(tmp_path: Path, raw_configs: dict[str, dict[str, Any]]) -> Path:
    """Configs written as YAML."""
    path = tmp_path / "configs.yaml"
    path.write_text(yaml.safe_dump(raw_configs, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def prices_file(tmp_path: Path, raw_prices: list[dict[str, Any]]) -> Path:
    """Prices written as JSON."""
    path = tmp_path / "prices.json"
    path.write_text(json.dumps(raw_prices), encoding="utf-8")
    return path


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop WITHDRAWAL_FEES_* variables and the cached settings."""
    for name in ("LOG_LEVEL", "OUTPUT", "TABLE_WIDTH", "STRICT"):
        monkeypatch.delenv(f"{settings_module.ENV_PREFIX}{name}", raising=False)
    monkeypatch.setattr(settings_module, "_settings", None)
    yield
