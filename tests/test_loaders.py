"""Tests for config and price file loaders."""

import json

import pytest

from withdrawal_fees.core.exceptions import DataFileError
from withdrawal_fees.storage.loaders import load_token_configs, load_token_prices


class TestLoadTokenConfigs:
    """Tests for load_token_configs."""

    def test_yaml(self, configs_file):
        """Test loading a YAML mapping in file order."""
        configs = load_token_configs(configs_file)

        assert list(configs) == ["BTC", "ETH"]
        assert configs["BTC"]["withdrawalFee"] == 0.0005

    def test_json_with_tokens_wrapper(self, tmp_path, raw_configs):
        """Test that a top-level tokens mapping is unwrapped."""
        path = tmp_path / "configs.json"
        path.write_text(json.dumps({"tokens": raw_configs}), encoding="utf-8")

        assert load_token_configs(path) == raw_configs

    def test_wrong_shape(self, tmp_path):
        """Test that a list is rejected."""
        path = tmp_path / "configs.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(DataFileError, match="mapping"):
            load_token_configs(path)

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises DataFileError."""
        with pytest.raises(DataFileError, match="not found"):
            load_token_configs(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Test that broken YAML raises DataFileError."""
        path = tmp_path / "configs.yml"
        path.write_text("BTC: [unclosed", encoding="utf-8")

        with pytest.raises(DataFileError, match="invalid YAML"):
            load_token_configs(path)


class TestLoadTokenPrices:
    """Tests for load_token_prices."""

    def test_json_list(self, prices_file, raw_prices):
        """Test loading a JSON list."""
        assert load_token_prices(prices_file) == raw_prices

    def test_prices_wrapper(self, tmp_path, raw_prices):
        """Test that a top-level prices list is unwrapped."""
        path = tmp_path / "prices.yaml"
        path.write_text(json.dumps({"prices": raw_prices}), encoding="utf-8")

        assert load_token_prices(path) == raw_prices

    def test_invalid_json(self, tmp_path):
        """Test that broken JSON raises DataFileError."""
        path = tmp_path / "prices.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DataFileError, match="invalid JSON"):
            load_token_prices(path)

    def test_wrong_shape(self, tmp_path):
        """Test that a bare mapping is rejected."""
        path = tmp_path / "prices.json"
        path.write_text(json.dumps({"BTC": 1}), encoding="utf-8")

        with pytest.raises(DataFileError, match="list"):
            load_token_prices(path)
