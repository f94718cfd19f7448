"""Tests for output formatters."""

import csv
import io
import json
import math

import pytest

from withdrawal_fees.calculator.processor import process_token_data
from withdrawal_fees.core.exceptions import InvalidArgumentError
from withdrawal_fees.output.formatters import (
    CSVFormatter,
    JSONFormatter,
    TableFormatter,
    format_currency_inr,
    format_currency_usd,
    format_token_amount,
)


class TestFormatCurrencyINR:
    """Tests for format_currency_inr."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (2500, "₹2,500.00"),
            (0, "₹0.00"),
            (83.5, "₹83.50"),
            (999, "₹999.00"),
            (100000, "₹1,00,000.00"),
            (1234567.891, "₹12,34,567.89"),
            (123456789, "₹12,34,56,789.00"),
            (2.675, "₹2.68"),
            (-1234.5, "-₹1,234.50"),
        ],
    )
    def test_indian_grouping(self, amount, expected):
        """Test lakh/crore grouping and two decimals."""
        assert format_currency_inr(amount) == expected

    def test_tiny_negative_rounds_to_unsigned_zero(self):
        """Test that -0.001 shows no minus sign."""
        assert format_currency_inr(-0.001) == "₹0.00"

    def test_amount_wider_than_default_precision(self):
        """Test that very large amounts keep grouping and both decimals."""
        assert format_currency_inr(1e38) == "₹10," + "00," * 17 + "000.00"


class TestFormatCurrencyUSD:
    """Tests for format_currency_usd."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (30, "$30.00"),
            (0, "$0.00"),
            (1.5, "$1.50"),
            (1234.5678, "$1,234.5678"),
            (1234567.1, "$1,234,567.10"),
            (0.000123456789, "$0.00012346"),
            (0.00000001, "$0.00000001"),
            (-1.5, "-$1.50"),
        ],
    )
    def test_western_grouping_and_trimmed_decimals(self, amount, expected):
        """Test 2-8 decimals with trailing zeros trimmed."""
        assert format_currency_usd(amount) == expected

    def test_tiny_negative_rounds_to_unsigned_zero(self):
        """Test that a negative below half a hundred-millionth shows no minus sign."""
        assert format_currency_usd(-1e-10) == "$0.00"

    def test_amount_wider_than_default_precision(self):
        """Test that very large amounts keep grouping and two decimals."""
        assert format_currency_usd(1e30) == "$1" + ",000" * 10 + ".00"


class TestFormatTokenAmount:
    """Tests for format_token_amount."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (1_500_000, "1.50M"),
            (1_000_000, "1.00M"),
            (2500, "2.50K"),
            (1000, "1.00K"),
            (0.5, "0.50000000"),
            (0, "0.00000000"),
            (0.0005, "0.00050000"),
            (42, "42.00"),
            (1, "1.00"),
            (999.999, "1000.00"),
        ],
    )
    def test_magnitude_buckets(self, amount, expected):
        """Test M / K suffixes and small-amount precision."""
        assert format_token_amount(amount) == expected

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (-2500, "-2.50K"),
            (-1_500_000, "-1.50M"),
            (-0.5, "-0.50000000"),
            (-42, "-42.00"),
        ],
    )
    def test_negative_mirrors_sign(self, amount, expected):
        """Test that negatives use the magnitude rule and keep the sign."""
        assert format_token_amount(amount) == expected

    @pytest.mark.parametrize("amount", [-1e-9, -0.000000004])
    def test_negative_rounding_to_zero_is_unsigned(self, amount):
        """Test that a negative that rounds to zero shows no minus sign."""
        assert format_token_amount(amount) == "0.00000000"

    def test_large_amount_keeps_decimals(self):
        """Test that amounts beyond 28 significant digits keep the M suffix format."""
        result = format_token_amount(1e44)

        assert result.endswith(".00M")
        assert result.startswith("1000000000000000")


class TestNonFiniteInputs:
    """Tests for rejected formatter inputs."""

    @pytest.mark.parametrize("formatter", [format_currency_inr, format_currency_usd, format_token_amount])
    @pytest.mark.parametrize("amount", [math.nan, math.inf, -math.inf, "12"])
    def test_raises(self, formatter, amount):
        """Test that NaN, infinities and strings raise."""
        with pytest.raises(InvalidArgumentError):
            formatter(amount)


class TestResultFormatters:
    """Tests for JSON, CSV and table formatters."""

    @pytest.fixture
    def tokens(self, sample_configs, sample_prices):
        return process_token_data(sample_configs, sample_prices)

    def test_json(self, tokens):
        """Test JSON output uses camelCase keys in sorted order."""
        data = json.loads(JSONFormatter().format(tokens))

        assert [item["id"] for item in data] == ["USDT", "ETH", "BTC"]
        assert data[2]["withdrawalFeeINR"] == 2500
        assert data[2]["withdrawalFeeUSD"] == 30

    def test_csv(self, tokens):
        """Test CSV output has a header and one row per token."""
        rows = list(csv.DictReader(io.StringIO(CSVFormatter().format(tokens))))

        assert len(rows) == 3
        assert rows[0]["id"] == "USDT"
        assert float(rows[2]["withdrawalFeeINR"]) == 2500

    def test_plain_table(self, tokens):
        """Test plain table rows carry formatted values."""
        text = TableFormatter(use_rich=False).format(tokens)
        lines = text.splitlines()

        assert lines[0].startswith("Token")
        assert "₹2,500.00" in lines[-1]
        assert "$30.00" in lines[-1]
        assert "0.00050000 BTC" in lines[-1]

    def test_plain_table_empty(self):
        """Test the empty-result message."""
        assert "No withdrawal fee estimates available" in TableFormatter(use_rich=False).format([])

    def test_rich_table(self, tokens):
        """Test rich output mentions every token."""
        text = TableFormatter(width=160).format(tokens)

        for token_id in ("USDT", "ETH", "BTC"):
            assert token_id in text

    def test_table_to_file_is_plain(self, tokens, tmp_path):
        """Test that file output has no ANSI escapes."""
        path = tmp_path / "fees.txt"

        TableFormatter().format_to_file(tokens, str(path))

        content = path.read_text(encoding="utf-8")
        assert "\x1b[" not in content
        assert "BTC" in content
