"""Output formatters for withdrawal fee estimates.

Provides value formatters:
- INR currency: Indian digit grouping, exactly 2 decimals (₹12,34,567.89)
- USD currency: Western grouping, 2 to 8 decimals ($1,234.5678)
- Token amounts: abbreviated with K / M suffixes

And result formatters for a list of ProcessedToken:
- JSON: Machine-readable, camelCase keys
- CSV: Spreadsheet-compatible
- Table: Human-readable CLI output
"""

import csv
import io
import json
import logging
import math
from abc import ABC, abstractmethod
from decimal import localcontext
from typing import Any

from babel.numbers import format_currency
from rich.console import Console
from rich.table import Table

from ..calculator.fees import is_number, quantize_half_up, rounding_context
from ..core.exceptions import InvalidArgumentError
from ..core.models import ProcessedToken
from ..core.types import Currency

logger = logging.getLogger(__name__)

# Babel currency patterns; "#,##,##0" groups thousands, then lakhs and crores
INR_PATTERN = "¤#,##,##0.00"
USD_PATTERN = "¤#,##0.00######"
USD_MAX_DECIMALS = 8


def _finite(amount: Any, field: str = "amount") -> float:
    if not is_number(amount) or not math.isfinite(amount):
        raise InvalidArgumentError(field, amount, "must be a finite number")
    return amount


def _fixed(value: float, decimals: int) -> str:
    """Fixed-point string with exactly ``decimals`` places."""
    return f"{quantize_half_up(value, decimals):f}"


def _locale_currency(value: float, currency: Currency, pattern: str, locale: str, decimals: int) -> str:
    """Round half-up, then let Babel apply the locale's grouping and symbol."""
    rounded = quantize_half_up(value, decimals)
    if rounded.is_zero():
        rounded = abs(rounded)
    # Babel quantizes again under the active context
    with localcontext(rounding_context(rounded, decimals)):
        return format_currency(
            rounded,
            currency.value,
            format=pattern,
            locale=locale,
            currency_digits=False,
        )


def format_currency_inr(amount: float) -> str:
    """
    Format an amount as Indian Rupees.

    Examples:
        2500 -> "₹2,500.00"
        1234567.891 -> "₹12,34,567.89"
        -1234.5 -> "-₹1,234.50"
    """
    value = _finite(amount)
    return _locale_currency(value, Currency.INR, INR_PATTERN, "en_IN", Currency.INR.fee_decimals)


def format_currency_usd(amount: float) -> str:
    """
    Format an amount as US Dollars with 2 to 8 decimal places.

    Trailing zeros beyond the second decimal are dropped.

    Examples:
        30 -> "$30.00"
        1234.56780000 -> "$1,234.5678"
        0.000123456789 -> "$0.00012346"
    """
    value = _finite(amount)
    return _locale_currency(value, Currency.USD, USD_PATTERN, "en_US", USD_MAX_DECIMALS)


def format_token_amount(amount: float) -> str:
    """
    Format a token quantity with a magnitude suffix.

    - >= 1,000,000: millions, 2 decimals, "M"
    - >= 1,000: thousands, 2 decimals, "K"
    - < 1: 8 decimals
    - otherwise: 2 decimals

    Negative amounts use the same rule on their magnitude and keep the
    sign, unless they round to zero.
    """
    value = _finite(amount)
    magnitude = abs(value)

    if magnitude >= 1_000_000:
        text, suffix = _fixed(magnitude / 1_000_000, 2), "M"
    elif magnitude >= 1_000:
        text, suffix = _fixed(magnitude / 1_000, 2), "K"
    elif magnitude < 1:
        text, suffix = _fixed(magnitude, 8), ""
    else:
        text, suffix = _fixed(magnitude, 2), ""

    sign = "-" if value < 0 and text.strip("0.") else ""
    return f"{sign}{text}{suffix}"


class OutputFormatter(ABC):
    """Abstract base class for result formatters."""

    @abstractmethod
    def format(self, tokens: list[ProcessedToken]) -> str:
        """Format the tokens as a string."""
        pass

    def format_to_file(self, tokens: list[ProcessedToken], filepath: str) -> None:
        """Write formatted tokens to a file."""
        with open(filepath, "w", encoding="utf-8", newline="") as f:
            f.write(self.format(tokens))


class JSONFormatter(OutputFormatter):
    """Formats results as JSON."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format(self, tokens: list[ProcessedToken]) -> str:
        """Format tokens as a JSON array."""
        return json.dumps([token.to_dict() for token in tokens], indent=self.indent)


class CSVFormatter(OutputFormatter):
    """Formats results as CSV, one row per token."""

    COLUMNS = [
        "id",
        "name",
        "symbol",
        "priceINR",
        "priceUSD",
        "withdrawalFeeNative",
        "withdrawalFeeINR",
        "withdrawalFeeUSD",
    ]

    def __init__(self, delimiter: str = ","):
        self.delimiter = delimiter

    def format(self, tokens: list[ProcessedToken]) -> str:
        """Format tokens as a CSV string."""
        output = io.StringIO()
        writer = csv.DictWriter(
            output, fieldnames=self.COLUMNS, delimiter=self.delimiter, lineterminator="\n"
        )
        writer.writeheader()
        for token in tokens:
            writer.writerow(token.to_dict())
        return output.getvalue()


class TableFormatter(OutputFormatter):
    """Formats results as human-readable tables for CLI output."""

    HEADERS = ["Token", "Name", "Price (INR)", "Price (USD)", "Fee", "Fee (INR)", "Fee (USD)"]

    def __init__(self, use_rich: bool = True, width: int = 100):
        """
        Initialize table formatter.

        Args:
            use_rich: Use rich for colored output; plain text otherwise
            width: Maximum table width
        """
        self.use_rich = use_rich
        self.width = width

    def _row(self, token: ProcessedToken) -> list[str]:
        return [
            token.id,
            token.name,
            format_currency_inr(token.price_inr),
            format_currency_usd(token.price_usd),
            f"{format_token_amount(token.withdrawal_fee_native)} {token.symbol}",
            format_currency_inr(token.withdrawal_fee_inr),
            format_currency_usd(token.withdrawal_fee_usd),
        ]

    def format(self, tokens: list[ProcessedToken]) -> str:
        """Format tokens as a readable table."""
        if self.use_rich:
            return self._format_rich(tokens)
        return self._format_plain(tokens)

    def _format_plain(self, tokens: list[ProcessedToken]) -> str:
        """Plain text formatting without ANSI codes."""
        rows = [self.HEADERS] + [self._row(token) for token in tokens]
        widths = [max(len(row[i]) for row in rows) for i in range(len(self.HEADERS))]

        lines = []
        for n, row in enumerate(rows):
            lines.append("  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip())
            if n == 0:
                lines.append("  ".join("-" * w for w in widths))

        if not tokens:
            lines.append("No withdrawal fee estimates available")

        return "\n".join(lines) + "\n"

    def _format_rich(self, tokens: list[ProcessedToken]) -> str:
        """Rich table formatting with colors."""
        output = io.StringIO()
        console = Console(file=output, force_terminal=True, width=self.width)

        table = Table(title="Withdrawal Fees (lowest INR fee first)")
        table.add_column("Token", style="cyan")
        table.add_column("Name")
        table.add_column("Price (INR)", justify="right")
        table.add_column("Price (USD)", justify="right")
        table.add_column("Fee", justify="right", style="dim")
        table.add_column("Fee (INR)", justify="right", style="green")
        table.add_column("Fee (USD)", justify="right", style="green")

        for token in tokens:
            table.add_row(*self._row(token))

        if tokens:
            console.print(table)
        else:
            console.print("[yellow]No withdrawal fee estimates available[/]")

        return output.getvalue()

    def format_to_file(self, tokens: list[ProcessedToken], filepath: str) -> None:
        """Write formatted output to file."""
        # For file output, use plain format (no ANSI codes)
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self._format_plain(tokens))
