"""Output formatting module."""

from .formatters import (
    OutputFormatter,
    JSONFormatter,
    CSVFormatter,
    TableFormatter,
    format_currency_inr,
    format_currency_usd,
    format_token_amount,
)

__all__ = [
    "OutputFormatter",
    "JSONFormatter",
    "CSVFormatter",
    "TableFormatter",
    "format_currency_inr",
    "format_currency_usd",
    "format_token_amount",
]
