"""Withdrawal Fee Estimator.

Converts native-unit token withdrawal fees into INR and USD estimates from
per-token price quotes, validates token configuration records, and renders
the results as display strings.
"""

__version__ = "0.1.0"

from .calculator import (
    FeeConverter,
    TokenProcessor,
    calculate_withdrawal_fees_inr,
    calculate_withdrawal_fees_usd,
    process_token_data,
    process_token_data_async,
    validate_token_config,
    validate_token_configs,
)
from .output import format_currency_inr, format_currency_usd, format_token_amount

__all__ = [
    "__version__",
    "FeeConverter",
    "TokenProcessor",
    "calculate_withdrawal_fees_inr",
    "calculate_withdrawal_fees_usd",
    "process_token_data",
    "process_token_data_async",
    "validate_token_config",
    "validate_token_configs",
    "format_currency_inr",
    "format_currency_usd",
    "format_token_amount",
]
