"""Fee calculation module."""

from .fees import (
    FeeConverter,
    calculate_withdrawal_fees_inr,
    calculate_withdrawal_fees_usd,
)
from .processor import (
    TokenProcessor,
    process_token_data,
    process_token_data_async,
    process_token_data_with_skips,
)
from .validator import validate_token_config, validate_token_configs

__all__ = [
    "FeeConverter",
    "calculate_withdrawal_fees_inr",
    "calculate_withdrawal_fees_usd",
    "TokenProcessor",
    "process_token_data",
    "process_token_data_async",
    "process_token_data_with_skips",
    "validate_token_config",
    "validate_token_configs",
]
