"""Core module - data models, types, and exceptions."""

from .models import (
    TokenConfig,
    TokenPrice,
    ProcessedToken,
    ValidationResult,
    FeeConversion,
)
from .types import (
    Currency,
    SkipReason,
)
from .exceptions import (
    WithdrawalFeeError,
    InvalidArgumentError,
    ConfigurationError,
    DataFileError,
)

__all__ = [
    # Models
    "TokenConfig",
    "TokenPrice",
    "ProcessedToken",
    "ValidationResult",
    "FeeConversion",
    # Types
    "Currency",
    "SkipReason",
    # Exceptions
    "WithdrawalFeeError",
    "InvalidArgumentError",
    "ConfigurationError",
    "DataFileError",
]
