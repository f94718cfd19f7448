"""Custom exceptions for the withdrawal fee estimator."""

from typing import Any


class WithdrawalFeeError(Exception):
    """Base exception for all withdrawal fee estimator errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgumentError(WithdrawalFeeError):
    """Raised when a numeric input is outside the accepted range."""

    def __init__(self, field: str, value: Any, reason: str):
        message = f"Invalid argument {field}={value!r}: {reason}"
        super().__init__(message, {"field": field, "value": value, "reason": reason})
        self.field = field
        self.value = value
        self.reason = reason


class ConfigurationError(WithdrawalFeeError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_key: str, message: str):
        full_message = f"Configuration error [{config_key}]: {message}"
        super().__init__(full_message, {"config_key": config_key})
        self.config_key = config_key


class DataFileError(WithdrawalFeeError):
    """Raised when an input file cannot be read or has the wrong shape."""

    def __init__(self, path: str, message: str):
        full_message = f"Cannot load {path}: {message}"
        super().__init__(full_message, {"path": path})
        self.path = path
