"""Config validator - structural and value checks for token configs.

Validation never raises; callers decide whether invalid configs are fatal.
A zero withdrawal fee is accepted here even though the fee converter
rejects it at conversion time.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any

from ..core.models import TokenConfig, ValidationResult
from ..core.types import SkipReason, TokenKey
from .fees import is_number
from .processor import ConfigInput, LoggerLike

_FEE_FIELDS = ("withdrawal_fee", "withdrawalFee")


def _field(config: Any, *names: str) -> Any:
    """Read the first present field from a model, mapping, or plain object."""
    for name in names:
        if isinstance(config, Mapping):
            if name in config:
                return config[name]
        elif hasattr(config, name):
            return getattr(config, name)
    return None


def validate_token_config(config: ConfigInput) -> bool:
    """
    Check a single token config.

    Invalid when name or symbol is missing or empty, when the withdrawal
    fee is not a finite number, or when the fee is negative. Zero is valid.

    Args:
        config: TokenConfig, or a raw mapping with withdrawalFee or
                withdrawal_fee

    Returns:
        True if the config is usable
    """
    name = _field(config, "name")
    symbol = _field(config, "symbol")
    if not name or not isinstance(name, str):
        return False
    if not symbol or not isinstance(symbol, str):
        return False

    fee = _field(config, *_FEE_FIELDS)
    if not is_number(fee) or not math.isfinite(fee):
        return False

    if fee < 0:
        return False

    return True


def validate_token_configs(
    configs: Mapping[TokenKey, ConfigInput],
    logger: LoggerLike | None = None,
) -> ValidationResult:
    """
    Partition a config mapping into valid configs and invalid keys.

    Args:
        configs: Token key -> config, iterated in insertion order
        logger: Receives a warning per invalid config; defaults to this
                module's logger

    Returns:
        ValidationResult with valid configs in mapping order and the keys
        of invalid ones
    """
    logger = logger or logging.getLogger(__name__)
    valid: list[TokenConfig] = []
    invalid: list[TokenKey] = []

    for key, config in configs.items():
        if not validate_token_config(config):
            invalid.append(key)
            logger.warning(
                f"Invalid token configuration for {key}: {config!r}",
                extra={"token_key": key, "reason": SkipReason.INVALID_CONFIG.value},
            )
            continue

        if isinstance(config, TokenConfig):
            valid.append(config)
        else:
            valid.append(
                TokenConfig(
                    name=_field(config, "name"),
                    symbol=_field(config, "symbol"),
                    withdrawal_fee=_field(config, *_FEE_FIELDS),
                )
            )

    return ValidationResult(valid=valid, invalid=invalid)
