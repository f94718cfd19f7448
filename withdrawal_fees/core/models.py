"""Pydantic data models for the withdrawal fee estimator.

All data structures are immutable (frozen) after creation. Field names are
snake_case; every model also accepts and serialises to the camelCase keys
used by the upstream config and price feeds (``withdrawalFee``,
``priceINR``, ...).
"""

from typing import Any

from pydantic import BaseModel, Field

from .types import INRAmount, SkipReason, TokenAmount, TokenKey, USDAmount


class TokenConfig(BaseModel):
    """Withdrawal configuration for a single token."""

    name: str
    symbol: str
    withdrawal_fee: TokenAmount = Field(alias="withdrawalFee")  # native units

    model_config = {"frozen": True, "populate_by_name": True}


class TokenPrice(BaseModel):
    """Current unit price of a token in both fiat currencies."""

    symbol: str
    price_inr: INRAmount = Field(alias="priceINR")
    price_usd: USDAmount = Field(alias="priceUSD")

    model_config = {"frozen": True, "populate_by_name": True}


class ProcessedToken(BaseModel):
    """Fee estimate for one configured token, joined with its price."""

    id: TokenKey  # mapping key of the config, may differ from symbol
    name: str
    symbol: str
    price_inr: INRAmount = Field(alias="priceINR")
    price_usd: USDAmount = Field(alias="priceUSD")
    withdrawal_fee_native: TokenAmount = Field(alias="withdrawalFeeNative")
    withdrawal_fee_inr: INRAmount = Field(alias="withdrawalFeeINR")
    withdrawal_fee_usd: USDAmount = Field(alias="withdrawalFeeUSD")

    model_config = {"frozen": True, "populate_by_name": True}

    def to_dict(self) -> dict[str, Any]:
        """Serialise using the camelCase wire keys."""
        return self.model_dump(by_alias=True)


class ValidationResult(BaseModel):
    """Partition of a config mapping into valid configs and invalid keys."""

    valid: list[TokenConfig] = Field(default_factory=list)
    invalid: list[TokenKey] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def has_invalid(self) -> bool:
        """Check if any config failed validation."""
        return bool(self.invalid)


class FeeConversion(BaseModel):
    """Outcome of converting one native fee into INR and USD.

    Either both fees are set, or ``skip_reason`` says why the entry
    produced no estimate.
    """

    fee_inr: INRAmount | None = None
    fee_usd: USDAmount | None = None
    skip_reason: SkipReason | None = None
    detail: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def success(cls, fee_inr: INRAmount, fee_usd: USDAmount) -> "FeeConversion":
        return cls(fee_inr=fee_inr, fee_usd=fee_usd)

    @classmethod
    def skipped(cls, reason: SkipReason, detail: str | None = None) -> "FeeConversion":
        return cls(skip_reason=reason, detail=detail or reason.description)

    @property
    def ok(self) -> bool:
        """Check if the conversion produced fees."""
        return self.skip_reason is None
