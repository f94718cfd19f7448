"""Type definitions and enums for the withdrawal fee estimator."""

from enum import Enum
from typing import Literal


class Currency(str, Enum):
    """Fiat currencies fees are quoted in."""

    INR = "INR"
    USD = "USD"

    @property
    def fee_decimals(self) -> int:
        """Decimal places a converted fee is rounded to."""
        decimals = {
            Currency.INR: 2,
            Currency.USD: 8,
        }
        return decimals[self]


class SkipReason(str, Enum):
    """Why a configured token produced no fee estimate."""

    MISSING_PRICE = "missing_price"         # No price quote under the token key
    INVALID_CONFIG = "invalid_config"       # Config record could not be read
    INVALID_PRICE = "invalid_price"         # Price record could not be read
    NON_POSITIVE_FEE = "non_positive_fee"   # Fee <= 0 or not finite
    NON_POSITIVE_PRICE = "non_positive_price"  # Unit price <= 0 or not finite
    FEE_OVERFLOW = "fee_overflow"           # Fee times price is not finite

    @property
    def description(self) -> str:
        """Human-readable description."""
        descriptions = {
            SkipReason.MISSING_PRICE: "price not available",
            SkipReason.INVALID_CONFIG: "malformed token configuration",
            SkipReason.INVALID_PRICE: "malformed price quote",
            SkipReason.NON_POSITIVE_FEE: "native fee must be a positive number",
            SkipReason.NON_POSITIVE_PRICE: "token price must be a positive number",
            SkipReason.FEE_OVERFLOW: "converted fee is too large to represent",
        }
        return descriptions.get(self, self.value)


# Type aliases for common patterns
TokenKey = str       # Mapping key identifying a token configuration
TokenAmount = float  # Quantity in the token's native unit
INRAmount = float    # Rupee value
USDAmount = float    # Dollar value

# Literal types for specific fields
OutputFormatType = Literal["json", "csv", "table"]
AmountStyleType = Literal["inr", "usd", "token"]

OUTPUT_FORMATS: tuple[str, ...] = ("table", "json", "csv")
