"""Fee converter for turning native withdrawal fees into fiat amounts.

All conversions use one explicit formula:
- Fiat fee = native_fee × unit_price, rounded per currency

Rounding is half-away-from-zero (``ROUND_HALF_UP``) on the decimal
representation of the product: 2 places for INR, 8 places for USD.
"""

import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any

from ..core.exceptions import InvalidArgumentError
from ..core.models import FeeConversion, TokenPrice
from ..core.types import Currency, INRAmount, SkipReason, TokenAmount, USDAmount

logger = logging.getLogger(__name__)


def is_number(value: Any) -> bool:
    """Check for a real number; bools do not count."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _positive_problem(value: Any) -> str | None:
    """Return why ``value`` is not a positive finite number, or None."""
    if not is_number(value):
        return "must be a number"
    if not math.isfinite(value):
        return "must be finite"
    if value <= 0:
        return "must be positive"
    return None


def _require_positive(field: str, value: Any) -> None:
    problem = _positive_problem(value)
    if problem:
        raise InvalidArgumentError(field, value, problem)


def rounding_context(value: Decimal, decimals: int) -> Context:
    """Half-up context with enough precision to hold ``value`` at ``decimals`` places."""
    return Context(prec=max(28, value.adjusted() + decimals + 2), rounding=ROUND_HALF_UP)


def quantize_half_up(value: float, decimals: int) -> Decimal:
    """
    Round to a fixed number of decimal places, halves away from zero.

    The shortest repr of the float is rounded, so 2.675 becomes 2.68.

    Args:
        value: Finite value to round
        decimals: Number of decimal places to keep

    Returns:
        Rounded value as Decimal with exactly ``decimals`` places
    """
    quant = Decimal(1).scaleb(-decimals)
    exact = Decimal(str(value))
    return exact.quantize(quant, context=rounding_context(exact, decimals))


def round_half_up(value: float, decimals: int) -> float:
    """Float form of quantize_half_up."""
    return float(quantize_half_up(value, decimals))


def _fiat_fee(native_fee: Any, unit_price: Any, price_field: str, currency: Currency) -> float:
    _require_positive("native_fee", native_fee)
    _require_positive(price_field, unit_price)
    fee = native_fee * unit_price
    if not math.isfinite(fee):
        raise InvalidArgumentError(price_field, unit_price, f"fee in {currency.value} overflows")
    return round_half_up(fee, currency.fee_decimals)


def calculate_withdrawal_fees_inr(native_fee: TokenAmount, unit_price_inr: INRAmount) -> INRAmount:
    """
    Convert a native withdrawal fee to Indian Rupees.

    Formula: fee_inr = round(native_fee × unit_price_inr, 2)

    Args:
        native_fee: Fee in the token's native unit
        unit_price_inr: Price of one token unit in INR

    Returns:
        Fee in INR, rounded to 2 decimal places

    Raises:
        InvalidArgumentError: If either input is not a positive finite number,
            or their product is too large to represent
    """
    return _fiat_fee(native_fee, unit_price_inr, "unit_price_inr", Currency.INR)


def calculate_withdrawal_fees_usd(native_fee: TokenAmount, unit_price_usd: USDAmount) -> USDAmount:
    """
    Convert a native withdrawal fee to US Dollars.

    Formula: fee_usd = round(native_fee × unit_price_usd, 8)

    Args:
        native_fee: Fee in the token's native unit
        unit_price_usd: Price of one token unit in USD

    Returns:
        Fee in USD, rounded to 8 decimal places

    Raises:
        InvalidArgumentError: If either input is not a positive finite number,
            or their product is too large to represent
    """
    return _fiat_fee(native_fee, unit_price_usd, "unit_price_usd", Currency.USD)


class FeeConverter:
    """Converts native fees into INR and USD fees for a price quote."""

    def fee_inr(self, native_fee: TokenAmount, unit_price_inr: INRAmount) -> INRAmount:
        return calculate_withdrawal_fees_inr(native_fee, unit_price_inr)

    def fee_usd(self, native_fee: TokenAmount, unit_price_usd: USDAmount) -> USDAmount:
        return calculate_withdrawal_fees_usd(native_fee, unit_price_usd)

    def convert(self, native_fee: TokenAmount, price: TokenPrice) -> FeeConversion:
        """
        Convert a native fee against a price quote without raising.

        Args:
            native_fee: Fee in the token's native unit
            price: Price quote carrying INR and USD unit prices

        Returns:
            FeeConversion with both fees, or a skip outcome naming the
            offending input
        """
        problem = _positive_problem(native_fee)
        if problem:
            return FeeConversion.skipped(
                SkipReason.NON_POSITIVE_FEE,
                f"native fee {native_fee!r} {problem}",
            )

        for label, unit_price in (("priceINR", price.price_inr), ("priceUSD", price.price_usd)):
            problem = _positive_problem(unit_price)
            if problem:
                return FeeConversion.skipped(
                    SkipReason.NON_POSITIVE_PRICE,
                    f"{label} {unit_price!r} {problem}",
                )
            if not math.isfinite(native_fee * unit_price):
                return FeeConversion.skipped(
                    SkipReason.FEE_OVERFLOW,
                    f"native fee {native_fee!r} x {label} {unit_price!r} overflows",
                )

        fee_inr = self.fee_inr(native_fee, price.price_inr)
        fee_usd = self.fee_usd(native_fee, price.price_usd)
        logger.debug(
            f"Fee conversion: native={native_fee} x INR {price.price_inr} = {fee_inr}, "
            f"x USD {price.price_usd} = {fee_usd}"
        )
        return FeeConversion.success(fee_inr, fee_usd)
