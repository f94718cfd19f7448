"""Token processor - joins token configs with price quotes.

For every configured token the processor looks up the price quote filed
under the config's mapping key, converts the native withdrawal fee into
INR and USD, and returns the estimates ordered by INR fee (lowest first).

Problems with individual entries never abort the batch. They are logged
and the entry is skipped:
- no price under the key: warning
- unreadable config or price record: error / warning
- non-positive or non-finite fee or price: error
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Union

from pydantic import ValidationError

from ..core.models import FeeConversion, ProcessedToken, TokenConfig, TokenPrice
from ..core.types import SkipReason, TokenKey
from .fees import FeeConverter

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]
ConfigInput = Union[TokenConfig, Mapping[str, Any]]
PriceInput = Union[TokenPrice, Mapping[str, Any]]


class TokenProcessor:
    """Builds sorted fee estimates from token configs and price quotes."""

    def __init__(
        self,
        converter: FeeConverter | None = None,
        logger: LoggerLike | None = None,
    ):
        """
        Initialize token processor.

        Args:
            converter: Fee converter to use (a fresh FeeConverter by default)
            logger: Receives per-entry skip records; defaults to this
                    module's logger
        """
        self.converter = converter or FeeConverter()
        self.logger = logger or logging.getLogger(__name__)

    def build_price_lookup(self, prices: Iterable[PriceInput]) -> dict[str, TokenPrice]:
        """Index price quotes by symbol; later quotes replace earlier ones."""
        lookup: dict[str, TokenPrice] = {}

        for raw in prices:
            price = self._coerce_price(raw)
            if price is None:
                continue
            lookup[price.symbol] = price

        return lookup

    def process_with_skips(
        self,
        configs: Mapping[TokenKey, ConfigInput],
        prices: Iterable[PriceInput],
    ) -> tuple[list[ProcessedToken], dict[TokenKey, FeeConversion]]:
        """
        Process configs against prices and report what was skipped.

        Args:
            configs: Token key -> config, iterated in insertion order
            prices: Price quotes, matched to configs by symbol == key

        Returns:
            (tokens sorted ascending by INR fee, skipped key -> skip outcome)
        """
        lookup = self.build_price_lookup(prices)
        processed: list[ProcessedToken] = []
        skipped: dict[TokenKey, FeeConversion] = {}

        for key, raw_config in configs.items():
            result = self._process_entry(key, raw_config, lookup)
            if isinstance(result, ProcessedToken):
                processed.append(result)
            else:
                skipped[key] = result

        processed.sort(key=lambda token: token.withdrawal_fee_inr)

        self.logger.debug(
            f"Processed {len(processed)}/{len(configs)} tokens "
            f"({len(skipped)} skipped, {len(lookup)} prices)"
        )
        return processed, skipped

    def process(
        self,
        configs: Mapping[TokenKey, ConfigInput],
        prices: Iterable[PriceInput],
    ) -> list[ProcessedToken]:
        """Process configs against prices; see process_with_skips."""
        processed, _ = self.process_with_skips(configs, prices)
        return processed

    async def process_async(
        self,
        configs: Mapping[TokenKey, ConfigInput],
        prices: Iterable[PriceInput],
    ) -> list[ProcessedToken]:
        """Awaitable form of process(); runs to completion without suspending."""
        return self.process(configs, prices)

    def _process_entry(
        self,
        key: TokenKey,
        raw_config: ConfigInput,
        lookup: Mapping[str, TokenPrice],
    ) -> ProcessedToken | FeeConversion:
        """Build the estimate for one config, or the reason it was skipped."""
        price = lookup.get(key)
        if price is None:
            self.logger.warning(
                f"Price not available for {key}, skipping",
                extra={"token_key": key, "reason": SkipReason.MISSING_PRICE.value},
            )
            return FeeConversion.skipped(SkipReason.MISSING_PRICE)

        config = self._coerce_config(key, raw_config)
        if isinstance(config, FeeConversion):
            return config

        conversion = self.converter.convert(config.withdrawal_fee, price)
        if not conversion.ok:
            self.logger.error(
                f"Error processing token {key}: {conversion.detail}",
                extra={"token_key": key, "reason": conversion.skip_reason.value},
            )
            return conversion

        return ProcessedToken(
            id=key,
            name=config.name,
            symbol=config.symbol,
            price_inr=price.price_inr,
            price_usd=price.price_usd,
            withdrawal_fee_native=config.withdrawal_fee,
            withdrawal_fee_inr=conversion.fee_inr,
            withdrawal_fee_usd=conversion.fee_usd,
        )

    def _coerce_config(self, key: TokenKey, raw: ConfigInput) -> TokenConfig | FeeConversion:
        if isinstance(raw, TokenConfig):
            return raw
        try:
            return TokenConfig.model_validate(raw)
        except ValidationError as e:
            detail = f"malformed config: {e.error_count()} validation error(s)"
            self.logger.error(
                f"Error processing token {key}: {detail}",
                extra={"token_key": key, "reason": SkipReason.INVALID_CONFIG.value},
            )
            return FeeConversion.skipped(SkipReason.INVALID_CONFIG, detail)

    def _coerce_price(self, raw: PriceInput) -> TokenPrice | None:
        if isinstance(raw, TokenPrice):
            return raw
        try:
            return TokenPrice.model_validate(raw)
        except ValidationError as e:
            symbol = raw.get("symbol") if isinstance(raw, Mapping) else None
            self.logger.warning(
                f"Ignoring malformed price quote for {symbol or 'unknown symbol'}: "
                f"{e.error_count()} validation error(s)",
                extra={"token_key": symbol, "reason": SkipReason.INVALID_PRICE.value},
            )
            return None


def process_token_data(
    configs: Mapping[TokenKey, ConfigInput],
    prices: Iterable[PriceInput],
    logger: LoggerLike | None = None,
) -> list[ProcessedToken]:
    """
    Join token configs with price quotes and derive fiat withdrawal fees.

    Args:
        configs: Token key -> TokenConfig (or raw mapping)
        prices: TokenPrice records (or raw mappings)
        logger: Optional logger for per-entry skip records

    Returns:
        ProcessedToken list sorted ascending by withdrawal_fee_inr; may be
        empty
    """
    return TokenProcessor(logger=logger).process(configs, prices)


def process_token_data_with_skips(
    configs: Mapping[TokenKey, ConfigInput],
    prices: Iterable[PriceInput],
    logger: LoggerLike | None = None,
) -> tuple[list[ProcessedToken], dict[TokenKey, FeeConversion]]:
    """Like process_token_data, also returning skipped keys with reasons."""
    return TokenProcessor(logger=logger).process_with_skips(configs, prices)


async def process_token_data_async(
    configs: Mapping[TokenKey, ConfigInput],
    prices: Iterable[PriceInput],
    logger: LoggerLike | None = None,
) -> list[ProcessedToken]:
    """Awaitable form of process_token_data for async callers."""
    return await TokenProcessor(logger=logger).process_async(configs, prices)
