"""Loaders for token config and price files.

Reads already-materialized inputs from local YAML or JSON files for the
command line. Records are returned raw; validation and coercion happen in
the calculator.

Configs file:
    BTC:
      name: Bitcoin
      symbol: BTC
      withdrawalFee: 0.0005

Prices file (a list, or a mapping with a ``prices`` list):
    - symbol: BTC
      priceINR: 5000000
      priceUSD: 60000
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from ..core.exceptions import DataFileError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def _load_file(filepath: Path) -> Any:
    """Load YAML or JSON file."""
    if not filepath.exists():
        raise DataFileError(str(filepath), "file not found")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            if filepath.suffix.lower() in YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)
    except yaml.YAMLError as e:
        raise DataFileError(str(filepath), f"invalid YAML: {e}") from e
    except json.JSONDecodeError as e:
        raise DataFileError(str(filepath), f"invalid JSON: {e}") from e
    except OSError as e:
        raise DataFileError(str(filepath), str(e)) from e


def load_token_configs(path: Path | str) -> dict[str, Any]:
    """
    Load a token key -> config mapping.

    Args:
        path: YAML or JSON file; a top-level ``tokens`` mapping is unwrapped

    Returns:
        Raw config records keyed by token key, in file order
    """
    filepath = Path(path)
    data = _load_file(filepath)

    if isinstance(data, dict) and isinstance(data.get("tokens"), dict):
        data = data["tokens"]

    if not isinstance(data, dict):
        raise DataFileError(str(filepath), "expected a mapping of token key -> config")

    configs = {str(key): value for key, value in data.items()}
    logger.info(f"Loaded {len(configs)} token configs from {filepath}")
    return configs


def load_token_prices(path: Path | str) -> list[Any]:
    """
    Load a sequence of price quotes.

    Args:
        path: YAML or JSON file holding a list, or a mapping with a
              ``prices`` list

    Returns:
        Raw price records in file order
    """
    filepath = Path(path)
    data = _load_file(filepath)

    if isinstance(data, dict) and "prices" in data:
        data = data["prices"]

    if not isinstance(data, list):
        raise DataFileError(str(filepath), "expected a list of price quotes")

    logger.info(f"Loaded {len(data)} price quotes from {filepath}")
    return data
