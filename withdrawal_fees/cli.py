"""CLI entry point for the Withdrawal Fee Estimator.

Usage:
    withdrawal-fees compute configs.yaml prices.json
    withdrawal-fees compute configs.yaml prices.json --output json --save results/fees.json
    withdrawal-fees validate configs.yaml
    withdrawal-fees format-amount 1500000 --style token
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .calculator import process_token_data_with_skips, validate_token_configs
from .core.config import FeeSettings, get_settings
from .core.exceptions import WithdrawalFeeError
from .core.types import OUTPUT_FORMATS
from .output.formatters import (
    CSVFormatter,
    JSONFormatter,
    OutputFormatter,
    TableFormatter,
    format_currency_inr,
    format_currency_usd,
    format_token_amount,
)
from .storage.loaders import load_token_configs, load_token_prices

# Initialize app
app = typer.Typer(
    name="withdrawal-fees",
    help="Estimate token withdrawal fees in INR and USD",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

AMOUNT_FORMATTERS = {
    "inr": format_currency_inr,
    "usd": format_currency_usd,
    "token": format_token_amount,
}

SAVE_SUFFIXES = {"json": ".json", "csv": ".csv", "table": ".txt"}


def setup_logging(verbose: bool = False, level: int = logging.INFO) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
    )


def _fail(message: str) -> None:
    err_console.print(f"[red]{escape(message)}[/]")
    raise typer.Exit(1)


def _load_settings() -> FeeSettings:
    try:
        return get_settings()
    except WithdrawalFeeError as e:
        _fail(f"Error: {e}")


def _make_formatter(output: str, settings: FeeSettings) -> OutputFormatter:
    if output == "json":
        return JSONFormatter()
    if output == "csv":
        return CSVFormatter()
    return TableFormatter(width=settings.table_width)


@app.command()
def compute(
    configs_file: Path = typer.Argument(..., help="YAML/JSON file of token key -> config"),
    prices_file: Path = typer.Argument(..., help="YAML/JSON file of price quotes"),
    output: Optional[str] = typer.Option(
        None,
        "--output", "-o",
        help="Output format: table, json, csv",
    ),
    save: Optional[Path] = typer.Option(
        None,
        "--save", "-s",
        help="Save output to file",
    ),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--no-strict",
        help="Exit with an error if any config is invalid",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """
    Compute withdrawal fee estimates, lowest INR fee first.

    Examples:
        withdrawal-fees compute configs.yaml prices.json
        withdrawal-fees compute configs.json prices.json --output csv
    """
    settings = _load_settings()
    setup_logging(verbose, settings.log_level_value)

    output_lower = (output or settings.output_format).lower()
    if output_lower not in OUTPUT_FORMATS:
        _fail(f"Invalid output format: {output}. Use one of: {', '.join(OUTPUT_FORMATS)}")
    strict = settings.strict if strict is None else strict

    try:
        configs = load_token_configs(configs_file)
        prices = load_token_prices(prices_file)
    except WithdrawalFeeError as e:
        _fail(f"Error: {e}")

    validation = validate_token_configs(configs)
    if validation.has_invalid:
        err_console.print(
            f"[yellow]{len(validation.invalid)} invalid config(s): {escape(', '.join(validation.invalid))}[/]"
        )
        if strict:
            raise typer.Exit(1)

    invalid = set(validation.invalid)
    usable = {key: config for key, config in configs.items() if key not in invalid}
    tokens, skipped = process_token_data_with_skips(usable, prices)

    for key, outcome in skipped.items():
        err_console.print(f"[dim]Skipped {escape(key)}: {escape(outcome.detail)}[/]")

    formatter = _make_formatter(output_lower, settings)
    formatted = formatter.format(tokens)

    # Display
    if output_lower == "table":
        console.print(Text.from_ansi(formatted), end="")
    else:
        # CSV rows already end with a newline
        typer.echo(formatted, nl=output_lower != "csv")

    # Save if requested
    if save:
        save.parent.mkdir(parents=True, exist_ok=True)
        save_path = save.with_suffix(SAVE_SUFFIXES[output_lower])
        formatter.format_to_file(tokens, str(save_path))
        err_console.print(f"[green]Saved to {save_path}[/]")


@app.command()
def validate(
    configs_file: Path = typer.Argument(..., help="YAML/JSON file of token key -> config"),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """Check token configs; exits with status 1 if any is invalid."""
    settings = _load_settings()
    setup_logging(verbose, settings.log_level_value)

    try:
        configs = load_token_configs(configs_file)
    except WithdrawalFeeError as e:
        _fail(f"Error: {e}")

    validation = validate_token_configs(configs)

    table = Table(title="Token Configs", show_header=True)
    table.add_column("Token", style="cyan")
    table.add_column("Status")
    invalid = set(validation.invalid)
    for key in configs:
        status = "[red]invalid[/]" if key in invalid else "[green]valid[/]"
        table.add_row(escape(key), status)
    console.print(table)

    console.print(
        f"[bold]{len(validation.valid)} valid, {len(validation.invalid)} invalid[/]"
    )
    if validation.has_invalid:
        raise typer.Exit(1)


@app.command("format-amount")
def format_amount(
    amount: float = typer.Argument(..., help="Value to format"),
    style: str = typer.Option(
        "token",
        "--style",
        help="Format style: inr, usd, token",
    ),
) -> None:
    """Format a single value as INR, USD, or an abbreviated token amount."""
    formatter = AMOUNT_FORMATTERS.get(style.lower())
    if formatter is None:
        _fail(f"Invalid style: {style}. Use one of: {', '.join(AMOUNT_FORMATTERS)}")

    try:
        typer.echo(formatter(amount))
    except WithdrawalFeeError as e:
        _fail(f"Error: {e}")


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"Withdrawal Fee Estimator v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
