"""Main CLI entry point."""

import logging

import click

from ledgerflow.domain.cash_flow import (
    DEFAULT_CASH_ACCOUNT_NUMBERS,
    DEFAULT_CASH_NAME_HINTS,
    ClassifierConfig,
)
from ledgerflow.source.factories import create_entry_source

# Import and register all commands at module level
from ledgerflow.cli.commands import cashflow, currencies, entries


@click.group()
@click.option(
    "--api-url",
    help="Accounting API base URL (overrides LEDGERFLOW_API_URL environment variable)",
    envvar="LEDGERFLOW_API_URL",
)
@click.option(
    "--token",
    help="Bearer token for the accounting API (overrides LEDGERFLOW_API_TOKEN environment variable)",
    envvar="LEDGERFLOW_API_TOKEN",
)
@click.option(
    "--input",
    "input_path",
    type=click.Path(dir_okay=False),
    help="Read journal entries from a saved JSON response instead of the API",
)
@click.option(
    "--cash-hint",
    "cash_hints",
    multiple=True,
    help="Account name fragment marking a cash account (repeatable, replaces defaults)",
)
@click.option(
    "--cash-account",
    "cash_accounts",
    multiple=True,
    help="Account number of a cash account (repeatable, replaces defaults)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx,
    api_url: str | None,
    token: str | None,
    input_path: str | None,
    cash_hints: tuple[str, ...],
    cash_accounts: tuple[str, ...],
    verbose: bool,
):
    """Ledgerflow - cash-flow statements from a general ledger.

    Fetches journal entries from the accounting API and classifies every
    cash movement into operating, investing or financing activities.
    """
    ctx.ensure_object(dict)

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    ctx.obj["config"] = ClassifierConfig(
        cash_name_hints=tuple(cash_hints) or DEFAULT_CASH_NAME_HINTS,
        cash_account_numbers=tuple(cash_accounts) or DEFAULT_CASH_ACCOUNT_NUMBERS,
    )

    # Create the source only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        source = create_entry_source(api_url=api_url, token=token, input_path=input_path)
        ctx.call_on_close(source.close)
        ctx.obj["source"] = source


# Register all commands
cashflow.register_commands(cli)
entries.register_commands(cli)
currencies.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
