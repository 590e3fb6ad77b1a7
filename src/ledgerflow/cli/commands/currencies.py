"""Currency listing commands."""

import click

from ledgerflow.cli.error_handling import handle_domain_error
from ledgerflow.domain.currency import CurrencyService
from ledgerflow.domain.errors import DomainError


@click.command("currencies")
@click.option("--all", "include_inactive", is_flag=True, help="Include inactive currencies")
@click.pass_context
def list_currencies(ctx, include_inactive: bool):
    """List currencies configured on the ledger."""
    service = CurrencyService(ctx.obj["source"])
    try:
        currencies = service.list_currencies(include_inactive=include_inactive)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not currencies:
        click.echo("No currencies found.")
        return

    click.echo("\nCurrencies:")
    click.echo("-" * 60)
    for currency in currencies:
        marker = " (default)" if currency.is_default else ""
        click.echo(f"{currency.code:<6} | {currency.symbol:<6} | {currency.name}{marker}")


def register_commands(cli):
    """Register currencies command with main CLI."""
    cli.add_command(list_currencies)
