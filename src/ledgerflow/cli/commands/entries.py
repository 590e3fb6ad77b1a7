"""Journal entry listing commands."""

import click

from ledgerflow.cli.date_filters import date_range_options, period_flags_from, resolve_cli_date_range
from ledgerflow.cli.error_handling import handle_domain_error
from ledgerflow.domain.cash_flow import CashFlowService
from ledgerflow.domain.errors import DomainError
from ledgerflow.utils.date_parser import format_display_date, get_date_range


@click.command("entries")
@date_range_options
@click.option("--verbose", "-v", is_flag=True, help="Show the debit and credit lines of each entry")
@click.pass_context
def list_entries(
    ctx, start_date: str | None, end_date: str | None, verbose: bool, **periods: bool
):
    """List journal entries for a period (default: last 30 days)."""
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags_from(periods),
        default_range=get_date_range("last-30-days"),
    )

    service = CashFlowService(ctx.obj["source"], ctx.obj["config"])
    try:
        entries = service.list_entries(start, end)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not entries:
        click.echo("No journal entries found.")
        return

    click.echo(f"\nFound {len(entries)} journal entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * 100)
    click.echo(
        f"{'Date':<14} {'Reference':<16} {'Description':<40} {'Amount':>16} {'Currency':<8}"
    )
    click.echo("-" * 100)

    for entry in entries:
        description = (entry.description or "")[:40]
        click.echo(
            f"{format_display_date(entry.transaction_date):<14} "
            f"{(entry.reference_number or '')[:16]:<16} {description:<40} "
            f"{entry.total_amount:>16,.2f} {entry.currency_code:<8}"
        )
        if verbose:
            for line in entry.lines:
                account = line.chart_of_account
                label = f"{account.account_no} {account.account_name}" if account else "(no account)"
                click.echo(
                    f"    {label[:50]:<50} Dr {line.debit_amount:>14,.2f}  Cr {line.credit_amount:>14,.2f}"
                )


def register_commands(cli):
    """Register entries command with main CLI."""
    cli.add_command(list_entries)
