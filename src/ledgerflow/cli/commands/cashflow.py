"""Cash-flow statement commands."""

from decimal import Decimal

import click

from ledgerflow.cli.date_filters import date_range_options, period_flags_from, resolve_cli_date_range
from ledgerflow.cli.error_handling import handle_domain_error
from ledgerflow.domain.cash_flow import CashFlowService
from ledgerflow.domain.entities import CashFlowReport
from ledgerflow.domain.errors import DomainError
from ledgerflow.export.excel import ExcelCashFlowExporter, default_filename
from ledgerflow.utils.date_parser import format_display_date, get_date_range


def format_money(amount: Decimal, currency: str = "") -> str:
    """Format a signed amount with thousands separators and a currency code."""
    text = f"{amount:,.2f}"
    return f"{text} {currency}" if currency else text


def _display_statement(report: CashFlowReport) -> None:
    currency = report.currency_hint
    totals = report.totals

    click.echo(
        f"\nCash Flow Statement ({report.start_date.isoformat()} to {report.end_date.isoformat()})"
    )
    click.echo("=" * 60)
    click.echo(f"{'Operating Activities':<35} {format_money(totals.operating, currency):>24}")
    click.echo(f"{'Investing Activities':<35} {format_money(totals.investing, currency):>24}")
    click.echo(f"{'Financing Activities':<35} {format_money(totals.financing, currency):>24}")
    click.echo("-" * 60)
    click.echo(f"{'Net Change in Cash':<35} {format_money(totals.net_change, currency):>24}")


def _display_details(report: CashFlowReport) -> None:
    click.echo(f"\nCash movements ({len(report.rows)}):")
    click.echo("-" * 100)
    click.echo(
        f"{'Date':<14} {'Reference':<16} {'Description':<34} {'Section':<10} {'Cash Impact':>20}"
    )
    click.echo("-" * 100)
    for row in report.rows:
        description = (row.description or "")[:34]
        click.echo(
            f"{format_display_date(row.date):<14} {(row.reference or '')[:16]:<16} "
            f"{description:<34} {row.section.value:<10} "
            f"{format_money(row.cash_impact, row.currency):>20}"
        )


@click.command("cashflow")
@date_range_options
@click.option("--details", is_flag=True, help="List every classified cash movement")
@click.option(
    "--export",
    "export_path",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the statement to an Excel workbook at this path",
)
@click.option(
    "--export-default",
    is_flag=True,
    help="Write the workbook as CashFlow_<from>_to_<to>.xlsx in the current directory",
)
@click.pass_context
def cashflow(
    ctx,
    start_date: str | None,
    end_date: str | None,
    details: bool,
    export_path: str | None,
    export_default: bool,
    **periods: bool,
):
    """Show the cash-flow statement for a period.

    Without dates the statement covers the last 30 days. Every journal entry
    that touches a cash or bank account is attributed to operating,
    investing or financing activities by its largest counter account.

    Examples:
        ledgerflow cashflow --this-month
        ledgerflow cashflow --start-date 2024-01-01 --end-date 2024-03-31 --details
        ledgerflow --input entries.json cashflow --last-year --export cash.xlsx
    """
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags_from(periods),
        default_range=get_date_range("last-30-days"),
    )

    service = CashFlowService(ctx.obj["source"], ctx.obj["config"])
    try:
        report = service.build_report(start, end)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not report.rows:
        click.echo("No cash movements in this period.")
    else:
        _display_statement(report)
        if details:
            _display_details(report)

    if export_path or export_default:
        if not report.rows:
            click.echo("Nothing to export.")
            return
        path = export_path or default_filename(report.start_date, report.end_date)
        try:
            written = ExcelCashFlowExporter().write(report, path)
        except OSError as e:
            click.echo(f"Error: Could not write '{path}': {e}", err=True)
            ctx.exit(1)
        click.echo(f"\nExported cash-flow statement to {written}")


def register_commands(cli):
    """Register cashflow command with main CLI."""
    cli.add_command(cashflow)
