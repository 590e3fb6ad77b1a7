"""CLI helpers for date range resolution."""

from datetime import date

import click

from ledgerflow.utils.date_parser import get_date_range, parse_date

PERIOD_FLAGS = (
    "this-month",
    "this-year",
    "this-week",
    "last-month",
    "last-year",
    "last-week",
)


def date_range_options(command):
    """Attach --start-date/--end-date and the period flags to a command."""
    for period in reversed(PERIOD_FLAGS):
        label = period.replace("-", " ")
        command = click.option(
            f"--{period}", is_flag=True, help=f"Filter to {label}"
        )(command)
    command = click.option(
        "--end-date", help="End date (YYYY-MM-DD or relative like 'today')"
    )(command)
    command = click.option(
        "--start-date", help="Start date (YYYY-MM-DD or relative like '30 days ago')"
    )(command)
    return command


def period_flags_from(periods: dict[str, bool]) -> dict[str, bool]:
    """Key period flag values from command kwargs by period name."""
    return {period: bool(periods.get(period.replace("-", "_"))) for period in PERIOD_FLAGS}


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
    default_range: tuple[date, date] | None = None,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates."""
    period_count = sum(1 for is_set in period_flags.values() if is_set)

    if period_count > 1:
        click.echo(
            "Error: Only one period option (--this-month, --this-year, --this-week, --last-month, --last-year, --last-week) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --this-year, etc.) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    start = None
    end = None

    if period_count == 1:
        for period, is_set in period_flags.items():
            if is_set:
                start, end = get_date_range(period)
                break
    else:
        if start_date:
            try:
                start = parse_date(start_date)
            except ValueError as e:
                click.echo(f"Error: Invalid start date: {e}", err=True)
                ctx.exit(1)

        if end_date:
            try:
                end = parse_date(end_date)
            except ValueError as e:
                click.echo(f"Error: Invalid end date: {e}", err=True)
                ctx.exit(1)

        if default_range is not None:
            if start is None and end is None:
                start, end = default_range
            elif start is None:
                start = default_range[0]
            elif end is None:
                end = default_range[1]

    return start, end
