"""CLI error handling helpers."""

import logging

import click

from ledgerflow.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Report a failed command on stderr and exit with status 1.

    The traceback, including the HTTP or file error behind a ``SourceError``,
    is only logged at DEBUG, so it shows up with ``--verbose``.
    """
    logger.debug("%s failed", ctx.command_path, exc_info=error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
