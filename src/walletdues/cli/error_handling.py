"""Turning rejected input into a failed walletdues command."""

from typing import NoReturn, Optional

import click
import structlog

logger = structlog.get_logger(__name__)


def fail(ctx: click.Context, message: str) -> NoReturn:
    """Print ``Error: <message>`` on stderr and end the command with status 1."""
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def exit_on_error(ctx: click.Context, error: ValueError, context: Optional[str] = None) -> NoReturn:
    """Fail the command with a ledger or parser error.

    Nothing is written when the ledger rejects a draft, so the command only
    has to report. ``context`` prefixes the message, e.g. ``Invalid amount format``.
    """
    logger.debug("command_rejected", command=ctx.info_name, reason=str(error))
    fail(ctx, f"{context}: {error}" if context else str(error))
