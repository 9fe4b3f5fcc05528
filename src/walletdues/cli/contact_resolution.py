"""CLI helpers for contact resolution."""

from __future__ import annotations

import click
from walletdues.cli.error_handling import exit_on_error
from walletdues.domain.entities import Contact
from walletdues.domain.errors import DomainError
from walletdues.domain.ledger import LedgerStore
from walletdues.utils.contact_resolver import resolve_contact


def resolve_contact_or_exit(ctx: click.Context, ledger: LedgerStore, contact: str) -> Contact:
    """Resolve contact name or ID, or exit with a CLI error."""
    try:
        return resolve_contact(ledger.contacts, contact)
    except DomainError as exc:
        exit_on_error(ctx, exc)
