"""Category listing command."""

import click
from walletdues.domain.entities import DEFAULT_CATEGORIES, DEFAULT_CATEGORY


@click.command("categories")
def list_categories():
    """List suggested expense categories.

    Any other category name is accepted too.
    """
    click.echo("\nSuggested categories:")
    for name in DEFAULT_CATEGORIES:
        marker = " (default)" if name == DEFAULT_CATEGORY else ""
        click.echo(f"  {name}{marker}")


def register_commands(cli):
    """Register category command with main CLI."""
    cli.add_command(list_categories)
