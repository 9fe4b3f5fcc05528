"""Contact management commands."""

import click
from walletdues.cli.error_handling import exit_on_error
from walletdues.domain.entities import ContactDraft
from walletdues.domain.errors import DomainError
from walletdues.domain.summary import contact_summary, format_amount


@click.group()
def contact_group():
    """Manage contacts."""
    pass


@contact_group.command("add")
@click.argument("name")
@click.option("--email", help="Email address")
@click.option("--phone", help="Phone number")
@click.option("--note", help="Preferred payment method, reminders, context")
@click.pass_context
def add_contact(ctx, name: str, email: str | None, phone: str | None, note: str | None):
    """Add a contact.

    Examples:
        walletdues contact add "Alex Rivera"
        walletdues contact add "Alex Rivera" --email alex@email.com --phone "+1 987 654 3210"
    """
    ledger = ctx.obj["ledger"]
    try:
        contact = ledger.add_contact(
            ContactDraft(name=name, email=email, phone=phone, note=note)
        )
    except DomainError as e:
        exit_on_error(ctx, e)
    click.echo(f"Created contact '{contact.name}' (ID: {contact.id})")


@contact_group.command("list")
@click.pass_context
def list_contacts(ctx):
    """List contacts with their balances."""
    ledger = ctx.obj["ledger"]
    contacts = ledger.contacts
    if not contacts:
        click.echo("No contacts found.")
        return

    expenses = ledger.expenses
    click.echo(f"\nContacts ({len(contacts)}):")
    click.echo("-" * 80)
    for c in contacts:
        stats = contact_summary(c, expenses)
        click.echo(f"{c.name}  (ID: {c.id})")
        if c.email:
            click.echo(f"  Email: {c.email}")
        if c.phone:
            click.echo(f"  Phone: {c.phone}")
        if c.note:
            click.echo(f"  Note: {c.note}")
        click.echo(
            f"  Outstanding: {format_amount(stats.pending)} | "
            f"Settled: {format_amount(stats.settled)} | "
            f"Total: {format_amount(stats.total)}"
        )


@contact_group.command("remove")
@click.argument("contact_id", metavar="CONTACT_ID")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def remove_contact(ctx, contact_id: str, yes: bool):
    """Remove a contact.

    Expenses shared with the contact are kept but no longer point at anyone.
    """
    ledger = ctx.obj["ledger"]
    contact = ledger.get_contact(contact_id)
    if contact is None:
        click.echo(f"No contact with ID {contact_id}; nothing to remove.")
        return

    if not yes and not click.confirm(f"Remove contact '{contact.name}'?"):
        click.echo("Removal cancelled.")
        return

    ledger.remove_contact(contact_id)
    click.echo(f"Removed contact '{contact.name}'")


def register_commands(cli):
    """Register contact commands with main CLI."""
    cli.add_command(contact_group, name="contact")
