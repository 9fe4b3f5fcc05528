"""Summary command."""

import click
from walletdues.domain.summary import contact_summaries, format_amount, global_summary


@click.command("summary")
@click.pass_context
def show_summary(ctx):
    """Show totals and what each contact still owes you."""
    ledger = ctx.obj["ledger"]
    contacts = ledger.contacts
    expenses = ledger.expenses
    totals = global_summary(expenses)

    click.echo(f"\nSummary ({len(expenses)} expense(s), {len(contacts)} contact(s))")
    click.echo("=" * 60)
    click.echo(f"{'Lifetime tracked':<30} {format_amount(totals.total_spent):>20}")
    click.echo(f"{'Still owed to you':<30} {format_amount(totals.outstanding):>20}")
    click.echo(f"{'Paid back':<30} {format_amount(totals.settled):>20}")
    click.echo(f"{'Reminders sent':<30} {totals.reminders_sent:>20}")

    if not contacts:
        click.echo("\nAdd a contact to start tracking who owes you money.")
        return

    click.echo("\nPeople who owe you")
    click.echo("-" * 60)
    for item in contact_summaries(contacts, expenses):
        stats = item.stats
        open_items = f"{stats.outstanding_count} open item{'s' if stats.outstanding_count != 1 else ''}"
        click.echo(item.contact.name)
        click.echo(
            f"  Total: {format_amount(stats.total)} | "
            f"Outstanding: {format_amount(stats.pending)} | "
            f"Settled: {format_amount(stats.settled)}"
        )
        click.echo(f"  Reminders: {stats.reminders} ({open_items})")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(show_summary)
