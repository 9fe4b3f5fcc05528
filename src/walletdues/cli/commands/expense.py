"""Expense commands."""

import click
from walletdues.cli.contact_resolution import resolve_contact_or_exit
from walletdues.cli.error_handling import exit_on_error
from walletdues.domain.entities import DEFAULT_CATEGORY, ExpenseDraft, SettlementStatus
from walletdues.domain.errors import DomainError
from walletdues.domain.summary import RECENT_EXPENSES_LIMIT, format_amount, recent_expenses
from walletdues.utils.amount_parser import parse_amount
from walletdues.utils.date_parser import parse_date

STATUS_LABELS = {
    SettlementStatus.PENDING: "Awaiting payment",
    SettlementStatus.REMINDED: "Reminder sent",
    SettlementStatus.SETTLED: "Settled",
}

STATUS_CHOICES = [status.value for status in SettlementStatus]


@click.group()
def expense_group():
    """Record expenses and track repayments."""
    pass


@expense_group.command("add")
@click.option("--description", required=True, help="What the money was spent on")
@click.option("--amount", required=True, help="Amount (e.g., 40, 12.50, $1,200.00)")
@click.option(
    "--date",
    "date_str",
    default="today",
    show_default=True,
    help="Expense date (YYYY-MM-DD or 'today', 'yesterday')",
)
@click.option("--category", default=DEFAULT_CATEGORY, show_default=True, help="Category")
@click.option("--notes", help="Notes (up to 240 characters)")
@click.option(
    "--contact",
    help="Contact name or ID who owes this amount (omit for a personal expense)",
)
@click.option(
    "--status",
    type=click.Choice(STATUS_CHOICES, case_sensitive=False),
    help="Initial status for a shared expense (default: pending)",
)
@click.pass_context
def add_expense(
    ctx,
    description: str,
    amount: str,
    date_str: str,
    category: str,
    notes: str | None,
    contact: str | None,
    status: str | None,
):
    """Add an expense.

    Without --contact the expense is personal and counts as settled.

    Examples:
        walletdues expense add --description "Groceries" --amount 52.30
        walletdues expense add --description "Dinner" --amount 40 --date 2024-01-05 --contact "Alex Rivera"
    """
    ledger = ctx.obj["ledger"]

    try:
        expense_date = parse_date(date_str)
    except ValueError as e:
        exit_on_error(ctx, e, "Invalid date format")

    try:
        expense_amount = parse_amount(amount)
    except ValueError as e:
        exit_on_error(ctx, e, "Invalid amount format")

    contact_obj = None
    if contact:
        contact_obj = resolve_contact_or_exit(ctx, ledger, contact)

    draft = ExpenseDraft(
        description=description,
        amount=expense_amount,
        date=expense_date,
        category=category,
        notes=notes,
        is_personal=contact_obj is None,
        contact_id=contact_obj.id if contact_obj else None,
        status=SettlementStatus(status.lower()) if status else None,
    )
    try:
        expense = ledger.add_expense(draft)
    except DomainError as e:
        exit_on_error(ctx, e)

    click.echo(f"Created expense {expense.id}")
    click.echo(f"  Description: {expense.description}")
    click.echo(f"  Date: {expense.date}")
    click.echo(f"  Amount: {format_amount(expense.amount)}")
    click.echo(f"  Category: {expense.category}")
    if contact_obj is not None:
        click.echo(f"  Owed by: {contact_obj.name}")
    click.echo(f"  Status: {STATUS_LABELS[expense.status]}")


def _change_status(ctx, expense_id: str, status: SettlementStatus) -> None:
    ledger = ctx.obj["ledger"]
    expense = ledger.get_expense(expense_id)
    if expense is None:
        click.echo(f"No expense with ID {expense_id}; nothing changed.")
        return
    if expense.is_personal:
        click.echo("Personal expenses are always settled; nothing changed.")
        return

    ledger.update_expense_status(expense_id, status)
    updated = ledger.get_expense(expense_id)
    click.echo(
        f"'{updated.description}' is now {STATUS_LABELS[updated.status].lower()} "
        f"(reminders: {updated.reminder_count})"
    )


@expense_group.command("remind")
@click.argument("expense_id", metavar="EXPENSE_ID")
@click.pass_context
def remind_expense(ctx, expense_id: str):
    """Record that you reminded someone about an expense."""
    _change_status(ctx, expense_id, SettlementStatus.REMINDED)


@expense_group.command("settle")
@click.argument("expense_id", metavar="EXPENSE_ID")
@click.pass_context
def settle_expense(ctx, expense_id: str):
    """Mark an expense as paid back."""
    _change_status(ctx, expense_id, SettlementStatus.SETTLED)


@expense_group.command("status")
@click.argument("expense_id", metavar="EXPENSE_ID")
@click.argument("status", type=click.Choice(STATUS_CHOICES, case_sensitive=False))
@click.pass_context
def set_status(ctx, expense_id: str, status: str):
    """Set the status of an expense (pending, reminded or settled)."""
    _change_status(ctx, expense_id, SettlementStatus(status.lower()))


@expense_group.command("remove")
@click.argument("expense_id", metavar="EXPENSE_ID")
@click.pass_context
def remove_expense(ctx, expense_id: str):
    """Delete an expense."""
    ledger = ctx.obj["ledger"]
    if ledger.remove_expense(expense_id):
        click.echo(f"Removed expense {expense_id}")
    else:
        click.echo(f"No expense with ID {expense_id}; nothing to remove.")


@expense_group.command("list")
@click.option(
    "--limit",
    type=int,
    default=RECENT_EXPENSES_LIMIT,
    show_default=True,
    help="Number of most recent expenses to show",
)
@click.option("--verbose", "-v", is_flag=True, help="Show notes, category and reminder counts")
@click.pass_context
def list_expenses(ctx, limit: int, verbose: bool):
    """List the most recent expenses by date."""
    ledger = ctx.obj["ledger"]
    expenses = recent_expenses(ledger.expenses, limit)
    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo(f"\nLatest {len(expenses)} expense(s):")
    click.echo("-" * 100)
    click.echo(f"{'Date':<12} {'Amount':>12}  {'Status':<18} {'Owed by':<20} {'Description':<30}")
    click.echo("-" * 100)
    for e in expenses:
        contact = ledger.resolve_contact(e)
        if e.is_personal:
            owed_by = "Personal"
        elif contact is None:
            owed_by = "(removed contact)"
        else:
            owed_by = contact.name
        click.echo(
            f"{str(e.date):<12} {format_amount(e.amount):>12}  {STATUS_LABELS[e.status]:<18} "
            f"{owed_by[:20]:<20} {e.description[:30]:<30}"
        )
        if verbose:
            click.echo(f"  ID: {e.id} | Category: {e.category} | Reminders: {e.reminder_count}")
            if e.notes:
                click.echo(f"  Notes: {e.notes}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
