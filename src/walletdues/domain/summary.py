"""Summary computations over the ledger collections.

Every function here is pure and recomputes from the full record set on each
call. Sums are plain float accumulation in record order; rounding happens only
when an amount is formatted for display.
"""

from typing import Iterable, Sequence

from walletdues.domain.entities import (
    Contact,
    ContactStats,
    ContactSummary,
    Expense,
    GlobalSummary,
)

RECENT_EXPENSES_LIMIT = 10


def _sum_amounts(expenses: Iterable[Expense]) -> float:
    total = 0.0
    for expense in expenses:
        total += expense.amount
    return total


def global_summary(expenses: Sequence[Expense]) -> GlobalSummary:
    """Totals across all expenses.

    ``outstanding`` only counts shared expenses that are not settled;
    ``settled`` counts every settled expense, personal ones included.
    """
    return GlobalSummary(
        total_spent=_sum_amounts(expenses),
        outstanding=_sum_amounts(
            e for e in expenses if not e.is_personal and not e.is_settled
        ),
        settled=_sum_amounts(e for e in expenses if e.is_settled),
        reminders_sent=sum(e.reminder_count for e in expenses),
    )


def contact_summary(contact: Contact, expenses: Sequence[Expense]) -> ContactStats:
    """Totals for the expenses attributed to a contact."""
    related = [e for e in expenses if e.contact_id == contact.id]
    return ContactStats(
        total=_sum_amounts(related),
        pending=_sum_amounts(e for e in related if not e.is_settled),
        settled=_sum_amounts(e for e in related if e.is_settled),
        reminders=sum(e.reminder_count for e in related),
        outstanding_count=sum(
            1 for e in related if not e.is_settled and not e.is_personal
        ),
    )


def contact_summaries(
    contacts: Sequence[Contact], expenses: Sequence[Expense]
) -> list[ContactSummary]:
    """Stats for every contact, in contact order."""
    return [
        ContactSummary(contact=contact, stats=contact_summary(contact, expenses))
        for contact in contacts
    ]


def recent_expenses(
    expenses: Sequence[Expense], n: int = RECENT_EXPENSES_LIMIT
) -> list[Expense]:
    """Return the n expenses with the latest dates.

    Ordering is by the expense ``date`` only; records sharing a date keep
    their relative order.
    """
    if n <= 0:
        return []
    return sorted(expenses, key=lambda e: e.date, reverse=True)[:n]


def format_amount(amount: float) -> str:
    """Format an amount for display, e.g. ``$1,234.50``."""
    return f"${amount:,.2f}"
