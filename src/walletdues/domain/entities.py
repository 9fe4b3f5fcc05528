"""Domain model entities for walletdues.

These are pure data classes representing business concepts, independent of
how the snapshot is stored. Records are immutable; the ledger replaces a
record with an updated copy instead of mutating it in place.
"""

from dataclasses import dataclass
from datetime import datetime, date
from enum import Enum
from typing import Optional


DEFAULT_CATEGORIES = (
    "General",
    "Food & Dining",
    "Transport",
    "Housing",
    "Entertainment",
    "Travel",
    "Utilities",
    "Health",
)

DEFAULT_CATEGORY = "General"


class SettlementStatus(str, Enum):
    """Lifecycle state of an expense."""

    PENDING = "pending"
    REMINDED = "reminded"
    SETTLED = "settled"


@dataclass(frozen=True)
class Contact:
    """A person who may owe the user money."""

    id: str
    name: str
    created_at: datetime
    email: Optional[str] = None
    phone: Optional[str] = None
    note: Optional[str] = None


@dataclass(frozen=True)
class Expense:
    """A single recorded spend, personal or shared."""

    id: str
    description: str
    amount: float
    date: date
    category: str
    is_personal: bool
    status: SettlementStatus
    reminder_count: int
    created_at: datetime
    updated_at: datetime
    notes: Optional[str] = None
    contact_id: Optional[str] = None

    @property
    def is_settled(self) -> bool:
        return self.status == SettlementStatus.SETTLED

    @property
    def is_orphaned(self) -> bool:
        """Shared expense whose contact has been deleted."""
        return not self.is_personal and self.contact_id is None


@dataclass(frozen=True)
class Snapshot:
    """Full persisted state of the ledger."""

    contacts: tuple[Contact, ...] = ()
    expenses: tuple[Expense, ...] = ()
    last_updated: Optional[datetime] = None


@dataclass(frozen=True)
class GlobalSummary:
    """Totals across every recorded expense."""

    total_spent: float
    outstanding: float
    settled: float
    reminders_sent: int


@dataclass(frozen=True)
class ContactStats:
    """Totals for the expenses attributed to one contact.

    ``pending`` covers everything not yet settled, i.e. both the ``pending``
    and ``reminded`` statuses.
    """

    total: float
    pending: float
    settled: float
    reminders: int
    outstanding_count: int


@dataclass(frozen=True)
class ContactSummary:
    """A contact paired with its stats."""

    contact: Contact
    stats: ContactStats


@dataclass(frozen=True)
class ContactDraft:
    """Raw contact form input."""

    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    note: Optional[str] = None


@dataclass(frozen=True)
class ExpenseDraft:
    """Raw expense form input."""

    description: str
    amount: float
    date: Optional[date]
    category: str = DEFAULT_CATEGORY
    notes: Optional[str] = None
    is_personal: bool = True
    contact_id: Optional[str] = None
    status: Optional[SettlementStatus] = None
