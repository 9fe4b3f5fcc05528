"""Ledger store: owns the contact and expense collections."""

import threading
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

import structlog

from walletdues.database.base import KeyValueStore
from walletdues.domain.entities import (
    Contact,
    ContactDraft,
    Expense,
    ExpenseDraft,
    SettlementStatus,
    Snapshot,
)
from walletdues.domain.errors import (
    PersistenceError,
    ValidationError,
    contact_not_found,
    unknown_status,
)
from walletdues.domain.persistence import SnapshotRepository
from walletdues.domain.serialization import utc_now
from walletdues.domain.validation import validate_contact_draft, validate_expense_draft

logger = structlog.get_logger(__name__)


def new_id() -> str:
    return str(uuid.uuid4())


class LedgerStore:
    """In-memory contacts and expenses with write-through persistence.

    Records are kept newest first. Every mutation that changes the collections
    is followed by a full snapshot write; a failed write is logged and does
    not reach the caller. Operations on unknown ids are no-ops.
    """

    def __init__(
        self,
        repository: Optional[SnapshotRepository] = None,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ):
        """Initialize the ledger, loading any stored snapshot.

        Args:
            repository: Snapshot repository; None keeps the ledger in memory only
            clock: Timestamp source for created/updated fields
            id_factory: Source of new record ids
        """
        self.repository = repository
        self.clock = clock
        self.id_factory = id_factory
        self._lock = threading.RLock()

        snapshot = repository.load() if repository is not None else Snapshot()
        self._contacts: list[Contact] = list(snapshot.contacts)
        self._expenses: list[Expense] = list(snapshot.expenses)

    @property
    def contacts(self) -> tuple[Contact, ...]:
        with self._lock:
            return tuple(self._contacts)

    @property
    def expenses(self) -> tuple[Expense, ...]:
        with self._lock:
            return tuple(self._expenses)

    def snapshot(self) -> Snapshot:
        """Return the current collections as a snapshot."""
        with self._lock:
            return Snapshot(contacts=tuple(self._contacts), expenses=tuple(self._expenses))

    def get_contact(self, contact_id: str) -> Optional[Contact]:
        with self._lock:
            for contact in self._contacts:
                if contact.id == contact_id:
                    return contact
        return None

    def get_expense(self, expense_id: str) -> Optional[Expense]:
        with self._lock:
            for expense in self._expenses:
                if expense.id == expense_id:
                    return expense
        return None

    def resolve_contact(self, expense: Expense) -> Optional[Contact]:
        """Return the contact an expense points at, if it still exists."""
        if expense.contact_id is None:
            return None
        return self.get_contact(expense.contact_id)

    def add_contact(self, draft: ContactDraft) -> Contact:
        """Create a contact from a draft.

        Raises:
            ValidationError: If the draft is not valid
        """
        clean = validate_contact_draft(draft)
        with self._lock:
            contact = Contact(
                id=self.id_factory(),
                name=clean.name,
                email=clean.email,
                phone=clean.phone,
                note=clean.note,
                created_at=self.clock(),
            )
            self._contacts.insert(0, contact)
            self._persist()
        logger.info("contact_added", contact_id=contact.id)
        return contact

    def add_expense(self, draft: ExpenseDraft) -> Expense:
        """Create an expense from a draft.

        Personal expenses are always settled; shared ones start as pending
        unless the draft names another status.

        Raises:
            ValidationError: If the draft is invalid or names an unknown contact
        """
        clean = validate_expense_draft(draft)
        with self._lock:
            if clean.contact_id is not None and self.get_contact(clean.contact_id) is None:
                raise ValidationError(contact_not_found(clean.contact_id))

            now = self.clock()
            expense = Expense(
                id=self.id_factory(),
                description=clean.description,
                amount=clean.amount,
                date=clean.date,
                category=clean.category,
                notes=clean.notes,
                is_personal=clean.is_personal,
                contact_id=clean.contact_id,
                status=clean.status,
                reminder_count=0,
                created_at=now,
                updated_at=now,
            )
            self._expenses.insert(0, expense)
            self._persist()
        logger.info("expense_added", expense_id=expense.id, is_personal=expense.is_personal)
        return expense

    def update_expense_status(self, expense_id: str, status: SettlementStatus | str) -> bool:
        """Move an expense to a new settlement status.

        Any status may follow any other. Entering ``reminded``, including from
        ``reminded``, counts one more reminder. Personal expenses are always
        settled and are left untouched.

        Returns:
            True if the expense exists, is shared, and was updated
        """
        try:
            status = SettlementStatus(status)
        except ValueError as e:
            raise ValidationError(unknown_status(str(status))) from e
        with self._lock:
            for index, expense in enumerate(self._expenses):
                if expense.id != expense_id:
                    continue
                if expense.is_personal:
                    logger.info("status_change_ignored", expense_id=expense_id, reason="personal")
                    return False
                reminder_count = expense.reminder_count
                if status == SettlementStatus.REMINDED:
                    reminder_count += 1
                self._expenses[index] = replace(
                    expense,
                    status=status,
                    reminder_count=reminder_count,
                    updated_at=self.clock(),
                )
                self._persist()
                logger.info(
                    "expense_status_changed",
                    expense_id=expense_id,
                    old_status=expense.status.value,
                    new_status=status.value,
                )
                return True
        return False

    def remove_expense(self, expense_id: str) -> bool:
        """Delete an expense.

        Returns:
            True if an expense was removed
        """
        with self._lock:
            remaining = [e for e in self._expenses if e.id != expense_id]
            if len(remaining) == len(self._expenses):
                return False
            self._expenses = remaining
            self._persist()
        logger.info("expense_removed", expense_id=expense_id)
        return True

    def remove_contact(self, contact_id: str) -> bool:
        """Delete a contact and orphan its expenses.

        Expenses that referenced the contact lose their ``contact_id``; every
        other field, ``is_personal`` and ``status`` included, is left as is.

        Returns:
            True if a contact was removed
        """
        with self._lock:
            remaining = [c for c in self._contacts if c.id != contact_id]
            if len(remaining) == len(self._contacts):
                return False
            self._contacts = remaining
            orphaned = 0
            for index, expense in enumerate(self._expenses):
                if expense.contact_id == contact_id:
                    self._expenses[index] = replace(expense, contact_id=None)
                    orphaned += 1
            self._persist()
        logger.info("contact_removed", contact_id=contact_id, orphaned_expenses=orphaned)
        return True

    def _persist(self) -> None:
        if self.repository is None:
            return
        try:
            self.repository.save(self._contacts, self._expenses)
        except PersistenceError as e:
            logger.error("snapshot_save_failed", reason=str(e))


def open_ledger(
    store: KeyValueStore,
    clock: Callable[[], datetime] = utc_now,
    id_factory: Callable[[], str] = new_id,
) -> LedgerStore:
    """Create a ledger backed by a key-value store, loading its snapshot."""
    return LedgerStore(
        repository=SnapshotRepository(store, clock=clock),
        clock=clock,
        id_factory=id_factory,
    )
