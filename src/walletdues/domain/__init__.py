"""Domain layer for walletdues application."""

from walletdues.domain.entities import (
    Contact,
    ContactDraft,
    Expense,
    ExpenseDraft,
    SettlementStatus,
    Snapshot,
)
from walletdues.domain.errors import DomainError, PersistenceError, ValidationError

__all__ = [
    "Contact",
    "ContactDraft",
    "Expense",
    "ExpenseDraft",
    "SettlementStatus",
    "Snapshot",
    "DomainError",
    "PersistenceError",
    "ValidationError",
]
