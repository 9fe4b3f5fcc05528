"""Validation gate for contact and expense drafts.

Drafts come straight from user input. ``is_*_submittable`` answers whether a
form may be submitted at all; ``validate_*_draft`` returns the normalized draft
or raises ValidationError. The ledger runs every draft through the latter, so
no invalid record is ever created.
"""

import math
from dataclasses import replace
from typing import Optional

from walletdues.domain.entities import (
    ContactDraft,
    ExpenseDraft,
    SettlementStatus,
    DEFAULT_CATEGORY,
)
from walletdues.domain.errors import ValidationError, required_field, too_long

MAX_CONTACT_NOTE_LENGTH = 160
MAX_EXPENSE_NOTES_LENGTH = 240


def clean_optional(value: Optional[str]) -> Optional[str]:
    """Trim a value, turning empty strings into None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _is_positive_amount(amount: Optional[float]) -> bool:
    return amount is not None and math.isfinite(amount) and amount > 0


def is_contact_submittable(draft: ContactDraft) -> bool:
    """Return True if the contact form may be submitted."""
    return bool(draft.name and draft.name.strip())


def is_expense_submittable(draft: ExpenseDraft) -> bool:
    """Return True if the expense form may be submitted."""
    if not draft.description or not draft.description.strip():
        return False
    if draft.date is None:
        return False
    if not _is_positive_amount(draft.amount):
        return False
    if not draft.is_personal and not draft.contact_id:
        return False
    return True


def validate_contact_draft(draft: ContactDraft) -> ContactDraft:
    """Normalize a contact draft.

    Args:
        draft: Raw contact input

    Returns:
        Draft with trimmed name and empty optional fields converted to None

    Raises:
        ValidationError: If the name is empty or the note is too long
    """
    if not is_contact_submittable(draft):
        raise ValidationError(required_field("Contact name"))

    note = clean_optional(draft.note)
    if note is not None and len(note) > MAX_CONTACT_NOTE_LENGTH:
        raise ValidationError(too_long("Contact note", MAX_CONTACT_NOTE_LENGTH))

    return ContactDraft(
        name=draft.name.strip(),
        email=clean_optional(draft.email),
        phone=clean_optional(draft.phone),
        note=note,
    )


def validate_expense_draft(draft: ExpenseDraft) -> ExpenseDraft:
    """Normalize an expense draft.

    The status is re-derived from ``is_personal``: personal expenses are
    always settled and never carry a contact, shared ones default to pending.

    Args:
        draft: Raw expense input

    Returns:
        Normalized draft

    Raises:
        ValidationError: If any required field is missing or invalid
    """
    if not draft.description or not draft.description.strip():
        raise ValidationError(required_field("Description"))
    if draft.date is None:
        raise ValidationError(required_field("Date"))
    if not _is_positive_amount(draft.amount):
        raise ValidationError("Amount must be a finite number greater than zero")
    if not draft.is_personal and not draft.contact_id:
        raise ValidationError(required_field("Contact for a shared expense"))

    notes = draft.notes.strip() if draft.notes else None
    if notes and len(notes) > MAX_EXPENSE_NOTES_LENGTH:
        raise ValidationError(too_long("Notes", MAX_EXPENSE_NOTES_LENGTH))

    if draft.is_personal:
        status = SettlementStatus.SETTLED
        contact_id = None
    else:
        status = SettlementStatus(draft.status) if draft.status else SettlementStatus.PENDING
        contact_id = draft.contact_id

    return replace(
        draft,
        description=draft.description.strip(),
        amount=float(draft.amount),
        category=(draft.category or "").strip() or DEFAULT_CATEGORY,
        notes=notes or None,
        contact_id=contact_id,
        status=status,
    )
