"""Utility for resolving contact names to IDs."""

from walletdues.domain.entities import Contact
from walletdues.domain.errors import ValidationError


def resolve_contact(contacts: tuple[Contact, ...] | list[Contact], contact: str) -> Contact:
    """Resolve a contact ID or name to a contact.

    Args:
        contacts: Contacts to search
        contact: Contact ID, or a name (case-insensitive) that matches exactly one contact

    Returns:
        Matching contact

    Raises:
        ValidationError: If no contact matches or the name is ambiguous
    """
    for candidate in contacts:
        if candidate.id == contact:
            return candidate

    wanted = contact.strip().lower()
    matches = [c for c in contacts if c.name.lower() == wanted]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        raise ValidationError(
            f"Contact name '{contact}' is ambiguous ({len(matches)} matches); use the contact ID"
        )
    raise ValidationError(f"Contact '{contact}' not found")
