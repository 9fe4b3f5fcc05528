"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class PersistenceError(DomainError):
    """The key-value store could not be read or written."""


def required_field(field: str) -> str:
    """Return message for a missing required field."""
    return f"{field} is required"


def too_long(field: str, limit: int) -> str:
    """Return message for a field exceeding its input limit."""
    return f"{field} must be at most {limit} characters"


def contact_not_found(contact_id: str) -> str:
    """Return message for a shared expense pointing at an unknown contact."""
    return f"Contact {contact_id} not found"


def unknown_status(value: str) -> str:
    """Return message for an unrecognised settlement status."""
    return f"Unknown status '{value}'. Expected one of: pending, reminded, settled"
