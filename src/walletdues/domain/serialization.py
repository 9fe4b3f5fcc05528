"""Conversion between domain entities and the persisted JSON layout.

The layout uses camelCase keys and omits optional fields that are absent:

    {"contacts": [...], "expenses": [...], "lastUpdated": "2024-01-05T10:00:00.000Z"}

Decoding validates the shape of every record and raises ValidationError on the
first problem found.
"""

import math
from datetime import date, datetime, UTC
from typing import Any, Optional

from dateutil import parser as date_parser

from walletdues.domain.entities import Contact, Expense, SettlementStatus, Snapshot
from walletdues.domain.errors import ValidationError


def utc_now() -> datetime:
    """Current UTC time truncated to the millisecond precision that is persisted."""
    now = datetime.now(UTC)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def format_timestamp(value: datetime) -> str:
    """Render a datetime as UTC ISO-8601 with milliseconds and a Z suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    else:
        value = value.astimezone(UTC)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime."""
    if not isinstance(value, str):
        raise ValidationError(f"Expected timestamp string, got {type(value).__name__}")
    try:
        parsed = date_parser.isoparse(value)
    except (ValueError, OverflowError) as e:
        raise ValidationError(f"Invalid timestamp '{value}': {e}") from e
    if parsed.tzinfo is None:
        # Naive timestamps are treated as UTC
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def parse_calendar_date(value: Any) -> date:
    """Parse an ISO-8601 date (or the date part of a timestamp)."""
    if not isinstance(value, str):
        raise ValidationError(f"Expected date string, got {type(value).__name__}")
    try:
        return date_parser.isoparse(value).date()
    except (ValueError, OverflowError) as e:
        raise ValidationError(f"Invalid date '{value}': {e}") from e


def contact_to_dict(contact: Contact) -> dict[str, Any]:
    data: dict[str, Any] = {"id": contact.id, "name": contact.name}
    for key in ("email", "phone", "note"):
        value = getattr(contact, key)
        if value is not None:
            data[key] = value
    data["createdAt"] = format_timestamp(contact.created_at)
    return data


def expense_to_dict(expense: Expense) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": expense.id,
        "description": expense.description,
        "amount": expense.amount,
        "date": expense.date.isoformat(),
        "category": expense.category,
    }
    if expense.notes is not None:
        data["notes"] = expense.notes
    data["isPersonal"] = expense.is_personal
    if expense.contact_id is not None:
        data["contactId"] = expense.contact_id
    data["status"] = expense.status.value
    data["reminderCount"] = expense.reminder_count
    data["createdAt"] = format_timestamp(expense.created_at)
    data["updatedAt"] = format_timestamp(expense.updated_at)
    return data


def snapshot_to_dict(snapshot: Snapshot) -> dict[str, Any]:
    """Convert a snapshot into JSON-friendly natives."""
    last_updated = snapshot.last_updated or datetime.now(UTC)
    return {
        "contacts": [contact_to_dict(c) for c in snapshot.contacts],
        "expenses": [expense_to_dict(e) for e in snapshot.expenses],
        "lastUpdated": format_timestamp(last_updated),
    }


def _require(data: dict[str, Any], key: str, kind: type | tuple[type, ...]) -> Any:
    if key not in data:
        raise ValidationError(f"Missing field '{key}'")
    value = data[key]
    # bool is an int subclass; never accept it where a number is expected
    if isinstance(value, bool) and bool not in (kind if isinstance(kind, tuple) else (kind,)):
        raise ValidationError(f"Field '{key}' has wrong type bool")
    if not isinstance(value, kind):
        raise ValidationError(f"Field '{key}' has wrong type {type(value).__name__}")
    return value


def _optional_str(data: dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Field '{key}' has wrong type {type(value).__name__}")
    return value


def contact_from_dict(data: Any) -> Contact:
    if not isinstance(data, dict):
        raise ValidationError("Contact record must be an object")
    name = _require(data, "name", str)
    if not name.strip():
        raise ValidationError("Contact name is empty")
    return Contact(
        id=_require(data, "id", str),
        name=name,
        email=_optional_str(data, "email"),
        phone=_optional_str(data, "phone"),
        note=_optional_str(data, "note"),
        created_at=parse_timestamp(_require(data, "createdAt", str)),
    )


def expense_from_dict(data: Any) -> Expense:
    if not isinstance(data, dict):
        raise ValidationError("Expense record must be an object")

    try:
        amount = float(_require(data, "amount", (int, float)))
    except OverflowError as e:
        raise ValidationError("Expense amount is out of range") from e
    if not math.isfinite(amount):
        raise ValidationError("Expense amount is not a finite number")
    if amount < 0:
        raise ValidationError("Expense amount is negative")

    reminder_count = _require(data, "reminderCount", int)
    if reminder_count < 0:
        raise ValidationError("Reminder count is negative")

    raw_status = _require(data, "status", str)
    try:
        status = SettlementStatus(raw_status)
    except ValueError as e:
        raise ValidationError(f"Unknown status '{raw_status}'") from e

    return Expense(
        id=_require(data, "id", str),
        description=_require(data, "description", str),
        amount=amount,
        date=parse_calendar_date(_require(data, "date", str)),
        category=_require(data, "category", str),
        notes=_optional_str(data, "notes"),
        is_personal=_require(data, "isPersonal", bool),
        contact_id=_optional_str(data, "contactId"),
        status=status,
        reminder_count=reminder_count,
        created_at=parse_timestamp(_require(data, "createdAt", str)),
        updated_at=parse_timestamp(_require(data, "updatedAt", str)),
    )


def snapshot_from_dict(data: Any) -> Snapshot:
    """Hydrate a snapshot from JSON-native data.

    Raises:
        ValidationError: If the payload is not a well-shaped snapshot
    """
    if not isinstance(data, dict):
        raise ValidationError("Snapshot must be an object")
    contacts = data.get("contacts", [])
    expenses = data.get("expenses", [])
    if not isinstance(contacts, list) or not isinstance(expenses, list):
        raise ValidationError("Snapshot collections must be lists")

    last_updated = data.get("lastUpdated")
    return Snapshot(
        contacts=tuple(contact_from_dict(c) for c in contacts),
        expenses=tuple(expense_from_dict(e) for e in expenses),
        last_updated=parse_timestamp(last_updated) if last_updated is not None else None,
    )
