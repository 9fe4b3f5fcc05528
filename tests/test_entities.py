"""Tests for domain entities."""

import pytest
from datetime import datetime, date, UTC

from walletdues.domain.entities import Contact, Expense, SettlementStatus


def _expense(**overrides):
    values = dict(
        id="e-1",
        description="Dinner",
        amount=40.0,
        date=date(2024, 1, 5),
        category="General",
        is_personal=False,
        contact_id="c-1",
        status=SettlementStatus.PENDING,
        reminder_count=0,
        created_at=datetime(2024, 1, 5, tzinfo=UTC),
        updated_at=datetime(2024, 1, 5, tzinfo=UTC),
    )
    values.update(overrides)
    return Expense(**values)


class TestContact:
    """Tests for Contact entity."""

    def test_optional_fields_default_to_none(self):
        contact = Contact(id="c-1", name="Alex", created_at=datetime.now(UTC))
        assert contact.email is None
        assert contact.phone is None
        assert contact.note is None

    def test_contact_immutability(self):
        contact = Contact(id="c-1", name="Alex", created_at=datetime.now(UTC))
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            contact.name = "Sam"


class TestExpense:
    """Tests for Expense entity."""

    def test_is_settled(self):
        assert _expense(status=SettlementStatus.SETTLED).is_settled
        assert not _expense(status=SettlementStatus.REMINDED).is_settled

    def test_is_orphaned(self):
        assert _expense(contact_id=None).is_orphaned
        assert not _expense().is_orphaned
        assert not _expense(is_personal=True, contact_id=None).is_orphaned

    def test_expense_equality(self):
        assert _expense() == _expense()
        assert _expense() != _expense(reminder_count=1)


def test_status_values_match_stored_strings():
    assert [s.value for s in SettlementStatus] == ["pending", "reminded", "settled"]
    assert SettlementStatus("reminded") is SettlementStatus.REMINDED
