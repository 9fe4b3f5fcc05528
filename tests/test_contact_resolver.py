"""Tests for contact resolution."""

import pytest
from datetime import datetime, UTC

from walletdues.domain.entities import Contact
from walletdues.domain.errors import ValidationError
from walletdues.utils.contact_resolver import resolve_contact

CREATED = datetime(2024, 1, 1, tzinfo=UTC)


@pytest.fixture
def contacts():
    return (
        Contact(id="c-1", name="Alex Rivera", created_at=CREATED),
        Contact(id="c-2", name="Sam", created_at=CREATED),
        Contact(id="c-3", name="Sam", created_at=CREATED),
    )


def test_resolve_by_id(contacts):
    assert resolve_contact(contacts, "c-2").id == "c-2"


def test_resolve_by_name_case_insensitive(contacts):
    assert resolve_contact(contacts, "alex rivera").id == "c-1"


def test_ambiguous_name(contacts):
    with pytest.raises(ValidationError, match="ambiguous"):
        resolve_contact(contacts, "Sam")


def test_unknown_contact(contacts):
    with pytest.raises(ValidationError, match="not found"):
        resolve_contact(contacts, "Jordan")
