from __future__ import annotations

import pytest

from contact_dedupe.models import ContactRecord


def make_contact(
    record_id: int,
    given_name: str = "",
    family_name: str = "",
    email: str = "",
    postal_code: str = "",
    address: str = "",
) -> ContactRecord:
    return ContactRecord(
        id=record_id,
        given_name=given_name,
        family_name=family_name,
        email=email,
        postal_code=postal_code,
        address=address,
    )


@pytest.fixture
def john() -> ContactRecord:
    return make_contact(1, "John", "Doe", "john@example.com", "12345", "123 Main St")


@pytest.fixture
def jon() -> ContactRecord:
    return make_contact(2, "Jon", "Doe", "john@example.com", "12345", "123 Main Street")


@pytest.fixture
def jane() -> ContactRecord:
    return make_contact(3, "Jane", "Smith", "jane@example.com", "54321", "456 Oak Ave")
