"""Unit tests for Transaction domain entity"""

import pytest
from datetime import datetime, timedelta, timezone
from pydantic import ValidationError

from src.domain.transaction import (
    Transaction,
    STATUS_PENDING,
    generate_reference,
    generate_temporary_id,
)

CREATED = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def build(**overrides) -> Transaction:
    fields = dict(
        id="X1",
        reff="WEB-1",
        atlantic_id="X1",
        product_type="1gb",
        username="budi",
        original_price=1000,
        discount_applied=0,
        final_price=1000,
        created_at=CREATED,
        expires_at=CREATED + timedelta(minutes=10),
    )
    fields.update(overrides)
    return Transaction(**fields)


class TestTransactionCreation:

    def test_new_transaction_is_pending_and_unprovisioned(self):
        # Act
        transaction = build()

        # Assert
        assert transaction.status == STATUS_PENDING
        assert transaction.provisioned is False
        assert transaction.is_paid is False

    def test_discounted_price(self):
        transaction = build(discount_applied=100, final_price=900)

        assert transaction.final_price == transaction.original_price - transaction.discount_applied

    def test_rejects_inconsistent_final_price(self):
        with pytest.raises(ValidationError):
            build(discount_applied=100, final_price=1000)

    def test_rejects_negative_discount(self):
        with pytest.raises(ValidationError):
            build(discount_applied=-100, final_price=1100)

    def test_pricing_fields_are_immutable(self):
        transaction = build()

        with pytest.raises(ValidationError):
            transaction.final_price = 1

    def test_status_is_mutable(self):
        transaction = build()

        transaction.status = "success"

        assert transaction.is_paid is True

    def test_document_uses_camel_case(self):
        document = build().to_document()

        assert document["atlanticId"] == "X1"
        assert document["finalPrice"] == 1000
        assert document["isAdminPanel"] is False
        assert "final_price" not in document


class TestTransactionLifecycle:

    def test_mark_provisioned_only_once(self):
        """
        Given: A transaction already provisioned
        When: mark_provisioned is called again
        Then: It refuses
        """
        transaction = build()
        transaction.mark_provisioned()

        with pytest.raises(ValueError):
            transaction.mark_provisioned()
        assert transaction.provisioned is True

    def test_expiry_is_strictly_after_expires_at(self):
        transaction = build()

        assert transaction.is_expired(transaction.expires_at) is False
        assert transaction.is_expired(transaction.expires_at + timedelta(seconds=1)) is True

    def test_stale_after_max_age(self):
        transaction = build(expires_at=CREATED + timedelta(days=7))

        assert transaction.is_stale(CREATED + timedelta(hours=23), timedelta(hours=24)) is False
        assert transaction.is_stale(CREATED + timedelta(hours=25), timedelta(hours=24)) is True

    def test_charge_id_falls_back_to_id(self):
        assert build(id="TEMP_1", atlantic_id=None).charge_id == "TEMP_1"
        assert build(id="TEMP_2", atlantic_id="X9").charge_id == "X9"


class TestIdentifiers:

    def test_references_are_unique(self):
        references = {generate_reference() for _ in range(1000)}

        assert len(references) == 1000
        assert all(r.startswith("WEB-") for r in references)

    def test_temporary_ids_are_unique(self):
        ids = {generate_temporary_id() for _ in range(1000)}

        assert len(ids) == 1000
        assert all(i.startswith("TEMP_") for i in ids)
