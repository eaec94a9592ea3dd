"""Unit tests for Promo and UserDiscount domain entities"""

import pytest
from datetime import datetime, timedelta, timezone
from pydantic import ValidationError

from src.domain.promo import Promo, UserDiscount, discount_amount, generate_coupon_code

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestPromo:

    def test_code_is_upper_cased(self):
        promo = Promo(code="hemat10", discount=10, max_uses=5, expires_at=NOW + timedelta(days=30))

        assert promo.code == "HEMAT10"

    def test_discount_must_be_a_percentage(self):
        with pytest.raises(ValidationError):
            Promo(code="X", discount=150, max_uses=5, expires_at=NOW)

    def test_expired_and_exhausted(self):
        promo = Promo(code="X", discount=10, max_uses=2, used_count=2, expires_at=NOW - timedelta(days=1))

        assert promo.is_expired(NOW) is True
        assert promo.is_exhausted() is True

    def test_document_round_trip_keeps_camel_case(self):
        promo = Promo(code="X", discount=10, max_uses=2, expires_at=NOW)

        document = promo.to_document()

        assert document["maxUses"] == 2
        assert Promo.model_validate(document) == promo


class TestUserDiscount:

    def test_active_until_used_or_expired(self):
        discount = UserDiscount(user_id="U1", coupon_code="X", discount_percent=10, expires_at=NOW + timedelta(days=7))

        assert discount.is_active(NOW) is True
        assert discount.is_active(NOW + timedelta(days=8)) is False

        discount.mark_used(NOW)

        assert discount.is_active(NOW) is False
        assert discount.used_at == NOW


class TestDiscountAmount:

    def test_rounds_half_up(self):
        assert discount_amount(1000, 10) == 100
        assert discount_amount(2005, 10) == 201
        assert discount_amount(15, 10) == 2

    def test_coupon_code_shape(self):
        code = generate_coupon_code()

        assert len(code) == 8
        assert code == code.upper()
