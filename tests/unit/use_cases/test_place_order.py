"""Unit tests for PlaceOrder"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from libs.result import Return
from src.app.services.payment_gateway import GatewayTimeoutError
from src.app.use_cases.coupons.dtos import DiscountResolutionDTO
from src.app.use_cases.orders import PlaceOrder, PlaceOrderCommandDTO
from src.domain.user import User


@pytest.fixture
def user():
    return User(id="USER_1", name="Budi", username="budi", email="budi@panel.com", password_hash="x")


@pytest.fixture
def mock_user_repo(user):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=user)
    repo.update = AsyncMock()
    return repo


@pytest.fixture
def mock_resolve_discount():
    resolver = MagicMock()
    resolver.execute = AsyncMock(
        return_value=Return.ok(DiscountResolutionDTO(discount_applied=100, discount_id="DISC_1", discount_percent=10))
    )
    return resolver


@pytest.fixture
def place_order(manager, mock_resolve_discount, mock_user_repo):
    return PlaceOrder(manager, mock_resolve_discount, mock_user_repo)


@pytest.mark.asyncio
class TestPlaceOrder:

    async def test_order_with_discount(self, place_order, transaction_repo, mock_user_repo, user):
        """
        Given: A user with an active 10% discount
        When: They order a 1gb panel with applyDiscount
        Then: 900 is charged and the order is recorded on their account
        """
        # Act
        result = await place_order.execute(
            PlaceOrderCommandDTO(product_type="1gb", username="budi", user_id="USER_1", apply_discount=True)
        )

        # Assert
        assert result.value.final_price == 900
        stored = await transaction_repo.get(result.value.transaction_id)
        assert stored.discount_id == "DISC_1"
        assert stored.user_id == "USER_1"
        assert user.order_count == 1
        assert user.total_spent == 900
        mock_user_repo.update.assert_awaited_once()

    async def test_discount_not_requested(self, place_order, mock_resolve_discount):
        result = await place_order.execute(PlaceOrderCommandDTO(product_type="1gb", username="budi", user_id="USER_1"))

        assert result.value.final_price == 1000
        mock_resolve_discount.execute.assert_not_awaited()

    async def test_invalid_product_does_not_consume_discount(self, place_order, mock_resolve_discount):
        result = await place_order.execute(
            PlaceOrderCommandDTO(product_type="nope", username="budi", user_id="USER_1", apply_discount=True)
        )

        assert result.error.code == "INVALID_PRODUCT"
        mock_resolve_discount.execute.assert_not_awaited()

    async def test_gateway_failure_is_returned(self, place_order, mock_gateway, mock_user_repo):
        mock_gateway.create_charge.side_effect = GatewayTimeoutError("30s")

        result = await place_order.execute(PlaceOrderCommandDTO(product_type="1gb", username="budi", user_id="USER_1"))

        assert result.error.code == "GATEWAY_TIMEOUT"
        mock_user_repo.update.assert_not_awaited()
