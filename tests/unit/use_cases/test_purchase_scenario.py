"""End-to-end purchase through the lifecycle manager with mocked clients"""

import pytest

from src.app.services.payment_gateway import ChargeStatus
from src.app.use_cases.transactions.dtos import CreateTransactionCommandDTO


@pytest.mark.asyncio
async def test_create_then_paid_check_provisions_once(manager, transaction_repo, mock_gateway, mock_provisioning):
    """
    Given: Prices {1gb: 1000} and a gateway answering charge X1 / QR1
    When: A 1gb order is created and its payment later reported successful
    Then: The order is charged 1000 and provisioned exactly once
    """
    # Create
    created = await manager.create(CreateTransactionCommandDTO(product_type="1gb", username="budi"))

    assert created.value.final_price == 1000
    assert created.value.transaction_id == "X1"
    assert (await transaction_repo.get("X1")).provisioned is False

    # Pay
    mock_gateway.get_status.return_value = ChargeStatus(status="success")
    checked = await manager.check_status("X1")

    stored = await transaction_repo.get("X1")
    assert checked.value.status == "success"
    assert stored.status == "success"
    assert stored.provisioned is True
    assert mock_provisioning.create_server.await_count == 1

    # Check again
    await manager.check_status("X1")
    assert mock_provisioning.create_server.await_count == 1


@pytest.mark.asyncio
async def test_listing_active_transactions(manager):
    await manager.create(CreateTransactionCommandDTO(product_type="1gb", username="budi"))

    active = await manager.list_active()

    assert [t.id for t in active] == ["X1"]
