import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

from config import DEFAULT_PRODUCT_PRICES
from src.adapter.repositories.in_memory_transaction_repository import InMemoryTransactionRepository
from src.app.services.payment_gateway import Charge, ChargeStatus, CancelAcknowledgement
from src.app.services.provisioning_service import ProvisioningResult
from src.app.use_cases.transactions.lifecycle_manager import TransactionLifecycleManager
from src.domain.product import ProductCatalog
from src.domain.transaction import Transaction

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def transaction_repo():
    return InMemoryTransactionRepository()


@pytest.fixture
def mock_gateway():
    """Mock payment gateway: charge X1 / QR1, pending status, acknowledged cancel"""
    gateway = MagicMock()
    gateway.create_charge = AsyncMock(return_value=Charge(id="X1", qr_string="QR1"))
    gateway.get_status = AsyncMock(return_value=ChargeStatus(status="pending"))
    gateway.cancel_charge = AsyncMock(return_value=CancelAcknowledgement(acknowledged=True))
    return gateway


@pytest.fixture
def provisioning_result():
    return ProvisioningResult(
        user={"id": 7, "username": "budi"},
        server={"id": 42, "name": "budi-server"},
        password="budi123",
        email="budi@panel.com",
    )


@pytest.fixture
def mock_provisioning(provisioning_result):
    provisioning = MagicMock()
    provisioning.create_server = AsyncMock(return_value=provisioning_result)
    provisioning.create_admin_panel = AsyncMock(
        return_value=ProvisioningResult(
            user={"id": 8, "username": "budi", "root_admin": True},
            password="budi456",
            email="budi@admin.com",
        )
    )
    return provisioning


@pytest.fixture
def mock_notifications():
    notifications = MagicMock()
    notifications.send_message = AsyncMock(return_value=True)
    return notifications


@pytest.fixture
def mock_qr_renderer():
    renderer = MagicMock()
    renderer.to_data_url = MagicMock(side_effect=lambda content: f"data:image/png;base64,<{content}>")
    return renderer


@pytest.fixture
def catalog():
    return ProductCatalog(DEFAULT_PRODUCT_PRICES)


@pytest.fixture
def manager(transaction_repo, mock_gateway, mock_provisioning, mock_notifications, catalog, mock_qr_renderer):
    """Lifecycle manager over an in-memory store and mocked clients, clock fixed at FIXED_NOW"""
    return TransactionLifecycleManager(
        transaction_repo=transaction_repo,
        gateway=mock_gateway,
        provisioning=mock_provisioning,
        notifications=mock_notifications,
        catalog=catalog,
        qr_renderer=mock_qr_renderer,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def make_transaction():
    """Factory for stored transactions with sensible defaults"""

    def _make(transaction_id: str = "X1", **overrides) -> Transaction:
        fields = dict(
            id=transaction_id,
            reff=f"WEB-{transaction_id}",
            atlantic_id=transaction_id,
            product_type="1gb",
            username="budi",
            original_price=1000,
            discount_applied=0,
            final_price=1000,
            created_at=FIXED_NOW,
            expires_at=FIXED_NOW + timedelta(minutes=10),
        )
        fields.update(overrides)
        return Transaction(**fields)

    return _make
