import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from unittest.mock import AsyncMock, MagicMock

from config import ApplicationConfig
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.app.services.payment_gateway import Charge, ChargeStatus, CancelAcknowledgement
from src.app.services.provisioning_service import ProvisioningResult
from src.depends import ServiceContainer


@pytest.fixture
def gateway():
    """Gateway double: charge ATL1 with a QR string, pending until told otherwise"""
    gateway = MagicMock()
    gateway.create_charge = AsyncMock(
        return_value=Charge(id="ATL1", qr_string="00020101QRIS", fee=150, get_balance=850)
    )
    gateway.get_status = AsyncMock(return_value=ChargeStatus(status="pending"))
    gateway.cancel_charge = AsyncMock(return_value=CancelAcknowledgement(acknowledged=True))
    return gateway


@pytest.fixture
def provisioning():
    provisioning = MagicMock()
    provisioning.create_server = AsyncMock(
        return_value=ProvisioningResult(
            user={"id": 7, "username": "budi"},
            server={"id": 42, "name": "budi-server"},
            password="budi123",
            email="budi@panel.com",
        )
    )
    provisioning.create_admin_panel = AsyncMock(
        return_value=ProvisioningResult(user={"id": 8, "root_admin": True}, password="budi456", email="budi@admin.com")
    )
    return provisioning


@pytest.fixture
def notifications():
    notifications = MagicMock()
    notifications.send_message = AsyncMock(return_value=True)
    return notifications


@pytest.fixture
def container(tmp_path, gateway, provisioning, notifications):
    """Services over JSON files in tmp_path with external clients replaced"""
    qr_renderer = MagicMock()
    qr_renderer.to_data_url = MagicMock(return_value="data:image/png;base64,QR")
    return ServiceContainer(
        ApplicationConfig,
        gateway=gateway,
        provisioning=provisioning,
        notifications=notifications,
        qr_renderer=qr_renderer,
        password_hasher=BcryptPasswordHasher(rounds=4),
        data_dir=str(tmp_path),
    )


@pytest_asyncio.fixture
async def client(container):
    """Create test client; the lifespan is not run so no workers or bot start"""
    from src.api.app import create_app

    app = create_app(ApplicationConfig, container)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def api():
    return ApplicationConfig.API_PREFIX
