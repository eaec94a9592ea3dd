"""Unit tests for PterodactylProvisioningService using httpx.MockTransport"""

import json
import httpx
import pytest

from src.adapter.services.pterodactyl_provisioning_service import PterodactylProvisioningService
from src.app.services.payment_gateway import ChargeStatus
from src.app.services.provisioning_service import ProvisioningError
from src.app.use_cases.transactions import CheckPaymentStatus, TransactionLocks


class PanelStub:
    """Records requests and answers like the Pterodactyl application API"""

    def __init__(self, user_response=None, server_response=None):
        self.requests = []
        self.user_response = user_response or {"attributes": {"id": 7, "username": "budi"}}
        self.server_response = server_response or {"attributes": {"id": 42, "name": "budi-server"}}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        self.requests.append((request.method, request.url.path, body, request.headers.get("authorization")))
        if request.url.path == "/api/application/users":
            return httpx.Response(200, json=self.user_response)
        if request.url.path.startswith("/api/application/nests/"):
            return httpx.Response(
                200, json={"attributes": {"docker_image": "ghcr.io/node:18", "startup": "npm start"}}
            )
        if request.url.path == "/api/application/servers":
            return httpx.Response(200, json=self.server_response)
        return httpx.Response(404, json={"errors": [{"detail": "Not found"}]})


def service_with(stub) -> PterodactylProvisioningService:
    return PterodactylProvisioningService(
        domain="https://panel.test",
        application_key="ptla_key",
        location_id=2,
        nest_id=1,
        egg_id=15,
        transport=httpx.MockTransport(stub),
    )


@pytest.mark.asyncio
class TestCreateServer:

    async def test_creates_user_then_sized_server(self):
        """
        Given: A 2gb purchase for budi
        When: create_server runs
        Then: A panel user, the egg lookup and a 2048/4096 server are requested in order
        """
        # Arrange
        stub = PanelStub()

        # Act
        result = await service_with(stub).create_server("budi", "2gb")

        # Assert
        paths = [(method, path) for method, path, _, _ in stub.requests]
        assert paths == [
            ("POST", "/api/application/users"),
            ("GET", "/api/application/nests/1/eggs/15"),
            ("POST", "/api/application/servers"),
        ]
        assert all(auth == "Bearer ptla_key" for _, _, _, auth in stub.requests)

        user_body = stub.requests[0][2]
        assert user_body["email"] == "budi@panel.com"
        assert user_body["root_admin"] is False
        assert user_body["last_name"] == "User"

        server_body = stub.requests[2][2]
        assert server_body["name"] == "budi-server"
        assert server_body["user"] == 7
        assert server_body["egg"] == 15
        assert server_body["docker_image"] == "ghcr.io/node:18"
        assert server_body["limits"] == {"memory": 2048, "swap": 0, "disk": 4096, "io": 500, "cpu": 100}
        assert server_body["feature_limits"] == {"databases": 5, "backups": 5, "allocations": 5}
        assert server_body["deploy"]["locations"] == [2]
        assert server_body["environment"]["CMD_RUN"] == "npm start"

        assert result.server["id"] == 42
        assert result.email == "budi@panel.com"
        assert result.password.startswith("budi")
        assert len(result.password) == len("budi") + 3
        assert result.password[4:].isdigit()

    async def test_panel_errors_raise_with_first_detail(self):
        stub = PanelStub(user_response={"errors": [{"detail": "The username has already been taken."}]})

        with pytest.raises(ProvisioningError) as exc_info:
            await service_with(stub).create_server("budi", "1gb")

        assert exc_info.value.message == "The username has already been taken."
        assert len(stub.requests) == 1

    async def test_server_creation_error(self):
        stub = PanelStub(server_response={"errors": [{"detail": "No allocations available"}]})

        with pytest.raises(ProvisioningError, match="No allocations available"):
            await service_with(stub).create_server("budi", "unli")

    async def test_connection_failure_is_provisioning_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(ProvisioningError):
            await service_with(handler).create_server("budi", "1gb")


@pytest.mark.asyncio
async def test_admin_panel_is_root_admin_account():
    stub = PanelStub()

    result = await service_with(stub).create_admin_panel("budi")

    assert len(stub.requests) == 1
    body = stub.requests[0][2]
    assert body["root_admin"] is True
    assert body["email"] == "budi@admin.com"
    assert result.server is None
    assert result.email == "budi@admin.com"


@pytest.mark.asyncio
class TestUnexpectedPanelResponses:

    async def test_user_without_attributes_is_provisioning_error(self):
        stub = PanelStub(user_response={"object": "user", "attributes": None})

        with pytest.raises(ProvisioningError, match="no attributes"):
            await service_with(stub).create_server("budi", "1gb")

        assert len(stub.requests) == 1

    async def test_server_without_attributes_is_provisioning_error(self):
        stub = PanelStub(server_response={"object": "server"})

        with pytest.raises(ProvisioningError):
            await service_with(stub).create_server("budi", "1gb")

    async def test_admin_without_attributes_is_provisioning_error(self):
        stub = PanelStub(user_response={"object": "user", "attributes": "budi"})

        with pytest.raises(ProvisioningError):
            await service_with(stub).create_admin_panel("budi")

    async def test_paid_check_degrades_to_success_on_empty_user(
        self, transaction_repo, mock_gateway, mock_notifications, make_transaction
    ):
        """
        Given: A paid transaction and a panel answering users with attributes null
        When: The payment status is checked
        Then: The check succeeds with a provisioning error and provisioned stays False
        """
        # Arrange
        await transaction_repo.add(make_transaction("X1"))
        mock_gateway.get_status.return_value = ChargeStatus(status="success")
        use_case = CheckPaymentStatus(
            transaction_repo=transaction_repo,
            gateway=mock_gateway,
            provisioning=service_with(PanelStub(user_response={"object": "user", "attributes": None})),
            notifications=mock_notifications,
            locks=TransactionLocks(),
        )

        # Act
        result = await use_case.execute("X1")

        # Assert
        assert result.is_ok()
        assert result.value.status == "success"
        assert result.value.provisioning_error is not None
        assert (await transaction_repo.get("X1")).provisioned is False
        mock_notifications.send_message.assert_not_awaited()
