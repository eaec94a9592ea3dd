"""Atlantic H2H payment gateway client

Form-encoded POSTs against /deposit/create, /deposit/status and
/deposit/cancel. Every response has the shape
{"status": bool, "message": str?, "data": {...}}.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar
import httpx
from pydantic import BaseModel, ValidationError
from src.app.services.payment_gateway import (
    PaymentGateway,
    GatewayRejectedError,
    GatewayTimeoutError,
    GatewayUnavailableError,
    Charge,
    ChargeStatus,
    CancelAcknowledgement,
)

logger = logging.getLogger(__name__)

USER_AGENT = "AutoBuyPanel/1.0"

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_data(model: Type[ModelT], data: Dict[str, Any]) -> ModelT:
    """Validate the `data` object; a malformed one is a rejection"""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise GatewayRejectedError(f"Malformed gateway response: {field}: {first['msg']}") from e


class AtlanticPaymentGateway(PaymentGateway):
    """
    QRIS deposits through the Atlantic H2H API

    Transport failures are translated into the gateway error hierarchy:
    - connection errors -> GatewayUnavailableError
    - timeouts -> GatewayTimeoutError
    - HTTP 5xx, non-JSON bodies, status=false -> GatewayRejectedError
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        create_timeout: float = 30.0,
        status_timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Gateway root URL, e.g. https://atlantich2h.com
            api_key: Merchant API key sent with every call
            create_timeout: Timeout for charge creation (seconds)
            status_timeout: Timeout for status and cancel calls (seconds)
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.create_timeout = create_timeout
        self.status_timeout = status_timeout
        self.transport = transport

    async def _post(self, path: str, form: Dict[str, Any], timeout: float) -> Dict[str, Any]:
        data = {"api_key": self.api_key, **form}
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=timeout, transport=self.transport
            ) as client:
                response = await client.post(path, data=data, headers={"User-Agent": USER_AGENT})
        except httpx.TimeoutException as e:
            logger.error(f"Payment gateway timed out on {path}: {e}")
            raise GatewayTimeoutError(f"Payment gateway timed out after {timeout}s") from e
        except httpx.TransportError as e:
            logger.error(f"Cannot reach payment gateway on {path}: {e}")
            raise GatewayUnavailableError(f"Cannot connect to payment gateway: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code >= 500:
            message = payload.get("message") if isinstance(payload, dict) else None
            raise GatewayRejectedError(message or f"HTTP {response.status_code} {response.reason_phrase}")

        if not isinstance(payload, dict):
            raise GatewayRejectedError("No valid response from payment gateway")

        return payload

    async def create_charge(self, amount: int, reference: str) -> Charge:
        payload = await self._post(
            "/deposit/create",
            {"reff_id": reference, "nominal": amount, "type": "ewallet", "metode": "qris"},
            self.create_timeout,
        )
        if not payload.get("status"):
            raise GatewayRejectedError(payload.get("message") or "Failed to create QRIS - Invalid response")

        data = payload.get("data")
        if not isinstance(data, dict):
            raise GatewayRejectedError("No transaction data received")

        charge = parse_data(Charge, data)
        logger.info(f"Charge created: reff={reference}, id={charge.id}, amount={amount}")
        return charge

    async def get_status(self, charge_id: str) -> ChargeStatus:
        payload = await self._post("/deposit/status", {"id": charge_id}, self.status_timeout)
        if not payload.get("status"):
            raise GatewayRejectedError(payload.get("message") or "Failed to check status")

        data = payload.get("data")
        if not isinstance(data, dict) or not data.get("status"):
            raise GatewayRejectedError("No status data received")
        return parse_data(ChargeStatus, data)

    async def cancel_charge(self, charge_id: str) -> CancelAcknowledgement:
        payload = await self._post("/deposit/cancel", {"id": charge_id}, self.status_timeout)
        if payload.get("status"):
            return CancelAcknowledgement(acknowledged=True, message=payload.get("message"))
        return CancelAcknowledgement(
            acknowledged=False,
            message=payload.get("message") or "Failed to cancel transaction",
        )
