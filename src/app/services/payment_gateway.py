"""Payment Gateway Interface

Defines the contract for creating, polling and cancelling QRIS charges
with the external payment gateway.
"""

from abc import ABC, abstractmethod
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator


class PaymentGatewayError(Exception):
    """Base class for gateway failures"""

    code = "GATEWAY_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class GatewayUnavailableError(PaymentGatewayError):
    """Gateway could not be reached (connection refused, DNS, no response)"""

    code = "GATEWAY_UNAVAILABLE"


class GatewayTimeoutError(PaymentGatewayError):
    """Gateway did not answer within the call timeout"""

    code = "GATEWAY_TIMEOUT"


class GatewayRejectedError(PaymentGatewayError):
    """Gateway answered with an error payload or a malformed body"""

    code = "GATEWAY_REJECTED"


class Charge(BaseModel):
    """Charge data returned by the gateway on creation (`data` object)"""

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    qr_string: Optional[str] = None
    qr_image: Optional[str] = None
    expired_at: Optional[str] = None
    fee: Optional[int] = None
    get_balance: Optional[int] = None

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v):
        return str(v) if v is not None and v != "" else None

    @field_validator("fee", "get_balance", mode="before")
    @classmethod
    def whole_rupiah(cls, v):
        if v is None or v == "":
            return None
        return int(float(v))


class ChargeStatus(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: str


class CancelAcknowledgement(BaseModel):
    acknowledged: bool
    message: Optional[str] = None


class PaymentGateway(ABC):
    """
    Payment gateway client

    Every call is a blocking remote request with a fixed timeout. Failures
    raise GatewayUnavailableError, GatewayTimeoutError or
    GatewayRejectedError so callers can tell the causes apart.
    """

    @abstractmethod
    async def create_charge(self, amount: int, reference: str) -> Charge:
        """
        Create a QRIS charge

        Args:
            amount: Amount to charge (Rupiah)
            reference: Local reference sent as reff_id

        Returns:
            Charge with the gateway id and QR payload
        """
        pass

    @abstractmethod
    async def get_status(self, charge_id: str) -> ChargeStatus:
        """
        Fetch the current status of a charge

        Args:
            charge_id: Gateway charge id

        Returns:
            ChargeStatus as reported by the gateway
        """
        pass

    @abstractmethod
    async def cancel_charge(self, charge_id: str) -> CancelAcknowledgement:
        """
        Ask the gateway to cancel a charge

        A rejected cancel is returned as acknowledged=False rather than
        raised; transport failures still raise.
        """
        pass
