from .notification_service import NotificationService
from .payment_gateway import (
    PaymentGateway,
    PaymentGatewayError,
    GatewayUnavailableError,
    GatewayTimeoutError,
    GatewayRejectedError,
    Charge,
    ChargeStatus,
    CancelAcknowledgement,
)
from .provisioning_service import ProvisioningService, ProvisioningError, ProvisioningResult
from .qr_code_renderer import QrCodeRenderer
from .password_hasher import PasswordHasher

__all__ = [
    "NotificationService",
    "PaymentGateway",
    "PaymentGatewayError",
    "GatewayUnavailableError",
    "GatewayTimeoutError",
    "GatewayRejectedError",
    "Charge",
    "ChargeStatus",
    "CancelAcknowledgement",
    "ProvisioningService",
    "ProvisioningError",
    "ProvisioningResult",
    "QrCodeRenderer",
    "PasswordHasher",
]
