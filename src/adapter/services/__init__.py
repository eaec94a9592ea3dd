from .atlantic_payment_gateway import AtlanticPaymentGateway
from .pterodactyl_provisioning_service import PterodactylProvisioningService
from .notification_service import (
    LoggingNotificationService,
    TelegramNotificationService,
    CompositeNotificationService,
    create_notification_service,
)
from .qr_code_renderer import QrCodeImageRenderer
from .password_hasher import BcryptPasswordHasher

__all__ = [
    "AtlanticPaymentGateway",
    "PterodactylProvisioningService",
    "LoggingNotificationService",
    "TelegramNotificationService",
    "CompositeNotificationService",
    "create_notification_service",
    "QrCodeImageRenderer",
    "BcryptPasswordHasher",
]
