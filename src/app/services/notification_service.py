"""Notification Service Interface

Admin-facing messages about claimed coupons, paid orders and
cancellations.
"""

from abc import ABC, abstractmethod


class NotificationService(ABC):
    """
    Sink for administrator messages

    Delivery is fire-and-forget: a failed send is logged by the
    implementation and reported as False, never raised.
    """

    @abstractmethod
    async def send_message(self, text: str) -> bool:
        """
        Deliver a plain-text message to the administrator

        Returns:
            True if at least one channel accepted the message
        """
        pass
