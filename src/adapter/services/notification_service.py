"""Admin notification sinks

Messages go to the administrator's Telegram chat, with the application
log as a fallback channel.
"""

import logging
from typing import Optional
from telegram import Bot
from telegram.error import TelegramError
from src.app.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


class LoggingNotificationService(NotificationService):
    """Writes admin messages to the log; used when no bot is configured"""

    async def send_message(self, text: str) -> bool:
        logger.info(f"[ADMIN NOTIFICATION] {text}")
        return True


class TelegramNotificationService(NotificationService):
    """
    Sends plain-text messages to the admin Telegram chat

    Delivery problems are logged and reported as False. Callers never see
    a Telegram exception.
    """

    def __init__(self, bot: Bot, chat_id: str):
        """
        Args:
            bot: python-telegram-bot Bot instance
            chat_id: Administrator chat id
        """
        self.bot = bot
        self.chat_id = chat_id

    async def send_message(self, text: str) -> bool:
        try:
            await self.bot.send_message(chat_id=self.chat_id, text=text)
        except TelegramError as e:
            logger.error(f"Telegram rejected admin notification for chat {self.chat_id}: {e}")
            return False
        except Exception as e:
            logger.error(f"Unexpected error sending Telegram notification: {e}")
            return False
        logger.info(f"Admin notified on Telegram ({self.chat_id})")
        return True


class CompositeNotificationService(NotificationService):
    """Fans a message out to every sink; delivered if any sink accepted it"""

    def __init__(self, services: list[NotificationService]):
        self.services = services

    async def send_message(self, text: str) -> bool:
        delivered = False
        for service in self.services:
            try:
                delivered = await service.send_message(text) or delivered
            except Exception as e:
                logger.error(f"{type(service).__name__} failed to deliver notification: {e}")
        return delivered


def create_notification_service(
    bot: Optional[Bot] = None, admin_chat_id: Optional[str] = None
) -> NotificationService:
    """
    Build the admin notification sink

    Log only without a bot or chat id, otherwise log plus Telegram.
    """
    if bot is None or not admin_chat_id:
        return LoggingNotificationService()
    return CompositeNotificationService(
        [LoggingNotificationService(), TelegramNotificationService(bot, admin_chat_id)]
    )
