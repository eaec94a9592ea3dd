"""Telegram Admin Bot

Command bot for the service administrator: list registered users, mint
promo codes and list promo codes. Only the configured admin id may run
the list/add commands.
"""

import logging
from typing import List

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from src.app.use_cases.accounts import ListUsers
from src.app.use_cases.coupons import GeneratePromo, ListPromos
from src.app.use_cases.messages import format_rupiah
from src.domain.base import utc_now

logger = logging.getLogger(__name__)

TELEGRAM_MESSAGE_LIMIT = 4096
SPLIT_BOUNDARY = 4000

WELCOME_TEXT = (
    "🎉 Welcome to the Panel Bot!\n\n"
    "Available commands:\n"
    "/listusers - List all users\n"
    "/addpromo - Create a promo code\n"
    "/listpromos - List all promo codes\n\n"
    "This bot monitors the automatic panel store."
)
ADMIN_ONLY_TEXT = "❌ Sorry, only the admin can use this command."


def split_message(text: str, limit: int = TELEGRAM_MESSAGE_LIMIT, boundary: int = SPLIT_BOUNDARY) -> List[str]:
    """
    Split text into Telegram-sized messages

    Cuts at the last paragraph break before `boundary`; a chunk without
    one is cut hard at `boundary`.
    """
    parts = []
    while len(text) > limit:
        cut = text.rfind("\n\n", 0, boundary)
        if cut <= 0:
            cut = boundary
        parts.append(text[:cut])
        text = text[cut:].lstrip("\n")
    if text:
        parts.append(text)
    return parts


class AdminBot:
    """
    Admin command handlers on top of a python-telegram-bot Application

    Usage:
        bot = build_admin_bot(token, admin_id, list_users, generate_promo, list_promos)
        await bot.start()
        ...
        await bot.shutdown()
    """

    def __init__(
        self,
        application: Application,
        admin_id: str,
        list_users: ListUsers,
        generate_promo: GeneratePromo,
        list_promos: ListPromos,
    ):
        self.application = application
        self.admin_id = str(admin_id)
        self.list_users = list_users
        self.generate_promo = generate_promo
        self.list_promos = list_promos

    def register_handlers(self) -> None:
        self.application.add_handler(CommandHandler("start", self.cmd_start))
        self.application.add_handler(CommandHandler("listusers", self.cmd_list_users))
        self.application.add_handler(CommandHandler("addpromo", self.cmd_add_promo))
        self.application.add_handler(CommandHandler("listpromos", self.cmd_list_promos))

    def is_admin(self, update: Update) -> bool:
        return update.effective_user is not None and str(update.effective_user.id) == self.admin_id

    async def reply(self, update: Update, text: str) -> None:
        for part in split_message(text):
            await update.message.reply_text(part)

    async def cmd_start(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        await update.message.reply_text(WELCOME_TEXT)

    async def cmd_list_users(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        if not self.is_admin(update):
            await update.message.reply_text(ADMIN_ONLY_TEXT)
            return

        users = (await self.list_users.execute()).value
        if not users:
            await update.message.reply_text("📭 No registered users.")
            return

        text = f"📋 USERS ({len(users)})\n\n"
        for user in users:
            text += (
                f"👤 {user.name}\n"
                f"🆔 {user.id}\n"
                f"📧 {user.email}\n"
                f"🎯 Role: {user.role}\n"
                f"📅 Joined: {user.created_at.strftime('%d/%m/%Y')}\n"
                f"🛒 Orders: {user.order_count}\n"
                f"💰 Total spent: {format_rupiah(user.total_spent)}\n\n"
            )
        await self.reply(update, text)

    async def cmd_add_promo(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        if not self.is_admin(update):
            await update.message.reply_text(ADMIN_ONLY_TEXT)
            return

        result = await self.generate_promo.execute()
        if result.is_err():
            logger.error(f"Promo generation failed: {result.error.message}")
            await update.message.reply_text(f"❌ Error: {result.error.message}")
            return

        promo = result.value
        await update.message.reply_text(
            "🎉 NEW PROMO CODE\n\n"
            f"🛒 Code: {promo.code}\n"
            f"💰 Discount: {promo.discount}%\n"
            f"🎯 Max uses: {promo.max_uses}\n"
            f"📅 Expires: {promo.expires_at.strftime('%d/%m/%Y')}"
        )

    async def cmd_list_promos(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        if not self.is_admin(update):
            await update.message.reply_text(ADMIN_ONLY_TEXT)
            return

        promos = (await self.list_promos.execute()).value
        if not promos:
            await update.message.reply_text("📭 No promo codes available.")
            return

        now = utc_now()
        text = f"🎫 PROMO CODES ({len(promos)})\n\n"
        for promo in promos:
            if promo.is_expired(now):
                state = "❌ EXPIRED"
            elif promo.is_active:
                state = "✅ ACTIVE"
            else:
                state = "❌ INACTIVE"
            text += (
                f"🎫 {promo.code}\n"
                f"💰 Discount: {promo.discount}%\n"
                f"📊 Used: {promo.used_count}/{promo.max_uses}\n"
                f"📅 Expires: {promo.expires_at.strftime('%d/%m/%Y')}\n"
                f"🎯 Status: {state}\n\n"
            )
        await self.reply(update, text)

    async def start(self):
        """Start long polling inside the running event loop"""
        await self.application.initialize()
        await self.application.start()
        await self.application.updater.start_polling()
        logger.info("Admin bot polling started")

    async def shutdown(self):
        if self.application.updater and self.application.updater.running:
            await self.application.updater.stop()
        if self.application.running:
            await self.application.stop()
        await self.application.shutdown()
        logger.info("Admin bot shutdown complete")


def build_admin_bot(
    token: str,
    admin_id: str,
    list_users: ListUsers,
    generate_promo: GeneratePromo,
    list_promos: ListPromos,
) -> AdminBot:
    application = Application.builder().token(token).build()
    bot = AdminBot(application, admin_id, list_users, generate_promo, list_promos)
    bot.register_handlers()
    return bot
