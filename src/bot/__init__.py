"""Telegram administrator bot"""
from .admin_bot import AdminBot, build_admin_bot, split_message

__all__ = ["AdminBot", "build_admin_bot", "split_message"]
