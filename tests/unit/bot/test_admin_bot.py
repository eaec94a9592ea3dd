"""Unit tests for the Telegram admin bot"""

import pytest
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

from libs.result import Return, Error
from src.bot.admin_bot import AdminBot, split_message, ADMIN_ONLY_TEXT
from src.domain.base import utc_now
from src.domain.promo import Promo
from src.domain.user import User

ADMIN_ID = "555"


def make_update(user_id="555"):
    update = MagicMock()
    update.effective_user.id = int(user_id)
    update.message.reply_text = AsyncMock()
    return update


def use_case(result):
    mock = MagicMock()
    mock.execute = AsyncMock(return_value=result)
    return mock


def make_bot(users=None, promos=None, generated=None):
    return AdminBot(
        application=MagicMock(),
        admin_id=ADMIN_ID,
        list_users=use_case(Return.ok(users or [])),
        generate_promo=use_case(generated or Return.ok(None)),
        list_promos=use_case(Return.ok(promos or [])),
    )


def sent_texts(update):
    return [c.args[0] for c in update.message.reply_text.await_args_list]


class TestSplitMessage:

    def test_short_text_is_one_part(self):
        assert split_message("hello") == ["hello"]

    def test_splits_at_paragraph_break(self):
        block = "x" * 30
        text = "\n\n".join([block] * 5)

        parts = split_message(text, limit=100, boundary=80)

        assert all(len(p) <= 100 for p in parts)
        assert parts[0] == "\n\n".join([block] * 2)
        assert "".join(parts).replace("\n", "") == "x" * 150

    def test_hard_cut_without_paragraph_break(self):
        parts = split_message("y" * 250, limit=100, boundary=80)

        assert parts == ["y" * 80, "y" * 80, "y" * 90]


@pytest.mark.asyncio
class TestAdminCommands:

    async def test_non_admin_is_refused(self):
        bot = make_bot()
        update = make_update(user_id="999")

        await bot.cmd_list_users(update, MagicMock())

        assert sent_texts(update) == [ADMIN_ONLY_TEXT]
        bot.list_users.execute.assert_not_awaited()

    async def test_start_is_open_to_everyone(self):
        update = make_update(user_id="999")

        await make_bot().cmd_start(update, MagicMock())

        assert "/listusers" in sent_texts(update)[0]

    async def test_list_users_empty(self):
        update = make_update()

        await make_bot().cmd_list_users(update, MagicMock())

        assert sent_texts(update) == ["📭 No registered users."]

    async def test_list_users(self):
        """
        Given one registered user with orders
        When the admin lists users
        Then the reply shows their id and formatted total spent
        """
        # Arrange
        user = User(name="Budi", email="budi@panel.com", password="$2b$10$hash", order_count=2, total_spent=1500000)
        update = make_update()

        # Act
        await make_bot(users=[user]).cmd_list_users(update, MagicMock())

        # Assert
        text = sent_texts(update)[0]
        assert "USERS (1)" in text
        assert user.id in text
        assert "Rp 1.500.000" in text

    async def test_add_promo(self):
        promo = Promo(code="ABCD1234", discount=15, max_uses=20, expires_at=utc_now() + timedelta(days=30))
        update = make_update()

        await make_bot(generated=Return.ok(promo)).cmd_add_promo(update, MagicMock())

        text = sent_texts(update)[0]
        assert "ABCD1234" in text
        assert "15%" in text

    async def test_add_promo_failure_is_reported(self):
        update = make_update()
        failed = Return.err(Error(code="PERSISTENCE_FAILED", message="Failed to save promo"))

        await make_bot(generated=failed).cmd_add_promo(update, MagicMock())

        assert sent_texts(update) == ["❌ Error: Failed to save promo"]

    async def test_list_promos_states(self):
        now = utc_now()
        promos = [
            Promo(code="LIVE", discount=10, max_uses=5, expires_at=now + timedelta(days=1)),
            Promo(code="OLD", discount=10, max_uses=5, expires_at=now - timedelta(days=1)),
            Promo(code="OFF", discount=10, max_uses=5, expires_at=now + timedelta(days=1), is_active=False),
        ]
        update = make_update()

        await make_bot(promos=promos).cmd_list_promos(update, MagicMock())

        text = sent_texts(update)[0]
        live, old, off = text.split("🎫 ")[2:]
        assert "✅ ACTIVE" in live
        assert "❌ EXPIRED" in old
        assert "❌ INACTIVE" in off


def test_register_handlers_adds_four_commands():
    bot = make_bot()

    bot.register_handlers()

    commands = [c.args[0].commands for c in bot.application.add_handler.call_args_list]
    assert commands == [frozenset({"start"}), frozenset({"listusers"}), frozenset({"addpromo"}), frozenset({"listpromos"})]
