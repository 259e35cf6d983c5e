from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from bot import RelayBot
from src.utils.config import BotConfig


def _make_bot(config, monkeypatch):
    bot = RelayBot(config)
    monkeypatch.setattr(bot.tree, "sync", AsyncMock(return_value=[]))
    monkeypatch.setattr(bot.tree, "copy_global_to", MagicMock())
    return bot


@pytest.mark.asyncio
async def test_register_commands_globally_without_guild(config, monkeypatch):
    bot = _make_bot(config, monkeypatch)

    await bot.register_commands()

    bot.tree.sync.assert_awaited_once_with()
    bot.tree.copy_global_to.assert_not_called()


@pytest.mark.asyncio
async def test_register_commands_for_single_guild(config, monkeypatch):
    guild_config = BotConfig(
        token=config.token,
        application_id=config.application_id,
        webhook_url=config.webhook_url,
        guild_id=42,
    )
    bot = _make_bot(guild_config, monkeypatch)

    await bot.register_commands()

    guild = bot.tree.sync.await_args.kwargs["guild"]
    assert guild.id == 42
    bot.tree.copy_global_to.assert_called_once_with(guild=guild)


@pytest.mark.asyncio
async def test_register_commands_failure_is_not_fatal(config, monkeypatch):
    bot = _make_bot(config, monkeypatch)
    bot.tree.sync.side_effect = discord.HTTPException(
        MagicMock(status=500, reason="Server Error"), "boom"
    )

    await bot.register_commands()


@pytest.mark.asyncio
async def test_bot_uses_default_intents_and_numeric_application_id(config):
    bot = RelayBot(config)

    assert bot.intents == discord.Intents.default()
    assert bot.intents.guilds is True
    assert bot.application_id == 123456789
