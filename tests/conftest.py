from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from src.utils.config import BotConfig


@pytest.fixture
def config():
    return BotConfig(
        token="test-token",
        application_id=123456789,
        webhook_url="http://n8n.local/webhook/ideas",
    )


@pytest.fixture
def fake_bot(config):
    return SimpleNamespace(config=config, webhook=SimpleNamespace(post=AsyncMock(return_value=200)))


@pytest.fixture
def make_interaction():
    def _make(command_name="generate-ideas", is_done=True):
        interaction = MagicMock(spec=discord.Interaction)
        interaction.command = SimpleNamespace(name=command_name)
        interaction.guild_id = 111
        interaction.channel_id = 222
        interaction.guild = SimpleNamespace(name="Test Guild", id=111)
        interaction.user = SimpleNamespace(id=333, name="alice", discriminator="0")
        interaction.response = MagicMock()
        interaction.response.defer = AsyncMock()
        interaction.response.send_message = AsyncMock()
        interaction.response.is_done = MagicMock(return_value=is_done)
        interaction.edit_original_response = AsyncMock()
        return interaction

    return _make
