import discord
from discord.ext import commands
from discord import app_commands
import logging

from src.commands.relay_command import RelayCommand
from src.utils.constants import NEW_IDEA_OPTION_DESCRIPTION, RELAY_COMMANDS

logger = logging.getLogger(__name__)


class RelayCog(commands.Cog):
    """Cog สำหรับคำสั่งที่ส่งต่อไปยัง n8n"""

    def __init__(self, bot):
        self.bot = bot
        self.relay_cmd = RelayCommand(bot)

        # Register commands
        self._setup_commands()

    def _setup_commands(self):
        """ตั้งค่า commands"""

        # Command: generate-ideas
        @app_commands.command(
            name="generate-ideas", description=RELAY_COMMANDS["generate-ideas"]
        )
        async def generate_ideas(interaction: discord.Interaction):
            await self.relay_cmd.execute(interaction)

        # Command: new-idea
        @app_commands.command(name="new-idea", description=RELAY_COMMANDS["new-idea"])
        @app_commands.describe(description=NEW_IDEA_OPTION_DESCRIPTION)
        async def new_idea(interaction: discord.Interaction, description: str):
            await self.relay_cmd.execute(interaction, description=description)

        self.app_commands_list = [generate_ideas, new_idea]

        # เพิ่ม commands เข้า CommandTree
        for cmd in self.app_commands_list:
            self.bot.tree.add_command(cmd)
            logger.debug(f"✅ ลงทะเบียนคำสั่ง: {cmd.name}")

        logger.info("✅ ลงทะเบียนคำสั่งทั้งหมดสำเร็จ")

    async def cog_unload(self):
        for cmd in self.app_commands_list:
            self.bot.tree.remove_command(cmd.name)


async def setup(bot):
    await bot.add_cog(RelayCog(bot))
