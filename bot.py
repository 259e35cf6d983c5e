import discord
from discord.ext import commands
from discord import app_commands
import logging

from src.utils.config import BotConfig
from src.utils.error_handler import GlobalErrorHandler
from src.utils.webhook_client import WebhookClient

logger = logging.getLogger(__name__)


class RelayBot(commands.Bot):
    """บอทที่ส่งต่อ slash commands ไปยัง n8n webhook"""

    EXTENSIONS = ["src.cogs.relay"]

    def __init__(self, config: BotConfig):
        self.config = config

        intents = discord.Intents.default()
        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=intents,
            application_id=config.application_id,
        )
        self.tree.on_error = self._handle_tree_error

        self.webhook = WebhookClient(config.webhook_url, timeout=config.webhook_timeout)
        self.error_handler = GlobalErrorHandler(self)

    async def setup_hook(self):
        """ฟังก์ชันที่จะทำงานก่อนเชื่อมต่อ gateway"""
        await self.webhook.start()

        for extension in self.EXTENSIONS:
            await self.load_extension(extension)
            logger.info(f"✅ โหลด {extension} สำเร็จ")

        if self.config.register_commands:
            await self.register_commands()

    async def register_commands(self) -> None:
        """ลงทะเบียน slash commands กับ Discord (guild หรือ global)"""
        try:
            if self.config.guild_id:
                guild = discord.Object(id=self.config.guild_id)
                self.tree.copy_global_to(guild=guild)
                synced = await self.tree.sync(guild=guild)
                logger.info(f"📝 Registered guild commands: {', '.join(c.name for c in synced)}")
            else:
                synced = await self.tree.sync()
                logger.info(f"📝 Registered global commands: {', '.join(c.name for c in synced)}")
        except discord.HTTPException as e:
            logger.error(f"❌ ลงทะเบียนคำสั่งไม่สำเร็จ: {e}")

    async def on_ready(self):
        """เมื่อบอทพร้อมใช้งาน"""
        logger.info(f"✅ Logged in as {self.user} (ID: {self.user.id})")
        logger.info(f"📊 Connected to {len(self.guilds)} guilds")

    async def close(self):
        await self.webhook.close()
        await super().close()

    async def _handle_tree_error(
        self,
        interaction: discord.Interaction,
        error: app_commands.AppCommandError
    ):
        await self.error_handler.handle_error(interaction, error)
