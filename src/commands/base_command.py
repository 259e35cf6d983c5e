# commands/base_command.py

import discord
import logging
from abc import ABC, abstractmethod
from typing import Any


class BaseCommand(ABC):
    """
    คลาสพื้นฐานสำหรับทุกคำสั่ง
    มี functionality พื้นฐานที่ทุกคำสั่งควรมี
    """

    def __init__(self, bot):
        self.bot = bot
        self._setup_logger()

    def _setup_logger(self) -> None:
        """ตั้งค่า logger สำหรับคำสั่ง"""
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    async def execute(
        self, interaction: discord.Interaction, *args: Any, **kwargs: Any
    ) -> None:
        """
        Method หลักสำหรับการทำงานของคำสั่ง

        Args:
            interaction: Discord interaction object
            *args: Additional positional arguments
            **kwargs: Additional keyword arguments
        """
        pass

    async def _safe_respond(
        self, interaction: discord.Interaction, content: str, ephemeral: bool = True
    ) -> None:
        """
        ส่งข้อความตอบกลับอย่างปลอดภัย

        ถ้า defer หรือตอบไปแล้วจะแก้ไขข้อความเดิม ไม่เช่นนั้นจะตอบใหม่

        Args:
            interaction: Discord interaction
            content: ข้อความที่จะส่ง
            ephemeral: แสดงข้อความแค่ผู้ใช้คนเดียวเห็นหรือไม่
        """
        try:
            if interaction.response.is_done():
                await interaction.edit_original_response(content=content)
            else:
                await interaction.response.send_message(content, ephemeral=ephemeral)
        except discord.DiscordException as e:
            self.logger.error(f"Error sending response: {str(e)}")
