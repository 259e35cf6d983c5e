from typing import Dict, Type
import discord
import traceback
import logging

from .exceptions import BotError, WebhookError
from .constants import REPLY_MESSAGES

logger = logging.getLogger(__name__)


class ErrorData:
    """Class เก็บข้อมูล Error"""
    def __init__(
        self,
        message: str,
        show_traceback: bool = False,
        ephemeral: bool = True,
        log_level: int = logging.ERROR
    ):
        self.message = message
        self.show_traceback = show_traceback
        self.ephemeral = ephemeral
        self.log_level = log_level


class GlobalErrorHandler:
    """จัดการ Error ของ slash commands แบบรวมศูนย์

    ผู้ใช้จะเห็นเฉพาะข้อความทั่วไป รายละเอียดทั้งหมดอยู่ใน log
    """

    DEFAULT_ERROR = ErrorData(REPLY_MESSAGES["error"], show_traceback=True)

    def __init__(self, bot):
        self.bot = bot
        self._setup_error_mappings()

    def _setup_error_mappings(self):
        """กำหนด mapping ระหว่าง Exception และวิธีจัดการ"""
        self.error_mappings: Dict[Type[Exception], ErrorData] = {
            WebhookError: ErrorData(REPLY_MESSAGES["webhook_failed"]),
            BotError: ErrorData(REPLY_MESSAGES["error"]),
        }

    async def handle_error(
        self,
        interaction: discord.Interaction,
        error: Exception,
    ) -> None:
        """
        จัดการ error หลัก

        Args:
            interaction: Interaction ที่เกิด error
            error: Exception ที่เกิดขึ้น
        """
        try:
            # Unwrap error จริง
            error = getattr(error, 'original', error)

            error_data = self._get_error_data(error)
            self._log_error(error, error_data, interaction)
            await self._send_error_response(interaction, error_data)

        except Exception as e:
            logger.error(f"Error in error handler: {e}\n{traceback.format_exc()}")

    def _get_error_data(self, error: Exception) -> ErrorData:
        """หา ErrorData ที่เหมาะสมสำหรับ error"""
        for error_type, data in self.error_mappings.items():
            if isinstance(error, error_type):
                return data
        return self.DEFAULT_ERROR

    def _log_error(
        self,
        error: Exception,
        error_data: ErrorData,
        interaction: discord.Interaction
    ) -> None:
        """บันทึก error ลง log"""
        log_message = self._create_log_message(error, interaction)

        if error_data.show_traceback:
            log_message += "\n" + "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )

        logger.log(error_data.log_level, log_message)

    async def _send_error_response(
        self,
        interaction: discord.Interaction,
        error_data: ErrorData,
    ) -> None:
        """ส่ง error response ไปยังผู้ใช้"""
        try:
            if interaction.response.is_done():
                await interaction.edit_original_response(content=error_data.message)
            else:
                await interaction.response.send_message(
                    error_data.message, ephemeral=error_data.ephemeral
                )
        except discord.DiscordException as e:
            logger.error(f"Error sending error response: {e}")

    def _create_log_message(
        self,
        error: Exception,
        interaction: discord.Interaction
    ) -> str:
        """สร้างข้อความ log สำหรับ error

        Args:
            error: Exception ที่เกิดขึ้น
            interaction: Interaction ที่เกิด error

        Returns:
            str: ข้อความ log ที่จัดรูปแบบแล้ว
        """
        user = interaction.user
        command = interaction.command.name if interaction.command else "Unknown"

        log_parts = [
            f"Error in command '{command}'",
            f"User: {user} (ID: {user.id})",
        ]

        if interaction.guild:
            log_parts.append(f"Guild: {interaction.guild.name} (ID: {interaction.guild.id})")
        else:
            log_parts.append("Guild: DM")

        log_parts.append(f"Error: {type(error).__name__}: {error}")

        return " | ".join(log_parts)
