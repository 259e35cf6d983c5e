from typing import Any, Dict, Optional
import discord
from .base_command import BaseCommand
from src.utils.constants import REPLY_MESSAGES
from src.utils.exceptions import WebhookError


def build_payload(
    interaction: discord.Interaction,
    application_id: str,
    description: Optional[str] = None,
) -> Dict[str, Any]:
    """สร้าง payload ที่ส่งให้ n8n จาก interaction"""
    user = interaction.user
    return {
        "command": interaction.command.name if interaction.command else None,
        "description": description or None,
        "guild_id": interaction.guild_id,
        "channel_id": interaction.channel_id,
        "user": {
            "id": user.id,
            "username": user.name,
            "discriminator": user.discriminator,
        },
        # ให้ n8n ส่งข้อความกลับผ่าน bot API ได้เอง
        "response_hint": {
            "application_id": application_id,
            "interaction_token": None,
            "followup_target": {"type": "channel", "id": interaction.channel_id},
            "reply_message_id": None,
        },
    }


class RelayCommand(BaseCommand):
    """คำสั่งที่ส่งต่อไปยัง n8n webhook แล้วตอบรับทันที"""

    async def execute(
        self,
        interaction: discord.Interaction,
        description: Optional[str] = None,
    ) -> None:
        """ดำเนินการคำสั่ง relay"""
        try:
            # defer ก่อนเพื่อให้มีเวลาเรียก webhook
            await interaction.response.defer(ephemeral=False)

            payload = build_payload(
                interaction, str(self.bot.config.application_id), description
            )
            await self.bot.webhook.post(payload)

            await interaction.edit_original_response(content=REPLY_MESSAGES["ack"])
            self.logger.info(
                f"🚀 ส่งคำสั่ง {payload['command']} ของ {interaction.user} ไปยัง n8n แล้ว"
            )

        except WebhookError as e:
            self.logger.error(str(e))
            await self._safe_respond(interaction, REPLY_MESSAGES["webhook_failed"])

        except Exception:
            self.logger.exception("❌ เกิดข้อผิดพลาดระหว่างส่งคำสั่งไปยัง n8n")
            await self._safe_respond(interaction, REPLY_MESSAGES["error"])
