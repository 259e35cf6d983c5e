import asyncio
import logging
import signal
import sys
from typing import Mapping, Optional

from src.utils.config import BotConfig, read_env_snapshot
from src.utils.exceptions import ConfigError
from src.utils.logging_config import setup_logger
from bot import RelayBot

logger = logging.getLogger(__name__)


class BotManager:
    """จัดการการทำงานของบอท"""

    def __init__(self, snapshot: Mapping[str, Optional[str]]):
        self.snapshot = snapshot
        self.bot: Optional[RelayBot] = None
        self.shutdown_flag = False
        self._shutdown_task: Optional[asyncio.Task] = None

    def validate_env(self) -> BotConfig:
        """ตรวจสอบตัวแปรสภาพแวดล้อมและสร้าง BotConfig

        Raises:
            ConfigError: ถ้าขาดตัวแปรที่จำเป็นหรือค่าไม่ถูกต้อง
        """
        return BotConfig.from_snapshot(self.snapshot)

    def setup_signal_handlers(self):
        """ตั้งค่าตัวจัดการสัญญาณระบบ"""
        loop = asyncio.get_running_loop()

        for signum in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(signum, self.handle_shutdown, signum)
            except NotImplementedError:
                # Windows ไม่รองรับ add_signal_handler
                pass

    def handle_shutdown(self, signum: int) -> None:
        """เรียกเมื่อได้รับ SIGINT/SIGTERM (ต้องอยู่ใน event loop)"""
        logger.info(f"🛑 ได้รับสัญญาณ {signal.Signals(signum).name}")
        self.shutdown_flag = True
        if self.bot and self._shutdown_task is None:
            logger.info("⏳ กำลังปิดบอทอย่างปลอดภัย...")
            self._shutdown_task = asyncio.create_task(self.shutdown())

    async def shutdown(self):
        """ปิดบอทอย่างปลอดภัย"""
        if self.bot and not self.bot.is_closed():
            await self.bot.close()
            logger.info("👋 ปิดบอทเรียบร้อยแล้ว")

    async def run(self):
        """เริ่มการทำงานของบอท"""
        config = self.validate_env()
        self.setup_signal_handlers()

        logger.info("🚀 เริ่มต้นบอท...")
        async with RelayBot(config) as self.bot:
            await self.bot.start(config.token)


def run_bot():
    """ฟังก์ชันหลักสำหรับเริ่มบอท"""
    snapshot = read_env_snapshot()
    setup_logger(snapshot.get("LOG_DIR") or "logs")

    try:
        manager = BotManager(snapshot)
        asyncio.run(manager.run())
    except ConfigError as e:
        # หยุดก่อนเชื่อมต่อ Discord
        logger.critical(e.message)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("👋 ปิดบอทด้วยการกด Ctrl+C")
    except Exception as e:
        logger.critical(f"❌ เกิดข้อผิดพลาด: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    run_bot()
