import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


class PrettyFormatter(logging.Formatter):
    """log format แบบอ่านง่าย: เวลา, emoji ตามระดับ และข้อความ"""

    COLORS = {
        "WHITE": "\033[37m",
        "GREEN": "\033[32m",
        "YELLOW": "\033[33m",
        "RED": "\033[31m",
        "BOLD_RED": "\033[31;1m",
        "RESET": "\033[0m",
    }

    LEVEL_COLORS = {
        "DEBUG": COLORS["WHITE"],
        "INFO": COLORS["GREEN"],
        "WARNING": COLORS["YELLOW"],
        "ERROR": COLORS["RED"],
        "CRITICAL": COLORS["BOLD_RED"],
    }

    LEVEL_STYLES = {
        "DEBUG": ("🔍", "DEBUG"),
        "INFO": ("✨", "INFO"),
        "WARNING": ("⚠️", "WARN"),
        "ERROR": ("❌", "ERROR"),
        "CRITICAL": ("💥", "FATAL"),
    }

    def __init__(self, colored: bool = True):
        """
        Args:
            colored: เปิด/ปิดการแสดงสี (แสดงเฉพาะเมื่อเป็น TTY)
        """
        self.colored = colored and sys.stderr.isatty()
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        emoji, prefix = self.LEVEL_STYLES.get(record.levelname, ("", record.levelname))
        time_str = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        if self.colored:
            color = self.LEVEL_COLORS.get(record.levelname, "")
            level_prefix = f"{color}{emoji} {prefix:5}{self.COLORS['RESET']}"
        else:
            level_prefix = f"{emoji} {prefix:5}"

        # แสดงไฟล์และบรรทัดเฉพาะ debug
        if record.levelno == logging.DEBUG:
            file_info = f"[{record.filename}:{record.lineno}] "
        else:
            file_info = ""

        message = f"{time_str} {level_prefix} {file_info}{record.getMessage()}"
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


def setup_logger(log_dir: Optional[str] = "logs") -> logging.Logger:
    """ตั้งค่า root logger

    Args:
        log_dir: โฟลเดอร์สำหรับเก็บไฟล์ log (None = ไม่เขียนไฟล์)

    Returns:
        Logger ที่ตั้งค่าแล้ว
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(PrettyFormatter(colored=True))
    logger.addHandler(console)

    # discord.py log ระดับ DEBUG เยอะเกินไป
    logging.getLogger("discord").setLevel(logging.INFO)

    if log_dir:
        try:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            today = datetime.now().strftime("%Y-%m-%d")
            file_handler = logging.FileHandler(
                log_path / f"bot_{today}.log", encoding="utf-8"
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(PrettyFormatter(colored=False))
            logger.addHandler(file_handler)

        except OSError as e:
            logger.error(f"ไม่สามารถสร้างไฟล์ log ได้: {e}")

    return logger
