import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from dotenv import load_dotenv

from .constants import DEFAULT_WEBHOOK_TIMEOUT, REQUIRED_ENV_VARS
from .exceptions import ConfigError
from .validators import check_required_env

OPTIONAL_ENV_VARS = ("GUILD_ID", "NODE_ENV", "N8N_WEBHOOK_TIMEOUT", "LOG_DIR")


def read_env_snapshot(
    environ: Optional[Mapping[str, str]] = None,
) -> Mapping[str, Optional[str]]:
    """อ่านตัวแปรสภาพแวดล้อมครั้งเดียวตอนเริ่มโปรแกรม

    Args:
        environ: แหล่งข้อมูล (ถ้าไม่ระบุจะโหลด .env แล้วใช้ os.environ)

    Returns:
        Mapping ที่แก้ไขไม่ได้ของตัวแปรที่บอทใช้
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    keys = REQUIRED_ENV_VARS + OPTIONAL_ENV_VARS
    return MappingProxyType({key: environ.get(key) for key in keys})


@dataclass(frozen=True)
class BotConfig:
    """การตั้งค่าของบอทที่ผ่านการตรวจสอบแล้ว"""

    token: str
    application_id: int
    webhook_url: str
    guild_id: Optional[int] = None
    register_commands: bool = False
    webhook_timeout: float = DEFAULT_WEBHOOK_TIMEOUT

    @classmethod
    def from_snapshot(cls, snapshot: Mapping[str, Optional[str]]) -> "BotConfig":
        """
        สร้าง BotConfig จาก snapshot

        Raises:
            ConfigError: ถ้าขาดตัวแปรที่จำเป็นหรือค่าไม่ถูกต้อง
        """
        missing = check_required_env(snapshot)
        if missing:
            raise ConfigError(
                f"Missing required environment variable(s): {', '.join(missing)}",
                missing=missing,
            )

        try:
            application_id = int(snapshot["APPLICATION_ID"])
        except ValueError:
            raise ConfigError(
                f"APPLICATION_ID must be an integer, got {snapshot['APPLICATION_ID']!r}"
            )

        guild_id = snapshot.get("GUILD_ID")
        if guild_id:
            try:
                guild_id = int(guild_id)
            except ValueError:
                raise ConfigError(f"GUILD_ID must be an integer, got {guild_id!r}")
        else:
            guild_id = None

        timeout = snapshot.get("N8N_WEBHOOK_TIMEOUT")
        if timeout:
            try:
                timeout = float(timeout)
            except ValueError:
                raise ConfigError(
                    f"N8N_WEBHOOK_TIMEOUT must be a number, got {timeout!r}"
                )
            if timeout <= 0:
                raise ConfigError("N8N_WEBHOOK_TIMEOUT must be greater than 0")
        else:
            timeout = DEFAULT_WEBHOOK_TIMEOUT

        return cls(
            token=snapshot["DISCORD_TOKEN"],
            application_id=application_id,
            webhook_url=snapshot["N8N_WEBHOOK_URL"],
            guild_id=guild_id,
            register_commands=snapshot.get("NODE_ENV") == "register",
            webhook_timeout=timeout,
        )
