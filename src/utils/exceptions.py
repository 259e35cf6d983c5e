from typing import List, Optional


class BotError(Exception):
    """Base exception class สำหรับ bot"""
    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code
        super().__init__(message)


class ConfigError(BotError):
    """Exception เมื่อการตั้งค่าไม่ครบหรือไม่ถูกต้อง"""
    def __init__(self, message: str, missing: Optional[List[str]] = None):
        self.missing = list(missing or [])
        super().__init__(message, code="config")


class WebhookError(BotError):
    """Exception เมื่อ n8n webhook ตอบกลับด้วยสถานะที่ไม่ใช่ 2xx"""
    def __init__(self, status: int, reason: Optional[str] = None):
        self.status = status
        self.reason = reason or ""
        super().__init__(
            f"Webhook request failed: {status} {self.reason}".rstrip(),
            code="webhook",
        )
