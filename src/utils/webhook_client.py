import logging
from typing import Any, Dict, Optional

import aiohttp

from .constants import DEFAULT_WEBHOOK_TIMEOUT
from .exceptions import WebhookError

logger = logging.getLogger(__name__)


class WebhookClient:
    """ส่ง payload ไปยัง n8n webhook (POST ครั้งเดียว ไม่มี retry)"""

    def __init__(self, url: str, timeout: float = DEFAULT_WEBHOOK_TIMEOUT):
        self.url = url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    async def start(self) -> None:
        """เปิด session (ถ้ายังไม่เปิด)"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
            )

    async def close(self) -> None:
        """ปิด session"""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> "WebhookClient":
        await self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def post(self, payload: Dict[str, Any]) -> int:
        """
        ส่ง payload ไปยัง webhook

        Args:
            payload: ข้อมูลที่จะส่งเป็น JSON

        Returns:
            int: HTTP status เมื่อสำเร็จ

        Raises:
            WebhookError: ถ้า webhook ตอบกลับด้วยสถานะที่ไม่ใช่ 2xx
        """
        await self.start()
        async with self._session.post(self.url, json=payload) as response:
            if not 200 <= response.status < 300:
                raise WebhookError(response.status, response.reason)
            logger.debug(f"📨 ส่ง webhook สำเร็จ: {payload.get('command')} ({response.status})")
            return response.status
