"""
Minimal Telegram Bot API client over aiohttp.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import aiohttp
import structlog

from ..config.config import TelegramConfig

logger = structlog.get_logger(__name__)


class TelegramError(RuntimeError):
    """Raised when the Bot API answers with ``ok: false``."""

    def __init__(self, method: str, description: str, error_code: Optional[int] = None) -> None:
        super().__init__(f"{method} failed: {description}")
        self.method = method
        self.description = description
        self.error_code = error_code


class TelegramClient:
    """Calls Bot API methods for a single bot token."""

    def __init__(self, token: str, config: Optional[TelegramConfig] = None) -> None:
        self.config = config or TelegramConfig()
        self._base_url = f"{self.config.api_url.rstrip('/')}/bot{token}"
        self.session: Optional[aiohttp.ClientSession] = None

    async def initialize(self) -> None:
        if self.session is None:
            # Leave room for the server-side long poll
            timeout = aiohttp.ClientTimeout(total=self.config.poll_timeout + 30)
            self.session = aiohttp.ClientSession(timeout=timeout)

    async def close(self) -> None:
        if self.session:
            await self.session.close()
            self.session = None

    async def __aenter__(self) -> TelegramClient:
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def call(self, method: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        """Invoke ``method`` and return its ``result`` field."""
        if self.session is None:
            raise RuntimeError("Telegram client not initialized. Call initialize() first.")

        async with self.session.post(f"{self._base_url}/{method}", json=payload or {}) as response:
            data = await response.json(content_type=None)

        if not data.get("ok"):
            raise TelegramError(method, data.get("description", "unknown error"), data.get("error_code"))
        return data.get("result")

    async def get_updates(self, offset: Optional[int] = None, timeout: Optional[int] = None) -> List[Dict[str, Any]]:
        payload: Dict[str, Any] = {
            "timeout": self.config.poll_timeout if timeout is None else timeout,
            "allowed_updates": ["message"],
        }
        if offset is not None:
            payload["offset"] = offset
        return await self.call("getUpdates", payload)

    async def send_message(self, chat_id: int, text: str, reply_to: Optional[int] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"chat_id": chat_id, "text": text}
        if reply_to is not None:
            payload["reply_parameters"] = {"message_id": reply_to}
        return await self.call("sendMessage", payload)
