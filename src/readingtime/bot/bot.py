"""
Chat bot that replies to links with their estimated reading time.
"""

from __future__ import annotations

import asyncio
import signal
from typing import Any, Dict, Optional

import aiohttp
import structlog

from ..config.config import Settings
from ..crawler.http_client import PageFetcher
from ..estimator import ReadingTimeEstimator
from ..exceptions import ReadingTimeError, UrlParseFailed
from ..message import Message, select_url
from ..observability.metrics import METRICS
from .telegram import TelegramClient, TelegramError

logger = structlog.get_logger(__name__)

POLL_RETRY_DELAY = 5.0


def format_minutes(minutes: float) -> str:
    if minutes.is_integer():
        return str(int(minutes))
    return str(minutes)


def format_reply(minutes: float) -> str:
    return f"Estimated reading time: {format_minutes(minutes)} minutes"


class ReadingTimeBot:
    """Turns inbound messages into reading-time replies."""

    def __init__(
        self,
        client: TelegramClient,
        fetcher: PageFetcher,
        estimator: ReadingTimeEstimator,
        wpm: float,
    ) -> None:
        self.client = client
        self.fetcher = fetcher
        self.estimator = estimator
        self.wpm = wpm

    async def handle_message(self, message: Message) -> str:
        """Return the reply text for ``message``."""
        METRICS["messages"].inc()
        try:
            candidate = select_url(message)
            if candidate is None:
                raise UrlParseFailed(None, "no URL in message")
            html = await self.fetcher.fetch_html(candidate.url)
            loop = asyncio.get_running_loop()
            estimate = await loop.run_in_executor(None, self.estimator.estimate, html, self.wpm)
        except ReadingTimeError as e:
            METRICS["failures"].labels(kind=type(e).__name__).inc()
            logger.info("Request failed", chat_id=message.chat_id, error=type(e).__name__, detail=e.detail)
            return str(e)

        logger.info(
            "Reading time estimated",
            chat_id=message.chat_id,
            url=str(candidate),
            words=estimate.word_count,
            minutes=estimate.minutes,
        )
        return format_reply(estimate.minutes)

    async def process_update(self, update: Dict[str, Any]) -> None:
        payload = update.get("message")
        if not payload:
            return
        message = Message.from_telegram(payload)
        if message.sender_id is not None:
            logger.debug("New message", user_id=message.sender_id)
        reply = await self.handle_message(message)
        if message.chat_id is None:
            logger.warning("Message without chat, not replying", update_id=update.get("update_id"))
            return
        await self.client.send_message(message.chat_id, reply, reply_to=message.message_id)

    async def run(self) -> None:
        """Long-poll for updates until cancelled."""
        offset: Optional[int] = None
        logger.info("Starting the bot...", wpm=self.wpm, strategy=self.estimator.extractor.name)
        while True:
            try:
                updates = await self.client.get_updates(offset)
            except (TelegramError, aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.warning("Polling failed, retrying", error=repr(e), delay=POLL_RETRY_DELAY)
                await asyncio.sleep(POLL_RETRY_DELAY)
                continue

            for update in updates:
                offset = update["update_id"] + 1
                try:
                    await self.process_update(update)
                except (TelegramError, aiohttp.ClientError, asyncio.TimeoutError) as e:
                    logger.warning("Failed to send reply", update_id=update["update_id"], error=repr(e))
                except Exception:
                    logger.exception("Update handler failed", update_id=update["update_id"])


async def serve(settings: Settings) -> None:
    """Run the bot described by ``settings`` until SIGINT or SIGTERM."""
    if settings.bot_token is None:
        raise RuntimeError("BOT_TOKEN not set!")

    estimator = ReadingTimeEstimator.from_strategy(settings.extraction.strategy)
    client = TelegramClient(settings.bot_token.get_secret_value(), settings.telegram)
    async with client, PageFetcher(settings.fetch) as fetcher:
        bot = ReadingTimeBot(client, fetcher, estimator, settings.wpm)
        task = asyncio.create_task(bot.run())

        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, task.cancel)
        try:
            await task
        except asyncio.CancelledError:
            logger.info("Bot stopped")
        finally:
            for sig in (signal.SIGINT, signal.SIGTERM):
                loop.remove_signal_handler(sig)
