"""Telegram front end."""

from .bot import ReadingTimeBot, format_reply, serve
from .telegram import TelegramClient, TelegramError

__all__ = ["ReadingTimeBot", "TelegramClient", "TelegramError", "format_reply", "serve"]
