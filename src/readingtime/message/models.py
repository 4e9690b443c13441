"""
Chat message models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class EntityKind(str, Enum):
    """Rich-text annotation kinds, named as in the Telegram Bot API."""

    MENTION = "mention"
    HASHTAG = "hashtag"
    CASHTAG = "cashtag"
    BOT_COMMAND = "bot_command"
    URL = "url"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    SPOILER = "spoiler"
    BLOCKQUOTE = "blockquote"
    CODE = "code"
    PRE = "pre"
    TEXT_LINK = "text_link"
    TEXT_MENTION = "text_mention"
    CUSTOM_EMOJI = "custom_emoji"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> EntityKind:
        return cls.OTHER


@dataclass(slots=True, frozen=True)
class MessageEntity:
    """An annotation over a range of the message text."""

    kind: EntityKind
    offset: int = 0
    length: int = 0
    url: Optional[str] = None

    @property
    def has_explicit_url(self) -> bool:
        """True for hyperlinks whose target differs from the annotated text."""
        return self.kind is EntityKind.TEXT_LINK and self.url is not None

    @classmethod
    def from_telegram(cls, payload: Mapping[str, Any]) -> MessageEntity:
        return cls(
            kind=EntityKind(payload.get("type", EntityKind.OTHER.value)),
            offset=int(payload.get("offset", 0)),
            length=int(payload.get("length", 0)),
            url=payload.get("url"),
        )


@dataclass(slots=True, frozen=True)
class Message:
    """An inbound chat message: body and caption text plus their entities."""

    text: Optional[str] = None
    caption: Optional[str] = None
    entities: tuple[MessageEntity, ...] = field(default_factory=tuple)
    caption_entities: tuple[MessageEntity, ...] = field(default_factory=tuple)
    chat_id: Optional[int] = None
    message_id: Optional[int] = None
    sender_id: Optional[int] = None

    @classmethod
    def from_telegram(cls, payload: Mapping[str, Any]) -> Message:
        """Build a Message from a Bot API ``Message`` object."""
        chat = payload.get("chat") or {}
        sender = payload.get("from") or {}
        return cls(
            text=payload.get("text"),
            caption=payload.get("caption"),
            entities=tuple(MessageEntity.from_telegram(e) for e in payload.get("entities", ())),
            caption_entities=tuple(
                MessageEntity.from_telegram(e) for e in payload.get("caption_entities", ())
            ),
            chat_id=chat.get("id"),
            message_id=payload.get("message_id"),
            sender_id=sender.get("id"),
        )
