"""
Selection of the single URL a message asks about.

Candidates come from four sources, in priority order:

1. body entities carrying an explicit link target
2. caption entities carrying an explicit link target
3. URL-shaped substrings of the body text
4. URL-shaped substrings of the caption text

The first candidate wins. A malformed winner is reported, not skipped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

from yarl import URL

from ..exceptions import UrlParseFailed
from .models import Message, MessageEntity

URL_PATTERN = re.compile(
    r"https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{2,256}\.[a-z]{2,4}\b([-a-zA-Z0-9@:%_+.~#?&/=]*)"
)


class UrlSource(str, Enum):
    ENTITY = "entity"
    CAPTION_ENTITY = "caption_entity"
    TEXT = "text"
    CAPTION = "caption"


@dataclass(slots=True, frozen=True)
class UrlCandidate:
    """A validated absolute URL and where it was found."""

    raw: str
    url: URL
    source: UrlSource

    def __str__(self) -> str:
        return str(self.url)


def find_urls(text: str) -> list[str]:
    """Return every URL-shaped substring of ``text``, in order."""
    return [match.group(0) for match in URL_PATTERN.finditer(text)]


def parse_url(raw: str, source: UrlSource = UrlSource.TEXT) -> UrlCandidate:
    """Validate ``raw`` as an absolute URL.

    Raises:
        UrlParseFailed: If ``raw`` has no scheme or host, or a bad port.
    """
    try:
        url = URL(raw)
        # Host (IDNA) and port are decoded lazily by yarl
        is_absolute = url.absolute and bool(url.scheme) and bool(url.host)
        url.port
    except (TypeError, ValueError) as e:
        # UnicodeError from IDNA decoding is a ValueError
        raise UrlParseFailed(raw, str(e)) from e

    if not is_absolute:
        raise UrlParseFailed(raw, "not an absolute URL")
    return UrlCandidate(raw=raw, url=url, source=source)


def _explicit_links(entities: Iterable[MessageEntity], source: UrlSource) -> Iterator[tuple[UrlSource, str]]:
    for entity in entities:
        if entity.has_explicit_url and entity.url is not None:
            yield source, entity.url


def iter_url_candidates(message: Message) -> Iterator[tuple[UrlSource, str]]:
    """Yield ``(source, raw_url)`` pairs in priority order."""
    yield from _explicit_links(message.entities, UrlSource.ENTITY)
    yield from _explicit_links(message.caption_entities, UrlSource.CAPTION_ENTITY)
    for raw in find_urls(message.text or ""):
        yield UrlSource.TEXT, raw
    for raw in find_urls(message.caption or ""):
        yield UrlSource.CAPTION, raw


def select_url(message: Message) -> Optional[UrlCandidate]:
    """Pick the URL to analyze, or None when the message has none.

    Raises:
        UrlParseFailed: If the highest-priority candidate is malformed.
    """
    first = next(iter_url_candidates(message), None)
    if first is None:
        return None
    source, raw = first
    return parse_url(raw, source)
