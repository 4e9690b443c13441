"""Chat messages and URL selection."""

from .models import EntityKind, Message, MessageEntity
from .selector import URL_PATTERN, UrlCandidate, UrlSource, find_urls, iter_url_candidates, parse_url, select_url

__all__ = [
    "EntityKind",
    "Message",
    "MessageEntity",
    "URL_PATTERN",
    "UrlCandidate",
    "UrlSource",
    "find_urls",
    "iter_url_candidates",
    "parse_url",
    "select_url",
]
