"""
Error kinds raised by readingtime.

The string form of every error is the message shown to the end user.
"""

from __future__ import annotations


class ReadingTimeError(Exception):
    """Base class for all readingtime errors."""

    message = "Something went wrong"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(self.message)
        self.detail = detail

    def __str__(self) -> str:
        return self.message


class UrlParseFailed(ReadingTimeError, ValueError):
    """Raised when a link is not a structurally valid absolute URL."""

    message = "Not a valid URL"

    def __init__(self, raw: str | None = None, detail: str | None = None) -> None:
        super().__init__(detail)
        self.raw = raw


class ExtractionFailed(ReadingTimeError):
    """Raised when a content-extraction strategy cannot produce readable text."""

    message = "The site content has no readable text"


class FetchFailed(ReadingTimeError):
    """Raised when the page body could not be retrieved."""

    message = "The site content can't be fetched"


class ContentDecodeFailed(ReadingTimeError):
    """Raised when the page body is not decodable HTML text."""

    message = "The site content is not a valid HTML"
