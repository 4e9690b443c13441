"""
Protocols for pluggable visible-text extraction strategies.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextExtractor(Protocol):
    """Pluggable HTML-to-readable-text strategy."""

    name: str

    def extract_visible_text(self, html: str) -> str:
        """Extract the readable text of an HTML document.

        Args:
            html: Raw HTML content

        Returns:
            The readable text, words separated by whitespace

        Raises:
            ExtractionFailed: If the strategy cannot produce text
        """
        ...
