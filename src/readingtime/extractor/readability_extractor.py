"""
Readability-based article text extractor.
"""

from __future__ import annotations

import structlog
from lxml import etree
from lxml import html as lxml_html
from lxml.etree import ParserError
from readability import Document
from readability.readability import Unparseable

from ..exceptions import ExtractionFailed

logger = structlog.get_logger(__name__)


class ReadabilityExtractor:
    """Extractor using readability-lxml to isolate the main article."""

    name = "readability"

    def __init__(self) -> None:
        self.config = {
            "min_text_length": 25,
            "retry_length": 250,
            "positive_keywords": [
                "article",
                "body",
                "content",
                "entry",
                "hentry",
                "main",
                "page",
                "post",
                "text",
                "blog",
                "story",
            ],
            "negative_keywords": [
                "combx",
                "comment",
                "contact",
                "foot",
                "footer",
                "footnote",
                "masthead",
                "media",
                "meta",
                "outbrain",
                "promo",
                "related",
                "shoutbox",
                "sidebar",
                "sponsor",
                "shopping",
                "tags",
                "tool",
                "widget",
            ],
        }

    def extract_visible_text(self, html: str) -> str:
        """Extract the article text.

        Raises:
            ExtractionFailed: If the document is empty, cannot be parsed, or
                has no article content.
        """
        if not html.strip():
            raise ExtractionFailed("empty document")

        try:
            doc = Document(
                html,
                min_text_length=self.config["min_text_length"],
                retry_length=self.config["retry_length"],
                positive_keywords=self.config["positive_keywords"],
                negative_keywords=self.config["negative_keywords"],
            )
            content_html = doc.summary(html_partial=True)
        except Unparseable as e:
            logger.debug("Readability rejected document", error=str(e))
            raise ExtractionFailed(str(e)) from e

        text = self._html_to_text(content_html)
        if not text:
            raise ExtractionFailed("no article content found")
        return text

    def _html_to_text(self, html: str) -> str:
        """Flatten summary HTML to whitespace-normalized text."""
        if not html or not html.strip():
            return ""
        try:
            doc = lxml_html.fromstring(html)
        except (ParserError, ValueError) as e:
            raise ExtractionFailed(str(e)) from e
        text = etree.tostring(doc, method="text", encoding="unicode")
        return " ".join(text.split())
