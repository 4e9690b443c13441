"""
BeautifulSoup-based visible text extractor.

Walks every string node of the parsed document in document order and keeps
the ones a browser would render as body text.
"""

from __future__ import annotations

import structlog
from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import NavigableString, PreformattedString

INVISIBLE_PARENTS = frozenset({"head", "style", "script", "title"})
NON_RENDERABLE = frozenset({"link", "iframe"})
EMPTY_TEXTS = frozenset({"", " "})

logger = structlog.get_logger(__name__)


def has_visible_parent(node: NavigableString) -> bool:
    """Return False for nodes under the document root or an invisible element."""
    parent = node.parent
    if parent is None or parent.name in (None, BeautifulSoup.ROOT_TAG_NAME):
        return False
    return parent.name not in INVISIBLE_PARENTS


def is_renderable(node: NavigableString) -> bool:
    name = getattr(node, "name", None)
    return name is None or name not in NON_RENDERABLE


def is_non_empty(node: NavigableString) -> bool:
    # Only "" and a lone space count as empty; "\n" or "\t" nodes are kept.
    return str(node) not in EMPTY_TEXTS


class VisibleTextExtractor:
    """Extractor that keeps every visible text node of the full document."""

    name = "visible_text"

    def __init__(self, parser: str = "lxml") -> None:
        self.parser = parser

    def iter_text_nodes(self, html: str):
        """Yield the string nodes of ``html`` that pass the visibility filters."""
        try:
            soup = BeautifulSoup(html, self.parser)
        except ParserRejectedMarkup as e:
            # Worst case is an empty tree: zero words, not an error
            logger.debug("Parser rejected markup", parser=self.parser, error=str(e))
            return
        for node in soup.descendants:
            if not isinstance(node, NavigableString) or isinstance(node, PreformattedString):
                continue
            if has_visible_parent(node) and is_renderable(node) and is_non_empty(node):
                yield node

    def extract_visible_text(self, html: str) -> str:
        """Join the visible text nodes with a single space. Never raises."""
        return " ".join(str(node) for node in self.iter_text_nodes(html))
