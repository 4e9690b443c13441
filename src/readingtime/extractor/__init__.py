"""
Visible-text extraction strategies.

Two interchangeable strategies implement ``TextExtractor``:

- ``visible_text``: BeautifulSoup walk over every text node, filtered by
  parent and own tag names. Permissive, never fails. This is the default.
- ``readability``: readability-lxml article extraction. Strips navigation and
  chrome, and raises ``ExtractionFailed`` when no article is found.
"""

from __future__ import annotations

from typing import Callable, Dict

from .models import ReadingEstimate
from .protocols import TextExtractor
from .readability_extractor import ReadabilityExtractor
from .soup_extractor import VisibleTextExtractor

DEFAULT_STRATEGY = VisibleTextExtractor.name

_EXTRACTORS: Dict[str, Callable[[], TextExtractor]] = {
    VisibleTextExtractor.name: VisibleTextExtractor,
    ReadabilityExtractor.name: ReadabilityExtractor,
}


def available_strategies() -> list[str]:
    return list(_EXTRACTORS)


def get_extractor(name: str = DEFAULT_STRATEGY) -> TextExtractor:
    """Build the extractor registered under ``name``."""
    try:
        factory = _EXTRACTORS[name]
    except KeyError:
        raise ValueError(
            f"Invalid extraction strategy '{name}'. Available strategies: {available_strategies()}"
        ) from None
    return factory()


__all__ = [
    "DEFAULT_STRATEGY",
    "ReadabilityExtractor",
    "ReadingEstimate",
    "TextExtractor",
    "VisibleTextExtractor",
    "available_strategies",
    "get_extractor",
]
