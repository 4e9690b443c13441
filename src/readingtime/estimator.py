"""
Reading-time estimation.

Converts the readable text of an HTML document into a whole number of
minutes at a given reading speed. Minutes are always rounded up, so any
non-empty page takes at least one minute.
"""

from __future__ import annotations

import math
import time
from typing import Optional

import structlog

from .extractor import DEFAULT_STRATEGY, ReadingEstimate, TextExtractor, get_extractor
from .extractor.soup_extractor import VisibleTextExtractor
from .observability.metrics import METRICS

logger = structlog.get_logger(__name__)


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())


def minutes_for(word_count: int, wpm: float) -> float:
    """Ceiling of ``word_count / wpm`` as a float.

    ``wpm`` is not validated; callers pass a positive rate.
    """
    return float(math.ceil(word_count / wpm))


def calculate_reading_time(content: str, wpm: float) -> float:
    """Reading time in minutes of ``content`` using the visible-text strategy."""
    text = VisibleTextExtractor().extract_visible_text(content)
    return minutes_for(count_words(text), wpm)


class ReadingTimeEstimator:
    """Estimates reading time with a pluggable extraction strategy."""

    def __init__(self, extractor: Optional[TextExtractor] = None) -> None:
        self.extractor = extractor or get_extractor(DEFAULT_STRATEGY)
        self.logger = logger.bind(strategy=self.extractor.name)

    @classmethod
    def from_strategy(cls, name: str) -> ReadingTimeEstimator:
        return cls(get_extractor(name))

    def estimate(self, html: str, wpm: float) -> ReadingEstimate:
        """Estimate the reading time of ``html`` at ``wpm`` words per minute.

        Raises:
            ExtractionFailed: If the extractor cannot produce text.
        """
        start = time.perf_counter()
        try:
            text = self.extractor.extract_visible_text(html)
        finally:
            METRICS["extraction_seconds"].labels(strategy=self.extractor.name).observe(
                time.perf_counter() - start
            )

        word_count = count_words(text)
        minutes = minutes_for(word_count, wpm)
        METRICS["estimates"].labels(strategy=self.extractor.name).inc()
        self.logger.debug("Estimated reading time", words=word_count, wpm=wpm, minutes=minutes)
        return ReadingEstimate(word_count=word_count, minutes=minutes, strategy=self.extractor.name)
