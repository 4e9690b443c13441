"""
Data models for reading-time estimates.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ReadingEstimate:
    """Result of a reading-time estimation."""

    word_count: int
    minutes: float
    strategy: str

    def __post_init__(self) -> None:
        """Validate the result."""
        if self.word_count < 0:
            raise ValueError("word_count must be non-negative")
