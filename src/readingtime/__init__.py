"""
readingtime - reading-time estimates for web pages shared in chat.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Settings
from .estimator import ReadingTimeEstimator, calculate_reading_time, count_words, minutes_for
from .message import Message, MessageEntity, select_url

__all__ = [
    "__version__",
    "Message",
    "MessageEntity",
    "ReadingTimeEstimator",
    "Settings",
    "calculate_reading_time",
    "count_words",
    "minutes_for",
    "select_url",
]
