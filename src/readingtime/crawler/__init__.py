"""Page retrieval."""

from .http_client import PageFetcher

__all__ = ["PageFetcher"]
