"""
Defines Prometheus metrics for the bot and the estimator.
"""

from __future__ import annotations

from typing import Any, Dict

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram
from prometheus_client import start_http_server


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            return _PROM_REGISTRY._names_to_collectors[name]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)  # type: ignore[assignment]
Histogram = _duplicate_safe_factory(_OrigHistogram)  # type: ignore[assignment]

METRICS: Dict[str, Any] = {
    "estimates": Counter(
        "readingtime_estimates",
        "Reading-time estimates produced",
        ["strategy"],
    ),
    "failures": Counter(
        "readingtime_failures",
        "Requests that ended with an error reply",
        ["kind"],
    ),
    "extraction_seconds": Histogram(
        "readingtime_extraction_seconds",
        "Time spent extracting visible text from a page",
        ["strategy"],
    ),
    "messages": Counter(
        "readingtime_messages",
        "Chat messages handled by the bot",
    ),
}


def start_metrics_server(port: int) -> None:
    """Expose METRICS over HTTP for Prometheus scraping."""
    start_http_server(port)
