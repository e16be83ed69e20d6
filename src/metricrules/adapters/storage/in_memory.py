"""In-memory metric storage adapter."""

from collections.abc import AsyncIterable

from metricrules.core.models import Metric


class InMemoryMetricsStorage:
    """In-memory implementation of MetricsSourcePort.

    Stores metrics in a list. Suitable for testing and for callers that
    already hold their metrics in memory.
    """

    def __init__(self, metrics: list[Metric] | None = None) -> None:
        self._metrics: list[Metric] = list(metrics or [])

    async def write(self, metric: Metric) -> None:
        """Write a metric to storage."""
        self._metrics.append(metric)

    async def scrape(self) -> AsyncIterable[Metric]:
        """Scrape all stored metrics in write order."""
        for metric in list(self._metrics):
            yield metric

    async def clear(self) -> None:
        """Remove all stored metrics."""
        self._metrics.clear()
