"""Port interfaces for metric sources.

The checker depends only on this protocol, not on concrete adapters.
"""

from collections.abc import AsyncIterable
from typing import Protocol, runtime_checkable

from metricrules.core.models import Metric


@runtime_checkable
class MetricsSourcePort(Protocol):
    """Port for reading the metrics a check runs against.

    Adapters implementing this protocol provide a finite batch of metrics.
    Examples: InMemoryMetricsStorage.
    """

    def scrape(self) -> AsyncIterable[Metric]:
        """Scrape all current metrics.

        Returns:
            Async iterable of Metric objects. It must terminate.
        """
        ...
