"""Storage adapters that serve metrics to the checker."""

from metricrules.adapters.storage.in_memory import InMemoryMetricsStorage

__all__ = ["InMemoryMetricsStorage"]
