"""
Point-in-time snapshots of a metrics registry.

A scrape never encodes the live registry directly. It first gathers every
metric family into an immutable snapshot, then hands that snapshot to an
encoder. Each request gathers its own snapshot, so two concurrent scrapes
never share state.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from prometheus_client.metrics_core import Metric
from prometheus_client.registry import Collector


@dataclass(frozen=True, slots=True)
class MetricsSnapshot:
    """Metric families frozen at the instant of gathering."""

    families: tuple[Metric, ...] = ()
    """Families in the order the registry produced them."""

    def collect(self) -> Iterator[Metric]:
        """
        Yield the frozen families.

        Mirrors `Collector.collect` so a snapshot can stand in for a
        registry in any prometheus_client exposition function.
        """
        return iter(self.families)

    @property
    def names(self) -> list[str]:
        """Family names in registry order."""
        return [family.name for family in self.families]

    def __iter__(self) -> Iterator[Metric]:
        return iter(self.families)

    def __len__(self) -> int:
        return len(self.families)


def gather(registry: Collector) -> MetricsSnapshot:
    """
    Take a snapshot of all metric families held by a registry.

    The registry is only read. Families are materialized once, without
    reordering or filtering.

    Args:
        registry: Any collector, usually a `CollectorRegistry`.

    Returns:
        Immutable snapshot of the registry's current state.
    """
    return MetricsSnapshot(families=tuple(registry.collect()))
