"""Shared helpers for exporter tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from aiohttp import web
from prometheus_client.metrics_core import GaugeMetricFamily, Metric

from metrics_exporter import MetricsSnapshot


class BrokenCollector:
    """Collector yielding a gauge whose sample value is not a number."""

    def collect(self) -> Iterator[Metric]:
        """Yield a single malformed family named `broken`."""
        family = GaugeMetricFamily("broken", "Malformed fixture")
        family.add_metric([], "not-a-number")  # type: ignore[arg-type]
        yield family


@dataclass(frozen=True, slots=True)
class StaticEncoder:
    """Encoder returning fixed bytes under a custom media type."""

    content_type: str = "application/x-test; charset=utf-8"
    """Media type reported to the handler."""

    payload: bytes = b"payload"
    """Body returned for every snapshot."""

    def encode(self, snapshot: MetricsSnapshot) -> bytes:
        """Ignore the snapshot and return the fixed payload."""
        return self.payload


@asynccontextmanager
async def serve(app: web.Application) -> AsyncIterator[str]:
    """
    Run an application on an ephemeral local port.

    Yields:
        Base URL of the running server.
    """
    runner = web.AppRunner(app)
    await runner.setup()

    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()

    try:
        host, port = runner.addresses[0][:2]
        yield f"http://{host}:{port}"
    finally:
        await runner.cleanup()
