"""
Metrics endpoint handler.

Serves a Prometheus registry at `GET /metrics`:

1. Gather a fresh snapshot of the registry.
2. Encode it with the configured encoder.
3. Answer 200 with the encoder's content type, or 500 if encoding failed.

The handler never mutates the registry and keeps no state between requests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final

from aiohttp import hdrs, web
from prometheus_client.registry import Collector

from .encoding import Encoder, TextEncoder
from .exceptions import EncodingFailure
from .snapshot import gather

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

METRICS_PATH: Final = "/metrics"
"""Route served by the exporter. Relocate it by mounting, not by renaming."""


@dataclass(slots=True)
class MetricsExporter:
    """
    Answers scrape requests for a caller-owned registry.

    The registry is shared with the rest of the process and is only read
    here. Its own locking makes concurrent gathers safe, so the exporter
    holds no lock of its own.
    """

    registry: Collector
    """Registry to expose. Owned by the caller."""

    encoder: Encoder = field(default_factory=TextEncoder)
    """Exposition format used for response bodies."""

    async def handle(self, _request: web.Request) -> web.Response:
        """
        Handle a metrics scrape.

        Response: Registry snapshot in the encoder's format, with the
        Content-Type header taken verbatim from the encoder.

        Status Codes:
            200 OK: Metrics returned.
            500 Internal Server Error: Snapshot could not be encoded.
        """
        snapshot = gather(self.registry)

        try:
            body = self.encoder.encode(snapshot)
        except EncodingFailure as e:
            logger.error("Failed to encode Prometheus metrics: %s", e)
            return web.Response(status=500)

        logger.debug("Encoded %d metric families (%d bytes)", len(snapshot), len(body))
        return web.Response(
            body=body,
            headers={hdrs.CONTENT_TYPE: self.encoder.content_type},
        )

    def routes(self) -> list[web.RouteDef]:
        """Route table matching only `GET /metrics`."""
        return [web.get(METRICS_PATH, self.handle, allow_head=False)]


def text_format_handler(registry: Collector) -> web.Application:
    """
    Create an application that serves a registry in the Prometheus text format.

    Run it directly, or mount it inside a larger application::

        app.add_subapp("/internal", text_format_handler(registry))

    which serves the metrics at `/internal/metrics`.

    Args:
        registry: Registry to expose. Shared, never mutated.

    Returns:
        Application routing `GET /metrics` to a `MetricsExporter`.
    """
    exporter = MetricsExporter(registry=registry, encoder=TextEncoder())

    app = web.Application()
    app.add_routes(exporter.routes())
    return app
