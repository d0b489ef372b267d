"""
Prometheus metrics endpoint for aiohttp applications.

Exposes a `prometheus_client` registry at `GET /metrics` using the text
exposition format.

Example::

    registry = CollectorRegistry()
    web.run_app(text_format_handler(registry), host="0.0.0.0", port=9464)
"""

from .encoding import Encoder, TextEncoder
from .endpoint import METRICS_PATH, MetricsExporter, text_format_handler
from .exceptions import EncodingFailure, ExporterError
from .snapshot import MetricsSnapshot, gather

__all__ = [
    "METRICS_PATH",
    "Encoder",
    "EncodingFailure",
    "ExporterError",
    "MetricsExporter",
    "MetricsSnapshot",
    "TextEncoder",
    "gather",
    "text_format_handler",
]
