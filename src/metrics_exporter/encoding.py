"""
Exposition encoders.

An encoder turns a gathered snapshot into wire bytes and reports the media
type of what it produced. The handler copies that media type into the
response header, so the header can never drift from the body format.

Only the Prometheus text format ships here. Other formats plug in by
implementing the `Encoder` protocol.
"""

from __future__ import annotations

from typing import Protocol

from prometheus_client.exposition import choose_encoder
from prometheus_client.metrics_core import Metric

from .exceptions import EncodingFailure
from .snapshot import MetricsSnapshot

# Writer and media type both come from prometheus_client's own pairing.
_generate_text, _TEXT_CONTENT_TYPE = choose_encoder("")


class Encoder(Protocol):
    """Serializes a snapshot into one exposition format."""

    @property
    def content_type(self) -> str:
        """Media type identifier of the produced bytes."""
        ...

    def encode(self, snapshot: MetricsSnapshot) -> bytes:
        """
        Serialize a snapshot.

        Raises:
            EncodingFailure: If the snapshot cannot be serialized.
        """
        ...


class TextEncoder:
    """
    Prometheus text exposition format.

    Each family is written as a `# HELP` line, a `# TYPE` line and one
    sample line per label set, in the order the snapshot holds them.
    """

    __slots__ = ()

    @property
    def content_type(self) -> str:
        """Media type prometheus_client pairs with its text writer."""
        return _TEXT_CONTENT_TYPE

    def encode(self, snapshot: MetricsSnapshot) -> bytes:
        """
        Serialize a snapshot into the text format.

        Args:
            snapshot: Families gathered for this scrape.

        Returns:
            UTF-8 encoded exposition text. Empty for an empty snapshot.

        Raises:
            EncodingFailure: If any family cannot be serialized.
        """
        try:
            return _generate_text(snapshot)  # type: ignore[arg-type]
        except Exception as e:
            # prometheus_client appends the offending family to the args.
            family = e.args[-1].name if e.args and isinstance(e.args[-1], Metric) else None
            raise EncodingFailure(str(e.args[0] if e.args else e), family=family) from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(content_type={self.content_type!r})"
