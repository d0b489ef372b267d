"""Exception hierarchy for the metrics exporter."""

from __future__ import annotations


class ExporterError(Exception):
    """
    Base exception for all exporter errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class EncodingFailure(ExporterError):
    """
    Raised when a gathered snapshot cannot be serialized.

    Typical causes are a sample value that is not a number or a defect in
    the underlying encoder.

    Attributes:
        detail: Description of the underlying cause.
        family: Name of the metric family being encoded (if known).
    """

    def __init__(self, detail: str, *, family: str | None = None) -> None:
        self.detail = detail
        self.family = family

        if family is not None:
            msg = f"Failed to encode metric family {family!r}: {detail}"
        else:
            msg = f"Failed to encode metrics: {detail}"

        super().__init__(msg)
