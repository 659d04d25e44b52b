"""Typed exceptions for fetching, record ingestion, settings and I/O."""

from __future__ import annotations


class WhosThatError(Exception):
    """Base class for all package errors."""


class FetchFailedError(WhosThatError):
    """Raised when an upstream request fails or returns an unusable body."""

    def __init__(self, url: str, reason: str, *, status: int | None = None) -> None:
        self.url = url
        self.reason = reason
        self.status = status
        detail = f"{reason} (status {status})" if status is not None else reason
        super().__init__(f"fetch failed for {url}: {detail}")


class MalformedRecordError(WhosThatError, ValueError):
    """Raised when an upstream record misses required fields."""


class InsufficientPopulationError(WhosThatError, ValueError):
    """Raised when more ids are requested than the selected pool holds."""

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"requested {requested} creatures but the selected generations hold {available}"
        )


class SettingsError(WhosThatError, ValueError):
    """Raised when a settings value is out of range or a transition is rejected."""


class SpanError(WhosThatError, ValueError):
    """Base class for mask span errors."""


class OverlapError(SpanError):
    """Raised when two mask spans overlap."""


class SpanOutOfBoundsError(SpanError):
    """Raised when span coordinates are invalid or out of bounds."""


class IOFormatError(WhosThatError, ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""
