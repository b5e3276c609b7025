"""Exception taxonomy for flash messages."""

from __future__ import annotations


class FlashMessageError(Exception):
    """Base class for every error raised by the plugin."""


class InvalidConfigurationError(FlashMessageError, ValueError):
    """Settings could not be turned into a working engine."""


class IncompatibleDequeueError(InvalidConfigurationError):
    """The 'by_key' dequeueing style was paired with a non-key queue."""


class MissingKeyError(FlashMessageError, TypeError):
    """A key-based queueing style was called without a usable key."""


class UnkeyedFlushError(FlashMessageError, TypeError):
    """Keys were passed to flush while the store is not keyed."""
