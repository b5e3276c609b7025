"""Session-backed flash messages for FastAPI applications."""

from flash_message.config import FlashSettings, get_settings, load_settings
from flash_message.engine import FlashEngine
from flash_message.errors import (
    FlashMessageError,
    IncompatibleDequeueError,
    InvalidConfigurationError,
    MissingKeyError,
    UnkeyedFlushError,
)
from flash_message.plugin import Flasher, FlashMessages, get_flasher
from flash_message.styles import ArgumentStyle, DequeueStyle, QueueStyle

__all__ = [
    "ArgumentStyle",
    "DequeueStyle",
    "FlashEngine",
    "FlashMessageError",
    "FlashMessages",
    "FlashSettings",
    "Flasher",
    "IncompatibleDequeueError",
    "InvalidConfigurationError",
    "MissingKeyError",
    "QueueStyle",
    "UnkeyedFlushError",
    "get_flasher",
    "get_settings",
    "load_settings",
]
