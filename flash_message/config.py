"""Plugin settings using Pydantic."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from flash_message.errors import IncompatibleDequeueError, InvalidConfigurationError
from flash_message.styles import ArgumentStyle, DequeueStyle, QueueStyle

logger = logging.getLogger(__name__)


class FlashSettings(BaseSettings):
    """Flash message settings."""

    token_name: str = Field(default="flash", min_length=1)
    session_hash_key: str = Field(default="_flash", min_length=1)
    queue: QueueStyle = Field(default=QueueStyle.KEY_SINGLE)
    arguments: ArgumentStyle = Field(default=ArgumentStyle.JOIN)
    dequeue: DequeueStyle = Field(default=DequeueStyle.BY_KEY)
    join_separator: str = Field(default="")

    # Only used when the plugin installs the session middleware itself
    secret_key: str = Field(default="dev-secret-change-me")
    session_max_age: int = Field(default=24 * 60 * 60)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FLASH_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    def check_compatibility(self) -> None:
        """Reject policy combinations that cannot work together."""
        if self.dequeue is DequeueStyle.BY_KEY and not self.queue.keyed:
            raise IncompatibleDequeueError(
                f"dequeueing style 'by_key' only available with 'key_*' queueing styles,"
                f" got '{self.queue.value}'"
            )


def load_settings(**overrides: Any) -> FlashSettings:
    """
    Build validated settings from the environment plus explicit overrides.

    Unknown style names and incompatible combinations both surface as
    InvalidConfigurationError.
    """
    try:
        settings = FlashSettings(**overrides)
    except ValidationError as exc:
        logger.error("Invalid flash message settings: %s", exc)
        raise InvalidConfigurationError(str(exc)) from exc
    try:
        settings.check_compatibility()
    except InvalidConfigurationError as exc:
        logger.error("Invalid flash message settings: %s", exc)
        raise
    return settings


@lru_cache
def get_settings() -> FlashSettings:
    """Get cached settings instance."""
    return load_settings()
