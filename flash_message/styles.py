"""Policy names accepted in the settings."""

from enum import Enum


class QueueStyle(str, Enum):
    SINGLE = "single"
    MULTIPLE = "multiple"
    KEY_SINGLE = "key_single"
    KEY_MULTIPLE = "key_multiple"

    @property
    def keyed(self) -> bool:
        return self in (QueueStyle.KEY_SINGLE, QueueStyle.KEY_MULTIPLE)


class ArgumentStyle(str, Enum):
    SINGLE = "single"
    JOIN = "join"
    AUTO = "auto"
    ARRAY = "array"


class DequeueStyle(str, Enum):
    NEVER = "never"
    ALWAYS = "always"
    WHEN_USED = "when_used"
    BY_KEY = "by_key"
