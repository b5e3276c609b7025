"""Queueing styles: how a new value merges into the stored flash state."""

from __future__ import annotations

from typing import Any

from flash_message.styles import QueueStyle


class QueuePolicy:
    """Merge strategy for one queueing style."""

    style: QueueStyle
    keyed = False

    def merge(self, store: Any, key: str | None, value: Any) -> Any:
        raise NotImplementedError


class SingleQueue(QueuePolicy):
    style = QueueStyle.SINGLE

    def merge(self, store: Any, key: str | None, value: Any) -> Any:
        return value


class MultipleQueue(QueuePolicy):
    style = QueueStyle.MULTIPLE

    def merge(self, store: Any, key: str | None, value: Any) -> list[Any]:
        merged = list(store) if store else []
        merged.append(value)
        return merged


class KeySingleQueue(QueuePolicy):
    style = QueueStyle.KEY_SINGLE
    keyed = True

    def merge(self, store: Any, key: str | None, value: Any) -> dict[str, Any]:
        merged = dict(store) if store else {}
        merged[key] = value
        return merged


class KeyMultipleQueue(QueuePolicy):
    style = QueueStyle.KEY_MULTIPLE
    keyed = True

    def merge(self, store: Any, key: str | None, value: Any) -> dict[str, list[Any]]:
        merged = dict(store) if store else {}
        merged[key] = [*(merged.get(key) or []), value]
        return merged


_QUEUES: dict[QueueStyle, type[QueuePolicy]] = {
    QueueStyle.SINGLE: SingleQueue,
    QueueStyle.MULTIPLE: MultipleQueue,
    QueueStyle.KEY_SINGLE: KeySingleQueue,
    QueueStyle.KEY_MULTIPLE: KeyMultipleQueue,
}


def make_queue(style: QueueStyle) -> QueuePolicy:
    """Return the merge strategy for a queueing style."""
    return _QUEUES[style]()
