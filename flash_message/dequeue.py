"""Dequeueing styles: what the view sees and when the session is cleared."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, MutableMapping
from functools import partial
from typing import Any

from flash_message.styles import DequeueStyle

logger = logging.getLogger(__name__)

_WHOLE_STORE = object()


class RenderCycle:
    """
    State of one render pass over a session slot.

    Remembers which entries were already read so that repeated accesses
    from the view return the cached value and touch the session only once.
    """

    def __init__(self, session: MutableMapping[str, Any], slot: str) -> None:
        self.session = session
        self.slot = slot
        self._cache: dict[object, Any] = {}

    def is_read(self, key: object = _WHOLE_STORE) -> bool:
        return key in self._cache

    def peek(self) -> Any:
        """Current store, without clearing it."""
        return self.session.get(self.slot)

    def read(self) -> Any:
        """Return the whole store and clear the slot, once per cycle."""
        if _WHOLE_STORE not in self._cache:
            self._cache[_WHOLE_STORE] = self.session.pop(self.slot, None)
            logger.debug("Flash store '%s' read and cleared", self.slot)
        return self._cache[_WHOLE_STORE]

    def read_key(self, key: str) -> Any:
        """Return one entry of a keyed store and remove only that entry."""
        if key not in self._cache:
            value = None
            store = self.session.get(self.slot)
            if isinstance(store, dict) and key in store:
                remaining = dict(store)
                value = remaining.pop(key)
                if remaining:
                    self.session[self.slot] = remaining
                else:
                    self.session.pop(self.slot, None)
                logger.debug("Flash key '%s' read and removed from '%s'", key, self.slot)
            self._cache[key] = value
        return self._cache[key]


class FlashAccessor:
    """Zero-argument accessor handed to the view."""

    __slots__ = ("_reader",)

    def __init__(self, reader: Callable[[], Any]) -> None:
        self._reader = reader

    def __call__(self) -> Any:
        return self._reader()

    def __str__(self) -> str:
        # Printed without parentheses in a template: read it like a call would
        value = self._reader()
        return "" if value is None else str(value)

    def __repr__(self) -> str:
        return f"<FlashAccessor {self._reader!r}>"


class FlashKeys:
    """
    Per-key accessors of a by_key render cycle.

    Keys resolve both as items and as attributes, and no public method
    names exist, so a key such as 'update' or 'items' is never shadowed
    in a template lookup.
    """

    __slots__ = ("_accessors",)

    def __init__(self, accessors: dict[str, FlashAccessor]) -> None:
        self._accessors = accessors

    def __getattr__(self, name: str) -> FlashAccessor:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._accessors[name]
        except KeyError:
            raise AttributeError(name) from None

    def __getitem__(self, key: str) -> FlashAccessor:
        return self._accessors[key]

    def __contains__(self, key: object) -> bool:
        return key in self._accessors

    def __iter__(self) -> Iterator[str]:
        return iter(self._accessors)

    def __len__(self) -> int:
        return len(self._accessors)

    def __repr__(self) -> str:
        return f"<FlashKeys {list(self._accessors)!r}>"


class DequeuePolicy:
    """Builds the view token for one render cycle."""

    style: DequeueStyle

    def token(self, cycle: RenderCycle) -> Any:
        raise NotImplementedError


class NeverDequeue(DequeuePolicy):
    style = DequeueStyle.NEVER

    def token(self, cycle: RenderCycle) -> Any:
        return cycle.peek()


class AlwaysDequeue(DequeuePolicy):
    style = DequeueStyle.ALWAYS

    def token(self, cycle: RenderCycle) -> Any:
        return cycle.read()


class WhenUsedDequeue(DequeuePolicy):
    style = DequeueStyle.WHEN_USED

    def token(self, cycle: RenderCycle) -> FlashAccessor:
        return FlashAccessor(cycle.read)


class ByKeyDequeue(DequeuePolicy):
    style = DequeueStyle.BY_KEY

    def token(self, cycle: RenderCycle) -> FlashKeys:
        store = cycle.peek()
        if not isinstance(store, dict):
            return FlashKeys({})
        return FlashKeys({key: FlashAccessor(partial(cycle.read_key, key)) for key in store})


_DEQUEUES: dict[DequeueStyle, type[DequeuePolicy]] = {
    DequeueStyle.NEVER: NeverDequeue,
    DequeueStyle.ALWAYS: AlwaysDequeue,
    DequeueStyle.WHEN_USED: WhenUsedDequeue,
    DequeueStyle.BY_KEY: ByKeyDequeue,
}


def make_dequeue(style: DequeueStyle) -> DequeuePolicy:
    """Return the token strategy for a dequeueing style."""
    return _DEQUEUES[style]()
