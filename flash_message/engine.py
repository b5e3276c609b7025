"""Flash store policy engine."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from flash_message.config import FlashSettings
from flash_message.dequeue import RenderCycle, make_dequeue
from flash_message.errors import InvalidConfigurationError, MissingKeyError, UnkeyedFlushError
from flash_message.queues import make_queue
from flash_message.shaping import make_shaper

logger = logging.getLogger(__name__)

Session = MutableMapping[str, Any]


class FlashEngine:
    """
    Applies the queueing, argument and dequeueing policies to a session.

    The engine itself is stateless: every operation receives the session it
    works on, so one instance serves every request.
    """

    def __init__(self, settings: FlashSettings) -> None:
        try:
            settings.check_compatibility()
        except InvalidConfigurationError as exc:
            logger.error("Refusing flash message settings: %s", exc)
            raise

        self.settings = settings
        self.token_name = settings.token_name
        self.slot = settings.session_hash_key
        self.queue = make_queue(settings.queue)
        self.shape = make_shaper(settings.arguments, settings.join_separator)
        self.dequeue = make_dequeue(settings.dequeue)

        logger.info(
            "Flash messages: queue=%s arguments=%s dequeue=%s token=%s slot=%s",
            self.queue.style.value,
            settings.arguments.value,
            self.dequeue.style.value,
            self.token_name,
            self.slot,
        )

    def flash(self, session: Session, *args: Any) -> Any:
        """
        Store a value and return it.

        With a key_* queueing style the first argument is the key and the
        rest are values; otherwise every argument is a value.
        """
        key = None
        values = args
        if self.queue.keyed:
            if not args or not isinstance(args[0], str):
                raise MissingKeyError(
                    f"queueing style '{self.queue.style.value}' requires a string key"
                )
            key, values = args[0], args[1:]

        value = self.shape(values)
        session[self.slot] = self.queue.merge(session.get(self.slot), key, value)
        logger.debug("Flashed %r under key %r into '%s'", value, key, self.slot)
        return value

    def flush(self, session: Session, *keys: str) -> Any:
        """
        Remove flash state from the session and return it.

        Without keys the whole store goes. With keys only those entries are
        removed; a single key returns its value, several return a list.
        """
        if not keys:
            logger.debug("Flushing flash store '%s'", self.slot)
            return session.pop(self.slot, None)

        if not self.queue.keyed:
            raise UnkeyedFlushError(
                f"cannot flush keys {keys!r}: queueing style '{self.queue.style.value}'"
                " does not store keys"
            )

        store = session.get(self.slot)
        remaining = dict(store) if isinstance(store, dict) else {}
        values = [remaining.pop(key, None) for key in keys]
        if store is not None:
            if remaining:
                session[self.slot] = remaining
            else:
                session.pop(self.slot, None)
        logger.debug("Flushed keys %r from flash store '%s'", keys, self.slot)

        if len(keys) == 1:
            return values[0]
        return values

    def materialize(self, session: Session, context: MutableMapping[str, Any]) -> RenderCycle:
        """Inject the view token into a template context for one render pass."""
        cycle = RenderCycle(session, self.slot)
        context[self.token_name] = self.dequeue.token(cycle)
        return cycle
