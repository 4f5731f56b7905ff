"""In-process event bus for announcing processed content.

Each bus instance owns its own subscriber table; nothing is global. Every event
name is bound to one payload model and `emit` refuses anything else.

Delivery is synchronous, in subscription order, over a snapshot of the
subscribers taken when `emit` starts. A callback that raises is logged and
skipped; the remaining callbacks still run.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from threading import Lock

from pydantic import BaseModel

from .models.content import ContentProcessed

log = logging.getLogger(__name__)

CONTENT_PROCESSED = "content:processed"

EVENT_PAYLOADS: dict[str, type[BaseModel]] = {
    CONTENT_PROCESSED: ContentProcessed,
}

EventCallback = Callable[[BaseModel], None]


@dataclass
class _Subscription:
    id: str
    event: str
    callback: EventCallback
    once: bool = False


class EventBus:
    """Publish/subscribe channel with a typed payload per event name."""

    def __init__(self, payload_types: Mapping[str, type[BaseModel]] | None = None):
        self._payload_types = dict(EVENT_PAYLOADS if payload_types is None else payload_types)
        self._subscriptions: dict[str, list[_Subscription]] = {}
        self._index: dict[str, str] = {}
        self._counter = itertools.count()
        self._lock = Lock()

    @property
    def events(self) -> list[str]:
        return sorted(self._payload_types)

    def _check_event(self, event: str) -> type[BaseModel]:
        try:
            return self._payload_types[event]
        except KeyError:
            raise ValueError(f"Unknown event: {event!r}") from None

    def _subscribe(self, event: str, callback: EventCallback, once: bool) -> str:
        self._check_event(event)
        with self._lock:
            subscription_id = f"{event}#{next(self._counter)}"
            self._subscriptions.setdefault(event, []).append(
                _Subscription(id=subscription_id, event=event, callback=callback, once=once)
            )
            self._index[subscription_id] = event
        log.debug("Subscribed to %r (id=%s)", event, subscription_id)
        return subscription_id

    def on(self, event: str, callback: EventCallback) -> str:
        """Subscribe to an event. Returns a subscription id for `off`."""
        return self._subscribe(event, callback, once=False)

    def once(self, event: str, callback: EventCallback) -> str:
        """Subscribe for a single delivery."""
        return self._subscribe(event, callback, once=True)

    def off(self, subscription_id: str) -> bool:
        """Remove a subscription. Returns False if the id is unknown."""
        with self._lock:
            event = self._index.pop(subscription_id, None)
            if event is None:
                return False
            remaining = [sub for sub in self._subscriptions.get(event, []) if sub.id != subscription_id]
            if remaining:
                self._subscriptions[event] = remaining
            else:
                self._subscriptions.pop(event, None)
        log.debug("Unsubscribed from %r (id=%s)", event, subscription_id)
        return True

    def emit(self, event: str, payload: BaseModel) -> int:
        """Deliver `payload` to every subscriber of `event`.

        Returns the number of callbacks that completed without raising.
        """
        expected = self._check_event(event)
        if not isinstance(payload, expected):
            raise TypeError(f"{event!r} expects {expected.__name__}, got {type(payload).__name__}")

        with self._lock:
            snapshot = list(self._subscriptions.get(event, []))
        log.debug("Emitting %r to %d subscriber(s)", event, len(snapshot))

        delivered = 0
        for sub in snapshot:
            if sub.once and not self.off(sub.id):
                # Already consumed by a concurrent emit.
                continue
            try:
                sub.callback(payload)
            except Exception:
                log.exception("Subscriber %s failed handling %r", sub.id, event)
                continue
            delivered += 1
        return delivered

    def clear(self) -> None:
        """Drop every subscription."""
        with self._lock:
            self._subscriptions.clear()
            self._index.clear()

    def subscription_count(self, event: str | None = None) -> int:
        with self._lock:
            if event is not None:
                return len(self._subscriptions.get(event, []))
            return sum(len(subs) for subs in self._subscriptions.values())
