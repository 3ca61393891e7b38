"""In-process change feed delivering live query snapshots to subscribers."""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from typing import Any, Callable, DefaultDict, Generic, Sequence, Set, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

BRD_REQUESTS_TOPIC = "brd_requests"

ErrorCallback = Callable[[Exception], None]


def comments_topic(request_id: int) -> str:
    """Return the topic carrying comment writes for ``request_id``."""

    return f"{BRD_REQUESTS_TOPIC}/{request_id}/comments"


class LiveQuerySubscription(Generic[T]):
    """A registered query re-run whenever its topic changes."""

    def __init__(
        self,
        feed: "ChangeFeed",
        topic: str,
        fetch: Callable[[], Sequence[T]],
        on_snapshot: Callable[[Sequence[T]], None],
        on_error: ErrorCallback | None = None,
    ) -> None:
        self._feed = feed
        self.topic = topic
        self._fetch = fetch
        self._on_snapshot = on_snapshot
        self._on_error = on_error
        self._active = True
        # Serializes emissions so a single subscription never delivers out of order.
        self._emit_lock = threading.RLock()
        # Guards ``_active``; never held while the query runs.
        self._state_lock = threading.RLock()

    @property
    def active(self) -> bool:
        return self._active

    def emit(self) -> None:
        """Run the query and deliver its snapshot, raising on failure."""

        with self._emit_lock:
            if not self._active:
                return
            rows = self._fetch()
            with self._state_lock:
                if self._active:
                    self._on_snapshot(rows)

    def refresh(self) -> None:
        """Deliver a new snapshot, routing failures to the error callback."""

        try:
            self.emit()
        except Exception as exc:
            if self._on_error is None:
                logger.exception("Live query on %s failed", self.topic)
                return
            try:
                self._on_error(exc)
            except Exception:
                logger.exception("Error handler for live query on %s failed", self.topic)

    def unsubscribe(self) -> None:
        """Stop delivering snapshots. Safe to call more than once.

        Does not wait for a query already in flight; its rows are discarded.
        """

        with self._state_lock:
            if not self._active:
                return
            self._active = False
        self._feed._remove(self)


class ChangeFeed:
    """Registry of live queries grouped by topic."""

    def __init__(self) -> None:
        self._subscriptions: DefaultDict[str, Set[LiveQuerySubscription[Any]]] = defaultdict(set)
        self._lock = threading.Lock()

    def subscribe(
        self,
        topic: str,
        fetch: Callable[[], Sequence[T]],
        on_snapshot: Callable[[Sequence[T]], None],
        *,
        on_error: ErrorCallback | None = None,
    ) -> LiveQuerySubscription[T]:
        """Register a live query and deliver its initial snapshot.

        The initial fetch runs synchronously; if it raises, the subscription is
        discarded and the exception propagates to the caller.
        """

        subscription: LiveQuerySubscription[T] = LiveQuerySubscription(
            self, topic, fetch, on_snapshot, on_error
        )
        with self._lock:
            self._subscriptions[topic].add(subscription)
        try:
            subscription.emit()
        except Exception:
            subscription.unsubscribe()
            raise
        return subscription

    def publish(self, topic: str) -> None:
        """Re-run every live query registered on ``topic``."""

        with self._lock:
            subscriptions = list(self._subscriptions.get(topic, ()))
        for subscription in subscriptions:
            subscription.refresh()

    def active_count(self, topic: str | None = None) -> int:
        """Return the number of live queries, optionally restricted to ``topic``."""

        with self._lock:
            if topic is not None:
                return len(self._subscriptions.get(topic, ()))
            return sum(len(items) for items in self._subscriptions.values())

    def _remove(self, subscription: LiveQuerySubscription[Any]) -> None:
        with self._lock:
            subscriptions = self._subscriptions.get(subscription.topic)
            if subscriptions is None:
                return
            subscriptions.discard(subscription)
            if not subscriptions:
                self._subscriptions.pop(subscription.topic, None)


change_feed = ChangeFeed()


__all__ = [
    "BRD_REQUESTS_TOPIC",
    "ChangeFeed",
    "LiveQuerySubscription",
    "change_feed",
    "comments_topic",
]
