"""Session scoped aggregation of live comment and status notifications."""

from __future__ import annotations

import asyncio
import inspect
import logging
import threading
from dataclasses import dataclass, replace
from functools import partial
from typing import Any, Awaitable, Callable, Sequence

import anyio
from sqlalchemy.orm import Session

from app.application.use_cases.comments import mark_comment_read
from app.config import get_settings
from app.domain.entities import Notification
from app.infrastructure.notifications import (
    BRD_REQUESTS_TOPIC,
    ChangeFeed,
    LiveQuerySubscription,
    change_feed,
    comments_topic,
)

from .queries import (
    load_linked_requests,
    recent_comment_notifications,
    recent_status_notifications,
)
from .reconcile import merge_notifications

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]
Listener = Callable[[Sequence[Notification], int], Awaitable[None]]
Navigator = Callable[[int], Any]
CommentReadWriter = Callable[[int, int], None]

_STATUS_KEY = "status"


def _comments_key(request_id: int) -> str:
    return f"comments:{request_id}"


def _default_session_factory() -> Session:
    from app.infrastructure import database

    return database.SessionLocal()


@dataclass(frozen=True)
class _NotificationBatch:
    generation: int
    key: str
    notifications: tuple[Notification, ...]


@dataclass(frozen=True)
class _LinkedRequestsChanged:
    requests: tuple[tuple[int, str], ...]


class NotificationCenter:
    """Own the notification aggregate of one authenticated session.

    ``start`` opens one live query per request linked to the user plus one over
    the user's own requests; every live query only posts events to a queue that
    a single consumer task drains, so merges happen strictly one at a time.
    ``stop`` cancels every live query and discards the aggregate.
    """

    def __init__(
        self,
        *,
        session_factory: SessionFactory | None = None,
        feed: ChangeFeed | None = None,
        listener: Listener | None = None,
        navigator: Navigator | None = None,
        comment_read_writer: CommentReadWriter | None = None,
        limit: int | None = None,
        window_days: int | None = None,
    ) -> None:
        settings = get_settings()
        self._session_factory = session_factory or _default_session_factory
        self._feed = feed or change_feed
        self._listener = listener
        self._navigator = navigator
        self._write_comment_read = comment_read_writer or self._persist_comment_read
        self._limit = settings.notification_limit if limit is None else limit
        self._window_days = (
            settings.notification_window_days if window_days is None else window_days
        )

        self._notifications: list[Notification] = []
        self._unread_count = 0
        self._user_id: int | None = None
        self._linked: dict[int, str] = {}

        self._registry_lock = threading.Lock()
        self._generation = 0
        self._subscriptions: dict[str, LiveQuerySubscription[Any]] = {}
        self._membership: LiveQuerySubscription[Any] | None = None
        self._loading: dict[str, bool] = {}

        self._loop: asyncio.AbstractEventLoop | None = None
        self._queue: asyncio.Queue[Any] | None = None
        self._consumer: asyncio.Task[None] | None = None

    @property
    def notifications(self) -> list[Notification]:
        return list(self._notifications)

    @property
    def unread_count(self) -> int:
        return self._unread_count

    @property
    def user_id(self) -> int | None:
        return self._user_id

    @property
    def running(self) -> bool:
        return self._consumer is not None

    @property
    def loading(self) -> bool:
        with self._registry_lock:
            return any(self._loading.values())

    @property
    def watched_request_ids(self) -> list[int]:
        return sorted(self._linked)

    @property
    def subscription_count(self) -> int:
        with self._registry_lock:
            return len(self._subscriptions)

    async def start(self, user_id: int) -> None:
        """Begin watching notifications for ``user_id``."""

        if self._consumer is not None:
            if self._user_id == user_id:
                return
            await self.stop()

        self._user_id = user_id
        self._loop = asyncio.get_running_loop()
        self._queue = asyncio.Queue()
        self._consumer = asyncio.create_task(self._consume())

        try:
            linked = await anyio.to_thread.run_sync(self._load_linked_requests, user_id)
        except Exception:
            logger.exception("Could not load the requests linked to user %s", user_id)
            linked = {}

        await self._open_subscriptions(linked)
        await anyio.to_thread.run_sync(self._open_membership_watch, user_id)

    async def stop(self) -> None:
        """Cancel every live query and discard the aggregate."""

        self._close_subscriptions(include_membership=True)

        consumer = self._consumer
        self._consumer = None
        if consumer is not None:
            consumer.cancel()
            try:
                await consumer
            except asyncio.CancelledError:
                pass

        self._queue = None
        self._loop = None
        self._user_id = None
        self._linked = {}
        self._notifications = []
        self._unread_count = 0

    async def flush(self) -> None:
        """Wait until every event posted so far has been applied."""

        queue = self._queue
        if queue is None:
            return
        await asyncio.sleep(0)
        await queue.join()

    async def mark_read(self, notification_id: str) -> Notification | None:
        """Mark one notification as read and open its request."""

        entry = next(
            (item for item in self._notifications if item.id == notification_id), None
        )
        if entry is None:
            logger.debug("Ignoring read receipt for unknown notification %s", notification_id)
            return None

        updated = entry
        if not entry.read:
            updated = replace(entry, read=True)
            self._notifications = [
                updated if item.id == notification_id else item
                for item in self._notifications
            ]
            self._unread_count = max(self._unread_count - 1, 0)
            await self._notify_listener()

        if entry.is_comment:
            await self._persist_reads([entry])
        await self._navigate(entry.request_id)
        return updated

    async def mark_all_read(self) -> None:
        """Mark the whole aggregate as read."""

        pending_comments = [
            item for item in self._notifications if item.is_comment and not item.read
        ]
        self._notifications = [
            item if item.read else replace(item, read=True) for item in self._notifications
        ]
        self._unread_count = 0
        await self._notify_listener()
        await self._persist_reads(pending_comments)

    async def _open_subscriptions(self, linked: dict[int, str]) -> None:
        self._linked = dict(linked)
        with self._registry_lock:
            generation = self._generation
        user_id = self._user_id
        if user_id is None:
            return
        await anyio.to_thread.run_sync(self._subscribe_all, user_id, generation, dict(linked))

    def _subscribe_all(self, user_id: int, generation: int, linked: dict[int, str]) -> None:
        for request_id, request_name in linked.items():
            self._subscribe(
                key=_comments_key(request_id),
                topic=comments_topic(request_id),
                fetch=partial(
                    self._with_session,
                    recent_comment_notifications,
                    user_id=user_id,
                    request_id=request_id,
                    request_name=request_name,
                    window_days=self._window_days,
                ),
                generation=generation,
            )
        self._subscribe(
            key=_STATUS_KEY,
            topic=BRD_REQUESTS_TOPIC,
            fetch=partial(
                self._with_session,
                recent_status_notifications,
                user_id=user_id,
                window_days=self._window_days,
            ),
            generation=generation,
        )

    def _subscribe(
        self,
        *,
        key: str,
        topic: str,
        fetch: Callable[[], Sequence[Notification]],
        generation: int,
    ) -> None:
        with self._registry_lock:
            if generation != self._generation or key in self._subscriptions:
                return
            self._loading[key] = True

        def on_snapshot(rows: Sequence[Notification]) -> None:
            self._set_loading(key, False)
            self._post(_NotificationBatch(generation, key, tuple(rows)))

        def on_error(exc: Exception) -> None:
            logger.warning("Live notifications for %s stopped updating: %s", key, exc)

        try:
            subscription = self._feed.subscribe(topic, fetch, on_snapshot, on_error=on_error)
        except Exception:
            logger.exception(
                "Could not subscribe to %s for user %s", key, self._user_id
            )
            self._set_loading(key, False)
            return

        with self._registry_lock:
            if generation == self._generation and key not in self._subscriptions:
                self._subscriptions[key] = subscription
                return
        subscription.unsubscribe()

    def _set_loading(self, key: str, value: bool) -> None:
        with self._registry_lock:
            self._loading[key] = value

    def _open_membership_watch(self, user_id: int) -> None:
        def fetch() -> list[tuple[int, str]]:
            return sorted(self._load_linked_requests(user_id).items())

        def on_snapshot(rows: Sequence[tuple[int, str]]) -> None:
            self._post(_LinkedRequestsChanged(tuple(rows)))

        try:
            subscription = self._feed.subscribe(BRD_REQUESTS_TOPIC, fetch, on_snapshot)
        except Exception:
            logger.exception("Could not watch the requests linked to user %s", user_id)
            return

        with self._registry_lock:
            if self._user_id == user_id and self._membership is None:
                self._membership = subscription
                return
        subscription.unsubscribe()

    def _close_subscriptions(self, *, include_membership: bool) -> None:
        with self._registry_lock:
            self._generation += 1
            subscriptions = list(self._subscriptions.values())
            self._subscriptions = {}
            self._loading = {}
            membership = self._membership if include_membership else None
            if include_membership:
                self._membership = None
        if membership is not None:
            subscriptions.append(membership)
        for subscription in subscriptions:
            subscription.unsubscribe()

    def _post(self, event: Any) -> None:
        loop, queue = self._loop, self._queue
        if loop is None or queue is None:
            return
        try:
            loop.call_soon_threadsafe(queue.put_nowait, event)
        except RuntimeError:
            logger.debug("Dropping notification event posted after shutdown")

    async def _consume(self) -> None:
        queue = self._queue
        assert queue is not None
        while True:
            event = await queue.get()
            try:
                if isinstance(event, _NotificationBatch):
                    await self._apply_batch(event)
                elif isinstance(event, _LinkedRequestsChanged):
                    await self._apply_linked_requests(dict(event.requests))
            except Exception:
                logger.exception("Failed to apply notification event %r", event)
            finally:
                queue.task_done()

    async def _apply_batch(self, batch: _NotificationBatch) -> None:
        if batch.generation != self._generation:
            return
        self._notifications, self._unread_count = merge_notifications(
            self._notifications, batch.notifications, limit=self._limit
        )
        await self._notify_listener()

    async def _apply_linked_requests(self, linked: dict[int, str]) -> None:
        if linked == self._linked:
            return
        logger.debug(
            "Requests linked to user %s changed, rebuilding live queries", self._user_id
        )
        self._close_subscriptions(include_membership=False)
        await self._open_subscriptions(linked)

    async def _persist_reads(self, entries: Sequence[Notification]) -> None:
        targets = [entry for entry in entries if entry.comment_id is not None]
        if not targets:
            return
        results = await asyncio.gather(
            *(
                anyio.to_thread.run_sync(
                    self._write_comment_read, entry.request_id, entry.comment_id
                )
                for entry in targets
            ),
            return_exceptions=True,
        )
        for entry, result in zip(targets, results):
            if isinstance(result, Exception):
                logger.error("Could not persist read state for %s: %s", entry.id, result)

    async def _navigate(self, request_id: int) -> None:
        if self._navigator is None:
            return
        try:
            result = self._navigator(request_id)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Navigation to request %s failed", request_id)

    async def _notify_listener(self) -> None:
        if self._listener is None:
            return
        try:
            await self._listener(list(self._notifications), self._unread_count)
        except Exception:
            logger.exception("Notification listener failed")

    def _load_linked_requests(self, user_id: int) -> dict[int, str]:
        return self._with_session(load_linked_requests, user_id)

    def _with_session(self, query: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        session = self._session_factory()
        try:
            return query(session, *args, **kwargs)
        finally:
            session.close()

    def _persist_comment_read(self, request_id: int, comment_id: int) -> None:
        self._with_session(
            mark_comment_read, request_id=request_id, comment_id=comment_id, feed=self._feed
        )


__all__ = ["NotificationCenter"]
