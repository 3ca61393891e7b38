"""Tests for the live notification aggregate of a session."""

from __future__ import annotations

import threading
import time

import pytest

from app.application.use_cases.brd_requests import (
    assign_analyst,
    create_brd_request,
    update_request_status,
)
from app.application.use_cases.comments import add_comment
from app.application.use_cases.notifications import NotificationCenter
from app.infrastructure.database import SessionLocal
from app.infrastructure.notifications import (
    BRD_REQUESTS_TOPIC,
    ChangeFeed,
    comments_topic,
)
from app.infrastructure.repositories import CommentRepository

pytestmark = pytest.mark.anyio


class FailingFeed(ChangeFeed):
    """Change feed refusing subscriptions on selected topics."""

    def __init__(self, failing_topics):
        super().__init__()
        self.failing_topics = set(failing_topics)

    def subscribe(self, topic, fetch, on_snapshot, *, on_error=None):
        if topic in self.failing_topics:
            raise RuntimeError(f"permission denied for {topic}")
        return super().subscribe(topic, fetch, on_snapshot, on_error=on_error)


@pytest.fixture
def feed():
    return ChangeFeed()


@pytest.fixture
def assigned_request(session, feed, requester, analyst, admin):
    request = create_brd_request(
        session, user=requester, project_name="Core banking upgrade", feed=feed
    )
    return assign_analyst(
        session,
        request_id=request.id,
        analyst_id=analyst.id,
        acting_user=admin,
        feed=feed,
    )


async def _settle(center: NotificationCenter) -> None:
    await center.flush()
    await center.flush()


async def test_start_opens_one_subscription_per_request_plus_status(
    feed, assigned_request, requester
):
    center = NotificationCenter(session_factory=SessionLocal, feed=feed)

    await center.start(requester.id)
    await _settle(center)

    assert center.watched_request_ids == [assigned_request.id]
    assert center.subscription_count == 2
    assert feed.active_count(comments_topic(assigned_request.id)) == 1
    assert [entry.id for entry in center.notifications] == [f"status_{assigned_request.id}"]
    assert center.unread_count == 1
    assert center.loading is False

    await center.stop()


async def test_stop_cancels_every_subscription(feed, assigned_request, requester):
    center = NotificationCenter(session_factory=SessionLocal, feed=feed)
    await center.start(requester.id)
    await _settle(center)

    await center.stop()

    assert feed.active_count() == 0
    assert center.notifications == []
    assert center.unread_count == 0
    assert center.running is False


async def test_new_comment_reaches_the_recipient(
    session, feed, assigned_request, requester, analyst
):
    center = NotificationCenter(session_factory=SessionLocal, feed=feed)
    await center.start(requester.id)
    await _settle(center)

    comment = add_comment(
        session,
        request_id=assigned_request.id,
        author=analyst,
        text="Please attach the current process flow",
        feed=feed,
    )
    await _settle(center)

    assert center.notifications[0].id == f"comment_{comment.id}"
    assert center.notifications[0].user_name == analyst.name
    assert center.notifications[0].request_name == "Core banking upgrade"
    assert center.unread_count == 2

    await center.stop()


async def test_own_comments_are_not_notified(session, feed, assigned_request, requester):
    center = NotificationCenter(session_factory=SessionLocal, feed=feed)
    await center.start(requester.id)
    await _settle(center)

    add_comment(
        session, request_id=assigned_request.id, author=requester, text="Done", feed=feed
    )
    await _settle(center)

    assert all(entry.type == "status" for entry in center.notifications)

    await center.stop()


async def test_status_change_updates_existing_entry(
    session, feed, assigned_request, requester, analyst
):
    center = NotificationCenter(session_factory=SessionLocal, feed=feed)
    await center.start(requester.id)
    await _settle(center)
    await center.mark_read(f"status_{assigned_request.id}")

    update_request_status(
        session,
        request_id=assigned_request.id,
        status="Rejected",
        acting_user=analyst,
        feed=feed,
    )
    await _settle(center)

    [entry] = center.notifications
    assert entry.message == "BRD has been rejected"
    assert entry.read is True
    assert center.unread_count == 0

    await center.stop()


async def test_assignment_rebuilds_watched_requests(
    session, feed, requester, analyst, admin
):
    request = create_brd_request(session, user=requester, project_name="Kiosk", feed=feed)
    center = NotificationCenter(session_factory=SessionLocal, feed=feed)
    await center.start(analyst.id)
    await _settle(center)
    assert center.watched_request_ids == []
    assert center.subscription_count == 1

    assign_analyst(
        session, request_id=request.id, analyst_id=analyst.id, acting_user=admin, feed=feed
    )
    await _settle(center)

    assert center.watched_request_ids == [request.id]
    assert center.subscription_count == 2
    assert feed.active_count(comments_topic(request.id)) == 1

    add_comment(session, request_id=request.id, author=requester, text="Hello", feed=feed)
    await _settle(center)

    assert [entry.type for entry in center.notifications] == ["comment"]

    await center.stop()
    assert feed.active_count() == 0


async def test_failed_subscription_does_not_block_the_others(
    session, requester, analyst, admin
):
    setup_feed = ChangeFeed()
    broken = create_brd_request(
        session, user=requester, project_name="Broken", feed=setup_feed
    )
    healthy = create_brd_request(
        session, user=requester, project_name="Healthy", feed=setup_feed
    )
    for request in (broken, healthy):
        assign_analyst(
            session,
            request_id=request.id,
            analyst_id=analyst.id,
            acting_user=admin,
            feed=setup_feed,
        )

    feed = FailingFeed({comments_topic(broken.id)})
    center = NotificationCenter(session_factory=SessionLocal, feed=feed)
    await center.start(requester.id)
    await _settle(center)

    assert center.loading is False
    assert center.subscription_count == 2

    add_comment(session, request_id=healthy.id, author=analyst, text="Ready", feed=feed)
    await _settle(center)

    assert any(entry.type == "comment" for entry in center.notifications)

    await center.stop()
    assert feed.active_count() == 0


async def test_mark_read_persists_comment_and_navigates(
    session, feed, assigned_request, requester, analyst
):
    visited = []
    center = NotificationCenter(
        session_factory=SessionLocal, feed=feed, navigator=visited.append
    )
    comment = add_comment(
        session, request_id=assigned_request.id, author=analyst, text="Check", feed=feed
    )
    await center.start(requester.id)
    await _settle(center)
    assert center.unread_count == 2

    updated = await center.mark_read(f"comment_{comment.id}")
    await _settle(center)

    assert updated is not None and updated.read is True
    assert center.unread_count == 1
    assert visited == [assigned_request.id]
    with SessionLocal() as check:
        assert CommentRepository(check).get(comment.id).read is True

    await center.stop()


async def test_mark_read_on_status_writes_nothing(feed, assigned_request, requester):
    writes = []
    center = NotificationCenter(
        session_factory=SessionLocal,
        feed=feed,
        comment_read_writer=lambda request_id, comment_id: writes.append(comment_id),
    )
    await center.start(requester.id)
    await _settle(center)

    await center.mark_read(f"status_{assigned_request.id}")

    assert writes == []
    assert center.unread_count == 0

    await center.stop()


async def test_mark_read_ignores_unknown_ids(feed, assigned_request, requester):
    center = NotificationCenter(session_factory=SessionLocal, feed=feed)
    await center.start(requester.id)
    await _settle(center)

    assert await center.mark_read("comment_999") is None
    assert center.unread_count == 1

    await center.stop()


async def test_mark_all_read_writes_once_per_unread_comment(
    session, feed, requester, analyst, admin
):
    first = create_brd_request(session, user=requester, project_name="First", feed=feed)
    second = create_brd_request(session, user=requester, project_name="Second", feed=feed)
    for request in (first, second):
        assign_analyst(
            session, request_id=request.id, analyst_id=analyst.id, acting_user=admin, feed=feed
        )
    comment_ids = [
        add_comment(session, request_id=request_id, author=analyst, text=text, feed=feed).id
        for request_id, text in (
            (first.id, "one"),
            (first.id, "two"),
            (second.id, "three"),
        )
    ]

    writes = []
    snapshots = []

    async def listener(notifications, unread_count):
        snapshots.append(unread_count)

    center = NotificationCenter(
        session_factory=SessionLocal,
        feed=feed,
        listener=listener,
        comment_read_writer=lambda request_id, comment_id: writes.append(comment_id),
    )
    await center.start(requester.id)
    await _settle(center)
    assert center.unread_count == 5

    await center.mark_all_read()

    assert sorted(writes) == sorted(comment_ids)
    assert center.unread_count == 0
    assert all(entry.read for entry in center.notifications)
    assert snapshots[-1] == 0

    await center.stop()


async def test_failed_read_write_keeps_local_state(feed, session, assigned_request, requester, analyst):
    def failing_writer(request_id, comment_id):
        raise RuntimeError("write rejected")

    comment = add_comment(
        session, request_id=assigned_request.id, author=analyst, text="Hi", feed=feed
    )
    center = NotificationCenter(
        session_factory=SessionLocal, feed=feed, comment_read_writer=failing_writer
    )
    await center.start(requester.id)
    await _settle(center)

    await center.mark_all_read()

    assert center.unread_count == 0
    with SessionLocal() as check:
        assert CommentRepository(check).get(comment.id).read is False

    await center.stop()


async def test_restart_for_another_user_releases_previous_subscriptions(
    feed, assigned_request, requester, admin
):
    center = NotificationCenter(session_factory=SessionLocal, feed=feed)
    await center.start(requester.id)
    await _settle(center)

    await center.start(admin.id)
    await _settle(center)

    assert center.user_id == admin.id
    assert center.watched_request_ids == []
    assert feed.active_count() == 2

    await center.stop()
    assert feed.active_count() == 0


async def test_explicit_zero_limit_is_not_replaced_by_the_default(
    feed, assigned_request, requester
):
    center = NotificationCenter(session_factory=SessionLocal, feed=feed, limit=0)
    await center.start(requester.id)
    await _settle(center)

    assert center.notifications == []
    assert center.unread_count == 0

    await center.stop()


async def test_stop_does_not_wait_for_a_query_in_flight(
    feed, assigned_request, requester
):
    fetch_started = threading.Event()
    release_fetch = threading.Event()
    gate = {"armed": False}

    def slow_session_factory():
        if gate["armed"]:
            fetch_started.set()
            release_fetch.wait(timeout=5)
        return SessionLocal()

    center = NotificationCenter(session_factory=slow_session_factory, feed=feed)
    await center.start(requester.id)
    await _settle(center)

    gate["armed"] = True
    publisher = threading.Thread(target=feed.publish, args=(BRD_REQUESTS_TOPIC,))
    publisher.start()
    assert fetch_started.wait(timeout=5)

    started = time.monotonic()
    await center.stop()
    elapsed = time.monotonic() - started

    release_fetch.set()
    publisher.join(timeout=5)
    assert elapsed < 0.5
    assert feed.active_count() == 0
