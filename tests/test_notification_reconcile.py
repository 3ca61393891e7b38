"""Tests for merging notification batches into the session aggregate."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from app.application.use_cases.notifications import (
    DEFAULT_STATUS_MESSAGE,
    build_comment_notifications,
    build_status_notifications,
    count_unread,
    merge_notifications,
    status_message,
)
from app.domain.entities import BRDRequest, Comment, Notification

BASE = datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)


def _at(seconds: int) -> datetime:
    return BASE + timedelta(seconds=seconds)


def _comment_notification(comment_id: int, seconds: int, *, read: bool = False) -> Notification:
    return Notification(
        id=f"comment_{comment_id}",
        request_id=1,
        request_name="Mobile onboarding",
        type="comment",
        message=f"comment {comment_id}",
        timestamp=_at(seconds),
        read=read,
        user_id=2,
        user_name="Budi",
        comment_id=comment_id,
    )


def _status_notification(request_id: int, seconds: int, *, status: str, read: bool = False) -> Notification:
    return Notification(
        id=f"status_{request_id}",
        request_id=request_id,
        request_name="Mobile onboarding",
        type="status",
        message=status_message(status),
        timestamp=_at(seconds),
        read=read,
        status=status,
    )


def _comment(comment_id: int, *, author: int, recipient: int | None, seconds: int = 0, read: bool = False) -> Comment:
    return Comment(
        id=comment_id,
        request_id=1,
        user_id=author,
        user_name=f"user {author}",
        user_role="Business Analyst",
        text=f"text {comment_id}",
        recipient_id=recipient,
        read=read,
        timestamp=_at(seconds),
    )


def test_first_comment_batch_is_unread():
    merged, unread = merge_notifications([], [_comment_notification(1, 100)])

    assert [entry.id for entry in merged] == ["comment_1"]
    assert merged[0].read is False
    assert unread == 1


def test_read_flag_never_reverts_and_fields_update():
    existing = [_status_notification(42, 50, status="In Progress", read=True)]
    incoming = [_status_notification(42, 60, status="Rejected", read=False)]

    merged, unread = merge_notifications(existing, incoming)

    assert len(merged) == 1
    assert merged[0].read is True
    assert merged[0].message == "BRD has been rejected"
    assert merged[0].timestamp == _at(60)
    assert unread == 0


def test_cap_evicts_the_oldest_entry():
    existing = [_comment_notification(index, index) for index in range(1, 51)]

    merged, unread = merge_notifications(existing, [_comment_notification(1000, 1000)])

    assert len(merged) == 50
    assert merged[0].timestamp == _at(1000)
    assert "comment_1" not in {entry.id for entry in merged}
    assert unread == 50


def test_result_is_sorted_newest_first_and_deduplicated():
    existing = [_comment_notification(1, 10), _comment_notification(2, 30)]
    incoming = [_comment_notification(3, 20), _comment_notification(2, 30)]

    merged, _ = merge_notifications(existing, incoming)

    assert [entry.id for entry in merged] == ["comment_2", "comment_3", "comment_1"]


def test_merging_the_same_batch_twice_is_idempotent():
    batch = [_comment_notification(1, 10), _status_notification(7, 20, status="Completed")]

    once = merge_notifications([], batch)
    twice = merge_notifications(once[0], batch)

    assert once == twice


def test_incoming_read_state_is_respected():
    existing = [_comment_notification(1, 10)]

    merged, unread = merge_notifications(existing, [_comment_notification(1, 10, read=True)])

    assert merged[0].read is True
    assert unread == 0


def test_unread_count_matches_entries():
    batch = [
        _comment_notification(1, 10, read=True),
        _comment_notification(2, 20),
        _status_notification(3, 30, status="Approved"),
    ]

    merged, unread = merge_notifications([], batch)

    assert unread == count_unread(merged) == 2


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        ("In Progress", "Analyst has started work on the BRD"),
        ("Already Generated", "BRD has finished generation"),
        ("Completed", "BRD has finished processing"),
        ("Rejected", "BRD has been rejected"),
        ("Approved", DEFAULT_STATUS_MESSAGE),
        ("Pending Review", DEFAULT_STATUS_MESSAGE),
        (None, DEFAULT_STATUS_MESSAGE),
    ],
)
def test_status_message_table(status, expected):
    assert status_message(status) == expected


def test_comment_notifications_skip_own_and_foreign_comments():
    comments = [
        _comment(1, author=2, recipient=1, seconds=5),
        _comment(2, author=1, recipient=2, seconds=6),
        _comment(3, author=3, recipient=2, seconds=7),
        _comment(4, author=2, recipient=None, seconds=8),
        _comment(5, author=2, recipient=1, seconds=9, read=True),
    ]

    notifications = build_comment_notifications(
        comments, user_id=1, request_id=1, request_name="Mobile onboarding"
    )

    assert [entry.id for entry in notifications] == ["comment_1", "comment_5"]
    assert notifications[0].user_name == "user 2"
    assert notifications[0].comment_id == 1
    assert notifications[1].read is True


def test_comment_without_timestamp_defaults_to_now():
    comment = _comment(1, author=2, recipient=1)
    comment.timestamp = None

    [notification] = build_comment_notifications(
        [comment], user_id=1, request_id=1, request_name="Mobile onboarding"
    )

    assert notification.timestamp.tzinfo is not None
    assert abs(datetime.now(timezone.utc) - notification.timestamp) < timedelta(minutes=1)


def test_status_notifications_only_for_own_requests_past_new():
    requests = [
        BRDRequest(
            id=10,
            project_name="Core banking",
            created_by=1,
            created_by_name="Rina",
            business_unit=None,
            status="In Progress",
            updated_at=_at(100),
        ),
        BRDRequest(
            id=11,
            project_name="Branch kiosk",
            created_by=1,
            created_by_name="Rina",
            business_unit=None,
            status="New",
            updated_at=_at(100),
        ),
        BRDRequest(
            id=12,
            project_name="Payroll",
            created_by=9,
            created_by_name="Someone",
            business_unit=None,
            status="Rejected",
            updated_at=_at(100),
        ),
    ]

    notifications = build_status_notifications(requests, user_id=1)

    assert [entry.id for entry in notifications] == ["status_10"]
    assert notifications[0].message == "Analyst has started work on the BRD"
    assert notifications[0].request_name == "Core banking"
    assert notifications[0].read is False
