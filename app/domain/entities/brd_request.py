"""Domain entity representing a business requirements document request."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

STATUS_NEW = "New"
STATUS_PENDING_REVIEW = "Pending Review"
STATUS_IN_PROGRESS = "In Progress"
STATUS_ALREADY_GENERATED = "Already Generated"
STATUS_GENERATED = "Generated"
STATUS_IN_REVIEW = "In Review"
STATUS_APPROVED = "Approved"
STATUS_COMPLETED = "Completed"
STATUS_REJECTED = "Rejected"

BRD_STATUSES: tuple[str, ...] = (
    STATUS_NEW,
    STATUS_PENDING_REVIEW,
    STATUS_IN_PROGRESS,
    STATUS_ALREADY_GENERATED,
    STATUS_GENERATED,
    STATUS_IN_REVIEW,
    STATUS_APPROVED,
    STATUS_COMPLETED,
    STATUS_REJECTED,
)

# Statuses counted against an analyst's workload.
ACTIVE_ASSIGNMENT_STATUSES: tuple[str, ...] = (STATUS_PENDING_REVIEW, STATUS_IN_PROGRESS)

EDITOR_REQUESTER = "requester"
EDITOR_ANALYST = "analyst"


@dataclass
class AssignmentRecord:
    """A single analyst assignment performed by an administrator."""

    analyst_id: int
    analyst_name: str
    assigned_by: int
    assigned_by_name: str
    assigned_at: datetime


@dataclass
class BRDRequest:
    """Request raised by a business unit to produce a BRD."""

    id: int | None
    project_name: str
    created_by: int
    created_by_name: str
    business_unit: str | None
    status: str
    priority: str | None = None
    request_type: str | None = None
    target_date: str | None = None
    background: str | None = None
    current_condition: str | None = None
    expected_condition: str | None = None
    assigned_analyst_id: int | None = None
    assigned_analyst_name: str | None = None
    assigned_at: datetime | None = None
    assignment_history: list[AssignmentRecord] = field(default_factory=list)
    template_id: int | None = None
    template_name: str | None = None
    template_sections: list[dict[str, Any]] = field(default_factory=list)
    form_data: dict[str, Any] = field(default_factory=dict)
    generated_content: str | None = None
    current_editor: str = EDITOR_REQUESTER
    created_at: datetime | None = None
    updated_at: datetime | None = None
    updated_by: int | None = None

    def is_participant(self, user_id: int | None) -> bool:
        """Return ``True`` when ``user_id`` created or is assigned to the request."""

        return user_id is not None and user_id in (
            self.created_by,
            self.assigned_analyst_id,
        )


__all__ = [
    "ACTIVE_ASSIGNMENT_STATUSES",
    "AssignmentRecord",
    "BRDRequest",
    "BRD_STATUSES",
    "EDITOR_ANALYST",
    "EDITOR_REQUESTER",
    "STATUS_ALREADY_GENERATED",
    "STATUS_APPROVED",
    "STATUS_COMPLETED",
    "STATUS_GENERATED",
    "STATUS_IN_PROGRESS",
    "STATUS_IN_REVIEW",
    "STATUS_NEW",
    "STATUS_PENDING_REVIEW",
    "STATUS_REJECTED",
]
