"""Domain entities exposed by the application."""

from .activity import (
    ACTIVITY_BRD_GENERATED,
    ACTIVITY_COMPLETION,
    ACTIVITY_FORM_UPDATE,
    ACTIVITY_STATUS_CHANGE,
    Activity,
)
from .brd_request import (
    ACTIVE_ASSIGNMENT_STATUSES,
    AssignmentRecord,
    BRDRequest,
    BRD_STATUSES,
    EDITOR_ANALYST,
    EDITOR_REQUESTER,
    STATUS_ALREADY_GENERATED,
    STATUS_APPROVED,
    STATUS_COMPLETED,
    STATUS_GENERATED,
    STATUS_IN_PROGRESS,
    STATUS_IN_REVIEW,
    STATUS_NEW,
    STATUS_PENDING_REVIEW,
    STATUS_REJECTED,
)
from .comment import Comment
from .notification import (
    NOTIFICATION_TYPE_COMMENT,
    NOTIFICATION_TYPE_STATUS,
    Notification,
    comment_notification_id,
    status_notification_id,
)
from .role import ROLE_ADMIN, ROLE_ANALYST, ROLE_NAMES, ROLE_REQUESTER, Role
from .system_settings import (
    DEFAULT_MAINTENANCE_MESSAGE,
    GENERAL_SETTINGS_KEY,
    SystemSettings,
)
from .template import FIELD_TYPES, Template, TemplateField, TemplateSection
from .user import User

__all__ = [
    "ACTIVE_ASSIGNMENT_STATUSES",
    "ACTIVITY_BRD_GENERATED",
    "ACTIVITY_COMPLETION",
    "ACTIVITY_FORM_UPDATE",
    "ACTIVITY_STATUS_CHANGE",
    "Activity",
    "AssignmentRecord",
    "BRDRequest",
    "BRD_STATUSES",
    "Comment",
    "DEFAULT_MAINTENANCE_MESSAGE",
    "EDITOR_ANALYST",
    "EDITOR_REQUESTER",
    "FIELD_TYPES",
    "GENERAL_SETTINGS_KEY",
    "NOTIFICATION_TYPE_COMMENT",
    "NOTIFICATION_TYPE_STATUS",
    "Notification",
    "ROLE_ADMIN",
    "ROLE_ANALYST",
    "ROLE_NAMES",
    "ROLE_REQUESTER",
    "Role",
    "STATUS_ALREADY_GENERATED",
    "STATUS_APPROVED",
    "STATUS_COMPLETED",
    "STATUS_GENERATED",
    "STATUS_IN_PROGRESS",
    "STATUS_IN_REVIEW",
    "STATUS_NEW",
    "STATUS_PENDING_REVIEW",
    "STATUS_REJECTED",
    "SystemSettings",
    "Template",
    "TemplateField",
    "TemplateSection",
    "User",
    "comment_notification_id",
    "status_notification_id",
]
