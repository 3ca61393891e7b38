"""Repository implementations for infrastructure layer."""

from .activity_repository import ActivityRepository
from .brd_request_repository import BRDRequestRepository
from .comment_repository import CommentRepository
from .role_repository import RoleRepository
from .system_settings_repository import SystemSettingsRepository
from .template_repository import TemplateRepository
from .user_repository import UserRepository

__all__ = [
    "ActivityRepository",
    "BRDRequestRepository",
    "CommentRepository",
    "RoleRepository",
    "SystemSettingsRepository",
    "TemplateRepository",
    "UserRepository",
]
