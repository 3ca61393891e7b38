"""ORM models used by the application infrastructure."""

from .activity import ActivityModel
from .brd_request import BRDRequestModel
from .comment import CommentModel
from .role import RoleModel
from .system_settings import SystemSettingsModel
from .template import TemplateModel
from .user import UserModel

__all__ = [
    "ActivityModel",
    "BRDRequestModel",
    "CommentModel",
    "RoleModel",
    "SystemSettingsModel",
    "TemplateModel",
    "UserModel",
]
