from .auth import Token
from .brd_request import (
    AssignmentRead,
    BRDFormDataUpdate,
    BRDRequestAssign,
    BRDRequestCreate,
    BRDRequestRead,
    BRDRequestStatusUpdate,
    BRDTemplateSelection,
    GeneratedSectionsRead,
)
from .comment import ActivityRead, CommentCreate, CommentRead
from .notification import NotificationRead, NotificationSnapshot
from .system_settings import (
    MaintenanceStatusRead,
    SystemSettingsRead,
    SystemSettingsUpdate,
)
from .template import (
    TemplateCreate,
    TemplateFieldSchema,
    TemplateRead,
    TemplateSectionRead,
    TemplateUpdate,
)
from .user import (
    RoleRead,
    UserCreate,
    UserProfileUpdate,
    UserRead,
    UserRoleUpdate,
    UserStatusUpdate,
    UserSummaryRead,
)

__all__ = [
    "ActivityRead",
    "AssignmentRead",
    "BRDFormDataUpdate",
    "BRDRequestAssign",
    "BRDRequestCreate",
    "BRDRequestRead",
    "BRDRequestStatusUpdate",
    "BRDTemplateSelection",
    "CommentCreate",
    "CommentRead",
    "GeneratedSectionsRead",
    "MaintenanceStatusRead",
    "NotificationRead",
    "NotificationSnapshot",
    "RoleRead",
    "SystemSettingsRead",
    "SystemSettingsUpdate",
    "TemplateCreate",
    "TemplateFieldSchema",
    "TemplateRead",
    "TemplateSectionRead",
    "TemplateUpdate",
    "Token",
    "UserCreate",
    "UserProfileUpdate",
    "UserRead",
    "UserRoleUpdate",
    "UserStatusUpdate",
    "UserSummaryRead",
]
