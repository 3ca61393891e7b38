"""Comment thread use cases."""

from .access import ensure_can_discuss
from .add_comment import add_comment, default_recipient
from .delete_comment import delete_comment
from .list_comments import list_comments
from .mark_comment_read import mark_comment_read

__all__ = [
    "add_comment",
    "default_recipient",
    "delete_comment",
    "ensure_can_discuss",
    "list_comments",
    "mark_comment_read",
]
