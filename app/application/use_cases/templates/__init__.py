"""Template-related use cases."""

from .create_template import create_template
from .delete_template import delete_template
from .get_template import get_template
from .list_templates import list_templates
from .sections import (
    PREDEFINED_FIELDS,
    group_fields_into_sections,
    serialize_sections,
)
from .update_template import update_template

__all__ = [
    "PREDEFINED_FIELDS",
    "create_template",
    "delete_template",
    "get_template",
    "group_fields_into_sections",
    "list_templates",
    "serialize_sections",
    "update_template",
]
