"""Use cases driving the BRD request workflow."""

from .access import can_edit, ensure_can_edit, ensure_can_view, next_editor
from .assign_analyst import assign_analyst
from .create_brd_request import create_brd_request
from .generate_brd_content import (
    build_generation_prompt,
    clean_generated_text,
    generate_brd_content,
    parse_generated_sections,
)
from .list_brd_requests import get_brd_request, list_brd_requests
from .save_form_data import save_form_data
from .select_template import select_template
from .update_request_status import update_request_status

__all__ = [
    "assign_analyst",
    "build_generation_prompt",
    "can_edit",
    "clean_generated_text",
    "create_brd_request",
    "ensure_can_edit",
    "ensure_can_view",
    "generate_brd_content",
    "get_brd_request",
    "list_brd_requests",
    "next_editor",
    "parse_generated_sections",
    "save_form_data",
    "select_template",
    "update_request_status",
]
