"""Use case for drafting the BRD document of a request with the LLM."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any, Protocol

from sqlalchemy.orm import Session

from app.application.use_cases.activities.record_activity import record_activity
from app.domain.entities import (
    ACTIVITY_BRD_GENERATED,
    BRDRequest,
    STATUS_ALREADY_GENERATED,
    User,
)
from app.infrastructure.notifications import BRD_REQUESTS_TOPIC, ChangeFeed, change_feed
from app.infrastructure.repositories import BRDRequestRepository
from app.utils import now_in_app_timezone

from .access import ensure_can_edit, next_editor

logger = logging.getLogger(__name__)

EMPTY_SECTION_TEXT = "Bagian ini belum memiliki data yang diisi"

_ROMAN_NUMERALS: tuple[tuple[int, str], ...] = (
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)
_ROMAN_HEADING = re.compile(r"^([IVXLC]+)\.\s+(.*)$")
_EXTRA_NEWLINES = re.compile(r"\n{3,}")

_WRITING_RULES = """PETUNJUK WAJIB:
1. WAJIB mengikuti struktur template yang telah ditentukan
2. HANYA menggunakan data yang telah diisi pengguna
3. DILARANG menambahkan informasi di luar data yang diisi
4. Setiap bagian HARUS berdasarkan data formulir
5. Untuk bagian tanpa data, tuliskan "{empty}"
6. Awali setiap bagian utama dengan penomoran romawi persis seperti di atas (I., II., ...)"""


class TextGenerator(Protocol):
    def generate_text(self, prompt: str, *, system_prompt: str | None = None) -> str: ...


def to_roman(number: int) -> str:
    result = []
    for value, symbol in _ROMAN_NUMERALS:
        while number >= value:
            result.append(symbol)
            number -= value
    return "".join(result)


def clean_generated_text(text: str) -> str:
    """Drop Markdown emphasis and collapse runs of blank lines."""

    cleaned = text.replace("**", "").replace("*", "").replace("`", "")
    cleaned = re.sub(r"_{2,}", "", cleaned)
    cleaned = cleaned.strip()
    return _EXTRA_NEWLINES.sub("\n\n", cleaned)


def build_generation_prompt(
    sections: Sequence[Mapping[str, Any]], form_data: Mapping[str, Any]
) -> str:
    """Render the filled form values section by section."""

    blocks = []
    for index, section in enumerate(sections, start=1):
        lines = [
            f"{item['label']}: {form_data[item['name']]}"
            for item in section.get("fields", [])
            if form_data.get(item["name"]) not in (None, "")
        ]
        body = "\n".join(lines) if lines else EMPTY_SECTION_TEXT
        blocks.append(f"{to_roman(index)}. {section['title']}\n{body}")

    return (
        "Gunakan struktur template berikut untuk membuat BRD berdasarkan data yang "
        "telah diisi:\n\n"
        + "\n\n".join(blocks)
        + "\n\n"
        + _WRITING_RULES.format(empty=EMPTY_SECTION_TEXT)
    )


def missing_required_fields(
    sections: Sequence[Mapping[str, Any]], form_data: Mapping[str, Any]
) -> list[str]:
    return [
        item.get("label") or item["name"]
        for section in sections
        for item in section.get("fields", [])
        if item.get("required", True) and form_data.get(item["name"]) in (None, "")
    ]


def parse_generated_sections(text: str) -> dict[str, str]:
    """Split generated BRD text into ``{heading: body}`` keyed by Roman numeral headings.

    Lines before the first heading are dropped, blank lines are skipped and a
    heading without any body line is omitted.
    """

    sections: dict[str, str] = {}
    current: str | None = None
    lines: list[str] = []

    for line in text.splitlines():
        match = _ROMAN_HEADING.match(line.strip())
        if match:
            if current and lines:
                sections[current] = "\n".join(lines)
            current = match.group(2).strip()
            lines = []
        elif line.strip() and current:
            lines.append(line)

    if current and lines:
        sections[current] = "\n".join(lines)
    return sections


def generate_brd_content(
    session: Session,
    *,
    request_id: int,
    user: User,
    generator: TextGenerator,
    system_prompt: str | None = None,
    feed: ChangeFeed | None = None,
) -> BRDRequest:
    """Generate and store the BRD text, then hand the turn to the other party.

    Raises:
        ValueError: If no template is selected or required fields are empty.
        PermissionError: If it is not ``user``'s turn to edit.
    """

    repository = BRDRequestRepository(session)
    request = repository.get(request_id)
    if request is None:
        raise ValueError("BRD request not found")
    ensure_can_edit(request, user)

    if request.template_id is None or not request.template_sections:
        raise ValueError("Select a template before generating the BRD")

    missing = missing_required_fields(request.template_sections, request.form_data)
    if missing:
        raise ValueError("Please fill in the required fields: " + ", ".join(missing))

    prompt = build_generation_prompt(request.template_sections, request.form_data)
    text = clean_generated_text(generator.generate_text(prompt, system_prompt=system_prompt))
    logger.info("Generated %s characters of BRD content for request %s", len(text), request_id)

    updated = replace(
        request,
        generated_content=text,
        status=STATUS_ALREADY_GENERATED,
        current_editor=next_editor(request.current_editor),
        updated_at=now_in_app_timezone(),
        updated_by=user.id,
    )
    saved = repository.update(updated)
    record_activity(
        session,
        request_id=request_id,
        user=user,
        activity_type=ACTIVITY_BRD_GENERATED,
        description="BRD content has been generated",
    )
    (feed or change_feed).publish(BRD_REQUESTS_TOPIC)
    return saved
