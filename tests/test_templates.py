"""Tests for template use cases and field sectioning."""

from __future__ import annotations

import pytest

from app.application.use_cases.templates import (
    PREDEFINED_FIELDS,
    create_template,
    delete_template,
    get_template,
    group_fields_into_sections,
    list_templates,
    update_template,
)
from app.domain.entities import TemplateField


def _field(name: str, label: str) -> TemplateField:
    return TemplateField(name=name, label=label)


def test_fields_are_grouped_by_keyword_in_section_order():
    fields = [
        _field("noBRD", "No. BRD"),
        _field("scope", "Ruang Lingkup"),
        _field("projectName", "Nama Proyek"),
        _field("latarBelakang", "Latar Belakang"),
        _field("estimasiBiaya", "Estimasi Biaya"),
        _field("manfaat", "Manfaat"),
        _field("nonFunctionalRequirements", "Non functional"),
    ]

    sections = group_fields_into_sections(fields)

    assert [section.title for section in sections] == [
        "Project Information",
        "Background",
        "Business Needs",
        "Scope",
        "Requirements",
        "Planning",
        "Additional Information",
    ]
    assert [item.name for item in sections[-1].fields] == ["noBRD"]


def test_first_matching_section_wins():
    [section] = group_fields_into_sections([_field("problemImpact", "Dampak Permasalahan")])

    assert section.key == "background"


def test_empty_sections_are_omitted_and_order_preserved():
    fields = [_field("risk", "Potential Risk"), _field("timeline", "Jadwal")]

    [section] = group_fields_into_sections(fields)

    assert section.title == "Planning"
    assert [item.name for item in section.fields] == ["risk", "timeline"]


def test_predefined_catalog_has_unique_names():
    names = [item.name for item in PREDEFINED_FIELDS]

    assert len(names) == len(set(names))


def test_admin_manages_templates(session, admin):
    template = create_template(
        session,
        user=admin,
        name="  Standard BRD ",
        description="Default bank template",
        fields=[
            {"name": "projectName", "label": "Nama Proyek"},
            {"name": "prioritas", "label": "Prioritas", "type": "select", "options": ["High"]},
        ],
    )

    assert template.name == "Standard BRD"
    assert template.created_by_name == admin.name
    assert [item.name for item in get_template(session, template.id).fields] == [
        "projectName",
        "prioritas",
    ]

    updated = update_template(
        session, user=admin, template_id=template.id, description="Revised"
    )
    assert updated.description == "Revised"
    assert updated.updated_at is not None

    delete_template(session, user=admin, template_id=template.id)
    assert list_templates(session) == []


def test_duplicate_template_names_are_rejected(session, admin):
    fields = [{"name": "projectName", "label": "Nama Proyek"}]
    create_template(session, user=admin, name="Standard", fields=fields)

    with pytest.raises(ValueError):
        create_template(session, user=admin, name="standard", fields=fields)


@pytest.mark.parametrize(
    "fields",
    [
        [],
        [{"name": "", "label": "Empty"}],
        [{"name": "a", "label": "A"}, {"name": "a", "label": "Again"}],
        [{"name": "a", "label": "A", "type": "checkbox"}],
        [{"name": "a", "label": "A", "type": "select"}],
    ],
)
def test_invalid_fields_are_rejected(session, admin, fields):
    with pytest.raises(ValueError):
        create_template(session, user=admin, name="Broken", fields=fields)


def test_only_admins_can_create_templates(session, requester):
    with pytest.raises(PermissionError):
        create_template(
            session,
            user=requester,
            name="Mine",
            fields=[{"name": "projectName", "label": "Nama Proyek"}],
        )
