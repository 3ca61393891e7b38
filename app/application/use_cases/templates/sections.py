"""Grouping of template fields into the sections of a generated BRD."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from app.domain.entities import TemplateField, TemplateSection

ADDITIONAL_SECTION_KEY = "additional_information"
ADDITIONAL_SECTION_TITLE = "Additional Information"

# Ordered: a field belongs to the first section whose keyword it contains.
SECTION_KEYWORDS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("project_information", "Project Information", ("project", "dokumen", "document")),
    (
        "background",
        "Background",
        ("kondisi", "latar", "permasalahan", "condition", "problem"),
    ),
    (
        "business_needs",
        "Business Needs",
        ("kebutuhan", "dampak", "manfaat", "need", "impact", "benefit"),
    ),
    ("scope", "Scope", ("lingkup", "scope")),
    ("requirements", "Requirements", ("requirement", "fungsional", "functional")),
    (
        "planning",
        "Planning",
        ("jadwal", "anggaran", "risiko", "risk", "timeline", "budget", "biaya", "estimasi"),
    ),
)

PREDEFINED_FIELDS: tuple[TemplateField, ...] = (
    TemplateField(name="noBRD", label="No. BRD"),
    TemplateField(name="tanggalPermintaan", label="Tanggal Permintaan", type="date"),
    TemplateField(name="unitBisnis", label="Unit Bisnis"),
    TemplateField(name="namaPemohon", label="Nama Pemohon"),
    TemplateField(name="jabatanPemohon", label="Jabatan Pemohon"),
    TemplateField(name="namaProject", label="Nama Project"),
    TemplateField(
        name="jenisPermintaan",
        label="Jenis Permintaan",
        type="select",
        options=["New Development", "Enhancement", "Bug Fix"],
    ),
    TemplateField(
        name="prioritas", label="Prioritas", type="select", options=["High", "Medium", "Low"]
    ),
    TemplateField(name="targetImplementasi", label="Target Implementasi", type="date"),
    TemplateField(name="latarBelakang", label="Latar Belakang", type="textarea"),
    TemplateField(name="kondisiSaatIni", label="Kondisi Saat Ini", type="textarea"),
    TemplateField(
        name="kondisiYangDiharapkan", label="Kondisi Yang Diharapkan", type="textarea"
    ),
    TemplateField(
        name="potentialRisk", label="Potential Risk", required=False, type="textarea"
    ),
    TemplateField(
        name="estimasiBiaya", label="Estimasi Biaya", required=False, type="currency"
    ),
    TemplateField(name="estimasiWaktu", label="Estimasi Waktu", required=False),
    TemplateField(name="manfaat", label="Manfaat", type="textarea"),
    TemplateField(
        name="dokumenTambahan", label="Dokumen Tambahan", required=False, type="file"
    ),
    TemplateField(name="problems", label="Permasalahan", type="textarea"),
    TemplateField(name="problemImpact", label="Dampak Permasalahan", type="textarea"),
    TemplateField(name="mainNeeds", label="Kebutuhan Utama", type="textarea"),
    TemplateField(name="businessValue", label="Nilai Bisnis", type="textarea"),
    TemplateField(name="mainObjective", label="Tujuan Utama", type="textarea"),
    TemplateField(name="scope", label="Ruang Lingkup", type="textarea"),
    TemplateField(name="inScope", label="Yang Termasuk", type="textarea"),
    TemplateField(name="outScope", label="Yang Tidak Termasuk", type="textarea"),
    TemplateField(name="stakeholders", label="Pemangku Kepentingan", type="textarea"),
    TemplateField(
        name="functionalRequirements", label="Kebutuhan Fungsional", type="textarea"
    ),
    TemplateField(
        name="nonFunctionalRequirements",
        label="Kebutuhan Non-Fungsional",
        type="textarea",
    ),
)


def _section_key_for(template_field: TemplateField) -> str:
    haystack = f"{template_field.name} {template_field.label}".lower()
    for key, _, keywords in SECTION_KEYWORDS:
        if any(keyword in haystack for keyword in keywords):
            return key
    return ADDITIONAL_SECTION_KEY


def group_fields_into_sections(
    fields: Sequence[TemplateField],
) -> list[TemplateSection]:
    """Return the non-empty sections for ``fields`` in canonical order."""

    grouped: dict[str, list[TemplateField]] = {}
    for template_field in fields:
        grouped.setdefault(_section_key_for(template_field), []).append(template_field)

    ordered = [(key, title) for key, title, _ in SECTION_KEYWORDS]
    ordered.append((ADDITIONAL_SECTION_KEY, ADDITIONAL_SECTION_TITLE))
    return [
        TemplateSection(key=key, title=title, fields=grouped[key])
        for key, title in ordered
        if grouped.get(key)
    ]


def serialize_sections(sections: Sequence[TemplateSection]) -> list[dict[str, Any]]:
    """Return ``sections`` as JSON friendly dictionaries."""

    return [
        {
            "key": section.key,
            "title": section.title,
            "fields": [
                {
                    "name": item.name,
                    "label": item.label,
                    "required": item.required,
                    "type": item.type,
                    "options": list(item.options),
                }
                for item in section.fields
            ],
        }
        for section in sections
    ]


__all__ = [
    "ADDITIONAL_SECTION_KEY",
    "ADDITIONAL_SECTION_TITLE",
    "PREDEFINED_FIELDS",
    "SECTION_KEYWORDS",
    "group_fields_into_sections",
    "serialize_sections",
]
