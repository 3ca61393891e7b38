"""Domain entities describing BRD templates."""

from dataclasses import dataclass, field
from datetime import datetime

FIELD_TYPES: tuple[str, ...] = ("text", "textarea", "date", "currency", "file", "select")


@dataclass
class TemplateField:
    """Input captured by a template form."""

    name: str
    label: str
    required: bool = True
    type: str = "text"
    options: list[str] = field(default_factory=list)


@dataclass
class TemplateSection:
    """Group of template fields rendered and generated together."""

    key: str
    title: str
    fields: list[TemplateField] = field(default_factory=list)


@dataclass
class Template:
    """Core attributes describing a BRD template definition."""

    id: int | None
    name: str
    description: str | None
    fields: list[TemplateField]
    created_by: int | None
    created_by_name: str | None
    created_at: datetime | None
    updated_at: datetime | None = None


__all__ = ["FIELD_TYPES", "Template", "TemplateField", "TemplateSection"]
