"""Schemas for BRD templates."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

FieldType = Literal["text", "textarea", "date", "currency", "file", "select"]


class TemplateFieldSchema(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    label: str = Field(..., min_length=1, max_length=200)
    required: bool = True
    type: FieldType = "text"
    options: list[str] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class TemplateBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: str | None = None


class TemplateCreate(TemplateBase):
    fields: list[TemplateFieldSchema] = Field(..., min_length=1)


class TemplateUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=150)
    description: str | None = None
    fields: list[TemplateFieldSchema] | None = None

    model_config = ConfigDict(extra="forbid")


class TemplateSectionRead(BaseModel):
    key: str
    title: str
    fields: list[TemplateFieldSchema]

    model_config = ConfigDict(from_attributes=True)


class TemplateRead(TemplateBase):
    id: int
    fields: list[TemplateFieldSchema]
    sections: list[TemplateSectionRead]
    created_by: int | None
    created_by_name: str | None
    created_at: datetime | None
    updated_at: datetime | None
