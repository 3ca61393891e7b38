"""Schemas for BRD requests."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AssignmentRead(BaseModel):
    analyst_id: int
    analyst_name: str
    assigned_by: int
    assigned_by_name: str
    assigned_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class BRDRequestCreate(BaseModel):
    project_name: str = Field(..., min_length=1, max_length=200)
    business_unit: str | None = Field(default=None, max_length=100)
    priority: str | None = Field(default=None, max_length=20)
    request_type: str | None = Field(default=None, max_length=50)
    target_date: str | None = Field(default=None, max_length=30)
    background: str | None = None
    current_condition: str | None = None
    expected_condition: str | None = None
    form_data: dict[str, Any] = Field(default_factory=dict)


class BRDRequestAssign(BaseModel):
    analyst_id: int = Field(..., ge=1)


class BRDRequestStatusUpdate(BaseModel):
    status: str


class BRDTemplateSelection(BaseModel):
    template_id: int = Field(..., ge=1)


class BRDFormDataUpdate(BaseModel):
    values: dict[str, Any]


class BRDRequestRead(BaseModel):
    id: int
    project_name: str
    created_by: int
    created_by_name: str
    business_unit: str | None
    status: str
    priority: str | None
    request_type: str | None
    target_date: str | None
    background: str | None
    current_condition: str | None
    expected_condition: str | None
    assigned_analyst_id: int | None
    assigned_analyst_name: str | None
    assigned_at: datetime | None
    assignment_history: list[AssignmentRead]
    template_id: int | None
    template_name: str | None
    template_sections: list[dict[str, Any]]
    form_data: dict[str, Any]
    generated_content: str | None
    current_editor: str
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class GeneratedSectionsRead(BaseModel):
    request_id: int
    sections: dict[str, str]
