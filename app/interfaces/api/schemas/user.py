"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RoleRead(BaseModel):
    id: int
    name: str
    alias: str

    model_config = ConfigDict(from_attributes=True)


class UserBase(BaseModel):
    name: str = Field(..., max_length=100)
    email: EmailStr
    business_unit: str | None = Field(default=None, max_length=100)
    position: str | None = Field(default=None, max_length=100)


class UserCreate(UserBase):
    password: str = Field(..., min_length=8)


class UserProfileUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=100)
    phone: str | None = Field(default=None, max_length=30)
    business_unit: str | None = Field(default=None, max_length=100)
    position: str | None = Field(default=None, max_length=100)
    current_password: str | None = None
    new_password: str | None = Field(default=None, min_length=8)

    model_config = ConfigDict(extra="forbid")


class UserRoleUpdate(BaseModel):
    role: str = Field(..., description="Alias of the role to assign")

    model_config = ConfigDict(extra="forbid")


class UserStatusUpdate(BaseModel):
    is_active: bool


class UserRead(BaseModel):
    id: int
    name: str
    email: EmailStr
    business_unit: str | None
    position: str | None
    phone: str | None = None
    last_login: datetime | None
    created_at: datetime | None
    updated_at: datetime | None
    is_active: bool
    role: RoleRead

    model_config = ConfigDict(from_attributes=True)


class UserSummaryRead(BaseModel):
    id: int
    name: str
    email: EmailStr

    model_config = ConfigDict(from_attributes=True)
