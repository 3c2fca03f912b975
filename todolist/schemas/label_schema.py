# todolist/schemas/label_schema.py
"""Fields shared by the three "label" resources: priority, status and tag."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def not_blank(value: str, field: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{field} is required.")
    return value


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    # the store keeps naive UTC timestamps
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class LabelBase(BaseModel):
    name: str = Field(..., max_length=50)
    color: str = Field(..., max_length=9)

    @field_validator("name")
    def name_required(cls, value):
        return not_blank(value, "Name")

    @field_validator("color")
    def color_required(cls, value):
        return not_blank(value, "Color")


class LabelCreate(LabelBase):
    created_at: Optional[datetime] = None

    @field_validator("created_at")
    def created_at_utc(cls, value):
        return to_naive_utc(value)


class LabelUpdate(LabelBase):
    id: int
    updated_at: Optional[datetime] = None

    @field_validator("updated_at")
    def updated_at_utc(cls, value):
        return to_naive_utc(value)


# --------- Projection returned by list/get endpoints ---------
class LabelViewModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color: str


# --------- Entity returned by create/update ---------
class LabelRead(LabelViewModel):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
