# todolist/schemas/todo_schema.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from todolist.schemas.label_schema import not_blank, to_naive_utc
from todolist.schemas.priority_schema import PriorityViewModel
from todolist.schemas.status_schema import StatusViewModel
from todolist.schemas.tag_schema import TagViewModel


# --------- Base schema (common fields) ---------
class TodoBase(BaseModel):
    name: str = Field(..., max_length=255)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority_id: Optional[int] = None
    status_id: Optional[int] = None
    # None on update means "no tags"
    tag_ids: Optional[List[int]] = None

    @field_validator("name")
    def name_required(cls, value):
        return not_blank(value, "Name")

    @field_validator("due_date")
    def due_date_utc(cls, value):
        return to_naive_utc(value)


# --------- For creating a todo (POST) ---------
class TodoCreate(TodoBase):
    created_at: Optional[datetime] = None

    @field_validator("created_at")
    def created_at_utc(cls, value):
        return to_naive_utc(value)


# --------- For replacing a todo (PUT) ---------
class TodoUpdate(TodoBase):
    id: int
    updated_at: Optional[datetime] = None

    @field_validator("updated_at")
    def updated_at_utc(cls, value):
        return to_naive_utc(value)


# --------- For reading todos (GET responses) ---------
class TodoViewModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: Optional[PriorityViewModel] = None
    status: Optional[StatusViewModel] = None
    tags: List[TagViewModel] = []


# --------- Entity returned by create/update ---------
class TodoRead(TodoViewModel):
    priority_id: Optional[int] = None
    status_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
