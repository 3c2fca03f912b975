# todolist/todo/todo_validator.py
"""Referential checks for todo payloads.

Field rules (required name, lengths) live on the pydantic schemas; this module
checks that the referenced priority, status and tags exist before the service
runs.
"""
from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from todolist.models.priority import Priority
from todolist.models.status import Status
from todolist.models.tag import Tag
from todolist.schemas.todo_schema import TodoBase


def validate_todo(db: Session, data: TodoBase) -> List[str]:
    errors = []

    if data.priority_id is not None and db.get(Priority, data.priority_id) is None:
        errors.append("Invalid PriorityId.")

    if data.status_id is not None and db.get(Status, data.status_id) is None:
        errors.append("Invalid StatusId.")

    if data.tag_ids:
        requested = set(data.tag_ids)
        found = db.query(Tag.id).filter(Tag.id.in_(requested)).count()
        if found != len(requested):
            errors.append("One or more Tag IDs are invalid.")

    return errors
