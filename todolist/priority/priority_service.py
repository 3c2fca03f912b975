# todolist/priority/priority_service.py
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from todolist.models.priority import Priority
from todolist.models.todo import Todo
from todolist.query import label_crud
from todolist.query.query_spec import SortOrder
from todolist.schemas.priority_schema import PriorityCreate, PriorityUpdate, PriorityViewModel

logger = logging.getLogger("todolist.priority")


def get_priority_by_id(db: Session, priority_id: int) -> List[PriorityViewModel]:
    return label_crud.get_label_by_id(db, Priority, priority_id, PriorityViewModel)


def get_priorities(db: Session, sort_order: SortOrder = SortOrder.ASCENDING) -> List[PriorityViewModel]:
    return label_crud.get_labels(db, Priority, sort_order, PriorityViewModel)


def get_priorities_sorted_by_name(
    db: Session,
    sort_order: SortOrder = SortOrder.ASCENDING,
    priority_id: Optional[int] = None,
) -> List[PriorityViewModel]:
    return label_crud.get_labels_sorted_by_name(db, Priority, sort_order, priority_id, PriorityViewModel)


def create_priority(db: Session, data: PriorityCreate) -> Priority:
    priority = label_crud.create_label(db, Priority, data)
    logger.info("priority_created", extra={"priority_id": priority.id})
    return priority


def update_priority(db: Session, data: PriorityUpdate) -> Optional[Priority]:
    priority = label_crud.update_label(db, Priority, data)
    if priority is None:
        logger.info("priority_not_found", extra={"priority_id": data.id})
    return priority


def delete_priority_by_id(db: Session, priority_id: int) -> bool:
    priority = db.get(Priority, priority_id)
    if priority is None:
        return False

    # referencing todos survive with no priority
    cleared = (
        db.query(Todo)
        .filter(Todo.priority_id == priority_id)
        .update({Todo.priority_id: None}, synchronize_session=False)
    )

    db.delete(priority)
    db.commit()
    logger.info("priority_deleted", extra={"priority_id": priority_id, "todos_cleared": cleared})
    return True
