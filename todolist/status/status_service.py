# todolist/status/status_service.py
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from todolist.models.status import Status
from todolist.models.todo import Todo
from todolist.query import label_crud
from todolist.query.query_spec import SortOrder
from todolist.schemas.status_schema import StatusCreate, StatusUpdate, StatusViewModel

logger = logging.getLogger("todolist.status")


def get_status_by_id(db: Session, status_id: int) -> List[StatusViewModel]:
    return label_crud.get_label_by_id(db, Status, status_id, StatusViewModel)


def get_statuses(db: Session, sort_order: SortOrder = SortOrder.ASCENDING) -> List[StatusViewModel]:
    return label_crud.get_labels(db, Status, sort_order, StatusViewModel)


def get_statuses_sorted_by_name(
    db: Session,
    sort_order: SortOrder = SortOrder.ASCENDING,
    status_id: Optional[int] = None,
) -> List[StatusViewModel]:
    return label_crud.get_labels_sorted_by_name(db, Status, sort_order, status_id, StatusViewModel)


def create_status(db: Session, data: StatusCreate) -> Status:
    status = label_crud.create_label(db, Status, data)
    logger.info("status_created", extra={"status_id": status.id})
    return status


def update_status(db: Session, data: StatusUpdate) -> Optional[Status]:
    status = label_crud.update_label(db, Status, data)
    if status is None:
        logger.info("status_not_found", extra={"status_id": data.id})
    return status


def delete_status_by_id(db: Session, status_id: int) -> bool:
    status = db.get(Status, status_id)
    if status is None:
        return False

    # referencing todos survive with no status
    cleared = (
        db.query(Todo)
        .filter(Todo.status_id == status_id)
        .update({Todo.status_id: None}, synchronize_session=False)
    )

    db.delete(status)
    db.commit()
    logger.info("status_deleted", extra={"status_id": status_id, "todos_cleared": cleared})
    return True
