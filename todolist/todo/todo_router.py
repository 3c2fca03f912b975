# todolist/todo/todo_router.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from todolist.database import get_db
from todolist.query.query_spec import Period, SortOrder
from todolist.schemas.todo_schema import TodoCreate, TodoRead, TodoUpdate, TodoViewModel
from todolist.todo import todo_service
from todolist.todo.todo_validator import validate_todo

logger = logging.getLogger("todolist.todo")

router = APIRouter(
    prefix="/api/todos",
    tags=["todos"],
)


def _check_references(db: Session, data) -> None:
    errors = validate_todo(db, data)
    if errors:
        logger.info("todo_validation_failed", extra={"errors": errors})
        raise HTTPException(status_code=400, detail=errors)


# ==========================
#  LIST / SORT
# ==========================
# static paths are declared before "/{todo_id}"
@router.get("", response_model=list[TodoViewModel])
def get_todos(sort_order: SortOrder = SortOrder.ASCENDING, db: Session = Depends(get_db)):
    return todo_service.get_todos(db, sort_order)


@router.get("/sorted-by-name", response_model=list[TodoViewModel])
def get_todos_sorted_by_name(
    sort_order: SortOrder = SortOrder.ASCENDING,
    todo_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return todo_service.get_todos_sorted_by_name(db, sort_order, todo_id)


@router.get("/sorted-by-due-date", response_model=list[TodoViewModel])
def get_todos_sorted_by_due_date(
    sort_order: SortOrder = SortOrder.ASCENDING,
    period: Optional[Period] = None,
    db: Session = Depends(get_db),
):
    return todo_service.get_todos_sorted_by_due_date(db, sort_order, period)


@router.get("/sorted-by-priority-id", response_model=list[TodoViewModel])
def get_todos_sorted_by_priority_id(
    sort_order: SortOrder = SortOrder.ASCENDING,
    priority_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return todo_service.get_todos_sorted_by_priority_id(db, sort_order, priority_id)


@router.get("/sorted-by-priority-name", response_model=list[TodoViewModel])
def get_todos_sorted_by_priority_name(
    sort_order: SortOrder = SortOrder.ASCENDING,
    priority_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return todo_service.get_todos_sorted_by_priority_name(db, sort_order, priority_id)


@router.get("/sorted-by-status-id", response_model=list[TodoViewModel])
def get_todos_sorted_by_status_id(
    sort_order: SortOrder = SortOrder.ASCENDING,
    status_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return todo_service.get_todos_sorted_by_status_id(db, sort_order, status_id)


@router.get("/sorted-by-status-name", response_model=list[TodoViewModel])
def get_todos_sorted_by_status_name(
    sort_order: SortOrder = SortOrder.ASCENDING,
    status_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return todo_service.get_todos_sorted_by_status_name(db, sort_order, status_id)


@router.get("/sorted-by-tags-count", response_model=list[TodoViewModel])
def get_todos_sorted_by_tags_count(
    sort_order: SortOrder = SortOrder.DESCENDING,
    tag_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return todo_service.get_todos_sorted_by_tags_count(db, sort_order, tag_id)


# ==========================
#  GET BY ID
# ==========================
@router.get("/{todo_id}", response_model=list[TodoViewModel])
def get_todo_by_id(todo_id: int, db: Session = Depends(get_db)):
    todos = todo_service.get_todo_by_id(db, todo_id)
    if not todos:
        raise HTTPException(404, "Todo not found")
    return todos


# ==========================
#  CREATE / UPDATE / DELETE
# ==========================
@router.post("", response_model=TodoRead, status_code=201)
def create_todo(data: TodoCreate, db: Session = Depends(get_db)):
    _check_references(db, data)
    return todo_service.create_todo(db, data)


@router.put("", response_model=TodoRead)
def update_todo(data: TodoUpdate, db: Session = Depends(get_db)):
    _check_references(db, data)

    todo = todo_service.update_todo(db, data)
    if todo is None:
        raise HTTPException(404, "Todo not found")
    return todo


@router.delete("/{todo_id}", status_code=204)
def delete_todo_by_id(todo_id: int, db: Session = Depends(get_db)):
    if not todo_service.delete_todo_by_id(db, todo_id):
        raise HTTPException(status_code=404, detail="Todo not found")
    return
