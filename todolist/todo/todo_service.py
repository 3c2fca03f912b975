# todolist/todo/todo_service.py
"""Todo queries, writes and tag reconciliation.

Every list query is expressed as a ``QuerySpec`` and projected to
``TodoViewModel``. Lookups never raise for missing rows: an empty list,
``None`` or ``False`` is returned and the router decides the status code.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Query, Session, selectinload

from todolist.models.priority import Priority
from todolist.models.status import Status
from todolist.models.tag import Tag, todo_tags
from todolist.models.todo import Todo
from todolist.query.query_spec import Period, QuerySpec, SortOrder, apply_spec, period_bounds
from todolist.schemas.todo_schema import TodoCreate, TodoUpdate, TodoViewModel

logger = logging.getLogger("todolist.todo")


# ==========================
#  QUERY HELPERS
# ==========================
def _base_query(db: Session) -> Query:
    return db.query(Todo).options(
        selectinload(Todo.priority),
        selectinload(Todo.status),
        selectinload(Todo.tags),
    )


def _tag_count():
    return (
        select(func.count(todo_tags.c.tag_id))
        .where(todo_tags.c.todo_id == Todo.id)
        .correlate(Todo)
        .scalar_subquery()
    )


def _run(db: Session, spec: QuerySpec) -> List[TodoViewModel]:
    rows = apply_spec(_base_query(db), spec).all()
    return [TodoViewModel.model_validate(todo) for todo in rows]


# ==========================
#  READ
# ==========================
def get_todo_by_id(db: Session, todo_id: int) -> List[TodoViewModel]:
    rows = _base_query(db).filter(Todo.id == todo_id).all()
    return [TodoViewModel.model_validate(todo) for todo in rows]


def get_todos(db: Session, sort_order: SortOrder = SortOrder.ASCENDING) -> List[TodoViewModel]:
    return _run(db, QuerySpec(sort_key=Todo.id, sort_order=sort_order))


def get_todos_sorted_by_name(
    db: Session,
    sort_order: SortOrder = SortOrder.ASCENDING,
    todo_id: Optional[int] = None,
) -> List[TodoViewModel]:
    spec = QuerySpec(
        sort_key=Todo.name,
        sort_order=sort_order,
        filters=(Todo.id == todo_id,) if todo_id is not None else (),
        tie_breaks=(Todo.id,),
    )
    return _run(db, spec)


def get_todos_sorted_by_due_date(
    db: Session,
    sort_order: SortOrder = SortOrder.ASCENDING,
    period: Optional[Period] = None,
    now: Optional[datetime] = None,
) -> List[TodoViewModel]:
    filters = ()
    if period is not None:
        start, end = period_bounds(period, now)
        # NULL due dates fail both comparisons
        filters = (Todo.due_date >= start, Todo.due_date <= end)

    spec = QuerySpec(
        sort_key=Todo.due_date,
        sort_order=sort_order,
        filters=filters,
        lacks_value=Todo.due_date.is_(None),
        tie_breaks=(Todo.id,),
    )
    return _run(db, spec)


def get_todos_sorted_by_priority_id(
    db: Session,
    sort_order: SortOrder = SortOrder.ASCENDING,
    priority_id: Optional[int] = None,
) -> List[TodoViewModel]:
    spec = QuerySpec(
        sort_key=Todo.priority_id,
        sort_order=sort_order,
        filters=(Todo.priority_id == priority_id,) if priority_id is not None else (),
        lacks_value=Todo.priority_id.is_(None),
        tie_breaks=(Todo.id,),
    )
    return _run(db, spec)


def get_todos_sorted_by_priority_name(
    db: Session,
    sort_order: SortOrder = SortOrder.ASCENDING,
    priority_id: Optional[int] = None,
) -> List[TodoViewModel]:
    spec = QuerySpec(
        sort_key=Priority.name,
        sort_order=sort_order,
        filters=(Todo.priority_id == priority_id,) if priority_id is not None else (),
        lacks_value=Todo.priority_id.is_(None),
        tie_breaks=(Todo.id,),
        joins=(Todo.priority,),
    )
    return _run(db, spec)


def get_todos_sorted_by_status_id(
    db: Session,
    sort_order: SortOrder = SortOrder.ASCENDING,
    status_id: Optional[int] = None,
) -> List[TodoViewModel]:
    spec = QuerySpec(
        sort_key=Todo.status_id,
        sort_order=sort_order,
        filters=(Todo.status_id == status_id,) if status_id is not None else (),
        lacks_value=Todo.status_id.is_(None),
        tie_breaks=(Todo.id,),
    )
    return _run(db, spec)


def get_todos_sorted_by_status_name(
    db: Session,
    sort_order: SortOrder = SortOrder.ASCENDING,
    status_id: Optional[int] = None,
) -> List[TodoViewModel]:
    spec = QuerySpec(
        sort_key=Status.name,
        sort_order=sort_order,
        filters=(Todo.status_id == status_id,) if status_id is not None else (),
        lacks_value=Todo.status_id.is_(None),
        tie_breaks=(Todo.id,),
        joins=(Todo.status,),
    )
    return _run(db, spec)


def get_todos_sorted_by_tags_count(
    db: Session,
    sort_order: SortOrder = SortOrder.DESCENDING,
    tag_id: Optional[int] = None,
) -> List[TodoViewModel]:
    tag_count = _tag_count()
    spec = QuerySpec(
        sort_key=tag_count,
        sort_order=sort_order,
        filters=(Todo.tags.any(Tag.id == tag_id),) if tag_id is not None else (),
        lacks_value=tag_count == 0,
        # names are not unique, id keeps the order total
        tie_breaks=(Todo.name, Todo.id),
    )
    return _run(db, spec)


# ==========================
#  TAG RECONCILIATION
# ==========================
def resolve_tags(db: Session, tag_ids: Optional[Iterable[int]]) -> List[Tag]:
    """Existing tags for ``tag_ids``; unknown ids are dropped, not rejected."""
    requested = set(tag_ids or ())
    if not requested:
        return []

    tags = db.query(Tag).filter(Tag.id.in_(requested)).order_by(Tag.id).all()

    dropped = requested - {tag.id for tag in tags}
    if dropped:
        logger.warning("unknown_tag_ids_dropped", extra={"tag_ids": sorted(dropped)})
    return tags


# ==========================
#  WRITE
# ==========================
def create_todo(db: Session, data: TodoCreate) -> Todo:
    todo = Todo(
        name=data.name,
        description=data.description,
        due_date=data.due_date,
        priority_id=data.priority_id,
        status_id=data.status_id,
        created_at=data.created_at or datetime.utcnow(),
        tags=resolve_tags(db, data.tag_ids),
    )
    db.add(todo)
    db.commit()
    db.refresh(todo)
    logger.info("todo_created", extra={"todo_id": todo.id, "tag_count": len(todo.tags)})
    return todo


def update_todo(db: Session, data: TodoUpdate) -> Optional[Todo]:
    todo = _base_query(db).filter(Todo.id == data.id).first()
    if todo is None:
        logger.info("todo_not_found", extra={"todo_id": data.id})
        return None

    # full replace: every settable field, and the whole tag set
    todo.name = data.name
    todo.description = data.description
    todo.due_date = data.due_date
    todo.priority_id = data.priority_id
    todo.status_id = data.status_id
    todo.updated_at = data.updated_at or datetime.utcnow()

    todo.tags.clear()
    if data.tag_ids is not None:
        todo.tags.extend(resolve_tags(db, data.tag_ids))

    # todo row and tag rows go out in the same commit
    db.commit()
    db.refresh(todo)
    logger.info("todo_updated", extra={"todo_id": todo.id, "tag_count": len(todo.tags)})
    return todo


def delete_todo_by_id(db: Session, todo_id: int) -> bool:
    todo = db.get(Todo, todo_id)
    if todo is None:
        return False

    # the ORM removes the todo_tags rows along with the todo
    db.delete(todo)
    db.commit()
    logger.info("todo_deleted", extra={"todo_id": todo_id})
    return True
