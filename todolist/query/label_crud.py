# todolist/query/label_crud.py
"""Queries shared by Priority, Status and Tag.

The three resources have the same columns (id, name, color, timestamps) and
the same list/sort contract, so their services delegate here with the model
class and keep only their own delete rules.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from todolist.query.query_spec import QuerySpec, SortOrder, apply_spec
from todolist.schemas.label_schema import LabelCreate, LabelUpdate, LabelViewModel


def _project(rows, view_model) -> List[LabelViewModel]:
    return [view_model.model_validate(row) for row in rows]


def get_label_by_id(db: Session, model, label_id: int, view_model) -> List[LabelViewModel]:
    rows = db.query(model).filter(model.id == label_id).all()
    return _project(rows, view_model)


def get_labels(db: Session, model, sort_order: SortOrder, view_model) -> List[LabelViewModel]:
    spec = QuerySpec(sort_key=model.id, sort_order=sort_order)
    return _project(apply_spec(db.query(model), spec).all(), view_model)


def get_labels_sorted_by_name(
    db: Session,
    model,
    sort_order: SortOrder,
    label_id: Optional[int],
    view_model,
) -> List[LabelViewModel]:
    filters = (model.id == label_id,) if label_id is not None else ()
    spec = QuerySpec(
        sort_key=model.name,
        sort_order=sort_order,
        filters=filters,
        tie_breaks=(model.id,),
    )
    return _project(apply_spec(db.query(model), spec).all(), view_model)


def create_label(db: Session, model, data: LabelCreate):
    label = model(
        name=data.name,
        color=data.color,
        created_at=data.created_at or datetime.utcnow(),
    )
    db.add(label)
    db.commit()
    db.refresh(label)
    return label


def update_label(db: Session, model, data: LabelUpdate):
    label = db.get(model, data.id)
    if label is None:
        return None

    # full replace, not a merge
    label.name = data.name
    label.color = data.color
    label.updated_at = data.updated_at or datetime.utcnow()

    db.commit()
    db.refresh(label)
    return label
