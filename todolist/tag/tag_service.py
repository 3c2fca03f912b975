# todolist/tag/tag_service.py
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from todolist.models.tag import Tag, todo_tags
from todolist.query import label_crud
from todolist.query.query_spec import SortOrder
from todolist.schemas.tag_schema import TagCreate, TagUpdate, TagViewModel

logger = logging.getLogger("todolist.tag")


def get_tag_by_id(db: Session, tag_id: int) -> List[TagViewModel]:
    return label_crud.get_label_by_id(db, Tag, tag_id, TagViewModel)


def get_tags(db: Session, sort_order: SortOrder = SortOrder.ASCENDING) -> List[TagViewModel]:
    return label_crud.get_labels(db, Tag, sort_order, TagViewModel)


def get_tags_sorted_by_name(
    db: Session,
    sort_order: SortOrder = SortOrder.ASCENDING,
    tag_id: Optional[int] = None,
) -> List[TagViewModel]:
    return label_crud.get_labels_sorted_by_name(db, Tag, sort_order, tag_id, TagViewModel)


def create_tag(db: Session, data: TagCreate) -> Tag:
    tag = label_crud.create_label(db, Tag, data)
    logger.info("tag_created", extra={"tag_id": tag.id})
    return tag


def update_tag(db: Session, data: TagUpdate) -> Optional[Tag]:
    tag = label_crud.update_label(db, Tag, data)
    if tag is None:
        logger.info("tag_not_found", extra={"tag_id": data.id})
    return tag


def delete_tag_by_id(db: Session, tag_id: int) -> bool:
    tag = db.get(Tag, tag_id)
    if tag is None:
        return False

    # drop the associations first, the todos themselves stay
    result = db.execute(todo_tags.delete().where(todo_tags.c.tag_id == tag_id))

    db.delete(tag)
    db.commit()
    logger.info("tag_deleted", extra={"tag_id": tag_id, "todos_untagged": result.rowcount})
    return True
