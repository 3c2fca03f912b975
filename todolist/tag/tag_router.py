# todolist/tag/tag_router.py

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from todolist.database import get_db
from todolist.tag import tag_service
from todolist.query.query_spec import SortOrder
from todolist.schemas.tag_schema import TagCreate, TagRead, TagUpdate, TagViewModel

router = APIRouter(
    prefix="/api/tags",
    tags=["tags"],
)


# ==========================
#  LIST / SORT
# ==========================
@router.get("", response_model=list[TagViewModel])
def get_tags(sort_order: SortOrder = SortOrder.ASCENDING, db: Session = Depends(get_db)):
    return tag_service.get_tags(db, sort_order)


@router.get("/sorted-by-name", response_model=list[TagViewModel])
def get_tags_sorted_by_name(
    sort_order: SortOrder = SortOrder.ASCENDING,
    tag_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return tag_service.get_tags_sorted_by_name(db, sort_order, tag_id)


# ==========================
#  GET BY ID
# ==========================
@router.get("/{tag_id}", response_model=list[TagViewModel])
def get_tag_by_id(tag_id: int, db: Session = Depends(get_db)):
    tags = tag_service.get_tag_by_id(db, tag_id)
    if not tags:
        raise HTTPException(404, "Tag not found")
    return tags


# ==========================
#  CREATE / UPDATE / DELETE
# ==========================
@router.post("", response_model=TagRead, status_code=201)
def create_tag(data: TagCreate, db: Session = Depends(get_db)):
    return tag_service.create_tag(db, data)


@router.put("", response_model=TagRead)
def update_tag(data: TagUpdate, db: Session = Depends(get_db)):
    tag = tag_service.update_tag(db, data)
    if tag is None:
        raise HTTPException(404, "Tag not found")
    return tag


@router.delete("/{tag_id}", status_code=204)
def delete_tag_by_id(tag_id: int, db: Session = Depends(get_db)):
    if not tag_service.delete_tag_by_id(db, tag_id):
        raise HTTPException(status_code=404, detail="Tag not found")
    return
