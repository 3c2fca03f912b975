# todolist/priority/priority_router.py

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from todolist.database import get_db
from todolist.priority import priority_service
from todolist.query.query_spec import SortOrder
from todolist.schemas.priority_schema import PriorityCreate, PriorityRead, PriorityUpdate, PriorityViewModel

router = APIRouter(
    prefix="/api/priorities",
    tags=["priorities"],
)


# ==========================
#  LIST / SORT
# ==========================
@router.get("", response_model=list[PriorityViewModel])
def get_priorities(sort_order: SortOrder = SortOrder.ASCENDING, db: Session = Depends(get_db)):
    return priority_service.get_priorities(db, sort_order)


@router.get("/sorted-by-name", response_model=list[PriorityViewModel])
def get_priorities_sorted_by_name(
    sort_order: SortOrder = SortOrder.ASCENDING,
    priority_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return priority_service.get_priorities_sorted_by_name(db, sort_order, priority_id)


# ==========================
#  GET BY ID
# ==========================
@router.get("/{priority_id}", response_model=list[PriorityViewModel])
def get_priority_by_id(priority_id: int, db: Session = Depends(get_db)):
    priorities = priority_service.get_priority_by_id(db, priority_id)
    if not priorities:
        raise HTTPException(404, "Priority not found")
    return priorities


# ==========================
#  CREATE / UPDATE / DELETE
# ==========================
@router.post("", response_model=PriorityRead, status_code=201)
def create_priority(data: PriorityCreate, db: Session = Depends(get_db)):
    return priority_service.create_priority(db, data)


@router.put("", response_model=PriorityRead)
def update_priority(data: PriorityUpdate, db: Session = Depends(get_db)):
    priority = priority_service.update_priority(db, data)
    if priority is None:
        raise HTTPException(404, "Priority not found")
    return priority


@router.delete("/{priority_id}", status_code=204)
def delete_priority_by_id(priority_id: int, db: Session = Depends(get_db)):
    if not priority_service.delete_priority_by_id(db, priority_id):
        raise HTTPException(status_code=404, detail="Priority not found")
    return
