# todolist/status/status_router.py

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from todolist.database import get_db
from todolist.status import status_service
from todolist.query.query_spec import SortOrder
from todolist.schemas.status_schema import StatusCreate, StatusRead, StatusUpdate, StatusViewModel

router = APIRouter(
    prefix="/api/statuses",
    tags=["statuses"],
)


# ==========================
#  LIST / SORT
# ==========================
@router.get("", response_model=list[StatusViewModel])
def get_statuses(sort_order: SortOrder = SortOrder.ASCENDING, db: Session = Depends(get_db)):
    return status_service.get_statuses(db, sort_order)


@router.get("/sorted-by-name", response_model=list[StatusViewModel])
def get_statuses_sorted_by_name(
    sort_order: SortOrder = SortOrder.ASCENDING,
    status_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return status_service.get_statuses_sorted_by_name(db, sort_order, status_id)


# ==========================
#  GET BY ID
# ==========================
@router.get("/{status_id}", response_model=list[StatusViewModel])
def get_status_by_id(status_id: int, db: Session = Depends(get_db)):
    statuses = status_service.get_status_by_id(db, status_id)
    if not statuses:
        raise HTTPException(404, "Status not found")
    return statuses


# ==========================
#  CREATE / UPDATE / DELETE
# ==========================
@router.post("", response_model=StatusRead, status_code=201)
def create_status(data: StatusCreate, db: Session = Depends(get_db)):
    return status_service.create_status(db, data)


@router.put("", response_model=StatusRead)
def update_status(data: StatusUpdate, db: Session = Depends(get_db)):
    status = status_service.update_status(db, data)
    if status is None:
        raise HTTPException(404, "Status not found")
    return status


@router.delete("/{status_id}", status_code=204)
def delete_status_by_id(status_id: int, db: Session = Depends(get_db)):
    if not status_service.delete_status_by_id(db, status_id):
        raise HTTPException(status_code=404, detail="Status not found")
    return
