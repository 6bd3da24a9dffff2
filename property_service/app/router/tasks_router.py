from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from uuid import UUID

from shared.core.database import get_property_db as get_db
from shared.core.schemas import Lookup, PaginatedResponse
from ..enum.tasks_enum import TaskStatus, TaskType
from ..schemas.tasks_schemas import (
    TaskCreate,
    TaskOut,
    TaskRequest,
    TaskUpdate,
    TaskWithPropertyOut
)
from ..crud import tasks_crud as crud

router = APIRouter(prefix="/tasks", tags=["tasks"])


# -------------------- CRUD Endpoints --------------------
@router.get("", response_model=PaginatedResponse[TaskWithPropertyOut])
def get_tasks_endpoint(
    task_status: Optional[TaskStatus] = Query(None, alias="status"),
    task_type: Optional[TaskType] = Query(None, alias="type"),
    property_id: Optional[UUID] = Query(None, alias="propertyId"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    db: Session = Depends(get_db)
):
    params = TaskRequest(
        status=task_status,
        type=task_type,
        property_id=property_id,
        page=page,
        limit=limit
    )
    return crud.get_tasks(db, params)


# -------------------- Lookups --------------------
@router.get("/status-lookup", response_model=List[Lookup])
def task_status_lookup_endpoint():
    return crud.task_status_lookup()


@router.get("/type-lookup", response_model=List[Lookup])
def task_type_lookup_endpoint():
    return crud.task_type_lookup()


@router.get("/{task_id}", response_model=TaskWithPropertyOut)
def get_task_endpoint(task_id: UUID, db: Session = Depends(get_db)):
    return crud.get_task_by_id(db, task_id)


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task_endpoint(task: TaskCreate, db: Session = Depends(get_db)):
    return crud.create_task(db, task)


@router.patch("/{task_id}", response_model=TaskOut)
def update_task_endpoint(
    task_id: UUID,
    task_update: TaskUpdate,
    db: Session = Depends(get_db)
):
    return crud.update_task(db, task_id, task_update)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task_endpoint(task_id: UUID, db: Session = Depends(get_db)):
    crud.delete_task(db, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
