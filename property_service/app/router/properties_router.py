from typing import List
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from uuid import UUID

from shared.core.database import get_property_db as get_db
from shared.core.schemas import Lookup, PaginatedResponse, PaginationParams
from ..schemas.properties_schemas import PropertyCreate, PropertyOut, PropertyUpdate
from ..schemas.tasks_schemas import TaskOut
from ..crud import properties_crud as crud

router = APIRouter(prefix="/properties", tags=["properties"])


@router.get("", response_model=PaginatedResponse[PropertyOut])
def get_properties_endpoint(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    db: Session = Depends(get_db)
):
    return crud.get_properties(db, PaginationParams(page=page, limit=limit))


@router.get("/vacant", response_model=List[PropertyOut])
def get_vacant_properties_endpoint(db: Session = Depends(get_db)):
    return crud.get_vacant_properties(db)


# -------------------- Status Lookup --------------------
@router.get("/status-lookup", response_model=List[Lookup])
def property_status_lookup_endpoint():
    return crud.property_status_lookup()


@router.get("/{property_id}", response_model=PropertyOut)
def get_property_endpoint(property_id: UUID, db: Session = Depends(get_db)):
    return crud.get_property_by_id(db, property_id)


@router.post("", response_model=PropertyOut, status_code=status.HTTP_201_CREATED)
def create_property_endpoint(
    property_data: PropertyCreate,
    db: Session = Depends(get_db)
):
    return crud.create_property(db, property_data)


@router.patch("/{property_id}", response_model=PropertyOut)
def update_property_endpoint(
    property_id: UUID,
    property_update: PropertyUpdate,
    db: Session = Depends(get_db)
):
    return crud.update_property(db, property_id, property_update)


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_property_endpoint(property_id: UUID, db: Session = Depends(get_db)):
    crud.delete_property(db, property_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{property_id}/tasks", response_model=List[TaskOut])
def get_property_tasks_endpoint(property_id: UUID, db: Session = Depends(get_db)):
    return crud.get_property_tasks(db, property_id)
