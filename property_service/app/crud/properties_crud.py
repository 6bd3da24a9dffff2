import logging
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import func
from uuid import UUID
from typing import List

from shared.core.exceptions import NotFoundError
from shared.core.schemas import Lookup, PaginationParams, paginated_result
from shared.helpers.update_helper import apply_partial_update

from ..enum.properties_enum import PropertyStatus
from ..models.properties import Property
from ..models.tasks import Task
from ..schemas.properties_schemas import PropertyCreate, PropertyOut, PropertyUpdate

logger = logging.getLogger(__name__)


# ----------------- Get All Properties -----------------
def get_properties(db: Session, params: PaginationParams) -> dict:
    base_query = db.query(Property)
    total = base_query.with_entities(func.count(Property.id)).scalar()

    # NEW ENTRIES SHOW FIRST
    properties = (
        base_query
        .options(selectinload(Property.tasks))
        .order_by(Property.created_at.desc(), Property.id)
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )

    results = [PropertyOut.model_validate(p) for p in properties]
    return paginated_result(results, total, params)


def get_vacant_properties(db: Session) -> List[Property]:
    return (
        db.query(Property)
        .options(selectinload(Property.tasks))
        .filter(Property.status == PropertyStatus.VACANT)
        .order_by(Property.created_at.desc(), Property.id)
        .all()
    )


def get_property_by_id(db: Session, property_id: UUID) -> Property:
    db_property = (
        db.query(Property)
        .options(selectinload(Property.tasks))
        .filter(Property.id == property_id)
        .first()
    )
    if not db_property:
        raise NotFoundError("Property", property_id)
    return db_property


def get_property_tasks(db: Session, property_id: UUID) -> List[Task]:
    return get_property_by_id(db, property_id).tasks


# ----------------- Create Property -----------------
def create_property(db: Session, property_data: PropertyCreate) -> Property:
    db_property = Property(**property_data.model_dump())
    db.add(db_property)
    db.commit()
    db.refresh(db_property)
    logger.info("Created property %s (%s)", db_property.id, db_property.name)
    return db_property


# ----------------- Update Property -----------------
def update_property(db: Session, property_id: UUID, property_update: PropertyUpdate) -> Property:
    db_property = get_property_by_id(db, property_id)

    changed = apply_partial_update(db_property, property_update)
    db.commit()
    db.refresh(db_property)
    logger.info("Updated property %s fields=%s", property_id, changed)
    return db_property


# ----------------- Delete Property -----------------
def delete_property(db: Session, property_id: UUID) -> None:
    db_property = get_property_by_id(db, property_id)

    # tasks go with it through the delete-orphan cascade
    db.delete(db_property)
    db.commit()
    logger.info("Deleted property %s", property_id)


# ----------------- Status Lookup -----------------
def property_status_lookup() -> List[Lookup]:
    return [
        Lookup(id=status.value, name=status.name.replace("_", " ").capitalize())
        for status in PropertyStatus
    ]
