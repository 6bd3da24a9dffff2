import logging
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import func
from uuid import UUID
from typing import List

from shared.core.exceptions import NotFoundError, ReferentialIntegrityError
from shared.core.schemas import Lookup, paginated_result
from shared.helpers.update_helper import apply_partial_update

from ..enum.tasks_enum import TaskStatus, TaskType
from ..models.properties import Property
from ..models.tasks import Task
from ..schemas.tasks_schemas import TaskCreate, TaskRequest, TaskUpdate, TaskWithPropertyOut

logger = logging.getLogger(__name__)


# ----------------- Build Filters -----------------
def build_task_filters(params: TaskRequest):
    filters = []

    if params.status:
        filters.append(Task.status == params.status)

    if params.type:
        filters.append(Task.type == params.type)

    if params.property_id:
        filters.append(Task.property_id == params.property_id)

    return filters


# ----------------- Get All Tasks -----------------
def get_tasks(db: Session, params: TaskRequest) -> dict:
    base_query = db.query(Task).filter(*build_task_filters(params))

    # counted over the filtered set, before offset/limit
    total = base_query.with_entities(func.count(Task.id)).scalar()

    # SOONEST DUE FIRST
    tasks = (
        base_query
        .options(joinedload(Task.property))
        .order_by(Task.due_date.asc(), Task.id)
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )

    results = [TaskWithPropertyOut.model_validate(t) for t in tasks]
    return paginated_result(results, total, params)


def get_task_by_id(db: Session, task_id: UUID) -> Task:
    db_task = (
        db.query(Task)
        .options(joinedload(Task.property))
        .filter(Task.id == task_id)
        .first()
    )
    if not db_task:
        raise NotFoundError("Task", task_id)
    return db_task


# ----------------- Create Task -----------------
def create_task(db: Session, task: TaskCreate) -> Task:
    property_exists = db.query(Property.id).filter(
        Property.id == task.property_id).first()
    if not property_exists:
        raise ReferentialIntegrityError("Property", task.property_id)

    db_task = Task(**task.model_dump())
    db.add(db_task)
    db.commit()
    db.refresh(db_task)
    logger.info("Created task %s for property %s", db_task.id, db_task.property_id)
    return db_task


# ----------------- Update Task -----------------
def update_task(db: Session, task_id: UUID, task_update: TaskUpdate) -> Task:
    db_task = get_task_by_id(db, task_id)

    changed = apply_partial_update(db_task, task_update, exclude={"property_id"})
    db.commit()
    db.refresh(db_task)
    logger.info("Updated task %s fields=%s", task_id, changed)
    return db_task


# ----------------- Delete Task -----------------
def delete_task(db: Session, task_id: UUID) -> None:
    db_task = get_task_by_id(db, task_id)
    db.delete(db_task)
    db.commit()
    logger.info("Deleted task %s", task_id)


# ----------------- Lookups -----------------
def task_status_lookup() -> List[Lookup]:
    return [
        Lookup(id=status.value, name=status.name.replace("_", " ").capitalize())
        for status in TaskStatus
    ]


def task_type_lookup() -> List[Lookup]:
    return [
        Lookup(id=task_type.value, name=task_type.name.capitalize())
        for task_type in TaskType
    ]
