from datetime import datetime, timezone
from uuid import UUID
from typing import Optional
from pydantic import Field, field_serializer, field_validator

from shared.core.schemas import CamelModel, PaginationParams, utc_isoformat
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

from ..enum.properties_enum import PropertyStatus
from ..enum.tasks_enum import TaskStatus, TaskType


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """due_date is stored without a zone; offsets are folded into UTC first."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


# ----------------- Create -----------------
class TaskCreate(EmptyStringModel):
    property_id: UUID
    description: str = Field(..., min_length=10, max_length=500)
    type: TaskType
    assigned_to: str = Field(..., min_length=2, max_length=100)
    status: TaskStatus = TaskStatus.PENDING
    # ISO-8601 date or date-time string
    due_date: datetime

    normalize_due_date = field_validator("due_date")(to_naive_utc)


# ----------------- Update -----------------
# property_id is immutable once the task exists
class TaskUpdate(EmptyStringModel):
    blank_is_missing = False

    description: Optional[str] = Field(None, min_length=10, max_length=500)
    type: Optional[TaskType] = None
    assigned_to: Optional[str] = Field(None, min_length=2, max_length=100)
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = None

    normalize_due_date = field_validator("due_date")(to_naive_utc)


# ----------------- Out -----------------
class TaskOut(CamelModel):
    id: UUID
    property_id: UUID
    description: str
    type: TaskType
    assigned_to: str
    status: TaskStatus
    due_date: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    serialize_timestamps = field_serializer(
        "due_date", "created_at", "updated_at", when_used="json")(utc_isoformat)


class TaskPropertyOut(CamelModel):
    id: UUID
    name: str
    address: str
    status: PropertyStatus


class TaskWithPropertyOut(TaskOut):
    property: Optional[TaskPropertyOut] = None


# ----------------- Request -----------------
class TaskRequest(PaginationParams):
    status: Optional[TaskStatus] = None
    type: Optional[TaskType] = None
    property_id: Optional[UUID] = None
