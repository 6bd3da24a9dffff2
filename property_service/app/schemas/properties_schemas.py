from datetime import datetime
from decimal import Decimal
from uuid import UUID
from typing import List, Optional
from pydantic import Field, field_serializer

from shared.core.schemas import CamelModel, utc_isoformat
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

from ..enum.properties_enum import PropertyStatus
from .tasks_schemas import TaskOut

MAX_MONTHLY_RENT = Decimal("99999999.99")


# ----------------- Base -----------------
class PropertyBase(EmptyStringModel):
    name: str = Field(..., min_length=3, max_length=100)
    address: str = Field(..., min_length=10, max_length=200)
    owner_name: str = Field(..., min_length=2, max_length=100)
    monthly_rent: Decimal = Field(
        ..., gt=0, le=MAX_MONTHLY_RENT, decimal_places=2)
    status: PropertyStatus = PropertyStatus.VACANT


# ----------------- Create -----------------
class PropertyCreate(PropertyBase):
    pass


# ----------------- Update -----------------
class PropertyUpdate(EmptyStringModel):
    blank_is_missing = False

    name: Optional[str] = Field(None, min_length=3, max_length=100)
    address: Optional[str] = Field(None, min_length=10, max_length=200)
    owner_name: Optional[str] = Field(None, min_length=2, max_length=100)
    monthly_rent: Optional[Decimal] = Field(
        None, gt=0, le=MAX_MONTHLY_RENT, decimal_places=2)
    status: Optional[PropertyStatus] = None


# ----------------- Out -----------------
class PropertyOut(CamelModel):
    id: UUID
    name: str
    address: str
    owner_name: str
    monthly_rent: Decimal
    status: PropertyStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    tasks: List[TaskOut] = []

    serialize_timestamps = field_serializer(
        "created_at", "updated_at", when_used="json")(utc_isoformat)
