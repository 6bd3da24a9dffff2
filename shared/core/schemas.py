import math
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Generic, List, Optional, TypeVar, Union
from uuid import UUID

# Shared properties
T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def utc_isoformat(value: Optional[datetime]) -> Optional[str]:
    """Timestamps are stored naive in UTC; emit them with an explicit offset."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


class PaginationParams(BaseModel):
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


class PaginatedResponse(CamelModel, Generic[T]):
    data: List[T]
    total: int
    page: int
    limit: int
    total_pages: int


def paginated_result(data: List[Any], total: int, params: PaginationParams) -> dict:
    return {
        "data": data,
        "total": total,
        "page": params.page,
        "limit": params.limit,
        "total_pages": math.ceil(total / params.limit),
    }


class Lookup(BaseModel):
    id: Union[str, UUID]  # accepts both UUID and str
    name: str

    class Config:
        from_attributes = True


class JsonOutResult(BaseModel, Generic[T]):
    data: Optional[T] = None
    status: str
    status_code: str
    message: str
