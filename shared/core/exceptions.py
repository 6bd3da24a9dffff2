from typing import Any, Dict, List, Optional, Type, TypeVar

from fastapi import status
from pydantic import BaseModel, ValidationError as PydanticValidationError

from shared.utils.app_status_code import AppStatusCode

ModelT = TypeVar("ModelT", bound=BaseModel)


class AppError(Exception):
    """Base class for errors surfaced to the caller as a JSON failure envelope."""

    http_status: int = status.HTTP_400_BAD_REQUEST
    status_code: str = AppStatusCode.OPERATION_FAILED

    def __init__(self, message: str, data: Any = None):
        super().__init__(message)
        self.message = message
        self.data = data


class ValidationError(AppError):
    http_status = status.HTTP_422_UNPROCESSABLE_ENTITY
    status_code = AppStatusCode.INVALID_INPUT

    def __init__(self, errors: List[Dict[str, str]], message: str = "Validation failed"):
        super().__init__(message, data=errors)
        self.errors = errors


class NotFoundError(AppError):
    http_status = status.HTTP_404_NOT_FOUND
    status_code = AppStatusCode.RECORD_NOT_FOUND

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} with ID {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ReferentialIntegrityError(NotFoundError):
    """A new record points at a parent row that does not exist."""

    status_code = AppStatusCode.REFERENCED_RECORD_NOT_FOUND


def format_field_errors(errors) -> List[Dict[str, str]]:
    """Flatten pydantic error dicts into [{field, message}] pairs."""
    formatted = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        formatted.append({
            "field": ".".join(loc),
            "message": err.get("msg", "Invalid value"),
        })
    return formatted


def validate_payload(schema: Type[ModelT], payload: Optional[Dict[str, Any]]) -> ModelT:
    """Validate a raw dict outside a request, raising ValidationError on failure."""
    try:
        return schema.model_validate(payload or {})
    except PydanticValidationError as exc:
        raise ValidationError(format_field_errors(exc.errors())) from exc
