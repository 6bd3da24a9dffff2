import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException

from shared.core.exceptions import AppError, format_field_errors
from shared.core.schemas import JsonOutResult
from shared.utils.app_status_code import AppStatusCode

logger = logging.getLogger(__name__)


def failure_response(http_status: int, status_code: str, message: str, data=None) -> JSONResponse:
    wrapped = JsonOutResult(
        data=data,
        status="Failure",
        status_code=status_code,
        message=message
    ).model_dump()
    return JSONResponse(content=jsonable_encoder(wrapped), status_code=http_status)


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.http_status == 404:
            logger.warning("%s %s: %s", request.method, request.url.path, exc.message)
        return failure_response(exc.http_status, exc.status_code, exc.message, exc.data)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return failure_response(
            exc.status_code,
            str(exc.status_code),
            str(exc.detail)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return failure_response(
            422,
            AppStatusCode.INVALID_INPUT,
            "Validation failed",
            format_field_errors(exc.errors())
        )

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return failure_response(500, AppStatusCode.OPERATION_FAILED, str(exc))
