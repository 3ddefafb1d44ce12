# errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_405_METHOD_NOT_ALLOWED,
)

from logging_config import get_logger

logger = get_logger(__name__)


class TaskAPIError(Exception):
    """An error rendered to the client as {"error": message}."""

    status_code = HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidTaskError(TaskAPIError):
    status_code = HTTP_400_BAD_REQUEST


class TaskNotFoundError(TaskAPIError):
    status_code = HTTP_404_NOT_FOUND


async def task_api_error_handler(request: Request, exc: TaskAPIError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unmatched paths and unsupported methods both answer as a plain 404.
    if exc.status_code in (HTTP_404_NOT_FOUND, HTTP_405_METHOD_NOT_ALLOWED):
        return PlainTextResponse("Not Found", status_code=HTTP_404_NOT_FOUND)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content={"error": "Invalid request body."})


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(TaskAPIError, task_api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
