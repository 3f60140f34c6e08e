"""
Application-wide exception handlers
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from api.services.todos.errors import CREATE_TASK_INVALID, UPDATE_TASK_INVALID
import logging

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Something went wrong on the server!"
INVALID_BODY_MESSAGE = "Request body is invalid"

# Error message per HTTP method, keyed by the error locations it covers.
# A missing POST body counts as a missing task; PATCH bodies are optional.
TASK_ERROR_MESSAGES = {
    "POST": (CREATE_TASK_INVALID, {("body",), ("body", "task")}),
    "PATCH": (UPDATE_TASK_INVALID, {("body", "task")}),
}


def _validation_message(request: Request, exc: RequestValidationError) -> str:
    if request.method not in TASK_ERROR_MESSAGES:
        return INVALID_BODY_MESSAGE
    message, locations = TASK_ERROR_MESSAGES[request.method]
    for error in exc.errors():
        if tuple(error.get("loc", ())) in locations:
            return message
    return INVALID_BODY_MESSAGE


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer malformed request bodies with 400 instead of FastAPI's 422"""
    message = _validation_message(request, exc)
    logger.warning(f"❌ Invalid request to {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"❌ Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": SERVER_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
