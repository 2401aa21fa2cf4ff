# app/core/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.exceptions import BaseAPIException
from app.core.logging import logger


def error_envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "message": message,
        },
    )

# 1. Handle custom logic errors (raised by services and endpoints)
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    return error_envelope(exc.status_code, exc.message)

# 2. Handle validation errors (bad JSON or wrong field types from the client)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    fields = []
    for error in exc.errors():
        # Get field name (e.g., "body.age" -> "age")
        field = ".".join(x for x in error["loc"] if isinstance(x, str) and x != "body")
        if field:
            fields.append(field)
    logger.warning(f"Invalid request body on {request.url.path}: {fields or exc.errors()}")

    message = "Invalid request body"
    if fields:
        message = f"Invalid value for: {', '.join(fields)}"
    return error_envelope(status.HTTP_400_BAD_REQUEST, message)

# 3. Handle standard HTTP errors (unknown URL, wrong method, ...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": str(exc.detail),
        },
        headers=getattr(exc, "headers", None),
    )

# 4. Handle general system errors (bugs, unexpected library failures)
async def general_exception_handler(request: Request, exc: Exception):
    # Full traceback goes to the log, never to the client
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return error_envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
