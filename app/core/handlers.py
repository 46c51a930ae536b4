# app/core/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.exceptions import BaseAPIException, BadRequestException
from app.core.logging import logger

# 1. Handle Custom Logic Errors (raised by the datastore and endpoints)
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    return PlainTextResponse(exc.message, status_code=exc.status_code)

# 2. Handle Decode Errors (malformed JSON or wrong JSON types in the body)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    messages = []
    for error in exc.errors():
        # Get field name (e.g., "body.age" -> "age")
        field = ".".join(str(x) for x in error["loc"] if x != "body")
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])

    return await custom_api_exception_handler(
        request, BadRequestException("; ".join(messages))
    )

# 3. Handle Standard HTTP Errors (404 Not Found on an unknown URL, 405...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )

# 4. Handle General System Errors
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return PlainTextResponse(
        "internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
