"""JSON response envelope shared by the /api endpoints.

Success: {"success": true, "data": ...}
Failure: {"success": false, "error": "...", "code": "INVALID_INPUT" | "NOT_FOUND" | "INTERNAL_ERROR"}
"""

from enum import Enum
from typing import Any, Generic, Literal, TypeVar

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

T = TypeVar("T")


class ErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class SuccessEnvelope(BaseModel, Generic[T]):
    success: Literal[True] = True
    data: T


class ErrorEnvelope(BaseModel):
    success: Literal[False] = False
    error: str
    code: ErrorCode


def success_response(data: Any, status_code: int = 200) -> JSONResponse:
    """Wrap data as-is in a success envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"success": True, "data": jsonable_encoder(data)},
    )


def error_response(status_code: int, message: str, code: ErrorCode) -> JSONResponse:
    envelope = ErrorEnvelope(error=message, code=code)
    return JSONResponse(status_code=status_code, content=envelope.model_dump(mode="json"))


def describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as INVALID_INPUT envelopes instead of 422s."""
    return error_response(400, describe_validation_error(exc), ErrorCode.INVALID_INPUT)
