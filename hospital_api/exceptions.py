from typing import Any

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class APIException(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)


class InvalidArgument(APIException):
    """Malformed or missing input, failed format/uniqueness/reference check."""

    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class Conflict(InvalidArgument):
    """A unique constraint rejected a write that passed the pre-checks."""


class NotFound(APIException):
    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)


class Internal(APIException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=500, detail=detail)


def create_error_response(error_message: str) -> dict:
    """Create a standardized error response"""
    return {
        "success": False,
        "data": None,
        "error": error_message
    }


def create_success_response(data: Any) -> dict:
    """Create a standardized success response"""
    return {
        "success": True,
        "data": data,
        "error": None
    }


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Custom exception handler for HTTPException"""
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(str(exc.detail))
    )


def _describe_validation_error(error: dict) -> str:
    location = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = ".".join(location)
    message = error.get("msg", "invalid value")
    return f"{field}: {message}" if field else message


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report body/type coercion failures as 400 in the common envelope instead of 422"""
    details = "; ".join(_describe_validation_error(e) for e in exc.errors())
    return JSONResponse(
        status_code=400,
        content=create_error_response(f"Invalid request: {details}" if details else "Invalid request")
    )
