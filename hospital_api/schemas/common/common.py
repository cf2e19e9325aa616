# hospital_api/schemas/common.py
from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    success: bool = False
    data: None = None
    error: str


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    timestamp: str
    database: str


# OpenAPI documentation for the error envelope shared by every router
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid argument"},
    404: {"model": ErrorResponse, "description": "Not found"},
    500: {"model": ErrorResponse, "description": "Internal error"},
}
