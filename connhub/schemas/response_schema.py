"""Response envelope shared by all endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ErrorResponse(BaseModel):
    """Body rendered for AppException and request validation failures."""

    status: int
    message: str
    code: str


class ApiResponse(BaseModel, Generic[T]):
    status: int = 200
    message: str = "Success"
    data: T | None = None


def success_response(data: T, status: int = 200, message: str = "Success") -> dict:
    """Wrap endpoint data in the response envelope."""
    return {"status": status, "message": message, "data": data}


ERROR_RESPONSES: dict[int | str, dict] = {
    404: {"model": ErrorResponse, "description": "Saved connection not found"},
    422: {"model": ErrorResponse, "description": "Connection rejected"},
}
