"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error_code: str
    message: str
    details: Any | None = None
