from typing import Any, Optional

from pydantic import BaseModel


class AvailabilityResponse(BaseModel):
    message: str
    data: Any


class ErrorResponse(BaseModel):
    message: str
    error: Optional[Any] = None
