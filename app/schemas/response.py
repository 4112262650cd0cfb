from pydantic import BaseModel
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class ResponseEnvelope(BaseModel, Generic[T]):
    """Shape of every successful response: ``{success, data, message}``."""
    success: bool = True
    data: Optional[T] = None
    message: str


class ErrorEnvelope(BaseModel):
    success: bool = False
    message: str
    data: Optional[Any] = None
