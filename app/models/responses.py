# models/responses.py
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

from .assignment import Assignment

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    success: bool
    message: str
    data: Optional[T] = None


class AssignmentEnvelope(Envelope[Assignment]):
    pass


class AssignmentListEnvelope(Envelope[List[Assignment]]):
    count: int
    total: int
